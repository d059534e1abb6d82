"""
Tests for the daily reflection tracking toggle and its analytics.
"""
from datetime import date
import pytest
from reflection_app.core.exceptions import ConflictError, ForbiddenError, InvalidRangeError, NotFoundError
from reflection_app.core.security import create_access_token
from reflection_app.repositories.tracking_repository import TrackingRepository
from reflection_app.services import reflection_service


@pytest.fixture
def today(monkeypatch):
    """Pin the service clock; returns a setter for moving it."""
    current = {"value": date(2024, 5, 10)}
    monkeypatch.setattr(reflection_service, "local_today", lambda: current["value"])

    def _set(value):
        current["value"] = value
    return _set


def test_toggle_on_and_off(db, today, make_user, make_reflection):
    """Test that tracking twice on one day returns to untracked."""
    user = make_user("alice")
    reflection = make_reflection(user)

    first = reflection_service.track_reflection(reflection.id, db)
    assert first.tracked is True
    assert first.user_id == user.id
    assert first.reflected_date == date(2024, 5, 10)
    assert first.reflection_count == 1
    assert reflection_service.get_reflection(reflection.id, db).reflected_today is True

    second = reflection_service.track_reflection(reflection.id, db)
    assert second.tracked is False
    assert second.reflection_count == 0
    assert reflection_service.get_reflection(reflection.id, db).reflected_today is False


def test_count_spans_days(db, today, make_user, make_reflection):
    """Test that each day contributes one marker."""
    user = make_user("alice")
    reflection = make_reflection(user)

    reflection_service.track_reflection(reflection.id, db)
    today(date(2024, 5, 11))
    result = reflection_service.track_reflection(reflection.id, db)
    assert result.reflection_count == 2

    listed = reflection_service.get_user_reflections(user.id, db)
    assert listed[0].reflection_count == 2
    assert listed[0].reflected_today is True

    # Untracking today leaves yesterday's marker alone
    result = reflection_service.track_reflection(reflection.id, db)
    assert result.tracked is False
    assert result.reflection_count == 1


def test_only_author_can_track(db, today, make_user, make_reflection):
    alice = make_user("alice")
    bob = make_user("bob")
    reflection = make_reflection(alice)

    with pytest.raises(ForbiddenError):
        reflection_service.track_reflection(reflection.id, db, acting_user_id=bob.id)

    result = reflection_service.track_reflection(reflection.id, db, acting_user_id=alice.id)
    assert result.tracked is True


def test_track_missing_reflection(db, today):
    with pytest.raises(NotFoundError):
        reflection_service.track_reflection(999, db)


def test_reflect_endpoint(client, today, make_user, make_reflection):
    """Test the HTTP toggle and its error mapping."""
    alice = make_user("alice")
    bob = make_user("bob")
    reflection = make_reflection(alice)

    response = client.post(f"/api/reflections/{reflection.id}/reflect")
    assert response.status_code == 200
    assert response.json()["tracked"] is True
    assert response.json()["reflected_date"] == "2024-05-10"

    response = client.post(f"/api/reflections/{reflection.id}/reflect", params={"user_id": bob.id})
    assert response.status_code == 403

    assert client.post("/api/reflections/999/reflect").status_code == 404


def test_reflect_endpoint_uses_bearer_token(client, today, make_user, make_reflection):
    """Test that a token-only caller is held to the author rule."""
    alice = make_user("alice")
    bob = make_user("bob")
    reflection = make_reflection(alice)
    url = f"/api/reflections/{reflection.id}/reflect"

    bob_token = create_access_token(data={"sub": bob.username, "user_id": bob.id})
    response = client.post(url, headers={"Authorization": f"Bearer {bob_token}"})
    assert response.status_code == 403

    alice_token = create_access_token(data={"sub": alice.username, "user_id": alice.id})
    response = client.post(url, headers={"Authorization": f"Bearer {alice_token}"})
    assert response.status_code == 200
    assert response.json()["tracked"] is True

    response = client.post(url, headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_concurrent_insert_is_a_conflict(db, today, make_user, make_reflection, monkeypatch):
    """Test that losing the insert race on the unique key surfaces as a conflict."""
    user = make_user("alice")
    reflection = make_reflection(user)
    reflection_service.track_reflection(reflection.id, db)

    # Another request inserted today's marker between the lookup and the insert
    with monkeypatch.context() as patch:
        patch.setattr(TrackingRepository, "get", lambda self, *args: None)
        with pytest.raises(ConflictError):
            reflection_service.track_reflection(reflection.id, db)

    assert reflection_service.get_reflection(reflection.id, db).reflection_count == 1


def test_tracking_analytics(db, today, make_user, make_reflection):
    """Test per-day totals and distinct reflection counts."""
    user = make_user("alice")
    first = make_reflection(user, text="one")
    second = make_reflection(user, text="two")

    reflection_service.track_reflection(first.id, db)
    reflection_service.track_reflection(second.id, db)
    today(date(2024, 5, 12))
    reflection_service.track_reflection(first.id, db)
    today(date(2024, 6, 1))
    reflection_service.track_reflection(first.id, db)

    entries = reflection_service.get_reflection_tracking_analytics(
        user.id, date(2024, 5, 1), date(2024, 5, 31), db
    )
    assert [(e.date, e.reflection_count, e.unique_reflections) for e in entries] == [
        (date(2024, 5, 10), 2, 2),
        (date(2024, 5, 12), 1, 1),
    ]


def test_analytics_rejects_inverted_range(db, make_user):
    user = make_user("alice")
    with pytest.raises(InvalidRangeError):
        reflection_service.get_reflection_tracking_analytics(user.id, date(2024, 2, 1), date(2024, 1, 1), db)


def test_analytics_endpoint_validates_dates(client, make_user):
    """Test missing, malformed and inverted date parameters."""
    user = make_user("alice")
    url = "/api/analytics/reflection-tracking"

    assert client.get(url, params={"user_id": user.id}).status_code == 400
    response = client.get(url, params={"user_id": user.id, "start_date": "2024-13-01", "end_date": "2024-12-31"})
    assert response.status_code == 400
    response = client.get(url, params={"user_id": user.id, "start_date": "2024-02-01", "end_date": "2024-01-01"})
    assert response.status_code == 400
    response = client.get(url, params={"user_id": user.id, "start_date": "2024-01-01", "end_date": "2024-01-31"})
    assert response.status_code == 200
    assert response.json() == []


def test_tracking_by_category(client, make_user, make_category, make_reflection):
    """Test reflections counted per day and category."""
    user = make_user("alice")
    work = make_category(user, "Work")
    health = make_category(user, "Health")
    make_reflection(user, category=work)
    make_reflection(user, category=work)
    make_reflection(user, category=health)

    created_on = reflection_service.utc_now().date().isoformat()
    response = client.get(
        "/api/analytics/reflection-tracking-by-category",
        params={"user_id": user.id, "start_date": created_on, "end_date": created_on}
    )
    assert response.status_code == 200
    assert [(e["category"], e["reflection_count"]) for e in response.json()] == [("Health", 1), ("Work", 2)]
    assert all(e["date"] == created_on for e in response.json())
