"""
Tests for reflection endpoints and the reflection service.
"""
from datetime import date
import pytest
from reflection_app.core.exceptions import NotFoundError, ValidationError
from reflection_app.models.reflection import ReflectionVisibility
from reflection_app.schemas.reflection import ReflectionCreate
from reflection_app.services import reflection_service


def _payload(user, category, **overrides):
    payload = {
        "author_id": user.id,
        "category_id": category.id,
        "reflection_text": "Shipped the release",
        "reflection_detail": "Went better than expected",
        "tags": ["work", "release"],
    }
    payload.update(overrides)
    return payload


def test_create_reflection_defaults(client, make_user, make_category, monkeypatch):
    """Test that date and visibility get their defaults."""
    monkeypatch.setattr(reflection_service, "local_today", lambda: date(2024, 3, 1))
    user = make_user("alice")
    category = make_category(user)

    response = client.post("/api/reflections", json=_payload(user, category))
    assert response.status_code == 201
    body = response.json()
    assert body["date"] == "2024-03-01"
    assert body["visibility"] == "public"
    assert body["is_private"] is False
    assert body["tags"] == ["work", "release"]
    assert body["category"]["name"] == "Work"
    assert body["reflection_count"] == 0


def test_is_private_defaults_visibility(client, make_user, make_category):
    """Test that is_private only seeds visibility and is stored as sent."""
    user = make_user("alice")
    category = make_category(user)

    body = client.post("/api/reflections", json=_payload(user, category, is_private=True)).json()
    assert body["visibility"] == "private"
    assert body["is_private"] is True

    body = client.post(
        "/api/reflections", json=_payload(user, category, is_private=True, visibility="public")
    ).json()
    assert body["visibility"] == "public"
    assert body["is_private"] is True


def test_create_requires_text_and_category(client, make_user, make_category):
    """Test required fields."""
    user = make_user("alice")
    category = make_category(user)

    response = client.post("/api/reflections", json=_payload(user, category, reflection_text="  "))
    assert response.status_code == 400

    response = client.post("/api/reflections", json=_payload(user, category, category_id=0))
    assert response.status_code == 400


def test_cannot_use_someone_elses_category(db, make_user, make_category):
    """Test that a reflection's category must belong to its author."""
    alice = make_user("alice")
    bob = make_user("bob")
    bobs_category = make_category(bob)

    with pytest.raises(ValidationError):
        reflection_service.create_reflection(
            ReflectionCreate(author_id=alice.id, category_id=bobs_category.id, reflection_text="hi"),
            db,
        )


def test_subcategory_must_match_category(client, make_user, make_category):
    user = make_user("alice")
    work = make_category(user, "Work")
    health = make_category(user, "Health")
    sub_id = client.post(f"/api/categories/{health.id}/subcategories", json={"name": "Sleep"}).json()["id"]

    response = client.post("/api/reflections", json=_payload(user, work, sub_category_id=sub_id))
    assert response.status_code == 400

    response = client.post("/api/reflections", json=_payload(user, health, sub_category_id=sub_id))
    assert response.status_code == 201
    assert response.json()["sub_category"]["name"] == "Sleep"


def test_list_reflections_ordering_and_filter(client, make_user, make_category):
    """Test listing is newest date first and filterable by category."""
    user = make_user("alice")
    work = make_category(user, "Work")
    health = make_category(user, "Health")
    client.post("/api/reflections", json=_payload(user, work, date="2024-01-01", reflection_text="old"))
    client.post("/api/reflections", json=_payload(user, work, date="2024-02-01", reflection_text="new"))
    client.post("/api/reflections", json=_payload(user, health, date="2024-01-15", reflection_text="run"))

    response = client.get("/api/reflections", params={"user_id": user.id})
    assert [r["reflection_text"] for r in response.json()] == ["new", "run", "old"]

    response = client.get("/api/reflections", params={"user_id": user.id, "category_id": health.id})
    assert [r["reflection_text"] for r in response.json()] == ["run"]

    response = client.get(f"/api/reflections/user/{user.id}")
    assert len(response.json()) == 3


def test_update_reflection(client, make_user, make_category, make_reflection):
    """Test updating text and visibility."""
    user = make_user("alice")
    category = make_category(user)
    reflection = make_reflection(user, category=category)

    response = client.put(
        f"/api/reflections/{reflection.id}",
        json={"category_id": category.id, "reflection_text": "Rewritten", "visibility": "private"}
    )
    assert response.status_code == 200
    assert response.json()["reflection_text"] == "Rewritten"
    assert response.json()["visibility"] == "private"
    assert response.json()["is_private"] is False


def test_get_and_delete_missing_reflection(client):
    assert client.get("/api/reflections/123").status_code == 404
    assert client.delete("/api/reflections/123").status_code == 404


def test_delete_reflection_cascades(client, db, make_user, make_reflection):
    """Test that actions, tracking and reactions go with the reflection."""
    author = make_user("alice")
    reader = make_user("bob")
    reflection = make_reflection(author)
    client.post("/api/actions", json={"reflection_id": reflection.id, "action": "Follow up"})
    client.post(f"/api/reflections/{reflection.id}/reflect")
    client.post(
        "/api/reactions",
        params={"user_id": reader.id, "reflection_id": reflection.id},
        json={"reaction_type": "update_me"}
    )

    assert client.delete(f"/api/reflections/{reflection.id}").status_code == 200
    with pytest.raises(NotFoundError):
        reflection_service.get_reflection(reflection.id, db)
    assert client.get("/api/reactions", params={"reflection_id": reflection.id}).json() == []
    assert client.get(f"/api/reflections/{reflection.id}/actions").json() == []
