"""
Tests for the friends feed and friend reflection views.
"""
from datetime import timedelta
import pytest
from reflection_app.core.config import settings
from reflection_app.core.exceptions import NotFoundError, NotFriendsError
from reflection_app.core.utils import utc_now
from reflection_app.models.reflection import Reflection, ReflectionVisibility
from reflection_app.schemas.reflection import ReflectionUpdate
from reflection_app.services import reflection_service


def _age(db, reflection_id, days):
    """Move a reflection's created_at into the past."""
    reflection = db.query(Reflection).filter(Reflection.id == reflection_id).one()
    reflection.created_at = utc_now() - timedelta(days=days)
    db.commit()


def test_feed_shows_friends_public_reflections(db, make_user, make_reflection, befriend):
    """Test the accepted-friend, public-only rule."""
    alice = make_user("alice", "Alice", "Anders")
    bob = make_user("bob")
    make_reflection(alice, text="public thought")
    make_reflection(alice, text="private thought", visibility=ReflectionVisibility.PRIVATE)

    assert reflection_service.get_friends_feed(bob.id, db) == []

    befriend(alice, bob)
    feed = reflection_service.get_friends_feed(bob.id, db)
    assert [r.reflection_text for r in feed] == ["public thought"]
    assert feed[0].author_username == "alice"
    assert feed[0].author_name == "Alice Anders"
    assert feed[0].category.name == "Work"

    # Friendship is symmetric for the feed
    assert reflection_service.get_friends_feed(alice.id, db) == []
    make_reflection(bob, text="from bob")
    assert [r.reflection_text for r in reflection_service.get_friends_feed(alice.id, db)] == ["from bob"]


def test_pending_friend_is_not_in_feed(db, make_user, make_reflection):
    from reflection_app.services import friendship_service

    alice = make_user("alice")
    bob = make_user("bob")
    friendship_service.send_friend_request(alice.id, bob.id, db)
    make_reflection(alice)

    assert reflection_service.get_friends_feed(bob.id, db) == []


def test_feed_window(db, make_user, make_reflection, befriend):
    """Test that the aggregated feed only reaches back FEED_WINDOW_DAYS."""
    alice = make_user("alice")
    bob = make_user("bob")
    befriend(alice, bob)
    old = make_reflection(alice, text="old")
    make_reflection(alice, text="recent")
    _age(db, old.id, settings.FEED_WINDOW_DAYS + 1)

    feed = reflection_service.get_friends_feed(bob.id, db)
    assert [r.reflection_text for r in feed] == ["recent"]

    # Friend-specific views keep the full history
    history = reflection_service.get_friend_reflections(bob.id, alice.id, db)
    assert [r.reflection_text for r in history] == ["recent", "old"]


def test_feed_pagination(db, make_user, make_reflection, befriend):
    """Test ordering and the limit/offset normalisation."""
    alice = make_user("alice")
    bob = make_user("bob")
    befriend(alice, bob)
    created = [make_reflection(alice, text=f"r{i}") for i in range(12)]
    for age, reflection in enumerate(reversed(created)):
        _age(db, reflection.id, age)

    feed = reflection_service.get_friends_feed(bob.id, db, limit=0, offset=-5)
    assert len(feed) == settings.FEED_DEFAULT_LIMIT
    assert feed[0].reflection_text == "r11"

    page = reflection_service.get_friends_feed(bob.id, db, limit=5, offset=10)
    assert [r.reflection_text for r in page] == ["r1", "r0"]


def test_friend_reflections_require_friendship(db, make_user, make_reflection):
    alice = make_user("alice")
    bob = make_user("bob")
    make_reflection(alice)

    with pytest.raises(NotFriendsError):
        reflection_service.get_friend_reflections(bob.id, alice.id, db)
    with pytest.raises(NotFriendsError):
        reflection_service.get_friend_reflections_by_username(bob.id, "alice", db)
    with pytest.raises(NotFoundError):
        reflection_service.get_friend_reflections_by_username(bob.id, "nobody", db)


def test_friend_reflections_hide_private(db, make_user, make_reflection, befriend):
    alice = make_user("alice")
    bob = make_user("bob")
    befriend(bob, alice)
    make_reflection(alice, text="shared")
    make_reflection(alice, text="secret", visibility=ReflectionVisibility.PRIVATE)

    by_id = reflection_service.get_friend_reflections(bob.id, alice.id, db)
    by_name = reflection_service.get_friend_reflections_by_username(bob.id, "alice", db)
    assert [r.reflection_text for r in by_id] == ["shared"]
    assert [r.id for r in by_name] == [r.id for r in by_id]


def test_reflection_made_private_leaves_feed(db, make_user, make_reflection, befriend):
    """Test that switching a reflection to private hides it from friends."""
    alice = make_user("alice")
    bob = make_user("bob")
    befriend(alice, bob)
    reflection = make_reflection(alice, text="shared for now")
    assert [r.id for r in reflection_service.get_friends_feed(bob.id, db)] == [reflection.id]

    reflection_service.update_reflection(
        reflection.id,
        ReflectionUpdate(
            category_id=reflection.category_id,
            reflection_text="shared for now",
            visibility=ReflectionVisibility.PRIVATE,
        ),
        db,
    )
    assert reflection_service.get_friends_feed(bob.id, db) == []
    assert reflection_service.get_friend_reflections(bob.id, alice.id, db) == []


def test_feed_endpoints(client, make_user, make_reflection, befriend):
    """Test the feed HTTP surface and its error mapping."""
    alice = make_user("alice")
    bob = make_user("bob")
    carol = make_user("carol")
    befriend(alice, bob)
    make_reflection(alice, text="hello")

    response = client.get("/api/feed/friends", params={"user_id": bob.id, "limit": 5})
    assert response.status_code == 200
    assert [r["reflection_text"] for r in response.json()] == ["hello"]

    response = client.get(f"/api/feed/friend/{alice.id}", params={"user_id": bob.id})
    assert response.status_code == 200
    assert response.json()[0]["author_username"] == "alice"

    response = client.get(f"/api/feed/friend/{alice.id}", params={"user_id": carol.id})
    assert response.status_code == 403

    response = client.get("/api/feed/friend-by-username", params={"user_id": bob.id, "friend_username": "alice"})
    assert response.status_code == 200
    response = client.get("/api/feed/friend-by-username", params={"user_id": bob.id})
    assert response.status_code == 400

    assert client.get("/api/feed/friends").status_code == 400
