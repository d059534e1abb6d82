"""
Tests for the visibility migration and the tracking cleanup script.
"""
from datetime import date
from sqlalchemy import create_engine, text
import cleanup_tracking
from reflection_app.db.migrations.add_visibility_to_reflections import migrate
from reflection_app.repositories.tracking_repository import TrackingRepository


def test_visibility_migration_backfills_from_is_private():
    """Test adding the column to a legacy table and rerunning it."""
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE reflections (id INTEGER PRIMARY KEY, reflection_text VARCHAR(500), is_private BOOLEAN)"
        ))
        conn.execute(text(
            "INSERT INTO reflections (id, reflection_text, is_private) VALUES (1, 'mine', 1), (2, 'shared', 0)"
        ))

    assert migrate(engine) is True
    with engine.connect() as conn:
        rows = conn.execute(text("SELECT id, visibility FROM reflections ORDER BY id")).all()
    assert [tuple(row) for row in rows] == [(1, "private"), (2, "public")]

    assert migrate(engine) is False


def test_visibility_migration_rerun_keeps_existing_visibility():
    """Test that rerunning never rewrites visibility chosen after the column existed."""
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE reflections (id INTEGER PRIMARY KEY, reflection_text VARCHAR(500), "
            "is_private BOOLEAN, visibility VARCHAR(20) NOT NULL DEFAULT 'private')"
        ))
        conn.execute(text(
            "INSERT INTO reflections (id, reflection_text, is_private, visibility) "
            "VALUES (1, 'hidden', 0, 'private'), (2, 'shared', 1, 'public')"
        ))

    assert migrate(engine) is False
    with engine.connect() as conn:
        rows = conn.execute(text("SELECT id, visibility FROM reflections ORDER BY id")).all()
    assert [tuple(row) for row in rows] == [(1, "private"), (2, "public")]


def test_cleanup_removes_future_tracking(db, make_user, make_reflection, monkeypatch):
    """Test that rows dated after the service's today are deleted."""
    monkeypatch.setattr(cleanup_tracking, "local_today", lambda: date(2024, 5, 10))
    user = make_user("alice")
    reflection = make_reflection(user)
    repo = TrackingRepository(db)
    for day in (date(2024, 5, 9), date(2024, 5, 10), date(2024, 5, 11)):
        repo.insert(reflection.id, user.id, day)
    db.commit()

    assert cleanup_tracking.cleanup(dry_run=True) == 0
    assert cleanup_tracking.cleanup() == 1

    remaining = sorted(day for day, _ in repo.counts_by_date())
    assert remaining == [date(2024, 5, 9), date(2024, 5, 10)]
