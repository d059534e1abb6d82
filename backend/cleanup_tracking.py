"""
Report reflection tracking rows per date and remove rows dated in the future.

Rows dated after the service's today can only come from a database clock that
ran ahead of the application clock. They would block the toggle for that day.
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from sqlalchemy import text
from reflection_app.core.utils import local_today
from reflection_app.db.session import SessionLocal
from reflection_app.repositories.tracking_repository import TrackingRepository


def cleanup(dry_run: bool = False) -> int:
    """Delete tracking rows dated after today; returns the number removed."""
    db = SessionLocal()
    try:
        repo = TrackingRepository(db)
        print("Tracking rows per date (most recent first):")
        for reflected_date, count in repo.counts_by_date(limit=10):
            print(f"  {reflected_date}: {count}")

        today = local_today()
        db_today = db.execute(text("SELECT CURRENT_DATE")).scalar()
        print(f"Service date: {today}  Database date: {db_today}")

        if dry_run:
            print("Dry run, nothing deleted")
            return 0

        deleted = repo.delete_after(today)
        db.commit()
        print(f"Deleted {deleted} tracking rows dated after {today}")
        return deleted
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    cleanup(dry_run="--dry-run" in sys.argv[1:])
