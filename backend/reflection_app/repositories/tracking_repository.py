"""
Data access for reflection tracking markers.
"""
from datetime import date
from typing import Dict, List, Optional, Set, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from reflection_app.models.tracking import ReflectionTracking


class TrackingRepository:
    """Queries against the reflection_tracking table."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, reflection_id: int, user_id: int, reflected_date: date) -> Optional[ReflectionTracking]:
        return self.db.query(ReflectionTracking).filter(
            ReflectionTracking.reflection_id == reflection_id,
            ReflectionTracking.user_id == user_id,
            ReflectionTracking.reflected_date == reflected_date,
        ).first()

    def insert(self, reflection_id: int, user_id: int, reflected_date: date) -> ReflectionTracking:
        entry = ReflectionTracking(
            reflection_id=reflection_id,
            user_id=user_id,
            reflected_date=reflected_date,
        )
        self.db.add(entry)
        self.db.flush()
        return entry

    def delete(self, reflection_id: int, user_id: int, reflected_date: date) -> int:
        deleted = self.db.query(ReflectionTracking).filter(
            ReflectionTracking.reflection_id == reflection_id,
            ReflectionTracking.user_id == user_id,
            ReflectionTracking.reflected_date == reflected_date,
        ).delete()
        self.db.flush()
        return deleted

    def count_for_reflection(self, reflection_id: int, user_id: int) -> int:
        return self.db.query(func.count(ReflectionTracking.id)).filter(
            ReflectionTracking.reflection_id == reflection_id,
            ReflectionTracking.user_id == user_id,
        ).scalar() or 0

    def counts_by_reflection(self, user_id: int) -> Dict[int, int]:
        """reflection_id -> number of tracked days for this user."""
        rows = self.db.query(
            ReflectionTracking.reflection_id, func.count(ReflectionTracking.id)
        ).filter(
            ReflectionTracking.user_id == user_id
        ).group_by(ReflectionTracking.reflection_id).all()
        return {reflection_id: count for reflection_id, count in rows}

    def reflection_ids_tracked_on(self, user_id: int, reflected_date: date) -> Set[int]:
        rows = self.db.query(ReflectionTracking.reflection_id).filter(
            ReflectionTracking.user_id == user_id,
            ReflectionTracking.reflected_date == reflected_date,
        ).all()
        return {row[0] for row in rows}

    def daily_activity(self, user_id: int, start_date: date, end_date: date) -> List[Tuple[date, int, int]]:
        """(reflected_date, row count, distinct reflections) per day in [start_date, end_date]."""
        return self.db.query(
            ReflectionTracking.reflected_date,
            func.count(ReflectionTracking.id),
            func.count(func.distinct(ReflectionTracking.reflection_id)),
        ).filter(
            ReflectionTracking.user_id == user_id,
            ReflectionTracking.reflected_date >= start_date,
            ReflectionTracking.reflected_date <= end_date,
        ).group_by(
            ReflectionTracking.reflected_date
        ).order_by(ReflectionTracking.reflected_date.asc()).all()

    def counts_by_date(self, limit: int = 10) -> List[Tuple[date, int]]:
        """Row counts for the most recent tracked dates across all users."""
        return self.db.query(
            ReflectionTracking.reflected_date, func.count(ReflectionTracking.id)
        ).group_by(
            ReflectionTracking.reflected_date
        ).order_by(ReflectionTracking.reflected_date.desc()).limit(limit).all()

    def delete_after(self, reflected_date: date) -> int:
        """Delete markers dated later than reflected_date."""
        deleted = self.db.query(ReflectionTracking).filter(
            ReflectionTracking.reflected_date > reflected_date
        ).delete()
        self.db.flush()
        return deleted
