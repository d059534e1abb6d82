"""
Data access for reflections, including the friend-scoped feed queries.
"""
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple
from sqlalchemy import select, case, or_, func
from sqlalchemy.orm import Session, joinedload
from reflection_app.models.category import Category
from reflection_app.models.friendship import Friendship, FriendshipStatus
from reflection_app.models.reflection import Reflection, ReflectionVisibility


class ReflectionRepository:
    """Queries against the reflections table."""

    def __init__(self, db: Session):
        self.db = db

    def _with_labels(self):
        return self.db.query(Reflection).options(
            joinedload(Reflection.category),
            joinedload(Reflection.sub_category),
        )

    def create(self, reflection: Reflection) -> Reflection:
        self.db.add(reflection)
        self.db.flush()
        return reflection

    def get_by_id(self, reflection_id: int) -> Optional[Reflection]:
        return self._with_labels().filter(Reflection.id == reflection_id).first()

    def get_author_id(self, reflection_id: int) -> Optional[int]:
        return self.db.query(Reflection.author_id).filter(
            Reflection.id == reflection_id
        ).scalar()

    def get_by_author(self, author_id: int, category_id: Optional[int] = None) -> List[Reflection]:
        query = self._with_labels().options(joinedload(Reflection.actions)).filter(
            Reflection.author_id == author_id
        )
        if category_id is not None:
            query = query.filter(Reflection.category_id == category_id)
        return query.order_by(Reflection.date.desc(), Reflection.created_at.desc()).all()

    def update(self, reflection: Reflection) -> Reflection:
        self.db.flush()
        return reflection

    def delete(self, reflection: Reflection) -> None:
        self.db.delete(reflection)
        self.db.flush()

    @staticmethod
    def accepted_friend_ids(user_id: int):
        """
        Subquery of user IDs holding an accepted friendship with user_id.

        The stored row may point either way, so the other party is picked
        from whichever column does not hold user_id.
        """
        return select(
            case(
                (Friendship.user_id == user_id, Friendship.friend_id),
                else_=Friendship.user_id,
            )
        ).where(
            or_(Friendship.user_id == user_id, Friendship.friend_id == user_id),
            Friendship.status == FriendshipStatus.ACCEPTED,
        )

    def get_friends_feed(self, user_id: int, since: datetime, limit: int, offset: int) -> List[Reflection]:
        """Public reflections by accepted friends created at or after `since`, newest first."""
        return self._with_labels().options(joinedload(Reflection.author)).filter(
            Reflection.visibility == ReflectionVisibility.PUBLIC,
            Reflection.author_id.in_(self.accepted_friend_ids(user_id)),
            Reflection.created_at >= since,
        ).order_by(
            Reflection.created_at.desc(), Reflection.id.desc()
        ).limit(limit).offset(offset).all()

    def get_public_by_author(
        self,
        author_id: int,
        limit: int,
        offset: int,
        since: Optional[datetime] = None,
    ) -> List[Reflection]:
        """Public reflections of one author, newest first."""
        query = self._with_labels().options(joinedload(Reflection.author)).filter(
            Reflection.author_id == author_id,
            Reflection.visibility == ReflectionVisibility.PUBLIC,
        )
        if since is not None:
            query = query.filter(Reflection.created_at >= since)
        return query.order_by(
            Reflection.created_at.desc(), Reflection.id.desc()
        ).limit(limit).offset(offset).all()

    def count_by_day_and_category(
        self, author_id: int, start_date: date, end_date: date
    ) -> List[Tuple[object, str, int]]:
        """(day, category name, count) of reflections created within [start_date, end_date]."""
        day = func.date(Reflection.created_at)
        return self.db.query(
            day.label("date"),
            Category.name.label("category"),
            func.count(Reflection.id).label("reflection_count"),
        ).join(
            Category, Reflection.category_id == Category.id
        ).filter(
            Reflection.author_id == author_id,
            Reflection.created_at >= datetime.combine(start_date, datetime.min.time()),
            Reflection.created_at < datetime.combine(end_date + timedelta(days=1), datetime.min.time()),
        ).group_by(day, Category.name).order_by(day, Category.name).all()
