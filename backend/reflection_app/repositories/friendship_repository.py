"""
Data access for friendships.
"""
from typing import List, Optional, Tuple
from sqlalchemy import and_, or_, exists
from sqlalchemy.orm import Session
from reflection_app.models.friendship import Friendship, FriendshipStatus
from reflection_app.models.user import User


def _between(user_a: int, user_b: int):
    return or_(
        and_(Friendship.user_id == user_a, Friendship.friend_id == user_b),
        and_(Friendship.user_id == user_b, Friendship.friend_id == user_a),
    )


class FriendshipRepository:
    """Queries against the friendships table."""

    def __init__(self, db: Session):
        self.db = db

    def find_between(self, user_a: int, user_b: int) -> Optional[Friendship]:
        """Any row linking the two users, whichever direction or status."""
        return self.db.query(Friendship).filter(_between(user_a, user_b)).first()

    def create_request(self, user_id: int, friend_id: int) -> Friendship:
        friendship = Friendship(user_id=user_id, friend_id=friend_id, status=FriendshipStatus.PENDING)
        self.db.add(friendship)
        self.db.flush()
        return friendship

    def set_pending_status(self, requester_id: int, recipient_id: int, status: FriendshipStatus) -> int:
        """Move a pending requester->recipient row to `status`; returns rows affected."""
        friendship = self.db.query(Friendship).filter(
            Friendship.user_id == requester_id,
            Friendship.friend_id == recipient_id,
            Friendship.status == FriendshipStatus.PENDING,
        ).first()
        if friendship is None:
            return 0
        friendship.status = status
        self.db.flush()
        return 1

    def delete_between(self, user_a: int, user_b: int) -> int:
        deleted = self.db.query(Friendship).filter(
            _between(user_a, user_b)
        ).delete()
        self.db.flush()
        return deleted

    def are_friends(self, user_a: int, user_b: int) -> bool:
        return self.db.query(
            exists().where(_between(user_a, user_b), Friendship.status == FriendshipStatus.ACCEPTED)
        ).scalar()

    def get_accepted(self, user_id: int) -> List[Tuple[Friendship, User]]:
        """Accepted rows touching user_id, each paired with the other party."""
        outgoing = self.db.query(Friendship, User).join(
            User, Friendship.friend_id == User.id
        ).filter(
            Friendship.user_id == user_id,
            Friendship.status == FriendshipStatus.ACCEPTED,
        ).all()
        incoming = self.db.query(Friendship, User).join(
            User, Friendship.user_id == User.id
        ).filter(
            Friendship.friend_id == user_id,
            Friendship.status == FriendshipStatus.ACCEPTED,
        ).all()
        rows = outgoing + incoming
        rows.sort(key=lambda row: (row[0].created_at, row[0].id), reverse=True)
        return rows

    def get_pending_for_recipient(self, user_id: int) -> List[Tuple[Friendship, User]]:
        """Pending rows addressed to user_id, each paired with the requester."""
        return self.db.query(Friendship, User).join(
            User, Friendship.user_id == User.id
        ).filter(
            Friendship.friend_id == user_id,
            Friendship.status == FriendshipStatus.PENDING,
        ).order_by(Friendship.created_at.desc(), Friendship.id.desc()).all()
