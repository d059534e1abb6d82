"""
Friendship model: a directed request row, symmetric in meaning once accepted.
"""
from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
from reflection_app.db.base import BaseModel
import enum


class FriendshipStatus(str, enum.Enum):
    """Friend request status enumeration."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Friendship(BaseModel):
    """Directed edge from requester (user_id) to recipient (friend_id)."""
    __tablename__ = "friendships"
    __table_args__ = (UniqueConstraint("user_id", "friend_id", name="uq_friendships_pair"),)
    
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    friend_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(
        SQLEnum(
            FriendshipStatus,
            name="friendships_status_check",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
        default=FriendshipStatus.PENDING,
    )
    
    # Relationships
    user = relationship("User", foreign_keys=[user_id], back_populates="sent_friendships")
    friend = relationship("User", foreign_keys=[friend_id], back_populates="received_friendships")
