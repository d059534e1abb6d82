"""
User model for authentication and social features.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from reflection_app.db.base import BaseModel
from reflection_app.core.utils import full_name


class User(BaseModel):
    """User model; username and email are unique."""
    __tablename__ = "users"
    
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=False, index=True)
    first_name = Column(String(50), nullable=False, default="")
    last_name = Column(String(50), nullable=False, default="")
    password_hash = Column(String(255), nullable=False)
    
    # Relationships
    categories = relationship("Category", back_populates="user", cascade="all, delete-orphan")
    reflections = relationship("Reflection", back_populates="author", cascade="all, delete-orphan")
    tracking_entries = relationship("ReflectionTracking", back_populates="user", cascade="all, delete-orphan")
    reactions = relationship("ReflectionReaction", back_populates="user", cascade="all, delete-orphan")
    sent_friendships = relationship(
        "Friendship", foreign_keys="Friendship.user_id", back_populates="user", cascade="all, delete-orphan"
    )
    received_friendships = relationship(
        "Friendship", foreign_keys="Friendship.friend_id", back_populates="friend", cascade="all, delete-orphan"
    )

    @property
    def full_name(self) -> str:
        return full_name(self.first_name, self.last_name)
