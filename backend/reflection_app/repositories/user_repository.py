"""
Data access for users.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from reflection_app.models.user import User


class UserRepository:
    """Queries against the users table."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user: User) -> User:
        self.db.add(user)
        self.db.flush()
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def update(self, user: User) -> User:
        self.db.flush()
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.flush()

    def search_by_username(self, query: str, limit: int = 10) -> List[User]:
        """Case-insensitive substring match on username."""
        return self.db.query(User).filter(
            User.username.ilike(f"%{query}%")
        ).order_by(User.username.asc()).limit(limit).all()
