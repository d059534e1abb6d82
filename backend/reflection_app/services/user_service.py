"""
User service for profile management and search.
"""
import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from reflection_app.core.exceptions import ConflictError, NotFoundError, ValidationError
from reflection_app.core.security import get_password_hash
from reflection_app.core.utils import require_positive_id
from reflection_app.models.user import User
from reflection_app.repositories.user_repository import UserRepository
from reflection_app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def create_user(user_data: UserCreate, db: Session) -> User:
    """Create a user (admin-style creation, same rules as registration)."""
    if not user_data.username:
        raise ValidationError("username is required")
    if not user_data.email:
        raise ValidationError("email is required")
    
    user = User(
        username=user_data.username,
        email=user_data.email,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        password_hash=get_password_hash(user_data.password),
    )
    try:
        UserRepository(db).create(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("username or email already exists")
    db.refresh(user)
    return user


def get_user(user_id: int, db: Session) -> User:
    require_positive_id(user_id, "user ID")
    user = UserRepository(db).get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def get_user_by_username(username: str, db: Session) -> User:
    if not username:
        raise ValidationError("username is required")
    user = UserRepository(db).get_by_username(username)
    if not user:
        raise NotFoundError("User not found")
    return user


def update_user(user_id: int, user_data: UserUpdate, db: Session) -> User:
    """Update profile fields; username and email stay unique."""
    require_positive_id(user_id, "user ID")
    if not user_data.username:
        raise ValidationError("username is required")
    if not user_data.email:
        raise ValidationError("email is required")
    
    repo = UserRepository(db)
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    
    user.username = user_data.username
    user.email = user_data.email
    user.first_name = user_data.first_name
    user.last_name = user_data.last_name
    try:
        repo.update(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("username or email already exists")
    db.refresh(user)
    return user


def delete_user(user_id: int, db: Session) -> None:
    """Delete a user and everything they own."""
    require_positive_id(user_id, "user ID")
    repo = UserRepository(db)
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    repo.delete(user)
    db.commit()
    logger.info(f"Deleted user {user_id}")


def search_users(query: str, db: Session) -> List[User]:
    """Case-insensitive username search, at most 10 results."""
    if not query or not query.strip():
        raise ValidationError("search query is required")
    users = UserRepository(db).search_by_username(query.strip())
    logger.debug(f"User search '{query}' returned {len(users)} users")
    return users
