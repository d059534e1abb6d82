"""
User management routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from reflection_app.db.session import get_db
from reflection_app.schemas.user import UserCreate, UserResponse, UserUpdate
from reflection_app.core.utils import format_message
from reflection_app.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create a user."""
    return user_service.create_user(user_data, db)


# Static paths must come before /{user_id}
@router.get("/search", response_model=List[UserResponse])
async def search_users(q: str = Query(""), db: Session = Depends(get_db)):
    """Search users by username substring."""
    return user_service.search_users(q, db)


@router.get("/username/{username}", response_model=UserResponse)
async def get_user_by_username(username: str, db: Session = Depends(get_db)):
    """Get user by username."""
    return user_service.get_user_by_username(username, db)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get user by ID."""
    return user_service.get_user(user_id, db)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, user_data: UserUpdate, db: Session = Depends(get_db)):
    """Update a user's profile."""
    return user_service.update_user(user_id, user_data, db)


@router.delete("/{user_id}")
async def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Delete a user and all of their data."""
    user_service.delete_user(user_id, db)
    return format_message("User deleted successfully")
