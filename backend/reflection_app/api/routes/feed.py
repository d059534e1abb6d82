"""
Social feed routes: friends' public reflections.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from reflection_app.db.session import get_db
from reflection_app.schemas.reflection import FeedReflectionResponse
from reflection_app.api.dependencies import get_acting_user_id
from reflection_app.services import reflection_service

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("/friends", response_model=List[FeedReflectionResponse])
async def get_friends_feed(
    limit: int = 10,
    offset: int = 0,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Recent public reflections from friends (latest first, infinite scroll)."""
    return reflection_service.get_friends_feed(user_id, db, limit=limit, offset=offset)


@router.get("/friend/{friend_id}", response_model=List[FeedReflectionResponse])
async def get_friend_reflections(
    friend_id: int,
    limit: int = 10,
    offset: int = 0,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Public reflections of one friend."""
    return reflection_service.get_friend_reflections(user_id, friend_id, db, limit=limit, offset=offset)


@router.get("/friend-by-username", response_model=List[FeedReflectionResponse])
async def get_friend_reflections_by_username(
    friend_username: str = Query(""),
    limit: int = 10,
    offset: int = 0,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Public reflections of one friend, looked up by username."""
    return reflection_service.get_friend_reflections_by_username(
        user_id, friend_username, db, limit=limit, offset=offset
    )
