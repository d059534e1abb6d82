"""
Friendship routes: requests, answers, removal and listings.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from reflection_app.db.session import get_db
from reflection_app.schemas.friendship import (
    FriendListResponse, FriendshipRequest, FriendshipResponse, PendingRequestsResponse
)
from reflection_app.api.dependencies import get_acting_user_id
from reflection_app.core.utils import format_message
from reflection_app.services import friendship_service

router = APIRouter(prefix="/friends", tags=["friends"])


@router.post("/request", response_model=FriendshipResponse, status_code=status.HTTP_201_CREATED)
async def send_friend_request(
    request: FriendshipRequest,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Send a friend request to request.friend_id."""
    return friendship_service.send_friend_request(user_id, request.friend_id, db)


@router.post("/accept")
async def accept_friend_request(
    request: FriendshipRequest,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Accept the pending request request.friend_id sent to this user."""
    friendship_service.accept_friend_request(user_id, request.friend_id, db)
    return format_message("Friend request accepted")


@router.post("/reject")
async def reject_friend_request(
    request: FriendshipRequest,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Reject the pending request request.friend_id sent to this user."""
    friendship_service.reject_friend_request(user_id, request.friend_id, db)
    return format_message("Friend request rejected")


@router.get("", response_model=FriendListResponse)
async def list_friends(
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """List accepted friends."""
    return friendship_service.get_friends_list(user_id, db)


@router.get("/pending", response_model=PendingRequestsResponse)
async def list_pending_requests(
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """List pending requests addressed to this user."""
    return friendship_service.get_pending_requests(user_id, db)


@router.get("/check")
async def check_friendship(
    friend_id: int = Query(...),
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Whether the two users are accepted friends."""
    return {"are_friends": friendship_service.are_friends(user_id, friend_id, db)}


@router.delete("")
async def remove_friend(
    friend_id: int = Query(...),
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Remove the friendship (or request) between the two users."""
    friendship_service.remove_friend(user_id, friend_id, db)
    return format_message("Friend removed")
