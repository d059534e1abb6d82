"""
Pydantic schemas for Friendship entity.
"""
from pydantic import BaseModel
from typing import List
from datetime import datetime
from reflection_app.models.friendship import FriendshipStatus


class FriendshipRequest(BaseModel):
    """Body of request/accept/reject calls."""
    friend_id: int


class FriendshipResponse(BaseModel):
    """Friendship row plus display data for the other party."""
    id: int
    user_id: int
    friend_id: int
    status: FriendshipStatus
    created_at: datetime
    updated_at: datetime
    friend_username: str = ""
    friend_name: str = ""


class FriendListResponse(BaseModel):
    """Accepted friends of a user."""
    friends: List[FriendshipResponse] = []
    count: int


class PendingRequestsResponse(BaseModel):
    """Pending requests addressed to a user."""
    requests: List[FriendshipResponse] = []
    count: int
