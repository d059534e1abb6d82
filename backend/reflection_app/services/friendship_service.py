"""
Friendship service: the request/accept/reject state machine.

A friendship is one directed row (requester -> recipient). Once accepted it
means the same thing from both sides, so every "are these two friends" check
looks at both orderings. Pending requests are direction-sensitive: only the
recipient can accept or reject them.
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from reflection_app.core.exceptions import ConflictError, NotFoundError, ValidationError
from reflection_app.core.utils import require_positive_id
from reflection_app.models.friendship import Friendship, FriendshipStatus
from reflection_app.models.user import User
from reflection_app.repositories.friendship_repository import FriendshipRepository
from reflection_app.repositories.user_repository import UserRepository
from reflection_app.schemas.friendship import FriendListResponse, FriendshipResponse, PendingRequestsResponse

logger = logging.getLogger(__name__)


def _to_response(friendship: Friendship, other: User) -> FriendshipResponse:
    return FriendshipResponse(
        id=friendship.id,
        user_id=friendship.user_id,
        friend_id=friendship.friend_id,
        status=friendship.status,
        created_at=friendship.created_at,
        updated_at=friendship.updated_at,
        friend_username=other.username,
        friend_name=other.full_name,
    )


def _check_pair(user_id: int, friend_id: int) -> None:
    require_positive_id(user_id, "user ID")
    require_positive_id(friend_id, "friend ID")


def send_friend_request(user_id: int, friend_id: int, db: Session) -> FriendshipResponse:
    """Create a pending request from user_id to friend_id."""
    _check_pair(user_id, friend_id)
    if user_id == friend_id:
        raise ValidationError("cannot send friend request to yourself")

    users = UserRepository(db)
    if not users.get_by_id(user_id):
        raise NotFoundError("User not found")
    friend = users.get_by_id(friend_id)
    if not friend:
        raise NotFoundError("Friend not found")

    repo = FriendshipRepository(db)
    # Rejected rows count too; only an explicit removal clears the pair
    if repo.find_between(user_id, friend_id) is not None:
        raise ConflictError("friendship already exists or request already sent")

    try:
        friendship = repo.create_request(user_id, friend_id)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Duplicate friend request {user_id} -> {friend_id} caught by unique constraint")
        raise ConflictError("friendship already exists or request already sent")

    db.refresh(friendship)
    logger.info(f"Friend request sent: {user_id} -> {friend_id}")
    return _to_response(friendship, friend)


def _answer_request(user_id: int, requester_id: int, status: FriendshipStatus, db: Session) -> None:
    _check_pair(user_id, requester_id)
    changed = FriendshipRepository(db).set_pending_status(requester_id, user_id, status)
    if changed == 0:
        raise NotFoundError("friend request not found")
    db.commit()
    logger.info(f"Friend request {requester_id} -> {user_id} {status.value}")


def accept_friend_request(user_id: int, requester_id: int, db: Session) -> None:
    """Accept a pending request that requester_id sent to user_id."""
    _answer_request(user_id, requester_id, FriendshipStatus.ACCEPTED, db)


def reject_friend_request(user_id: int, requester_id: int, db: Session) -> None:
    """Reject a pending request that requester_id sent to user_id."""
    _answer_request(user_id, requester_id, FriendshipStatus.REJECTED, db)


def remove_friend(user_id: int, friend_id: int, db: Session) -> None:
    """Delete whatever row links the pair, in either direction and any status."""
    _check_pair(user_id, friend_id)
    deleted = FriendshipRepository(db).delete_between(user_id, friend_id)
    if deleted == 0:
        raise NotFoundError("friendship not found")
    db.commit()
    logger.info(f"Friendship between {user_id} and {friend_id} removed")


def are_friends(user_id: int, friend_id: int, db: Session) -> bool:
    _check_pair(user_id, friend_id)
    return FriendshipRepository(db).are_friends(user_id, friend_id)


def get_friends_list(user_id: int, db: Session) -> FriendListResponse:
    """Accepted friends of user_id, whichever side sent the request."""
    require_positive_id(user_id, "user ID")
    rows = FriendshipRepository(db).get_accepted(user_id)
    friends = [_to_response(friendship, other) for friendship, other in rows]
    return FriendListResponse(friends=friends, count=len(friends))


def get_pending_requests(user_id: int, db: Session) -> PendingRequestsResponse:
    """Pending requests where user_id is the recipient."""
    require_positive_id(user_id, "user ID")
    rows = FriendshipRepository(db).get_pending_for_recipient(user_id)
    requests = [_to_response(friendship, requester) for friendship, requester in rows]
    return PendingRequestsResponse(requests=requests, count=len(requests))
