"""
Reflection service: journal entries, daily tracking and the friends feed.

Tracking is a toggle keyed on (reflection, author, today). "Today" comes from
the service clock so that the application and database time zones can never
disagree about which day a marker belongs to.

The feed only ever shows public reflections, and only to accepted friends.
"""
import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from reflection_app.core.config import settings
from reflection_app.core.exceptions import (
    ConflictError, ForbiddenError, InvalidRangeError, NotFoundError, NotFriendsError, ValidationError
)
from reflection_app.core.utils import local_today, require_positive_id, utc_now
from reflection_app.models.reflection import Reflection, ReflectionVisibility
from reflection_app.repositories.category_repository import CategoryRepository
from reflection_app.repositories.friendship_repository import FriendshipRepository
from reflection_app.repositories.reflection_repository import ReflectionRepository
from reflection_app.repositories.tracking_repository import TrackingRepository
from reflection_app.repositories.user_repository import UserRepository
from reflection_app.schemas.reflection import (
    CategoryTrackingEntry, FeedReflectionResponse, ReflectionBase, ReflectionCreate, ReflectionResponse,
    TrackingAnalyticsEntry, TrackingToggleResult
)

logger = logging.getLogger(__name__)


def _validate_body(reflection_data: ReflectionBase) -> None:
    if not reflection_data.reflection_text or not reflection_data.reflection_text.strip():
        raise ValidationError("reflection text is required")
    if reflection_data.category_id is None or reflection_data.category_id <= 0:
        raise ValidationError("category is required")


def _resolve_visibility(reflection_data: ReflectionBase) -> ReflectionVisibility:
    """Visibility wins when given; otherwise it defaults from the legacy is_private flag."""
    if reflection_data.visibility is not None:
        visibility = reflection_data.visibility
    elif reflection_data.is_private:
        visibility = ReflectionVisibility.PRIVATE
    else:
        visibility = ReflectionVisibility.PUBLIC
    return visibility


def _check_category(reflection_data: ReflectionBase, author_id: int, db: Session) -> None:
    repo = CategoryRepository(db)
    category = repo.get_category(reflection_data.category_id)
    if not category or category.user_id != author_id:
        raise ValidationError("category not found")
    if reflection_data.sub_category_id is not None:
        sub_category = repo.get_sub_category(reflection_data.sub_category_id)
        if not sub_category or sub_category.category_id != category.id:
            raise ValidationError("subcategory does not belong to category")


def _to_response(reflection: Reflection, reflection_count: int = 0, reflected_today: bool = False) -> ReflectionResponse:
    response = ReflectionResponse.model_validate(reflection)
    return response.model_copy(update={
        "reflection_count": reflection_count,
        "reflected_today": reflected_today,
    })


def _to_feed_item(reflection: Reflection) -> FeedReflectionResponse:
    response = FeedReflectionResponse.model_validate(reflection)
    return response.model_copy(update={
        "author_username": reflection.author.username,
        "author_name": reflection.author.full_name,
    })


def _normalize_page(limit: Optional[int], offset: Optional[int]) -> Tuple[int, int]:
    if limit is None or limit <= 0:
        limit = settings.FEED_DEFAULT_LIMIT
    if offset is None or offset < 0:
        offset = 0
    return limit, offset


def _with_tracking(reflection: Reflection, db: Session) -> ReflectionResponse:
    tracking = TrackingRepository(db)
    count = tracking.count_for_reflection(reflection.id, reflection.author_id)
    today = tracking.get(reflection.id, reflection.author_id, local_today()) is not None
    return _to_response(reflection, count, today)


# Reflection CRUD

def create_reflection(reflection_data: ReflectionCreate, db: Session) -> ReflectionResponse:
    """Create a reflection for its author."""
    _validate_body(reflection_data)
    require_positive_id(reflection_data.author_id, "author ID")
    if not UserRepository(db).get_by_id(reflection_data.author_id):
        raise NotFoundError("User not found")
    _check_category(reflection_data, reflection_data.author_id, db)

    visibility = _resolve_visibility(reflection_data)
    reflection = Reflection(
        author_id=reflection_data.author_id,
        category_id=reflection_data.category_id,
        sub_category_id=reflection_data.sub_category_id,
        date=reflection_data.date or local_today(),
        reflection_text=reflection_data.reflection_text,
        reflection_detail=reflection_data.reflection_detail,
        tags=list(reflection_data.tags),
        is_private=reflection_data.is_private,
        visibility=visibility,
    )
    ReflectionRepository(db).create(reflection)
    db.commit()
    db.refresh(reflection)
    logger.info(f"Created reflection {reflection.id} for user {reflection.author_id} ({visibility.value})")
    return _to_response(reflection)


def get_user_reflections(user_id: int, db: Session, category_id: Optional[int] = None) -> List[ReflectionResponse]:
    """An author's reflections, newest date first, with tracking data."""
    require_positive_id(user_id, "user ID")
    if category_id is not None:
        require_positive_id(category_id, "category ID")

    reflections = ReflectionRepository(db).get_by_author(user_id, category_id)
    tracking = TrackingRepository(db)
    counts = tracking.counts_by_reflection(user_id)
    tracked_today = tracking.reflection_ids_tracked_on(user_id, local_today())
    return [
        _to_response(r, counts.get(r.id, 0), r.id in tracked_today)
        for r in reflections
    ]


def get_reflections_by_category(user_id: int, category_id: int, db: Session) -> List[ReflectionResponse]:
    require_positive_id(category_id, "category ID")
    return get_user_reflections(user_id, db, category_id=category_id)


def get_reflection(reflection_id: int, db: Session) -> ReflectionResponse:
    require_positive_id(reflection_id, "reflection ID")
    reflection = ReflectionRepository(db).get_by_id(reflection_id)
    if not reflection:
        raise NotFoundError("Reflection not found")
    return _with_tracking(reflection, db)


def update_reflection(reflection_id: int, reflection_data: ReflectionBase, db: Session) -> ReflectionResponse:
    """Replace a reflection's editable fields."""
    require_positive_id(reflection_id, "reflection ID")
    _validate_body(reflection_data)

    repo = ReflectionRepository(db)
    reflection = repo.get_by_id(reflection_id)
    if not reflection:
        raise NotFoundError("Reflection not found")
    _check_category(reflection_data, reflection.author_id, db)

    visibility = _resolve_visibility(reflection_data)
    reflection.category_id = reflection_data.category_id
    reflection.sub_category_id = reflection_data.sub_category_id
    if reflection_data.date is not None:
        reflection.date = reflection_data.date
    reflection.reflection_text = reflection_data.reflection_text
    reflection.reflection_detail = reflection_data.reflection_detail
    reflection.tags = list(reflection_data.tags)
    reflection.is_private = reflection_data.is_private
    reflection.visibility = visibility
    repo.update(reflection)
    db.commit()
    db.refresh(reflection)
    return _with_tracking(reflection, db)


def delete_reflection(reflection_id: int, db: Session) -> None:
    """Delete a reflection with its actions, tracking markers and reactions."""
    require_positive_id(reflection_id, "reflection ID")
    repo = ReflectionRepository(db)
    reflection = repo.get_by_id(reflection_id)
    if not reflection:
        raise NotFoundError("Reflection not found")
    repo.delete(reflection)
    db.commit()
    logger.info(f"Deleted reflection {reflection_id}")


# Tracking

def track_reflection(reflection_id: int, db: Session, acting_user_id: Optional[int] = None) -> TrackingToggleResult:
    """
    Toggle today's tracking marker for a reflection.

    The marker always belongs to the reflection's author. A caller who names
    themselves and is not the author is refused rather than silently tracked
    against someone else's reflection.
    """
    require_positive_id(reflection_id, "reflection ID")
    author_id = ReflectionRepository(db).get_author_id(reflection_id)
    if author_id is None:
        raise NotFoundError("Reflection not found")
    if acting_user_id is not None and acting_user_id != author_id:
        raise ForbiddenError("only the author can track a reflection")

    today = local_today()
    tracking = TrackingRepository(db)
    if tracking.get(reflection_id, author_id, today) is None:
        try:
            tracking.insert(reflection_id, author_id, today)
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(f"Concurrent tracking insert for reflection {reflection_id} on {today}")
            raise ConflictError("reflection already tracked today")
        tracked = True
    else:
        tracking.delete(reflection_id, author_id, today)
        db.commit()
        tracked = False

    count = tracking.count_for_reflection(reflection_id, author_id)
    logger.info(
        f"Tracking for reflection {reflection_id} (user {author_id}) on {today} "
        f"toggled {'on' if tracked else 'off'}"
    )
    return TrackingToggleResult(
        reflection_id=reflection_id,
        user_id=author_id,
        reflected_date=today,
        tracked=tracked,
        reflection_count=count,
    )


def _check_range(user_id: int, start_date: date, end_date: date) -> None:
    require_positive_id(user_id, "user ID")
    if start_date > end_date:
        raise InvalidRangeError("start date cannot be after end date")


def get_reflection_tracking_analytics(
    user_id: int, start_date: date, end_date: date, db: Session
) -> List[TrackingAnalyticsEntry]:
    """Per-day tracking counts for a user within [start_date, end_date]."""
    _check_range(user_id, start_date, end_date)
    rows = TrackingRepository(db).daily_activity(user_id, start_date, end_date)
    return [
        TrackingAnalyticsEntry(date=day, reflection_count=count, unique_reflections=unique)
        for day, count, unique in rows
    ]


def get_reflection_tracking_by_category(
    user_id: int, start_date: date, end_date: date, db: Session
) -> List[CategoryTrackingEntry]:
    """Reflections written per day per category within [start_date, end_date]."""
    _check_range(user_id, start_date, end_date)
    rows = ReflectionRepository(db).count_by_day_and_category(user_id, start_date, end_date)
    return [
        CategoryTrackingEntry(date=day, category=category, reflection_count=count)
        for day, category, count in rows
    ]


# Friends feed

def get_friends_feed(user_id: int, db: Session, limit: int = 10, offset: int = 0) -> List[FeedReflectionResponse]:
    """Recent public reflections from accepted friends, newest first."""
    require_positive_id(user_id, "user ID")
    limit, offset = _normalize_page(limit, offset)
    since = utc_now() - timedelta(days=settings.FEED_WINDOW_DAYS)
    reflections = ReflectionRepository(db).get_friends_feed(user_id, since, limit, offset)
    logger.debug(f"Feed for user {user_id}: {len(reflections)} reflections (limit={limit}, offset={offset})")
    return [_to_feed_item(r) for r in reflections]


def _friend_reflections(user_id: int, friend_id: int, limit: int, offset: int, db: Session) -> List[FeedReflectionResponse]:
    if not FriendshipRepository(db).are_friends(user_id, friend_id):
        raise NotFriendsError("users are not friends")
    limit, offset = _normalize_page(limit, offset)
    since = None
    if settings.FRIEND_REFLECTIONS_WINDOW_DAYS:
        since = utc_now() - timedelta(days=settings.FRIEND_REFLECTIONS_WINDOW_DAYS)
    reflections = ReflectionRepository(db).get_public_by_author(friend_id, limit, offset, since=since)
    return [_to_feed_item(r) for r in reflections]


def get_friend_reflections(
    user_id: int, friend_id: int, db: Session, limit: int = 10, offset: int = 0
) -> List[FeedReflectionResponse]:
    """Public reflections of one accepted friend."""
    require_positive_id(user_id, "user ID")
    require_positive_id(friend_id, "friend ID")
    return _friend_reflections(user_id, friend_id, limit, offset, db)


def get_friend_reflections_by_username(
    user_id: int, friend_username: str, db: Session, limit: int = 10, offset: int = 0
) -> List[FeedReflectionResponse]:
    """Same as get_friend_reflections, addressing the friend by username."""
    require_positive_id(user_id, "current user ID")
    if not friend_username:
        raise ValidationError("friend username is required")
    friend = UserRepository(db).get_by_username(friend_username)
    if not friend:
        raise NotFoundError("User not found")
    return _friend_reflections(user_id, friend.id, limit, offset, db)
