"""
Reflection routes: CRUD, the daily tracking toggle and tracking analytics.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from reflection_app.db.session import get_db
from reflection_app.schemas.reflection import (
    CategoryTrackingEntry, ReflectionCreate, ReflectionResponse, ReflectionUpdate,
    TrackingAnalyticsEntry, TrackingToggleResult
)
from reflection_app.api.dependencies import get_acting_user_id, get_optional_acting_user_id
from reflection_app.core.exceptions import ValidationError
from reflection_app.core.utils import format_message, parse_iso_date
from reflection_app.services import reflection_service

router = APIRouter(tags=["reflections"])


def _date_range(start_date: Optional[str], end_date: Optional[str]):
    if not start_date or not end_date:
        raise ValidationError("start_date and end_date are required")
    start = parse_iso_date(start_date)
    if start is None:
        raise ValidationError("invalid start_date format, use YYYY-MM-DD")
    end = parse_iso_date(end_date)
    if end is None:
        raise ValidationError("invalid end_date format, use YYYY-MM-DD")
    return start, end


@router.post("/reflections", response_model=ReflectionResponse, status_code=status.HTTP_201_CREATED)
async def create_reflection(reflection_data: ReflectionCreate, db: Session = Depends(get_db)):
    """Create a reflection."""
    return reflection_service.create_reflection(reflection_data, db)


@router.get("/reflections", response_model=List[ReflectionResponse])
async def list_reflections(
    category_id: Optional[int] = None,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """List a user's reflections, optionally within one category."""
    if category_id is not None:
        return reflection_service.get_reflections_by_category(user_id, category_id, db)
    return reflection_service.get_user_reflections(user_id, db)


@router.get("/reflections/user/{user_id}", response_model=List[ReflectionResponse])
async def list_user_reflections(user_id: int, db: Session = Depends(get_db)):
    """List reflections authored by user_id."""
    return reflection_service.get_user_reflections(user_id, db)


@router.get("/reflections/{reflection_id}", response_model=ReflectionResponse)
async def get_reflection(reflection_id: int, db: Session = Depends(get_db)):
    """Get one reflection with its tracking data."""
    return reflection_service.get_reflection(reflection_id, db)


@router.put("/reflections/{reflection_id}", response_model=ReflectionResponse)
async def update_reflection(
    reflection_id: int,
    reflection_data: ReflectionUpdate,
    db: Session = Depends(get_db)
):
    """Update a reflection."""
    return reflection_service.update_reflection(reflection_id, reflection_data, db)


@router.delete("/reflections/{reflection_id}")
async def delete_reflection(reflection_id: int, db: Session = Depends(get_db)):
    """Delete a reflection with its actions, tracking and reactions."""
    reflection_service.delete_reflection(reflection_id, db)
    return format_message("Reflection deleted successfully")


@router.post("/reflections/{reflection_id}/reflect", response_model=TrackingToggleResult)
async def reflect(
    reflection_id: int,
    user_id: Optional[int] = Depends(get_optional_acting_user_id),
    db: Session = Depends(get_db)
):
    """Toggle today's "reflected" marker for a reflection."""
    return reflection_service.track_reflection(reflection_id, db, acting_user_id=user_id)


@router.get("/analytics/reflection-tracking", response_model=List[TrackingAnalyticsEntry])
async def reflection_tracking(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Per-day tracking activity between two dates (inclusive)."""
    start, end = _date_range(start_date, end_date)
    return reflection_service.get_reflection_tracking_analytics(user_id, start, end, db)


@router.get("/analytics/reflection-tracking-by-category", response_model=List[CategoryTrackingEntry])
async def reflection_tracking_by_category(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Reflections written per day and category between two dates (inclusive)."""
    start, end = _date_range(start_date, end_date)
    return reflection_service.get_reflection_tracking_by_category(user_id, start, end, db)
