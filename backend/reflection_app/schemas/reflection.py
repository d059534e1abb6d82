"""
Pydantic schemas for Reflection entity, tracking and analytics.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date as date_type, datetime
from reflection_app.models.reflection import ReflectionVisibility
from reflection_app.schemas.action import ActionResponse
from reflection_app.schemas.category import CategoryLabel, SubCategoryLabel


class ReflectionBase(BaseModel):
    """Base reflection schema."""
    category_id: int
    sub_category_id: Optional[int] = None
    date: Optional[date_type] = None  # Defaults to the service's today
    reflection_text: str
    reflection_detail: str = ""
    tags: List[str] = Field(default_factory=list)
    is_private: bool = False
    visibility: Optional[ReflectionVisibility] = None  # Derived from is_private when omitted


class ReflectionCreate(ReflectionBase):
    """Schema for reflection creation."""
    author_id: int


class ReflectionUpdate(ReflectionBase):
    """Schema for reflection update."""
    pass


class ReflectionResponse(BaseModel):
    """Schema for reflection response."""
    id: int
    author_id: int
    category_id: int
    sub_category_id: Optional[int] = None
    date: date_type
    reflection_text: str
    reflection_detail: str
    tags: List[str] = []
    is_private: bool
    visibility: ReflectionVisibility
    created_at: datetime
    updated_at: datetime
    category: Optional[CategoryLabel] = None
    sub_category: Optional[SubCategoryLabel] = None
    actions: List[ActionResponse] = []
    
    # Tracking data
    reflection_count: int = 0
    reflected_today: bool = False
    
    class Config:
        from_attributes = True


class FeedReflectionResponse(ReflectionResponse):
    """Reflection as shown in a friend's feed, with author display data."""
    author_username: str = ""
    author_name: str = ""


class TrackingToggleResult(BaseModel):
    """Outcome of toggling today's tracking marker."""
    reflection_id: int
    user_id: int
    reflected_date: date_type
    tracked: bool
    reflection_count: int


class TrackingAnalyticsEntry(BaseModel):
    """Tracking activity for one calendar day."""
    date: date_type
    reflection_count: int
    unique_reflections: int


class CategoryTrackingEntry(BaseModel):
    """Reflections authored in one category on one day."""
    date: date_type
    category: str
    reflection_count: int
