"""
Pydantic schemas for ActionItem entity.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from reflection_app.models.action import ActionStatus


class ActionCreate(BaseModel):
    """Schema for action item creation."""
    reflection_id: int
    action: str
    priority: str = "Medium"
    status: ActionStatus = ActionStatus.PENDING
    due_date: Optional[datetime] = None


class ActionUpdate(BaseModel):
    """Schema for action item update."""
    action: str
    priority: str = "Medium"
    status: ActionStatus = ActionStatus.PENDING
    due_date: Optional[datetime] = None


class ActionStatusUpdate(BaseModel):
    """Schema for a status-only update; validated by the service."""
    status: str


class ActionResponse(BaseModel):
    """Schema for action item response."""
    id: int
    reflection_id: int
    action: str
    priority: str
    status: ActionStatus
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
