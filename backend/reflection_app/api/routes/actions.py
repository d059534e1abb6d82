"""
Action item routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from reflection_app.db.session import get_db
from reflection_app.schemas.action import ActionCreate, ActionResponse, ActionStatusUpdate, ActionUpdate
from reflection_app.core.utils import format_message
from reflection_app.services import action_service

router = APIRouter(tags=["actions"])


@router.post("/actions", response_model=ActionResponse, status_code=status.HTTP_201_CREATED)
async def create_action(action_data: ActionCreate, db: Session = Depends(get_db)):
    """Attach an action item to a reflection."""
    return action_service.create_action(action_data, db)


@router.get("/reflections/{reflection_id}/actions", response_model=List[ActionResponse])
async def list_actions(reflection_id: int, db: Session = Depends(get_db)):
    """List the action items of a reflection."""
    return action_service.get_actions_by_reflection(reflection_id, db)


@router.get("/actions/{action_id}", response_model=ActionResponse)
async def get_action(action_id: int, db: Session = Depends(get_db)):
    """Get an action item."""
    return action_service.get_action(action_id, db)


@router.put("/actions/{action_id}", response_model=ActionResponse)
async def update_action(action_id: int, action_data: ActionUpdate, db: Session = Depends(get_db)):
    """Update an action item."""
    return action_service.update_action(action_id, action_data, db)


@router.api_route("/actions/{action_id}/status", methods=["PATCH", "PUT"], response_model=ActionResponse)
async def update_action_status(
    action_id: int,
    status_data: ActionStatusUpdate,
    db: Session = Depends(get_db)
):
    """Change only the status of an action item."""
    return action_service.update_action_status(action_id, status_data.status, db)


@router.patch("/actions/{action_id}/complete", response_model=ActionResponse)
async def complete_action(action_id: int, db: Session = Depends(get_db)):
    """Mark an action item as done."""
    return action_service.complete_action(action_id, db)


@router.delete("/actions/{action_id}")
async def delete_action(action_id: int, db: Session = Depends(get_db)):
    """Delete an action item."""
    action_service.delete_action(action_id, db)
    return format_message("Action deleted successfully")
