"""
Action item service.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from reflection_app.core.exceptions import NotFoundError, ValidationError
from reflection_app.core.utils import require_positive_id
from reflection_app.models.action import ActionItem, ActionStatus
from reflection_app.repositories.action_repository import ActionRepository
from reflection_app.repositories.reflection_repository import ReflectionRepository
from reflection_app.schemas.action import ActionCreate, ActionResponse, ActionUpdate

logger = logging.getLogger(__name__)


def _parse_status(value: str) -> ActionStatus:
    try:
        return ActionStatus(value)
    except ValueError:
        raise ValidationError(f"invalid status: {value}")


def _get_action_or_404(action_id: int, repo: ActionRepository) -> ActionItem:
    require_positive_id(action_id, "action ID")
    action = repo.get_by_id(action_id)
    if not action:
        raise NotFoundError("Action not found")
    return action


def create_action(action_data: ActionCreate, db: Session) -> ActionResponse:
    """Attach a follow-up action to an existing reflection."""
    if not action_data.action or not action_data.action.strip():
        raise ValidationError("action text is required")
    require_positive_id(action_data.reflection_id, "reflection ID")
    if ReflectionRepository(db).get_author_id(action_data.reflection_id) is None:
        raise NotFoundError("Reflection not found")

    action = ActionItem(
        reflection_id=action_data.reflection_id,
        action=action_data.action,
        priority=action_data.priority or "Medium",
        status=action_data.status or ActionStatus.PENDING,
        due_date=action_data.due_date,
    )
    ActionRepository(db).create(action)
    db.commit()
    db.refresh(action)
    logger.info(f"Created action {action.id} on reflection {action.reflection_id}")
    return ActionResponse.model_validate(action)


def get_actions_by_reflection(reflection_id: int, db: Session) -> List[ActionResponse]:
    require_positive_id(reflection_id, "reflection ID")
    actions = ActionRepository(db).get_by_reflection_id(reflection_id)
    return [ActionResponse.model_validate(a) for a in actions]


def get_action(action_id: int, db: Session) -> ActionResponse:
    action = _get_action_or_404(action_id, ActionRepository(db))
    return ActionResponse.model_validate(action)


def update_action(action_id: int, action_data: ActionUpdate, db: Session) -> ActionResponse:
    if not action_data.action or not action_data.action.strip():
        raise ValidationError("action text is required")
    repo = ActionRepository(db)
    action = _get_action_or_404(action_id, repo)

    action.action = action_data.action
    action.priority = action_data.priority or "Medium"
    action.status = action_data.status
    action.due_date = action_data.due_date
    repo.update(action)
    db.commit()
    db.refresh(action)
    return ActionResponse.model_validate(action)


def update_action_status(action_id: int, status: str, db: Session) -> ActionResponse:
    """Set only the status; anything outside Pending/Done is rejected."""
    new_status = _parse_status(status)
    repo = ActionRepository(db)
    action = _get_action_or_404(action_id, repo)
    action.status = new_status
    repo.update(action)
    db.commit()
    db.refresh(action)
    logger.info(f"Action {action_id} status set to {new_status.value}")
    return ActionResponse.model_validate(action)


def complete_action(action_id: int, db: Session) -> ActionResponse:
    return update_action_status(action_id, ActionStatus.DONE.value, db)


def delete_action(action_id: int, db: Session) -> None:
    repo = ActionRepository(db)
    action = _get_action_or_404(action_id, repo)
    repo.delete(action)
    db.commit()
