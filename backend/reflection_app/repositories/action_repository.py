"""
Data access for action items.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from reflection_app.models.action import ActionItem


class ActionRepository:
    """Queries against the actions table."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, action: ActionItem) -> ActionItem:
        self.db.add(action)
        self.db.flush()
        return action

    def get_by_reflection_id(self, reflection_id: int) -> List[ActionItem]:
        return self.db.query(ActionItem).filter(
            ActionItem.reflection_id == reflection_id
        ).order_by(ActionItem.created_at.desc(), ActionItem.id.desc()).all()

    def get_by_id(self, action_id: int) -> Optional[ActionItem]:
        return self.db.query(ActionItem).filter(ActionItem.id == action_id).first()

    def update(self, action: ActionItem) -> ActionItem:
        self.db.flush()
        return action

    def delete(self, action: ActionItem) -> None:
        self.db.delete(action)
        self.db.flush()
