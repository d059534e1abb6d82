"""
Action item model: follow-up tasks attached to a reflection.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from reflection_app.db.base import BaseModel
import enum


class ActionStatus(str, enum.Enum):
    """Action item status enumeration."""
    PENDING = "Pending"
    DONE = "Done"


class ActionItem(BaseModel):
    """Follow-up action belonging to exactly one reflection."""
    __tablename__ = "actions"
    
    reflection_id = Column(Integer, ForeignKey("reflections.id", ondelete="CASCADE"), nullable=False, index=True)
    action = Column(String(200), nullable=False)
    priority = Column(String(20), nullable=False, default="Medium")
    status = Column(
        SQLEnum(
            ActionStatus,
            name="actions_status_check",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
        default=ActionStatus.PENDING,
    )
    due_date = Column(DateTime, nullable=True)
    
    # Relationships
    reflection = relationship("Reflection", back_populates="actions")
