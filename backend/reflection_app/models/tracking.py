"""
Reflection tracking model: one row per (reflection, user, calendar day).
"""
from sqlalchemy import Column, Date, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from reflection_app.db.base import BaseModel


class ReflectionTracking(BaseModel):
    """Marker that a user revisited a reflection on a given date."""
    __tablename__ = "reflection_tracking"
    __table_args__ = (
        UniqueConstraint("reflection_id", "user_id", "reflected_date", name="uq_reflection_tracking_day"),
    )
    
    reflection_id = Column(Integer, ForeignKey("reflections.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    reflected_date = Column(Date, nullable=False, index=True)
    
    # Relationships
    reflection = relationship("Reflection", back_populates="tracking_entries")
    user = relationship("User", back_populates="tracking_entries")
