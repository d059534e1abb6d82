"""
Reflection model: a user-authored journal entry.
"""
from sqlalchemy import Column, String, Date, Text, Boolean, JSON, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from reflection_app.db.base import BaseModel
import enum


class ReflectionVisibility(str, enum.Enum):
    """Feed eligibility of a reflection."""
    PRIVATE = "private"
    PUBLIC = "public"


class Reflection(BaseModel):
    """Journal entry with category, free-form tags and visibility."""
    __tablename__ = "reflections"
    
    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    sub_category_id = Column(Integer, ForeignKey("sub_categories.id", ondelete="SET NULL"), nullable=True)
    date = Column(Date, nullable=False, index=True)
    reflection_text = Column(String(500), nullable=False)
    reflection_detail = Column(Text, nullable=False, default="")
    tags = Column(JSON, nullable=False, default=list)
    is_private = Column(Boolean, nullable=False, default=False)  # Legacy flag; only a default for visibility
    visibility = Column(
        SQLEnum(
            ReflectionVisibility,
            name="reflections_visibility_check",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
        default=ReflectionVisibility.PRIVATE,
        index=True,
    )
    
    # Relationships
    author = relationship("User", back_populates="reflections")
    category = relationship("Category")
    sub_category = relationship("SubCategory")
    actions = relationship(
        "ActionItem", back_populates="reflection", cascade="all, delete-orphan",
        order_by="[ActionItem.created_at, ActionItem.id]"
    )
    tracking_entries = relationship("ReflectionTracking", back_populates="reflection", cascade="all, delete-orphan")
    reactions = relationship("ReflectionReaction", back_populates="reflection", cascade="all, delete-orphan")
