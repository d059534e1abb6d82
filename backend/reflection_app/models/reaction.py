"""
Reaction models: typed acknowledgements on reflections and their prompts.
"""
from sqlalchemy import Column, String, Boolean, ForeignKey, Integer, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
from reflection_app.db.base import BaseModel
import enum


class ReactionType(str, enum.Enum):
    """Closed set of reaction types."""
    ASK_ME_ABOUT_THIS = "ask_me_about_this"
    SIMILAR_EXPERIENCE = "similar_experience"
    UPDATE_ME = "update_me"
    ACCOUNTABILITY_BUDDY = "accountability_buddy"
    DIFFERENT_ANGLE = "different_angle"
    FAVORITE = "favorite"


def _reaction_type_column(name: str, **kwargs) -> Column:
    return Column(
        SQLEnum(
            ReactionType,
            name=name,
            native_enum=False,
            create_constraint=True,
            length=50,
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
        **kwargs
    )


class ReflectionReaction(BaseModel):
    """A user's reaction of one type on one reflection."""
    __tablename__ = "reflection_reactions"
    __table_args__ = (
        UniqueConstraint("reflection_id", "user_id", "reaction_type", name="uq_reflection_reactions_type"),
    )
    
    reflection_id = Column(Integer, ForeignKey("reflections.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    reaction_type = _reaction_type_column("reflection_reactions_reaction_type_check")
    comment_text = Column(String(100), nullable=True)
    
    # Relationships
    reflection = relationship("Reflection", back_populates="reactions")
    user = relationship("User", back_populates="reactions")


class ReactionPrompt(BaseModel):
    """Suggested follow-up prompt for a reaction type."""
    __tablename__ = "reaction_prompts"
    
    reaction_type = _reaction_type_column("reaction_prompts_reaction_type_check", unique=True)
    prompt_text = Column(String(200), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
