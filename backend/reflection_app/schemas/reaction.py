"""
Pydantic schemas for reactions and reaction prompts.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from reflection_app.models.reaction import ReactionType


class ReactionRequest(BaseModel):
    """Body of an add-reaction call; type is validated by the service."""
    reaction_type: str
    comment_text: Optional[str] = None


class ReactionResponse(BaseModel):
    """Reaction plus display data for the reacting user."""
    id: int
    reflection_id: int
    user_id: int
    reaction_type: ReactionType
    comment_text: Optional[str] = None
    created_at: datetime
    username: str = ""
    user_name: str = ""


class ReactionPromptResponse(BaseModel):
    """Schema for reaction prompt response."""
    id: int
    reaction_type: ReactionType
    prompt_text: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
