"""
Reaction routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from reflection_app.db.session import get_db
from reflection_app.schemas.reaction import ReactionPromptResponse, ReactionRequest, ReactionResponse
from reflection_app.api.dependencies import get_acting_user_id
from reflection_app.core.utils import format_message
from reflection_app.services import reaction_service

router = APIRouter(prefix="/reactions", tags=["reactions"])


@router.post("", response_model=ReactionResponse, status_code=status.HTTP_201_CREATED)
async def add_reaction(
    request: ReactionRequest,
    reflection_id: int = Query(...),
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """React to a reflection."""
    return reaction_service.add_reaction(
        user_id, reflection_id, request.reaction_type, db, comment_text=request.comment_text
    )


@router.delete("")
async def remove_reaction(
    reflection_id: int = Query(...),
    reaction_type: str = Query(""),
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """Withdraw one reaction."""
    reaction_service.remove_reaction(user_id, reflection_id, reaction_type, db)
    return format_message("Reaction removed")


@router.get("", response_model=List[ReactionResponse])
async def list_reactions(reflection_id: int = Query(...), db: Session = Depends(get_db)):
    """All reactions on a reflection."""
    return reaction_service.get_reactions_for_reflection(reflection_id, db)


@router.get("/counts", response_model=Dict[str, int])
async def reaction_counts(reflection_id: int = Query(...), db: Session = Depends(get_db)):
    """Reaction counts by type."""
    return reaction_service.get_reaction_counts_for_reflection(reflection_id, db)


@router.get("/user", response_model=Optional[ReactionResponse])
async def user_reaction(
    reflection_id: int = Query(...),
    reaction_type: Optional[str] = None,
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """This user's latest reaction on a reflection, or null."""
    return reaction_service.get_user_reaction_for_reflection(
        user_id, reflection_id, db, reaction_type=reaction_type
    )


@router.get("/prompts", response_model=List[ReactionPromptResponse])
async def reaction_prompts(db: Session = Depends(get_db)):
    """Active follow-up prompts per reaction type."""
    return reaction_service.get_reaction_prompts(db)
