"""
Reaction service: typed reactions on reflections and their prompts.
"""
import logging
from typing import Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from reflection_app.core.config import settings
from reflection_app.core.exceptions import ConflictError, NotFoundError, ValidationError
from reflection_app.core.utils import require_positive_id
from reflection_app.models.reaction import ReactionType, ReflectionReaction
from reflection_app.models.user import User
from reflection_app.repositories.reaction_repository import ReactionRepository
from reflection_app.repositories.reflection_repository import ReflectionRepository
from reflection_app.repositories.user_repository import UserRepository
from reflection_app.schemas.reaction import ReactionPromptResponse, ReactionResponse

logger = logging.getLogger(__name__)


def parse_reaction_type(value: Optional[str]) -> ReactionType:
    """Map a wire value onto the closed set of reaction types."""
    if not value:
        raise ValidationError("reaction type is required")
    try:
        return ReactionType(value)
    except ValueError:
        raise ValidationError(f"invalid reaction type: {value}")


def _to_response(reaction: ReflectionReaction, user: User) -> ReactionResponse:
    return ReactionResponse(
        id=reaction.id,
        reflection_id=reaction.reflection_id,
        user_id=reaction.user_id,
        reaction_type=reaction.reaction_type,
        comment_text=reaction.comment_text,
        created_at=reaction.created_at,
        username=user.username,
        user_name=user.full_name,
    )


def _check_ids(user_id: int, reflection_id: int) -> None:
    require_positive_id(user_id, "user ID")
    require_positive_id(reflection_id, "reflection ID")


def add_reaction(
    user_id: int,
    reflection_id: int,
    reaction_type: str,
    db: Session,
    comment_text: Optional[str] = None,
) -> ReactionResponse:
    """Add one reaction of a given type; each user holds at most one per type."""
    _check_ids(user_id, reflection_id)
    kind = parse_reaction_type(reaction_type)
    if comment_text is not None and len(comment_text) > settings.REACTION_COMMENT_MAX_LENGTH:
        raise ValidationError(
            f"comment text cannot exceed {settings.REACTION_COMMENT_MAX_LENGTH} characters"
        )

    user = UserRepository(db).get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    if ReflectionRepository(db).get_author_id(reflection_id) is None:
        raise NotFoundError("Reflection not found")

    repo = ReactionRepository(db)
    if repo.get(reflection_id, user_id, kind) is not None:
        raise ConflictError("reaction already exists")
    try:
        reaction = repo.add(reflection_id, user_id, kind, comment_text)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Duplicate {kind.value} reaction by user {user_id} on reflection {reflection_id}")
        raise ConflictError("reaction already exists")

    db.refresh(reaction)
    logger.info(f"User {user_id} added {kind.value} reaction on reflection {reflection_id}")
    return _to_response(reaction, user)


def remove_reaction(user_id: int, reflection_id: int, reaction_type: str, db: Session) -> None:
    _check_ids(user_id, reflection_id)
    kind = parse_reaction_type(reaction_type)
    deleted = ReactionRepository(db).remove(reflection_id, user_id, kind)
    if deleted == 0:
        raise NotFoundError("reaction not found")
    db.commit()
    logger.info(f"User {user_id} removed {kind.value} reaction on reflection {reflection_id}")


def get_reactions_for_reflection(reflection_id: int, db: Session) -> List[ReactionResponse]:
    """All reactions on a reflection, oldest first."""
    require_positive_id(reflection_id, "reflection ID")
    rows = ReactionRepository(db).get_for_reflection(reflection_id)
    return [_to_response(reaction, user) for reaction, user in rows]


def get_reaction_counts_for_reflection(reflection_id: int, db: Session) -> Dict[str, int]:
    require_positive_id(reflection_id, "reflection ID")
    return ReactionRepository(db).counts_for_reflection(reflection_id)


def get_user_reaction_for_reflection(
    user_id: int,
    reflection_id: int,
    db: Session,
    reaction_type: Optional[str] = None,
) -> Optional[ReactionResponse]:
    """A user's most recent reaction on a reflection, or None when they have not reacted."""
    _check_ids(user_id, reflection_id)
    kind = parse_reaction_type(reaction_type) if reaction_type else None
    row = ReactionRepository(db).latest_for_user(reflection_id, user_id, kind)
    if row is None:
        return None
    reaction, user = row
    return _to_response(reaction, user)


def get_reaction_prompts(db: Session) -> List[ReactionPromptResponse]:
    prompts = ReactionRepository(db).get_active_prompts()
    return [ReactionPromptResponse.model_validate(p) for p in prompts]
