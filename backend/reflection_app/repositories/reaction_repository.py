"""
Data access for reflection reactions and reaction prompts.
"""
from typing import Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from reflection_app.models.reaction import ReflectionReaction, ReactionPrompt, ReactionType
from reflection_app.models.user import User


class ReactionRepository:
    """Queries against reflection_reactions and reaction_prompts."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, reflection_id: int, user_id: int, reaction_type: ReactionType) -> Optional[ReflectionReaction]:
        return self.db.query(ReflectionReaction).filter(
            ReflectionReaction.reflection_id == reflection_id,
            ReflectionReaction.user_id == user_id,
            ReflectionReaction.reaction_type == reaction_type,
        ).first()

    def add(
        self,
        reflection_id: int,
        user_id: int,
        reaction_type: ReactionType,
        comment_text: Optional[str],
    ) -> ReflectionReaction:
        reaction = ReflectionReaction(
            reflection_id=reflection_id,
            user_id=user_id,
            reaction_type=reaction_type,
            comment_text=comment_text,
        )
        self.db.add(reaction)
        self.db.flush()
        return reaction

    def remove(self, reflection_id: int, user_id: int, reaction_type: ReactionType) -> int:
        deleted = self.db.query(ReflectionReaction).filter(
            ReflectionReaction.reflection_id == reflection_id,
            ReflectionReaction.user_id == user_id,
            ReflectionReaction.reaction_type == reaction_type,
        ).delete()
        self.db.flush()
        return deleted

    def get_for_reflection(self, reflection_id: int) -> List[Tuple[ReflectionReaction, User]]:
        return self.db.query(ReflectionReaction, User).join(
            User, ReflectionReaction.user_id == User.id
        ).filter(
            ReflectionReaction.reflection_id == reflection_id
        ).order_by(ReflectionReaction.created_at.asc(), ReflectionReaction.id.asc()).all()

    def counts_for_reflection(self, reflection_id: int) -> Dict[str, int]:
        rows = self.db.query(
            ReflectionReaction.reaction_type, func.count(ReflectionReaction.id)
        ).filter(
            ReflectionReaction.reflection_id == reflection_id
        ).group_by(ReflectionReaction.reaction_type).all()
        return {ReactionType(reaction_type).value: count for reaction_type, count in rows}

    def latest_for_user(
        self,
        reflection_id: int,
        user_id: int,
        reaction_type: Optional[ReactionType] = None,
    ) -> Optional[Tuple[ReflectionReaction, User]]:
        query = self.db.query(ReflectionReaction, User).join(
            User, ReflectionReaction.user_id == User.id
        ).filter(
            ReflectionReaction.reflection_id == reflection_id,
            ReflectionReaction.user_id == user_id,
        )
        if reaction_type is not None:
            query = query.filter(ReflectionReaction.reaction_type == reaction_type)
        return query.order_by(
            ReflectionReaction.created_at.desc(), ReflectionReaction.id.desc()
        ).first()

    def get_active_prompts(self) -> List[ReactionPrompt]:
        return self.db.query(ReactionPrompt).filter(
            ReactionPrompt.is_active.is_(True)
        ).order_by(ReactionPrompt.reaction_type).all()

    def get_prompt(self, reaction_type: ReactionType) -> Optional[ReactionPrompt]:
        return self.db.query(ReactionPrompt).filter(
            ReactionPrompt.reaction_type == reaction_type
        ).first()

    def add_prompt(self, reaction_type: ReactionType, prompt_text: str) -> ReactionPrompt:
        prompt = ReactionPrompt(reaction_type=reaction_type, prompt_text=prompt_text, is_active=True)
        self.db.add(prompt)
        self.db.flush()
        return prompt
