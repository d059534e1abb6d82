"""
Database initialization script.
"""
import logging
from sqlalchemy.orm import Session
from reflection_app.db.session import SessionLocal, init_db
from reflection_app.models import ReactionType
from reflection_app.repositories.reaction_repository import ReactionRepository

logger = logging.getLogger(__name__)

DEFAULT_REACTION_PROMPTS = {
    ReactionType.ASK_ME_ABOUT_THIS: "I'd love to hear more about this. What specifically would you like to discuss?",
    ReactionType.SIMILAR_EXPERIENCE: "I've been through something similar. What helped me was...",
    ReactionType.UPDATE_ME: "I'm invested in your journey. How did this turn out?",
    ReactionType.ACCOUNTABILITY_BUDDY: "I'm here to help you stay on track. What's your next step?",
    ReactionType.DIFFERENT_ANGLE: "Have you considered looking at this from a different perspective?",
    ReactionType.FAVORITE: "This one stayed with me. Thank you for sharing it.",
}


def seed_reaction_prompts(db: Session) -> int:
    """Insert the default prompt for every reaction type that has none; returns rows added."""
    repo = ReactionRepository(db)
    added = 0
    for reaction_type, prompt_text in DEFAULT_REACTION_PROMPTS.items():
        if repo.get_prompt(reaction_type) is None:
            repo.add_prompt(reaction_type, prompt_text)
            added += 1
    db.commit()
    if added:
        logger.info(f"Inserted {added} default reaction prompts")
    return added


if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    db = SessionLocal()
    try:
        seed_reaction_prompts(db)
    finally:
        db.close()
    print("Database initialized successfully!")
