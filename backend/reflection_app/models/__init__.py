"""Models package - Import all models for SQLAlchemy registration."""
from reflection_app.models.user import User
from reflection_app.models.category import Category, SubCategory
from reflection_app.models.reflection import Reflection, ReflectionVisibility
from reflection_app.models.action import ActionItem, ActionStatus
from reflection_app.models.tracking import ReflectionTracking
from reflection_app.models.friendship import Friendship, FriendshipStatus
from reflection_app.models.reaction import ReflectionReaction, ReactionPrompt, ReactionType

__all__ = [
    "User",
    "Category",
    "SubCategory",
    "Reflection",
    "ReflectionVisibility",
    "ActionItem",
    "ActionStatus",
    "ReflectionTracking",
    "Friendship",
    "FriendshipStatus",
    "ReflectionReaction",
    "ReactionPrompt",
    "ReactionType",
]
