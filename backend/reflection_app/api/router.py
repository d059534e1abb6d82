"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from reflection_app.api.routes import (
    auth, users, categories, reflections, actions,
    friends, feed, reactions
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(categories.router)
api_router.include_router(reflections.router)
api_router.include_router(actions.router)
api_router.include_router(friends.router)
api_router.include_router(feed.router)
api_router.include_router(reactions.router)
