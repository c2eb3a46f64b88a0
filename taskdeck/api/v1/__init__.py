"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from taskdeck.api.v1.endpoints import (
    cards, decks, profiles, completions, sessions
)

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(cards.router)
api_router.include_router(decks.router)
api_router.include_router(profiles.router)
api_router.include_router(completions.router)
api_router.include_router(sessions.router)
