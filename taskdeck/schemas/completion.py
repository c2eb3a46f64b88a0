"""
Completion schemas.
"""
from pydantic import Field
from taskdeck.schemas.utils import CamelModel


class CompletionResponse(CamelModel):
    """One completed card of a profile."""
    id: int
    profile_id: int
    card_id: int


class ToggleCompletionRequest(CamelModel):
    """Request schema for flipping the completion state of a card."""
    profile_id: int = Field(..., gt=0, description="Profile ID")
    card_id: int = Field(..., gt=0, description="Card ID")


class CompletionStatusResponse(CamelModel):
    """Completion state of a (profile, card) pair."""
    is_completed: bool
