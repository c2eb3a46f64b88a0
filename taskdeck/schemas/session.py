"""
Draw session schemas.
"""
from pydantic import Field
from typing import Dict, List, Optional
from taskdeck.schemas.utils import CamelModel


class CreateSessionRequest(CamelModel):
    """Request schema for opening a draw session."""
    profile_id: Optional[int] = Field(None, gt=0, description="Profile to act as (optional)")


class SetActiveProfileRequest(CamelModel):
    """Request schema for switching (or clearing) the active profile of a session."""
    profile_id: Optional[int] = Field(None, gt=0, description="Profile ID, or null to clear")


class SessionResponse(CamelModel):
    """Current state of a draw session."""
    session_id: str
    active_profile_id: Optional[int] = None
    drawn: Dict[str, List[int]]
    current: Dict[str, int]


class SessionToggleRequest(CamelModel):
    """Request schema for toggling a card as the session's active profile."""
    card_id: int = Field(..., gt=0, description="Card ID")


class SessionToggleResponse(CamelModel):
    """Outcome of a session toggle: 'ok' with the new state, or 'no_active_profile'."""
    status: str
    is_completed: Optional[bool] = None


class SessionResetResponse(CamelModel):
    """Outcome of a session reset."""
    success: bool = True
    completions_cleared: bool
