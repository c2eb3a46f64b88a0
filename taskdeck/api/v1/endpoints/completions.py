"""
Completion endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from taskdeck.core.database import get_session
from taskdeck.schemas.completion import ToggleCompletionRequest, CompletionStatusResponse
from taskdeck.services.catalog_service import get_card
from taskdeck.services.completion_service import DatabaseCompletionStore
from taskdeck.services.profile_service import get_profile

router = APIRouter(prefix="/completions", tags=["completions"])


@router.post("/toggle", response_model=CompletionStatusResponse)
async def toggle_completion(
    request: ToggleCompletionRequest,
    session: Session = Depends(get_session)
):
    """Flip the completion state of a card for a profile and return the new state."""
    get_profile(session, request.profile_id)
    get_card(session, request.card_id)

    is_completed = DatabaseCompletionStore(session).toggle(request.profile_id, request.card_id)
    return CompletionStatusResponse(is_completed=is_completed)


@router.get("/check", response_model=CompletionStatusResponse)
async def check_completion(
    profile_id: int = Query(..., alias="profileId", gt=0),
    card_id: int = Query(..., alias="cardId", gt=0),
    session: Session = Depends(get_session)
):
    """Check whether a profile has completed a card."""
    is_completed = DatabaseCompletionStore(session).is_completed(profile_id, card_id)
    return CompletionStatusResponse(is_completed=is_completed)
