"""
Draw session endpoints.

A session holds one client's decks and active profile in server memory. It
is created explicitly, discarded explicitly (or on restart), and never
persisted.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from taskdeck.core.database import get_session
from taskdeck.schemas.card import CardResponse
from taskdeck.schemas.session import (
    CreateSessionRequest,
    SetActiveProfileRequest,
    SessionResponse,
    SessionToggleRequest,
    SessionToggleResponse,
    SessionResetResponse,
)
from taskdeck.services.catalog_service import load_catalog, parse_category
from taskdeck.services.completion_service import DatabaseCompletionStore
from taskdeck.services.profile_service import get_profile, to_active_profile
from taskdeck.services.session_service import (
    ClientSession,
    NoActiveProfile,
    SessionController,
    session_registry,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _session_response(client: ClientSession) -> SessionResponse:
    return SessionResponse(
        session_id=client.session_id,
        active_profile_id=client.active_profile.id if client.active_profile else None,
        drawn=client.draw_state.snapshot(),
        current={category.value: card_id for category, card_id in client.current.items()},
    )


def _controller(client: ClientSession, session: Session) -> SessionController:
    return SessionController(
        catalog=load_catalog(session),
        completions=DatabaseCompletionStore(session),
        session=client,
    )


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: CreateSessionRequest,
    session: Session = Depends(get_session)
):
    """Open a draw session, optionally acting as an existing profile."""
    active_profile = None
    if request.profile_id is not None:
        active_profile = to_active_profile(get_profile(session, request.profile_id))

    client = session_registry.create(active_profile)
    return _session_response(client)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_draw_session(session_id: str):
    """Get the drawn cards and active profile of a session."""
    return _session_response(session_registry.get(session_id))


@router.put("/{session_id}/profile", response_model=SessionResponse)
async def set_session_profile(
    session_id: str,
    request: SetActiveProfileRequest,
    session: Session = Depends(get_session)
):
    """Switch the active profile of a session, or clear it with a null profileId."""
    client = session_registry.get(session_id)
    active_profile = None
    if request.profile_id is not None:
        active_profile = to_active_profile(get_profile(session, request.profile_id))

    _controller(client, session).set_active_profile(active_profile)
    return _session_response(client)


@router.post("/{session_id}/draw/{category}", response_model=CardResponse)
async def draw_card(
    session_id: str,
    category: str,
    session: Session = Depends(get_session)
):
    """Draw a card from a category deck, reshuffling the deck once it is exhausted."""
    client = session_registry.get(session_id)
    card_category = parse_category(category)

    card = _controller(client, session).draw_card(card_category)
    return CardResponse.model_validate(card)


@router.post("/{session_id}/toggle", response_model=SessionToggleResponse)
async def toggle_session_completion(
    session_id: str,
    request: SessionToggleRequest,
    session: Session = Depends(get_session)
):
    """Flip a card's completion for the session's active profile."""
    client = session_registry.get(session_id)

    outcome = _controller(client, session).toggle_completion(request.card_id)
    if isinstance(outcome, NoActiveProfile):
        return SessionToggleResponse(status=outcome.status)
    return SessionToggleResponse(status=outcome.status, is_completed=outcome.is_completed)


@router.post("/{session_id}/reset", response_model=SessionResetResponse)
async def reset_draw_session(
    session_id: str,
    session: Session = Depends(get_session)
):
    """Reset all decks and the active profile's completions."""
    client = session_registry.get(session_id)

    result = _controller(client, session).reset_session()
    return SessionResetResponse(success=True, completions_cleared=result.completions_cleared)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_session(session_id: str):
    """Discard a session and its draw state."""
    session_registry.discard(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
