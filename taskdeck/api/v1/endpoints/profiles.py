"""
Profile endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List
from taskdeck.core.database import get_session
from taskdeck.core.exceptions import NotFoundError
from taskdeck.schemas.profile import ProfileResponse, CreateProfileRequest, SuccessResponse
from taskdeck.schemas.completion import CompletionResponse
from taskdeck.services.completion_service import DatabaseCompletionStore
from taskdeck.services.profile_service import (
    get_or_create_profile,
    get_profile,
    get_profile_by_name,
    list_profiles,
)

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(
    request: CreateProfileRequest,
    session: Session = Depends(get_session)
):
    """Create a profile, or return the existing one if the display name is taken."""
    profile = get_or_create_profile(session, request.display_name)
    return ProfileResponse.model_validate(profile)


@router.get("", response_model=List[ProfileResponse])
async def get_profiles(
    session: Session = Depends(get_session)
):
    """Get all profiles."""
    return [ProfileResponse.model_validate(profile) for profile in list_profiles(session)]


@router.get("/by-name/{display_name}", response_model=ProfileResponse)
async def get_profile_by_display_name(
    display_name: str,
    session: Session = Depends(get_session)
):
    """Get a profile by its display name."""
    profile = get_profile_by_name(session, display_name.strip())
    if not profile:
        raise NotFoundError(f"Profile '{display_name}' not found")
    return ProfileResponse.model_validate(profile)


@router.get("/{profile_id}/completions", response_model=List[CompletionResponse])
async def get_profile_completions(
    profile_id: int,
    session: Session = Depends(get_session)
):
    """Get the cards a profile has completed."""
    get_profile(session, profile_id)
    completions = DatabaseCompletionStore(session).list_completions(profile_id)
    return [CompletionResponse.model_validate(completion) for completion in completions]


@router.post("/{profile_id}/reset", response_model=SuccessResponse)
async def reset_profile(
    profile_id: int,
    session: Session = Depends(get_session)
):
    """Clear every completion of a profile. Other profiles are untouched."""
    get_profile(session, profile_id)
    DatabaseCompletionStore(session).reset_all(profile_id)
    return SuccessResponse(success=True)
