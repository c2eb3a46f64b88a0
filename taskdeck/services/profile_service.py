"""
Profile service for business logic related to profile operations.
"""
# pyright: reportAttributeAccessIssue=false
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from typing import List, Optional

from taskdeck.core.exceptions import NotFoundError, ValidationError
from taskdeck.models import Profile
from taskdeck.services.session_service import ActiveProfile

logger = logging.getLogger(__name__)


def get_profile_by_name(session: Session, display_name: str) -> Optional[Profile]:
    return session.exec(
        select(Profile).where(Profile.display_name == display_name)
    ).first()


def get_or_create_profile(session: Session, display_name: str) -> Profile:
    """
    Return the profile with this display name, creating it if needed.

    Creating a name that already exists is not an error: the existing profile
    is returned. Two requests racing to create the same name both end up with
    the row that won the unique constraint.

    Args:
        session: Database session
        display_name: Display name, already trimmed

    Raises:
        ValidationError: If the display name is empty
    """
    display_name = display_name.strip()
    if not display_name:
        raise ValidationError("displayName must not be empty")

    existing = get_profile_by_name(session, display_name)
    if existing:
        return existing

    profile = Profile(display_name=display_name)
    session.add(profile)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        existing = get_profile_by_name(session, display_name)
        if existing is None:
            raise
        return existing

    session.refresh(profile)
    logger.info(f"Created profile {profile.id} ({profile.display_name})")
    return profile


def list_profiles(session: Session) -> List[Profile]:
    return list(session.exec(select(Profile).order_by(Profile.id)).all())


def get_profile(session: Session, profile_id: int) -> Profile:
    """
    Raises:
        NotFoundError: If no profile has this id
    """
    profile = session.get(Profile, profile_id)
    if not profile:
        raise NotFoundError(f"Profile with id {profile_id} not found")
    return profile


def to_active_profile(profile: Profile) -> ActiveProfile:
    return ActiveProfile(id=profile.id, display_name=profile.display_name)
