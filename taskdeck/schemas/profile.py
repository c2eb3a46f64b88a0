"""
Profile schemas.
"""
from pydantic import Field, field_validator
from datetime import datetime
from taskdeck.schemas.utils import CamelModel, normalize_display_name


class ProfileResponse(CamelModel):
    """Profile response schema."""
    id: int
    display_name: str
    created_at: datetime


class CreateProfileRequest(CamelModel):
    """Request schema for creating (or fetching) a profile by display name."""
    display_name: str = Field(..., max_length=100, description="Unique display name")

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v: str) -> str:
        return normalize_display_name(v)


class SuccessResponse(CamelModel):
    """Generic acknowledgement."""
    success: bool = True
