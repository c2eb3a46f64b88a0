"""
Profile model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime

if TYPE_CHECKING:
    from taskdeck.models.completion import Completion


class Profile(SQLModel, table=True):
    """Profile table - display names people draw cards as."""
    __tablename__ = "profile"

    id: Optional[int] = Field(default=None, primary_key=True)
    display_name: str = Field(unique=True, index=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    # Relationships
    completions: List["Completion"] = Relationship(back_populates="profile")
