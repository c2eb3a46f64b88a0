"""
Completion model - junction table between profiles and the cards they finished.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from sqlalchemy import UniqueConstraint

if TYPE_CHECKING:
    from taskdeck.models.card import Card
    from taskdeck.models.profile import Profile


class Completion(SQLModel, table=True):
    """Completion table - one row per (profile, card) pair marked complete."""
    __tablename__ = "completion"
    __table_args__ = (
        UniqueConstraint("profile_id", "card_id", name="uq_completion_profile_card"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    profile_id: int = Field(foreign_key="profile.id", index=True)
    card_id: int = Field(foreign_key="card.id")

    # Relationships
    profile: Optional["Profile"] = Relationship(back_populates="completions")
    card: Optional["Card"] = Relationship(back_populates="completions")
