"""
Card model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from sqlalchemy import Column, String as SAString
from taskdeck.models.enums import CardCategory, CardDifficulty

if TYPE_CHECKING:
    from taskdeck.models.completion import Completion


class Card(SQLModel, table=True):
    """Card table - the task catalog. Rows are loaded once and never mutated."""
    __tablename__ = "card"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: str
    category: CardCategory = Field(
        sa_column=Column(SAString, nullable=False, index=True)
    )  # stored as string, converted to enum
    difficulty: CardDifficulty = Field(
        sa_column=Column(SAString, nullable=False)
    )

    # Relationships
    completions: List["Completion"] = Relationship(back_populates="card")
