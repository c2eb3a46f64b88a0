"""
Card schemas.
"""
from typing import List
from taskdeck.models.enums import CardCategory, CardDifficulty
from taskdeck.schemas.utils import CamelModel


class CardResponse(CamelModel):
    """Card response schema."""
    id: int
    title: str
    description: str
    category: CardCategory
    difficulty: CardDifficulty


class DeckResponse(CamelModel):
    """One category deck with the number of cards in it."""
    category: CardCategory
    card_count: int


class DecksResponse(CamelModel):
    """Response schema for the deck overview."""
    decks: List[DeckResponse]
