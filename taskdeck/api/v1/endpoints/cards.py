"""
Card catalog endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List
from taskdeck.core.database import get_session
from taskdeck.schemas.card import CardResponse
from taskdeck.services.catalog_service import list_cards, parse_category

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("", response_model=List[CardResponse])
async def get_cards(
    session: Session = Depends(get_session)
):
    """Get the full card catalog."""
    cards = list_cards(session)
    return [CardResponse.model_validate(card) for card in cards]


@router.get("/{category}", response_model=List[CardResponse])
async def get_cards_by_category(
    category: str,
    session: Session = Depends(get_session)
):
    """Get the cards of one category deck. Unknown categories are a 404."""
    card_category = parse_category(category)
    cards = list_cards(session, card_category)
    return [CardResponse.model_validate(card) for card in cards]
