from fastapi import APIRouter, Depends
from sqlmodel import Session
from taskdeck.core.database import get_session
from taskdeck.schemas.card import DecksResponse, DeckResponse
from taskdeck.services.catalog_service import load_catalog

router = APIRouter(prefix="/decks", tags=["cards"])


@router.get("", response_model=DecksResponse)
async def get_decks(
    session: Session = Depends(get_session)
):
    """Get every category deck with its card count."""
    catalog = load_catalog(session)
    return DecksResponse(
        decks=[
            DeckResponse(category=category, card_count=count)
            for category, count in catalog.counts().items()
        ]
    )
