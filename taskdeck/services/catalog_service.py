"""
Catalog service: loading the task cards and grouping them into category decks.
"""
# pyright: reportAttributeAccessIssue=false
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional
from sqlmodel import Session, select, func

from taskdeck.core.exceptions import NotFoundError
from taskdeck.models import Card, CardCategory, CardDifficulty
from taskdeck.services.default_cards import DEFAULT_CARDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogCard:
    """Immutable snapshot of a card row, safe to keep after the DB session closes."""
    id: int
    title: str
    description: str
    category: CardCategory
    difficulty: CardDifficulty

    @classmethod
    def from_model(cls, card: Card) -> "CatalogCard":
        return cls(
            id=card.id,
            title=card.title,
            description=card.description,
            category=CardCategory(card.category),
            difficulty=CardDifficulty(card.difficulty),
        )


class CatalogIndex:
    """
    The card catalog grouped by category.

    Every category of the fixed enumeration has an entry, possibly empty.
    Cards keep the order they were given in, which is what "view all"
    listings iterate over.
    """

    def __init__(self, cards: Iterable[CatalogCard]):
        self._by_category: Dict[CardCategory, List[CatalogCard]] = {
            category: [] for category in CardCategory
        }
        self._by_id: Dict[int, CatalogCard] = {}
        for card in cards:
            self._by_category[CardCategory(card.category)].append(card)
            self._by_id[card.id] = card

    def cards_in_category(self, category: CardCategory) -> List[CatalogCard]:
        """Cards of one category. Raises ValueError for a value outside CardCategory."""
        return list(self._by_category[CardCategory(category)])

    def ids_in_category(self, category: CardCategory) -> List[int]:
        return [card.id for card in self.cards_in_category(category)]

    def get(self, card_id: int) -> Optional[CatalogCard]:
        return self._by_id.get(card_id)

    def all_cards(self) -> List[CatalogCard]:
        return [card for category in CardCategory for card in self._by_category[category]]

    def categories(self) -> List[CardCategory]:
        return list(CardCategory)

    def counts(self) -> Dict[CardCategory, int]:
        return {category: len(cards) for category, cards in self._by_category.items()}

    def __len__(self) -> int:
        return len(self._by_id)


def parse_category(category: str) -> CardCategory:
    """
    Parse a category from a URL path segment.

    Args:
        category: Category name, case-insensitive

    Returns:
        The matching CardCategory

    Raises:
        NotFoundError: If the name is not one of the known categories
    """
    try:
        return CardCategory(category.strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in CardCategory)
        raise NotFoundError(f"Unknown category '{category}'. Must be one of: {valid}")


def list_cards(session: Session, category: Optional[CardCategory] = None) -> List[Card]:
    """Card rows in catalog order, optionally restricted to one category."""
    query = select(Card)
    if category is not None:
        query = query.where(Card.category == category.value)
    query = query.order_by(Card.id)
    return list(session.exec(query).all())


def load_catalog(session: Session) -> CatalogIndex:
    """Build a CatalogIndex from the current contents of the card table."""
    return CatalogIndex(CatalogCard.from_model(card) for card in list_cards(session))


def get_card(session: Session, card_id: int) -> Card:
    card = session.get(Card, card_id)
    if not card:
        raise NotFoundError(f"Card with id {card_id} not found")
    return card


def seed_default_cards(session: Session) -> int:
    """
    Insert the built-in task cards if the card table is empty.

    Returns:
        Number of cards inserted (0 when the catalog already had cards)
    """
    existing = session.exec(select(func.count(Card.id))).one()
    if existing:
        logger.info(f"Card catalog already has {existing} cards, skipping seed")
        return 0

    for data in DEFAULT_CARDS:
        session.add(Card(
            title=data["title"],
            description=data["description"],
            category=data["category"].value,
            difficulty=data["difficulty"].value,
        ))
    session.commit()

    logger.info(f"Seeded {len(DEFAULT_CARDS)} default cards")
    return len(DEFAULT_CARDS)
