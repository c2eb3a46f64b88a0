"""
Per-category tracking of which cards were already drawn in the current cycle.
"""
from enum import Enum
from typing import Dict, Iterable, List, Set

from taskdeck.models.enums import CardCategory


class DrawPhase(str, Enum):
    """Where a category's deck is in its draw cycle."""
    IDLE = "idle"
    DRAWING = "drawing"
    DRAWN = "drawn"


class DrawState:
    """
    Drawn-card ids per category.

    The drawn set of a category only ever holds ids of that category's cards,
    so `available_ids` is empty exactly when the category is exhausted.
    """

    def __init__(self):
        self._drawn: Dict[CardCategory, Set[int]] = {category: set() for category in CardCategory}

    def available_ids(self, category: CardCategory, all_ids: Iterable[int]) -> List[int]:
        """Ids from `all_ids` not drawn yet in this cycle, in the given order."""
        drawn = self._drawn[CardCategory(category)]
        return [card_id for card_id in all_ids if card_id not in drawn]

    def mark_drawn(self, category: CardCategory, card_id: int) -> None:
        # caller guarantees card_id belongs to category
        self._drawn[CardCategory(category)].add(card_id)

    def drawn_ids(self, category: CardCategory) -> Set[int]:
        return set(self._drawn[CardCategory(category)])

    def reset_category(self, category: CardCategory) -> None:
        self._drawn[CardCategory(category)].clear()

    def reset_all(self) -> None:
        for drawn in self._drawn.values():
            drawn.clear()

    def has_drawn(self) -> bool:
        return any(self._drawn.values())

    def snapshot(self) -> Dict[str, List[int]]:
        """Drawn ids per category value, sorted, for responses and logging."""
        return {category.value: sorted(drawn) for category, drawn in self._drawn.items()}
