"""
Models package - imports all models so SQLModel registers every table.
"""
# Import enums first
from taskdeck.models.enums import CardCategory, CardDifficulty

# Import all models
from taskdeck.models.card import Card
from taskdeck.models.profile import Profile
from taskdeck.models.completion import Completion

__all__ = [
    'CardCategory',
    'CardDifficulty',
    'Card',
    'Profile',
    'Completion',
]
