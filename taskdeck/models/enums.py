"""
Model enums.
"""
from enum import Enum


class CardCategory(str, Enum):
    """Deck a task card belongs to."""
    TEXT = "text"
    CODING = "coding"
    IMAGE = "image"
    MUSIC = "music"
    VIDEO = "video"


class CardDifficulty(str, Enum):
    """Difficulty of a task card."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
