"""
Custom exceptions for the application.
"""


class TaskDeckException(Exception):
    """Base exception for all TaskDeck application exceptions."""
    pass


class ValidationError(TaskDeckException):
    """Raised when input is missing or malformed."""
    pass


class NotFoundError(TaskDeckException):
    """Raised when a requested profile, card, category or session does not exist."""
    pass


class ConfigurationError(TaskDeckException):
    """Raised when the card catalog cannot serve a request (e.g. an empty category)."""
    pass


class TransientStoreError(TaskDeckException):
    """Raised when the underlying store is unavailable. Never retried internally."""
    pass
