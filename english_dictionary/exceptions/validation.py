"""Validation-related exceptions."""

from .base import DictionaryException


class ValidationError(DictionaryException):
    """Raised when a submitted search term is empty or whitespace-only."""

    pass
