"""Custom exceptions for English Dictionary."""

from .base import DictionaryException
from .lookup import LookupFailure, LookupNetworkError, MalformedResponseError, WordNotFoundError
from .validation import ValidationError

__all__ = [
    "DictionaryException",
    "ValidationError",
    "LookupFailure",
    "LookupNetworkError",
    "WordNotFoundError",
    "MalformedResponseError",
]
