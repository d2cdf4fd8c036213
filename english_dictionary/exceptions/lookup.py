"""Dictionary lookup exceptions."""

from .base import DictionaryException


class LookupFailure(DictionaryException):
    """Raised when a word cannot be looked up.

    Covers network errors, non-2xx responses and payloads that do not
    contain a usable entry.
    """

    def __init__(self, message: str, term: str = ""):
        super().__init__(message)
        self.term = term


class LookupNetworkError(LookupFailure):
    """Raised when the dictionary service cannot be reached."""

    pass


class WordNotFoundError(LookupFailure):
    """Raised when the dictionary service has no entry for the term."""

    pass


class MalformedResponseError(LookupFailure):
    """Raised when the response body is not a usable list of entries."""

    pass
