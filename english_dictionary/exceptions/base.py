"""Base exception classes for English Dictionary."""


class DictionaryException(Exception):
    """Base exception for all English Dictionary errors.

    All custom exceptions in the english_dictionary package should inherit
    from this base class for consistent error handling.
    """

    pass
