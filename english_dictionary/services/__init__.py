"""Services for English Dictionary."""

from .free_dictionary_provider import FreeDictionaryProvider

__all__ = ["FreeDictionaryProvider"]
