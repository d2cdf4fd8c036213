"""Protocol for dictionary lookup providers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from english_dictionary.models import LexicalEntry


class DictionaryProvider(Protocol):
    """Interface for a dictionary backend that returns lexical entries."""

    @property
    def name(self) -> str:
        """Human-readable name for this provider (e.g., 'Free Dictionary API')."""
        ...

    def lookup(self, term: str) -> list[LexicalEntry]:
        """Look up all entries for a term.

        Args:
            term: Trimmed, non-empty English word.

        Returns:
            Parsed entries, the first of which has at least one definition.

        Raises:
            LookupFailure: On network errors, missing words or malformed payloads.
        """
        ...
