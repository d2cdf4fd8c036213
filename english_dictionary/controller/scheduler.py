"""Synchronous lookup scheduler."""

from collections.abc import Callable

from english_dictionary.exceptions import LookupFailure
from english_dictionary.interfaces import DictionaryProvider
from english_dictionary.models import LexicalEntry


class ImmediateScheduler:
    """Run lookups on the calling thread.

    Implements LookupScheduler protocol. Used by the CLI, where there is no
    event loop to keep responsive, and by tests.
    """

    def __init__(self, provider: DictionaryProvider):
        self.provider = provider

    def schedule(
        self,
        term: str,
        on_success: Callable[[list[LexicalEntry]], None],
        on_failure: Callable[[LookupFailure], None],
    ) -> None:
        try:
            entries = self.provider.lookup(term)
        except LookupFailure as e:
            on_failure(e)
            return
        on_success(entries)
