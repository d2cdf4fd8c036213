"""Protocol for running lookups outside the UI handlers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from english_dictionary.exceptions import LookupFailure
    from english_dictionary.models import LexicalEntry


class LookupScheduler(Protocol):
    """Runs one dictionary request and reports back through callbacks.

    Exactly one of the callbacks is invoked per scheduled request, on the
    thread that owns the controller.
    """

    def schedule(
        self,
        term: str,
        on_success: Callable[[list[LexicalEntry]], None],
        on_failure: Callable[[LookupFailure], None],
    ) -> None:
        """Start a lookup for term.

        Args:
            term: Word to look up
            on_success: Called with the parsed entries
            on_failure: Called with the lookup failure
        """
        ...
