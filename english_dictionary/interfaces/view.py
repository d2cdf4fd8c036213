"""Protocol for the lookup view surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from english_dictionary.models import ResultViewModel, UIState


class LookupView(Protocol):
    """Presentation boundary driven by the lookup controller."""

    def render(self, state: UIState, result: ResultViewModel) -> None:
        """Update every region from the state and result view-model."""
        ...

    def set_input_text(self, text: str) -> None:
        """Replace the search field contents."""
        ...

    def focus_input(self) -> None:
        """Move keyboard focus to the search field."""
        ...
