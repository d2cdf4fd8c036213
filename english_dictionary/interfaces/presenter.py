"""Presenter protocol for user notifications."""

from typing import Protocol

from english_dictionary.presenters.message_level import MessageLevel


class PresenterProtocol(Protocol):
    """Interface for showing transient messages to the user (CLI, GUI, etc).

    Notifications are fire-and-forget; no return value is consumed.
    """

    def notify(self, level: MessageLevel, message: str) -> None:
        """Display a message at the given severity level.

        Args:
            level: Message severity
            message: The message to display
        """
        ...

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_success(self, message: str) -> None:
        """Display a success message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error (danger) message."""
        ...
