"""Console presenter for CLI output."""

import sys

from .message_level import MessageLevel

_PREFIXES = {
    MessageLevel.INFO: "",
    MessageLevel.SUCCESS: "[OK] ",
    MessageLevel.WARNING: "[WARN] ",
    MessageLevel.DANGER: "[ERROR] ",
}


class ConsolePresenter:
    """Present notifications on the console (CLI implementation).

    Warnings and errors go to stderr so that piped lookup output stays clean.
    """

    def notify(self, level: MessageLevel, message: str) -> None:
        """Display a message at the given level."""
        stream = sys.stderr if level in (MessageLevel.WARNING, MessageLevel.DANGER) else sys.stdout
        print(f"{_PREFIXES[level]}{message}", file=stream)

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.notify(MessageLevel.INFO, message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self.notify(MessageLevel.SUCCESS, message)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        self.notify(MessageLevel.WARNING, message)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.notify(MessageLevel.DANGER, message)
