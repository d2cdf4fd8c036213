"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter
from .message_level import MessageLevel

__all__ = ["ConsolePresenter", "MessageLevel"]
