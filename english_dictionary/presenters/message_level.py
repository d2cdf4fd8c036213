"""Message level enum for user notifications."""

from enum import Enum


class MessageLevel(Enum):
    """Severity level for messages displayed to the user."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
