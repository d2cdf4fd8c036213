"""Dismissible banner for transient notifications."""

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton

from english_dictionary.gui.resources.styles import BORDER_RADIUS, LEVEL_COLORS
from english_dictionary.gui.utils import refresh_widget_style
from english_dictionary.presenters import MessageLevel


class NotificationBanner(QFrame):
    """A toast-like banner colored by message level.

    Hides itself after timeout_ms, or when the user dismisses it. A new
    message replaces the current one and restarts the timer.
    """

    def __init__(self, timeout_ms: int = 4000, parent=None):
        """Initialize the notification banner.

        Args:
            timeout_ms: Milliseconds before the banner hides itself
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.setObjectName("notification")

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(timeout_ms)
        self._timer.timeout.connect(self.hide)

        layout = QHBoxLayout()
        layout.setContentsMargins(8, 4, 8, 4)

        self.label = QLabel()
        self.label.setTextFormat(Qt.TextFormat.PlainText)
        self.label.setWordWrap(True)
        layout.addWidget(self.label, 1)

        dismiss_btn = QPushButton("✕")
        dismiss_btn.setFlat(True)
        dismiss_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        dismiss_btn.clicked.connect(self.hide)
        layout.addWidget(dismiss_btn)

        self.setLayout(layout)
        self.hide()

    @property
    def level(self) -> MessageLevel | None:
        value = self.property("level")
        return MessageLevel(value) if value else None

    def show_message(self, level: MessageLevel, message: str) -> None:
        """Show a message.

        Args:
            level: Message severity, selects the banner color
            message: Text to show
        """
        self.label.setText(message)
        self.setProperty("level", level.value)
        self.setStyleSheet(
            f"#notification {{ background-color: {LEVEL_COLORS[level]}; "
            f"border-radius: {BORDER_RADIUS.small}px; }}"
        )
        refresh_widget_style(self)
        self.show()
        self._timer.start()
