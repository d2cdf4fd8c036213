"""GUI presenter implementation using Qt signals for thread-safe communication."""

from PyQt6.QtCore import QObject, pyqtSignal

from english_dictionary.presenters import MessageLevel


class GUIPresenter(QObject):
    """Thread-safe presenter using Qt signals.

    Implements PresenterProtocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.

    Every notification is emitted through a single signal carrying the
    level, so the window can route all of them to one banner.
    """

    notification_signal = pyqtSignal(object, str)  # MessageLevel, message

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def notify(self, level: MessageLevel, message: str) -> None:
        """Display a message at the given level.

        Args:
            level: Message severity
            message: The message to display
        """
        self.notification_signal.emit(level, message)

    def show_info(self, message: str) -> None:
        self.notify(MessageLevel.INFO, message)

    def show_success(self, message: str) -> None:
        self.notify(MessageLevel.SUCCESS, message)

    def show_warning(self, message: str) -> None:
        self.notify(MessageLevel.WARNING, message)

    def show_error(self, message: str) -> None:
        self.notify(MessageLevel.DANGER, message)
