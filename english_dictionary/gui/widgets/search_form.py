"""Search form with a clear button."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLineEdit, QToolButton, QWidget

from english_dictionary.gui.resources.icons import IconProvider


class SearchForm(QWidget):
    """Single-field search form.

    Pressing Enter (or the search icon) submits the form values; the clear
    button is shown or hidden by the controller through set_clear_visible().
    """

    text_edited = pyqtSignal(str)  # raw text on every keystroke
    submitted = pyqtSignal(dict)  # {"word": <raw text>}
    clear_requested = pyqtSignal()

    def __init__(self, parent=None):
        """Initialize the search form.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.input = QLineEdit()
        self.input.setObjectName("search-input")
        self.input.setPlaceholderText("Search a word")
        search_action = self.input.addAction(
            IconProvider.get_icon("search"), QLineEdit.ActionPosition.LeadingPosition
        )
        search_action.triggered.connect(self._on_submit)
        self.input.textEdited.connect(self.text_edited.emit)
        self.input.returnPressed.connect(self._on_submit)
        layout.addWidget(self.input)

        self.clear_button = QToolButton()
        self.clear_button.setIcon(IconProvider.get_icon("x"))
        self.clear_button.setToolTip("Clear")
        self.clear_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.clear_button.clicked.connect(self.clear_requested.emit)
        self.clear_button.setVisible(False)
        layout.addWidget(self.clear_button)

        self.setLayout(layout)

    def form_values(self) -> dict[str, str]:
        """Current form values keyed by field name."""
        return {"word": self.input.text()}

    def set_text(self, text: str) -> None:
        self.input.setText(text)

    def set_clear_visible(self, visible: bool) -> None:
        self.clear_button.setVisible(visible)

    def focus_input(self) -> None:
        self.input.setFocus()

    def _on_submit(self) -> None:
        self.submitted.emit(self.form_values())
