"""Result panel showing one dictionary entry."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from english_dictionary.gui.resources.icons import IconProvider
from english_dictionary.gui.resources.styles import SPACING
from english_dictionary.models import ResultViewModel


def _plain_label(object_name: str) -> QLabel:
    # Dictionary text is shown verbatim, never interpreted as markup
    label = QLabel()
    label.setObjectName(object_name)
    label.setTextFormat(Qt.TextFormat.PlainText)
    label.setWordWrap(True)
    label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
    return label


class _Section(QWidget):
    """Titled region of the result panel."""

    def __init__(self, title: str, parent=None):
        super().__init__(parent)
        self.layout_ = QVBoxLayout()
        self.layout_.setContentsMargins(0, 0, 0, 0)
        self.layout_.setSpacing(SPACING.xxs)

        title_label = QLabel(title)
        title_label.setObjectName("section-title")
        self.layout_.addWidget(title_label)
        self.setLayout(self.layout_)


class ResultPanel(QFrame):
    """Panel with headword, pronunciation, meaning, example and synonyms.

    Regions:
    - headword and "<part of speech> <phonetic>" subtitle
    - play button for the pronunciation
    - meaning
    - example (hidden when the definition has none)
    - synonyms as clickable buttons (hidden when there are none)
    """

    play_requested = pyqtSignal()
    synonym_activated = pyqtSignal(str)

    SYNONYMS_PER_ROW = 4

    def __init__(self, parent=None):
        """Initialize the result panel.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._synonyms: tuple[str, ...] = ()
        self.synonym_buttons: list[QPushButton] = []
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, SPACING.sm, 0, 0)
        layout.setSpacing(SPACING.md)

        # Headword row
        word_row = QHBoxLayout()
        word_detail = QVBoxLayout()
        word_detail.setSpacing(2)
        self.headword_label = _plain_label("headword")
        self.subtitle_label = _plain_label("subtitle")
        word_detail.addWidget(self.headword_label)
        word_detail.addWidget(self.subtitle_label)
        word_row.addLayout(word_detail)
        word_row.addStretch()

        self.play_button = QToolButton()
        self.play_button.setIcon(IconProvider.get_icon("volume-2", size=24))
        self.play_button.setToolTip("Play pronunciation")
        self.play_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.play_button.clicked.connect(self.play_requested.emit)
        word_row.addWidget(self.play_button)
        layout.addLayout(word_row)

        # Meaning
        self.meaning_section = _Section("Meaning")
        self.meaning_label = _plain_label("meaning")
        self.meaning_section.layout_.addWidget(self.meaning_label)
        layout.addWidget(self.meaning_section)

        # Example
        self.example_section = _Section("Example")
        self.example_label = _plain_label("example")
        self.example_section.layout_.addWidget(self.example_label)
        layout.addWidget(self.example_section)

        # Synonyms
        self.synonyms_section = _Section("Synonyms")
        self._synonyms_grid = QGridLayout()
        self._synonyms_grid.setHorizontalSpacing(SPACING.xs)
        self._synonyms_grid.setVerticalSpacing(SPACING.xs)
        self._synonyms_grid.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.synonyms_section.layout_.addLayout(self._synonyms_grid)
        layout.addWidget(self.synonyms_section)

        layout.addStretch()
        self.setLayout(layout)

    def show_result(self, result: ResultViewModel) -> None:
        """Update every region from the view-model.

        Args:
            result: Contents and visibility of the regions
        """
        self.headword_label.setText(result.headword)
        self.subtitle_label.setText(result.subtitle)
        self.play_button.setVisible(result.audio_visible)
        self.meaning_label.setText(result.meaning)

        self.example_label.setText(result.example)
        self.example_section.setVisible(result.example_visible)

        if result.synonyms != self._synonyms:
            self._set_synonyms(result.synonyms)
        self.synonyms_section.setVisible(result.synonyms_visible)

    def _set_synonyms(self, synonyms: tuple[str, ...]) -> None:
        for button in self.synonym_buttons:
            self._synonyms_grid.removeWidget(button)
            button.deleteLater()
        self.synonym_buttons = []

        for i, term in enumerate(synonyms):
            button = QPushButton(term)
            button.setObjectName("synonym")
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.clicked.connect(lambda _checked=False, t=term: self.synonym_activated.emit(t))
            row, col = divmod(i, self.SYNONYMS_PER_ROW)
            self._synonyms_grid.addWidget(button, row, col)
            self.synonym_buttons.append(button)

        self._synonyms = synonyms
