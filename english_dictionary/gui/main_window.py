"""Main window for the English Dictionary GUI."""

import logging

from PyQt6.QtCore import QSize, Qt, QUrl
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import QLabel, QMainWindow, QToolButton, QVBoxLayout, QWidget

from english_dictionary.config import DictionaryConfig
from english_dictionary.controller import LookupController
from english_dictionary.gui.audio import QtAudioPlayer
from english_dictionary.gui.presenters import GUIPresenter
from english_dictionary.gui.resources.icons import IconProvider
from english_dictionary.gui.resources.styles import SPACING
from english_dictionary.gui.widgets import NotificationBanner, ResultPanel, SearchForm
from english_dictionary.gui.workers import QtLookupScheduler
from english_dictionary.interfaces import DictionaryProvider
from english_dictionary.models import ResultViewModel, UIState

logger = logging.getLogger(__name__)

AUTHOR_URL = "https://github.com/nagoev-alim"


class MainWindow(QMainWindow):
    """Dictionary window: search form, info line, result panel and banner.

    Implements LookupView protocol; every widget event is forwarded to the
    LookupController, which calls render() back with the new state.
    """

    def __init__(self, config: DictionaryConfig, provider: DictionaryProvider):
        """Initialize the main window.

        Args:
            config: Application configuration
            provider: Dictionary provider used by the lookup workers
        """
        super().__init__()
        self.config = config

        self.setWindowTitle("English Dictionary")
        self.resize(config.window_width, config.window_height)

        self._setup_ui()

        self.presenter = GUIPresenter(self)
        self.presenter.notification_signal.connect(self.notification_banner.show_message)
        self.scheduler = QtLookupScheduler(provider, self)

        self.controller = LookupController(
            config=config,
            scheduler=self.scheduler,
            presenter=self.presenter,
            audio_player=QtAudioPlayer(self),
            view=self,
        )
        self._connect_signals()
        self.controller.render()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        central = QWidget()
        central.setObjectName("dictionary-card")
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.lg, SPACING.lg, SPACING.lg, SPACING.lg)
        layout.setSpacing(SPACING.sm)

        title = QLabel("English Dictionary")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self.search_form = SearchForm()
        layout.addWidget(self.search_form)

        self.info_label = QLabel()
        self.info_label.setObjectName("info")
        self.info_label.setTextFormat(Qt.TextFormat.RichText)
        self.info_label.setWordWrap(True)
        layout.addWidget(self.info_label)

        self.result_panel = ResultPanel()
        layout.addWidget(self.result_panel, 1)

        self.notification_banner = NotificationBanner(self.config.notification_timeout_ms)
        layout.addWidget(self.notification_banner)

        self.author_link = QToolButton()
        self.author_link.setObjectName("author-link")
        self.author_link.setIcon(IconProvider.get_icon("github", size=24))
        self.author_link.setIconSize(QSize(24, 24))
        self.author_link.setToolTip(AUTHOR_URL)
        self.author_link.setCursor(Qt.CursorShape.PointingHandCursor)
        layout.addWidget(self.author_link, 0, Qt.AlignmentFlag.AlignCenter)

        central.setLayout(layout)
        self.setCentralWidget(central)

    def _connect_signals(self) -> None:
        self.search_form.text_edited.connect(self.controller.handle_input_change)
        self.search_form.submitted.connect(self.controller.handle_submit)
        self.search_form.clear_requested.connect(self.controller.handle_clear)
        self.result_panel.play_requested.connect(self.controller.play_pronunciation)
        self.result_panel.synonym_activated.connect(self.controller.handle_synonym_activated)
        self.author_link.clicked.connect(self._open_author_page)

    def _open_author_page(self) -> None:
        QDesktopServices.openUrl(QUrl(AUTHOR_URL))

    # LookupView protocol

    def render(self, state: UIState, result: ResultViewModel) -> None:
        self.search_form.set_clear_visible(state.clear_visible)
        self.info_label.setText(state.info_html)
        self.result_panel.setVisible(state.result_visible)
        if state.result_visible:
            self.result_panel.show_result(result)

    def set_input_text(self, text: str) -> None:
        self.search_form.set_text(text)

    def focus_input(self) -> None:
        self.search_form.focus_input()

    def closeEvent(self, event) -> None:
        """Stop outstanding lookups before the window closes."""
        logger.debug(f"Closing with {self.scheduler.pending} pending lookups")
        self.scheduler.shutdown()
        super().closeEvent(event)
