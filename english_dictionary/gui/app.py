"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from english_dictionary.config import ConfigManager
from english_dictionary.gui.main_window import MainWindow
from english_dictionary.gui.resources.icons import IconProvider
from english_dictionary.gui.resources.styles import build_stylesheet
from english_dictionary.services import FreeDictionaryProvider
from english_dictionary.utils import LOG_FORMAT


def run() -> int:
    """Create the application and run the Qt event loop.

    Returns:
        Exit code of the event loop
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("English Dictionary")
    app.setOrganizationName("EnglishDictionary")
    app.setWindowIcon(IconProvider.get_icon("search", size=64))
    app.setStyleSheet(build_stylesheet())

    config = ConfigManager.load_config()
    provider = FreeDictionaryProvider(config.api_url, timeout=config.request_timeout)

    window = MainWindow(config, provider)
    window.show()

    return app.exec()


def main():
    """Launch the English Dictionary GUI application."""
    sys.exit(run())


if __name__ == "__main__":
    main()
