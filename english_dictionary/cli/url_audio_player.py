"""Audio player for the console, delegating playback to the system."""

import logging
import webbrowser

logger = logging.getLogger(__name__)


class UrlAudioHandle:
    """Pronunciation handle that opens its URL with the default application."""

    def __init__(self, source: str):
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    def play(self) -> None:
        if not webbrowser.open(self._source):
            logger.warning(f"No application available to play {self._source}")

    def stop(self) -> None:
        # Playback is owned by the external application
        pass


class UrlAudioPlayer:
    """Implements AudioPlayer protocol for the CLI."""

    def load(self, url: str) -> UrlAudioHandle:
        return UrlAudioHandle(url)
