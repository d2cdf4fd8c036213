"""Audio playback through QtMultimedia."""

import logging

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

logger = logging.getLogger(__name__)


class QtAudioHandle:
    """A pronunciation loaded into its own QMediaPlayer."""

    def __init__(self, source: str, parent: QObject | None = None):
        self._source = source
        self._output = QAudioOutput(parent)
        self._player = QMediaPlayer(parent)
        self._player.setAudioOutput(self._output)
        self._player.errorOccurred.connect(self._on_error)
        self._player.setSource(QUrl(source))

    @property
    def source(self) -> str:
        return self._source

    def play(self) -> None:
        if self._player.playbackState() == QMediaPlayer.PlaybackState.PlayingState:
            self._player.setPosition(0)
        self._player.play()

    def stop(self) -> None:
        self._player.stop()
        self._player.deleteLater()
        self._output.deleteLater()

    def _on_error(self, error, message: str) -> None:
        logger.warning(f"Cannot play {self._source}: {message}")


class QtAudioPlayer:
    """Implements AudioPlayer protocol using QtMultimedia."""

    def __init__(self, parent: QObject | None = None):
        self._parent = parent

    def load(self, url: str) -> QtAudioHandle:
        return QtAudioHandle(url, self._parent)
