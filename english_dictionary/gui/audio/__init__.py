"""Pronunciation playback for the GUI."""

from .qt_audio_player import QtAudioHandle, QtAudioPlayer

__all__ = ["QtAudioHandle", "QtAudioPlayer"]
