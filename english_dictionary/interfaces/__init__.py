"""Interface protocols for English Dictionary."""

from .audio_player import AudioHandle, AudioPlayer
from .dictionary_provider import DictionaryProvider
from .presenter import PresenterProtocol
from .scheduler import LookupScheduler
from .view import LookupView

__all__ = [
    "AudioHandle",
    "AudioPlayer",
    "DictionaryProvider",
    "LookupScheduler",
    "LookupView",
    "PresenterProtocol",
]
