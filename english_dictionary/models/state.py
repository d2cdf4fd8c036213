"""Transient UI state owned by the lookup controller."""

from dataclasses import dataclass

from english_dictionary.interfaces.audio_player import AudioHandle

DEFAULT_PROMPT = "Type any existing word and press enter to get meaning, example, synonyms, etc."


@dataclass
class UIState:
    """State of the search form and result panel for one session.

    Created once at startup and never persisted.
    """

    query_text: str = ""
    clear_visible: bool = False
    info_html: str = DEFAULT_PROMPT
    result_visible: bool = False
    current_audio: AudioHandle | None = None
    request_seq: int = 0  # Sequence number of the latest issued lookup

    @property
    def has_audio(self) -> bool:
        return self.current_audio is not None
