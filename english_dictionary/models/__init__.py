"""Data models for English Dictionary."""

from .entry import Definition, LexicalEntry, Meaning, Phonetic, parse_entries
from .state import DEFAULT_PROMPT, UIState
from .view import ResultViewModel

__all__ = [
    "Phonetic",
    "Definition",
    "Meaning",
    "LexicalEntry",
    "parse_entries",
    "UIState",
    "DEFAULT_PROMPT",
    "ResultViewModel",
]
