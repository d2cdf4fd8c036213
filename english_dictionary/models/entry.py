"""Data models for lexical records returned by the dictionary service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from english_dictionary.exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Phonetic:
    """A pronunciation, optionally with an audio recording."""

    text: str | None = None
    audio: str | None = None  # URL, may be empty

    @property
    def has_audio(self) -> bool:
        """Check if a playable audio URL is present."""
        return bool(self.audio)


@dataclass(frozen=True)
class Definition:
    """One definition of a meaning with an optional usage example."""

    definition: str
    example: str | None = None


@dataclass(frozen=True)
class Meaning:
    """One sense of a word."""

    part_of_speech: str
    definitions: tuple[Definition, ...] = ()
    synonyms: tuple[str, ...] = ()


@dataclass(frozen=True)
class LexicalEntry:
    """A full lexical record for a term.

    Only ``phonetics[0]``, ``meanings[0]`` and ``meanings[0].definitions[0]``
    are shown to the user; the remaining senses are kept for completeness.
    """

    word: str
    phonetics: tuple[Phonetic, ...] = ()
    meanings: tuple[Meaning, ...] = field(default_factory=tuple)

    @property
    def first_phonetic(self) -> Phonetic | None:
        return self.phonetics[0] if self.phonetics else None

    @property
    def first_meaning(self) -> Meaning | None:
        return self.meanings[0] if self.meanings else None

    @property
    def first_definition(self) -> Definition | None:
        meaning = self.first_meaning
        if meaning is None or not meaning.definitions:
            return None
        return meaning.definitions[0]

    def __str__(self) -> str:
        return self.word


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _parse_items(raws: list, parse: Callable[[Any], T], kind: str) -> tuple[T, ...]:
    """Parse a JSON array; the first item must be valid, malformed later ones are dropped."""
    items = []
    for index, raw in enumerate(raws):
        try:
            items.append(parse(raw))
        except MalformedResponseError as e:
            if index == 0:
                raise
            logger.debug(f"Skipping malformed {kind} #{index}: {e}")
    return tuple(items)


def _parse_phonetic(raw: Any) -> Phonetic:
    if not isinstance(raw, dict):
        return Phonetic()
    return Phonetic(text=_optional_str(raw.get("text")), audio=_optional_str(raw.get("audio")))


def _parse_definition(raw: Any) -> Definition:
    if not isinstance(raw, dict) or not isinstance(raw.get("definition"), str):
        raise MalformedResponseError("definition entry without definition text")
    return Definition(definition=raw["definition"], example=_optional_str(raw.get("example")))


def _parse_meaning(raw: Any) -> Meaning:
    if not isinstance(raw, dict):
        raise MalformedResponseError("meaning is not an object")

    definitions = raw.get("definitions") or []
    synonyms = raw.get("synonyms") or []
    if not isinstance(definitions, list) or not isinstance(synonyms, list):
        raise MalformedResponseError("meaning has invalid definitions or synonyms")

    return Meaning(
        part_of_speech=_optional_str(raw.get("partOfSpeech")) or "",
        definitions=_parse_items(definitions, _parse_definition, "definition"),
        synonyms=tuple(s for s in synonyms if isinstance(s, str)),
    )


def _parse_entry(raw: Any) -> LexicalEntry:
    if not isinstance(raw, dict) or not isinstance(raw.get("word"), str):
        raise MalformedResponseError("entry without headword")

    phonetics = raw.get("phonetics") or []
    meanings = raw.get("meanings") or []
    if not isinstance(phonetics, list) or not isinstance(meanings, list):
        raise MalformedResponseError("entry has invalid phonetics or meanings")

    return LexicalEntry(
        word=raw["word"],
        phonetics=tuple(_parse_phonetic(p) for p in phonetics),
        meanings=_parse_items(meanings, _parse_meaning, "meaning"),
    )


def parse_entries(payload: Any) -> list[LexicalEntry]:
    """Parse a decoded JSON response into lexical entries.

    Only the first entry, its first meaning and that meaning's first
    definition are required to be well formed. Malformed items after them
    are skipped, since nothing past the first of each is displayed.

    Args:
        payload: Decoded JSON body of the entries endpoint.

    Returns:
        Parsed entries; the first one has at least one meaning with at
        least one definition.

    Raises:
        MalformedResponseError: If the payload has no usable first entry.
    """
    if not isinstance(payload, list) or not payload:
        raise MalformedResponseError("expected a non-empty list of entries")

    entries = list(_parse_items(payload, _parse_entry, "entry"))

    if entries[0].first_meaning is None:
        raise MalformedResponseError(f"entry '{entries[0].word}' has no meanings")
    if entries[0].first_definition is None:
        raise MalformedResponseError(f"entry '{entries[0].word}' has no definitions")

    return entries
