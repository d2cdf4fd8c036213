"""View-model for the result panel."""

from dataclasses import dataclass


@dataclass
class ResultViewModel:
    """Contents and visibility of the result panel regions.

    The view renders this struct as-is; it never inspects lexical entries.
    """

    headword: str = ""
    subtitle: str = ""  # "<part of speech> <phonetic text>"
    meaning: str = ""
    example: str = ""
    example_visible: bool = False
    synonyms: tuple[str, ...] = ()
    synonyms_visible: bool = False
    audio_visible: bool = False
