"""Text processing utilities."""

import html
import re


def html_to_plain(text: str) -> str:
    """Remove markup from an info message for plain-text output.

    Args:
        text: Message possibly containing inline tags and entities

    Returns:
        Text without tags, with entities decoded and whitespace normalized
    """
    # Tags first, so that escaped "<" from user input survives as text
    text = re.sub(r"<[^>]+>", "", text)
    text = html.unescape(text)

    return " ".join(text.split())
