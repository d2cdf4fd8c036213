"""Design variables for consistent UI styling.

Usage in Python:
    from english_dictionary.gui.resources.styles import SPACING, FONT_SIZES

    layout.setSpacing(SPACING.md)

Usage in QSS (after substitution):
    padding: ${spacing-md}px;
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Spacing:
    """Spacing values based on 4px/8px grid system."""

    xxs: int = 4
    xs: int = 8
    sm: int = 12
    md: int = 16
    lg: int = 24
    xl: int = 32


@dataclass(frozen=True)
class FontSizes:
    """Font size values in pixels."""

    title: int = 24  # Window title
    headword: int = 22
    section: int = 15  # Meaning / Example / Synonyms headers
    body: int = 14
    caption: int = 12


@dataclass(frozen=True)
class BorderRadius:
    """Border radius values in pixels."""

    small: int = 4
    default: int = 6
    large: int = 8


SPACING = Spacing()
FONT_SIZES = FontSizes()
BORDER_RADIUS = BorderRadius()


def get_variable_dict() -> dict[str, str]:
    """Get all design variables as a dictionary for QSS substitution.

    Variable names follow the pattern category-name, with underscores
    turned into dashes (e.g. spacing-md, font-size-headword).
    """
    variables = {}
    for prefix, tokens in (
        ("spacing", SPACING),
        ("font-size", FONT_SIZES),
        ("border-radius", BORDER_RADIUS),
    ):
        for f in fields(tokens):
            variables[f"{prefix}-{f.name.replace('_', '-')}"] = str(getattr(tokens, f.name))
    return variables
