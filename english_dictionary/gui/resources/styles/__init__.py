"""GUI styling."""

from ._variables import BORDER_RADIUS, FONT_SIZES, SPACING
from .stylesheet import LEVEL_COLORS, build_stylesheet

__all__ = ["SPACING", "FONT_SIZES", "BORDER_RADIUS", "LEVEL_COLORS", "build_stylesheet"]
