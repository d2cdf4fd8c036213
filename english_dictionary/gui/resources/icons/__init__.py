"""Inline SVG icons."""

from .icon_provider import IconProvider

__all__ = ["IconProvider"]
