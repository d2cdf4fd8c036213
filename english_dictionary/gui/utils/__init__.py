"""GUI utility helpers."""

from .style_utils import refresh_widget_style

__all__ = ["refresh_widget_style"]
