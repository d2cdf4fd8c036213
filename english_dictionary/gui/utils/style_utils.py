"""Utility functions for widget styling."""

from PyQt6.QtWidgets import QWidget


def refresh_widget_style(widget: QWidget) -> None:
    """Force a widget to refresh its style after a property change.

    Needed for QSS property selectors like [level="danger"]: after
    setProperty(), call this to apply the new style.

    Args:
        widget: The widget to refresh
    """
    if style := widget.style():
        style.unpolish(widget)
        style.polish(widget)
