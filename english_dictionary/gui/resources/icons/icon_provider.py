"""Icon management system for the English Dictionary GUI.

Icons are Feather outline icons kept as inline SVG markup, so no image
files need to ship with the package.
"""

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QIcon, QPixmap

_SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
    'viewBox="0 0 24 24" fill="none" stroke="{color}" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{body}</svg>'
)

_ICON_BODIES = {
    "search": (
        '<circle cx="11" cy="11" r="8"></circle>'
        '<line x1="21" y1="21" x2="16.65" y2="16.65"></line>'
    ),
    "x": (
        '<line x1="18" y1="6" x2="6" y2="18"></line>'
        '<line x1="6" y1="6" x2="18" y2="18"></line>'
    ),
    "volume-2": (
        '<polygon points="11 5 6 9 2 9 2 15 6 15 11 19 11 5"></polygon>'
        '<path d="M19.07 4.93a10 10 0 0 1 0 14.14M15.54 8.46a5 5 0 0 1 0 7.07"></path>'
    ),
    "github": (
        '<path d="M9 19c-5 1.5-5-2.5-7-3m14 6v-3.87a3.37 3.37 0 0 0-.94-2.61'
        "c3.14-.35 6.44-1.54 6.44-7A5.44 5.44 0 0 0 20 4.77 5.07 5.07 0 0 0 19.91 1"
        "S18.73.65 16 2.48a13.38 13.38 0 0 0-7 0C6.27.65 5.09 1 5.09 1"
        "A5.07 5.07 0 0 0 5 4.77a5.44 5.44 0 0 0-1.5 3.78c0 5.42 3.3 6.61 6.44 7"
        'A3.37 3.37 0 0 0 9 18.13V22"></path>'
    ),
}


class IconProvider:
    """Centralized icon management for the application."""

    DEFAULT_COLOR = "#4b5563"

    @classmethod
    def get_svg(cls, name: str, size: int = 24, color: str = "currentColor") -> str:
        """Get the SVG markup of an icon.

        Args:
            name: Icon name (e.g. "search", "volume-2")
            size: Width and height in pixels
            color: Stroke color

        Returns:
            SVG markup, or an empty string for unknown names
        """
        body = _ICON_BODIES.get(name)
        if body is None:
            return ""
        return _SVG_TEMPLATE.format(size=size, color=color, body=body)

    @classmethod
    def get_icon(cls, name: str, size: int = 20, color: str | None = None) -> QIcon:
        """Get an icon as a QIcon.

        Args:
            name: Icon name
            size: Icon size in pixels
            color: Stroke color, defaults to DEFAULT_COLOR

        Returns:
            The icon, or an empty QIcon for unknown names
        """
        svg = cls.get_svg(name, size, color or cls.DEFAULT_COLOR)
        if not svg:
            return QIcon()

        pixmap = QPixmap()
        pixmap.loadFromData(QByteArray(svg.encode("utf-8")), "SVG")
        return QIcon(pixmap)
