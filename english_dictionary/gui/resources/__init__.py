"""GUI resources (icons, styles)."""
