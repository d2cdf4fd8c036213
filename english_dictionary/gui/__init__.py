"""PyQt6 desktop interface for English Dictionary."""
