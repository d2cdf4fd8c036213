"""Command-line interface for English Dictionary."""
