"""Utility functions for English Dictionary."""

from .logging_utils import LOG_FORMAT, setup_logging
from .text_utils import html_to_plain

__all__ = ["LOG_FORMAT", "setup_logging", "html_to_plain"]
