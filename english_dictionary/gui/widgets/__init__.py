"""Widgets of the dictionary window."""

from .notification_banner import NotificationBanner
from .result_panel import ResultPanel
from .search_form import SearchForm

__all__ = ["NotificationBanner", "ResultPanel", "SearchForm"]
