"""Worker thread for dictionary lookups."""

import threading

from PyQt6.QtCore import QThread, pyqtSignal

from english_dictionary.exceptions import LookupFailure
from english_dictionary.interfaces import DictionaryProvider


class LookupWorkerThread(QThread):
    """Worker thread that runs one dictionary request in the background.

    Emits exactly one of result_ready (list of LexicalEntry) or failed
    (LookupFailure), unless cancelled first. Cancellation only suppresses
    the signals; the HTTP request itself runs to completion or timeout.
    """

    result_ready = pyqtSignal(object)  # list[LexicalEntry]
    failed = pyqtSignal(object)  # LookupFailure

    def __init__(self, provider: DictionaryProvider, term: str, parent=None):
        """Initialize the lookup worker thread.

        Args:
            provider: Dictionary provider to query
            term: Word to look up
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.provider = provider
        self.term = term
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Request that no result is emitted."""
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self) -> None:
        """Execute the lookup in the background thread."""
        try:
            entries = self.provider.lookup(self.term)
        except LookupFailure as e:
            if not self.is_cancelled:
                self.failed.emit(e)
            return
        except Exception as e:
            if not self.is_cancelled:
                failure = LookupFailure(f"Unexpected error looking up '{self.term}': {e}", self.term)
                failure.__cause__ = e
                self.failed.emit(failure)
            return

        if not self.is_cancelled:
            self.result_ready.emit(entries)
