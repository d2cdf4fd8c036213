"""Lookup scheduler running requests on Qt worker threads."""

import logging
from collections.abc import Callable

from PyQt6.QtCore import QDeadlineTimer, QObject

from english_dictionary.exceptions import LookupFailure
from english_dictionary.interfaces import DictionaryProvider
from english_dictionary.models import LexicalEntry

from .lookup_worker import LookupWorkerThread

logger = logging.getLogger(__name__)


class QtLookupScheduler(QObject):
    """Implements LookupScheduler protocol with one QThread per request.

    Worker signals are queued back to the GUI thread, so the callbacks
    always run where the controller lives. Several lookups may be in
    flight at once.
    """

    SHUTDOWN_WAIT_MS = 2000

    def __init__(self, provider: DictionaryProvider, parent=None):
        super().__init__(parent)
        self.provider = provider
        self._workers: set[LookupWorkerThread] = set()

    @property
    def pending(self) -> int:
        """Number of lookups still running."""
        return len(self._workers)

    def schedule(
        self,
        term: str,
        on_success: Callable[[list[LexicalEntry]], None],
        on_failure: Callable[[LookupFailure], None],
    ) -> None:
        worker = LookupWorkerThread(self.provider, term, self)
        worker.result_ready.connect(on_success)
        worker.failed.connect(on_failure)
        worker.finished.connect(lambda: self._on_worker_finished(worker))

        self._workers.add(worker)
        worker.start()

    def shutdown(self) -> None:
        """Cancel outstanding lookups and wait briefly for their threads.

        All workers share one deadline of SHUTDOWN_WAIT_MS.
        """
        workers = list(self._workers)
        for worker in workers:
            worker.cancel()

        deadline = QDeadlineTimer(self.SHUTDOWN_WAIT_MS)
        for worker in workers:
            if not worker.wait(deadline):
                logger.warning(f"Lookup for '{worker.term}' still running at shutdown")

    def _on_worker_finished(self, worker: LookupWorkerThread) -> None:
        self._workers.discard(worker)
        worker.deleteLater()
