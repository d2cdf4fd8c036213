"""Background workers for the GUI."""

from .lookup_worker import LookupWorkerThread
from .qt_scheduler import QtLookupScheduler

__all__ = ["LookupWorkerThread", "QtLookupScheduler"]
