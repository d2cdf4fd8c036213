"""Lookup workflow controller."""

from .lookup_controller import LookupController
from .scheduler import ImmediateScheduler

__all__ = ["LookupController", "ImmediateScheduler"]
