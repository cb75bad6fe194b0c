"""Sesame Devices - typed status and history models and read operations."""

from .device_history import HistoryPage, HistoryRecord
from .device_status import StatusSnapshot
from .operations import SesameOperations

__all__ = ["HistoryPage", "HistoryRecord", "StatusSnapshot", "SesameOperations"]
