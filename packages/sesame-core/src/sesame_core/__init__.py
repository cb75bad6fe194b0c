"""Sesame Core - HTTP client and shared utilities."""

from .client import SesameClient
from .config import ClientConfig
from .const import DEFAULT_ENDPOINT
from .context import RequestContext
from .errors import *
from .states import HistoryType, LockState

__version__ = "0.1.0"
__all__ = [
    "SesameClient",
    "ClientConfig",
    "DEFAULT_ENDPOINT",
    "RequestContext",
    "HistoryType",
    "LockState",
    "SesameError",
    "RequestConstructionError",
    "TransportError",
    "CanceledError",
    "RequestTimeoutError",
    "UnexpectedStatusError",
    "DecodeError",
]
