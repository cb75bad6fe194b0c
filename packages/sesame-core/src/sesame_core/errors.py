"""Errors raised by the Sesame client."""

from typing import Optional

__all__ = [
    "SesameError",
    "RequestConstructionError",
    "TransportError",
    "CanceledError",
    "RequestTimeoutError",
    "UnexpectedStatusError",
    "DecodeError",
]


class SesameError(Exception):
    """Base class for every error raised by the client."""


class RequestConstructionError(SesameError):
    """The inputs could not be turned into an HTTP request."""


class TransportError(SesameError):
    """The request failed on the network (DNS, connect, TLS or I/O)."""


class CanceledError(SesameError):
    """The caller cancelled the call before it completed."""


class RequestTimeoutError(CanceledError):
    """The call did not complete within its timeout."""


class UnexpectedStatusError(SesameError):
    """The server answered with a status other than 200.

    The body is not interpreted; the status line is the only signal.
    """

    def __init__(self, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason or ""
        super().__init__(f"unexpected HTTP status: {self.status_line}")

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


class DecodeError(SesameError):
    """The response body is not valid JSON or does not have the expected shape."""
