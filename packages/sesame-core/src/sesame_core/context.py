import threading
from dataclasses import dataclass
from typing import Optional

from .errors import CanceledError


@dataclass(frozen=True)
class RequestContext:
    """
    Per-call cancellation and timeout settings.

    A context is handed to a single call (or shared between calls that should
    be cancelled together). Cancellation is cooperative: it is observed before
    the request is sent, between body chunks and once the response arrives.
    The timeout is passed to the HTTP library as the connect and read timeout.
    """
    timeout: Optional[float] = None
    cancel_event: Optional[threading.Event] = None

    @classmethod
    def with_timeout(cls, seconds: float) -> 'RequestContext':
        return cls(timeout=seconds)

    @classmethod
    def cancellable(cls, timeout: Optional[float] = None) -> 'RequestContext':
        """Create a context that can be cancelled with `cancel()`."""
        return cls(timeout=timeout, cancel_event=threading.Event())

    def cancel(self) -> None:
        if self.cancel_event is None:
            raise ValueError("Context was not created as cancellable")
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise CanceledError("request was cancelled")
