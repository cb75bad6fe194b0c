import json
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import requests

from .config import ClientConfig
from .const import API_KEY_HEADER, CHUNK_SIZE, POLL_INTERVAL, USER_AGENT
from .context import RequestContext
from .errors import (CanceledError, DecodeError, RequestConstructionError, RequestTimeoutError, TransportError,
                     UnexpectedStatusError)

logger = logging.getLogger(__name__)

_CONSTRUCTION_ERRORS = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidHeader,
)


class SesameClient:
    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self._executor = ThreadPoolExecutor(thread_name_prefix="sesame")

    def device_path(self, device_id: str) -> str:
        """Build the resource path for a device, sent as given (the server expects upper case)."""
        if not isinstance(device_id, str) or not device_id:
            raise RequestConstructionError(f"device ID must be a non-empty string, got {device_id!r}")
        return quote(device_id, safe="")

    def get(self, path: str, params: Optional[Dict[str, Any]] = None,
            context: Optional[RequestContext] = None) -> bytes:
        """
        Make a GET request and return the body of a 200 response.

        The request runs on a worker thread while the caller waits for the
        result, the context's cancel event and the deadline, whichever comes
        first. The timeout bounds the whole call, body included. The worker
        closes the response exactly once, also after the caller has given up
        on it, in which case it stops reading the body.

        Raises:
            CanceledError: the context was cancelled before or during the call
            RequestTimeoutError: the timeout elapsed
            TransportError: the request failed on the network
            UnexpectedStatusError: the status is not 200
        """
        if context is None:
            context = RequestContext()
        context.raise_if_cancelled()

        url = f"{self.config.endpoint}/{path}"
        headers = {
            API_KEY_HEADER: self.config.api_key.get_secret_value(),
            "Accept": "application/json",
        }
        timeout = context.timeout if context.timeout is not None else self.config.timeout
        deadline = time.monotonic() + timeout
        abort = threading.Event()

        logger.debug("GET %s params=%s", url, params)
        future = self._executor.submit(self._fetch, url, params, headers, timeout, context, abort)
        try:
            status_code, reason, body = self._wait(future, context, deadline)
        except CanceledError:
            abort.set()
            future.cancel()
            raise

        logger.debug("GET %s -> %s (%d bytes)", url, status_code, len(body))
        if status_code != requests.codes.ok:
            raise UnexpectedStatusError(status_code, reason)
        return body

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None,
                 context: Optional[RequestContext] = None) -> Any:
        """Make a GET request and return the decoded JSON body."""
        body = self.get(path, params, context)
        try:
            return json.loads(body)
        except ValueError as e:
            raise DecodeError(f"decoding response body: {e}") from e

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
        self.session.close()

    def __enter__(self) -> 'SesameClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _wait(future: Future, context: RequestContext, deadline: float) -> Tuple[int, str, bytes]:
        while True:
            try:
                return future.result(timeout=max(0.0, min(deadline - time.monotonic(), POLL_INTERVAL)))
            except FutureTimeoutError:
                context.raise_if_cancelled()
                if time.monotonic() >= deadline:
                    raise RequestTimeoutError("request did not complete before its deadline")

    def _fetch(self, url: str, params: Optional[Dict[str, Any]], headers: Dict[str, str], timeout: float,
               context: RequestContext, abort: threading.Event) -> Tuple[int, str, bytes]:
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=timeout, stream=True)
        except _CONSTRUCTION_ERRORS as e:
            raise RequestConstructionError(f"creating HTTP request: {e}") from e
        except requests.Timeout as e:
            raise RequestTimeoutError(f"request to {url} timed out after {timeout}s") from e
        except requests.RequestException as e:
            raise TransportError(f"doing HTTP request: {e}") from e

        with response:
            body = self._read_body(response, context, abort)
        return response.status_code, response.reason, body

    @staticmethod
    def _read_body(response: requests.Response, context: RequestContext, abort: threading.Event) -> bytes:
        chunks = []
        try:
            for chunk in response.iter_content(CHUNK_SIZE):
                if abort.is_set():
                    raise CanceledError("request was abandoned")
                context.raise_if_cancelled()
                chunks.append(chunk)
        except requests.Timeout as e:
            raise RequestTimeoutError(f"reading response body timed out: {e}") from e
        except requests.RequestException as e:
            raise TransportError(f"reading response body: {e}") from e
        context.raise_if_cancelled()
        return b"".join(chunks)
