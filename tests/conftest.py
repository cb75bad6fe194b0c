"""Shared test fixtures: a stub transport serving in-memory responses."""

import io
import json
import threading
from http import HTTPStatus

import pytest
import requests

from sesame_core import ClientConfig, SesameClient
from sesame_devices import SesameOperations

API_KEY = "test-api-key"
ENDPOINT = "https://sesame.test/api/sesame2"
DEVICE_ID = "3D3F1E40-A8E5-4E7D-9B3B-0D8A4C1F2E11"


class RecordingResponse(requests.Response):
    """requests.Response over an in-memory body that counts close() calls."""

    def __init__(self, status_code=200, body=b"", reason=None, raw=None):
        super().__init__()
        self.status_code = status_code
        self.reason = reason if reason is not None else HTTPStatus(status_code).phrase
        self.raw = raw if raw is not None else io.BytesIO(body)
        self.close_calls = 0
        self.closed = threading.Event()

    def close(self):
        self.close_calls += 1
        super().close()
        self.closed.set()


class StubSession(requests.Session):
    """Session whose transport returns queued responses instead of going to the network."""

    def __init__(self):
        super().__init__()
        self.sent = []
        self.responses = []

    def queue(self, response_or_error):
        self.responses.append(response_or_error)
        return response_or_error

    def queue_json(self, payload, status_code=200):
        return self.queue(RecordingResponse(status_code, json.dumps(payload).encode()))

    def send(self, request, **kwargs):
        self.sent.append((request, kwargs))
        result = self.responses.pop(0)
        if callable(result):
            result = result(request)
        if isinstance(result, Exception):
            raise result
        result.request = request
        result.url = request.url
        return result

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.sent[-1][0]


@pytest.fixture
def config():
    return ClientConfig(api_key=API_KEY, endpoint=ENDPOINT)


@pytest.fixture
def session():
    return StubSession()


@pytest.fixture
def client(config, session):
    return SesameClient(config, session=session)


@pytest.fixture
def operations(client):
    return SesameOperations(client)


@pytest.fixture
def status_payload():
    return {
        "batteryPercentage": 87,
        "batteryVoltage": 5.8671875,
        "position": 11,
        "CHSesame2Status": "locked",
        "timestamp": "2021-01-04T12:34:56Z",
    }


@pytest.fixture
def history_payload():
    return [
        {"recordID": 103, "type": 1, "historyTag": "iPhone", "devicePk": "pk-a", "timestamp": "2021-01-04T12:30:00Z"},
        {"recordID": 102, "type": 7, "historyTag": "", "devicePk": "pk-b", "timestamp": "2021-01-04T12:20:00Z"},
        {"recordID": 101, "type": 99, "historyTag": "web", "devicePk": "pk-c", "timestamp": "2021-01-04T12:10:00Z"},
    ]
