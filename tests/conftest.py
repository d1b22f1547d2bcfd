import json

import httpx
import pytest

from pizza_order.client import OrderClient

TEST_ORDER_URL = "http://localhost:9009/api/order"


class RecordingHandler:
    """httpx MockTransport handler that records request bodies."""

    def __init__(self, status_code=201, body=None, error=None):
        self.status_code = status_code
        self.body = {"message": "Order received"} if body is None else body
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payloads(self):
        return [json.loads(request.content) for request in self.requests]


def make_client(handler):
    return OrderClient(url=TEST_ORDER_URL, timeout=1.0, transport=httpx.MockTransport(handler))


@pytest.fixture
def ok_handler():
    return RecordingHandler()


@pytest.fixture
def failing_handler():
    return RecordingHandler(error=httpx.ConnectError("connection refused"))


@pytest.fixture
def ok_client(ok_handler):
    return make_client(ok_handler)


@pytest.fixture
def failing_client(failing_handler):
    return make_client(failing_handler)


@pytest.fixture
def client_for():
    """Build an OrderClient around a custom handler."""
    return make_client


@pytest.fixture
def handler_for():
    """Build a RecordingHandler with custom status, body or error."""
    return RecordingHandler
