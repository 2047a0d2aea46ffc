"""Shared test fixtures for the MsgMorph test suite."""

import json
from typing import Any, Callable

import httpx
import pytest

# Sample values used across tests
SAMPLE_API_KEY = "mm_test_key_abc123"
SAMPLE_ORG_ID = "org_test456"
SAMPLE_PROJECT_ID = "proj-1"
SAMPLE_CONTACT_ID = "cnt_abc123"
SAMPLE_BASE_URL = "https://api.test.msgmorph.local"


# ============================================================================
# Mock Response Data
# ============================================================================

MOCK_CONTACT = {
    "id": SAMPLE_CONTACT_ID,
    "externalId": "user-123",
    "email": "alice@example.com",
    "name": "Alice Smith",
    "projectId": SAMPLE_PROJECT_ID,
    "feedbackSent": False,
    "feedbackScheduledAt": None,
    "createdAt": "2024-01-15T10:00:00Z",
    "updatedAt": "2024-01-15T10:30:00Z",
}

MOCK_CONTACT_2 = {
    "id": "cnt_def456",
    "externalId": "user-456",
    "email": "bob@example.com",
    "name": None,
    "projectId": SAMPLE_PROJECT_ID,
    "feedbackSent": True,
    "feedbackScheduledAt": "2024-01-20T09:00:00Z",
    "createdAt": "2024-01-16T10:00:00Z",
    "updatedAt": "2024-01-16T10:00:00Z",
}


# ============================================================================
# Fixtures
# ============================================================================

class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def queue(self, status_code: int = 200, json_body: Any = None, content: bytes | None = None):
        if content is None:
            content = b"" if json_body is None else json.dumps(json_body).encode()
        self._responses.append(httpx.Response(status_code, content=content))

    def queue_response(self, response: httpx.Response):
        self._responses.append(response)

    def fail_with(self, exc: Exception):
        self._responses.append(exc)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self._responses.pop(0) if self._responses else httpx.Response(200)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def http_client(handler):
    """httpx.AsyncClient backed by the recording handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def mm_client(http_client):
    """MsgMorphClient wired to the mock transport."""
    from msgmorph import MsgMorphClient

    return MsgMorphClient(
        SAMPLE_API_KEY,
        SAMPLE_ORG_ID,
        base_url=SAMPLE_BASE_URL,
        http_client=http_client,
    )


@pytest.fixture
def error_body() -> Callable[..., dict[str, Any]]:
    """Factory fixture for API error payloads."""
    def _create(message: str | None = None, code: str | None = None, **extra):
        body: dict[str, Any] = {}
        if message is not None:
            body["message"] = message
        if code is not None:
            body["code"] = code
        body.update(extra)
        return body
    return _create


@pytest.fixture
def mock_contact() -> dict[str, Any]:
    return dict(MOCK_CONTACT)


@pytest.fixture
def mock_contacts() -> list[dict[str, Any]]:
    return [dict(MOCK_CONTACT), dict(MOCK_CONTACT_2)]
