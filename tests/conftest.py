"""
Pytest configuration and common fixtures for wacloud tests.

Provides a recording fake transport and ready-made clients and bodies.
"""

import json
from collections.abc import Mapping

import pytest

from wacloud.core.logging.context import clear_request_context
from wacloud.messaging.whatsapp.client import (
    WhatsAppClient,
    with_api_version,
    with_base_url,
    with_transport,
)

TEST_PHONE_ID = "106540352242922"
TEST_TOKEN = "test_token"
TEST_RECIPIENT = "15551234567"
TEST_BASE_URL = "https://graph.example.com"


class FakeTransport:
    """HttpTransport double that records calls and returns a canned reply."""

    def __init__(self, status: int = 200, body: bytes = b"", error: Exception | None = None):
        self.status = status
        self.body = body
        self.error = error
        self.calls: list[tuple[str, bytes, dict[str, str]]] = []

    async def post(
        self, url: str, body: bytes, headers: Mapping[str, str]
    ) -> tuple[int, bytes]:
        self.calls.append((url, body, dict(headers)))
        if self.error is not None:
            raise self.error
        return self.status, self.body

    @property
    def last_json(self) -> dict:
        return json.loads(self.calls[-1][1])


@pytest.fixture
def success_body() -> bytes:
    return json.dumps(
        {
            "messaging_product": "whatsapp",
            "contacts": [{"input": TEST_RECIPIENT, "wa_id": TEST_RECIPIENT}],
            "messages": [{"id": "wamid.HBgLMTU1NTEyMzQ1NjcVAgARGBI"}],
        }
    ).encode()


@pytest.fixture
def error_body() -> bytes:
    return json.dumps(
        {
            "error": {
                "message": "(#132001) Template name does not exist in the translation",
                "type": "OAuthException",
                "code": 132001,
                "error_data": {
                    "messaging_product": "whatsapp",
                    "details": "template name (otp_template) does not exist in en_US",
                },
                "error_subcode": 2494073,
                "fbtrace_id": "AbCdEfGh123",
            }
        }
    ).encode()


@pytest.fixture
def transport_factory() -> type[FakeTransport]:
    return FakeTransport


@pytest.fixture
def fake_transport(success_body: bytes) -> FakeTransport:
    return FakeTransport(status=200, body=success_body)


@pytest.fixture
def client(fake_transport: FakeTransport) -> WhatsAppClient:
    """Client wired to the fake transport and a fixed endpoint."""
    return WhatsAppClient(
        TEST_PHONE_ID,
        TEST_TOKEN,
        with_base_url(TEST_BASE_URL),
        with_api_version("v15.0"),
        with_transport(fake_transport),
    )


@pytest.fixture(autouse=True)
def reset_send_context():
    """Keep logging context from leaking between tests."""
    clear_request_context()
    yield
    clear_request_context()
