"""
Tests for error classification and logging helpers.
"""

import logging

import pytest

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.models import APIError
from wacloud.messaging.whatsapp.utils.error_helpers import (
    is_authentication_error,
    is_rate_limit_error,
    log_request_error,
)
from wacloud.messaging.whatsapp.utils.errors import (
    DecodeError,
    RequestError,
    TransportError,
)


def _request_error(status: int, code: int | None = None) -> RequestError:
    error = (
        APIError(message=f"error {code}", error_type="OAuthException", code=code)
        if code is not None
        else None
    )
    return RequestError(status, error.message if error else "failed", error=error)


class TestClassification:
    """Test error predicates."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (_request_error(401), True),
            (_request_error(400, 190), True),
            (_request_error(400, 100), False),
            (TransportError("down"), False),
        ],
    )
    def test_is_authentication_error(self, error, expected):
        assert is_authentication_error(error) is expected

    @pytest.mark.parametrize(
        "error,expected",
        [
            (_request_error(429), True),
            (_request_error(400, 130429), True),
            (_request_error(400, 131056), True),
            (_request_error(400, 132001), False),
            (DecodeError("bad"), False),
        ],
    )
    def test_is_rate_limit_error(self, error, expected):
        assert is_rate_limit_error(error) is expected

    def test_request_error_repr(self):
        assert repr(_request_error(400, 100)) == (
            "RequestError(status=400, code=100, message='error 100')"
        )


class TestLogRequestError:
    """Test failure logging."""

    def test_rate_limit_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wacloud"):
            log_request_error(
                _request_error(400, 130429),
                "send text message",
                "15551234567",
                "106540352242922",
                get_logger("wacloud.tests"),
            )

        assert "Rate limit hit for tenant 106540352242922" in caplog.text
        assert "Failed to send text message to 15551234567" in caplog.text

    def test_transport_error_logged_once(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wacloud"):
            log_request_error(
                TransportError("connection refused"),
                "send template message",
                "15551234567",
                "106540352242922",
                get_logger("wacloud.tests"),
            )

        assert len(caplog.records) == 1
        assert "connection refused" in caplog.records[0].getMessage()
