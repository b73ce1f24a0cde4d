"""
Exception hierarchy for WhatsApp Cloud API send operations.

Every failure of a send call surfaces as one of these; none are retried or
swallowed inside the client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wacloud.messaging.whatsapp.models.response_models import (
        APIError,
        APIResponse,
    )


class WhatsAppClientError(Exception):
    """Base exception for all wacloud client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TransportError(WhatsAppClientError):
    """The HTTP call could not complete (network failure, timeout, refused connection)."""


class EncodeError(WhatsAppClientError):
    """An outbound payload could not be serialized to JSON."""


class DecodeError(WhatsAppClientError):
    """A body could not be parsed into the expected schema."""

    def __init__(
        self, message: str, status: int | None = None, body: bytes | None = None
    ):
        self.status = status
        self.body = body
        super().__init__(message)


class RequestError(WhatsAppClientError):
    """The platform answered with a non-2xx HTTP status."""

    def __init__(
        self,
        status: int,
        message: str,
        error: APIError | None = None,
        response: APIResponse | None = None,
    ):
        self.status = status
        self.error = error
        self.response = response
        super().__init__(message)

    @property
    def code(self) -> int | None:
        """Graph API error code, when the body carried one."""
        return self.error.code if self.error else None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"status={self.status}, code={self.code}, message={self.message!r})"
        )
