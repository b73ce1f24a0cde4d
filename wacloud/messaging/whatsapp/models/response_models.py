"""
WhatsApp Cloud API response models.

Pydantic schemas for the JSON body returned by the messages endpoint, which is
either a success body (message ids, resolved contacts) or a Graph API error.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wacloud.messaging.whatsapp.utils.errors import DecodeError


class APIErrorData(BaseModel):
    """Additional error details."""

    model_config = ConfigDict(frozen=True)

    details: str = Field(..., description="Human readable error details")
    messaging_product: str = Field("whatsapp", description="Messaging product")


class APIError(BaseModel):
    """Graph API error object.

    Wire names ``type`` and ``fbtrace_id`` are exposed as ``error_type`` and
    ``trace_id``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str = Field(..., description="Error message")
    error_type: str = Field(..., alias="type", description="Error type, e.g. OAuthException")
    code: int = Field(..., description="Graph API error code")
    error_data: APIErrorData | None = Field(None, description="Error details")
    error_subcode: int | None = Field(None, description="Error subcode")
    trace_id: str = Field("", alias="fbtrace_id", description="Trace ID for support requests")

    def __str__(self) -> str:
        return self.message

    @property
    def details(self) -> str | None:
        return self.error_data.details if self.error_data else None


class APIResponseContact(BaseModel):
    """Contact resolution for the recipient."""

    input: str = Field(..., description="Recipient as sent")
    wa_id: str = Field(..., description="Resolved WhatsApp ID")

    @property
    def resolved_id(self) -> str:
        return self.wa_id


class APIResponseMessage(BaseModel):
    """Accepted message reference."""

    id: str = Field(..., description="WhatsApp message ID (wamid)")


class APIResponse(BaseModel):
    """Messages endpoint response body."""

    error: APIError | None = None
    messaging_product: str = ""
    contacts: list[APIResponseContact] = Field(default_factory=list)
    messages: list[APIResponseMessage] = Field(default_factory=list)

    def is_successful(self) -> bool:
        """True when the body carries no error object."""
        return self.error is None

    @property
    def message_ids(self) -> list[str]:
        return [message.id for message in self.messages]

    @property
    def message_id(self) -> str | None:
        """ID of the first accepted message."""
        return self.messages[0].id if self.messages else None

    @classmethod
    def from_bytes(cls, buf: bytes | str) -> Self:
        """Parse a response body.

        Raises:
            DecodeError: If the body is not valid JSON or does not match the schema
        """
        try:
            return cls.model_validate_json(buf)
        except ValidationError as e:
            raise DecodeError(f"Invalid API response body: {e}") from e
