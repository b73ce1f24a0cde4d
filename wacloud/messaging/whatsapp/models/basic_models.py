"""
Basic message models for WhatsApp messaging.

Pydantic schemas for the outbound message envelope: the object POSTed to the
messages endpoint, wrapping either a text body or a template.
"""

from enum import Enum
from typing import Literal, Self

from pydantic import BaseModel, Field, ValidationError, model_validator

from wacloud.messaging.whatsapp.models.template_models import Template
from wacloud.messaging.whatsapp.utils.errors import EncodeError


class PayloadType(str, Enum):
    """Payload kinds supported by the envelope."""

    TEXT = "text"
    TEMPLATE = "template"


class TextPayload(BaseModel):
    """Free-form text content."""

    body: str = Field(..., max_length=4096, description="Text content of the message")


class MessageEnvelope(BaseModel):
    """Outbound message envelope.

    Exactly one of ``text`` or ``template`` is populated, matching ``type``.
    """

    messaging_product: Literal["whatsapp"] = "whatsapp"
    to: str = Field(..., min_length=1, description="Recipient phone number or WA ID")
    type: PayloadType = Field(..., description="Payload kind")
    text: TextPayload | None = None
    template: Template | None = None

    @model_validator(mode="after")
    def validate_single_payload(self) -> Self:
        """Validate that the populated payload matches the declared type."""
        if self.type == PayloadType.TEXT:
            if self.text is None or self.template is not None:
                raise ValueError("Text envelopes must carry text and no template")
        elif self.template is None or self.text is not None:
            raise ValueError("Template envelopes must carry a template and no text")
        return self

    @classmethod
    def for_text(cls, to: str, body: str) -> Self:
        """Build a text envelope.

        Raises:
            EncodeError: If the recipient is empty or the body exceeds 4096 characters
        """
        try:
            return cls(to=to, type=PayloadType.TEXT, text=TextPayload(body=body))
        except ValidationError as e:
            raise EncodeError(f"Invalid text message for '{to}': {e}") from e

    @classmethod
    def for_template(cls, to: str, template: Template) -> Self:
        """Build a template envelope.

        Raises:
            EncodeError: If the recipient is empty
        """
        try:
            return cls(to=to, type=PayloadType.TEMPLATE, template=template)
        except ValidationError as e:
            raise EncodeError(f"Invalid template message for '{to}': {e}") from e

    def to_bytes(self) -> bytes:
        """Serialize to JSON bytes for the request body.

        Raises:
            EncodeError: If serialization fails
        """
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True).encode(
                "utf-8"
            )
        except ValueError as e:
            raise EncodeError(f"Failed to serialize {self.type.value} message: {e}") from e
