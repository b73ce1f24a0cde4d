"""WhatsApp utility functions and helpers."""

from wacloud.messaging.whatsapp.utils.errors import (
    DecodeError,
    EncodeError,
    RequestError,
    TransportError,
    WhatsAppClientError,
)

__all__ = [
    "DecodeError",
    "EncodeError",
    "RequestError",
    "TransportError",
    "WhatsAppClientError",
]
