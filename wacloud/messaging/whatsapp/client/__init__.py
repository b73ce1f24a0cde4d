"""WhatsApp client package."""

from .options import (
    APIVersion,
    ClientOptions,
    with_api_version,
    with_base_url,
    with_debug,
    with_transport,
)
from .transport import AiohttpTransport, HttpTransport
from .whatsapp_client import WhatsAppClient, WhatsAppUrlBuilder

__all__ = [
    "APIVersion",
    "AiohttpTransport",
    "ClientOptions",
    "HttpTransport",
    "WhatsAppClient",
    "WhatsAppUrlBuilder",
    "with_api_version",
    "with_base_url",
    "with_debug",
    "with_transport",
]
