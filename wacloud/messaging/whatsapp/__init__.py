"""WhatsApp Cloud API messaging: client, transport, wire models."""

from .client import (
    AiohttpTransport,
    APIVersion,
    ClientOptions,
    HttpTransport,
    WhatsAppClient,
    WhatsAppUrlBuilder,
    with_api_version,
    with_base_url,
    with_debug,
    with_transport,
)

__all__ = [
    "AiohttpTransport",
    "APIVersion",
    "ClientOptions",
    "HttpTransport",
    "WhatsAppClient",
    "WhatsAppUrlBuilder",
    "with_api_version",
    "with_base_url",
    "with_debug",
    "with_transport",
]
