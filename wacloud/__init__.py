"""
wacloud - WhatsApp Cloud API client for text and template messages.

Clean Import Interface:
- Client, builder, options and the wire models a caller inspects
- Everything else available via wacloud.messaging / wacloud.domain paths
"""

from .core.config.settings import settings
from .domain.builders.template_builder import TemplateBuilder, clean_text
from .messaging.whatsapp.client import (
    AiohttpTransport,
    APIVersion,
    ClientOptions,
    HttpTransport,
    WhatsAppClient,
    with_api_version,
    with_base_url,
    with_debug,
    with_transport,
)
from .messaging.whatsapp.models import (
    APIError,
    APIResponse,
    LanguageCode,
    MessageEnvelope,
    Template,
)
from .messaging.whatsapp.utils.errors import (
    DecodeError,
    EncodeError,
    RequestError,
    TransportError,
    WhatsAppClientError,
)

__version__ = settings.version

__all__ = [
    # Client
    "WhatsAppClient",
    "ClientOptions",
    "APIVersion",
    "HttpTransport",
    "AiohttpTransport",
    "with_api_version",
    "with_base_url",
    "with_debug",
    "with_transport",
    # Templates
    "TemplateBuilder",
    "Template",
    "LanguageCode",
    "clean_text",
    # Wire models
    "MessageEnvelope",
    "APIResponse",
    "APIError",
    # Errors
    "WhatsAppClientError",
    "TransportError",
    "EncodeError",
    "DecodeError",
    "RequestError",
]
