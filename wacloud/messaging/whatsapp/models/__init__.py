"""WhatsApp models package."""

from .basic_models import MessageEnvelope, PayloadType, TextPayload
from .response_models import (
    APIError,
    APIErrorData,
    APIResponse,
    APIResponseContact,
    APIResponseMessage,
)
from .template_models import (
    ButtonPayloadParameter,
    Component,
    ComponentType,
    ImageLink,
    ImageParameter,
    Language,
    LanguageCode,
    Parameter,
    ParameterType,
    SubType,
    Template,
    TextParameter,
)

__all__ = [
    "MessageEnvelope",
    "PayloadType",
    "TextPayload",
    "APIError",
    "APIErrorData",
    "APIResponse",
    "APIResponseContact",
    "APIResponseMessage",
    "ButtonPayloadParameter",
    "Component",
    "ComponentType",
    "ImageLink",
    "ImageParameter",
    "Language",
    "LanguageCode",
    "Parameter",
    "ParameterType",
    "SubType",
    "Template",
    "TextParameter",
]
