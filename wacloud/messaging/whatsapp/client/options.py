"""
Client configuration options.

ClientOptions is an explicit record of optional overrides. Several of them are
folded left to right over the defaults, so when two options set the same field
the later one wins:

    client = WhatsAppClient(
        phone_id,
        token,
        with_base_url("http://localhost:8080"),
        with_api_version(APIVersion.V21),
    )
"""

import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Self

from wacloud.messaging.whatsapp.client.transport import HttpTransport

API_VERSION_REGEX = re.compile(r"^v\d+\.\d+$")


class APIVersion(str, Enum):
    """Graph API versions known to work with the messages endpoint."""

    V15 = "v15.0"
    V16 = "v16.0"
    V17 = "v17.0"
    V18 = "v18.0"
    V19 = "v19.0"
    V20 = "v20.0"
    V21 = "v21.0"
    V22 = "v22.0"


def normalize_api_version(api_version: str | APIVersion) -> str:
    """Return the version path segment, e.g. ``v21.0``."""
    if isinstance(api_version, APIVersion):
        return api_version.value
    if not API_VERSION_REGEX.match(api_version):
        raise ValueError(
            f"Invalid API version '{api_version}', expected the form 'v21.0'"
        )
    return api_version


@dataclass(frozen=True)
class ClientOptions:
    """Optional client overrides; None leaves the current value untouched."""

    base_url: str | None = None
    api_version: str | APIVersion | None = None
    transport: HttpTransport | None = None
    debug: bool | None = None

    def __post_init__(self):
        if self.api_version is not None:
            object.__setattr__(
                self, "api_version", normalize_api_version(self.api_version)
            )

    @classmethod
    def merge(cls, *options: "ClientOptions") -> Self:
        """Fold options in order; later non-None fields win."""
        merged: dict = {}
        for option in options:
            for field in fields(option):
                value = getattr(option, field.name)
                if value is not None:
                    merged[field.name] = value
        return cls(**merged)


def with_base_url(base_url: str) -> ClientOptions:
    """Override the API root (e.g. a local mock server)."""
    return ClientOptions(base_url=base_url)


def with_api_version(api_version: str | APIVersion) -> ClientOptions:
    """Override the Graph API version path segment."""
    return ClientOptions(api_version=api_version)


def with_transport(transport: HttpTransport) -> ClientOptions:
    """Replace the HTTP-calling capability."""
    return ClientOptions(transport=transport)


def with_debug(debug: bool = True) -> ClientOptions:
    """Log request and response bodies at INFO level."""
    return ClientOptions(debug=debug)
