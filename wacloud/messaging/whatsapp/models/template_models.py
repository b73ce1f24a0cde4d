"""
WhatsApp template message models.

Provides Pydantic v2 models for the template section of an outbound message:
- Parameter variants (text, image link, button payload) as a discriminated union
- Component: header, body or button section holding parameters
- Template: named, language-tagged, ordered list of components

Based on https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages/#template-messages
"""

import re
from enum import Enum
from typing import Annotated, Literal, Self

from pydantic import BaseModel, Field, ValidationError, field_validator

from wacloud.messaging.whatsapp.utils.errors import DecodeError, EncodeError

# en, en_US, pt_BR, zh_Hant, fil
LOCALE_REGEX = re.compile(r"^[a-z]{2,3}(_[A-Za-z]{2,4})?$")


class ParameterType(str, Enum):
    """Discriminator values of template parameters."""

    TEXT = "text"
    IMAGE = "image"
    BUTTON_PAYLOAD = "button_payload"


class ComponentType(str, Enum):
    """Template component sections."""

    HEADER = "header"
    BODY = "body"
    BUTTON = "button"


class SubType(str, Enum):
    """Button component sub types."""

    QUICK_REPLY = "quick_reply"
    URL = "url"


class LanguageCode(str, Enum):
    """Common WhatsApp template locale codes."""

    AR = "ar"
    DE = "de"
    EN = "en"
    EN_GB = "en_GB"
    EN_US = "en_US"
    ES = "es"
    ES_AR = "es_AR"
    ES_ES = "es_ES"
    ES_MX = "es_MX"
    FR = "fr"
    HI = "hi"
    ID = "id"
    IT = "it"
    JA = "ja"
    KO = "ko"
    NL = "nl"
    PT_BR = "pt_BR"
    PT_PT = "pt_PT"
    RU = "ru"
    TR = "tr"
    ZH_CN = "zh_CN"


class TextParameter(BaseModel):
    """Plain text parameter."""

    type: Literal["text"] = "text"
    text: str


class ImageLink(BaseModel):
    link: str


class ImageParameter(BaseModel):
    """Image parameter referenced by public link."""

    type: Literal["image"] = "image"
    image: ImageLink


class ButtonPayloadParameter(BaseModel):
    """Opaque payload returned to the business when a button is tapped."""

    type: Literal["button_payload"] = "button_payload"
    payload: str


Parameter = Annotated[
    TextParameter | ImageParameter | ButtonPayloadParameter,
    Field(discriminator="type"),
]


def make_parameter(parameter_type: ParameterType, value: str) -> Parameter:
    """Build the parameter variant for ``parameter_type`` holding ``value``."""
    match parameter_type:
        case ParameterType.TEXT:
            return TextParameter(text=value)
        case ParameterType.IMAGE:
            return ImageParameter(image=ImageLink(link=value))
        case ParameterType.BUTTON_PAYLOAD:
            return ButtonPayloadParameter(payload=value)
    raise ValueError(f"Unsupported parameter type: {parameter_type}")


class Component(BaseModel):
    """Template component (header, body, button)."""

    type: ComponentType = Field(..., description="Component section")
    sub_type: SubType | None = Field(None, description="Button sub type")
    index: str | None = Field(None, description="Button position, as a string")
    parameters: list[Parameter] = Field(
        ..., min_length=1, description="Component parameters, in order"
    )


class Language(BaseModel):
    """Template language configuration."""

    code: str = Field(..., description="Template locale code, e.g. en_US")

    @field_validator("code", mode="before")
    @classmethod
    def validate_language_code(cls, v):
        """Validate locale code format."""
        if isinstance(v, LanguageCode):
            v = v.value
        if not isinstance(v, str) or not LOCALE_REGEX.match(v):
            raise ValueError(f"Invalid language code format: {v}")
        return v


class Template(BaseModel):
    """Named template with an ordered list of components."""

    name: str = Field(..., min_length=1, max_length=512, description="Template name")
    language: Language | None = Field(None, description="Template language")
    components: list[Component] = Field(
        default_factory=list, description="Components in platform order"
    )

    def to_json(self) -> str:
        """Serialize to the wire form."""
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True)
        except ValueError as e:
            raise EncodeError(f"Failed to serialize template '{self.name}': {e}") from e

    def to_bytes(self) -> bytes:
        return self.to_json().encode("utf-8")

    @classmethod
    def from_bytes(cls, buf: bytes | str) -> Self:
        """Parse a template from its wire form.

        Raises:
            DecodeError: If the input is not valid JSON or does not match the schema
        """
        try:
            return cls.model_validate_json(buf)
        except ValidationError as e:
            raise DecodeError(f"Invalid template payload: {e}") from e
