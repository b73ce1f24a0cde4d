"""
Template builder for composing WhatsApp template messages.

Provides a fluent interface that appends one component per call and
normalizes display text so the platform never receives raw newlines or
repeated whitespace.
"""

import re
from typing import Self

from wacloud.messaging.whatsapp.models.template_models import (
    Component,
    ComponentType,
    Language,
    LanguageCode,
    ParameterType,
    SubType,
    Template,
    make_parameter,
)

_WHITESPACE_RUN = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Collapse whitespace runs to single spaces, drop line breaks and trim."""
    text = _WHITESPACE_RUN.sub(" ", text)
    return text.replace("\n", "").replace("\r", "").strip()


class TemplateBuilder:
    """
    Fluent builder for template messages.

    Each ``add_*`` call appends exactly one component holding a single
    parameter, in call order, and returns the builder for chaining.
    Button payloads are opaque tokens and are the only values stored verbatim.

    Example:
        template = (
            TemplateBuilder("otp_template", LanguageCode.EN_US)
            .add_header("Daniel")
            .add_body("Daniel")
            .add_body("3243")
            .add_body("30")
            .done()
        )
    """

    def __init__(self, name: str, language_code: str | LanguageCode | None):
        """Initialize an empty template.

        Args:
            name: Approved template name
            language_code: Template locale, e.g. ``en_US``; None omits the language
        """
        language = Language(code=language_code) if language_code is not None else None
        self._template = Template(name=name, language=language, components=[])

    @property
    def template(self) -> Template:
        """Template accumulated so far."""
        return self._template

    def add_header(self, text: str) -> Self:
        return self._add_component(
            ComponentType.HEADER, ParameterType.TEXT, clean_text(text)
        )

    def add_header_image(self, link: str) -> Self:
        """Add a header component holding an image link."""
        return self._add_component(
            ComponentType.HEADER, ParameterType.IMAGE, clean_text(link)
        )

    def add_body(self, text: str) -> Self:
        return self._add_component(
            ComponentType.BODY, ParameterType.TEXT, clean_text(text)
        )

    def add_button(self, text: str, index: int | str | None = None) -> Self:
        return self._add_component(
            ComponentType.BUTTON, ParameterType.TEXT, clean_text(text), index=index
        )

    def add_button_payload(self, payload: str, index: int | str | None = None) -> Self:
        """Add a button component carrying ``payload`` exactly as given."""
        return self._add_component(
            ComponentType.BUTTON, ParameterType.BUTTON_PAYLOAD, payload, index=index
        )

    def add_quick_reply(self, text: str, index: int | str | None = None) -> Self:
        return self._add_component(
            ComponentType.BUTTON,
            ParameterType.TEXT,
            clean_text(text),
            sub_type=SubType.QUICK_REPLY,
            index=index,
        )

    def add_url(self, url: str, index: int | str | None = None) -> Self:
        """Add a URL button component with the dynamic URL suffix."""
        return self._add_component(
            ComponentType.BUTTON,
            ParameterType.TEXT,
            clean_text(url),
            sub_type=SubType.URL,
            index=index,
        )

    def _add_component(
        self,
        component_type: ComponentType,
        parameter_type: ParameterType,
        value: str,
        sub_type: SubType | None = None,
        index: int | str | None = None,
    ) -> Self:
        self._template.components.append(
            Component(
                type=component_type,
                sub_type=sub_type,
                index=str(index) if index is not None else None,
                parameters=[make_parameter(parameter_type, value)],
            )
        )
        return self

    def done(self) -> Template:
        """Finalize the template.

        Returns a copy, so further builder calls do not alter a template
        that has already been handed to the client.
        """
        return self._template.model_copy(deep=True)

    def to_json(self) -> str:
        return self._template.to_json()

    @staticmethod
    def from_bytes(buf: bytes | str) -> Template:
        """Parse a template from its wire form.

        Raises:
            DecodeError: If the input is malformed
        """
        return Template.from_bytes(buf)
