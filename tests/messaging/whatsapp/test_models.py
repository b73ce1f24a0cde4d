"""
Tests for the outbound wire models: parameters, components, envelope.
"""

import json

import pytest
from pydantic import ValidationError

from wacloud.messaging.whatsapp.models import (
    ButtonPayloadParameter,
    Component,
    ComponentType,
    ImageParameter,
    Language,
    LanguageCode,
    MessageEnvelope,
    ParameterType,
    PayloadType,
    Template,
    TextParameter,
    TextPayload,
)
from wacloud.messaging.whatsapp.models.template_models import make_parameter
from wacloud.messaging.whatsapp.utils.errors import EncodeError


class TestParameters:
    """Test the parameter variants and their discriminator."""

    @pytest.mark.parametrize(
        "parameter_type,expected_class,expected_wire",
        [
            (ParameterType.TEXT, TextParameter, {"type": "text", "text": "v"}),
            (ParameterType.IMAGE, ImageParameter, {"type": "image", "image": {"link": "v"}}),
            (
                ParameterType.BUTTON_PAYLOAD,
                ButtonPayloadParameter,
                {"type": "button_payload", "payload": "v"},
            ),
        ],
    )
    def test_make_parameter(self, parameter_type, expected_class, expected_wire):
        parameter = make_parameter(parameter_type, "v")

        assert isinstance(parameter, expected_class)
        assert parameter.model_dump(mode="json") == expected_wire

    def test_component_dispatches_on_type(self):
        component = Component.model_validate(
            {
                "type": "header",
                "parameters": [{"type": "image", "image": {"link": "https://x.test/i.png"}}],
            }
        )

        assert isinstance(component.parameters[0], ImageParameter)

    def test_component_requires_parameters(self):
        with pytest.raises(ValidationError):
            Component(type=ComponentType.BODY, parameters=[])


class TestLanguage:
    """Test locale validation."""

    @pytest.mark.parametrize("code", ["en", "en_US", "pt_BR", "zh_Hant", "fil"])
    def test_valid_codes(self, code):
        assert Language(code=code).code == code

    def test_enum_is_stored_as_plain_code(self):
        language = Language(code=LanguageCode.ES_MX)

        assert language.code == "es_MX"
        assert json.loads(language.model_dump_json()) == {"code": "es_MX"}

    @pytest.mark.parametrize("code", ["", "EN", "en-us-x", "english", "e1"])
    def test_invalid_codes(self, code):
        with pytest.raises(ValidationError):
            Language(code=code)


class TestMessageEnvelope:
    """Test the outbound envelope."""

    def test_text_envelope(self):
        envelope = MessageEnvelope.for_text("15551234567", "Hello\n  there")

        assert envelope.type == PayloadType.TEXT
        assert envelope.template is None
        assert json.loads(envelope.to_bytes()) == {
            "messaging_product": "whatsapp",
            "to": "15551234567",
            "type": "text",
            "text": {"body": "Hello\n  there"},
        }

    def test_template_envelope(self):
        template = Template(name="hello_world", language=Language(code="en_US"))
        envelope = MessageEnvelope.for_template("15551234567", template)

        wire = json.loads(envelope.to_bytes())
        assert envelope.text is None
        assert wire["type"] == "template"
        assert "text" not in wire
        assert wire["template"] == {
            "name": "hello_world",
            "language": {"code": "en_US"},
            "components": [],
        }

    def test_text_body_limit(self):
        MessageEnvelope.for_text("15551234567", "a" * 4096)

        with pytest.raises(EncodeError, match="4096"):
            MessageEnvelope.for_text("15551234567", "a" * 4097)

    def test_empty_recipient_rejected(self):
        with pytest.raises(EncodeError):
            MessageEnvelope.for_text("", "hi")
        with pytest.raises(EncodeError):
            MessageEnvelope.for_template("", Template(name="hello_world"))

    def test_rejects_both_payloads(self):
        with pytest.raises(ValidationError):
            MessageEnvelope(
                to="1",
                type=PayloadType.TEXT,
                text=TextPayload(body="hi"),
                template=Template(name="t"),
            )

    def test_rejects_mismatched_type(self):
        with pytest.raises(ValidationError):
            MessageEnvelope(to="1", type=PayloadType.TEMPLATE, text=TextPayload(body="hi"))

    def test_rejects_missing_payload(self):
        with pytest.raises(ValidationError):
            MessageEnvelope(to="1", type=PayloadType.TEXT)

    def test_messaging_product_is_fixed(self):
        with pytest.raises(ValidationError):
            MessageEnvelope(
                messaging_product="telegram",
                to="1",
                type=PayloadType.TEXT,
                text=TextPayload(body="hi"),
            )
