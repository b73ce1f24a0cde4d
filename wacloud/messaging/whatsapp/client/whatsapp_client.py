"""
WhatsApp Cloud API client for outbound messages.

Key Design Decisions:
- phone_number_id IS the tenant_id (WhatsApp Business Account identifier)
- Configuration is fixed at construction; one client serves concurrent sends
- The HTTP call goes through a swappable HttpTransport
- Every failure surfaces as a WhatsAppClientError subclass, never retried
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Self

from wacloud.core.config.settings import settings
from wacloud.core.logging.context import reset_request_context, set_request_context
from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.options import ClientOptions
from wacloud.messaging.whatsapp.client.transport import AiohttpTransport, HttpTransport
from wacloud.messaging.whatsapp.models.basic_models import MessageEnvelope
from wacloud.messaging.whatsapp.models.response_models import APIResponse
from wacloud.messaging.whatsapp.models.template_models import Template
from wacloud.messaging.whatsapp.utils.error_helpers import log_request_error
from wacloud.messaging.whatsapp.utils.errors import (
    DecodeError,
    EncodeError,
    RequestError,
    WhatsAppClientError,
)

if TYPE_CHECKING:
    from wacloud.domain.builders.template_builder import TemplateBuilder


class WhatsAppUrlBuilder:
    """Builds URLs for WhatsApp Business API endpoints."""

    def __init__(self, base_url: str, api_version: str, phone_number_id: str):
        """Initialize URL builder with configuration.

        Args:
            base_url: Graph API base URL
            api_version: Graph API version segment, e.g. v15.0
            phone_number_id: WhatsApp Business phone number ID (tenant identifier)
        """
        self.base_url = base_url.rstrip("/")  # Ensure no trailing slash
        self.api_version = api_version
        self.phone_number_id = phone_number_id

    def get_messages_url(self) -> str:
        """Build URL for sending messages."""
        return f"{self.base_url}/{self.api_version}/{self.phone_number_id}/messages"


class WhatsAppClient:
    """
    WhatsApp Cloud API client for text and template messages.

    Defaults come from the environment settings; options are merged over them
    in order, later options winning:

        async with WhatsAppClient(phone_id, token, with_api_version("v21.0")) as client:
            response = await client.send_text("15551234567", "Hello")
            if not response.is_successful():
                ...
    """

    def __init__(
        self,
        phone_number_id: str,
        access_token: str,
        *options: ClientOptions,
        debug: bool = False,
    ):
        """Initialize WhatsApp client.

        Args:
            phone_number_id: WhatsApp Business phone number ID (serves as tenant_id)
            access_token: WhatsApp Business API access token for this tenant
            *options: Overrides applied in order over the defaults
            debug: Log request and response bodies at INFO level
        """
        if not phone_number_id:
            raise ValueError("phone_number_id is required")
        if not access_token:
            raise ValueError("access_token is required")

        defaults = ClientOptions(
            base_url=settings.base_url,
            api_version=settings.api_version,
            debug=debug,
        )
        config = ClientOptions.merge(defaults, *options)

        self._phone_number_id = phone_number_id
        self._access_token = access_token
        self._base_url = config.base_url
        self._api_version = config.api_version
        self._debug = bool(config.debug)

        self._owns_transport = config.transport is None
        self._transport: HttpTransport = config.transport or AiohttpTransport()

        self._url_builder = WhatsAppUrlBuilder(
            self._base_url, self._api_version, phone_number_id
        )
        self.logger = get_logger(__name__)

        self.logger.info(
            f"WhatsApp client initialized for tenant/phone_id: {phone_number_id}, "
            f"api_version: {self._api_version}"
        )

    @classmethod
    def from_settings(cls, *options: ClientOptions, debug: bool = False) -> Self:
        """Create a client from WP_PHONE_ID and WP_ACCESS_TOKEN.

        Raises:
            ValueError: If the credentials are not configured
        """
        if not settings.wp_phone_id:
            raise ValueError("WP_PHONE_ID is required")
        if not settings.wp_access_token:
            raise ValueError("WP_ACCESS_TOKEN is required")
        return cls(settings.wp_phone_id, settings.wp_access_token, *options, debug=debug)

    @property
    def phone_number_id(self) -> str:
        return self._phone_number_id

    @property
    def tenant_id(self) -> str:
        """Get tenant ID (which is the phone_number_id)."""
        return self._phone_number_id

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_version(self) -> str:
        return self._api_version

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def messages_url(self) -> str:
        return self._url_builder.get_messages_url()

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers for WhatsApp API requests."""
        return {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _log_body(self, label: str, body: bytes) -> None:
        level = logging.INFO if self._debug else logging.DEBUG
        if self.logger.isEnabledFor(level):
            self.logger.log(level, f"{label}: {body.decode('utf-8', errors='replace')}")

    async def send_text(self, to: str, body: str) -> APIResponse:
        """Send a free-form text message.

        Args:
            to: Recipient phone number or WhatsApp ID
            body: Text content (sent as given)

        Returns:
            Parsed API response for a 2xx status

        Raises:
            EncodeError: If the recipient is empty or the body exceeds 4096 characters
            TransportError, DecodeError, RequestError: As raised by ``send``
        """
        try:
            envelope = MessageEnvelope.for_text(to, body)
        except EncodeError as err:
            log_request_error(
                err, "send text message", to, self._phone_number_id, self.logger
            )
            raise
        return await self.send(to, envelope)

    async def send_template(
        self, to: str, template: Template | TemplateBuilder
    ) -> APIResponse:
        """Send a template message.

        Args:
            to: Recipient phone number or WhatsApp ID
            template: Finished template, or a builder to finalize

        Returns:
            Parsed API response for a 2xx status

        Raises:
            EncodeError: If the recipient is empty
            TransportError, DecodeError, RequestError: As raised by ``send``
        """
        from wacloud.domain.builders.template_builder import TemplateBuilder

        if isinstance(template, TemplateBuilder):
            template = template.done()
        try:
            envelope = MessageEnvelope.for_template(to, template)
        except EncodeError as err:
            log_request_error(
                err, "send template message", to, self._phone_number_id, self.logger
            )
            raise
        return await self.send(to, envelope)

    async def send(self, to: str, envelope: MessageEnvelope) -> APIResponse:
        """POST an envelope to the messages endpoint.

        A 2xx response is returned as parsed, even when its body embeds an
        error object; callers check ``is_successful()``.

        Args:
            to: Recipient, must match ``envelope.to``
            envelope: Message to send

        Returns:
            Parsed API response

        Raises:
            ValueError: If ``to`` does not match the envelope recipient
            EncodeError: If the envelope cannot be serialized
            TransportError: If the HTTP call could not complete
            DecodeError: If a 2xx body does not match the response schema
            RequestError: For non-2xx statuses
        """
        if to != envelope.to:
            raise ValueError(
                f"Recipient '{to}' does not match envelope recipient '{envelope.to}'"
            )

        operation = f"send {envelope.type.value} message"
        tokens = set_request_context(tenant_id=self._phone_number_id, user_id=to)
        try:
            url = self._url_builder.get_messages_url()
            body = envelope.to_bytes()

            self.logger.debug(f"Sending {envelope.type.value} message to {url}")
            self._log_body("Payload", body)

            status, raw = await self._transport.post(url, body, self._get_headers())

            self._log_body(f"Response (HTTP {status})", raw)
            return self._interpret_response(status, raw)

        except WhatsAppClientError as err:
            log_request_error(err, operation, to, self._phone_number_id, self.logger)
            raise
        finally:
            reset_request_context(tokens)

    def _interpret_response(self, status: int, raw: bytes) -> APIResponse:
        if 200 <= status < 300:
            try:
                response = APIResponse.from_bytes(raw)
            except DecodeError as err:
                raise DecodeError(
                    f"Could not decode HTTP {status} response: {err.message}",
                    status=status,
                    body=raw,
                ) from err

            if response.is_successful():
                self.logger.info(
                    f"Message accepted by WhatsApp, id: {response.message_id}"
                )
            else:
                self.logger.warning(
                    f"HTTP {status} response carries an error: {response.error}"
                )
            return response

        try:
            response = APIResponse.from_bytes(raw)
        except DecodeError:
            response = None

        error = response.error if response is not None else None
        message = (
            error.message
            if error is not None
            else f"WhatsApp API request failed with HTTP status {status}"
        )
        raise RequestError(status, message, error=error, response=response)

    async def close(self) -> None:
        """Release the default transport; injected transports are left alone."""
        if self._owns_transport and isinstance(self._transport, AiohttpTransport):
            await self._transport.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
