# -*- coding: utf-8 -*-
"""Pushover API client: messages, glances, receipts and recipient checks."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional
from structlog.contextvars import bound_contextvars

from pushover_client.clients import decoder
from pushover_client.clients.encoder import (
    WireRequest,
    encode_glance,
    encode_message,
    encode_receipt_cancel,
    encode_receipt_lookup,
    encode_recipient_lookup,
)
from pushover_client.config import Settings
from pushover_client.exceptions import (
    HTTPServerError,
    InvalidRecipientError,
    MissingRequiredConfigError,
    ServiceError,
)
from pushover_client.models.glance import GlanceUpdate
from pushover_client.models.message import Message
from pushover_client.models.recipient import Recipient
from pushover_client.models.responses import ReceiptDetails, RecipientDetails, Response
from pushover_client.utils.validation import mask_token

if TYPE_CHECKING:
    import requests

    from pushover_client.clients.http import HttpClient

_SERVER_ERROR = 500


class PushoverClient:
    """Client for the Pushover API, bound to one application token.

    The base URL and the token are read once at construction and never
    change, so one instance can be shared between threads. Every method
    validates locally before any network I/O and raises on any failure:
    ValidationError, EncodingError, TransportError, ServiceError or
    DecodeError.
    """

    def __init__(
        self,
        http_client: "HttpClient",
        settings: Settings,
        *,
        token: Optional[str] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Blocking HTTP transport (e.g. HttpClient).
            settings: Settings (uses settings.api.base_url and, when token is
                None, settings.pushover.app_token).
            token: Application API token; overrides the configured one.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).

        Raises:
            MissingRequiredConfigError: No token given and none configured.
        """
        self._http = http_client
        self._settings = settings
        app_token = token if token is not None else settings.pushover.app_token
        if app_token is None:
            raise MissingRequiredConfigError("PUSHOVER__APP_TOKEN")
        self._token: str = app_token
        self._base_url: str = settings.api.base_url.rstrip("/")
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def base_url(self) -> str:
        return self._base_url

    def default_recipient(self) -> Recipient:
        """Return the recipient configured in settings.pushover.user_key."""
        user_key = self._settings.pushover.user_key
        if not user_key:
            raise MissingRequiredConfigError("PUSHOVER__USER_KEY")
        return Recipient(user_key)

    def _execute(
        self,
        wire: WireRequest,
        *,
        error_cls: type[ServiceError] = ServiceError,
    ) -> tuple[dict[str, Any], "requests.Response"]:
        """Send, classify and decode the body. Returns the checked payload and raw response."""
        response = self._http.send(wire)

        # Only 5xx responses are not guaranteed to carry a readable body
        if response.status_code >= _SERVER_ERROR:
            self._logger.warning(
                "pushover_server_error",
                http_status_code=response.status_code,
            )
            raise HTTPServerError(url=wire.url, status_code=response.status_code)

        payload = decoder.decode_json(response.content)
        try:
            decoder.check_status(payload, error_cls=error_cls)
        except ServiceError as e:
            self._logger.warning(
                "pushover_service_error",
                pushover_status=e.status,
                pushover_request=e.request,
                pushover_errors=e.errors,
            )
            raise
        return payload, response

    def send_message(self, message: Message, recipient: Recipient) -> Response:
        """Send a notification to a user or group (POST /messages.json).

        The returned Response carries the app quota read from the response
        headers; a missing or malformed quota header fails the whole call.
        Emergency messages also get a receipt for get_receipt_details().
        """
        wire = encode_message(
            message,
            self._token,
            recipient.token,
            base_url=self._base_url,
        )
        with bound_contextvars(
            pushover_endpoint="messages",
            pushover_user_masked=mask_token(recipient.token),
            pushover_priority=int(message.priority),
        ):
            payload, raw = self._execute(wire)
            limit = decoder.decode_limit(raw.headers) if wire.expects_quota else None
            result = decoder.decode_response(payload, limit=limit)
            self._logger.info(
                "pushover_message_sent",
                pushover_request=result.request,
                pushover_has_receipt=bool(result.receipt),
                pushover_quota_remaining=limit.remaining if limit else None,
            )
            return result

    def send_glance(self, update: GlanceUpdate, recipient: Recipient) -> Response:
        """Push a glance update to a user's watch or widget (POST /glances.json)."""
        wire = encode_glance(update, self._token, recipient.token, base_url=self._base_url)
        with bound_contextvars(
            pushover_endpoint="glances",
            pushover_user_masked=mask_token(recipient.token),
        ):
            payload, _ = self._execute(wire)
            result = decoder.decode_response(payload)
            self._logger.info("pushover_glance_sent", pushover_request=result.request)
            return result

    def get_receipt_details(self, receipt: str) -> ReceiptDetails:
        """Return the acknowledgement state of an emergency message."""
        wire = encode_receipt_lookup(self._token, receipt, base_url=self._base_url)
        with bound_contextvars(pushover_endpoint="receipts", pushover_receipt=receipt):
            payload, _ = self._execute(wire)
            return decoder.decode_receipt_details(payload)

    def cancel_emergency_notification(self, receipt: str) -> Response:
        """Stop the retries of an emergency message before it expires."""
        wire = encode_receipt_cancel(self._token, receipt, base_url=self._base_url)
        with bound_contextvars(pushover_endpoint="receipts_cancel", pushover_receipt=receipt):
            payload, _ = self._execute(wire)
            result = decoder.decode_response(payload)
            self._logger.info("pushover_emergency_cancelled", pushover_request=result.request)
            return result

    def get_recipient_details(self, recipient: Recipient) -> RecipientDetails:
        """Check a user or group key and list its devices.

        Raises:
            InvalidRecipientError: The service does not know the key.
        """
        wire = encode_recipient_lookup(self._token, recipient.token, base_url=self._base_url)
        with bound_contextvars(
            pushover_endpoint="users_validate",
            pushover_user_masked=mask_token(recipient.token),
        ):
            payload, _ = self._execute(wire, error_cls=InvalidRecipientError)
            return decoder.decode_recipient_details(payload)
