# -*- coding: utf-8 -*-
"""Request encoding: validated payloads -> WireRequest.

Every encode_* function validates identities first (application token, then
recipient), then the payload, and only then builds the field map. Nothing in
this module performs network I/O; the only I/O is reading an attachment file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal
from typing import Any, Literal, Optional
from urllib.parse import quote

import requests

from pushover_client.exceptions import (
    AttachmentReadError,
    EncodingError,
    MissingAttachmentError,
)
from pushover_client.models.glance import GlanceUpdate
from pushover_client.models.message import Message
from pushover_client.validation import (
    validate_app_token,
    validate_glance,
    validate_message,
    validate_receipt,
    validate_recipient_token,
)
from pushover_client.validation.message import is_attachment_path

ATTACHMENT_FIELD = "attachment"
ATTACHMENT_FILENAME = "attachment"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
MULTIPART_CONTENT_TYPE = "multipart/form-data"


@dataclass(frozen=True)
class WireRequest:
    """An encoded API call, ready to be prepared and sent.

    POST requests carry `fields` as a url-encoded form, or as multipart form
    fields next to a single `attachment` file part. GET requests carry
    `params` in the query string.
    """

    method: Literal["GET", "POST"]
    url: str
    fields: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    attachment: Optional[bytes] = None
    expects_quota: bool = False
    """True only for message sends: the app-limit headers must be decoded."""

    @property
    def content_type(self) -> Optional[str]:
        if self.method == "GET":
            return None
        if self.attachment is not None:
            return MULTIPART_CONTENT_TYPE
        return FORM_CONTENT_TYPE

    def prepare(self) -> requests.PreparedRequest:
        """Build the requests.PreparedRequest (multipart body when an attachment is present)."""
        kwargs: dict[str, Any] = {"headers": {"Accept": "application/json"}}
        if self.params:
            kwargs["params"] = self.params
        if self.method == "POST":
            kwargs["data"] = self.fields
            if self.attachment is not None:
                kwargs["files"] = {
                    ATTACHMENT_FIELD: (ATTACHMENT_FILENAME, self.attachment),
                }
        try:
            return requests.Request(self.method, self.url, **kwargs).prepare()
        except (ValueError, TypeError, requests.RequestException) as exc:
            raise EncodingError(
                f"pushover: cannot build {self.method} request for {self.url}",
                cause=exc,
            ) from exc


def endpoint(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def format_seconds(duration: timedelta) -> str:
    """Format a duration as seconds without trailing zeros or exponent (60s -> "60", 1.5s -> "1.5")."""
    seconds = Decimal(duration.days * 86400 + duration.seconds) + (
        Decimal(duration.microseconds) / Decimal(1_000_000)
    )
    return format(seconds.normalize(), "f")


def read_attachment(attachment: Any) -> bytes:
    """Return the attachment content. A path is opened and always closed before returning."""
    if is_attachment_path(attachment):
        path = os.fspath(attachment)
        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            raise AttachmentReadError(path, cause=exc) from exc
    elif isinstance(attachment, (bytes, bytearray, memoryview)):
        data = bytes(attachment)
    else:
        data = attachment.read()
    if not data:
        raise MissingAttachmentError()
    return data


def message_fields(message: Message, app_token: str, recipient_token: str) -> dict[str, str]:
    """Return the flat field map for a (validated) message."""
    fields = {
        "token": app_token,
        "user": recipient_token,
        "message": message.message,
        "priority": str(int(message.priority)),
    }

    if message.title:
        fields["title"] = message.title
    if message.url:
        fields["url"] = message.url
    if message.url_title:
        fields["url_title"] = message.url_title
    if message.sound:
        fields["sound"] = str(getattr(message.sound, "value", message.sound))
    if message.device_name:
        fields["device"] = message.device_name
    if message.timestamp is not None:
        fields["timestamp"] = str(int(message.timestamp))
    if message.html:
        fields["html"] = "1"
    if message.monospace:
        fields["monospace"] = "1"
    if message.is_emergency:
        if message.retry is not None and message.expire is not None:
            fields["retry"] = format_seconds(message.retry)
            fields["expire"] = format_seconds(message.expire)
        if message.callback_url:
            fields["callback"] = message.callback_url

    return fields


def encode_message(
    message: Message,
    app_token: str,
    recipient_token: str,
    *,
    base_url: str,
) -> WireRequest:
    """Validate and encode POST /messages.json.

    Raises:
        ValidationError: First violated identity or message rule.
        AttachmentReadError: The attachment file could not be read.
        MissingAttachmentError: The attachment turned out to be empty.
    """
    validate_app_token(app_token)
    validate_recipient_token(recipient_token)
    validate_message(message)

    attachment = read_attachment(message.attachment) if message.has_attachment else None
    return WireRequest(
        method="POST",
        url=endpoint(base_url, "messages.json"),
        fields=message_fields(message, app_token, recipient_token),
        attachment=attachment,
        expects_quota=True,
    )


def glance_fields(update: GlanceUpdate, app_token: str, recipient_token: str) -> dict[str, str]:
    fields = {"token": app_token, "user": recipient_token}
    if update.device_name:
        fields["device"] = update.device_name
    if update.title:
        fields["title"] = update.title
    if update.text:
        fields["text"] = update.text
    if update.subtext:
        fields["subtext"] = update.subtext
    if update.count is not None:
        fields["count"] = str(update.count)
    if update.percent is not None:
        fields["percent"] = str(update.percent)
    return fields


def encode_glance(
    update: GlanceUpdate,
    app_token: str,
    recipient_token: str,
    *,
    base_url: str,
) -> WireRequest:
    """Validate and encode POST /glances.json."""
    validate_app_token(app_token)
    validate_recipient_token(recipient_token)
    validate_glance(update)
    return WireRequest(
        method="POST",
        url=endpoint(base_url, "glances.json"),
        fields=glance_fields(update, app_token, recipient_token),
    )


def encode_recipient_lookup(
    app_token: str,
    recipient_token: str,
    *,
    base_url: str,
) -> WireRequest:
    """Validate and encode POST /users/validate.json."""
    validate_app_token(app_token)
    validate_recipient_token(recipient_token)
    return WireRequest(
        method="POST",
        url=endpoint(base_url, "users/validate.json"),
        fields={"token": app_token, "user": recipient_token},
    )


def encode_receipt_lookup(app_token: str, receipt: str, *, base_url: str) -> WireRequest:
    """Validate and encode GET /receipts/{receipt}.json."""
    validate_app_token(app_token)
    validate_receipt(receipt)
    return WireRequest(
        method="GET",
        url=endpoint(base_url, f"receipts/{quote(receipt, safe='')}.json"),
        params={"token": app_token},
    )


def encode_receipt_cancel(app_token: str, receipt: str, *, base_url: str) -> WireRequest:
    """Validate and encode POST /receipts/{receipt}/cancel.json."""
    validate_app_token(app_token)
    validate_receipt(receipt)
    return WireRequest(
        method="POST",
        url=endpoint(base_url, f"receipts/{quote(receipt, safe='')}/cancel.json"),
        fields={"token": app_token},
    )
