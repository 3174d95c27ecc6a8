# -*- coding: utf-8 -*-
"""Unit tests for request encoding."""

from __future__ import annotations

import io
from datetime import timedelta
from pathlib import Path
from urllib.parse import parse_qs

import pytest

from pushover_client.clients import encoder
from pushover_client.clients.encoder import (
    WireRequest,
    encode_glance,
    encode_message,
    encode_receipt_cancel,
    encode_receipt_lookup,
    encode_recipient_lookup,
    format_seconds,
)
from pushover_client.exceptions import (
    AttachmentReadError,
    EmptyReceiptError,
    EmptyRecipientTokenError,
    EmptyTokenError,
    GlanceEmptyError,
    InvalidRecipientTokenError,
    MessageEmptyError,
    MissingAttachmentError,
)
from pushover_client.models import GlanceUpdate, Message, Priority

BASE_URL = "https://api.pushover.test/1"


def test_encode_emergency_message_fields(
    emergency_message: Message,
    app_token: str,
    user_key: str,
) -> None:
    wire = encode_message(emergency_message, app_token, user_key, base_url=BASE_URL)

    assert wire.method == "POST"
    assert wire.url == f"{BASE_URL}/messages.json"
    assert wire.expects_quota is True
    assert wire.attachment is None
    assert wire.fields == {
        "token": app_token,
        "user": user_key,
        "message": "My awesome message",
        "title": "My title",
        "priority": "2",
        "url": "http://google.com",
        "url_title": "Google",
        "timestamp": "1424305421",
        "retry": "60",
        "expire": "3600",
        "device": "SuperDevice",
        "callback": "http://yourapp.com/callback",
        "sound": "cosmic",
        "html": "1",
    }


def test_encode_minimal_emergency_message(app_token: str, user_key: str) -> None:
    message = Message(
        message="hi",
        priority=Priority.EMERGENCY,
        retry=timedelta(seconds=60),
        expire=timedelta(seconds=3600),
    )

    wire = encode_message(message, app_token, user_key, base_url=BASE_URL)

    assert wire.fields["priority"] == "2"
    assert wire.fields["retry"] == "60"
    assert wire.fields["expire"] == "3600"
    assert "callback" not in wire.fields


def test_encode_default_message_has_only_required_fields(app_token: str, user_key: str) -> None:
    wire = encode_message(Message(message="World"), app_token, user_key, base_url=BASE_URL)

    assert wire.fields == {
        "token": app_token,
        "user": user_key,
        "message": "World",
        "priority": "0",
    }
    assert wire.content_type == "application/x-www-form-urlencoded"


def test_retry_and_expire_only_sent_with_emergency_priority(app_token: str, user_key: str) -> None:
    message = Message(
        message="World",
        priority=Priority.HIGH,
        retry=timedelta(seconds=60),
        expire=timedelta(hours=1),
    )

    wire = encode_message(message, app_token, user_key, base_url=BASE_URL)

    assert wire.fields["priority"] == "1"
    assert "retry" not in wire.fields
    assert "expire" not in wire.fields


@pytest.mark.parametrize("priority", [Priority.LOWEST, Priority.NORMAL, Priority.HIGH])
def test_callback_only_sent_with_emergency_priority(
    priority: Priority, app_token: str, user_key: str
) -> None:
    message = Message(message="hi", priority=priority, callback_url="http://yourapp.com/callback")

    wire = encode_message(message, app_token, user_key, base_url=BASE_URL)

    assert "callback" not in wire.fields


def test_monospace_and_timestamp_are_sent_as_given(app_token: str, user_key: str) -> None:
    message = Message(message="World", monospace=True, timestamp=1393653600)

    wire = encode_message(message, app_token, user_key, base_url=BASE_URL)

    assert wire.fields["monospace"] == "1"
    assert wire.fields["timestamp"] == "1393653600"
    assert "html" not in wire.fields


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (timedelta(seconds=60), "60"),
        (timedelta(hours=1), "3600"),
        (timedelta(seconds=30.5), "30.5"),
        (timedelta(microseconds=1), "0.000001"),
        (timedelta(days=1), "86400"),
        (timedelta(seconds=100), "100"),
    ],
)
def test_format_seconds(duration: timedelta, expected: str) -> None:
    assert format_seconds(duration) == expected


def test_sender_is_validated_before_recipient_and_payload() -> None:
    with pytest.raises(EmptyTokenError):
        encode_message(Message(message=""), "", "", base_url=BASE_URL)


def test_recipient_is_validated_before_payload(app_token: str) -> None:
    with pytest.raises(EmptyRecipientTokenError):
        encode_message(Message(message=""), app_token, "", base_url=BASE_URL)


def test_payload_is_validated_last(app_token: str, user_key: str) -> None:
    with pytest.raises(MessageEmptyError):
        encode_message(Message(message=""), app_token, user_key, base_url=BASE_URL)


def test_multipart_request_with_buffer(app_token: str, user_key: str) -> None:
    payload = b"\x89PNG" + b"\x00" * 12
    message = Message.with_title("World", "Hello").with_attachment(io.BytesIO(payload))

    wire = encode_message(message, app_token, user_key, base_url=BASE_URL)
    prepared = wire.prepare()

    assert wire.attachment == payload
    assert wire.content_type == "multipart/form-data"
    assert wire.fields == {
        "token": app_token,
        "user": user_key,
        "message": "World",
        "priority": "0",
        "title": "Hello",
    }
    assert prepared.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    body = prepared.body
    assert isinstance(body, bytes)
    assert b'name="attachment"; filename="attachment"' in body
    assert payload in body
    assert b'name="title"' in body


def test_multipart_request_with_path(tmp_path: Path, app_token: str, user_key: str) -> None:
    path = tmp_path / "poster.jpg"
    path.write_bytes(b"jpeg-bytes")

    wire = encode_message(
        Message(message="World", attachment=path), app_token, user_key, base_url=BASE_URL
    )

    assert wire.attachment == b"jpeg-bytes"


def test_empty_attachment_file_is_missing(tmp_path: Path, app_token: str, user_key: str) -> None:
    path = tmp_path / "empty.jpg"
    path.write_bytes(b"")

    with pytest.raises(MissingAttachmentError):
        encode_message(Message(message="World", attachment=path), app_token, user_key, base_url=BASE_URL)


def test_unreadable_attachment_is_an_encoding_error(
    tmp_path: Path,
    app_token: str,
    user_key: str,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / "poster.jpg"
    path.write_bytes(b"jpeg-bytes")

    def _fail_open(*args: object, **kwargs: object) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr(encoder, "open", _fail_open, raising=False)

    with pytest.raises(AttachmentReadError) as exc_info:
        encode_message(Message(message="World", attachment=path), app_token, user_key, base_url=BASE_URL)

    assert isinstance(exc_info.value.cause, PermissionError)


def test_url_encoded_request_body(app_token: str, user_key: str) -> None:
    wire = encode_message(Message(message="héllo & bye"), app_token, user_key, base_url=BASE_URL)
    prepared = wire.prepare()

    assert prepared.method == "POST"
    assert prepared.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert isinstance(prepared.body, str)
    assert parse_qs(prepared.body) == {
        "token": [app_token],
        "user": [user_key],
        "message": ["héllo & bye"],
        "priority": ["0"],
    }


def test_encode_glance_emits_only_set_fields(app_token: str, user_key: str) -> None:
    update = GlanceUpdate(title="Widgets Sold", count=0, device_name="watch")

    wire = encode_glance(update, app_token, user_key, base_url=BASE_URL)

    assert wire.url == f"{BASE_URL}/glances.json"
    assert wire.expects_quota is False
    assert wire.fields == {
        "token": app_token,
        "user": user_key,
        "device": "watch",
        "title": "Widgets Sold",
        "count": "0",
    }


def test_encode_glance_validates_update(app_token: str, user_key: str) -> None:
    with pytest.raises(GlanceEmptyError):
        encode_glance(GlanceUpdate(), app_token, user_key, base_url=BASE_URL)


def test_encode_recipient_lookup(app_token: str, user_key: str) -> None:
    wire = encode_recipient_lookup(app_token, user_key, base_url=BASE_URL + "/")

    assert wire == WireRequest(
        method="POST",
        url=f"{BASE_URL}/users/validate.json",
        fields={"token": app_token, "user": user_key},
    )


def test_encode_recipient_lookup_rejects_bad_key(app_token: str) -> None:
    with pytest.raises(InvalidRecipientTokenError):
        encode_recipient_lookup(app_token, "nope", base_url=BASE_URL)


def test_encode_receipt_lookup_puts_token_in_query(app_token: str) -> None:
    wire = encode_receipt_lookup(app_token, "rcpt123", base_url=BASE_URL)
    prepared = wire.prepare()

    assert wire.method == "GET"
    assert wire.content_type is None
    assert prepared.url == f"{BASE_URL}/receipts/rcpt123.json?token={app_token}"
    assert prepared.body is None


def test_encode_receipt_cancel(app_token: str) -> None:
    wire = encode_receipt_cancel(app_token, "rcpt123", base_url=BASE_URL)

    assert wire.url == f"{BASE_URL}/receipts/rcpt123/cancel.json"
    assert wire.fields == {"token": app_token}


def test_empty_receipt_is_rejected_before_encoding(app_token: str) -> None:
    with pytest.raises(EmptyReceiptError):
        encode_receipt_cancel(app_token, "", base_url=BASE_URL)
