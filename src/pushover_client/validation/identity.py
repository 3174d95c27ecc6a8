"""Token-shaped identity checks (application token, user/group key, receipt)."""

from __future__ import annotations

from pushover_client.exceptions import (
    EmptyReceiptError,
    EmptyRecipientTokenError,
    EmptyTokenError,
    InvalidRecipientTokenError,
    InvalidTokenError,
)
from pushover_client.utils.validation import is_token


def validate_app_token(token: str | None) -> None:
    """Raise EmptyTokenError or InvalidTokenError for a malformed application token."""
    if not token:
        raise EmptyTokenError()
    if not is_token(token):
        raise InvalidTokenError()


def validate_recipient_token(token: str | None) -> None:
    """Raise EmptyRecipientTokenError or InvalidRecipientTokenError for a malformed user/group key."""
    if not token:
        raise EmptyRecipientTokenError()
    if not is_token(token):
        raise InvalidRecipientTokenError()


def validate_receipt(receipt: str | None) -> None:
    if not receipt:
        raise EmptyReceiptError()
