"""Local validation of identities and payloads (runs before any network I/O)."""

from pushover_client.validation.identity import (
    validate_app_token,
    validate_receipt,
    validate_recipient_token,
)
from pushover_client.validation.message import validate_message
from pushover_client.validation.glance import validate_glance

__all__ = [
    "validate_app_token",
    "validate_glance",
    "validate_message",
    "validate_receipt",
    "validate_recipient_token",
]
