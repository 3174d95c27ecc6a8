"""Pushover client: message validation, request encoding and a blocking API client."""

from pushover_client.config import Settings, get_settings
from pushover_client.exceptions import (
    DecodeError,
    EncodingError,
    PushoverError,
    ServiceError,
    TransportError,
    ValidationError,
)
from pushover_client.models import (
    GlanceUpdate,
    Limit,
    Message,
    Priority,
    ReceiptDetails,
    Recipient,
    RecipientDetails,
    Response,
    Sound,
)
from pushover_client.clients import HttpClient, PushoverClient, WireRequest

__version__ = "0.1.0"
__all__ = [
    "DecodeError",
    "EncodingError",
    "GlanceUpdate",
    "HttpClient",
    "Limit",
    "Message",
    "Priority",
    "PushoverClient",
    "PushoverError",
    "ReceiptDetails",
    "Recipient",
    "RecipientDetails",
    "Response",
    "ServiceError",
    "Settings",
    "Sound",
    "TransportError",
    "ValidationError",
    "WireRequest",
    "get_settings",
]
