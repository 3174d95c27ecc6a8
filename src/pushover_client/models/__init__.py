# -*- coding: utf-8 -*-
"""Domain models."""

from pushover_client.models.message import (
    MESSAGE_MAX_ATTACHMENT_BYTES,
    MESSAGE_MAX_LENGTH,
    MESSAGE_TITLE_MAX_LENGTH,
    MESSAGE_URL_MAX_LENGTH,
    MESSAGE_URL_TITLE_MAX_LENGTH,
    Attachment,
    Message,
    Priority,
    Sound,
)
from pushover_client.models.glance import (
    GLANCE_ALL_DEVICES,
    GLANCE_SUBTEXT_MAX_LENGTH,
    GLANCE_TEXT_MAX_LENGTH,
    GLANCE_TITLE_MAX_LENGTH,
    GlanceUpdate,
)
from pushover_client.models.responses import (
    Limit,
    ReceiptDetails,
    RecipientDetails,
    Response,
)
from pushover_client.models.recipient import Recipient

__all__ = [
    "Attachment",
    "GLANCE_ALL_DEVICES",
    "GLANCE_SUBTEXT_MAX_LENGTH",
    "GLANCE_TEXT_MAX_LENGTH",
    "GLANCE_TITLE_MAX_LENGTH",
    "GlanceUpdate",
    "Limit",
    "MESSAGE_MAX_ATTACHMENT_BYTES",
    "MESSAGE_MAX_LENGTH",
    "MESSAGE_TITLE_MAX_LENGTH",
    "MESSAGE_URL_MAX_LENGTH",
    "MESSAGE_URL_TITLE_MAX_LENGTH",
    "Message",
    "Priority",
    "ReceiptDetails",
    "Recipient",
    "RecipientDetails",
    "Response",
    "Sound",
]
