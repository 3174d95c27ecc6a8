# -*- coding: utf-8 -*-
"""Message: the notification payload sent to a user or group.

Built by the caller, validated right before encoding and never mutated by the
library. Copies with extra data are produced with the with_* helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import timedelta
from enum import Enum, IntEnum
from typing import BinaryIO, Optional, Union

# API limitations (lengths in Unicode code points)
MESSAGE_MAX_LENGTH = 1024
MESSAGE_TITLE_MAX_LENGTH = 250
MESSAGE_URL_MAX_LENGTH = 512
MESSAGE_URL_TITLE_MAX_LENGTH = 100
MESSAGE_MAX_ATTACHMENT_BYTES = 2_621_440

Attachment = Union[str, "os.PathLike[str]", bytes, bytearray, BinaryIO]
"""A file path, or an in-memory buffer (bytes or a binary file object)."""


class Priority(IntEnum):
    """Message priorities, lowest to highest."""

    LOWEST = -2
    LOW = -1
    NORMAL = 0
    HIGH = 1
    EMERGENCY = 2


class Sound(str, Enum):
    """Built-in notification sounds."""

    PUSHOVER = "pushover"
    BIKE = "bike"
    BUGLE = "bugle"
    CASH_REGISTER = "cashregister"
    CLASSICAL = "classical"
    COSMIC = "cosmic"
    FALLING = "falling"
    GAMELAN = "gamelan"
    INCOMING = "incoming"
    INTERMISSION = "intermission"
    MAGIC = "magic"
    MECHANICAL = "mechanical"
    PIANOBAR = "pianobar"
    SIREN = "siren"
    SPACE_ALARM = "spacealarm"
    TUG_BOAT = "tugboat"
    ALIEN = "alien"
    CLIMB = "climb"
    PERSISTENT = "persistent"
    ECHO = "echo"
    UP_DOWN = "updown"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Message:
    """A notification. Only `message` is required.

    retry/expire are only used (and then required) with Priority.EMERGENCY.
    device_name may hold several comma-separated device names.
    """

    message: str
    title: str = ""
    priority: int = Priority.NORMAL
    url: str = ""
    url_title: str = ""
    timestamp: Optional[int] = None
    """Unix time in seconds shown to the user instead of the reception time."""

    retry: Optional[timedelta] = None
    expire: Optional[timedelta] = None
    callback_url: str = ""
    device_name: str = ""
    sound: str = ""
    html: bool = False
    monospace: bool = False
    attachment: Optional[Attachment] = None

    @classmethod
    def with_title(cls, message: str, title: str) -> Message:
        """Return a simple message with a title."""
        return cls(message=message, title=title)

    def with_attachment(self, attachment: Attachment) -> Message:
        """Return a copy carrying the given attachment (path or buffer)."""
        return replace(self, attachment=attachment)

    @property
    def is_emergency(self) -> bool:
        return self.priority == Priority.EMERGENCY

    @property
    def has_attachment(self) -> bool:
        return self.attachment is not None
