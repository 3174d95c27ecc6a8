# -*- coding: utf-8 -*-
"""Typed results decoded from API responses.

Each endpoint family has its own type: a plain status Response (messages,
glances, cancels), ReceiptDetails and RecipientDetails. Timestamps are aware
UTC datetimes; a timestamp the service reports as 0 is None.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

STATUS_OK = 1


@dataclass(frozen=True, slots=True)
class Limit:
    """Monthly message allowance of the application, read from response headers."""

    total: int
    remaining: int
    next_reset: datetime


@dataclass(frozen=True, slots=True)
class Response:
    """Plain status response."""

    status: int
    request: str
    """Request identifier, useful when contacting Pushover support."""

    errors: list[str] = field(default_factory=list)
    receipt: str = ""
    """Set only for emergency-priority messages."""

    limit: Optional[Limit] = None
    """Set only for message sends."""

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


@dataclass(frozen=True, slots=True)
class ReceiptDetails:
    """Acknowledgement state of an emergency-priority message."""

    status: int
    acknowledged: bool
    acknowledged_at: Optional[datetime]
    acknowledged_by: str
    acknowledged_by_device: str
    last_delivered_at: Optional[datetime]
    expired: bool
    expires_at: Optional[datetime]
    called_back: bool
    called_back_at: Optional[datetime]
    request: str


@dataclass(frozen=True, slots=True)
class RecipientDetails:
    """Validity of a user or group key and its devices."""

    status: int
    group: bool
    devices: list[str]
    licenses: list[str]
    request: str
    errors: list[str] = field(default_factory=list)
