"""Pushover API response types (wire shapes, keys match the JSON bodies)."""

from __future__ import annotations

from typing import TypedDict


class ResponseSchema(TypedDict, total=False):
    """POST /messages.json, /glances.json, /receipts/{receipt}/cancel.json."""

    status: int
    request: str
    errors: list[str]
    receipt: str


class ReceiptDetailsSchema(TypedDict, total=False):
    """GET /receipts/{receipt}.json. Flags are 0/1, *_at are Unix seconds (0 when unset)."""

    status: int
    acknowledged: int
    acknowledged_at: int
    acknowledged_by: str
    acknowledged_by_device: str
    last_delivered_at: int
    expired: int
    expires_at: int
    called_back: int
    called_back_at: int
    request: str
    errors: list[str]


class RecipientDetailsSchema(TypedDict, total=False):
    """POST /users/validate.json."""

    status: int
    group: int
    devices: list[str]
    licenses: list[str]
    request: str
    errors: list[str]
