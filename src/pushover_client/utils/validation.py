"""Validation helpers for tokens and device names."""

from __future__ import annotations

import re
from typing import Any

# Compiled once; read-only for the life of the process.
TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9]{30}$")
DEVICE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,25}$")


def is_token(value: Any) -> bool:
    """Return True if value is a 30 character alphanumeric token (app, user or group key)."""
    return isinstance(value, str) and TOKEN_PATTERN.fullmatch(value) is not None


def is_device_name(value: Any) -> bool:
    """Return True if value is a single valid device name (1-25 of [A-Za-z0-9_-])."""
    return isinstance(value, str) and DEVICE_NAME_PATTERN.fullmatch(value) is not None


def is_device_list(value: str) -> bool:
    """Return True if every comma-separated element of value is a valid device name."""
    return all(is_device_name(name) for name in value.split(","))


def mask_token(token: str | None) -> str:
    """Return a masked token for logging (e.g. uQiR...RsG)."""
    if not token or len(token) < 10:
        return "***"
    return f"{token[:4]}...{token[-3:]}"
