# -*- coding: utf-8 -*-
"""Utility modules."""

from pushover_client.utils.validation import (
    DEVICE_NAME_PATTERN,
    TOKEN_PATTERN,
    is_device_list,
    is_device_name,
    is_token,
    mask_token,
)

__all__ = [
    "DEVICE_NAME_PATTERN",
    "TOKEN_PATTERN",
    "is_device_list",
    "is_device_name",
    "is_token",
    "mask_token",
]
