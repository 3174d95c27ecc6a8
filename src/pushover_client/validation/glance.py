"""Glance update validation rules (same first-violation-wins contract as messages)."""

from __future__ import annotations

from pushover_client.exceptions import (
    GlanceEmptyError,
    GlanceInvalidPercentError,
    GlanceSubtextTooLongError,
    GlanceTextTooLongError,
    GlanceTitleTooLongError,
    InvalidDeviceNameError,
)
from pushover_client.models.glance import (
    GLANCE_SUBTEXT_MAX_LENGTH,
    GLANCE_TEXT_MAX_LENGTH,
    GLANCE_TITLE_MAX_LENGTH,
    GlanceUpdate,
)
from pushover_client.utils.validation import is_device_list


def validate_glance(update: GlanceUpdate) -> None:
    """Raise the ValidationError for the first rule the glance update violates."""
    if update.is_empty:
        raise GlanceEmptyError()
    if len(update.title) > GLANCE_TITLE_MAX_LENGTH:
        raise GlanceTitleTooLongError()
    if len(update.text) > GLANCE_TEXT_MAX_LENGTH:
        raise GlanceTextTooLongError()
    if len(update.subtext) > GLANCE_SUBTEXT_MAX_LENGTH:
        raise GlanceSubtextTooLongError()
    if update.percent is not None and not 0 <= update.percent <= 100:
        raise GlanceInvalidPercentError()
    # Comma separated device names are accepted
    if update.device_name and not is_device_list(update.device_name):
        raise InvalidDeviceNameError()
