# -*- coding: utf-8 -*-
"""Message validation rules.

Rules run in a fixed order and the first violation is raised; callers get one
error per call, never the full list. Lengths are counted in code points.
"""

from __future__ import annotations

import io
import os
from datetime import timedelta
from typing import Any, Optional

from pushover_client.exceptions import (
    AttachmentTooLargeError,
    EmptyURLError,
    InvalidAttachmentPathError,
    InvalidDeviceNameError,
    InvalidPriorityError,
    MessageEmptyError,
    MessageTitleTooLongError,
    MessageTooLongError,
    MessageURLTitleTooLongError,
    MessageURLTooLongError,
    MissingAttachmentError,
    MissingEmergencyParameterError,
)
from pushover_client.models.message import (
    MESSAGE_MAX_ATTACHMENT_BYTES,
    MESSAGE_MAX_LENGTH,
    MESSAGE_TITLE_MAX_LENGTH,
    MESSAGE_URL_MAX_LENGTH,
    MESSAGE_URL_TITLE_MAX_LENGTH,
    Message,
    Priority,
)
from pushover_client.utils.validation import is_device_list


def is_attachment_path(attachment: Any) -> bool:
    """Return True if the attachment is given by reference (a filesystem path)."""
    return isinstance(attachment, (str, os.PathLike))


def buffer_size(buffer: Any) -> int:
    """Return the number of bytes left to read in an in-memory attachment.

    File objects are measured from their current position and rewound.
    """
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return len(buffer)
    position = buffer.tell()
    end = buffer.seek(0, io.SEEK_END)
    buffer.seek(position)
    return end - position


def _is_set(duration: Optional[timedelta]) -> bool:
    return duration is not None and duration.total_seconds() > 0


def _validate_attachment(attachment: Any) -> None:
    if is_attachment_path(attachment):
        try:
            stat = os.stat(attachment)
        except OSError as exc:
            raise InvalidAttachmentPathError() from exc
        if not os.path.isfile(attachment) or not os.access(attachment, os.R_OK):
            raise InvalidAttachmentPathError()
        if stat.st_size > MESSAGE_MAX_ATTACHMENT_BYTES:
            raise AttachmentTooLargeError()
        return

    size = buffer_size(attachment)
    if size == 0:
        raise MissingAttachmentError()
    if size > MESSAGE_MAX_ATTACHMENT_BYTES:
        raise AttachmentTooLargeError()


def validate_message(message: Message) -> None:
    """Raise the ValidationError for the first rule the message violates."""
    if not message.message:
        raise MessageEmptyError()

    if len(message.message) > MESSAGE_MAX_LENGTH:
        raise MessageTooLongError()

    if len(message.title) > MESSAGE_TITLE_MAX_LENGTH:
        raise MessageTitleTooLongError()

    if len(message.url) > MESSAGE_URL_MAX_LENGTH:
        raise MessageURLTooLongError()

    if len(message.url_title) > MESSAGE_URL_TITLE_MAX_LENGTH:
        raise MessageURLTitleTooLongError()

    if message.url_title and not message.url:
        raise EmptyURLError()

    if not Priority.LOWEST <= message.priority <= Priority.EMERGENCY:
        raise InvalidPriorityError()

    if message.is_emergency:
        if not _is_set(message.retry) or not _is_set(message.expire):
            raise MissingEmergencyParameterError()

    if message.device_name and not is_device_list(message.device_name):
        raise InvalidDeviceNameError()

    if message.has_attachment:
        _validate_attachment(message.attachment)
