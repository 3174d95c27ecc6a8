"""Exceptions subpackage."""

from pushover_client.exceptions.exceptions import (
    AttachmentReadError,
    DecodeError,
    EncodingError,
    HTTPServerError,
    InvalidHeadersError,
    InvalidRecipientError,
    MissingRequiredConfigError,
    PushoverError,
    ServiceError,
    TransportError,
)
from pushover_client.exceptions.validation_exceptions import (
    AttachmentTooLargeError,
    EmptyReceiptError,
    EmptyRecipientTokenError,
    EmptyTokenError,
    EmptyURLError,
    GlanceEmptyError,
    GlanceInvalidPercentError,
    GlanceSubtextTooLongError,
    GlanceTextTooLongError,
    GlanceTitleTooLongError,
    InvalidAttachmentPathError,
    InvalidDeviceNameError,
    InvalidPriorityError,
    InvalidRecipientTokenError,
    InvalidTokenError,
    MessageEmptyError,
    MessageTitleTooLongError,
    MessageTooLongError,
    MessageURLTitleTooLongError,
    MessageURLTooLongError,
    MissingAttachmentError,
    MissingEmergencyParameterError,
    ValidationError,
)

__all__ = [
    "AttachmentReadError",
    "AttachmentTooLargeError",
    "DecodeError",
    "EmptyReceiptError",
    "EmptyRecipientTokenError",
    "EmptyTokenError",
    "EmptyURLError",
    "EncodingError",
    "GlanceEmptyError",
    "GlanceInvalidPercentError",
    "GlanceSubtextTooLongError",
    "GlanceTextTooLongError",
    "GlanceTitleTooLongError",
    "HTTPServerError",
    "InvalidAttachmentPathError",
    "InvalidDeviceNameError",
    "InvalidHeadersError",
    "InvalidPriorityError",
    "InvalidRecipientError",
    "InvalidRecipientTokenError",
    "InvalidTokenError",
    "MessageEmptyError",
    "MessageTitleTooLongError",
    "MessageTooLongError",
    "MessageURLTitleTooLongError",
    "MessageURLTooLongError",
    "MissingAttachmentError",
    "MissingEmergencyParameterError",
    "MissingRequiredConfigError",
    "PushoverError",
    "ServiceError",
    "TransportError",
    "ValidationError",
]
