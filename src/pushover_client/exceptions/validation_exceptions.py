"""Local validation exceptions, one per violated rule."""

from __future__ import annotations

from pushover_client.exceptions.exceptions import PushoverError


class ValidationError(PushoverError):
    """Base exception for payload and identity validation."""

    default_message = "pushover: validation error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


# Identities


class EmptyTokenError(ValidationError):
    """Raised when the application token is empty."""

    default_message = "pushover: empty API token"


class InvalidTokenError(ValidationError):
    """Raised when the application token is not 30 alphanumeric characters."""

    default_message = "pushover: invalid API token"


class EmptyRecipientTokenError(ValidationError):
    """Raised when the recipient key is empty."""

    default_message = "pushover: empty recipient token"


class InvalidRecipientTokenError(ValidationError):
    """Raised when the recipient key is not 30 alphanumeric characters."""

    default_message = "pushover: invalid recipient token"


class EmptyReceiptError(ValidationError):
    """Raised when a receipt lookup or cancel is attempted without a receipt."""

    default_message = "pushover: empty receipt"


# Messages


class MessageEmptyError(ValidationError):
    default_message = "pushover: message empty"


class MessageTooLongError(ValidationError):
    default_message = "pushover: message too long"


class MessageTitleTooLongError(ValidationError):
    default_message = "pushover: message title too long"


class MessageURLTooLongError(ValidationError):
    default_message = "pushover: message URL too long"


class MessageURLTitleTooLongError(ValidationError):
    default_message = "pushover: message URL title too long"


class EmptyURLError(ValidationError):
    """Raised when a URL title is given without a URL."""

    default_message = "pushover: empty URL, URLTitle needs an URL"


class InvalidPriorityError(ValidationError):
    default_message = "pushover: invalid priority"


class MissingEmergencyParameterError(ValidationError):
    """Raised when an emergency message lacks retry or expire."""

    default_message = "pushover: missing emergency parameter"


class InvalidDeviceNameError(ValidationError):
    default_message = "pushover: invalid device name"


class InvalidAttachmentPathError(ValidationError):
    """Raised when the attachment path does not point to a readable file."""

    default_message = "pushover: invalid attachment path"


class AttachmentTooLargeError(ValidationError):
    default_message = "pushover: message attachment is too large"


class MissingAttachmentError(ValidationError):
    """Raised when an attachment was requested but the buffer is empty."""

    default_message = "pushover: missing attachment"


# Glances


class GlanceEmptyError(ValidationError):
    """Raised when a glance update carries no data at all."""

    default_message = "pushover: glance update is empty"


class GlanceTitleTooLongError(ValidationError):
    default_message = "pushover: glances title too long"


class GlanceTextTooLongError(ValidationError):
    default_message = "pushover: glances text too long"


class GlanceSubtextTooLongError(ValidationError):
    default_message = "pushover: glances subtext too long"


class GlanceInvalidPercentError(ValidationError):
    default_message = "pushover: glances percent must be in range of 0-100"
