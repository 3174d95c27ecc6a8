"""Custom exceptions for Pushover API calls."""

from __future__ import annotations

from collections.abc import Sequence


class PushoverError(Exception):
    """Base exception for Pushover-related errors."""

    pass


class MissingRequiredConfigError(PushoverError):
    """Raised when a required configuration value is missing."""

    pass


class EncodingError(PushoverError):
    """Raised when a validated payload cannot be turned into a wire request."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class AttachmentReadError(EncodingError):
    """Raised when the attachment file cannot be read while encoding."""

    def __init__(self, path: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"pushover: cannot read attachment {path!r}", cause=cause)
        self.path = path


class TransportError(PushoverError):
    """Raised when the HTTP exchange itself fails (network error or 5xx)."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class HTTPServerError(TransportError):
    """Raised on a 5xx response. The body is not decoded."""

    def __init__(self, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__("pushover: http error", url=url, status_code=status_code)


class ServiceError(PushoverError):
    """Raised when the API answers with a status other than 1.

    Carries the service's own error strings, verbatim and in order.
    """

    def __init__(
        self,
        errors: Sequence[str] | None = None,
        *,
        request: str | None = None,
        status: int | None = None,
    ) -> None:
        self.errors: list[str] = list(errors or [])
        self.request = request
        self.status = status
        super().__init__(str(self))

    def __str__(self) -> str:
        return "\n".join(["Errors:", *self.errors])


class InvalidRecipientError(ServiceError):
    """Raised when the API reports that a user or group key is not valid."""


class DecodeError(PushoverError):
    """Raised when a response body or header cannot be decoded."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidHeadersError(DecodeError):
    """Raised when the app-limit headers are missing or malformed."""

    def __init__(self, header: str, *, cause: Exception | None = None) -> None:
        super().__init__(
            f"pushover: invalid headers in server response ({header})", cause=cause
        )
        self.header = header
