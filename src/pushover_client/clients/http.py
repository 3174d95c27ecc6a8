# -*- coding: utf-8 -*-
"""Blocking HTTP transport for the Pushover API (single shot, no retries)."""

from __future__ import annotations

import uuid
import requests
import structlog
from typing import Any, Callable, Optional
from structlog.contextvars import bound_contextvars

from pushover_client.clients.encoder import WireRequest
from pushover_client.config import Settings
from pushover_client.exceptions import TransportError


class HttpClient:
    """Sends WireRequests over a requests.Session.

    Injects Settings and optionally a requests.Session. If no session is
    provided, one is created up front and must be closed via close() or by using the
    client as a context manager. Each call is independent: no retries and no
    state kept between calls apart from the session's connection reuse.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[requests.Session] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (uses settings.api.timeout_seconds).
            session: Optional shared requests session. If None, the client
                creates and owns a session (call close() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._owns_session = session is None
        self._session: requests.Session = session if session is not None else requests.Session()
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def close(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def send(self, wire: WireRequest) -> requests.Response:
        """Send the request and return the raw response, whatever its status.

        Raises:
            EncodingError: The request could not be prepared.
            TransportError: Network-level failure (connection, timeout, ...).
        """
        prepared = wire.prepare()
        request_id = uuid.uuid4().hex[:12]
        timeout = self._settings.api.timeout_seconds

        with bound_contextvars(
            http_method=wire.method,
            http_url=wire.url,
            http_request_id=request_id,
        ):
            try:
                response = self._session.send(prepared, timeout=timeout)
            except requests.RequestException as e:
                self._logger.warning(
                    "http_request_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise TransportError(
                    f"{wire.method} failed: {wire.url}",
                    url=wire.url,
                    cause=e,
                ) from e

            self._logger.debug(
                "http_response_received",
                http_status_code=response.status_code,
                http_multipart=wire.attachment is not None,
            )
            return response
