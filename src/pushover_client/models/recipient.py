# -*- coding: utf-8 -*-
"""Recipient: the user or group key a message is delivered to."""

from __future__ import annotations

from dataclasses import dataclass

from pushover_client.validation.identity import validate_recipient_token


@dataclass(frozen=True, slots=True)
class Recipient:
    """A user or group key (30 alphanumeric characters)."""

    token: str

    def validate(self) -> None:
        """Raise EmptyRecipientTokenError or InvalidRecipientTokenError if the key is malformed."""
        validate_recipient_token(self.token)
