# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import timedelta
from typing import Any, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from pushover_client.clients.http import HttpClient
from pushover_client.clients.pushover_api import PushoverClient
from pushover_client.config import Settings
from pushover_client.models import Message, Priority, Recipient, Sound

BASE_URL = "https://api.pushover.test/1"


class FakeSession:
    """requests.Session double: records prepared requests and replays canned responses."""

    def __init__(self) -> None:
        self.sent: list[requests.PreparedRequest] = []
        self.timeouts: list[Any] = []
        self.responses: list[requests.Response] = []
        self.error: Optional[Exception] = None
        self.closed = False

    def queue(self, response: requests.Response) -> None:
        self.responses.append(response)

    def send(self, prepared: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.sent.append(prepared)
        self.timeouts.append(kwargs.get("timeout"))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


def build_response(
    status_code: int = 200,
    body: Any = None,
    headers: Optional[dict[str, str]] = None,
) -> requests.Response:
    """Build a real requests.Response; dict/list bodies are JSON-encoded."""
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response._content = body or b""
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = "utf-8"
    return response


@pytest.fixture
def app_token() -> str:
    """Valid 30 character application token."""
    return "uQiRzpo4DXghDmr9QzzfQu27cmVRsG"


@pytest.fixture
def user_key() -> str:
    """Valid 30 character user key."""
    return "gznej3rKEVAvPUxu9vvNnqpmZpokzF"


@pytest.fixture
def recipient(user_key: str) -> Recipient:
    return Recipient(user_key)


@pytest.fixture
def settings(app_token: str, user_key: str) -> Settings:
    """Settings pointing at a fake base URL with test credentials."""
    return Settings.from_env(
        api={"base_url": BASE_URL, "timeout_seconds": 5.0},
        pushover={"app_token": app_token, "user_key": user_key},
    )


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def http_client(settings: Settings, fake_session: FakeSession) -> HttpClient:
    return HttpClient(settings, session=fake_session)  # type: ignore[arg-type]


@pytest.fixture
def client(http_client: HttpClient, settings: Settings) -> PushoverClient:
    return PushoverClient(http_client, settings)


@pytest.fixture
def response_factory() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def emergency_message() -> Message:
    """Fully populated emergency message."""
    return Message(
        message="My awesome message",
        title="My title",
        priority=Priority.EMERGENCY,
        url="http://google.com",
        url_title="Google",
        timestamp=1424305421,
        retry=timedelta(seconds=60),
        expire=timedelta(hours=1),
        device_name="SuperDevice",
        callback_url="http://yourapp.com/callback",
        sound=Sound.COSMIC,
        html=True,
    )
