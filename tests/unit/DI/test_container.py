# -*- coding: utf-8 -*-
"""Unit tests for the dependency injection container."""

from __future__ import annotations

from dependency_injector import providers

from pushover_client.clients.pushover_api import PushoverClient
from pushover_client.config import Settings
from pushover_client.DI.container import Container


def test_container_wires_client_from_settings(settings: Settings) -> None:
    container = Container()
    container.config.override(providers.Object(settings))

    client = container.pushover_client()

    assert isinstance(client, PushoverClient)
    assert client.base_url == "https://api.pushover.test/1"
    assert container.pushover_client() is client
    assert container.http_client() is container.http_client()
    container.http_client().close()
