# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from pushover_client.config import get_settings
from pushover_client.clients.http import HttpClient
from pushover_client.clients.pushover_api import PushoverClient


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP transport and the API client."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        HttpClient,
        settings=config,
    )

    pushover_client = providers.Singleton(
        PushoverClient,
        http_client=http_client,
        settings=config,
    )
