"""HTTP transport, request encoding, response decoding and the API client."""

from pushover_client.clients.encoder import WireRequest
from pushover_client.clients.http import HttpClient
from pushover_client.clients.pushover_api import PushoverClient

__all__ = [
    "HttpClient",
    "PushoverClient",
    "WireRequest",
]
