"""Browser chat relay forwarding conversations to several LLM providers."""

from chat_relay.errors import (
    AuthError,
    CatalogFetchError,
    ChatRelayError,
    ProviderUnavailable,
    UnsupportedProviderError,
    UpstreamError,
    ValidationError,
)
from chat_relay.router import Router
from chat_relay.types import ChatRequest, Message, ProviderName

__all__ = [
    "AuthError",
    "CatalogFetchError",
    "ChatRelayError",
    "ChatRequest",
    "Message",
    "ProviderName",
    "ProviderUnavailable",
    "Router",
    "UnsupportedProviderError",
    "UpstreamError",
    "ValidationError",
]
