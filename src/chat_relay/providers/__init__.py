"""Provider definitions for chat_relay."""

from __future__ import annotations

import httpx

from chat_relay.availability import AvailabilityRegistry
from chat_relay.config import Settings
from chat_relay.types import ProviderName

from .anthropic import AnthropicProvider
from .base import BaseProvider
from .chat_completions import ChatCompletionsProvider, MetaProvider, MistralProvider
from .google import GeminiProvider
from .openai import OpenAIProvider

__all__ = [
    "BaseProvider",
    "ChatCompletionsProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "GeminiProvider",
    "MistralProvider",
    "MetaProvider",
    "build_providers",
]


def build_providers(
    settings: Settings,
    registry: AvailabilityRegistry,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[ProviderName, BaseProvider]:
    """Instantiate an adapter for every provider ``registry`` reports as configured."""
    candidates = {
        ProviderName.OPENAI: (OpenAIProvider, settings.openai_api_key, None),
        ProviderName.ANTHROPIC: (AnthropicProvider, settings.anthropic_api_key, None),
        ProviderName.GOOGLE: (GeminiProvider, settings.gemini_api_key, None),
        ProviderName.MISTRAL: (MistralProvider, settings.mistral_api_key, None),
        ProviderName.META: (MetaProvider, settings.meta_api_key, settings.meta_base_url),
    }
    providers: dict[ProviderName, BaseProvider] = {}
    for name, (cls, api_key, base_url) in candidates.items():
        if registry.is_available(name):
            providers[name] = cls(
                api_key=api_key,
                base_url=base_url,
                timeout_s=settings.timeout_s,
                transport=transport,
            )
    return providers
