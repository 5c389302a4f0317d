"""Providers speaking the OpenAI-style Chat Completions protocol."""

from __future__ import annotations

from collections.abc import Sequence

from chat_relay.providers.base import BaseProvider
from chat_relay.types import Message, ProviderName

_CHAT_PATH = "/v1/chat/completions"


class ChatCompletionsProvider(BaseProvider):
    """Shared implementation for ``POST /v1/chat/completions`` endpoints."""

    def _auth_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def converse(self, model: str, messages: Sequence[Message]) -> str:
        payload = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        data = await self._post(_CHAT_PATH, payload)

        choices = data.get("choices")
        if not choices:
            return ""
        if not isinstance(choices, list) or not isinstance(choices[0], dict):
            raise self._malformed("choices")
        message = choices[0].get("message")
        if message is None:
            return ""
        if not isinstance(message, dict):
            raise self._malformed("message")
        text = message.get("content")
        return text if isinstance(text, str) else ""


class MistralProvider(ChatCompletionsProvider):
    """Mistral La Plateforme chat completions."""

    name = ProviderName.MISTRAL
    default_base_url = "https://api.mistral.ai"
    fallback_error = "Error en Mistral."


class MetaProvider(ChatCompletionsProvider):
    """Any OpenAI-compatible host serving Llama models.

    There is no public default; ``base_url`` must be supplied.
    """

    name = ProviderName.META
    default_base_url = ""
    fallback_error = "Error en proveedor Meta."
