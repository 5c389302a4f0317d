"""Anthropic provider implementation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from chat_relay.providers.base import BaseProvider, join_text
from chat_relay.types import Message, ProviderName

_MESSAGES_PATH = "/v1/messages"
_API_VERSION = "2023-06-01"
_MAX_TOKENS = 1024


class AnthropicProvider(BaseProvider):
    """Async wrapper for the Anthropic Messages API (non-streaming)."""

    name = ProviderName.ANTHROPIC
    default_base_url = "https://api.anthropic.com"
    fallback_error = "Error en Anthropic."

    def _auth_headers(self, api_key: str) -> dict[str, str]:
        return {
            "x-api-key": api_key,
            "anthropic-version": _API_VERSION,
            "content-type": "application/json",
        }

    async def converse(self, model: str, messages: Sequence[Message]) -> str:
        payload = {
            "model": model,
            "max_tokens": _MAX_TOKENS,
            "messages": [self._serialize_message(m) for m in messages],
        }
        data = await self._post(_MESSAGES_PATH, payload)
        return join_text(data.get("content"), kind="text")

    @staticmethod
    def _serialize_message(message: Message) -> dict[str, Any]:
        # Only user/assistant are accepted here; anything else is sent as user.
        return {
            "role": "assistant" if message.role == "assistant" else "user",
            "content": message.content,
        }
