"""Google Gemini provider implementation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from chat_relay.providers.base import BaseProvider, join_text
from chat_relay.types import Message, ProviderName


class GeminiProvider(BaseProvider):
    """Async wrapper for Gemini ``generateContent``."""

    name = ProviderName.GOOGLE
    default_base_url = "https://generativelanguage.googleapis.com"
    fallback_error = "Error en Gemini."

    def _auth_headers(self, api_key: str) -> dict[str, str]:
        return {
            "x-goog-api-key": api_key,
            "Content-Type": "application/json",
        }

    async def converse(self, model: str, messages: Sequence[Message]) -> str:
        payload = {"contents": [self._serialize_message(m) for m in messages]}
        data = await self._post(f"/v1beta/models/{model}:generateContent", payload)
        return self._extract_text(data)

    @staticmethod
    def _serialize_message(message: Message) -> dict[str, Any]:
        return {
            "role": "model" if message.role == "assistant" else "user",
            "parts": [{"text": message.content}],
        }

    def _extract_text(self, data: dict[str, Any]) -> str:
        candidates = data.get("candidates")
        if not candidates:
            return ""
        if not isinstance(candidates, list) or not isinstance(candidates[0], dict):
            raise self._malformed("candidates")
        content = candidates[0].get("content")
        if content is None:
            return ""
        if not isinstance(content, dict):
            raise self._malformed("content")
        return join_text(content.get("parts"))
