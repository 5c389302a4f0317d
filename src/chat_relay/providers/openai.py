"""OpenAI provider implementation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx
import pydantic

from chat_relay.errors import CatalogFetchError, UpstreamError
from chat_relay.providers.base import BaseProvider, join_text
from chat_relay.types import CatalogModel, Message, ProviderName

_RESPONSES_PATH = "/v1/responses"
_MODELS_PATH = "/v1/models"


class OpenAIProvider(BaseProvider):
    """Async wrapper for the OpenAI Responses API plus its model listing."""

    name = ProviderName.OPENAI
    default_base_url = "https://api.openai.com"
    fallback_error = "Error en OpenAI."

    def _auth_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def converse(self, model: str, messages: Sequence[Message]) -> str:
        """Call the single-turn create-response endpoint and return its output text."""
        payload = {
            "model": model,
            "input": [self._serialize_message(m) for m in messages],
        }
        data = await self._post(_RESPONSES_PATH, payload)
        return self._extract_text(data)

    async def list_models(self) -> list[CatalogModel]:
        """Return every listed model, newest first."""
        try:
            response = await self._client.get(_MODELS_PATH, headers=self._headers)
            data = self._json_or_error(response)
            listed = data.get("data") or []
            if not isinstance(listed, list):
                raise self._malformed("data")
            items = [
                CatalogModel(id=item["id"], created=item.get("created") or 0)
                for item in listed
                if isinstance(item, dict) and isinstance(item.get("id"), str)
            ]
        except (httpx.HTTPError, UpstreamError, pydantic.ValidationError) as exc:
            self._logger.warning("OpenAI model listing failed: %s", exc)
            raise CatalogFetchError() from exc

        items.sort(key=lambda item: item.created, reverse=True)
        return items

    @staticmethod
    def _serialize_message(message: Message) -> dict[str, Any]:
        return {
            "role": message.role,
            "content": [{"type": "input_text", "text": message.content}],
        }

    def _extract_text(self, data: dict[str, Any]) -> str:
        # The SDKs expose an aggregated ``output_text``; the raw REST body
        # only carries it inside ``output[*].content``.
        text = data.get("output_text")
        if isinstance(text, str):
            return text
        output = data.get("output") or []
        if not isinstance(output, list):
            raise self._malformed("output")
        parts: list[str] = []
        for item in output:
            if isinstance(item, dict):
                parts.append(join_text(item.get("content"), kind="output_text"))
        return "".join(parts)
