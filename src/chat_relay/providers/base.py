"""Provider-agnostic base interfaces and helpers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

import httpx

from chat_relay.errors import UpstreamError
from chat_relay.types import Message, ProviderName


class BaseProvider(ABC):
    """Abstract base class for provider adapters.

    Subclasses translate the normalized message list into their provider's
    wire format and normalize the response back into plain text. Every
    adapter owns one ``httpx.AsyncClient``; pass ``transport`` to swap the
    network out in tests.
    """

    name: ProviderName
    default_base_url: str
    fallback_error: str

    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str | None = None,
        timeout_s: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=(base_url or self.default_base_url).rstrip("/"),
            timeout=timeout_s,
            transport=transport,
        )
        self._headers = self._auth_headers(api_key)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @abstractmethod
    async def converse(self, model: str, messages: Sequence[Message]) -> str:
        """Send ``messages`` to ``model`` and return the generated text.

        Returns an empty string when the provider produced no text.
        """
        raise NotImplementedError

    @abstractmethod
    def _auth_headers(self, api_key: str) -> dict[str, str]:
        raise NotImplementedError

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.post(path, headers=self._headers, json=payload)
        except httpx.HTTPError as exc:
            self._logger.warning("%s request failed: %s", self.name.value, exc)
            raise UpstreamError(self.name.value, self.fallback_error) from exc
        return self._json_or_error(response)

    def _json_or_error(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_error:
            raise UpstreamError(
                self.name.value,
                error_message(data) or self.fallback_error,
                status_code=response.status_code,
            )
        if not isinstance(data, dict):
            self._logger.warning("%s returned a non-JSON body", self.name.value)
            raise UpstreamError(self.name.value, self.fallback_error, status_code=response.status_code)
        return data

    def _malformed(self, field: str) -> UpstreamError:
        """Build the error raised when a success body has ``field`` in an unexpected shape."""
        self._logger.warning("%s returned an unexpected %r in its response", self.name.value, field)
        return UpstreamError(self.name.value, self.fallback_error)


def error_message(data: Any) -> str | None:
    """Extract ``error.message`` from a provider error envelope, if present."""
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def join_text(parts: Any, *, kind: str | None = None) -> str:
    """Concatenate the ``text`` of every fragment, optionally filtered by ``type``."""
    if not isinstance(parts, list):
        return ""
    chunks: list[str] = []
    for part in parts:
        if not isinstance(part, dict):
            continue
        if kind is not None and part.get("type") != kind:
            continue
        text = part.get("text")
        if isinstance(text, str):
            chunks.append(text)
    return "".join(chunks)
