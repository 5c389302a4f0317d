"""Async router dispatching conversations to configured providers."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from chat_relay.availability import AvailabilityRegistry
from chat_relay.catalog import build_listing
from chat_relay.errors import ProviderUnavailable, UnsupportedProviderError, UpstreamError
from chat_relay.providers.base import BaseProvider
from chat_relay.providers.openai import OpenAIProvider
from chat_relay.titles import UNAVAILABLE_TITLE, interpret_title, title_messages
from chat_relay.types import Message, ModelListing, ProviderName

UNAVAILABLE_PREFIX = "Proveedor no configurado. "


class Router:
    """High-level coordinator for talking to configured providers.

    Unavailable providers never raise out of :meth:`route_chat` or
    :meth:`route_title`; each call shape has its own soft fallback.
    """

    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        registry: AvailabilityRegistry,
        providers: Mapping[ProviderName, BaseProvider],
    ) -> None:
        self._registry = registry
        self._providers: dict[ProviderName, BaseProvider] = dict(providers)

    @property
    def registry(self) -> AvailabilityRegistry:
        return self._registry

    def get_provider(self, provider: ProviderName | str) -> BaseProvider:
        """Return the adapter for ``provider`` once availability is confirmed."""
        name = self._registry.require(provider)
        try:
            return self._providers[name]
        except KeyError as exc:
            raise UnsupportedProviderError(name.value) from exc

    async def route_chat(
        self, provider: ProviderName | str, model: str, messages: Sequence[Message]
    ) -> str:
        """Return the assistant reply, or an explanation if the provider is not set up."""
        try:
            adapter = self.get_provider(provider)
        except ProviderUnavailable as exc:
            self._logger.info("Chat for unavailable provider %r: %s", provider, exc.message)
            return UNAVAILABLE_PREFIX + exc.message

        self._logger.info("Routing chat to %s (model=%s, turns=%d)", adapter.name.value, model, len(messages))
        try:
            return await adapter.converse(model, messages)
        except UpstreamError as exc:
            self._logger.warning("Chat failed: %s", exc)
            raise

    async def route_title(
        self, provider: ProviderName | str, model: str, messages: Sequence[Message]
    ) -> str:
        """Return a short title for the conversation."""
        try:
            adapter = self.get_provider(provider)
        except ProviderUnavailable:
            return UNAVAILABLE_TITLE

        self._logger.info("Routing title to %s (model=%s)", adapter.name.value, model)
        try:
            text = await adapter.converse(model, title_messages(messages))
        except UpstreamError as exc:
            self._logger.warning("Title generation failed: %s", exc)
            raise
        return interpret_title(text)

    async def list_models(self) -> ModelListing:
        """Return the dynamic OpenAI listing (when configured) plus the top-5 entries."""
        adapter = self._providers.get(ProviderName.OPENAI)
        if not self._registry.is_available(ProviderName.OPENAI) or not isinstance(adapter, OpenAIProvider):
            return build_listing()
        return build_listing(await adapter.list_models())

    async def aclose(self) -> None:
        for adapter in self._providers.values():
            await adapter.aclose()
