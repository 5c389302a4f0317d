"""Tracks which providers have credentials configured."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from chat_relay.config import Settings
from chat_relay.errors import ProviderUnavailable, UnsupportedProviderError
from chat_relay.types import ProviderName


class AvailabilityRegistry:
    """Immutable ProviderName -> configured flag map computed at startup."""

    def __init__(self, status: Mapping[ProviderName, bool]) -> None:
        self._status: Mapping[ProviderName, bool] = MappingProxyType(
            {provider: bool(status.get(provider, False)) for provider in ProviderName}
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> AvailabilityRegistry:
        return cls(
            {
                ProviderName.OPENAI: bool(settings.openai_api_key),
                ProviderName.ANTHROPIC: bool(settings.anthropic_api_key),
                ProviderName.GOOGLE: bool(settings.gemini_api_key),
                ProviderName.MISTRAL: bool(settings.mistral_api_key),
                ProviderName.META: bool(settings.meta_api_key and settings.meta_base_url),
            }
        )

    def is_available(self, provider: ProviderName | str) -> bool:
        name = ProviderName.parse(provider)
        return name is not None and self._status[name]

    def any(self) -> bool:
        """True if at least one provider can be used without a demo token."""
        return any(self._status.values())

    def status(self) -> dict[str, bool]:
        return {provider.value: flag for provider, flag in self._status.items()}

    def missing_reason(self, provider: ProviderName | str) -> str:
        """Return a user-facing explanation of why ``provider`` cannot be used."""
        name = ProviderName.parse(provider)
        if name is None:
            return "Proveedor no soportado."
        if name is ProviderName.META:
            return "Falta META_API_KEY o META_API_BASE_URL."
        return f"Falta API key de {name.value}."

    def require(self, provider: ProviderName | str) -> ProviderName:
        """Return the parsed provider name or raise if it cannot be routed to."""
        name = ProviderName.parse(provider)
        if name is None:
            raise UnsupportedProviderError(str(provider))
        if not self._status[name]:
            raise ProviderUnavailable(name.value, self.missing_reason(name))
        return name
