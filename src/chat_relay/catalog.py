"""Static model catalog shown by the UI regardless of configuration."""

from __future__ import annotations

from chat_relay.types import CatalogModel, ModelCatalogEntry, ModelListing, ProviderName

LATEST_LIMIT = 8

TOP5_MODELS: tuple[ModelCatalogEntry, ...] = (
    ModelCatalogEntry(
        provider=ProviderName.OPENAI,
        model="gpt-4.1",
        label="GPT-4.1",
        description="Modelo de uso general con foco en codigo.",
    ),
    ModelCatalogEntry(
        provider=ProviderName.ANTHROPIC,
        model="claude-3.5-sonnet",
        label="Claude 3.5 Sonnet",
        description="Equilibrio entre razonamiento y velocidad.",
    ),
    ModelCatalogEntry(
        provider=ProviderName.GOOGLE,
        model="gemini-1.5-pro",
        label="Gemini 1.5 Pro",
        description="Multimodal con contexto largo.",
    ),
    ModelCatalogEntry(
        provider=ProviderName.META,
        model="llama-3.1",
        label="Llama 3.1",
        description="Modelo abierto de alta capacidad.",
    ),
    ModelCatalogEntry(
        provider=ProviderName.MISTRAL,
        model="mistral-large-2",
        label="Mistral Large 2",
        description="Razonamiento y codigo con buen costo.",
    ),
)


def build_listing(models: list[CatalogModel] | None = None) -> ModelListing:
    """Wrap an already sorted dynamic listing together with the top-5 entries."""
    models = list(models or [])
    return ModelListing(latest=models[:LATEST_LIMIT], all=models, top5=list(TOP5_MODELS))
