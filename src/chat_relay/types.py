"""Provider-agnostic request/response models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["system", "user", "assistant"]


class ProviderName(str, Enum):
    """Closed set of providers the server can route to."""

    OPENAI = "OpenAI"
    ANTHROPIC = "Anthropic"
    GOOGLE = "Google"
    MISTRAL = "Mistral"
    META = "Meta"

    @classmethod
    def parse(cls, value: str | ProviderName) -> ProviderName | None:
        """Return the member named ``value`` or ``None`` if it is unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


class Message(BaseModel):
    """Single chat message.

    "system" is only ever synthesized internally; the HTTP layer accepts
    user and assistant turns.
    """

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Normalized request shared by all providers."""

    provider: str = ""
    model: str
    messages: list[Message]


class ModelCatalogEntry(BaseModel):
    """Hardcoded representative model for one provider."""

    provider: ProviderName
    model: str
    label: str
    description: str


class CatalogModel(BaseModel):
    """Item of a provider's dynamic model listing."""

    id: str
    created: int = 0


class ModelListing(BaseModel):
    """Payload returned by the model catalog endpoint."""

    latest: list[CatalogModel] = Field(default_factory=list)
    all: list[CatalogModel] = Field(default_factory=list)
    top5: list[ModelCatalogEntry] = Field(default_factory=list)
