"""Request and response bodies of the HTTP API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from chat_relay.types import ChatRequest, Message, ModelCatalogEntry


class ChatMessage(Message):
    """History turn as sent by the browser; system turns are not accepted."""

    role: Literal["user", "assistant"]


class ConversationBody(ChatRequest):
    """Body shared by ``/api/chat`` and ``/api/title``."""

    model: str = Field(min_length=1)
    messages: list[ChatMessage]


class AuthBody(BaseModel):
    username: str | None = None
    password: str | None = None


class TokenResponse(BaseModel):
    token: str


class ChatResponse(BaseModel):
    text: str


class TitleResponse(BaseModel):
    title: str


class ConfigResponse(BaseModel):
    hasOpenAIKey: bool
    hasAnyProviderKey: bool
    providerStatus: dict[str, bool]
    top5: list[ModelCatalogEntry]
