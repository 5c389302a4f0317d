"""Conversation title generation helpers."""

from __future__ import annotations

from collections.abc import Sequence

from chat_relay.types import Message

TITLE_CONTEXT_WINDOW = 6
DEFAULT_TITLE = "Nueva conversacion"
UNAVAILABLE_TITLE = "Conversacion demo"

_INSTRUCTION = (
    "Genera un titulo corto (3-6 palabras) en espanol que resuma la conversacion. "
    "No uses comillas."
)


def build_title_prompt(messages: Sequence[Message]) -> str:
    """Render the last few turns as an instruction asking for a short title."""
    context = "\n".join(
        f"{'Asistente' if m.role == 'assistant' else 'Usuario'}: {m.content}"
        for m in list(messages)[-TITLE_CONTEXT_WINDOW:]
    )
    return f"{_INSTRUCTION}\n\n{context}"


def title_messages(messages: Sequence[Message]) -> list[Message]:
    """Wrap the title prompt as the single synthetic turn sent to the provider."""
    return [Message(role="user", content=build_title_prompt(messages))]


def interpret_title(text: str | None) -> str:
    return (text or "").strip() or DEFAULT_TITLE
