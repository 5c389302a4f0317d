"""Process-wide settings read once from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEMO_TOKEN = "demo-token"


class Settings(BaseModel):
    """Immutable configuration passed explicitly to the app factory."""

    model_config = ConfigDict(frozen=True)

    openai_api_key: str = ""
    anthropic_api_key: str = ""
    gemini_api_key: str = ""
    mistral_api_key: str = ""
    meta_api_key: str = ""
    meta_base_url: str = ""

    demo_user: str = "demo"
    demo_password: str = "demo"
    demo_token: str = DEMO_TOKEN

    timeout_s: float = 60.0
    static_dir: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ`` (``os.environ`` when omitted)."""
        env = os.environ if environ is None else environ

        def get(name: str, default: str = "") -> str:
            return (env.get(name) or default).strip()

        static_dir = get("CHAT_RELAY_STATIC_DIR")
        return cls(
            openai_api_key=get("OPENAI_API_KEY"),
            anthropic_api_key=get("ANTHROPIC_API_KEY"),
            gemini_api_key=get("GEMINI_API_KEY"),
            mistral_api_key=get("MISTRAL_API_KEY"),
            meta_api_key=get("META_API_KEY"),
            meta_base_url=get("META_API_BASE_URL"),
            demo_user=get("DEMO_USER", "demo"),
            demo_password=get("DEMO_PASS", "demo"),
            timeout_s=float(get("CHAT_RELAY_TIMEOUT_S", "60")),
            static_dir=Path(static_dir) if static_dir else None,
        )
