import asyncio

from chat_relay.availability import AvailabilityRegistry
from chat_relay.config import Settings
from chat_relay.errors import UpstreamError
from chat_relay.providers import build_providers
from chat_relay.router import Router
from chat_relay.types import Message, ProviderName


async def main() -> None:
    settings = Settings.from_env()
    registry = AvailabilityRegistry.from_settings(settings)
    router = Router(registry, build_providers(settings, registry))

    # Unconfigured providers answer with a soft-fail message instead of raising.
    messages = [Message(role="user", content="hola")]
    try:
        for provider, model in (
            (ProviderName.OPENAI, "gpt-4.1"),
            (ProviderName.ANTHROPIC, "claude-3.5-sonnet"),
            (ProviderName.GOOGLE, "gemini-1.5-pro"),
            (ProviderName.MISTRAL, "mistral-large-2"),
            (ProviderName.META, "llama-3.1"),
        ):
            try:
                text = await router.route_chat(provider, model, messages)
            except UpstreamError as e:
                text = f"error: {e}"
            print(f"{provider.value:<10} {text}")
    finally:
        await router.aclose()


if __name__ == "__main__":
    asyncio.run(main())
