import unittest
from pathlib import Path

from chat_relay.auth import AccessGate
from chat_relay.availability import AvailabilityRegistry
from chat_relay.config import Settings
from chat_relay.errors import AuthError, ProviderUnavailable, UnsupportedProviderError
from chat_relay.providers import MetaProvider, OpenAIProvider, build_providers
from chat_relay.types import ProviderName


class SettingsTests(unittest.TestCase):
    def test_from_env_reads_and_strips(self) -> None:
        settings = Settings.from_env(
            {
                "OPENAI_API_KEY": " sk-1 ",
                "META_API_BASE_URL": "https://llama.example.com/",
                "DEMO_USER": "ana",
                "CHAT_RELAY_TIMEOUT_S": "12.5",
                "CHAT_RELAY_STATIC_DIR": "public",
            }
        )
        self.assertEqual(settings.openai_api_key, "sk-1")
        self.assertEqual(settings.meta_base_url, "https://llama.example.com/")
        self.assertEqual(settings.demo_user, "ana")
        self.assertEqual(settings.demo_password, "demo")
        self.assertEqual(settings.demo_token, "demo-token")
        self.assertEqual(settings.timeout_s, 12.5)
        self.assertEqual(settings.static_dir, Path("public"))

    def test_defaults_from_empty_environment(self) -> None:
        settings = Settings.from_env({})
        self.assertEqual(settings.anthropic_api_key, "")
        self.assertIsNone(settings.static_dir)
        self.assertEqual(settings.timeout_s, 60.0)


class AvailabilityRegistryTests(unittest.TestCase):
    def test_meta_requires_key_and_base_url(self) -> None:
        only_key = AvailabilityRegistry.from_settings(Settings(meta_api_key="k"))
        only_url = AvailabilityRegistry.from_settings(Settings(meta_base_url="https://x"))
        both = AvailabilityRegistry.from_settings(Settings(meta_api_key="k", meta_base_url="https://x"))

        self.assertFalse(only_key.is_available(ProviderName.META))
        self.assertFalse(only_url.is_available("Meta"))
        self.assertTrue(both.is_available("Meta"))
        self.assertFalse(only_key.any())
        self.assertTrue(both.any())

    def test_single_key_providers(self) -> None:
        registry = AvailabilityRegistry.from_settings(Settings(gemini_api_key="g"))
        self.assertEqual(
            registry.status(),
            {"OpenAI": False, "Anthropic": False, "Google": True, "Mistral": False, "Meta": False},
        )
        self.assertFalse(registry.is_available("Gemini"))

    def test_require(self) -> None:
        registry = AvailabilityRegistry.from_settings(Settings(openai_api_key="k"))
        self.assertIs(registry.require("OpenAI"), ProviderName.OPENAI)
        with self.assertRaises(ProviderUnavailable) as ctx:
            registry.require("Mistral")
        self.assertEqual(ctx.exception.message, "Falta API key de Mistral.")
        with self.assertRaises(UnsupportedProviderError):
            registry.require("openai")

    def test_build_providers_only_for_configured(self) -> None:
        settings = Settings(openai_api_key="k", meta_api_key="m", meta_base_url="https://llama.example.com")
        providers = build_providers(settings, AvailabilityRegistry.from_settings(settings))

        self.assertEqual(set(providers), {ProviderName.OPENAI, ProviderName.META})
        self.assertIsInstance(providers[ProviderName.OPENAI], OpenAIProvider)
        self.assertIsInstance(providers[ProviderName.META], MetaProvider)


class AccessGateTests(unittest.TestCase):
    def test_demo_login(self) -> None:
        settings = Settings(demo_user="demo", demo_password="secret")
        gate = AccessGate(settings, AvailabilityRegistry.from_settings(settings))

        self.assertEqual(gate.authenticate("demo", "secret"), "demo-token")
        with self.assertRaises(AuthError):
            gate.authenticate("demo", "wrong")
        with self.assertRaises(AuthError):
            gate.authenticate(None, None)

    def test_token_required_only_without_provider_keys(self) -> None:
        anonymous = Settings()
        gate = AccessGate(anonymous, AvailabilityRegistry.from_settings(anonymous))
        self.assertFalse(gate.is_authorized(None))
        self.assertFalse(gate.is_authorized("nope"))
        self.assertTrue(gate.is_authorized("demo-token"))
        with self.assertRaises(AuthError):
            gate.require(None)

        configured = Settings(mistral_api_key="k")
        trusted = AccessGate(configured, AvailabilityRegistry.from_settings(configured))
        self.assertTrue(trusted.is_authorized(None))
        trusted.require(None)


if __name__ == "__main__":
    unittest.main()
