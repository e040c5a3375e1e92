"""
Tests for the Gemini provider - credential guard and the single generation call.

This module tests:
- get_client(): missing / "undefined" keys, per-key caching, runtime re-check
- TokenUsage and GenerationResponse dataclasses
- GeminiProvider.invoke(): JSON mode config, content parts, error mapping

No real client is ever created: genai.Client is patched or replaced by a fake.
"""

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from creatortune.core.config import settings
from creatortune.ai.errors import ConfigurationError, ErrorKind, MISSING_API_KEY_MESSAGE, TransportError
from creatortune.ai.multimodal import RequestEnvelope
from creatortune.ai.providers.base import GenerationResponse, TokenUsage
from creatortune.ai.providers.gemini import GeminiProvider, get_client


# ===========================================================================
# CREDENTIAL GUARD
# ===========================================================================

class TestGetClient:
    """Tests for get_client()."""

    def test_empty_key_raises_configuration_error(self, no_api_key):
        with pytest.raises(ConfigurationError) as exc_info:
            get_client()

        assert exc_info.value.kind == ErrorKind.CONFIGURATION
        assert exc_info.value.message == MISSING_API_KEY_MESSAGE

    @pytest.mark.parametrize("value", ["undefined", "   ", ""])
    def test_unset_placeholders_raise(self, monkeypatch, value):
        monkeypatch.setattr(settings, "GEMINI_API_KEY", value)

        with pytest.raises(ConfigurationError):
            get_client()

    def test_message_names_the_environment_variable(self, no_api_key):
        with pytest.raises(ConfigurationError) as exc_info:
            get_client()

        assert "GEMINI_API_KEY" in str(exc_info.value)

    def test_same_key_returns_cached_client(self, api_key):
        with patch("creatortune.ai.providers.gemini.genai.Client") as client_cls:
            first = get_client()
            second = get_client()

        assert first is second
        client_cls.assert_called_once_with(api_key="test-key")

    def test_explicit_key_overrides_settings(self, no_api_key):
        with patch("creatortune.ai.providers.gemini.genai.Client") as client_cls:
            get_client(api_key="explicit-key")

        client_cls.assert_called_once_with(api_key="explicit-key")

    def test_key_is_rechecked_on_every_call(self, api_key, monkeypatch):
        """Clearing the key at runtime makes the next call fail instead of reusing a client."""
        with patch("creatortune.ai.providers.gemini.genai.Client"):
            get_client()
            monkeypatch.setattr(settings, "GEMINI_API_KEY", "")

            with pytest.raises(ConfigurationError):
                get_client()


# ===========================================================================
# RESPONSE DATACLASSES
# ===========================================================================

class TestTokenUsage:
    """Tests for TokenUsage dataclass."""

    def test_auto_calculate_total(self):
        usage = TokenUsage(prompt_tokens=100, completion_tokens=50)

        assert usage.total_tokens == 150

    def test_default_values(self):
        usage = TokenUsage()

        assert usage.prompt_tokens == 0
        assert usage.completion_tokens == 0
        assert usage.total_tokens == 0


class TestGenerationResponse:
    """Tests for GenerationResponse dataclass."""

    def test_defaults(self):
        response = GenerationResponse(text="{}", model="gemini-test")

        assert response.usage.to_dict() == {"prompt": 0, "completion": 0, "total": 0}
        assert response.latency_ms == 0.0
        assert response.raw_response is None
        assert response.created_at.tzinfo is not None


# ===========================================================================
# INVOKER
# ===========================================================================

class TestGeminiProviderInvoke:
    """Tests for GeminiProvider.invoke() with a fake client."""

    @pytest.fixture
    def envelope(self):
        return RequestEnvelope(
            prompt_text="Audit this channel.",
            schema={"type": "OBJECT", "properties": {"a": {"type": "STRING"}}, "required": ["a"]},
        )

    @pytest.mark.asyncio
    async def test_makes_exactly_one_json_mode_call(self, fake_client_factory, envelope):
        client = fake_client_factory(text='{"a": "b"}')
        provider = GeminiProvider(model="gemini-test")

        response = await provider.invoke(client, envelope, operation="channel_audit")

        client.aio.models.generate_content.assert_awaited_once()
        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["config"].response_mime_type == "application/json"
        assert kwargs["config"].response_schema is not None
        assert response.text == '{"a": "b"}'
        assert response.model == "gemini-test"

    @pytest.mark.asyncio
    async def test_sends_prompt_as_text_part(self, fake_client_factory, envelope):
        client = fake_client_factory(text="{}")

        await GeminiProvider(model="gemini-test").invoke(client, envelope)

        contents = client.aio.models.generate_content.call_args.kwargs["contents"]
        assert len(contents) == 1
        assert contents[0].text == "Audit this channel."

    @pytest.mark.asyncio
    async def test_missing_text_becomes_empty_string(self, fake_client_factory, envelope):
        client = fake_client_factory(text=None)

        response = await GeminiProvider(model="gemini-test").invoke(client, envelope)

        assert response.text == ""

    @pytest.mark.asyncio
    async def test_sdk_exception_becomes_transport_error(self, fake_client_factory, envelope):
        client = fake_client_factory(error=RuntimeError("connection reset"))

        with pytest.raises(TransportError) as exc_info:
            await GeminiProvider(model="gemini-test").invoke(client, envelope, operation="channel_audit")

        assert exc_info.value.operation == "channel_audit"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_usage_metadata_is_extracted(self, envelope):
        client = MagicMock()

        async def generate_content(**kwargs):
            return SimpleNamespace(
                text="{}",
                usage_metadata=SimpleNamespace(prompt_token_count=120, candidates_token_count=30),
            )

        client.aio.models.generate_content = generate_content

        response = await GeminiProvider(model="gemini-test").invoke(client, envelope)

        assert response.usage.prompt_tokens == 120
        assert response.usage.completion_tokens == 30
        assert response.usage.total_tokens == 150
