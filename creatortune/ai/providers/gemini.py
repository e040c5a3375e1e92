"""
Gemini Provider - Google's GenAI SDK.

Two responsibilities:
- get_client(): the credential guard. Re-reads the API key on every call and
  hands back one genai.Client per key value.
- GeminiProvider.invoke(): the single outbound call of an operation, in JSON
  mode with the operation's response schema.
"""

import time
import logging
from functools import lru_cache
from typing import Optional

from google import genai
from google.genai import types

from creatortune.core.config import settings
from creatortune.ai.errors import ConfigurationError, TransportError
from creatortune.ai.multimodal import RequestEnvelope
from creatortune.ai.providers.base import GenerationResponse, TokenUsage

logger = logging.getLogger("creatortune.ai.gemini")

# Placeholder some .env templates and build tools leave behind for unset keys
UNSET_KEY_VALUES = ("", "undefined")


# ---------------------------------------------------------------------------
# CREDENTIAL GUARD
# ---------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _build_client(api_key: str) -> genai.Client:
    logger.info("Gemini client created")
    return genai.Client(api_key=api_key)


def get_client(api_key: Optional[str] = None) -> genai.Client:
    """
    Return the Gemini client for the configured key.

    The key is checked on every call, so clearing it at runtime makes the
    next operation fail with ConfigurationError instead of reusing a client.

    Args:
        api_key: Explicit key; defaults to settings.GEMINI_API_KEY

    Raises:
        ConfigurationError: The key is empty or the literal "undefined"
    """
    key = settings.GEMINI_API_KEY if api_key is None else api_key
    key = (key or "").strip()
    if key in UNSET_KEY_VALUES:
        logger.warning("Gemini API key not configured")
        raise ConfigurationError()
    return _build_client(key)


# ---------------------------------------------------------------------------
# INVOKER
# ---------------------------------------------------------------------------

class GeminiProvider:
    """Performs exactly one generate_content call per invoke(). No retries."""

    def __init__(self, model: Optional[str] = None):
        self.model = model or settings.GEMINI_MODEL

    async def invoke(
        self,
        client: genai.Client,
        envelope: RequestEnvelope,
        operation: Optional[str] = None,
    ) -> GenerationResponse:
        """
        Send the envelope to Gemini in JSON mode.

        Args:
            client: Client from get_client()
            envelope: Prompt, images and schema for this call
            operation: Operation name for logs and errors

        Returns:
            GenerationResponse with the raw text ("" if the SDK returned none)

        Raises:
            TransportError: Any SDK or network failure
        """
        start_time = time.time()

        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=envelope.schema or None,
            system_instruction=envelope.system_instruction,
        )

        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=envelope.to_contents(),
                config=config,
            )
            text = response.text or ""
        except Exception as e:
            logger.error(f"Gemini generation failed for {operation}: {e}")
            raise TransportError(operation=operation) from e

        return GenerationResponse(
            text=text,
            model=self.model,
            usage=self._extract_usage(response),
            latency_ms=(time.time() - start_time) * 1000,
            raw_response=response,
        )

    def _extract_usage(self, response) -> TokenUsage:
        # The SDK sometimes returns None when no usage was reported
        meta = getattr(response, "usage_metadata", None)
        if not meta:
            return TokenUsage()
        return TokenUsage(
            prompt_tokens=int(getattr(meta, "prompt_token_count", 0) or 0),
            completion_tokens=int(getattr(meta, "candidates_token_count", 0) or 0),
        )


gemini_provider = GeminiProvider()
