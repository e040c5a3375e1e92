"""
AI Providers Module - The Gemini client and the single generation call.

    client = get_client()
    response = await gemini_provider.invoke(client, envelope)
"""

from creatortune.ai.providers.base import GenerationResponse, TokenUsage
from creatortune.ai.providers.gemini import GeminiProvider, gemini_provider, get_client

__all__ = [
    "GenerationResponse",
    "TokenUsage",
    "GeminiProvider",
    "gemini_provider",
    "get_client",
]
