"""
Base Provider Types - What one generation call returns.

The gateway only ever talks to Gemini, so there is no abstract provider
class here. These dataclasses keep the call's text separate from its usage
and timing data, which only the logger cares about.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass
class TokenUsage:
    """
    Token usage statistics for a generation call.

    Used for cost tracking in the structured logs.
    """
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        if not self.total_tokens:
            self.total_tokens = self.prompt_tokens + self.completion_tokens

    def to_dict(self) -> Dict[str, int]:
        return {
            "prompt": self.prompt_tokens,
            "completion": self.completion_tokens,
            "total": self.total_tokens,
        }


@dataclass
class GenerationResponse:
    """
    Raw result of one generation call, before decoding.

    Attributes:
        text: The model's raw text ("" when the SDK returned none)
        model: The model that produced it
        usage: Token usage statistics
        latency_ms: How long the call took
        raw_response: Original SDK response (for debugging)
        created_at: Timestamp of the response
    """
    text: str
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    latency_ms: float = 0.0
    raw_response: Optional[Any] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
