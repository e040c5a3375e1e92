"""
AI Logger - Structured logging for generation calls.

Every gateway call emits JSON log lines that share a request ID:
- ai_request: operation, model, prompt size, image count, language
- ai_response: latency, token usage, response size
- ai_error: failure kind, message, and the stage it happened in

Prompts are only logged as a short preview; images never are.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from creatortune.core.config import settings
from creatortune.ai.providers.base import GenerationResponse


PREVIEW_CHARS = 100


def _configure_logger() -> logging.Logger:
    """The "creatortune.ai" logger, writing to stdout once per process."""
    ai_log = logging.getLogger("creatortune.ai")
    level = logging.DEBUG if settings.DEBUG else logging.INFO
    ai_log.setLevel(level)

    if not ai_log.handlers:
        stream = logging.StreamHandler(sys.stdout)
        stream.setLevel(level)
        stream.setFormatter(logging.Formatter(
            "[%(asctime)s] %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        ai_log.addHandler(stream)
    return ai_log


def _preview(text: str) -> str:
    if len(text) <= PREVIEW_CHARS:
        return text
    return text[:PREVIEW_CHARS] + "..."


class AILogger:
    """
    Structured logger for generation calls.

    Usage:
        ai_logger.log_request(
            request_id=request_id,
            operation="channel_audit",
            model="gemini-2.5-flash",
            prompt=envelope.prompt_text,
        )
        ai_logger.log_response(request_id, "channel_audit", response)
    """

    def __init__(self, target: Optional[logging.Logger] = None):
        self._logger = target or _configure_logger()

    def _emit(self, level: int, label: str, event: str, request_id: str, fields: Dict[str, Any]) -> None:
        record = {"event": event, "request_id": request_id, **fields}
        record["timestamp"] = datetime.now(timezone.utc).isoformat()
        self._logger.log(level, f"{label}: {json.dumps(record, ensure_ascii=False, default=str)}")

    def log_request(
        self,
        request_id: str,
        operation: str,
        model: str,
        prompt: str,
        image_count: int = 0,
        language: Optional[str] = None,
    ) -> None:
        """
        Log an outbound generation request.

        Args:
            request_id: Identifier shared by every line of this call
            operation: Operation name
            model: Gemini model the call goes to
            prompt: Final prompt text (only a preview is logged)
            image_count: Number of attached images
            language: Output language, None for operations that ignore it
        """
        self._emit(logging.INFO, "AI Request", "ai_request", request_id, {
            "operation": operation,
            "model": model,
            "prompt_length": len(prompt),
            "prompt_preview": _preview(prompt),
            "image_count": image_count,
            "language": language,
        })

    def log_response(self, request_id: str, operation: str, response: GenerationResponse) -> None:
        """Log the raw response of a generation call (before decoding)."""
        self._emit(logging.INFO, "AI Response", "ai_response", request_id, {
            "operation": operation,
            "model": response.model,
            "latency_ms": round(response.latency_ms, 2),
            "tokens": response.usage.to_dict(),
            "response_length": len(response.text),
        })

    def log_error(
        self,
        request_id: str,
        error: str,
        stage: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log a failure in the generation pipeline.

        ``stage`` is the error kind (input, configuration, transport,
        validation) or "unexpected" for anything the gateway had to wrap.
        """
        fields: Dict[str, Any] = {"error": error, "stage": stage}
        if metadata:
            fields["metadata"] = metadata
        self._emit(logging.ERROR, "AI Error", "ai_error", request_id, fields)

    def log_event(self, request_id: str, event_type: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, "AI Event", event_type, request_id, dict(data or {}))


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
ai_logger = AILogger()
