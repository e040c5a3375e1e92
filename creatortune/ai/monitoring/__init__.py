"""
Monitoring Module - Structured logging for generation calls.

Usage:
======
    from creatortune.ai.monitoring import ai_logger

    ai_logger.log_request(request_id, operation, model, prompt)
    ai_logger.log_response(request_id, operation, response)
"""

from creatortune.ai.monitoring.logger import AILogger, ai_logger

__all__ = [
    "AILogger",
    "ai_logger",
]
