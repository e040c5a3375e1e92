"""
Response Decoder - Turn the model's raw text into a validated result model.

decode() never raises. It returns a DecodeResult that is either a success
carrying the pydantic result, or a failure carrying a ValidationError ready
to be raised by the gateway.

Steps:
1. Trim whitespace
2. Strip a stray ```json fence (JSON mode occasionally still emits one)
3. json.loads
4. Require a JSON object at the top level
5. result_model.model_validate (required fields, enum values, numeric ranges)
"""

import json
import logging
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from creatortune.ai.errors import GENERIC_FAILURE_MESSAGE, ValidationError


logger = logging.getLogger("creatortune.ai.decoder")

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class DecodeResult(Generic[T]):
    """Outcome of decoding one response: exactly one of value/error is set."""
    value: Optional[T] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the stored ValidationError."""
        if self.error is not None:
            raise self.error
        return self.value


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ``` or ```json fence, if any."""
    content = text.strip()
    if not content.startswith("```"):
        return content

    content = content[3:]
    if content[:4].lower() == "json":
        content = content[4:]
    if content.rstrip().endswith("```"):
        content = content.rstrip()[:-3]
    return content.strip()


def _failure(message: str, operation: Optional[str], detail: str) -> DecodeResult:
    logger.warning(f"Decode failed for {operation or 'unknown operation'}: {detail}")
    return DecodeResult(error=ValidationError(message, operation=operation, detail=detail))


def decode(
    raw_text: Optional[str],
    result_model: Type[T],
    operation: Optional[str] = None,
    failure_message: str = GENERIC_FAILURE_MESSAGE,
) -> DecodeResult[T]:
    """
    Decode raw model output into result_model.

    Args:
        raw_text: Text returned by the model (may be None or empty)
        result_model: Pydantic model to validate against
        operation: Operation name, carried into the error
        failure_message: User-facing message of the ValidationError

    Returns:
        DecodeResult with the validated model or a ValidationError
    """
    content = strip_code_fence(raw_text or "")
    if not content:
        return _failure(failure_message, operation, "empty response")

    try:
        data = json.loads(content)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Raw response (first 500 chars): {content[:500]}")
        return _failure(failure_message, operation, f"invalid JSON: {e}")

    if not isinstance(data, dict):
        return _failure(failure_message, operation, f"expected a JSON object, got {type(data).__name__}")

    try:
        value = result_model.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        return _failure(failure_message, operation, f"{location}: {first['msg']}")

    return DecodeResult(value=value)
