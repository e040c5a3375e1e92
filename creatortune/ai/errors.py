"""
Gateway Errors - The closed failure taxonomy of the generation gateway.

Every failure a caller can observe is one of four kinds:

| Kind          | Raised when                                              |
|---------------|----------------------------------------------------------|
| configuration | The API credential is missing or unset                   |
| input         | A domain input fails validation (URL, image size, ...)   |
| transport     | The outbound call to Gemini fails                        |
| validation    | The model's text is not JSON or does not match the schema |

Internal causes (SDK exceptions, json errors, pydantic errors) are chained
with ``raise ... from exc`` and never cross the gateway boundary untyped.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Tag carried by every GatewayError."""
    CONFIGURATION = "configuration"
    INPUT = "input"
    TRANSPORT = "transport"
    VALIDATION = "validation"


MISSING_API_KEY_MESSAGE = (
    "API Key is not configured. Please set the GEMINI_API_KEY "
    "environment variable in your .env file."
)

GENERIC_FAILURE_MESSAGE = "Failed to get a response from AI. Please try again."


class GatewayError(Exception):
    """
    Base class for every error the gateway surfaces.

    Attributes:
        kind: Which of the four taxonomy kinds this is
        message: Stable, user-presentable message
        operation: Name of the operation that failed (None if not yet known)
    """

    kind: ErrorKind

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


class ConfigurationError(GatewayError):
    """Credential missing or unset at call time. Never retried."""
    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE, operation: Optional[str] = None):
        super().__init__(message, operation)


class InputError(GatewayError):
    """A domain input failed pre-call validation. No network call is made."""
    kind = ErrorKind.INPUT


class TransportError(GatewayError):
    """The outbound generation call itself failed."""
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE, operation: Optional[str] = None):
        super().__init__(message, operation)


class ValidationError(GatewayError):
    """
    The model's output was unusable.

    Raised for text that is not JSON, JSON that is not an object, and objects
    that miss required fields or carry values outside an enumeration.
    """
    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = GENERIC_FAILURE_MESSAGE,
        operation: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        super().__init__(message, operation)
        # Internal diagnostic (which field failed); logged, not shown to users
        self.detail = detail
