"""
Generation Gateway - Runs one operation end to end.

Pipeline for a single call:

    inputs ──► validate (input model) ──► prompt + localization
           ──► attach images ──► credential guard ──► Gemini call
           ──► decode ──► result model

The gateway is the error boundary: whatever goes wrong, the caller sees
exactly one of ConfigurationError, InputError, TransportError or
ValidationError. Nothing is retried, cached or shared between calls.

Usage:
======
    from creatortune.ai.gateway import gateway

    audit = await gateway.run("channel_audit", {"channel_url": url}, language="hi")
    audit.overall_score
"""

import logging
import uuid
from typing import Any, Callable, Dict, Optional, Union

from google import genai
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from creatortune.ai.decoder import decode
from creatortune.ai.errors import GatewayError, InputError, TransportError
from creatortune.ai.localization import Language
from creatortune.ai.monitoring import ai_logger
from creatortune.ai.multimodal import attach_images
from creatortune.ai.operations.inputs import OperationInput, input_error_message
from creatortune.ai.operations.registry import (
    OperationName,
    OperationRegistry,
    OperationSpec,
    operation_registry,
)
from creatortune.ai.providers.gemini import GeminiProvider, gemini_provider, get_client
from creatortune.ai.schemas import ResultModel


logger = logging.getLogger("creatortune.ai.gateway")


class GenerationGateway:
    """
    Executes registered operations against Gemini.

    Args:
        provider: Performs the outbound call (defaults to gemini_provider)
        client_factory: Returns a client or raises ConfigurationError
            (defaults to get_client, which re-checks the key every call)
        registry: Where operations are looked up
    """

    def __init__(
        self,
        provider: Optional[GeminiProvider] = None,
        client_factory: Optional[Callable[[], genai.Client]] = None,
        registry: Optional[OperationRegistry] = None,
    ):
        self.provider = provider or gemini_provider
        self.client_factory = client_factory or get_client
        self.registry = registry or operation_registry

    async def run(
        self,
        operation: Union[OperationName, str],
        inputs: Union[OperationInput, Dict[str, Any]],
        language: Union[Language, str] = Language.EN,
    ) -> ResultModel:
        """
        Run one operation.

        Args:
            operation: OperationName or its string value
            inputs: The operation's input model, or a dict to validate into it
            language: Output language for string values (ignored by the chatbot)

        Returns:
            The validated result model of the operation

        Raises:
            ConfigurationError: API key missing
            InputError: Unknown operation, unsupported language or invalid inputs
            TransportError: The Gemini call failed
            ValidationError: The response was not valid JSON for the schema
        """
        request_id = str(uuid.uuid4())
        operation_name = operation.value if isinstance(operation, OperationName) else str(operation)

        try:
            return await self._run(request_id, operation_name, inputs, language)
        except GatewayError as e:
            if e.operation is None:
                e.operation = operation_name
            ai_logger.log_error(
                request_id=request_id,
                error=e.message,
                stage=e.kind.value,
                metadata={"operation": e.operation, "detail": getattr(e, "detail", None)},
            )
            raise
        except Exception as e:
            logger.exception(f"Unexpected failure in {operation_name}")
            ai_logger.log_error(
                request_id=request_id,
                error=str(e),
                stage="unexpected",
                metadata={"operation": operation_name},
            )
            spec = self.registry.get_operation(operation_name)
            message = spec.failure_message if spec else str(e)
            raise TransportError(message, operation=operation_name) from e

    async def _run(
        self,
        request_id: str,
        operation_name: str,
        inputs: Union[OperationInput, Dict[str, Any]],
        language: Union[Language, str],
    ) -> ResultModel:
        spec = self.registry.get_operation(operation_name)
        if spec is None:
            raise InputError(f"Unknown operation: {operation_name}", operation=operation_name)

        lang = self._resolve_language(language, operation_name)
        validated = self._validate_inputs(spec, inputs)

        envelope = attach_images(
            spec.build_prompt(validated, lang),
            validated.images(),
            schema=spec.output_schema,
            preamble=spec.preamble,
            system_instruction=spec.build_system_instruction(validated),
        )

        # Checked per call, after input validation
        client = self.client_factory()

        ai_logger.log_request(
            request_id=request_id,
            operation=operation_name,
            model=self.provider.model,
            prompt=envelope.prompt_text,
            image_count=len(envelope.image_parts),
            language=lang.value if spec.localized else None,
        )

        try:
            response = await self.provider.invoke(client, envelope, operation=operation_name)
        except TransportError as e:
            raise TransportError(spec.failure_message, operation=operation_name) from e

        ai_logger.log_response(request_id=request_id, operation=operation_name, response=response)

        result = decode(
            response.text,
            spec.result_model,
            operation=operation_name,
            failure_message=spec.failure_message,
        )
        value = result.unwrap()

        ai_logger.log_event(request_id, "decode_succeeded", {"operation": operation_name})
        return value

    # -----------------------------------------------------------------------
    # HELPERS
    # -----------------------------------------------------------------------

    def _resolve_language(self, language: Union[Language, str], operation_name: str) -> Language:
        try:
            return Language(language)
        except ValueError as e:
            raise InputError(f"Unsupported language: {language}", operation=operation_name) from e

    def _validate_inputs(
        self,
        spec: OperationSpec,
        inputs: Union[OperationInput, BaseModel, Dict[str, Any]],
    ) -> OperationInput:
        if isinstance(inputs, spec.input_model):
            return inputs

        data = inputs.model_dump() if isinstance(inputs, BaseModel) else inputs
        try:
            return spec.input_model.model_validate(data)
        except PydanticValidationError as e:
            message = input_error_message(spec.input_model, e)
            logger.info(f"Rejected inputs for {spec.name.value}: {message}")
            raise InputError(message, operation=spec.name.value) from e


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------

gateway = GenerationGateway()
