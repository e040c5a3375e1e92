"""
Operations Router - HTTP access to the generation operations.

    GET  /operations                    list the catalog
    POST /operations/{operation_name}   run one operation

All business logic lives in GenerationGateway; this file only maps HTTP to
gateway calls and gateway errors to status codes:

| Error              | Status |
|--------------------|--------|
| unknown operation  | 404    |
| InputError         | 422    |
| ConfigurationError | 503    |
| TransportError     | 502    |
| ValidationError    | 502    |
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from creatortune.deps import get_gateway
from creatortune.ai.errors import ErrorKind, GatewayError
from creatortune.ai.gateway import GenerationGateway
from creatortune.ai.localization import Language


# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/operations", tags=["operations"])


ERROR_STATUS = {
    ErrorKind.INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.CONFIGURATION: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.TRANSPORT: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.VALIDATION: status.HTTP_502_BAD_GATEWAY,
}


# ---------------------------------------------------------------------------
# REQUEST/RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class OperationRequest(BaseModel):
    """
    Request schema for POST /operations/{operation_name}.

    Example:
    {
        "inputs": {"channel_url": "https://youtube.com/@ThriftyHomestead"},
        "language": "hi"
    }
    """
    inputs: Dict[str, Any] = Field(default_factory=dict, description="The operation's inputs")
    language: Language = Field(default=Language.EN, description="Language for string values in the result")


class OperationInfo(BaseModel):
    """One entry of GET /operations."""
    name: str
    description: str
    image_count: int = Field(description="Number of images the operation attaches")
    localized: bool
    required_fields: List[str] = Field(description="Top-level keys every result contains")


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.get("", response_model=List[OperationInfo])
def list_operations(gw: GenerationGateway = Depends(get_gateway)):
    """List every registered operation."""
    return [
        OperationInfo(
            name=spec.name.value,
            description=spec.description,
            image_count=len(spec.image_slots),
            localized=spec.localized,
            required_fields=spec.required_fields,
        )
        for spec in gw.registry.list_operations()
    ]


@router.post("/{operation_name}")
async def run_operation(
    operation_name: str,
    request: OperationRequest,
    gw: GenerationGateway = Depends(get_gateway),
):
    """
    Run one operation and return its decoded result.

    Optional fields the model left out or sent as null (e.g. competitorAnalysis in a
    retention report without competitor URLs) are omitted from the JSON.
    """
    if not gw.registry.has_operation(operation_name):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"kind": "not_found", "message": f"Unknown operation: {operation_name}"},
        )

    try:
        result = await gw.run(operation_name, request.inputs, language=request.language)
    except GatewayError as e:
        logger.warning(f"Operation {operation_name} failed ({e.kind.value}): {e.message}")
        raise HTTPException(
            status_code=ERROR_STATUS[e.kind],
            detail={"kind": e.kind.value, "message": e.message},
        ) from e

    return result.model_dump(mode="json", exclude_unset=True, exclude_none=True)
