"""
Flowchart generation API endpoints.
"""

from functools import lru_cache

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from ...services.flowchart_generation import FlowchartGenerationService, GenerationRequest
from ...shared import ValidationError, get_logger
from ..models import ErrorResponse, GenerateResponse, utc_timestamp

router = APIRouter()
logger = get_logger(__name__)


@lru_cache()
def get_generation_service() -> FlowchartGenerationService:
    """Shared service instance; it holds only immutable configuration."""
    return FlowchartGenerationService()


def _parse_request(body) -> GenerationRequest:
    """Validate the inbound body, raising ValidationError with a user-facing message."""
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    prompt = body.get("prompt")
    if not isinstance(prompt, str) or not prompt.strip():
        raise ValidationError("Prompt is required")

    fields = {"prompt": prompt}
    if body.get("diagramType") is not None:
        fields["diagramType"] = body["diagramType"]

    try:
        return GenerationRequest.model_validate(fields)
    except PydanticValidationError:
        raise ValidationError(f"Unsupported diagram type: {body.get('diagramType')!r}")


@router.post("/generate", response_model=GenerateResponse)
async def generate_flowchart(
    request: Request,
    service: FlowchartGenerationService = Depends(get_generation_service),
):
    """
    Generate a flowchart from a natural-language prompt.

    Body:
        prompt: Description of the flow
        diagramType: roadmap | org-chart | process | mind-map (default: process)

    Returns:
        Nodes and edges for the canvas plus the provenance tag in ``usedAI``
    """
    try:
        body = await request.json()
        generation_request = _parse_request(body)

        # The provider chain blocks on network calls
        result = await run_in_threadpool(
            service.generate,
            generation_request.prompt,
            generation_request.diagram_type,
        )

        wire = result.graph.to_wire()
        response = GenerateResponse(
            nodes=wire["nodes"],
            edges=wire["edges"],
            prompt=generation_request.prompt,
            diagram_type=generation_request.diagram_type,
            used_ai=result.provenance,
        )
        return JSONResponse(content=response.model_dump(by_alias=True))

    except ValidationError as e:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(
                error="ValidationError",
                message=str(e),
                timestamp=utc_timestamp()
            ).model_dump()
        )
    except Exception as e:
        logger.error(f"Generation error: {e}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error=type(e).__name__,
                message="Failed to generate flowchart",
                timestamp=utc_timestamp()
            ).model_dump()
        )
