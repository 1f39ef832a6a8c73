"""
Blueprint API endpoints
Endpoints for generating Shorts production blueprints
"""
from fastapi import APIRouter, HTTPException, status
import logging

from shorts_forge.core.exceptions import ValidationError
from shorts_forge.schemas.blueprint import Blueprint, GenerationRequest
from shorts_forge.services.blueprint_service import BlueprintGenerationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blueprint", tags=["Blueprint"])

GENERIC_FAILURE = "Failed to generate workflow. Please try again."


@router.post(
    "/generate",
    response_model=Blueprint,
    responses={
        400: {"description": "Topic is missing"},
        500: {"description": "Server error"},
    },
)
async def generate_blueprint(request: GenerationRequest):
    """
    Generate a Shorts production blueprint.

    - **topic**: Topic of the Short (required)
    - **niche**, **persona**, **vibe**, **targetAudience**, **callToAction**: optional free text
    - **duration**: Target runtime in seconds (default 55, clamped to 35-65)

    Returns the blueprint with:
    - metadata (runtime, audience hook, summary)
    - workflow (pipeline, segments, audio, assets, timeline, publishing, QA)

    Errors come back as FastAPI's `{"detail": "..."}` body (400 for a blank
    topic, 500 otherwise). Clients that read an `error` key must read
    `detail` instead to show the message.
    """
    logger.info(f"Blueprint request received: topic={request.topic!r}, duration={request.duration!r}")

    try:
        service = BlueprintGenerationService()
        return service.generate_blueprint(request)

    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.error(f"Error generating blueprint: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=GENERIC_FAILURE,
        )
