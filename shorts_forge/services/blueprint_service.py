"""
Shorts Blueprint Generation Service
Normalizes the request, allocates timing, composes content and assembles the blueprint.
"""
from typing import Any, Mapping, Union
import logging

from shorts_forge.schemas.blueprint import (
    Blueprint,
    BlueprintMetadata,
    GenerationInput,
    GenerationRequest,
    Workflow,
)
from shorts_forge.services.content_service import ContentComposer
from shorts_forge.services.normalizer import normalize_input
from shorts_forge.services.timing_service import allocate_editing_blocks, allocate_segments

logger = logging.getLogger(__name__)


def generate(raw: Union[GenerationRequest, GenerationInput, Mapping[str, Any]]) -> Blueprint:
    """
    Build a complete Shorts blueprint.

    Raises:
        ValidationError: if the topic is missing or blank
    """
    generation_input = normalize_input(raw)

    segment_plan = allocate_segments(generation_input.duration)
    block_plan = allocate_editing_blocks(generation_input.duration)

    composer = ContentComposer(generation_input)
    segments = composer.compose_segments(segment_plan)

    workflow = Workflow(
        automationPipeline=composer.compose_pipeline(),
        contentSegments=segments,
        audioPlan=composer.compose_audio(segments, segment_plan),
        assetChecklist=composer.compose_assets(),
        editingTimeline=composer.compose_timeline(block_plan),
        publishing=composer.compose_publishing(),
        qaChecklist=composer.compose_qa(),
    )

    hook = next((segment for segment in segments if segment.id == "hook"), segments[0])
    metadata = BlueprintMetadata(
        runtime=generation_input.duration,
        audienceHook=hook.narration,
        summary=composer.compose_summary(),
    )

    return Blueprint(metadata=metadata, workflow=workflow)


class BlueprintGenerationService:
    """Service wrapper used by the API layer"""

    def generate_blueprint(self, request: Union[GenerationRequest, Mapping[str, Any]]) -> Blueprint:
        """
        Generate a blueprint for an incoming request

        Args:
            request: Partial generation request

        Returns:
            Blueprint with metadata and workflow sections
        """
        blueprint = generate(request)
        logger.info(
            f"Blueprint generated: runtime={blueprint.metadata.runtime}s, "
            f"segments={len(blueprint.workflow.contentSegments)}, "
            f"hashtags={len(blueprint.workflow.publishing.hashtags)}"
        )
        return blueprint
