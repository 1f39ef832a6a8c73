import re

import pytest

from shorts_forge.core.exceptions import ValidationError
from shorts_forge.schemas.blueprint import GenerationRequest
from shorts_forge.services.blueprint_service import BlueprintGenerationService, generate

HASHTAG_PATTERN = re.compile(r"^#[a-z0-9]+$")


def _seconds(clock):
    minutes, seconds = clock.split(":")
    return int(minutes) * 60 + int(seconds)


def test_generate_is_deterministic(full_request):
    first = generate(full_request)
    second = generate(dict(full_request))

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


@pytest.mark.parametrize("duration, runtime", [(10, 35), (999, 65), (42, 42)])
def test_runtime_is_clamped(duration, runtime):
    assert generate({"topic": "x", "duration": duration}).metadata.runtime == runtime


def test_runtime_defaults_when_omitted():
    assert generate({"topic": "x"}).metadata.runtime == 55


@pytest.mark.parametrize("topic", ["", "   "])
def test_blank_topic_fails(topic):
    with pytest.raises(ValidationError):
        generate({"topic": topic})


def test_single_character_topic_succeeds():
    blueprint = generate({"topic": "x"})
    assert blueprint.workflow.publishing.title.startswith("x")


@pytest.mark.parametrize("duration", range(35, 66))
def test_segments_tile_runtime(duration):
    blueprint = generate({"topic": "x", "duration": duration})
    segments = blueprint.workflow.contentSegments

    assert sum(segment.duration for segment in segments) == blueprint.metadata.runtime
    assert all(segment.duration > 0 for segment in segments)

    timestamps = [segment.timestamp for segment in segments]
    assert timestamps == sorted(timestamps)

    cursor = 0
    for segment in segments:
        start, end = (_seconds(part) for part in segment.timestamp.split("-"))
        assert start == cursor
        assert end - start == segment.duration
        cursor = end
    assert cursor == duration


@pytest.mark.parametrize("duration", range(35, 66))
def test_editing_timeline_tiles_runtime(duration):
    blueprint = generate({"topic": "x", "duration": duration})
    timeline = blueprint.workflow.editingTimeline

    assert timeline[0].start == 0
    assert timeline[-1].end == blueprint.metadata.runtime
    for previous, current in zip(timeline, timeline[1:]):
        assert current.start == previous.end
    assert all(block.end > block.start for block in timeline)


def test_derived_lists_are_never_empty_with_blank_optional_fields():
    workflow = generate({"topic": "x"}).workflow
    assets = workflow.assetChecklist

    assert assets.colorPalette
    assert assets.fonts
    assert assets.overlays
    assert assets.brollPrompts
    assert assets.sfxLibrary
    assert workflow.qaChecklist
    assert workflow.audioPlan.emphasisBeats
    for segment in workflow.contentSegments:
        assert segment.onScreenText
        assert segment.visuals


def test_title_and_description_trace_topic_and_cta():
    publishing = generate({
        "topic": "Automate your mornings",
        "callToAction": "Follow for more",
    }).workflow.publishing

    for field in (publishing.title, publishing.description):
        assert "Automate your mornings" in field
        assert "Follow for more" in field
    assert publishing.description.endswith("Follow for more")


def test_hashtags_are_well_formed_and_unique(full_request):
    hashtags = generate(full_request).workflow.publishing.hashtags

    assert hashtags
    assert len(hashtags) == len(set(hashtags))
    assert all(HASHTAG_PATTERN.match(tag) for tag in hashtags)


def test_metadata_summarizes_run(full_request):
    blueprint = generate(full_request)
    hook = blueprint.workflow.contentSegments[0]

    assert hook.id == "hook"
    assert blueprint.metadata.audienceHook == hook.narration
    assert full_request["topic"] in blueprint.metadata.audienceHook
    assert full_request["persona"] in blueprint.metadata.summary
    assert full_request["targetAudience"] in blueprint.metadata.summary
    assert full_request["callToAction"] in blueprint.metadata.summary


def test_qa_checklist_is_parameterized(full_request):
    qa = generate({**full_request, "duration": 47}).workflow.qaChecklist

    assert any("47s" in item for item in qa)
    assert any(full_request["callToAction"] in item for item in qa)


def test_blueprint_is_frozen():
    blueprint = generate({"topic": "x"})
    with pytest.raises(Exception):
        blueprint.metadata.runtime = 10


def test_service_accepts_request_model(full_request):
    service = BlueprintGenerationService()
    blueprint = service.generate_blueprint(GenerationRequest(**full_request))

    assert blueprint == generate(full_request)
