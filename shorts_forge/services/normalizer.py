"""
Input normalization for blueprint generation
"""
from typing import Any, Mapping, Optional, Union
import logging
import re

from shorts_forge.core.exceptions import ValidationError
from shorts_forge.schemas.blueprint import GenerationInput, GenerationRequest

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 55
MIN_DURATION = 35
MAX_DURATION = 65

OPTIONAL_TEXT_FIELDS = ("niche", "persona", "vibe", "targetAudience", "callToAction")

# ASCII digits only; str.isdigit also accepts superscripts int() rejects
INTEGER_TEXT = re.compile(r"-?[0-9]+")


def normalize_input(raw: Union[GenerationRequest, GenerationInput, Mapping[str, Any]]) -> GenerationInput:
    """
    Turn a partial request into a fully populated GenerationInput.

    Only an empty topic is rejected; every other gap is filled with a default
    and the duration is clamped into the Shorts range.
    """
    if isinstance(raw, (GenerationRequest, GenerationInput)):
        data = raw.model_dump()
    else:
        data = dict(raw or {})

    topic = data.get("topic")
    if not isinstance(topic, str) or not topic.strip():
        raise ValidationError("Topic is required.")

    fields = {name: _text(data.get(name)) for name in OPTIONAL_TEXT_FIELDS}
    duration = resolve_duration(data.get("duration"))

    return GenerationInput(topic=topic.strip(), duration=duration, **fields)


def resolve_duration(value: Any) -> int:
    """Clamp a duration into [MIN_DURATION, MAX_DURATION], defaulting when unusable"""
    seconds = _as_int(value)
    if seconds is None:
        if value is not None:
            logger.debug(f"Unusable duration {value!r}, falling back to {DEFAULT_DURATION}s")
        return DEFAULT_DURATION
    return max(MIN_DURATION, min(MAX_DURATION, seconds))


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass but never a duration
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if INTEGER_TEXT.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # Longer than the interpreter's int conversion limit
                return None
    return None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""
