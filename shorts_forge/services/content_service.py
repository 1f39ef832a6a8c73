"""
Content composition for Shorts blueprints
Builds every text and list field from the normalized input and the timing plan.
"""
from typing import Dict, List, Sequence, Tuple
import hashlib
import re

from shorts_forge.schemas.blueprint import (
    AssetChecklist,
    AudioPlan,
    ContentSegment,
    GenerationInput,
    PipelineStep,
    PublishingPackage,
    TimelineBlock,
)
from shorts_forge.services import templates
from shorts_forge.services.timing_service import Slot, format_timestamp

MAX_HASHTAGS = 8
PLATFORM_HASHTAG = "#shorts"
WORDS_PER_SECOND = 2.6

HASHTAG_STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "but", "by", "can", "do", "for",
    "from", "get", "how", "i", "in", "into", "is", "it", "its", "my", "of", "on",
    "or", "our", "so", "that", "the", "this", "to", "up", "we", "what", "when",
    "why", "with", "you", "your",
})

TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")

# (vibe keywords, choice). First match wins; no match falls back to a digest pick.
PALETTES: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (("punchy", "kinetic", "energetic", "hype", "bold"), ("#0B0F1A", "#00E5FF", "#FF3D81", "#F5F7FA")),
    (("calm", "chill", "soft", "cozy", "mindful"), ("#F4EFE6", "#A3B18A", "#588157", "#344E41")),
    (("luxury", "premium", "elegant", "minimal"), ("#111111", "#D4AF37", "#EDEDED", "#7A7A7A")),
    (("playful", "fun", "funny", "quirky"), ("#FFD23F", "#EE4266", "#3BCEAC", "#540D6E")),
    (("serious", "data", "analytical", "professional"), ("#0F172A", "#38BDF8", "#E2E8F0", "#F97316")),
)

FONTS: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (("punchy", "kinetic", "energetic", "hype", "bold"), ("Bebas Neue", "Inter")),
    (("calm", "chill", "soft", "cozy", "mindful"), ("DM Serif Display", "Nunito")),
    (("luxury", "premium", "elegant", "minimal"), ("Playfair Display", "Montserrat")),
    (("playful", "fun", "funny", "quirky"), ("Fredoka", "Poppins")),
    (("serious", "data", "analytical", "professional"), ("Space Grotesk", "IBM Plex Sans")),
)

SFX: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (("punchy", "kinetic", "energetic", "hype", "bold"), ("Whoosh transitions", "Bass hit", "Glitch stutter", "Camera shutter")),
    (("calm", "chill", "soft", "cozy", "mindful"), ("Soft chime", "Paper rustle", "Ambient room tone")),
    (("luxury", "premium", "elegant", "minimal"), ("Subtle swoosh", "Piano sting", "Glass clink")),
    (("playful", "fun", "funny", "quirky"), ("Cartoon pop", "Record scratch", "Boing")),
    (("serious", "data", "analytical", "professional"), ("Keyboard clicks", "UI blip", "Low riser")),
)

SCHEDULE_SLOTS = (
    "Tuesday 12:00 local time, repost to Reels and TikTok at 18:00",
    "Wednesday 17:00 local time, repost to Reels and TikTok the next morning",
    "Thursday 12:30 local time, repost to Reels and TikTok at 19:00",
    "Saturday 10:00 local time, repost to Reels and TikTok at 16:00",
    "Sunday 18:00 local time, repost to Reels and TikTok on Monday 08:00",
)


class ContentComposer:
    """Composes blueprint content for one normalized input"""

    def __init__(self, generation_input: GenerationInput) -> None:
        self.input = generation_input
        self.context = build_context(generation_input)

    # ---------- Pipeline ----------

    def compose_pipeline(self) -> List[PipelineStep]:
        """Fixed six-step production chain with prompts aimed at the topic"""
        return [
            PipelineStep(
                id=step["id"],
                label=step["label"],
                ownership=step["ownership"],
                tool=step["tool"],
                prompt=self._fill(step["prompt"]),
                notes=self._fill(step["notes"]),
            )
            for step in templates.PIPELINE_STEPS
        ]

    # ---------- Script ----------

    def compose_segments(self, segment_plan: Sequence[Tuple[str, Slot]]) -> List[ContentSegment]:
        segments = []
        for phase, slot in segment_plan:
            template = templates.SEGMENTS[phase]
            extra = _slot_context(slot)
            segments.append(ContentSegment(
                id=phase,
                label=template["label"],
                timestamp=format_timestamp(slot),
                duration=slot.duration,
                narration=self._fill(template["narration"], **extra),
                onScreenText=[self._fill(line, **extra) for line in template["onScreenText"]],
                visuals=[self._fill(line, **extra) for line in template["visuals"]],
                motion=self._fill(template["motion"], **extra),
                soundDesign=self._fill(template["soundDesign"], **extra),
            ))
        return segments

    # ---------- Audio ----------

    def compose_audio(self, segments: Sequence[ContentSegment], segment_plan: Sequence[Tuple[str, Slot]]) -> AudioPlan:
        """Voice and music direction; one emphasis beat per segment"""
        duration = self.input.duration
        words = int(duration * WORDS_PER_SECOND)
        wpm = round(words * 60 / duration)

        beats = [
            self._fill(
                templates.AUDIO["emphasisBeat"],
                start=slot.start,
                label=segment.label,
                phrase=segment.onScreenText[0],
            )
            for segment, (_, slot) in zip(segments, segment_plan)
        ]

        return AudioPlan(
            voiceProfile=self._fill(templates.AUDIO["voiceProfile"]),
            pacing=self._fill(templates.AUDIO["pacing"], words=words, wpm=wpm),
            emphasisBeats=beats,
            musicPrompt=self._fill(templates.AUDIO["musicPrompt"]),
        )

    # ---------- Assets ----------

    def compose_assets(self) -> AssetChecklist:
        broll = [self._fill(template["broll"]) for template in templates.SEGMENTS.values()]
        if self.input.niche:
            broll.append(self._fill(templates.ASSETS["brollFallback"]))

        return AssetChecklist(
            colorPalette=list(self._pick(PALETTES)),
            fonts=list(self._pick(FONTS)),
            overlays=[self._fill(line) for line in templates.ASSETS["overlays"]],
            brollPrompts=broll,
            sfxLibrary=list(self._pick(SFX)),
        )

    # ---------- Editing ----------

    def compose_timeline(self, block_plan: Sequence[Tuple[str, Slot]]) -> List[TimelineBlock]:
        timeline = []
        for block, slot in block_plan:
            template = templates.EDITING_BLOCKS[block]
            extra = _slot_context(slot)
            timeline.append(TimelineBlock(
                label=template["label"],
                start=slot.start,
                end=slot.end,
                instructions=self._fill(template["instructions"], **extra),
                shotType=template["shotType"],
                overlay=self._fill(template["overlay"], **extra),
            ))
        return timeline

    # ---------- Publishing ----------

    def compose_publishing(self) -> PublishingPackage:
        seed = f"{self.input.niche}|{self.input.targetAudience}"
        return PublishingPackage(
            title=self._fill(templates.PUBLISHING["title"]),
            description=self._fill(templates.PUBLISHING["description"]),
            hashtags=derive_hashtags(self.input.niche, self.input.topic),
            schedule=SCHEDULE_SLOTS[_digest_index(seed, len(SCHEDULE_SLOTS))],
            thumbnailConcept=self._fill(templates.PUBLISHING["thumbnailConcept"]),
        )

    def compose_qa(self) -> List[str]:
        return [self._fill(check) for check in templates.QA_CHECKS]

    def compose_summary(self) -> str:
        return self._fill(templates.SUMMARY)

    # ---------- Helpers ----------

    def _fill(self, template: str, **extra) -> str:
        return template.format(**self.context, **extra)

    def _pick(self, table):
        """Choose by vibe keyword, else by a stable digest of topic and niche"""
        vibe_tokens = set(tokenize(self.input.vibe))
        for keywords, choice in table:
            if vibe_tokens.intersection(keywords):
                return choice
        seed = f"{self.input.topic}|{self.input.niche}"
        return table[_digest_index(seed, len(table))][1]


def build_context(generation_input: GenerationInput) -> Dict[str, object]:
    """Template substitution values, with filler for blank optional fields"""
    fillers = templates.FILLERS
    return {
        "topic": generation_input.topic,
        "persona": generation_input.persona or fillers["persona"],
        "vibe": generation_input.vibe or fillers["vibe"],
        "niche": generation_input.niche or fillers["niche"],
        "audience": generation_input.targetAudience or fillers["audience"],
        "cta": generation_input.callToAction or fillers["cta"],
        "duration": generation_input.duration,
    }


def tokenize(text: str) -> List[str]:
    return [token for token in TOKEN_SPLIT.split(text.lower()) if token]


def derive_hashtags(niche: str, topic: str) -> List[str]:
    """
    Hashtags from niche and topic tokens.

    Starts with the platform tag, skips stop-words, keeps first-seen order and
    caps the list at MAX_HASHTAGS.
    """
    hashtags = [PLATFORM_HASHTAG]
    for token in tokenize(niche) + tokenize(topic):
        if token in HASHTAG_STOP_WORDS:
            continue
        tag = f"#{token}"
        if tag not in hashtags:
            hashtags.append(tag)
        if len(hashtags) == MAX_HASHTAGS:
            break
    return hashtags


def _slot_context(slot: Slot) -> Dict[str, int]:
    return {"start": slot.start, "end": slot.end, "seconds": slot.duration}


def _digest_index(seed: str, size: int) -> int:
    digest = hashlib.sha256(seed.encode("utf-8")).hexdigest()
    return int(digest[:8], 16) % size
