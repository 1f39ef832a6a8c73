"""
Pydantic schemas for the Shorts blueprint generator
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional


class GenerationRequest(BaseModel):
    """Request schema for generating a blueprint (every field optional)"""
    topic: Optional[str] = Field(None, description="Topic of the Short (required after trimming)")
    niche: Optional[str] = Field(None, description="Channel niche")
    persona: Optional[str] = Field(None, description="On-camera persona")
    vibe: Optional[str] = Field(None, description="Tone / vibe of the Short")
    targetAudience: Optional[str] = Field(None, description="Who the Short is for")
    callToAction: Optional[str] = Field(None, description="Closing call to action")
    duration: Optional[Any] = Field(None, description="Target runtime in seconds (clamped to 35-65)")

    class Config:
        extra = "ignore"


class GenerationInput(BaseModel):
    """Fully populated input produced by the normalizer"""
    topic: str = Field(..., min_length=1)
    niche: str = ""
    persona: str = ""
    vibe: str = ""
    targetAudience: str = ""
    callToAction: str = ""
    duration: int = Field(55, ge=35, le=65)

    class Config:
        frozen = True


class PipelineStep(BaseModel):
    """One stage of producing the Short"""
    id: str
    label: str
    ownership: str
    tool: str
    prompt: str
    notes: str

    class Config:
        frozen = True


class ContentSegment(BaseModel):
    """Timed script beat"""
    id: str
    label: str
    timestamp: str = Field(..., description="Time range (e.g. '00:00-00:08')")
    duration: int = Field(..., gt=0)
    narration: str
    onScreenText: List[str] = Field(..., min_length=1)
    visuals: List[str] = Field(..., min_length=1)
    motion: str
    soundDesign: str

    class Config:
        frozen = True


class AudioPlan(BaseModel):
    """Voice and music direction"""
    voiceProfile: str
    pacing: str
    emphasisBeats: List[str] = Field(..., min_length=1)
    musicPrompt: str

    class Config:
        frozen = True


class AssetChecklist(BaseModel):
    """Visual identity and asset prompts"""
    colorPalette: List[str] = Field(..., min_length=1)
    fonts: List[str] = Field(..., min_length=1)
    overlays: List[str] = Field(..., min_length=1)
    brollPrompts: List[str] = Field(..., min_length=1)
    sfxLibrary: List[str] = Field(..., min_length=1)

    class Config:
        frozen = True


class TimelineBlock(BaseModel):
    """Editor marker covering [start, end) seconds"""
    label: str
    start: int = Field(..., ge=0)
    end: int = Field(..., gt=0)
    instructions: str
    shotType: str
    overlay: str

    class Config:
        frozen = True


class PublishingPackage(BaseModel):
    """Upload metadata"""
    title: str
    description: str
    hashtags: List[str]
    schedule: str
    thumbnailConcept: str

    class Config:
        frozen = True


class Workflow(BaseModel):
    """Everything needed to produce and ship the Short"""
    automationPipeline: List[PipelineStep]
    contentSegments: List[ContentSegment]
    audioPlan: AudioPlan
    assetChecklist: AssetChecklist
    editingTimeline: List[TimelineBlock]
    publishing: PublishingPackage
    qaChecklist: List[str] = Field(..., min_length=1)

    class Config:
        frozen = True


class BlueprintMetadata(BaseModel):
    """Synopsis of a generation run"""
    runtime: int
    audienceHook: str
    summary: str

    class Config:
        frozen = True


class Blueprint(BaseModel):
    """Response schema for a generated blueprint"""
    metadata: BlueprintMetadata
    workflow: Workflow

    class Config:
        frozen = True
