"""Models for vision extraction results."""

from pydantic import BaseModel, Field


class VisionItem(BaseModel):
    """Single detected food item from vision."""

    label: str
    confidence: float = Field(ge=0.0, le=1.0)


class VisionExtract(BaseModel):
    """Structured output for vision extraction."""

    items: list[VisionItem]
