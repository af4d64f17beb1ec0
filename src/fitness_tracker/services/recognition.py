"""Image handles and recognizers that turn a meal photo into food labels."""

import base64
import logging
from dataclasses import dataclass, field
from typing import Protocol

from fitness_tracker.domain.errors import ImageUnavailableError
from fitness_tracker.domain.vision import VisionExtract

_logger = logging.getLogger(__name__)

LABELS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "items": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "label": {"type": "string"},
                    "confidence": {"type": "number", "minimum": 0.0, "maximum": 1.0},
                },
                "required": ["label", "confidence"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["items"],
    "additionalProperties": False,
}

_LABELS_PROMPT = (
    "List the foods visible in this meal photo. "
    "Use short common names such as 'chicken breast' or 'rice' "
    "and give each a confidence (0-1)."
)


class ImageHandle(Protocol):
    """Opaque reference to a picked image."""

    async def read_bytes(self) -> bytes:
        """Return the raw image bytes or raise ImageUnavailableError."""


class ImageClient(Protocol):
    """Interface for downloading remote images."""

    async def download(self, url: str) -> bytes:
        """Download an image and return its bytes."""


class ImageRecognizer(Protocol):
    """Interface for detecting food labels in an image."""

    async def detect_labels(self, image_bytes: bytes) -> list[str]:
        """Return detected food labels, most confident first."""


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured vision extraction data."""


@dataclass
class InlineImage(ImageHandle):
    """Image supplied directly as bytes."""

    content: bytes

    async def read_bytes(self) -> bytes:
        """Return the inline bytes."""
        if not self.content:
            raise ImageUnavailableError("Image is empty")
        return self.content


@dataclass
class RemoteImage(ImageHandle):
    """Image referenced by URL and fetched on demand."""

    url: str
    client: ImageClient

    async def read_bytes(self) -> bytes:
        """Download the image, mapping transport failures to ImageUnavailableError."""
        try:
            content = await self.client.download(self.url)
        except Exception as exc:
            _logger.warning("Image download failed: url=%s error=%s", self.url, exc)
            message = f"Could not fetch image from {self.url}"
            raise ImageUnavailableError(message) from exc
        if not content:
            raise ImageUnavailableError("Image is empty")
        return content


@dataclass
class VisionImageRecognizer(ImageRecognizer):
    """Recognizer backed by an LLM vision model."""

    client: VisionClient
    model: str
    reasoning_effort: str | None
    store: bool
    min_confidence: float = 0.3

    async def extract(self, image_bytes: bytes) -> VisionExtract:
        """Run structured extraction for an image."""
        raw = await self.client.extract(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            image_data_url=_to_data_url(image_bytes),
            schema=LABELS_SCHEMA,
            prompt=_LABELS_PROMPT,
        )
        return VisionExtract.model_validate(raw)

    async def detect_labels(self, image_bytes: bytes) -> list[str]:
        """Return labels above the confidence floor, most confident first."""
        extract = await self.extract(image_bytes)
        items = sorted(extract.items, key=lambda item: item.confidence, reverse=True)
        return [item.label for item in items if item.confidence >= self.min_confidence]


@dataclass
class PlaceholderImageRecognizer(ImageRecognizer):
    """Recognizer that reports a configured label list for every image.

    Used when no vision model is configured so the image flow stays usable
    in local development.
    """

    labels: list[str] = field(default_factory=list)

    async def detect_labels(self, image_bytes: bytes) -> list[str]:
        """Return the configured labels."""
        return list(self.labels)


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
