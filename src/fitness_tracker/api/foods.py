"""Food suggestion endpoints."""

from __future__ import annotations

import base64
import binascii
from datetime import datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from fitness_tracker.api.schemas import (
    AnalysisOut,
    AnalyzeImageRequest,
    AnalyzeTextRequest,
    SuggestionOut,
)
from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.services.recognition import ImageHandle, InlineImage, RemoteImage

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("/search")
async def search_foods(request: Request, q: str = "") -> list[SuggestionOut]:
    """Search reference foods by name or alias."""
    container: AppContainer = request.app.state.container
    results = await container.suggestion_engine.search_database(q)
    return [SuggestionOut.from_domain(result) for result in results]


@router.post("/analyze/text")
async def analyze_text(body: AnalyzeTextRequest, request: Request) -> AnalysisOut:
    """Suggest foods for a meal description."""
    container: AppContainer = request.app.state.container
    result = await container.suggestion_engine.analyze_text(body.description)
    return AnalysisOut.from_domain(result)


@router.post("/analyze/image")
async def analyze_image(body: AnalyzeImageRequest, request: Request) -> AnalysisOut:
    """Suggest foods for a meal photo."""
    container: AppContainer = request.app.state.container
    image: ImageHandle
    if body.image_url is not None:
        image = RemoteImage(url=body.image_url, client=container.image_client)
    else:
        image = InlineImage(content=_decode_image(body.image_base64 or ""))
    result = await container.suggestion_engine.analyze_image(image)
    return AnalysisOut.from_domain(result)


@router.get("/suggestions")
async def smart_suggestions(
    request: Request,
    meal_type: str,
    hour: int | None = Query(default=None, ge=0, le=23),
) -> list[SuggestionOut]:
    """Return suggested foods for a meal type."""
    container: AppContainer = request.app.state.container
    hour_of_day = datetime.now().hour if hour is None else hour  # noqa: DTZ005
    results = await container.suggestion_engine.smart_suggestions(
        meal_type, hour_of_day
    )
    return [SuggestionOut.from_domain(result) for result in results]


def _decode_image(encoded: str) -> bytes:
    """Decode base64 image content, accepting a data URL prefix."""
    if encoded.startswith("data:") and "," in encoded:
        encoded = encoded.split(",", 1)[1]
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError("image_base64 is not valid base64") from exc
