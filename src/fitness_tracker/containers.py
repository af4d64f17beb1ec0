"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fitness_tracker.adapters.image_client import HttpxImageClient
from fitness_tracker.adapters.memory_nutrition_repository import (
    InMemoryNutritionLogRepository,
)
from fitness_tracker.adapters.memory_profile_repository import (
    InMemoryProfileRepository,
)
from fitness_tracker.adapters.memory_workout_repository import (
    InMemoryWorkoutRepository,
)
from fitness_tracker.adapters.openai_vision_client import OpenAIVisionClient
from fitness_tracker.config import Settings, parse_labels
from fitness_tracker.services import latency as ops
from fitness_tracker.services.latency import (
    LatencyProvider,
    NoLatency,
    SimulatedLatency,
)
from fitness_tracker.services.nutrition_log import NutritionLogService
from fitness_tracker.services.profile import ProfileService
from fitness_tracker.services.recognition import (
    ImageClient,
    ImageRecognizer,
    PlaceholderImageRecognizer,
    VisionImageRecognizer,
)
from fitness_tracker.services.suggestions import FoodSuggestionEngine
from fitness_tracker.services.workouts import WorkoutService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    suggestion_engine: FoodSuggestionEngine
    image_client: ImageClient
    nutrition_log_service: NutritionLogService
    workout_service: WorkoutService
    profile_service: ProfileService
    close_resources: Callable[[], Awaitable[None]]


def build_latency(settings: Settings) -> LatencyProvider:
    """Pick the latency provider for the configured environment."""
    if not settings.suggestion_latency_enabled:
        return NoLatency()
    return SimulatedLatency(
        delays={
            ops.TEXT: settings.text_latency_seconds,
            ops.IMAGE: settings.image_latency_seconds,
            ops.SMART: settings.smart_latency_seconds,
            ops.SEARCH: settings.search_latency_seconds,
        }
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    image_client = HttpxImageClient.create(
        timeout_seconds=resolved_settings.image_fetch_timeout_seconds
    )
    openai_client: OpenAIVisionClient | None = None
    recognizer: ImageRecognizer
    if resolved_settings.openai_api_key:
        openai_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
        recognizer = VisionImageRecognizer(
            client=openai_client,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        )
    else:
        _logger.warning("OPENAI_API_KEY not set, using placeholder image recognizer")
        recognizer = PlaceholderImageRecognizer(
            labels=parse_labels(resolved_settings.placeholder_image_labels)
        )

    suggestion_engine = FoodSuggestionEngine(
        latency=build_latency(resolved_settings),
        recognizer=recognizer,
    )
    nutrition_log_service = NutritionLogService(InMemoryNutritionLogRepository())
    workout_service = WorkoutService(InMemoryWorkoutRepository())
    profile_service = ProfileService(
        repository=InMemoryProfileRepository(),
        nutrition_log=nutrition_log_service,
    )

    async def close_resources() -> None:
        await image_client.close()
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        suggestion_engine=suggestion_engine,
        image_client=image_client,
        nutrition_log_service=nutrition_log_service,
        workout_service=workout_service,
        profile_service=profile_service,
        close_resources=close_resources,
    )
