"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from fitness_tracker.adapters.memory_nutrition_repository import (
    InMemoryNutritionLogRepository,
)
from fitness_tracker.adapters.memory_profile_repository import (
    InMemoryProfileRepository,
)
from fitness_tracker.adapters.memory_workout_repository import (
    InMemoryWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.services.latency import LatencyProvider
from fitness_tracker.services.nutrition_log import NutritionLogService
from fitness_tracker.services.profile import ProfileService
from fitness_tracker.services.recognition import (
    ImageClient,
    PlaceholderImageRecognizer,
    VisionClient,
)
from fitness_tracker.services.suggestions import FoodSuggestionEngine
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class RecordingLatency(LatencyProvider):
    """Latency provider that records operations without sleeping."""

    calls: list[str] = field(default_factory=list)

    async def wait(self, operation: str) -> None:
        self.calls.append(operation)


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "items": [
                {"label": "rice", "confidence": 0.72},
                {"label": "salmon", "confidence": 0.91},
                {"label": "garnish", "confidence": 0.1},
            ]
        }
    )
    prompts: list[str] = field(default_factory=list)

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
        self.prompts.append(prompt)
        return self.payload


@dataclass
class FakeImageClient(ImageClient):
    """Fake image client serving bytes by URL."""

    images: dict[str, bytes] = field(default_factory=dict)

    async def download(self, url: str) -> bytes:
        if url not in self.images:
            raise RuntimeError(f"404 for {url}")
        return self.images[url]


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key=None, suggestion_latency_enabled=False)


@pytest.fixture
def latency() -> RecordingLatency:
    return RecordingLatency()


@pytest.fixture
def engine(latency: RecordingLatency) -> FoodSuggestionEngine:
    return FoodSuggestionEngine(
        latency=latency,
        recognizer=PlaceholderImageRecognizer(
            labels=["chicken breast", "rice", "broccoli"]
        ),
    )


@pytest.fixture
def image_client() -> FakeImageClient:
    return FakeImageClient(images={"https://img.example/meal.jpg": b"\xff\xd8\xffmeal"})


@pytest.fixture
def container(
    settings: Settings, engine: FoodSuggestionEngine, image_client: FakeImageClient
) -> AppContainer:
    nutrition_log_service = NutritionLogService(InMemoryNutritionLogRepository())

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        suggestion_engine=engine,
        image_client=image_client,
        nutrition_log_service=nutrition_log_service,
        workout_service=WorkoutService(InMemoryWorkoutRepository()),
        profile_service=ProfileService(
            repository=InMemoryProfileRepository(),
            nutrition_log=nutrition_log_service,
        ),
        close_resources=close_resources,
    )
