"""Food suggestion engine matching free text against reference foods."""

import logging
import re
import time
from collections.abc import Mapping
from dataclasses import dataclass, field

from fitness_tracker.domain.errors import InvalidInputError, NotFoundError
from fitness_tracker.domain.foods import (
    AnalysisKind,
    AnalysisResult,
    FoodSuggestion,
    NutritionFact,
)
from fitness_tracker.domain.reference import (
    DEFAULT_MEAL_PLAN,
    MEAL_PLANS,
    NUTRITION_FACTS,
)
from fitness_tracker.services import latency as ops
from fitness_tracker.services.latency import LatencyProvider
from fitness_tracker.services.recognition import ImageHandle, ImageRecognizer

TEXT_RESULT_LIMIT = 5
IMAGE_RESULT_LIMIT = 3
IMAGE_CONFIDENCE = 0.85
SMART_CONFIDENCE = 0.8
MIN_SEARCH_LENGTH = 2

_NAME_MATCH = 0.9
_ALIAS_MATCH = 0.8
_NAME_TOKEN_MATCH = 0.6
_ALIAS_TOKEN_MATCH = 0.5
_MIN_CONFIDENCE = 0.4
_MIN_TOKEN_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)

_logger = logging.getLogger(__name__)


def normalize(text: str) -> str:
    """Lower-case, trim and drop punctuation from text."""
    return _NON_WORD.sub("", text.lower().strip())


@dataclass
class FoodSuggestionEngine:
    """Ranks reference foods against text, images and meal types."""

    latency: LatencyProvider
    recognizer: ImageRecognizer
    facts: Mapping[str, NutritionFact] = field(default_factory=lambda: NUTRITION_FACTS)

    def lookup(self, key: str) -> NutritionFact:
        """Return the reference fact for a key."""
        fact = self.facts.get(key)
        if fact is None:
            raise NotFoundError(f"Unknown food: {key}")
        return fact

    def score(self, query: str) -> list[FoodSuggestion]:
        """Return up to five matching foods, best match first."""
        normalized_query = normalize(query)
        matches: list[FoodSuggestion] = []
        for fact in self.facts.values():
            confidence = _match_confidence(fact, normalized_query)
            if confidence > _MIN_CONFIDENCE:
                matches.append(FoodSuggestion.from_fact(fact, confidence))
        # list.sort is stable, so ties keep dictionary order
        matches.sort(key=lambda suggestion: suggestion.confidence, reverse=True)
        return matches[:TEXT_RESULT_LIMIT]

    async def analyze_text(self, description: str) -> AnalysisResult:
        """Suggest foods for a free-text meal description."""
        if not description.strip():
            raise InvalidInputError("Please enter a food description")
        started = time.perf_counter()
        _logger.info("Analyzing text input: %s", description)
        await self.latency.wait(ops.TEXT)
        suggestions = self.score(description)
        return AnalysisResult(
            suggestions=suggestions,
            kind=AnalysisKind.TEXT,
            confidence=suggestions[0].confidence if suggestions else 0.0,
            processing_ms=_elapsed_ms(started),
        )

    async def analyze_image(self, image: ImageHandle) -> AnalysisResult:
        """Suggest foods for the foods recognized in an image."""
        started = time.perf_counter()
        image_bytes = await image.read_bytes()
        await self.latency.wait(ops.IMAGE)
        labels = await self.recognizer.detect_labels(image_bytes)
        _logger.info("Image analysis detected labels: %s", labels)

        unique: list[FoodSuggestion] = []
        seen: set[str] = set()
        for label in labels:
            for suggestion in self.score(label):
                if suggestion.key in seen:
                    continue
                seen.add(suggestion.key)
                unique.append(suggestion)
        suggestions = unique[:IMAGE_RESULT_LIMIT]
        return AnalysisResult(
            suggestions=suggestions,
            kind=AnalysisKind.IMAGE,
            confidence=IMAGE_CONFIDENCE if suggestions else 0.0,
            processing_ms=_elapsed_ms(started),
        )

    async def smart_suggestions(
        self, meal_type: str, hour_of_day: int
    ) -> list[FoodSuggestion]:
        """Return the fixed food plan for a meal type.

        ``hour_of_day`` is accepted for callers that already send it but does
        not change the plan.
        """
        _logger.info(
            "Smart suggestions: meal_type=%s hour=%s", meal_type, hour_of_day
        )
        await self.latency.wait(ops.SMART)
        keys = MEAL_PLANS.get(meal_type.lower(), DEFAULT_MEAL_PLAN)
        return [
            FoodSuggestion.from_fact(self.facts[key], SMART_CONFIDENCE)
            for key in keys
            if key in self.facts
        ]

    async def search_database(self, query: str) -> list[FoodSuggestion]:
        """Search reference foods once the query has at least two characters."""
        if len(query) < MIN_SEARCH_LENGTH:
            return []
        await self.latency.wait(ops.SEARCH)
        results = self.score(query)
        _logger.info("Food search: query=%s results=%s", query, len(results))
        return results


def _match_confidence(fact: NutritionFact, normalized_query: str) -> float:
    name = normalize(fact.name)
    aliases = [normalize(alias) for alias in fact.aliases]

    confidence = 0.0
    if normalized_query in name:
        confidence = _NAME_MATCH
    if any(normalized_query in alias for alias in aliases):
        confidence = max(confidence, _ALIAS_MATCH)
    if confidence > 0:
        return confidence

    for token in normalized_query.split():
        if len(token) < _MIN_TOKEN_LENGTH:
            continue
        if token in name:
            confidence = max(confidence, _NAME_TOKEN_MATCH)
        if any(token in alias for alias in aliases):
            confidence = max(confidence, _ALIAS_TOKEN_MATCH)
    return confidence


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
