"""Tests for the food suggestion engine."""

import asyncio

import pytest

from fitness_tracker.domain.errors import ImageUnavailableError, InvalidInputError
from fitness_tracker.domain.foods import AnalysisKind
from fitness_tracker.domain.reference import NUTRITION_FACTS
from fitness_tracker.services.recognition import (
    InlineImage,
    PlaceholderImageRecognizer,
    VisionImageRecognizer,
)
from fitness_tracker.services.suggestions import FoodSuggestionEngine, normalize
from tests.conftest import FakeVisionClient, RecordingLatency


def test_normalize_lowercases_trims_and_strips_punctuation() -> None:
    assert normalize("  Grilled Chicken!! ") == "grilled chicken"
    assert normalize("Non-Fat, Greek_Yogurt") == "nonfat greek_yogurt"


def test_reference_dictionary_is_read_only() -> None:
    assert len(NUTRITION_FACTS) == 10
    with pytest.raises(TypeError):
        NUTRITION_FACTS["pizza"] = NUTRITION_FACTS["apple"]  # type: ignore[index]


def test_score_full_name_match(engine: FoodSuggestionEngine) -> None:
    results = engine.score("chicken")

    assert [(s.key, s.confidence) for s in results] == [("chicken_breast", 0.9)]
    assert results[0].name == "Chicken Breast"
    assert results[0].calories == 231


def test_score_alias_match_ranks_above_token_match(
    engine: FoodSuggestionEngine,
) -> None:
    results = engine.score("grilled chicken")

    assert [(s.key, s.confidence) for s in results] == [
        ("chicken_breast", 0.8),
        ("salmon", 0.5),
    ]


def test_score_token_matches_keep_dictionary_order(
    engine: FoodSuggestionEngine,
) -> None:
    results = engine.score("apple banana")

    assert [(s.key, s.confidence) for s in results] == [
        ("apple", 0.6),
        ("banana", 0.6),
    ]


def test_score_ignores_short_tokens(engine: FoodSuggestionEngine) -> None:
    results = engine.score("an egg")

    assert [(s.key, s.confidence) for s in results] == [("eggs", 0.6)]


def test_score_ties_on_alias_keep_dictionary_order(
    engine: FoodSuggestionEngine,
) -> None:
    results = engine.score("ripe")

    assert [s.key for s in results] == ["banana", "avocado"]
    assert all(s.confidence == 0.8 for s in results)


def test_score_truncates_to_five_sorted_unique(engine: FoodSuggestionEngine) -> None:
    results = engine.score("e")

    assert [s.key for s in results] == [
        "apple",
        "chicken_breast",
        "rice",
        "oatmeal",
        "eggs",
    ]
    confidences = [s.confidence for s in results]
    assert confidences == sorted(confidences, reverse=True)
    assert len({s.key for s in results}) == len(results)


def test_score_without_overlap_is_empty(engine: FoodSuggestionEngine) -> None:
    assert engine.score("xyz123") == []


def test_score_is_idempotent(engine: FoodSuggestionEngine) -> None:
    assert engine.score("steamed rice") == engine.score("steamed rice")


def test_search_database_skips_short_queries(
    engine: FoodSuggestionEngine, latency: RecordingLatency
) -> None:
    assert asyncio.run(engine.search_database("a")) == []
    assert latency.calls == []


def test_search_database_scores_query(
    engine: FoodSuggestionEngine, latency: RecordingLatency
) -> None:
    results = asyncio.run(engine.search_database("salmon"))

    assert results[0].key == "salmon"
    assert latency.calls == ["search"]


def test_analyze_text_returns_top_confidence(
    engine: FoodSuggestionEngine, latency: RecordingLatency
) -> None:
    result = asyncio.run(engine.analyze_text("grilled chicken"))

    assert result.kind is AnalysisKind.TEXT
    assert result.confidence == 0.8
    assert result.suggestions[0].key == "chicken_breast"
    assert result.processing_ms >= 0
    assert latency.calls == ["text"]


def test_analyze_text_without_matches_has_zero_confidence(
    engine: FoodSuggestionEngine,
) -> None:
    result = asyncio.run(engine.analyze_text("xyz123"))

    assert result.suggestions == []
    assert result.confidence == 0


@pytest.mark.parametrize("description", ["", "   ", "\t\n"])
def test_analyze_text_rejects_blank_input(
    engine: FoodSuggestionEngine, description: str
) -> None:
    with pytest.raises(InvalidInputError):
        asyncio.run(engine.analyze_text(description))


def test_analyze_image_scores_detected_labels(
    engine: FoodSuggestionEngine, latency: RecordingLatency
) -> None:
    result = asyncio.run(engine.analyze_image(InlineImage(b"\x89PNG\r\n\x1a\nimg")))

    assert result.kind is AnalysisKind.IMAGE
    assert [s.key for s in result.suggestions] == ["chicken_breast", "rice", "broccoli"]
    assert result.confidence == 0.85
    assert latency.calls == ["image"]


def test_analyze_image_deduplicates_and_limits(latency: RecordingLatency) -> None:
    engine = FoodSuggestionEngine(
        latency=latency,
        recognizer=PlaceholderImageRecognizer(
            labels=["chicken", "grilled chicken", "e"]
        ),
    )

    result = asyncio.run(engine.analyze_image(InlineImage(b"\xff\xd8\xffimg")))

    keys = [s.key for s in result.suggestions]
    assert keys == ["chicken_breast", "salmon", "apple"]
    assert len(set(keys)) == len(keys)
    assert result.confidence == 0.85


def test_analyze_image_with_vision_recognizer(latency: RecordingLatency) -> None:
    vision = FakeVisionClient()
    engine = FoodSuggestionEngine(
        latency=latency,
        recognizer=VisionImageRecognizer(
            client=vision, model="gpt-5.2", reasoning_effort=None, store=False
        ),
    )

    result = asyncio.run(engine.analyze_image(InlineImage(b"\xff\xd8\xffimg")))

    assert [s.key for s in result.suggestions] == ["salmon", "rice"]
    assert len(vision.prompts) == 1


def test_analyze_image_without_detections_is_empty(latency: RecordingLatency) -> None:
    vision = FakeVisionClient(payload={"items": []})
    engine = FoodSuggestionEngine(
        latency=latency,
        recognizer=VisionImageRecognizer(
            client=vision, model="gpt-5.2", reasoning_effort=None, store=False
        ),
    )

    result = asyncio.run(engine.analyze_image(InlineImage(b"img")))

    assert result.suggestions == []
    assert result.confidence == 0


def test_analyze_image_empty_handle_is_unavailable(
    engine: FoodSuggestionEngine, latency: RecordingLatency
) -> None:
    with pytest.raises(ImageUnavailableError):
        asyncio.run(engine.analyze_image(InlineImage(b"")))
    assert latency.calls == []


@pytest.mark.parametrize("hour", [0, 7, 23])
def test_smart_suggestions_breakfast(engine: FoodSuggestionEngine, hour: int) -> None:
    results = asyncio.run(engine.smart_suggestions("Breakfast", hour))

    assert [s.key for s in results] == ["oatmeal", "eggs", "banana", "greek_yogurt"]
    assert all(s.confidence == 0.8 for s in results)


def test_smart_suggestions_unknown_meal_uses_default(
    engine: FoodSuggestionEngine,
) -> None:
    results = asyncio.run(engine.smart_suggestions("Brunch", 11))

    assert [s.key for s in results] == ["apple", "banana", "chicken_breast"]


def test_smart_suggestions_skip_missing_keys(latency: RecordingLatency) -> None:
    facts = {key: NUTRITION_FACTS[key] for key in ("salmon", "rice")}
    engine = FoodSuggestionEngine(
        latency=latency,
        recognizer=VisionImageRecognizer(
            client=FakeVisionClient(), model="m", reasoning_effort=None, store=False
        ),
        facts=facts,
    )

    results = asyncio.run(engine.smart_suggestions("dinner", 19))

    assert [s.key for s in results] == ["salmon", "rice"]
