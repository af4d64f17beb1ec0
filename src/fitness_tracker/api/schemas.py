"""Pydantic request and response models for the HTTP API."""

from pydantic import BaseModel, Field, model_validator

from fitness_tracker.domain.foods import AnalysisKind, AnalysisResult, FoodSuggestion
from fitness_tracker.services.nutrition_log import round_half_up


class SuggestionOut(BaseModel):
    """Suggested food with macros per serving."""

    key: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    serving_size: str
    category: str
    confidence: float
    confidence_percent: int

    @classmethod
    def from_domain(cls, suggestion: FoodSuggestion) -> "SuggestionOut":
        return cls(
            key=suggestion.key,
            name=suggestion.name,
            calories=suggestion.calories,
            protein_g=suggestion.protein_g,
            carbs_g=suggestion.carbs_g,
            fat_g=suggestion.fat_g,
            serving_size=suggestion.serving_size,
            category=suggestion.category,
            confidence=suggestion.confidence,
            confidence_percent=int(round_half_up(suggestion.confidence * 100)),
        )


class AnalysisOut(BaseModel):
    """Result of a text or image analysis."""

    suggestions: list[SuggestionOut]
    kind: AnalysisKind
    confidence: float
    processing_ms: int

    @classmethod
    def from_domain(cls, result: AnalysisResult) -> "AnalysisOut":
        return cls(
            suggestions=[SuggestionOut.from_domain(s) for s in result.suggestions],
            kind=result.kind,
            confidence=result.confidence,
            processing_ms=result.processing_ms,
        )


class AnalyzeTextRequest(BaseModel):
    """Free-text meal description."""

    description: str


class AnalyzeImageRequest(BaseModel):
    """Meal photo, inline as base64 or by URL."""

    image_base64: str | None = None
    image_url: str | None = None

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "AnalyzeImageRequest":
        if (self.image_base64 is None) == (self.image_url is None):
            raise ValueError("Provide exactly one of image_base64 or image_url")
        return self


class AddFoodRequest(BaseModel):
    """Reference food and serving multiplier to log."""

    food_key: str
    quantity: float | None = 1.0


class StartWorkoutRequest(BaseModel):
    name: str = "New Workout"


class AddExerciseRequest(BaseModel):
    exercise_id: str


class AddSetRequest(BaseModel):
    weight: int = Field(ge=0)
    reps: int = Field(gt=0)
