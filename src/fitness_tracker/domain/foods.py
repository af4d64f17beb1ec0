"""Food reference and suggestion models."""

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class NutritionFact:
    """Reference nutrition data for one canonical serving."""

    key: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    serving_size: str
    category: str
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class FoodSuggestion:
    """A reference food matched for a query, with its match confidence."""

    key: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    serving_size: str
    category: str
    confidence: float

    @classmethod
    def from_fact(cls, fact: NutritionFact, confidence: float) -> "FoodSuggestion":
        """Copy a reference fact into a suggestion."""
        return cls(
            key=fact.key,
            name=fact.name,
            calories=fact.calories,
            protein_g=fact.protein_g,
            carbs_g=fact.carbs_g,
            fat_g=fact.fat_g,
            serving_size=fact.serving_size,
            category=fact.category,
            confidence=confidence,
        )


class AnalysisKind(StrEnum):
    """Source of an analysis request."""

    TEXT = "text"
    IMAGE = "image"


@dataclass(frozen=True)
class AnalysisResult:
    """Ranked suggestions produced by one analysis call."""

    suggestions: list[FoodSuggestion]
    kind: AnalysisKind
    confidence: float
    processing_ms: int
