"""Domain models for the user profile."""

from dataclasses import dataclass
from enum import StrEnum


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @property
    def label(self) -> str:
        """Human readable label."""
        return _ACTIVITY_LABELS[self]


_ACTIVITY_LABELS = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHT: "Lightly Active",
    ActivityLevel.MODERATE: "Moderately Active",
    ActivityLevel.ACTIVE: "Very Active",
    ActivityLevel.VERY_ACTIVE: "Extremely Active",
}


@dataclass(frozen=True)
class MacroGoals:
    """Daily macro targets."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class UserProfile:
    """User body metrics and goals. Weight in pounds, height in inches."""

    id: str
    name: str
    age: int
    weight_lb: float
    height_in: float
    activity_level: ActivityLevel
    goals: MacroGoals
