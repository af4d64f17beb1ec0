"""Domain models for the daily nutrition log."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class FoodItem:
    """A logged food portion with macros already scaled by quantity."""

    id: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    quantity: float
    unit: str


@dataclass(frozen=True)
class Meal:
    """A named meal holding logged foods."""

    id: str
    name: str
    logged_at: datetime
    foods: list[FoodItem] = field(default_factory=list)


@dataclass(frozen=True)
class DailyNutrition:
    """Running totals and meals for one day."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    meals: list[Meal] = field(default_factory=list)
