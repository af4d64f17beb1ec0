"""Daily nutrition log service."""

import logging
import math
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from fitness_tracker.domain.errors import NotFoundError
from fitness_tracker.domain.foods import FoodSuggestion
from fitness_tracker.domain.meals import DailyNutrition, FoodItem, Meal

_logger = logging.getLogger(__name__)


class NutritionLogRepository(Protocol):
    """Storage interface for the current day's nutrition log."""

    def get_day(self) -> DailyNutrition:
        """Return the current day's log."""

    def save_day(self, day: DailyNutrition) -> None:
        """Replace the current day's log."""


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves towards positive infinity, as Math.round does."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def scale_portion(suggestion: FoodSuggestion, quantity: float) -> FoodItem:
    """Scale a suggestion's macros by a serving quantity."""
    return FoodItem(
        id=uuid4().hex,
        name=suggestion.name,
        calories=round_half_up(suggestion.calories * quantity),
        protein_g=round_half_up(suggestion.protein_g * quantity, 1),
        carbs_g=round_half_up(suggestion.carbs_g * quantity, 1),
        fat_g=round_half_up(suggestion.fat_g * quantity, 1),
        quantity=quantity,
        unit="serving",
    )


def meal_calories(meal: Meal) -> float:
    """Sum the calories of a meal's foods."""
    return sum(food.calories for food in meal.foods)


@dataclass
class NutritionLogService:
    """Service that maintains today's meals and running totals."""

    repository: NutritionLogRepository

    def today(self) -> DailyNutrition:
        """Return today's nutrition log."""
        return self.repository.get_day()

    def add_food(
        self, meal_name: str, suggestion: FoodSuggestion, quantity: float | None
    ) -> FoodItem:
        """Log a portion of a suggested food under a meal."""
        resolved_quantity = quantity if quantity and quantity > 0 else 1.0
        item = scale_portion(suggestion, resolved_quantity)
        day = self.repository.get_day()

        meals = list(day.meals)
        for index, meal in enumerate(meals):
            if meal.name == meal_name:
                meals[index] = replace(meal, foods=[*meal.foods, item])
                break
        else:
            meals.append(
                Meal(
                    id=uuid4().hex,
                    name=meal_name,
                    logged_at=datetime.now(tz=UTC),
                    foods=[item],
                )
            )

        self.repository.save_day(
            replace(
                day,
                meals=meals,
                calories=day.calories + item.calories,
                protein_g=round_half_up(day.protein_g + item.protein_g, 1),
                carbs_g=round_half_up(day.carbs_g + item.carbs_g, 1),
                fat_g=round_half_up(day.fat_g + item.fat_g, 1),
            )
        )
        _logger.info(
            "Logged food: meal=%s name=%s quantity=%s",
            meal_name,
            item.name,
            item.quantity,
        )
        return item

    def remove_food(self, meal_id: str, food_id: str) -> DailyNutrition:
        """Remove a logged food and drop meals left empty."""
        day = self.repository.get_day()
        meal = next((m for m in day.meals if m.id == meal_id), None)
        if meal is None:
            raise NotFoundError(f"Meal {meal_id} not found")
        removed = next((f for f in meal.foods if f.id == food_id), None)
        if removed is None:
            raise NotFoundError(f"Food {food_id} not found in meal {meal_id}")

        meals = []
        for current in day.meals:
            if current.id == meal_id:
                current = replace(
                    current, foods=[f for f in current.foods if f.id != food_id]
                )
            if current.foods:
                meals.append(current)

        updated = replace(
            day,
            meals=meals,
            calories=day.calories - removed.calories,
            protein_g=round_half_up(day.protein_g - removed.protein_g, 1),
            carbs_g=round_half_up(day.carbs_g - removed.carbs_g, 1),
            fat_g=round_half_up(day.fat_g - removed.fat_g, 1),
        )
        self.repository.save_day(updated)
        _logger.info("Removed food: meal=%s food=%s", meal_id, food_id)
        return updated
