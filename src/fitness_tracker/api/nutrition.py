"""Daily nutrition log endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from fitness_tracker.api.schemas import AddFoodRequest
from fitness_tracker.domain.foods import FoodSuggestion
from fitness_tracker.services.nutrition_log import meal_calories

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


@router.get("/today")
async def today(request: Request) -> dict[str, object]:
    """Return today's totals and meals."""
    container: AppContainer = request.app.state.container
    day = container.nutrition_log_service.today()
    return {
        "nutrition": day,
        "meal_calories": {meal.id: meal_calories(meal) for meal in day.meals},
    }


@router.post("/meals/{meal_name}/foods", status_code=201)
async def add_food(
    meal_name: str, body: AddFoodRequest, request: Request
) -> dict[str, object]:
    """Log a reference food under a meal."""
    container: AppContainer = request.app.state.container
    fact = container.suggestion_engine.lookup(body.food_key)
    suggestion = FoodSuggestion.from_fact(fact, confidence=1.0)
    item = container.nutrition_log_service.add_food(
        meal_name, suggestion, body.quantity
    )
    return {"food": item, "nutrition": container.nutrition_log_service.today()}


@router.delete("/meals/{meal_id}/foods/{food_id}")
async def remove_food(
    meal_id: str, food_id: str, request: Request
) -> dict[str, object]:
    """Remove a logged food."""
    container: AppContainer = request.app.state.container
    day = container.nutrition_log_service.remove_food(meal_id, food_id)
    return {"nutrition": day}
