"""Profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from fitness_tracker.services.profile import bmi_category

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(request: Request) -> dict[str, object]:
    """Return the profile with BMI and goal progress."""
    container: AppContainer = request.app.state.container
    service = container.profile_service
    profile = service.get_profile()
    bmi = service.bmi()
    return {
        "profile": profile,
        "activity_level_label": profile.activity_level.label,
        "bmi": bmi,
        "bmi_category": bmi_category(bmi),
        "goal_progress": service.goal_progress(),
    }


@router.get("/records")
async def personal_records(request: Request) -> dict[str, object]:
    """Return personal records."""
    container: AppContainer = request.app.state.container
    return {"records": container.profile_service.personal_records()}
