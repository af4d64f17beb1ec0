"""Workout logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from fitness_tracker.api.schemas import (
    AddExerciseRequest,
    AddSetRequest,
    StartWorkoutRequest,
)
from fitness_tracker.services.workouts import (
    completed_sets,
    duration_minutes,
    total_sets,
)

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.workouts import Workout

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _summary(workout: Workout) -> dict[str, object]:
    return {
        "workout": workout,
        "total_sets": total_sets(workout),
        "completed_sets": completed_sets(workout),
        "duration_minutes": duration_minutes(workout),
    }


@router.get("/exercises")
async def list_exercises(request: Request) -> dict[str, object]:
    """Return the exercise catalog."""
    container: AppContainer = request.app.state.container
    return {"exercises": container.workout_service.list_exercises()}


@router.get("/recent")
async def recent_workouts(
    request: Request, limit: int = Query(default=10, ge=1)
) -> dict[str, object]:
    """Return recently finished workouts."""
    container: AppContainer = request.app.state.container
    workouts = container.workout_service.recent_workouts(limit)
    return {"workouts": [_summary(workout) for workout in workouts]}


@router.get("/current")
async def current_workout(request: Request) -> dict[str, object]:
    """Return the workout in progress, if any."""
    container: AppContainer = request.app.state.container
    workout = container.workout_service.current()
    return {"current": _summary(workout) if workout else None}


@router.post("/current", status_code=201)
async def start_workout(
    request: Request, body: StartWorkoutRequest | None = None
) -> dict[str, object]:
    """Start a new workout."""
    container: AppContainer = request.app.state.container
    name = body.name if body else "New Workout"
    return {"current": _summary(container.workout_service.start_workout(name))}


@router.post("/current/exercises", status_code=201)
async def add_exercise(body: AddExerciseRequest, request: Request) -> dict[str, object]:
    """Add an exercise to the workout in progress."""
    container: AppContainer = request.app.state.container
    return {"exercise": container.workout_service.add_exercise(body.exercise_id)}


@router.post("/current/exercises/{workout_exercise_id}/sets", status_code=201)
async def add_set(
    workout_exercise_id: str, body: AddSetRequest, request: Request
) -> dict[str, object]:
    """Record a set for an exercise of the workout in progress."""
    container: AppContainer = request.app.state.container
    performed = container.workout_service.add_set(
        workout_exercise_id, weight=body.weight, reps=body.reps
    )
    return {"set": performed}


@router.post("/current/finish")
async def finish_workout(request: Request) -> dict[str, object]:
    """Finish the workout in progress and update personal records."""
    container: AppContainer = request.app.state.container
    finished = container.workout_service.finish_workout()
    new_records = container.profile_service.record_workout(finished)
    return {"workout": _summary(finished), "new_records": new_records}
