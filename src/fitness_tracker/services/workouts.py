"""Workout logging service."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from fitness_tracker.domain.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
)
from fitness_tracker.domain.workouts import (
    Exercise,
    Workout,
    WorkoutExercise,
    WorkoutSet,
)

_logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Storage interface for workouts and the exercise catalog."""

    def list_exercises(self) -> list[Exercise]:
        """Return the exercise catalog."""

    def get_current(self) -> Workout | None:
        """Return the in-progress workout, if any."""

    def set_current(self, workout: Workout | None) -> None:
        """Replace the in-progress workout."""

    def add_finished(self, workout: Workout) -> None:
        """Append a finished workout to the history."""

    def list_finished(self, limit: int) -> list[Workout]:
        """Return finished workouts, most recent first."""


def total_sets(workout: Workout) -> int:
    """Count sets across all exercises of a workout."""
    return sum(len(entry.sets) for entry in workout.exercises)


def completed_sets(workout: Workout) -> int:
    """Count sets marked completed across all exercises of a workout."""
    return sum(
        1
        for entry in workout.exercises
        for performed in entry.sets
        if performed.completed
    )


def duration_minutes(workout: Workout, now: datetime | None = None) -> int:
    """Whole minutes elapsed since the workout started."""
    end = workout.ended_at or now or datetime.now(tz=UTC)
    return int((end - workout.started_at).total_seconds() // 60)


@dataclass
class WorkoutService:
    """Service for the in-progress workout and its history."""

    repository: WorkoutRepository

    def list_exercises(self) -> list[Exercise]:
        """Return the exercise catalog."""
        return self.repository.list_exercises()

    def current(self) -> Workout | None:
        """Return the in-progress workout, if any."""
        return self.repository.get_current()

    def recent_workouts(self, limit: int = 10) -> list[Workout]:
        """Return recently finished workouts."""
        return self.repository.list_finished(limit)

    def start_workout(self, name: str = "New Workout") -> Workout:
        """Start a new workout session."""
        if self.repository.get_current() is not None:
            raise ConflictError("A workout is already in progress")
        workout = Workout(id=uuid4().hex, name=name, started_at=datetime.now(tz=UTC))
        self.repository.set_current(workout)
        _logger.info("Started workout: id=%s name=%s", workout.id, name)
        return workout

    def add_exercise(self, exercise_id: str) -> WorkoutExercise:
        """Add a catalog exercise to the current workout."""
        workout = self._require_current()
        exercise = next(
            (e for e in self.repository.list_exercises() if e.id == exercise_id), None
        )
        if exercise is None:
            raise NotFoundError(f"Exercise {exercise_id} not found")
        entry = WorkoutExercise(id=uuid4().hex, exercise=exercise)
        self.repository.set_current(
            replace(workout, exercises=[*workout.exercises, entry])
        )
        _logger.info("Added exercise: %s", exercise.name)
        return entry

    def add_set(self, workout_exercise_id: str, weight: int, reps: int) -> WorkoutSet:
        """Record a completed set for an exercise of the current workout."""
        if reps <= 0 or weight < 0:
            raise InvalidInputError("Reps must be positive and weight non-negative")
        workout = self._require_current()
        exercises = list(workout.exercises)
        for index, entry in enumerate(exercises):
            if entry.id == workout_exercise_id:
                performed = WorkoutSet(id=uuid4().hex, reps=reps, weight=weight)
                exercises[index] = replace(entry, sets=[*entry.sets, performed])
                self.repository.set_current(replace(workout, exercises=exercises))
                return performed
        raise NotFoundError(f"Workout exercise {workout_exercise_id} not found")

    def finish_workout(self) -> Workout:
        """Close the current workout and move it to the history."""
        workout = self._require_current()
        finished = replace(workout, ended_at=datetime.now(tz=UTC))
        self.repository.add_finished(finished)
        self.repository.set_current(None)
        _logger.info(
            "Finished workout: id=%s sets=%s", finished.id, total_sets(finished)
        )
        return finished

    def _require_current(self) -> Workout:
        workout = self.repository.get_current()
        if workout is None:
            raise NotFoundError("No workout in progress")
        return workout
