"""Domain models for workout logging."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class Exercise:
    """Catalog exercise."""

    id: str
    name: str
    category: str
    muscle_groups: tuple[str, ...]


@dataclass(frozen=True)
class WorkoutSet:
    """A performed set."""

    id: str
    reps: int
    weight: int
    completed: bool = True
    rest_seconds: int | None = None


@dataclass(frozen=True)
class WorkoutExercise:
    """An exercise added to a workout, with its sets."""

    id: str
    exercise: Exercise
    sets: list[WorkoutSet] = field(default_factory=list)
    notes: str | None = None


@dataclass(frozen=True)
class Workout:
    """A workout session."""

    id: str
    name: str
    started_at: datetime
    exercises: list[WorkoutExercise] = field(default_factory=list)
    ended_at: datetime | None = None
    notes: str | None = None


@dataclass(frozen=True)
class PersonalRecord:
    """Best lift recorded for an exercise."""

    id: str
    exercise_id: str
    exercise_name: str
    weight: int
    reps: int
    achieved_on: date
    one_rep_max: int
