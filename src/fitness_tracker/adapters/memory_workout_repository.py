"""In-memory workout repository."""

from dataclasses import dataclass, field

from fitness_tracker.domain.seed import EXERCISES, seed_workouts
from fitness_tracker.domain.workouts import Exercise, Workout
from fitness_tracker.services.workouts import WorkoutRepository


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """Holds the exercise catalog and workouts in process memory."""

    exercises: list[Exercise] = field(default_factory=lambda: list(EXERCISES))
    finished: list[Workout] = field(default_factory=seed_workouts)
    current: Workout | None = None

    def list_exercises(self) -> list[Exercise]:
        return list(self.exercises)

    def get_current(self) -> Workout | None:
        return self.current

    def set_current(self, workout: Workout | None) -> None:
        self.current = workout

    def add_finished(self, workout: Workout) -> None:
        self.finished.insert(0, workout)

    def list_finished(self, limit: int) -> list[Workout]:
        return self.finished[:limit]
