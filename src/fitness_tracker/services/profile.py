"""User profile service."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from fitness_tracker.domain.profile import UserProfile
from fitness_tracker.domain.workouts import PersonalRecord, Workout
from fitness_tracker.services.nutrition_log import NutritionLogService, round_half_up

_KG_PER_LB = 0.453592
_CM_PER_IN = 2.54
_UNDERWEIGHT_BMI = 18.5
_NORMAL_BMI = 25
_OVERWEIGHT_BMI = 30

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Storage interface for the user profile."""

    def get_profile(self) -> UserProfile:
        """Return the user profile."""

    def list_personal_records(self) -> list[PersonalRecord]:
        """Return personal records."""

    def save_personal_record(self, record: PersonalRecord) -> None:
        """Insert or replace the record for its exercise."""


@dataclass
class GoalProgress:
    """Percent of each daily goal reached."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


def calculate_bmi(weight_lb: float, height_in: float) -> float:
    """Body mass index from imperial measurements, one decimal."""
    height_m = (height_in * _CM_PER_IN) / 100
    weight_kg = weight_lb * _KG_PER_LB
    return round_half_up(weight_kg / (height_m * height_m), 1)


def bmi_category(bmi: float) -> str:
    """Classify a BMI value."""
    if bmi < _UNDERWEIGHT_BMI:
        return "Underweight"
    if bmi < _NORMAL_BMI:
        return "Normal"
    if bmi < _OVERWEIGHT_BMI:
        return "Overweight"
    return "Obese"


def estimate_one_rep_max(weight: float, reps: int) -> int:
    """Epley estimate of the one-rep max."""
    if reps <= 1:
        return int(weight)
    return int(round_half_up(weight * (1 + reps / 30)))


def _percent(value: float, goal: float) -> float:
    if goal <= 0:
        return 0.0
    return round_half_up(min(value / goal, 1) * 100)


@dataclass
class ProfileService:
    """Service exposing profile metrics and goal progress."""

    repository: ProfileRepository
    nutrition_log: NutritionLogService

    def get_profile(self) -> UserProfile:
        """Return the user profile."""
        return self.repository.get_profile()

    def bmi(self) -> float:
        """Return the profile's BMI."""
        profile = self.repository.get_profile()
        return calculate_bmi(profile.weight_lb, profile.height_in)

    def goal_progress(self) -> GoalProgress:
        """Compare today's totals against the profile goals."""
        goals = self.repository.get_profile().goals
        today = self.nutrition_log.today()
        return GoalProgress(
            calories=_percent(today.calories, goals.calories),
            protein_g=_percent(today.protein_g, goals.protein_g),
            carbs_g=_percent(today.carbs_g, goals.carbs_g),
            fat_g=_percent(today.fat_g, goals.fat_g),
        )

    def personal_records(self) -> list[PersonalRecord]:
        """Return personal records, heaviest estimated max first."""
        return sorted(
            self.repository.list_personal_records(),
            key=lambda record: record.one_rep_max,
            reverse=True,
        )

    def record_workout(self, workout: Workout) -> list[PersonalRecord]:
        """Store records beaten by a workout's completed sets.

        Each exercise's best weighted completed set is ranked by its Epley
        estimate and replaces the stored record when the estimate is higher.
        Bodyweight sets are skipped. Returns the records that changed.
        """
        existing = {
            record.exercise_id: record
            for record in self.repository.list_personal_records()
        }
        achieved_on = (workout.ended_at or datetime.now(tz=UTC)).date()
        updated: list[PersonalRecord] = []
        for entry in workout.exercises:
            completed = [s for s in entry.sets if s.completed and s.weight > 0]
            if not completed:
                continue
            best = max(completed, key=lambda s: estimate_one_rep_max(s.weight, s.reps))
            estimate = estimate_one_rep_max(best.weight, best.reps)
            current = existing.get(entry.exercise.id)
            if current is not None and estimate <= current.one_rep_max:
                continue
            fields = {
                "weight": best.weight,
                "reps": best.reps,
                "achieved_on": achieved_on,
                "one_rep_max": estimate,
            }
            record = (
                replace(current, **fields)
                if current is not None
                else PersonalRecord(
                    id=uuid4().hex,
                    exercise_id=entry.exercise.id,
                    exercise_name=entry.exercise.name,
                    **fields,
                )
            )
            self.repository.save_personal_record(record)
            existing[record.exercise_id] = record
            updated.append(record)
            _logger.info(
                "New personal record: exercise=%s one_rep_max=%s",
                record.exercise_name,
                estimate,
            )
        return updated
