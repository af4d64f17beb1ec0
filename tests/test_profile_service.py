"""Tests for the profile service."""

from datetime import UTC, date, datetime

from fitness_tracker.adapters.memory_nutrition_repository import (
    InMemoryNutritionLogRepository,
)
from fitness_tracker.adapters.memory_profile_repository import (
    InMemoryProfileRepository,
)
from fitness_tracker.domain.foods import FoodSuggestion
from fitness_tracker.domain.profile import ActivityLevel
from fitness_tracker.domain.reference import NUTRITION_FACTS
from fitness_tracker.domain.seed import EXERCISES
from fitness_tracker.domain.workouts import Workout, WorkoutExercise, WorkoutSet
from fitness_tracker.services.nutrition_log import NutritionLogService
from fitness_tracker.services.profile import (
    ProfileService,
    bmi_category,
    calculate_bmi,
    estimate_one_rep_max,
)


def _service() -> ProfileService:
    return ProfileService(
        repository=InMemoryProfileRepository(),
        nutrition_log=NutritionLogService(InMemoryNutritionLogRepository()),
    )


def test_seed_profile_bmi() -> None:
    service = _service()

    assert service.bmi() == 24.4
    assert bmi_category(service.bmi()) == "Normal"


def test_bmi_categories() -> None:
    assert bmi_category(18.4) == "Underweight"
    assert bmi_category(25) == "Overweight"
    assert bmi_category(30) == "Obese"
    assert calculate_bmi(120, 72) == 16.3


def test_activity_level_labels() -> None:
    assert ActivityLevel.MODERATE.label == "Moderately Active"
    assert ActivityLevel("very_active").label == "Extremely Active"


def test_goal_progress_uses_today_totals() -> None:
    progress = _service().goal_progress()

    assert progress.calories == 57
    assert progress.protein_g == 63
    assert progress.carbs_g == 55
    assert progress.fat_g == 60


def test_personal_records_sorted_by_max() -> None:
    records = _service().personal_records()

    assert [r.exercise_name for r in records] == ["Deadlift", "Squat", "Bench Press"]


def test_estimate_one_rep_max() -> None:
    assert estimate_one_rep_max(225, 1) == 225
    assert estimate_one_rep_max(200, 5) == 233


def test_goal_progress_is_capped_at_goal() -> None:
    service = _service()
    oatmeal = FoodSuggestion.from_fact(NUTRITION_FACTS["oatmeal"], confidence=0.9)
    service.nutrition_log.add_food("Breakfast", oatmeal, 5)

    progress = service.goal_progress()

    assert progress.calories == 100
    assert progress.carbs_g == 100
    assert progress.protein_g == 97
    assert progress.fat_g == 100


def test_record_workout_updates_beaten_records() -> None:
    service = _service()
    bench, squat, _, pull_ups, overhead_press = EXERCISES
    workout = Workout(
        id="w",
        name="Mixed",
        started_at=datetime(2024, 3, 1, 9, 0, tzinfo=UTC),
        ended_at=datetime(2024, 3, 1, 10, 0, tzinfo=UTC),
        exercises=[
            WorkoutExercise(
                "a",
                bench,
                sets=[
                    WorkoutSet("1", reps=3, weight=250),
                    WorkoutSet("2", reps=1, weight=300, completed=False),
                ],
            ),
            WorkoutExercise("b", squat, sets=[WorkoutSet("3", reps=3, weight=200)]),
            WorkoutExercise("c", pull_ups, sets=[WorkoutSet("4", reps=12, weight=0)]),
            WorkoutExercise(
                "d", overhead_press, sets=[WorkoutSet("5", reps=3, weight=150)]
            ),
        ],
    )

    updated = service.record_workout(workout)

    assert [r.exercise_name for r in updated] == ["Bench Press", "Overhead Press"]
    bench_record = updated[0]
    assert bench_record.id == "1"
    assert (bench_record.weight, bench_record.reps) == (250, 3)
    assert bench_record.one_rep_max == 275
    assert bench_record.achieved_on == date(2024, 3, 1)
    assert [(r.exercise_name, r.one_rep_max) for r in service.personal_records()] == [
        ("Deadlift", 405),
        ("Squat", 315),
        ("Bench Press", 275),
        ("Overhead Press", 165),
    ]
