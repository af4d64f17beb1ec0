"""Seed data loaded into the in-memory repositories at startup."""

from datetime import UTC, date, datetime

from fitness_tracker.domain.meals import DailyNutrition, FoodItem, Meal
from fitness_tracker.domain.profile import ActivityLevel, MacroGoals, UserProfile
from fitness_tracker.domain.workouts import (
    Exercise,
    PersonalRecord,
    Workout,
    WorkoutExercise,
    WorkoutSet,
)

EXERCISES: tuple[Exercise, ...] = (
    Exercise("1", "Bench Press", "Chest", ("Chest", "Triceps", "Shoulders")),
    Exercise("2", "Squat", "Legs", ("Quadriceps", "Glutes", "Hamstrings")),
    Exercise("3", "Deadlift", "Back", ("Back", "Hamstrings", "Glutes")),
    Exercise("4", "Pull-ups", "Back", ("Back", "Biceps")),
    Exercise("5", "Overhead Press", "Shoulders", ("Shoulders", "Triceps")),
)


def seed_personal_records() -> list[PersonalRecord]:
    """Return the initial personal records."""
    return [
        PersonalRecord("1", "1", "Bench Press", 225, 1, date(2024, 1, 15), 225),
        PersonalRecord("2", "2", "Squat", 315, 1, date(2024, 1, 10), 315),
        PersonalRecord("3", "3", "Deadlift", 405, 1, date(2024, 1, 8), 405),
    ]


def seed_profile() -> UserProfile:
    """Return the initial user profile."""
    return UserProfile(
        id="1",
        name="John Doe",
        age=28,
        weight_lb=180,
        height_in=72,
        activity_level=ActivityLevel.MODERATE,
        goals=MacroGoals(calories=2200, protein_g=150, carbs_g=220, fat_g=75),
    )


def seed_daily_nutrition(now: datetime | None = None) -> DailyNutrition:
    """Return today's initial nutrition log."""
    logged_at = now or datetime.now(tz=UTC)
    return DailyNutrition(
        day=logged_at.date(),
        calories=1250,
        protein_g=95,
        carbs_g=120,
        fat_g=45,
        meals=[
            Meal(
                id="1",
                name="Breakfast",
                logged_at=logged_at,
                foods=[
                    FoodItem("1", "Oatmeal", 300, 10, 54, 6, 1, "cup"),
                    FoodItem("2", "Banana", 105, 1.3, 27, 0.4, 1, "medium"),
                ],
            ),
            Meal(
                id="2",
                name="Lunch",
                logged_at=logged_at,
                foods=[
                    FoodItem("3", "Chicken Breast", 231, 43.5, 0, 5, 1, "serving"),
                    FoodItem("4", "White Rice", 205, 4.3, 45, 0.4, 1, "cup"),
                ],
            ),
            Meal(
                id="3",
                name="Snacks",
                logged_at=logged_at,
                foods=[
                    FoodItem("5", "Greek Yogurt", 100, 17, 6, 0, 1, "container"),
                    FoodItem("6", "Apple", 95, 0.5, 25, 0.3, 1, "medium"),
                ],
            ),
        ],
    )


def seed_workouts(now: datetime | None = None) -> list[Workout]:
    """Return the initial workout history."""
    started_at = now or datetime.now(tz=UTC)
    return [
        Workout(
            id="1",
            name="Push Day",
            started_at=started_at,
            exercises=[
                WorkoutExercise(
                    id="1",
                    exercise=EXERCISES[0],
                    sets=[
                        WorkoutSet("1", reps=8, weight=185, completed=True),
                        WorkoutSet("2", reps=6, weight=205, completed=True),
                        WorkoutSet("3", reps=4, weight=215, completed=False),
                    ],
                )
            ],
        )
    ]
