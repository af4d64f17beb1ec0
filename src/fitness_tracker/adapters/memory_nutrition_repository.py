"""In-memory nutrition log repository."""

from dataclasses import dataclass, field

from fitness_tracker.domain.meals import DailyNutrition
from fitness_tracker.domain.seed import seed_daily_nutrition
from fitness_tracker.services.nutrition_log import NutritionLogRepository


@dataclass
class InMemoryNutritionLogRepository(NutritionLogRepository):
    """Holds the current day's log in process memory."""

    day: DailyNutrition = field(default_factory=seed_daily_nutrition)

    def get_day(self) -> DailyNutrition:
        return self.day

    def save_day(self, day: DailyNutrition) -> None:
        self.day = day
