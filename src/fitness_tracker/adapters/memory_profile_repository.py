"""In-memory profile repository."""

from dataclasses import dataclass, field

from fitness_tracker.domain.profile import UserProfile
from fitness_tracker.domain.seed import seed_personal_records, seed_profile
from fitness_tracker.domain.workouts import PersonalRecord
from fitness_tracker.services.profile import ProfileRepository


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """Holds the profile and personal records in process memory."""

    profile: UserProfile = field(default_factory=seed_profile)
    records: list[PersonalRecord] = field(default_factory=seed_personal_records)

    def get_profile(self) -> UserProfile:
        return self.profile

    def list_personal_records(self) -> list[PersonalRecord]:
        return list(self.records)

    def save_personal_record(self, record: PersonalRecord) -> None:
        self.records = [
            r for r in self.records if r.exercise_id != record.exercise_id
        ] + [record]
