"""Entry management: onboarding, recording entries and building the dashboard."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from pathlib import Path

from ..db.repositories import BMIEntryRepository, UserProfileRepository
from ..forms import FormError
from ..metrics import BMICategory, classify_bmi, format_age
from ..models.entry import BMIEntry
from ..models.measurements import HeightValue, MeasurementSystem, WeightValue
from ..models.user_profile import Sex, UserProfile
from ..units import (
    format_height_for_display,
    format_weight_for_display,
    height_from_metric,
    round_half_up,
    weight_from_metric,
)

logger = logging.getLogger(__name__)


class TrackerError(Exception):
    """An entry operation could not be carried out."""


class NotFoundError(TrackerError):
    """Entry does not exist or belongs to another user."""


class OnboardingRequiredError(TrackerError):
    """The user has not completed onboarding yet."""


@dataclass
class EntryRow:
    """One stored entry rendered in the user's units."""

    id: int
    recorded_at: datetime
    height: str
    weight: str
    bmi: float
    category: BMICategory
    height_cm: float
    weight_kg: float
    system: MeasurementSystem

    @property
    def height_value(self) -> HeightValue:
        return height_from_metric(self.height_cm, self.system)

    @property
    def weight_value(self) -> WeightValue:
        return weight_from_metric(self.weight_kg, self.system)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "recorded_at": self.recorded_at.isoformat(),
            "height": self.height,
            "weight": self.weight,
            "bmi": self.bmi,
            "category": self.category.value,
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "height_value": self.height_value.to_dict(),
            "weight_value": self.weight_value.to_dict(),
        }


@dataclass
class Dashboard:
    """Everything the dashboard shows for one user."""

    profile: UserProfile
    height: str
    age: str
    rows: list[EntryRow] = field(default_factory=list)

    @property
    def system(self) -> MeasurementSystem:
        return self.profile.measurement_system

    @property
    def latest(self) -> EntryRow | None:
        return self.rows[0] if self.rows else None

    @property
    def bmi_change(self) -> float | None:
        """BMI difference between the oldest and the newest entry."""
        if len(self.rows) < 2:
            return None
        return round_half_up(self.rows[0].bmi - self.rows[-1].bmi, 2)

    def to_dict(self) -> dict:
        return {
            "bmi_change": self.bmi_change,
            "profile": {
                "name": self.profile.name,
                "height": self.height,
                "age": self.age,
                "sex": self.profile.sex.value,
                "system": self.system.value,
            },
            "entries": [row.to_dict() for row in self.rows],
        }


def _as_timestamp(recorded_at: date | datetime) -> datetime:
    if isinstance(recorded_at, datetime):
        return recorded_at
    return datetime.combine(recorded_at, time())


def build_row(entry: BMIEntry, system: MeasurementSystem) -> EntryRow:
    """Render a stored entry for display in the given system."""
    return EntryRow(
        id=entry.id,
        recorded_at=entry.recorded_at,
        height=format_height_for_display(entry.height_cm, system),
        weight=format_weight_for_display(entry.weight_kg, system),
        bmi=round_half_up(entry.bmi, 2),
        category=classify_bmi(entry.bmi),
        height_cm=entry.height_cm,
        weight_kg=entry.weight_kg,
        system=system,
    )


class TrackerService:
    """Operations a signed-in user performs on their profile and entries.

    Heights and weights arrive here already converted to cm/kg; the service
    stores them as-is and converts back to the user's system for display.
    """

    def __init__(self, db_path: Path | None = None):
        self.profiles = UserProfileRepository(db_path)
        self.entries = BMIEntryRepository(db_path)

    async def get_profile(self, user_id: str) -> UserProfile:
        return await self.profiles.get_or_create(user_id)

    async def complete_onboarding(
        self,
        user_id: str,
        name: str,
        system: MeasurementSystem,
        height_cm: float,
        date_of_birth: date | None = None,
        sex: Sex = Sex.NOT_SPECIFIED,
    ) -> UserProfile:
        """Fill in the profile and mark onboarding as done."""
        if not name or not name.strip():
            raise FormError("Name is required")

        profile = await self.profiles.get_or_create(user_id)
        profile.complete_onboarding(
            name=name.strip(),
            measurement_system=system,
            height_cm=height_cm,
            date_of_birth=date_of_birth,
            sex=sex,
        )
        await self.profiles.save(profile)
        logger.info("User %s completed onboarding (%s)", user_id, system.value)
        return profile

    async def _require_onboarded(self, user_id: str) -> UserProfile:
        profile = await self.profiles.get_or_create(user_id)
        if not profile.onboarding_completed:
            logger.warning("User %s tried to record an entry before onboarding", user_id)
            raise OnboardingRequiredError("Complete your profile before adding entries")
        return profile

    async def add_entry(
        self,
        user_id: str,
        recorded_at: date | datetime,
        height_cm: float,
        weight_kg: float,
    ) -> BMIEntry:
        """Record a new observation."""
        await self._require_onboarded(user_id)
        entry = BMIEntry(
            user_id=user_id,
            recorded_at=_as_timestamp(recorded_at),
            height_cm=height_cm,
            weight_kg=weight_kg,
        )
        await self.entries.create(entry)
        return entry

    async def get_entry(self, user_id: str, entry_id: int) -> BMIEntry:
        entry = await self.entries.get(entry_id, user_id)
        if entry is None:
            raise NotFoundError(f"Entry {entry_id} not found")
        return entry

    async def update_entry(
        self,
        user_id: str,
        entry_id: int,
        recorded_at: date | datetime,
        height_cm: float,
        weight_kg: float,
    ) -> BMIEntry:
        """Replace the date, height and weight of an entry."""
        entry = BMIEntry(
            id=entry_id,
            user_id=user_id,
            recorded_at=_as_timestamp(recorded_at),
            height_cm=height_cm,
            weight_kg=weight_kg,
        )
        if not await self.entries.update(entry):
            logger.warning("User %s tried to update missing entry %s", user_id, entry_id)
            raise NotFoundError(f"Entry {entry_id} not found")
        return entry

    async def delete_entry(self, user_id: str, entry_id: int) -> None:
        if not await self.entries.delete(entry_id, user_id):
            logger.warning("User %s tried to delete missing entry %s", user_id, entry_id)
            raise NotFoundError(f"Entry {entry_id} not found")

    async def dashboard(self, user_id: str, today: date | None = None) -> Dashboard:
        """Profile summary and all entries in the user's units."""
        profile = await self.profiles.get_or_create(user_id)
        system = profile.measurement_system
        entries = await self.entries.list_for_user(user_id)
        logger.debug("Loaded %d entries for user %s", len(entries), user_id)

        return Dashboard(
            profile=profile,
            height=format_height_for_display(profile.height_cm, system),
            age=format_age(profile.date_of_birth, today),
            rows=[build_row(entry, system) for entry in entries],
        )
