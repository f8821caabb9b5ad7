"""User profile data models."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .measurements import MeasurementSystem

DEFAULT_HEIGHT_CM = 170.0


class Sex(str, Enum):
    """Self-reported sex."""

    MALE = "male"
    FEMALE = "female"
    NOT_SPECIFIED = "not specified"

    @classmethod
    def parse(cls, value: "str | Sex | None") -> "Sex":
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.NOT_SPECIFIED


@dataclass
class UserProfile:
    """Profile of an authenticated user.

    Created the first time a user id is seen, then filled in once during
    onboarding. The measurement system applies to every entry the user owns.
    """

    user_id: str
    name: str = ""
    measurement_system: MeasurementSystem = MeasurementSystem.METRIC
    height_cm: float = DEFAULT_HEIGHT_CM  # reference height used to prefill new entries
    date_of_birth: date | None = None
    sex: Sex = Sex.NOT_SPECIFIED
    onboarding_completed: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def complete_onboarding(
        self,
        name: str,
        measurement_system: MeasurementSystem,
        height_cm: float,
        date_of_birth: date | None = None,
        sex: Sex = Sex.NOT_SPECIFIED,
    ) -> None:
        """Apply the onboarding answers and mark the profile complete."""
        self.name = name
        self.measurement_system = measurement_system
        self.height_cm = height_cm
        self.date_of_birth = date_of_birth
        self.sex = sex
        self.onboarding_completed = True

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "name": self.name,
            "measurement_system": self.measurement_system.value,
            "height_cm": self.height_cm,
            "date_of_birth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "sex": self.sex.value,
            "onboarding_completed": self.onboarding_completed,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "UserProfile":
        """Create from dictionary."""
        date_of_birth = None
        if data.get("date_of_birth"):
            date_of_birth = date.fromisoformat(data["date_of_birth"])

        height_cm = data.get("height_cm")
        return cls(
            user_id=data["user_id"],
            name=data.get("name") or "",
            measurement_system=MeasurementSystem.parse(data.get("measurement_system")),
            height_cm=DEFAULT_HEIGHT_CM if height_cm is None else float(height_cm),
            date_of_birth=date_of_birth,
            sex=Sex.parse(data.get("sex")),
            onboarding_completed=bool(data.get("onboarding_completed", False)),
            created_at=created_at,
            updated_at=updated_at,
        )
