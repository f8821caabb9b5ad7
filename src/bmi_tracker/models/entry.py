"""BMI entry model."""

from dataclasses import dataclass
from datetime import datetime

from ..metrics import compute_bmi


@dataclass
class BMIEntry:
    """A single height/weight observation.

    Height and weight are always stored in canonical units (cm, kg). The BMI
    is stored alongside them and must be recomputed whenever either changes;
    use `recalculate()` on every write path.
    """

    user_id: str
    recorded_at: datetime
    height_cm: float
    weight_kg: float
    bmi: float | None = None
    id: int | None = None

    def __post_init__(self):
        if self.bmi is None:
            self.recalculate()

    def recalculate(self) -> float:
        """Recompute the stored BMI from the current height and weight."""
        self.bmi = compute_bmi(self.height_cm, self.weight_kg)
        return self.bmi

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "recorded_at": self.recorded_at.isoformat(),
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "bmi": self.bmi,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "BMIEntry":
        """Create from dictionary, keeping the stored BMI as-is."""
        return cls(
            id=id,
            user_id=data["user_id"],
            recorded_at=datetime.fromisoformat(data["recorded_at"]),
            height_cm=float(data["height_cm"]),
            weight_kg=float(data["weight_kg"]),
            bmi=data.get("bmi"),
        )
