"""Measurement systems and display value types."""

from dataclasses import dataclass, field
from enum import Enum


class MeasurementSystem(str, Enum):
    """Unit system a user enters and reads values in."""

    METRIC = "metric"  # cm / kg
    US = "us"  # ft+in / lbs
    UK = "uk"  # ft+in / st+lbs

    @classmethod
    def parse(cls, value: "str | MeasurementSystem | None") -> "MeasurementSystem":
        """Parse a stored or submitted value, falling back to metric."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.METRIC

    @property
    def uses_feet_inches(self) -> bool:
        return self in (MeasurementSystem.US, MeasurementSystem.UK)

    @property
    def uses_stones(self) -> bool:
        return self is MeasurementSystem.UK


class ValueKind(str, Enum):
    """Tag distinguishing single-number values from two-part values."""

    SIMPLE = "simple"
    COMPOSITE = "composite"


@dataclass(frozen=True)
class Simple:
    """A single number: centimetres, kilograms or pounds."""

    value: float
    kind: ValueKind = field(default=ValueKind.SIMPLE, init=False)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "value": self.value}


@dataclass(frozen=True)
class FeetInches:
    """Height as whole feet plus inches (0-11)."""

    feet: int
    inches: int
    kind: ValueKind = field(default=ValueKind.COMPOSITE, init=False)

    @property
    def total_inches(self) -> float:
        return self.feet * 12 + self.inches

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "feet": self.feet, "inches": self.inches}


@dataclass(frozen=True)
class StonesPounds:
    """Weight as whole stones plus pounds (0-13)."""

    stones: int
    pounds: float
    kind: ValueKind = field(default=ValueKind.COMPOSITE, init=False)

    @property
    def total_pounds(self) -> float:
        return self.stones * 14 + self.pounds

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "stones": self.stones, "pounds": self.pounds}


HeightValue = Simple | FeetInches
WeightValue = Simple | StonesPounds


@dataclass(frozen=True)
class UnitLabels:
    """Short unit labels shown next to inputs."""

    height: str
    weight: str
