"""Data models for bmi-tracker."""

from .entry import BMIEntry
from .measurements import (
    FeetInches,
    HeightValue,
    MeasurementSystem,
    Simple,
    StonesPounds,
    UnitLabels,
    ValueKind,
    WeightValue,
)
from .user_profile import Sex, UserProfile

__all__ = [
    "BMIEntry",
    "FeetInches",
    "HeightValue",
    "MeasurementSystem",
    "Sex",
    "Simple",
    "StonesPounds",
    "UnitLabels",
    "UserProfile",
    "ValueKind",
    "WeightValue",
]
