"""Application services for bmi-tracker."""

from .tracker import (
    Dashboard,
    EntryRow,
    NotFoundError,
    OnboardingRequiredError,
    TrackerError,
    TrackerService,
)

__all__ = [
    "Dashboard",
    "EntryRow",
    "NotFoundError",
    "OnboardingRequiredError",
    "TrackerError",
    "TrackerService",
]
