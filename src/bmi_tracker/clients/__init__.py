"""Input clients for bmi-tracker."""

from .manual import ManualInputClient, OnboardingAnswers

__all__ = ["ManualInputClient", "OnboardingAnswers"]
