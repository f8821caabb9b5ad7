"""Web interface for bmi-tracker."""

from .app import create_app

__all__ = ["create_app"]
