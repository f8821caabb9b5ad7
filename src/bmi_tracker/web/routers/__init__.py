"""Routers for the bmi-tracker web interface."""
