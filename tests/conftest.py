"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import date
from pathlib import Path

import pytest

from bmi_tracker.db import init_db
from bmi_tracker.models.measurements import MeasurementSystem
from bmi_tracker.models.user_profile import Sex, UserProfile


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_path(temp_db_path):
    """A temporary database with the schema created."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def sample_user_profile():
    """Create a sample onboarded profile for testing."""
    return UserProfile(
        user_id="user-1",
        name="Test User",
        measurement_system=MeasurementSystem.UK,
        height_cm=177.8,
        date_of_birth=date(1990, 3, 1),
        sex=Sex.FEMALE,
        onboarding_completed=True,
    )
