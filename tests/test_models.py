"""Tests for data models."""

from datetime import date, datetime

import pytest

from bmi_tracker.models.entry import BMIEntry
from bmi_tracker.models.measurements import (
    FeetInches,
    MeasurementSystem,
    Simple,
    StonesPounds,
    ValueKind,
)
from bmi_tracker.models.user_profile import DEFAULT_HEIGHT_CM, Sex, UserProfile


class TestMeasurementSystem:
    """Tests for MeasurementSystem."""

    def test_parse(self):
        """Test parsing stored and submitted values."""
        assert MeasurementSystem.parse("us") == MeasurementSystem.US
        assert MeasurementSystem.parse(" UK ") == MeasurementSystem.UK
        assert MeasurementSystem.parse(MeasurementSystem.US) == MeasurementSystem.US

    def test_unknown_falls_back_to_metric(self):
        """Test unknown or missing systems read as metric."""
        assert MeasurementSystem.parse("imperial") == MeasurementSystem.METRIC
        assert MeasurementSystem.parse(None) == MeasurementSystem.METRIC

    def test_unit_pairing(self):
        """Test which systems use composite units."""
        assert not MeasurementSystem.METRIC.uses_feet_inches
        assert MeasurementSystem.US.uses_feet_inches
        assert not MeasurementSystem.US.uses_stones
        assert MeasurementSystem.UK.uses_stones


class TestDisplayValues:
    """Tests for tagged display values."""

    def test_kind_tags(self):
        """Test simple and composite values carry their tag."""
        assert Simple(170).kind == ValueKind.SIMPLE
        assert FeetInches(5, 7).kind == ValueKind.COMPOSITE
        assert StonesPounds(11, 5).kind == ValueKind.COMPOSITE

    def test_to_dict(self):
        """Test display values serialize with their tag."""
        assert Simple(70.5).to_dict() == {"kind": "simple", "value": 70.5}
        assert FeetInches(5, 7).to_dict() == {"kind": "composite", "feet": 5, "inches": 7}
        assert StonesPounds(11, 5).to_dict() == {
            "kind": "composite",
            "stones": 11,
            "pounds": 5,
        }

    def test_totals(self):
        """Test composite totals in the smaller unit."""
        assert FeetInches(5, 7).total_inches == 67
        assert StonesPounds(11, 5).total_pounds == 159


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_new_profile_defaults(self):
        """Test a freshly created profile."""
        profile = UserProfile(user_id="u1")

        assert profile.onboarding_completed is False
        assert profile.measurement_system == MeasurementSystem.METRIC
        assert profile.height_cm == DEFAULT_HEIGHT_CM
        assert profile.sex == Sex.NOT_SPECIFIED

    def test_complete_onboarding(self):
        """Test onboarding fills in the profile."""
        profile = UserProfile(user_id="u1")
        profile.complete_onboarding(
            name="Sam",
            measurement_system=MeasurementSystem.US,
            height_cm=170.18,
            date_of_birth=date(2000, 6, 15),
            sex=Sex.MALE,
        )

        assert profile.onboarding_completed is True
        assert profile.measurement_system == MeasurementSystem.US
        assert profile.height_cm == 170.18

    def test_profile_round_trip(self, sample_user_profile):
        """Test profile serialization and deserialization."""
        data = sample_user_profile.to_dict()

        assert data["measurement_system"] == "uk"
        assert data["date_of_birth"] == "1990-03-01"
        assert data["sex"] == "female"

        restored = UserProfile.from_dict(data)
        assert restored == sample_user_profile

    def test_from_dict_tolerates_missing_fields(self):
        """Test partial rows fall back to defaults."""
        profile = UserProfile.from_dict({"user_id": "u2", "sex": "unknown"})

        assert profile.name == ""
        assert profile.date_of_birth is None
        assert profile.height_cm == DEFAULT_HEIGHT_CM
        assert profile.sex == Sex.NOT_SPECIFIED


class TestBMIEntry:
    """Tests for BMIEntry model."""

    def test_bmi_computed_on_creation(self):
        """Test a new entry derives its BMI."""
        entry = BMIEntry(
            user_id="u1",
            recorded_at=datetime(2024, 6, 14),
            height_cm=180,
            weight_kg=75,
        )
        assert entry.bmi == pytest.approx(23.148, abs=0.001)

    def test_recalculate(self):
        """Test changing weight and recalculating updates the BMI."""
        entry = BMIEntry(
            user_id="u1",
            recorded_at=datetime(2024, 6, 14),
            height_cm=200,
            weight_kg=100,
        )
        entry.weight_kg = 120
        assert entry.recalculate() == pytest.approx(30.0)
        assert entry.bmi == pytest.approx(30.0)

    def test_from_dict_keeps_stored_bmi(self):
        """Test reading an entry does not recompute the stored BMI."""
        entry = BMIEntry.from_dict(
            {
                "user_id": "u1",
                "recorded_at": "2024-06-14T00:00:00",
                "height_cm": 180,
                "weight_kg": 75,
                "bmi": 23.15,
            },
            id=7,
        )
        assert entry.id == 7
        assert entry.bmi == 23.15

    def test_to_dict(self):
        """Test entry serialization."""
        entry = BMIEntry(
            user_id="u1",
            recorded_at=datetime(2024, 6, 14),
            height_cm=200,
            weight_kg=100,
        )
        data = entry.to_dict()

        assert data["recorded_at"] == "2024-06-14T00:00:00"
        assert data["bmi"] == pytest.approx(25.0)
