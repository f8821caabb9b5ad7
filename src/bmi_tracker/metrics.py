"""Values derived from canonical measurements: BMI, BMI category and age."""

from datetime import date, datetime
from enum import Enum

NOT_SPECIFIED = "Not specified"


class BMICategory(str, Enum):
    """Standard adult BMI bands."""

    UNDERWEIGHT = "Underweight"  # < 18.5
    NORMAL = "Normal"  # 18.5 - 24.9
    OVERWEIGHT = "Overweight"  # 25 - 29.9
    OBESE = "Obese"  # >= 30


# Lower bound of each band, highest first. A value on a boundary belongs to
# the higher band.
BMI_THRESHOLDS = [
    (30.0, BMICategory.OBESE),
    (25.0, BMICategory.OVERWEIGHT),
    (18.5, BMICategory.NORMAL),
]


def compute_bmi(height_cm: float, weight_kg: float) -> float:
    """Calculate BMI from height (cm) and weight (kg).

    Formula: BMI = weight_kg / (height_m)²

    Args:
        height_cm: Height in centimetres, must be positive
        weight_kg: Weight in kilograms

    Returns:
        Unrounded BMI value

    Examples:
        >>> round(compute_bmi(180, 75), 2)
        23.15
    """
    if height_cm <= 0:
        raise ValueError(f"Height must be positive to compute BMI, got {height_cm}")

    height_m = height_cm / 100.0
    return weight_kg / (height_m ** 2)


def classify_bmi(bmi: float) -> BMICategory:
    """Place a BMI value into its category band."""
    for lower_bound, category in BMI_THRESHOLDS:
        if bmi >= lower_bound:
            return category
    return BMICategory.UNDERWEIGHT


def _as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def calculate_age(
    date_of_birth: date | datetime | str | None,
    today: date | None = None,
) -> int | None:
    """Age in whole years, or None when no date of birth is recorded.

    One year is subtracted while this year's birthday is still ahead.
    """
    if not date_of_birth:
        return None

    born = _as_date(date_of_birth)
    today = today or date.today()

    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def format_age(
    date_of_birth: date | datetime | str | None,
    today: date | None = None,
) -> str:
    age = calculate_age(date_of_birth, today)
    if age is None:
        return NOT_SPECIFIED
    return f"{age} years old"
