"""Parsing and validation of user-entered heights, weights and dates.

Everything that reaches the conversion engine passes through here first:
raw strings are checked, bounded and converted to canonical metric values.
"""

from datetime import date, datetime

from .models.measurements import FeetInches, MeasurementSystem, Simple, StonesPounds
from .units import height_to_metric, weight_to_metric

# Input bounds for the composite fields
FEET_RANGE = (0, 8)
INCHES_RANGE = (0, 11)
STONES_RANGE = (0, 50)
POUNDS_RANGE = (0, 13)


class FormError(ValueError):
    """Submitted value is missing, malformed or out of range."""


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_number(value, label: str) -> float:
    if _blank(value):
        raise FormError(f"{label} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise FormError(f"{label} must be a number") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise FormError(f"{label} must be a number")
    return number


def _parse_whole(value, label: str, bounds: tuple[int, int]) -> int:
    number = _parse_number(value, label)
    if not number.is_integer():
        raise FormError(f"{label} must be a whole number")
    low, high = bounds
    if not low <= number <= high:
        raise FormError(f"{label} must be between {low} and {high}")
    return int(number)


def _parse_positive(value, label: str) -> float:
    number = _parse_number(value, label)
    if number <= 0:
        raise FormError(f"{label} must be greater than 0")
    return number


def parse_height(
    system: MeasurementSystem,
    *,
    height=None,
    feet=None,
    inches=None,
) -> float:
    """Parse a submitted height and return it in centimetres."""
    if system.uses_feet_inches:
        value = FeetInches(
            feet=_parse_whole(feet, "Feet", FEET_RANGE),
            inches=_parse_whole(inches, "Inches", INCHES_RANGE),
        )
    else:
        value = Simple(_parse_positive(height, "Height"))

    height_cm = height_to_metric(value, system)
    if height_cm <= 0:
        raise FormError("Height must be greater than 0")
    return height_cm


def parse_weight(
    system: MeasurementSystem,
    *,
    weight=None,
    stones=None,
    pounds=None,
) -> float:
    """Parse a submitted weight and return it in kilograms."""
    if system.uses_stones:
        value = StonesPounds(
            stones=_parse_whole(stones, "Stones", STONES_RANGE),
            pounds=_parse_whole(pounds, "Pounds", POUNDS_RANGE),
        )
    else:
        value = Simple(_parse_positive(weight, "Weight"))

    weight_kg = weight_to_metric(value, system)
    if weight_kg <= 0:
        raise FormError("Weight must be greater than 0")
    return weight_kg


def parse_date(value, label: str = "Date", required: bool = True) -> date | None:
    """Parse an ISO date (YYYY-MM-DD)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if _blank(value):
        if required:
            raise FormError(f"{label} is required")
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise FormError(f"{label} must be a date in YYYY-MM-DD format") from None


def parse_date_of_birth(value, today: date | None = None) -> date | None:
    """Optional date of birth; may not be in the future."""
    born = parse_date(value, "Date of birth", required=False)
    if born is not None and born > (today or date.today()):
        raise FormError("Date of birth cannot be in the future")
    return born
