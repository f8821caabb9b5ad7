"""Conversions between canonical metric values and display units.

Heights and weights are stored in centimetres and kilograms. These functions
convert them to and from the unit pair of a measurement system:

    metric  cm            kg
    us      feet/inches   pounds
    uk      feet/inches   stones/pounds

The system is always passed in explicitly. Nothing here validates input;
bounds checking belongs to `bmi_tracker.forms`.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .models.measurements import (
    FeetInches,
    HeightValue,
    MeasurementSystem,
    Simple,
    StonesPounds,
    UnitLabels,
    WeightValue,
)

CM_PER_INCH = 2.54
CM_PER_FOOT = 30.48
LBS_PER_KG = 2.20462
KG_PER_STONE = 6.35029
INCHES_PER_FOOT = 12
POUNDS_PER_STONE = 14


def round_half_up(value: float, places: int = 0) -> float:
    """Round halves away from zero instead of to the nearest even digit.

    Infinities and NaN are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    number = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits to hold the integer part plus the requested places
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return float(number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Shortest string for a number: 170 rather than 170.0."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _split(total: float, per_unit: int) -> tuple:
    """Whole coarse units and the remainder rounded to a whole fine unit.

    A remainder that rounds up to a full coarse unit is carried. Non-finite
    totals come back as (total, nan).
    """
    if not math.isfinite(total):
        return total, math.nan
    whole = math.floor(total / per_unit)
    remainder = int(round_half_up(total % per_unit))
    if remainder == per_unit:
        whole += 1
        remainder = 0
    return whole, remainder


def cm_to_feet_inches(height_cm: float) -> FeetInches:
    """Split a height into whole feet and rounded inches.

    An inch remainder that rounds up to 12 is carried into the feet, so
    182 cm is 6'0" rather than 5'12".
    """
    feet, inches = _split(height_cm / CM_PER_INCH, INCHES_PER_FOOT)
    return FeetInches(feet=feet, inches=inches)


def feet_inches_to_cm(height: FeetInches) -> float:
    return round_half_up(height.total_inches * CM_PER_INCH, 2)


def kg_to_stones_pounds(weight_kg: float) -> StonesPounds:
    """Split a weight into whole stones and rounded pounds, carrying 14 lbs."""
    stones, pounds = _split(weight_kg * LBS_PER_KG, POUNDS_PER_STONE)
    return StonesPounds(stones=stones, pounds=pounds)


def stones_pounds_to_kg(weight: StonesPounds) -> float:
    return round_half_up(weight.total_pounds / LBS_PER_KG, 2)


def kg_to_lbs(weight_kg: float) -> float:
    return round_half_up(weight_kg * LBS_PER_KG, 2)


def lbs_to_kg(weight_lbs: float) -> float:
    return round_half_up(weight_lbs / LBS_PER_KG, 2)


def height_from_metric(height_cm: float, system: MeasurementSystem) -> HeightValue:
    """Convert a stored height into the user's display units."""
    if system.uses_feet_inches:
        return cm_to_feet_inches(height_cm)
    return Simple(height_cm)


def height_to_metric(height: HeightValue, system: MeasurementSystem) -> float:
    """Convert a height in the user's units back to centimetres.

    In US/UK units a plain number is read as decimal feet (older entries were
    captured that way). In metric a composite value converts to 0.
    """
    if system.uses_feet_inches:
        if isinstance(height, FeetInches):
            return feet_inches_to_cm(height)
        return round_half_up(height.value * CM_PER_FOOT, 2)
    if isinstance(height, Simple):
        return height.value
    return 0.0


def weight_from_metric(weight_kg: float, system: MeasurementSystem) -> WeightValue:
    """Convert a stored weight into the user's display units."""
    if system is MeasurementSystem.US:
        return Simple(kg_to_lbs(weight_kg))
    if system is MeasurementSystem.UK:
        return kg_to_stones_pounds(weight_kg)
    return Simple(weight_kg)


def weight_to_metric(weight: WeightValue, system: MeasurementSystem) -> float:
    """Convert a weight in the user's units back to kilograms.

    In UK units a plain number is read as decimal stones.
    """
    if system is MeasurementSystem.US:
        if isinstance(weight, Simple):
            return lbs_to_kg(weight.value)
        return 0.0
    if system is MeasurementSystem.UK:
        if isinstance(weight, StonesPounds):
            return stones_pounds_to_kg(weight)
        return round_half_up(weight.value * KG_PER_STONE, 2)
    if isinstance(weight, Simple):
        return weight.value
    return 0.0


def format_height_for_display(height_cm: float, system: MeasurementSystem) -> str:
    if system.uses_feet_inches:
        height = cm_to_feet_inches(height_cm)
        return f"{height.feet}'{height.inches}\""
    return f"{format_number(height_cm)} cm"


def format_weight_for_display(weight_kg: float, system: MeasurementSystem) -> str:
    if system is MeasurementSystem.US:
        return f"{format_number(kg_to_lbs(weight_kg))} lbs"
    if system is MeasurementSystem.UK:
        weight = kg_to_stones_pounds(weight_kg)
        return f"{weight.stones}st {format_number(weight.pounds)}lbs"
    return f"{format_number(weight_kg)} kg"


def unit_labels(system: MeasurementSystem) -> UnitLabels:
    if system is MeasurementSystem.US:
        return UnitLabels(height="ft/in", weight="lbs")
    if system is MeasurementSystem.UK:
        return UnitLabels(height="ft/in", weight="st/lbs")
    return UnitLabels(height="cm", weight="kg")


def height_placeholder(system: MeasurementSystem) -> dict[str, str]:
    """Example height input for the given system."""
    if system.uses_feet_inches:
        return {"feet": "5", "inches": "8"}
    return {"cm": "170"}


def weight_placeholder(system: MeasurementSystem) -> dict[str, str]:
    """Example weight input for the given system."""
    if system is MeasurementSystem.US:
        return {"single": "150"}
    if system is MeasurementSystem.UK:
        return {"stones": "11", "pounds": "5"}
    return {"single": "70"}
