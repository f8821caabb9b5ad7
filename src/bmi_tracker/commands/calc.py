"""One-off BMI calculation without storing anything."""

import click

from ..forms import FormError
from ..metrics import classify_bmi, compute_bmi
from ..models.measurements import MeasurementSystem
from ..units import format_height_for_display, format_weight_for_display
from .base import echo_error, measurement_options, parse_measurements


@click.command()
@click.option(
    "--system",
    type=click.Choice([s.value for s in MeasurementSystem]),
    default=MeasurementSystem.METRIC.value,
    show_default=True,
)
@measurement_options
@click.pass_context
def calc(ctx: click.Context, system: str, **measurements):
    """Calculate BMI for a height and weight.

    Examples:

        bmi-tracker calc --height 180 --weight 75

        bmi-tracker calc --system us --feet 5 --inches 11 --weight 165
    """
    selected = MeasurementSystem(system)
    try:
        height_cm, weight_kg = parse_measurements(selected, measurements)
    except FormError as e:
        echo_error(str(e))
        ctx.exit(1)

    bmi = compute_bmi(height_cm, weight_kg)
    click.echo(
        f"Height: {format_height_for_display(height_cm, selected)} ({height_cm} cm)"
    )
    click.echo(
        f"Weight: {format_weight_for_display(weight_kg, selected)} ({weight_kg} kg)"
    )
    click.echo(f"BMI: {bmi:.2f} ({classify_bmi(bmi).value})")
