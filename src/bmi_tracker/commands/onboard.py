"""Profile setup command."""

import click

from ..clients.manual import ManualInputClient
from ..forms import FormError, parse_date_of_birth, parse_height
from ..models.measurements import MeasurementSystem
from ..models.user_profile import Sex
from ..services.tracker import TrackerService
from ..units import format_height_for_display
from .base import async_command, current_user, echo_error, echo_success, ensure_initialized


@click.command()
@click.option("--name", help="Your name")
@click.option(
    "--system",
    type=click.Choice([s.value for s in MeasurementSystem]),
    help="System of measurement",
)
@click.option("--height", help="Height in cm (metric)")
@click.option("--feet", help="Height feet (US/UK)")
@click.option("--inches", help="Height inches (US/UK)")
@click.option("--dob", help="Date of birth (YYYY-MM-DD)")
@click.option(
    "--sex",
    type=click.Choice([s.value for s in Sex]),
    default=Sex.NOT_SPECIFIED.value,
    show_default=True,
)
@click.pass_context
@async_command
async def onboard(
    ctx: click.Context,
    name: str | None,
    system: str | None,
    height: str | None,
    feet: str | None,
    inches: str | None,
    dob: str | None,
    sex: str,
):
    """Set up your profile.

    Without --name and --system an interactive questionnaire is shown.

    Examples:

        # Interactive
        bmi-tracker onboard

        # Non-interactive, US units
        bmi-tracker onboard --name Sam --system us --feet 5 --inches 10
    """
    ensure_initialized(ctx)
    user_id = current_user(ctx)
    service = TrackerService()

    if name and system:
        selected = MeasurementSystem(system)
        try:
            height_cm = parse_height(selected, height=height, feet=feet, inches=inches)
            date_of_birth = parse_date_of_birth(dob)
        except FormError as e:
            echo_error(str(e))
            ctx.exit(1)
        sex_value = Sex(sex)
    else:
        answers = await ManualInputClient().collect_onboarding()
        name = answers.name
        selected = answers.system
        height_cm = answers.height_cm
        date_of_birth = answers.date_of_birth
        sex_value = answers.sex

    try:
        profile = await service.complete_onboarding(
            user_id,
            name=name,
            system=selected,
            height_cm=height_cm,
            date_of_birth=date_of_birth,
            sex=sex_value,
        )
    except FormError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(
        f"Profile saved for {profile.name} "
        f"({profile.measurement_system.value.upper()}, "
        f"{format_height_for_display(profile.height_cm, profile.measurement_system)})"
    )
