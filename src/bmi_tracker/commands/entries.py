"""BMI entry commands."""

import click

from ..forms import FormError, parse_date
from ..services.tracker import TrackerError, TrackerService
from ..units import format_height_for_display, format_weight_for_display
from .base import (
    async_command,
    current_user,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    measurement_options,
    parse_measurements,
)


@click.group()
def entries():
    """Record and manage height/weight entries.

    Heights and weights are entered in the system chosen during onboarding.
    """
    pass


@entries.command("add")
@click.option("--date", "entry_date", required=True, help="Date of the measurement (YYYY-MM-DD)")
@measurement_options
@click.pass_context
@async_command
async def add(ctx: click.Context, entry_date: str, **measurements):
    """Record a new measurement.

    Examples:

        # Metric
        bmi-tracker entries add --date 2024-06-14 --height 180 --weight 75

        # UK
        bmi-tracker entries add --date 2024-06-14 --feet 5 --inches 11 --stones 11 --pounds 10
    """
    ensure_initialized(ctx)
    user_id = current_user(ctx)
    service = TrackerService()

    try:
        prof = await service.get_profile(user_id)
        system = prof.measurement_system
        recorded_at = parse_date(entry_date)
        height_cm, weight_kg = parse_measurements(system, measurements)
        entry = await service.add_entry(user_id, recorded_at, height_cm, weight_kg)
    except (FormError, TrackerError) as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(
        f"Entry {entry.id} saved: "
        f"{format_height_for_display(entry.height_cm, system)}, "
        f"{format_weight_for_display(entry.weight_kg, system)}, BMI {entry.bmi:.2f}"
    )


@entries.command("list")
@click.pass_context
@async_command
async def list_entries(ctx: click.Context):
    """List all entries, newest first."""
    ensure_initialized(ctx)

    dashboard = await TrackerService().dashboard(current_user(ctx))

    if not dashboard.rows:
        echo_info("No entries yet.")
        click.echo("Run 'bmi-tracker entries add' to record one.")
        return

    headers = ["ID", "Date", "Height", "Weight", "BMI", "Category"]
    rows = [
        [
            str(row.id),
            row.recorded_at.strftime("%b %d, %Y"),
            row.height,
            row.weight,
            f"{row.bmi:.2f}",
            row.category.value,
        ]
        for row in dashboard.rows
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    if dashboard.bmi_change is not None:
        click.echo()
        click.echo(f"BMI change since first entry: {dashboard.bmi_change:+.2f}")


@entries.command("edit")
@click.argument("entry_id", type=int)
@click.option("--date", "entry_date", help="New date (YYYY-MM-DD)")
@measurement_options
@click.pass_context
@async_command
async def edit(ctx: click.Context, entry_id: int, entry_date: str | None, **measurements):
    """Replace the date, height and weight of an entry.

    The date defaults to the entry's current date; height and weight must
    be given again in full.
    """
    ensure_initialized(ctx)
    user_id = current_user(ctx)
    service = TrackerService()

    try:
        existing = await service.get_entry(user_id, entry_id)
        prof = await service.get_profile(user_id)
        recorded_at = parse_date(entry_date) if entry_date else existing.recorded_at
        height_cm, weight_kg = parse_measurements(prof.measurement_system, measurements)
        entry = await service.update_entry(user_id, entry_id, recorded_at, height_cm, weight_kg)
    except (FormError, TrackerError) as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Entry {entry.id} updated: BMI {entry.bmi:.2f}")


@entries.command("delete")
@click.argument("entry_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, entry_id: int, yes: bool):
    """Delete an entry."""
    ensure_initialized(ctx)

    if not yes and not click.confirm(f"Delete entry {entry_id}?"):
        echo_info("Cancelled.")
        return

    try:
        await TrackerService().delete_entry(current_user(ctx), entry_id)
    except TrackerError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Entry {entry_id} deleted")
