"""Profile commands."""

import click

from ..services.tracker import TrackerService
from .base import async_command, current_user, echo_info, ensure_initialized


@click.group()
def profile():
    """View your profile."""
    pass


@profile.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Display the profile summary."""
    ensure_initialized(ctx)

    dashboard = await TrackerService().dashboard(current_user(ctx))
    prof = dashboard.profile

    if not prof.onboarding_completed:
        echo_info("Profile not set up yet.")
        click.echo("Run 'bmi-tracker onboard' to get started.")
        return

    click.echo()
    click.echo(click.style(f"Profile: {prof.name}", bold=True))
    click.echo("=" * 40)
    click.echo(f"Height: {dashboard.height}")
    click.echo(f"Age:    {dashboard.age}")
    click.echo(f"Sex:    {prof.sex.value.capitalize()}")
    click.echo(f"System: {dashboard.system.value.upper()}")
    click.echo(f"Entries: {len(dashboard.rows)}")
    if dashboard.latest:
        latest = dashboard.latest
        click.echo(f"Latest BMI: {latest.bmi} ({latest.category.value})")
