"""Initialize project command."""

import click

from ..db import get_data_dir, get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the bmi-tracker data directory and database."""
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing bmi-tracker in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("bmi-tracker is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Set up your profile:")
    click.echo("     bmi-tracker onboard")
    click.echo()
    click.echo("  2. Record a measurement:")
    click.echo("     bmi-tracker entries add --date 2024-06-14 --height 180 --weight 75")
