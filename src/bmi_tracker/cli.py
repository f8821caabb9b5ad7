"""CLI entry point for bmi-tracker."""

import logging

import click

from . import __version__
from .commands import calc, entries, export, init, onboard, profile, serve
from .commands.base import DEFAULT_USER


@click.group()
@click.version_option(version=__version__, prog_name="bmi-tracker")
@click.option(
    "--user",
    envvar="BMI_TRACKER_USER",
    default=DEFAULT_USER,
    show_default=True,
    help="User id whose profile and entries to use",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, user: str, verbose: bool):
    """bmi-tracker: track height, weight and BMI over time.

    Example usage:

        # Initialize the database
        bmi-tracker init

        # Set up your profile
        bmi-tracker onboard

        # Record and review measurements
        bmi-tracker entries add --date 2024-06-14 --height 180 --weight 75
        bmi-tracker entries list
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["user"] = user


# Register commands
main.add_command(init)
main.add_command(onboard)
main.add_command(profile)
main.add_command(entries)
main.add_command(calc)
main.add_command(export)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
