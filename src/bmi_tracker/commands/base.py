"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..db import get_db_path
from ..forms import parse_height, parse_weight
from ..models.measurements import MeasurementSystem

DEFAULT_USER = "local"


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'bmi-tracker init' first."
        )
        ctx.exit(1)


def current_user(ctx: click.Context) -> str:
    """User id selected with --user on the root command."""
    obj = ctx.find_root().obj or {}
    return obj.get("user", DEFAULT_USER)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)


def measurement_options(f):
    """Height and weight options accepted in any measurement system."""
    options = [
        click.option("--height", help="Height in cm (metric)"),
        click.option("--feet", help="Height feet (US/UK)"),
        click.option("--inches", help="Height inches (US/UK)"),
        click.option("--weight", help="Weight in kg (metric) or lbs (US)"),
        click.option("--stones", help="Weight stones (UK)"),
        click.option("--pounds", help="Weight pounds (UK)"),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def parse_measurements(system: MeasurementSystem, options: dict) -> tuple[float, float]:
    """Convert measurement options to (height_cm, weight_kg)."""
    height_cm = parse_height(
        system,
        height=options.get("height"),
        feet=options.get("feet"),
        inches=options.get("inches"),
    )
    weight_kg = parse_weight(
        system,
        weight=options.get("weight"),
        stones=options.get("stones"),
        pounds=options.get("pounds"),
    )
    return height_cm, weight_kg
