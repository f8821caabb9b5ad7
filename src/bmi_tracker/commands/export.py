"""Export entries command."""

import csv
import io
import json

import click
import pyperclip

from ..services.tracker import Dashboard, TrackerService
from .base import async_command, current_user, echo_error, echo_info, echo_success, ensure_initialized

CSV_COLUMNS = ["id", "date", "height_cm", "weight_kg", "bmi", "category", "height", "weight"]


def dashboard_to_csv(dashboard: Dashboard) -> str:
    """Entries as CSV, oldest first, with canonical and display columns."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for row in reversed(dashboard.rows):
        writer.writerow(
            [
                row.id,
                row.recorded_at.date().isoformat(),
                row.height_cm,
                row.weight_kg,
                row.bmi,
                row.category.value,
                row.height,
                row.weight,
            ]
        )
    return buffer.getvalue()


@click.command()
@click.option(
    "--format",
    "-f",
    type=click.Choice(["csv", "json"]),
    default="csv",
    help="Output format",
)
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of printing",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Write to file instead of stdout",
)
@click.pass_context
@async_command
async def export(ctx, format: str, clipboard: bool, output: str | None):
    """Export your entries.

    Examples:
        # Print CSV
        bmi-tracker export

        # Save JSON to a file
        bmi-tracker export --format json -o entries.json

        # Copy to clipboard for pasting into a spreadsheet
        bmi-tracker export --clipboard
    """
    ensure_initialized(ctx)

    dashboard = await TrackerService().dashboard(current_user(ctx))
    if not dashboard.rows:
        echo_info("No entries to export.")
        return

    if format == "csv":
        content = dashboard_to_csv(dashboard)
    else:
        content = json.dumps(dashboard.to_dict(), indent=2)

    if clipboard:
        try:
            pyperclip.copy(content)
        except pyperclip.PyperclipException as e:
            echo_error(f"Could not access the clipboard: {e}")
            ctx.exit(1)
        echo_success(f"Copied {len(dashboard.rows)} entries to clipboard!")

    elif output:
        with open(output, "w") as f:
            f.write(content)
        echo_success(f"Exported to {output}")

    else:
        click.echo(content)
