"""CLI for rendering durations from the command line."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from duration_format.config import DEFAULT_DELIMITER, FormatOptions
from duration_format.formatting import format_duration
from duration_format.models import UNITS, unit_token

app = typer.Typer(help="Duration format — render durations as human-readable text.")
console = Console()


def _parse_format(value: str) -> tuple[str, ...]:
    """Split a comma-separated unit list, rejecting unknown names."""
    units = tuple(part.strip() for part in value.split(",") if part.strip())
    unknown = [unit for unit in units if unit not in UNITS]
    if unknown:
        raise typer.BadParameter(
            f"Unknown unit(s): {', '.join(unknown)}. Choose from: {', '.join(UNITS)}",
            param_hint="--format",
        )
    return units


@app.command()
def render(
    years: Optional[int] = typer.Option(None, "--years", "-Y", min=0),
    months: Optional[int] = typer.Option(None, "--months", "-M", min=0),
    weeks: Optional[int] = typer.Option(None, "--weeks", "-w", min=0),
    days: Optional[int] = typer.Option(None, "--days", "-d", min=0),
    hours: Optional[int] = typer.Option(None, "--hours", "-H", min=0),
    minutes: Optional[int] = typer.Option(None, "--minutes", "-m", min=0),
    seconds: Optional[int] = typer.Option(None, "--seconds", "-s", min=0),
    unit_format: str = typer.Option(
        ",".join(UNITS), "--format", "-f", help="Comma-separated units, in output order"
    ),
    zero: bool = typer.Option(False, "--zero", "-z", help="Include zero-valued units"),
    delimiter: str = typer.Option(
        DEFAULT_DELIMITER, "--delimiter", help="String placed between units"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped units"),
) -> None:
    """Print a duration such as '2 years 9 months 3 weeks'."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    values = {
        "years": years,
        "months": months,
        "weeks": weeks,
        "days": days,
        "hours": hours,
        "minutes": minutes,
        "seconds": seconds,
    }
    duration: dict[str, int] = {
        unit: value for unit, value in values.items() if value is not None
    }

    options = FormatOptions(
        format=_parse_format(unit_format), zero=zero, delimiter=delimiter
    )
    typer.echo(format_duration(duration, options))


@app.command()
def units() -> None:
    """List the supported units in canonical order with their locale tokens."""
    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("unit")
    table.add_column("token", style="dim")
    for unit in UNITS:
        table.add_row(unit, unit_token(unit))
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
