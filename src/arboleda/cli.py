"""Command-line interface for arboleda using Click.

Commands:
  summary       -> Build the event summary from a local workbook or Google Sheets
  resolve-date  -> Resolve a single date token
  format-range  -> Render a start/end pair as a range label

Usage examples:
  python -m arboleda.cli summary --workbook planilla.xlsx --today 2026-03-01
  python -m arboleda.cli summary --format text
  python -m arboleda.cli resolve-date 45000
  python -m arboleda.cli format-range 2026-03-28 2026-04-02
"""

from __future__ import annotations
import logging, sys
from datetime import date, datetime
from typing import Optional
import click

from .dates import resolve_date
from .events import BIRTHDAY_WINDOW_DAYS, MAX_BIRTHDAY_WINDOW_DAYS
from .formatting import format_range
from .summary import build_summary, summary_lines
from .workbook import load_workbook_grids


# --------------------- CLI group ---------------------


@click.group()
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG).")
@click.version_option("0.1.0")
def cli(verbose: bool):
    """arboleda CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    logging.debug("Verbose logging enabled." if verbose else "Logging level INFO.")


# --------------------- summary ---------------------


@cli.command("summary")
@click.option(
    "--workbook",
    default=None,
    type=click.Path(exists=True),
    help="Excel workbook or directory of <sheet>.csv files (default: Google Sheets).",
)
@click.option("--today", "today_str", default=None, help="Reference day YYYY-MM-DD.")
@click.option(
    "--birthday-window-days",
    default=BIRTHDAY_WINDOW_DAYS,
    show_default=True,
    type=click.IntRange(0, MAX_BIRTHDAY_WINDOW_DAYS),
    help="Birthday look-ahead in days.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="json",
    show_default=True,
)
@click.option(
    "--json-out",
    default=None,
    type=click.Path(dir_okay=False),
    help="Optional JSON output path.",
)
def cmd_summary(
    workbook: Optional[str],
    today_str: Optional[str],
    birthday_window_days: int,
    output_format: str,
    json_out: Optional[str],
):
    """Build retreats, courses and birthdays relative to a reference day."""
    if today_str:
        try:
            today = datetime.strptime(today_str, "%Y-%m-%d").date()
        except ValueError:
            raise click.BadParameter("today must be YYYY-MM-DD")
    else:
        today = date.today()
    try:
        if workbook:
            grids = load_workbook_grids(workbook)
        else:
            from .web.sheets import fetch_grids

            grids = fetch_grids()
    except Exception as e:
        logging.exception("Failed to load source grids")
        click.echo(f"Error loading data: {e}", err=True)
        sys.exit(1)
    summary = build_summary(grids, today, birthday_window_days)
    payload = summary.model_dump_json(by_alias=True, indent=2)
    if json_out:
        with open(json_out, "w", encoding="utf-8") as f:
            f.write(payload)
        click.echo(f"Summary written: JSON={json_out}")
    if output_format == "text":
        for line in summary_lines(summary, birthday_window_days):
            click.echo(line)
    elif not json_out:
        click.echo(payload)


# --------------------- resolve-date ---------------------


@cli.command("resolve-date")
@click.argument("token")
@click.option(
    "--year", default=None, type=int, help="Year for day/month tokens (default: current)."
)
def cmd_resolve_date(token: str, year: Optional[int]):
    """Resolve a date token to YYYY-MM-DD."""
    d = resolve_date(token, year if year is not None else date.today().year)
    if d is None:
        click.echo("no date")
        sys.exit(1)
    click.echo(d.isoformat())


# --------------------- format-range ---------------------


@cli.command("format-range")
@click.argument("start", default="")
@click.argument("end", default="")
def cmd_format_range(start: str, end: str):
    """Render a start/end date pair as a compact label."""
    click.echo(format_range(start, end))


# --------------------- entry ---------------------


def main():  # pragma: no cover
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
