#!/usr/bin/env python3
"""
Reports CLI - Summaries, CSV export and chart snapshots.

Every command works on the same selection the entries listing would show,
so the figures match what the user filtered to.
"""

from pathlib import Path
from typing import Optional

import click

from ..analysis import build_report
from ..core.json_utils import format_json
from ..entries import filter_entries
from ..export import export_entries_csv, render_dashboard
from .common import current_config, load_entry_store, search_option, type_option

months_option = click.option(
    "--months", type=click.IntRange(min=1), default=None, help="Months in the balance series (default: config)"
)


@click.group()
def reports() -> None:
    """Summary, export and chart commands."""
    pass


@reports.command()
@search_option
@type_option
@months_option
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def summary(ctx: click.Context, search: str, type_filter: str, months: Optional[int], as_json: bool) -> None:
    """
    Show totals, the income/expense split and the monthly cumulative balance.

    Examples:
      pft reports summary
      pft reports summary --type expense --months 12
      pft reports summary --json
    """
    config = current_config(ctx)
    symbol = config.reports.currency_symbol
    store = load_entry_store(ctx)

    shown = filter_entries(store.list(), search, type_filter)
    report = build_report(shown, months=months or config.reports.lookback_months)

    if as_json:
        click.echo(format_json(report.to_dict()))
        return

    if report.is_empty:
        click.echo("No transactions found.")

    click.echo("[SUMMARY] Totals:")
    click.echo(f"   Income:  {report.totals.income.format(symbol)}")
    click.echo(f"   Expense: {report.totals.expense.format(symbol)}")
    click.echo(f"   Balance: {report.totals.balance.format(symbol)}")

    if report.breakdown:
        click.echo("\n[BREAKDOWN] By type:")
        for entry_type, amount in report.breakdown.items():
            click.echo(f"   {entry_type.label}: {amount.format(symbol)}")

    click.echo("\n[TREND] Cumulative balance:")
    for point in report.series:
        click.echo(f"   {point.label:<9} {point.net.format(symbol):>16} {point.cumulative.format(symbol):>16}")


@reports.command(name="export-csv")
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@search_option
@type_option
@click.pass_context
def export_csv(ctx: click.Context, output_file: Path, search: str, type_filter: str) -> None:
    """
    Export entries to CSV.

    Example:
      pft reports export-csv transactions.csv
    """
    store = load_entry_store(ctx)
    shown = filter_entries(store.list(), search, type_filter)

    if not shown:
        raise click.ClickException("No transactions to export.")

    try:
        written = export_entries_csv(shown, output_file)
    except OSError as e:
        raise click.ClickException(f"Could not write {output_file}: {e}") from e

    click.echo(f"✅ Exported {len(shown)} transactions to: {written}")


@reports.command()
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path), required=False)
@search_option
@type_option
@months_option
@click.pass_context
def chart(
    ctx: click.Context, output_file: Optional[Path], search: str, type_filter: str, months: Optional[int]
) -> None:
    """
    Save a chart snapshot (png, pdf or svg by file suffix).

    Without OUTPUT_FILE the chart goes to the configured export directory.

    Examples:
      pft reports chart
      pft reports chart report.pdf --months 12
    """
    config = current_config(ctx)
    store = load_entry_store(ctx)

    shown = filter_entries(store.list(), search, type_filter)
    report = build_report(shown, months=months or config.reports.lookback_months)

    if output_file is None:
        output_file = config.reports.output_dir / "overview.png"

    try:
        written = render_dashboard(
            report,
            output_file,
            config.reports.currency_symbol,
            figure_size=(config.reports.chart_width, config.reports.chart_height),
            dpi=config.reports.chart_dpi,
        )
    except (ValueError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"✅ Chart saved to: {written}")
