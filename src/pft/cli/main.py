#!/usr/bin/env python3
"""
Main CLI Entry Point for the Personal Finance Tracker

Provides the unified `pft` command-line interface.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config
from ..core.json_utils import format_json
from ..entries import EntryRecordStore
from ..tips import FavoritesRecordStore


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Personal Finance Tracker

    Record income and expenses, see totals and monthly trends, export your
    data and browse money-saving tips.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["PFT_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    config = reload_config() if (config_env or debug) else get_config()

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("pft").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from pft import __author__, __version__

    click.echo(f"Personal Finance Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the configuration as JSON")
@click.pass_context
def config(ctx: click.Context, as_json: bool) -> None:
    """Show current configuration and the state of the stored records."""
    config_obj = ctx.obj["config"]

    if as_json:
        click.echo(format_json(config_obj.to_dict()))
        return

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Entries File: {config_obj.storage.entries_file}")
    click.echo(f"  Favorites File: {config_obj.storage.favorites_file}")
    click.echo(f"  Export Directory: {config_obj.reports.output_dir}")
    click.echo(f"  Lookback Months: {config_obj.reports.lookback_months}")
    click.echo(f"  Currency Symbol: {config_obj.reports.currency_symbol}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")

    click.echo("\nStored Data:")
    records = (
        EntryRecordStore(config_obj.storage.entries_file),
        FavoritesRecordStore(config_obj.storage.favorites_file),
    )
    for record in records:
        click.echo(f"  {record.summary_text()}")
        if record.exists():
            modified = record.last_modified()
            click.echo(
                f"    {record.path.name}: {record.size_bytes()} bytes, "
                f"modified {modified:%Y-%m-%d %H:%M} ({record.age_days()} days ago)"
            )


from .entries import entries  # noqa: E402
from .reports import reports  # noqa: E402
from .tips import tips  # noqa: E402

main.add_command(entries)
main.add_command(reports)
main.add_command(tips)


if __name__ == "__main__":
    main()
