#!/usr/bin/env python3
"""
Tips CLI - Browse the tip catalog and manage favorites.
"""

import click

from ..tips import ALL_CATEGORIES, get_tip, load_catalog, popular_categories, search_tips
from .common import load_favorites_store, warn_if_unsaved


@click.group()
def tips() -> None:
    """Money tips and favorites."""
    pass


@tips.command(name="list")
@click.option("--search", "-s", default="", help="Search title, summary and content")
@click.option("--category", "-c", default=ALL_CATEGORIES, help="Category to show (default: all)")
@click.pass_context
def list_tips(ctx: click.Context, search: str, category: str) -> None:
    """
    List tips, marking favorites with ♥.

    Example:
      pft tips list --category saving
    """
    favorites = load_favorites_store(ctx)
    shown = search_tips(load_catalog(), search, category)

    click.echo(f"Tips: {len(shown)}  Favorites: {favorites.count()}")
    if not shown:
        click.echo("No tips found.")
        return

    for tip in shown:
        mark = "♥" if favorites.is_favorite(tip.id) else "♡"
        click.echo(f"{mark} [{tip.id}] {tip.title} ({tip.category}) · {tip.summary}")


@tips.command()
@click.argument("tip_id")
def show(tip_id: str) -> None:
    """Show the full text of a tip."""
    tip = get_tip(load_catalog(), tip_id)
    if tip is None:
        raise click.ClickException(f"Tip not found: {tip_id}")

    click.echo(tip.title)
    click.echo("=" * len(tip.title))
    click.echo(f"Category: {tip.category}")
    click.echo()
    click.echo(tip.content)


@tips.command()
@click.argument("tip_id")
@click.pass_context
def favorite(ctx: click.Context, tip_id: str) -> None:
    """Toggle a tip as favorite."""
    favorites = load_favorites_store(ctx)
    now_favorite = favorites.toggle(tip_id)
    warn_if_unsaved(favorites.last_persistence_error)

    if now_favorite:
        click.echo(f"♥ Added {tip_id} to favorites ({favorites.count()} total)")
    else:
        click.echo(f"♡ Removed {tip_id} from favorites ({favorites.count()} total)")


@tips.command(name="favorites")
@click.pass_context
def list_favorites(ctx: click.Context) -> None:
    """List favorite tips, including ids no longer in the catalog."""
    favorites = load_favorites_store(ctx)
    catalog = load_catalog()

    if not favorites.count():
        click.echo("No favorites yet.")
        return

    for tip_id in favorites.list():
        tip = get_tip(catalog, tip_id)
        if tip is None:
            click.echo(f"♥ [{tip_id}] (not in catalog)")
        else:
            click.echo(f"♥ [{tip.id}] {tip.title}")


@tips.command(name="clear-favorites")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def clear_favorites(ctx: click.Context, yes: bool) -> None:
    """Remove every favorite."""
    favorites = load_favorites_store(ctx)

    if not favorites.count():
        click.echo("No favorites to clear.")
        return

    if not yes and not click.confirm("Clear all favorites?"):
        click.echo("Cancelled.")
        return

    removed = favorites.clear()
    warn_if_unsaved(favorites.last_persistence_error)
    click.echo(f"Cleared {removed} favorites")


@tips.command()
def categories() -> None:
    """Show tip categories, most popular first."""
    for category, count in popular_categories(load_catalog()):
        click.echo(f"{category}: {count} tips")
