"""CLI commands for preset queries: create, remove, list."""

from __future__ import annotations

import click

from jiracli.cli_common import add_row, make_table, print_table, run_action
from jiracli.session import Session


@click.group()
def preset() -> None:
    """Touch preset queries."""


async def _create(session: Session, name: str, query: str) -> None:
    if not session.config.add_preset(name, query):
        click.echo("This preset already exists")
        return
    session.config.persist()
    click.echo("Config file successfully updated")


@preset.command("create")
@click.argument("name")
@click.argument("query")
@click.pass_context
def create(ctx: click.Context, name: str, query: str) -> None:
    """Create a new preset."""
    run_action(ctx, _create, name, query)


async def _remove(session: Session, name: str) -> None:
    if not session.config.remove_preset(name):
        click.echo("Unknown preset.")
        return
    session.config.persist()
    click.echo("Config file successfully updated")


@preset.command("remove")
@click.argument("name")
@click.pass_context
def remove(ctx: click.Context, name: str) -> None:
    """Remove a preset."""
    run_action(ctx, _remove, name)


async def _list(session: Session) -> None:
    table = make_table("Name", "Query", styles=("blue", "green"))
    for name, query in session.config.presets.items():
        add_row(table, name, query)
    print_table(table)


@preset.command("list")
@click.pass_context
def list_presets(ctx: click.Context) -> None:
    """List the presets."""
    run_action(ctx, _list)


def register(cli: click.Group) -> None:
    """Register preset commands with the CLI group."""
    cli.add_command(preset)
