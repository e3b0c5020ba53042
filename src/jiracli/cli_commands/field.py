"""CLI commands for custom fields: listall, add, remove, list."""

from __future__ import annotations

import click

from jiracli.cli_common import add_row, make_table, print_table, run_action
from jiracli.errors import RemoteError, show_error
from jiracli.fields import find_field, is_supported, list_fields, schema_type
from jiracli.session import Session


@click.group()
def field() -> None:
    """Do things related to issue fields."""


async def _list_all(session: Session) -> None:
    try:
        result = await list_fields(session)
    except RemoteError as e:
        show_error(session, e)
        return

    table = make_table("Name", "Supported", "Type", styles=("blue",))
    for item in result:
        field_type = schema_type(item)
        supported = is_supported(field_type)
        add_row(table, item.get("name", ""), "yes" if supported else "no", field_type if supported else "")
    print_table(table)


@field.command("listall")
@click.pass_context
def list_all(ctx: click.Context) -> None:
    """Show the list of fields."""
    run_action(ctx, _list_all)


async def _add(session: Session, field_name: str) -> None:
    try:
        result = await list_fields(session)
    except RemoteError as e:
        show_error(session, e)
        return

    found = find_field(result, field_name)
    if found is None:
        click.echo("Unknown field.")
        return
    if not is_supported(schema_type(found)):
        click.echo("Unsupported field.")
        return

    session.config.add_field(field_name)
    session.config.persist()
    click.echo("Config file successfully updated")


@field.command("add")
@click.argument("field_name", metavar="FIELD")
@click.pass_context
def add(ctx: click.Context, field_name: str) -> None:
    """Add a custom field to be shown."""
    run_action(ctx, _add, field_name)


async def _remove(session: Session, field_name: str) -> None:
    if field_name not in session.config.fields:
        click.echo("Unknown field.")
        return

    session.config.remove_field(field_name)
    session.config.persist()
    click.echo("Config file successfully updated")


@field.command("remove")
@click.argument("field_name", metavar="FIELD")
@click.pass_context
def remove(ctx: click.Context, field_name: str) -> None:
    """Remove a custom field."""
    run_action(ctx, _remove, field_name)


async def _list(session: Session) -> None:
    table = make_table("Name", styles=("blue",))
    for name in session.config.fields:
        add_row(table, name)
    print_table(table)


@field.command("list")
@click.pass_context
def list_configured(ctx: click.Context) -> None:
    """List the configured custom fields."""
    run_action(ctx, _list)


def register(cli: click.Group) -> None:
    """Register field commands with the CLI group."""
    cli.add_command(field)
