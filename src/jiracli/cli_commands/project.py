"""CLI commands for projects: list, components, use."""

from __future__ import annotations

from typing import Any

import click

from jiracli.cli_common import add_row, make_table, print_table, run_action
from jiracli.remote import segment
from jiracli.session import Session


@click.group()
def project() -> None:
    """Do things related to projects."""


async def _list(session: Session) -> None:
    projects: list[dict[str, Any]] = await session.remote.spin(
        "Retrieving the projects...", session.remote.request("/project")
    )
    latest = session.config.latest_project
    table = make_table("Key", "Name", "Type", "", styles=("blue",))
    for item in projects:
        key = item.get("key", "")
        add_row(table, key, item.get("name", ""), item.get("projectTypeKey", ""), "*" if key == latest else "")
    print_table(table)


@project.command("list")
@click.pass_context
def list_projects(ctx: click.Context) -> None:
    """List the projects visible to the configured user."""
    run_action(ctx, _list)


async def _components(session: Session, key: str) -> None:
    components: list[dict[str, Any]] = await session.remote.spin(
        "Retrieving the components...", session.remote.request(f"/project/{segment(key)}/components")
    )
    if not components:
        click.echo(f"No components in {key}.")
        return
    table = make_table("Name", "Lead", "Description", styles=("blue",))
    for item in components:
        lead = item.get("lead") or {}
        add_row(table, item.get("name", ""), lead.get("displayName", ""), item.get("description", ""))
    print_table(table)


@project.command("components")
@click.argument("key")
@click.pass_context
def components(ctx: click.Context, key: str) -> None:
    """List the components of project KEY."""
    run_action(ctx, _components, key)


async def _use(session: Session, key: str) -> None:
    data: dict[str, Any] = await session.remote.spin(
        "Retrieving the project...", session.remote.request(f"/project/{segment(key)}")
    )
    session.config.latest_project = data.get("key", key)
    session.config.persist()
    click.echo(f"Default project set to {session.config.latest_project}")


@project.command("use")
@click.argument("key")
@click.pass_context
def use(ctx: click.Context, key: str) -> None:
    """Remember project KEY as the default for create and sprint."""
    run_action(ctx, _use, key)


def register(cli: click.Group) -> None:
    """Register project commands with the CLI group."""
    cli.add_command(project)
