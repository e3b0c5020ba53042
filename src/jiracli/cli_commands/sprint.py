"""CLI commands for sprints (agile API): list, add, remove."""

from __future__ import annotations

from typing import Any

import click

from jiracli.cli_common import add_row, make_table, print_table, run_action
from jiracli.errors import RemoteError
from jiracli.session import Session


@click.group()
def sprint() -> None:
    """Do things related to sprints."""


async def _list(session: Session, project: str | None) -> None:
    project = project or session.config.latest_project
    if not project:
        click.echo("No project given and no latest project recorded. Use --project.")
        return

    boards: dict[str, Any] = await session.remote.spin(
        "Retrieving the boards...",
        session.remote.agile_request("/board", params={"projectKeyOrId": project}),
    )
    table = make_table("Board", "Id", "Sprint", "State", styles=(None, "blue"))
    rows = 0
    for board in boards.get("values", []):
        try:
            sprints: dict[str, Any] = await session.remote.spin(
                f"Retrieving the sprints of {board.get('name', board['id'])}...",
                session.remote.agile_request(f"/board/{board['id']}/sprint", params={"state": "active,future"}),
            )
        except RemoteError as e:
            # Kanban boards reject the sprint listing with 400.
            if e.status_code == 400:
                continue
            raise
        for item in sprints.get("values", []):
            add_row(table, board.get("name", ""), item.get("id", ""), item.get("name", ""), item.get("state", ""))
            rows += 1
    if not rows:
        click.echo(f"No active or future sprints for {project}.")
        return
    print_table(table)


@sprint.command("list")
@click.option("--project", "-p", default=None, help="Project key (default: the latest project used)")
@click.pass_context
def list_sprints(ctx: click.Context, project: str | None) -> None:
    """List active and future sprints of a project's boards."""
    run_action(ctx, _list, project)


async def _add(session: Session, sprint_id: int, issue_ids: tuple[str, ...]) -> None:
    await session.remote.spin(
        "Moving the issues...",
        session.remote.agile_request(
            f"/sprint/{sprint_id}/issue", method="POST", body={"issues": list(issue_ids)}
        ),
    )
    click.echo(f"Moved {len(issue_ids)} issue(s) to sprint {sprint_id}")


@sprint.command("add")
@click.argument("sprint_id", type=int)
@click.argument("issue_ids", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, sprint_id: int, issue_ids: tuple[str, ...]) -> None:
    """Move issues into a sprint."""
    run_action(ctx, _add, sprint_id, issue_ids)


async def _remove(session: Session, issue_ids: tuple[str, ...]) -> None:
    await session.remote.spin(
        "Moving the issues...",
        session.remote.agile_request("/backlog/issue", method="POST", body={"issues": list(issue_ids)}),
    )
    click.echo(f"Moved {len(issue_ids)} issue(s) to the backlog")


@sprint.command("remove")
@click.argument("issue_ids", nargs=-1, required=True)
@click.pass_context
def remove(ctx: click.Context, issue_ids: tuple[str, ...]) -> None:
    """Move issues out of their sprint, back to the backlog."""
    run_action(ctx, _remove, issue_ids)


def register(cli: click.Group) -> None:
    """Register sprint commands with the CLI group."""
    cli.add_command(sprint)
