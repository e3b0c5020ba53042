"""CLI commands for single issues: show, open, comment."""

from __future__ import annotations

import click

from jiracli.cli_common import add_row, make_table, print_table, run_action
from jiracli.fields import configured_fields
from jiracli.search import format_value
from jiracli.remote import segment
from jiracli.session import Session
from jiracli.types import IssuePayload

_DETAIL_ROWS = (
    ("Type", "issuetype"),
    ("Status", "status"),
    ("Priority", "priority"),
    ("Assignee", "assignee"),
    ("Reporter", "reporter"),
)


@click.group()
def issue() -> None:
    """Show and update single issues."""


async def _show(session: Session, issue_id: str) -> None:
    custom = await configured_fields(session)
    data: IssuePayload = await session.remote.spin(
        f"Retrieving {issue_id}...", session.remote.request(f"/issue/{segment(issue_id)}")
    )
    fields = data.get("fields", {})

    click.echo(f"{data.get('key', issue_id)}: {fields.get('summary', '')}")
    table = make_table("Field", "Value", styles=("bold",), show_header=False)
    for label, key in _DETAIL_ROWS:
        add_row(table, label, format_value(fields.get(key)) or "-")
    for name, resolved in custom:
        add_row(table, name, format_value(fields.get(resolved.remote_key)) or "-")
    print_table(table)

    description = fields.get("description")
    if description:
        click.echo(description)


@issue.command("show")
@click.argument("issue_id")
@click.pass_context
def show(ctx: click.Context, issue_id: str) -> None:
    """Show issue details, including the configured custom fields."""
    run_action(ctx, _show, issue_id)


async def _open(session: Session, issue_id: str) -> None:
    url = session.remote.browse_url(issue_id)
    click.echo(f"Opening {url}")
    click.launch(url)


@issue.command("open")
@click.argument("issue_id")
@click.pass_context
def open_issue(ctx: click.Context, issue_id: str) -> None:
    """Open an issue in the browser."""
    run_action(ctx, _open, issue_id)


async def _comment(session: Session, issue_id: str, text: str) -> None:
    await session.remote.spin(
        "Adding the comment...",
        session.remote.request(f"/issue/{segment(issue_id)}/comment", method="POST", body={"body": text}),
    )
    click.echo(f"Added comment to {issue_id}")


@issue.command("comment")
@click.argument("issue_id")
@click.argument("text")
@click.pass_context
def comment(ctx: click.Context, issue_id: str, text: str) -> None:
    """Add a comment to an issue."""
    run_action(ctx, _comment, issue_id, text)


def register(cli: click.Group) -> None:
    """Register issue commands with the CLI group."""
    cli.add_command(issue)
