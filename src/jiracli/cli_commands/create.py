"""CLI command for creating issues."""

from __future__ import annotations

from typing import Any

import click

from jiracli.cli_common import run_action
from jiracli.session import Session


async def _create(
    session: Session,
    project: str | None,
    issue_type: str,
    summary: str | None,
    description: str | None,
) -> None:
    if not project:
        project = click.prompt("Project", default=session.config.latest_project)
    if not summary:
        summary = click.prompt("Summary")

    fields: dict[str, Any] = {
        "project": {"key": project},
        "issuetype": {"name": issue_type},
        "summary": summary,
    }
    if description:
        fields["description"] = description

    created: dict[str, Any] = await session.remote.spin(
        "Creating the issue...", session.remote.request("/issue", method="POST", body={"fields": fields})
    )
    click.echo(f"Created {created.get('key', '')}: {summary}")

    if session.config.latest_project != project:
        session.config.latest_project = project
        session.config.persist()


@click.command("create")
@click.option("--project", "-p", default=None, help="Project key (default: the latest project used)")
@click.option("--type", "-t", "issue_type", default="Task", help="Issue type name (default: Task)")
@click.option("--summary", "-s", default=None, help="Summary")
@click.option("--description", "-d", default=None, help="Description")
@click.pass_context
def create(
    ctx: click.Context,
    project: str | None,
    issue_type: str,
    summary: str | None,
    description: str | None,
) -> None:
    """Create an issue, prompting for anything not given."""
    run_action(ctx, _create, project, issue_type, summary, description)


def register(cli: click.Group) -> None:
    """Register the create command with the CLI group."""
    cli.add_command(create)
