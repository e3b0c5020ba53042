"""CLI command that executes a saved preset."""

from __future__ import annotations

import click

from jiracli.cli_common import run_action
from jiracli.search import DEFAULT_MAX_RESULTS, run_search
from jiracli.session import Session


async def _run_preset(session: Session, name: str, max_results: int) -> None:
    jql = session.config.presets.get(name)
    if jql is None:
        click.echo("Unknown preset.")
        return
    await run_search(session, jql, max_results)


@click.command("run")
@click.argument("name")
@click.option("--max", "max_results", default=DEFAULT_MAX_RESULTS, type=int, help="Max results (default 50)")
@click.pass_context
def run(ctx: click.Context, name: str, max_results: int) -> None:
    """Run the query saved under preset NAME."""
    run_action(ctx, _run_preset, name, max_results)


def register(cli: click.Group) -> None:
    """Register the run command with the CLI group."""
    cli.add_command(run)
