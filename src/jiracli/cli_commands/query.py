"""CLI command for ad-hoc JQL queries."""

from __future__ import annotations

import click

from jiracli.cli_common import run_action
from jiracli.search import DEFAULT_MAX_RESULTS, run_search


@click.command("query")
@click.argument("jql")
@click.option("--max", "max_results", default=DEFAULT_MAX_RESULTS, type=int, help="Max results (default 50)")
@click.pass_context
def query(ctx: click.Context, jql: str, max_results: int) -> None:
    """Run a JQL query and list the matching issues."""
    run_action(ctx, run_search, jql, max_results)


def register(cli: click.Group) -> None:
    """Register the query command with the CLI group."""
    cli.add_command(query)
