"""CLI for the jiracli Jira client.

Usage:
    jira init                                  # Write ~/.jira.json
    jira field listall                         # Every field known to Jira
    jira field add "Story Points"              # Show a custom field
    jira field remove "Story Points"           # Stop showing it
    jira field list                            # Configured custom fields
    jira preset create mine "assignee = currentUser()"
    jira preset list                           # Saved queries
    jira run mine                              # Run a saved query
    jira query "project = ABC"                 # Ad-hoc JQL
    jira issue show ABC-1                      # Issue details
    jira set status ABC-1                      # Workflow transition
    jira sprint list -p ABC                    # Active/future sprints
    jira create -p ABC -s "Fix the bug"        # New issue
"""

from __future__ import annotations

from pathlib import Path

import click

from jiracli import __version__
from jiracli.cli_commands import create, field, init, issue, preset, project, query, run, sprint
from jiracli.cli_commands import set as set_commands
from jiracli.config import DEFAULT_CONFIG_FILE

COMMAND_MODULES = (
    create,
    field,
    init,
    issue,
    preset,
    project,
    query,
    run,
    set_commands,
    sprint,
)


@click.group()
@click.version_option(version=__version__, prog_name="jiracli")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILE,
    envvar="JIRACLI_CONFIG",
    show_default=True,
    help="Config file",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Path) -> None:
    """A command-line client for Jira."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = config_file


for _module in COMMAND_MODULES:
    _module.register(cli)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
