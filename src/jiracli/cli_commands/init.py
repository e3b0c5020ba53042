"""CLI command that writes a new configuration file."""

from __future__ import annotations

from pathlib import Path

import click

from jiracli.config import ConfigStore
from jiracli.errors import ConfigWriteError, show_error
from jiracli.types import JiraCredentials


@click.command("init")
@click.option("--host", default=None, help="Jira host name, e.g. jira.example.com")
@click.option("--protocol", type=click.Choice(["https", "http"]), default="https", help="Protocol (default: https)")
@click.option("--username", default=None, help="User name or e-mail")
@click.option("--password", default=None, help="Password or API token")
@click.option("--api-version", default="2", help="REST API version (default: 2)")
@click.option("--insecure", is_flag=True, help="Skip TLS certificate verification")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def init(
    ctx: click.Context,
    host: str | None,
    protocol: str,
    username: str | None,
    password: str | None,
    api_version: str,
    insecure: bool,
    force: bool,
) -> None:
    """Create the config file, prompting for the connection details."""
    config_path = Path(ctx.find_root().obj["config"])
    if config_path.exists() and not force:
        click.echo(f"Config file {config_path} already exists. Use --force to overwrite.")
        return

    credentials = JiraCredentials(
        protocol=protocol,
        host=host or click.prompt("Jira host"),
        username=username or click.prompt("Username"),
        password=password or click.prompt("Password or API token", hide_input=True),
        apiVersion=api_version,
        strictSSL=not insecure,
    )
    store = ConfigStore.create(config_path, credentials)
    try:
        store.persist()
    except ConfigWriteError as e:
        show_error(None, e)
        return
    click.echo(f"Config file {config_path} created")


def register(cli: click.Group) -> None:
    """Register the init command with the CLI group."""
    cli.add_command(init)
