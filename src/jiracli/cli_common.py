"""Shared CLI helpers for ``cli.py`` and the ``cli_commands/*.py`` modules.

Provides ``get_session()``, ``run_action()`` and the table helpers so command
modules never import each other.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

import click
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from jiracli.errors import ConfigMissingError, JiraCliError, show_error
from jiracli.logging import setup_logging
from jiracli.session import Session

logger = logging.getLogger(__name__)

Action = Callable[..., Coroutine[Any, Any, None]]


def get_session(ctx: click.Context) -> Session:
    """Load the ``--config`` file and return a fresh Session.

    A missing config file ends the process here. Parse errors propagate.
    """
    obj = ctx.find_root().obj or {}
    config_path = Path(obj["config"])
    try:
        session = Session.open(config_path, transport=obj.get("transport"))
    except ConfigMissingError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    try:
        setup_logging(config_path)
    except OSError as e:
        # Read-only config directory: run without a log file.
        logger.debug("log file unavailable: %s", e)
    return session


async def _run(session: Session, action: Action, *args: Any) -> None:
    try:
        await action(session, *args)
    except JiraCliError as e:
        show_error(session, e)
    finally:
        await session.aclose()


def run_action(ctx: click.Context, action: Action, *args: Any) -> None:
    """Build a Session for this invocation and run ``action(session, *args)``.

    Every JiraCliError raised by the action is reported through show_error;
    the command then ends normally.
    """
    try:
        session = get_session(ctx)
    except JiraCliError as e:
        show_error(None, e)
        return
    logger.info("command", extra={"command": ctx.command_path})
    asyncio.run(_run(session, action, *args))


def make_table(*headers: str, styles: tuple[str | None, ...] = (), show_header: bool = True) -> Table:
    """A borderless table in the house style."""
    table = Table(box=box.SIMPLE, show_header=show_header)
    for i, header in enumerate(headers):
        style = styles[i] if i < len(styles) else None
        table.add_column(header, style=style, overflow="fold")
    return table


def add_row(table: Table, *values: object) -> None:
    """Append a row, rendering every value as literal text (no markup)."""
    table.add_row(*(Text("" if v is None else str(v)) for v in values))


def print_table(table: Table) -> None:
    Console(soft_wrap=True, highlight=False).print(table)
