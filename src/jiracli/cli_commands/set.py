"""CLI commands that change issue attributes: status, assignee, custom."""

from __future__ import annotations

import math
from typing import Any

import click

from jiracli.cli_common import run_action
from jiracli.fields import ResolvedField, resolve
from jiracli.remote import segment
from jiracli.session import Session


@click.group("set")
def set_group() -> None:
    """Set issue status, assignee or custom fields."""


async def _status(session: Session, issue_id: str, transition: str | None) -> None:
    result: dict[str, Any] = await session.remote.spin(
        "Retrieving the transitions...", session.remote.request(f"/issue/{segment(issue_id)}/transitions")
    )
    transitions: list[dict[str, Any]] = result.get("transitions", [])
    if not transitions:
        click.echo(f"No transitions available for {issue_id}.")
        return

    names = [t.get("name", "") for t in transitions]
    if transition is None:
        transition = click.prompt("Transition", type=click.Choice(names))
    chosen = next((t for t in transitions if t.get("name") == transition), None)
    if chosen is None:
        click.echo(f"Unknown transition '{transition}'. Available: {', '.join(names)}")
        return

    await session.remote.spin(
        "Updating the status...",
        session.remote.request(
            f"/issue/{segment(issue_id)}/transitions", method="POST", body={"transition": {"id": chosen["id"]}}
        ),
    )
    target = (chosen.get("to") or {}).get("name", transition)
    click.echo(f"{issue_id} moved to {target}")


@set_group.command("status")
@click.argument("issue_id")
@click.argument("transition", required=False)
@click.pass_context
def status(ctx: click.Context, issue_id: str, transition: str | None) -> None:
    """Move an issue through a workflow transition."""
    run_action(ctx, _status, issue_id, transition)


async def _assignee(session: Session, issue_id: str, user: str, account_id: bool) -> None:
    body = {"accountId": user} if account_id else {"name": user}
    await session.remote.spin(
        "Updating the assignee...",
        session.remote.request(f"/issue/{segment(issue_id)}/assignee", method="PUT", body=body),
    )
    click.echo(f"{issue_id} assigned to {user}")


@set_group.command("assignee")
@click.argument("issue_id")
@click.argument("user")
@click.option("--account-id", is_flag=True, help="USER is an account ID (Jira Cloud)")
@click.pass_context
def assignee(ctx: click.Context, issue_id: str, user: str, account_id: bool) -> None:
    """Assign an issue to USER."""
    run_action(ctx, _assignee, issue_id, user, account_id)


def parse_number(raw: str) -> int | float | None:
    """Parse ``raw`` as a JSON-safe number, or None if it is not one.

    Integers keep full precision; nan and infinities are rejected.
    """
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        number = float(raw)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


class NumberType(click.ParamType):
    name = "number"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int | float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        number = parse_number(str(value))
        if number is None:
            self.fail(f"'{value}' is not a number.", param, ctx)
        return number


def _coerce(resolved: ResolvedField, raw: str | None) -> str | int | float | None:
    """Turn user input into the JSON value for the field's local kind."""
    if resolved.local_kind == "numeric":
        if raw is None:
            prompted: int | float = click.prompt("Value", type=NumberType())
            return prompted
        number = parse_number(raw)
        if number is None:
            click.echo(f"'{raw}' is not a number.")
        return number
    if raw is None:
        text: str = click.prompt("Value")
        return text
    return raw


async def _custom(session: Session, field_name: str, issue_id: str, raw: str | None) -> None:
    resolved = await resolve(session, field_name)
    if resolved is None:
        return
    value = _coerce(resolved, raw)
    if value is None:
        return

    await session.remote.spin(
        "Updating the issue...",
        session.remote.request(
            f"/issue/{segment(issue_id)}", method="PUT", body={"fields": {resolved.remote_key: value}}
        ),
    )
    click.echo(f"{field_name} of {issue_id} set to {value}")


@set_group.command("custom")
@click.argument("field_name", metavar="FIELD")
@click.argument("issue_id")
@click.argument("value", required=False)
@click.pass_context
def custom(ctx: click.Context, field_name: str, issue_id: str, value: str | None) -> None:
    """Set custom FIELD of an issue, prompting for the value if omitted."""
    run_action(ctx, _custom, field_name, issue_id, value)


def register(cli: click.Group) -> None:
    """Register set commands with the CLI group."""
    cli.add_command(set_group)
