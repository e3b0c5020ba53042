"""JQL search and issue-table rendering shared by ``query`` and ``run``."""

from __future__ import annotations

from typing import Any

import click

from jiracli.cli_common import add_row, make_table, print_table
from jiracli.fields import ResolvedField, configured_fields
from jiracli.session import Session
from jiracli.types import IssuePayload, SearchResult

DEFAULT_MAX_RESULTS = 50
BASE_COLUMNS = ("summary", "status", "issuetype")


def format_value(value: Any) -> str:
    """Flatten a Jira field value for a table cell."""
    if value is None:
        return ""
    if isinstance(value, dict):
        for key in ("name", "displayName", "value", "key"):
            if key in value:
                return str(value[key])
        return ""
    if isinstance(value, list):
        return ", ".join(format_value(v) for v in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_issues(issues: list[IssuePayload], custom: list[tuple[str, ResolvedField]]) -> None:
    headers = ["Key", "Type", "Status", "Summary", *(name for name, _ in custom)]
    table = make_table(*headers, styles=("blue", None, "green"))
    for issue in issues:
        fields = issue.get("fields", {})
        add_row(
            table,
            issue.get("key", ""),
            format_value(fields.get("issuetype")),
            format_value(fields.get("status")),
            format_value(fields.get("summary")),
            *(format_value(fields.get(resolved.remote_key)) for _, resolved in custom),
        )
    print_table(table)


async def run_search(session: Session, jql: str, max_results: int = DEFAULT_MAX_RESULTS) -> None:
    """Run ``jql`` and print the matching issues."""
    custom = await configured_fields(session)
    body = {
        "jql": jql,
        "maxResults": max_results,
        "fields": [*BASE_COLUMNS, *(resolved.remote_key for _, resolved in custom)],
    }
    result: SearchResult = await session.remote.spin(
        "Running the query...", session.remote.request("/search", method="POST", body=body)
    )
    issues = result.get("issues", [])
    if not issues:
        click.echo("No issues found.")
        return
    render_issues(issues, custom)
    total = result.get("total", len(issues))
    if total > len(issues):
        click.echo(f"Showing {len(issues)} of {total} issues.")
