"""TypedDicts for the subset of Jira REST responses the CLI reads."""

from __future__ import annotations

from typing import Any, TypedDict


class FieldSchema(TypedDict, total=False):
    type: str
    items: str
    system: str
    custom: str
    customId: int


class FieldDescriptor(TypedDict, total=False):
    """One entry of ``GET /rest/api/2/field``."""

    id: str
    key: str
    name: str
    custom: bool
    schema: FieldSchema


class IssuePayload(TypedDict, total=False):
    id: str
    key: str
    fields: dict[str, Any]


class SearchResult(TypedDict, total=False):
    startAt: int
    maxResults: int
    total: int
    issues: list[IssuePayload]
