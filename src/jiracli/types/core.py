"""TypedDicts for the on-disk configuration file."""

from __future__ import annotations

from typing import Literal, TypedDict

LocalKind = Literal["numeric", "textual"]


class JiraCredentials(TypedDict, total=False):
    """Shape of the ``jira`` block. Passed to the remote client as-is."""

    protocol: str
    host: str
    port: int
    base: str
    username: str
    password: str
    bearer: str
    apiVersion: str
    agileVersion: str
    strictSSL: bool
    timeout: float


class ConfigData(TypedDict, total=False):
    """Shape of ~/.jira.json."""

    jira: JiraCredentials
    fields: list[str]
    presets: dict[str, str]
    latestProject: str | None
