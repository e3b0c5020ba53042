"""Shared pytest fixtures for jiracli tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from jiracli.config import ConfigStore
from jiracli.remote import JiraRemote
from jiracli.session import Session

API = "/rest/api/2"
AGILE = "/rest/agile/1.0"

STORY_POINTS: dict[str, Any] = {
    "id": "customfield_10002",
    "key": "customfield_10002",
    "name": "Story Points",
    "custom": True,
    "schema": {"type": "number", "custom": "com.atlassian.jira.plugin.system.customfieldtypes:float"},
}
TEAM: dict[str, Any] = {
    "id": "customfield_10010",
    "key": "customfield_10010",
    "name": "Team",
    "custom": True,
    "schema": {"type": "string"},
}
EPIC_LINK: dict[str, Any] = {
    "id": "customfield_10014",
    "key": "customfield_10014",
    "name": "Epic Link",
    "custom": True,
    "schema": {"type": "array", "items": "string"},
}
DUE_DATE: dict[str, Any] = {
    "id": "duedate",
    "key": "duedate",
    "name": "Due date",
    "custom": False,
    "schema": {"type": "date", "system": "duedate"},
}
REMOTE_FIELDS = [STORY_POINTS, TEAM, EPIC_LINK, DUE_DATE]


@dataclass
class FakeJira:
    """Route table behind an httpx.MockTransport.

    Unknown routes answer 404 with a Jira-style error body. A ``str`` payload
    is sent as-is with a text/html content type.
    """

    routes: dict[tuple[str, str], tuple[int, Any]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    raise_error: Exception | None = None

    def add(self, method: str, path: str, payload: Any = None, status: int = 200) -> None:
        self.routes[(method, path)] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"errorMessages": [f"No route for {request.url.path}"]})
        status, payload = route
        if payload is None:
            return httpx.Response(status)
        if isinstance(payload, str):
            return httpx.Response(status, text=payload, headers={"content-type": "text/html"})
        return httpx.Response(status, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def bodies(self, method: str, path: str) -> list[Any]:
        return [
            json.loads(r.content) if r.content else None
            for r in self.requests
            if r.method == method and r.url.path == path
        ]


class RecordingStatus:
    def __init__(self, label: str) -> None:
        self.label = label
        self.starts = 0
        self.stops = 0

    def start(self) -> None:
        self.starts += 1

    def stop(self) -> None:
        self.stops += 1


class RecordingConsole:
    """Stands in for rich.Console; records every spinner it hands out."""

    def __init__(self) -> None:
        self.statuses: list[RecordingStatus] = []

    def status(self, label: str) -> RecordingStatus:
        status = RecordingStatus(label)
        self.statuses.append(status)
        return status


def base_config() -> dict[str, Any]:
    return {
        "jira": {"host": "jira.example.com", "username": "alice", "password": "secret"},
        "fields": [],
        "presets": {},
        "latestProject": None,
    }


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_jira() -> FakeJira:
    jira = FakeJira()
    jira.add("GET", f"{API}/field", REMOTE_FIELDS)
    return jira


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A minimal valid config file in tmp_path."""
    path = tmp_path / "jira.json"
    path.write_text(json.dumps(base_config(), indent=2) + "\n")
    return path


@pytest.fixture
def write_config(config_file: Path) -> Callable[..., Path]:
    """Overwrite the config file, merging keyword members into the base config."""

    def _write(**members: Any) -> Path:
        data = base_config()
        data.update(members)
        config_file.write_text(json.dumps(data, indent=2) + "\n")
        return config_file

    return _write


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def session(config_file: Path, fake_jira: FakeJira, console: RecordingConsole) -> Session:
    """A Session wired to the fake Jira server and a recording spinner."""
    config = ConfigStore.load(config_file)
    remote = JiraRemote(config.credentials, transport=fake_jira.transport, console=console)  # type: ignore[arg-type]
    return Session(config=config, remote=remote)
