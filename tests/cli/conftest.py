"""Fixtures for CLI interface tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from jiracli.cli import cli

if TYPE_CHECKING:
    from tests.conftest import FakeJira


@pytest.fixture
def invoke(cli_runner: CliRunner, config_file: Path, fake_jira: FakeJira) -> Callable[..., Result]:
    """Run the CLI against config_file and the fake Jira server."""

    def _invoke(*args: str, input: str | None = None) -> Result:
        return cli_runner.invoke(
            cli,
            ["--config", str(config_file), *args],
            obj={"transport": fake_jira.transport},
            input=input,
        )

    return _invoke
