"""Per-invocation pairing of a loaded config and a remote client."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import httpx
from rich.console import Console

from jiracli.config import ConfigStore
from jiracli.remote import JiraRemote


@dataclass
class Session:
    """One ConfigStore plus the JiraRemote built from its credentials.

    Built fresh inside every command action and passed to helpers
    explicitly. Never shared between invocations.
    """

    config: ConfigStore
    remote: JiraRemote

    @classmethod
    def open(
        cls,
        config_path: Path | str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        console: Console | None = None,
    ) -> Session:
        """Load ``config_path`` and bind a remote client to its credentials.

        Raises ConfigMissingError / ConfigParseError from the loader.
        """
        config = ConfigStore.load(config_path)
        remote = JiraRemote(config.credentials, transport=transport, console=console)
        return cls(config=config, remote=remote)

    async def aclose(self) -> None:
        await self.remote.aclose()
