"""ConfigStore: the JSON configuration file behind every command."""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from jiracli.errors import ConfigMissingError, ConfigParseError, ConfigWriteError
from jiracli.types import ConfigData, JiraCredentials

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".jira.json"


def write_atomic(path: Path, content: str) -> None:
    """Write content to path atomically via temp file + os.replace()."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise


def _validate(path: Path, data: Any) -> ConfigData:
    if not isinstance(data, dict):
        raise ConfigParseError(path, "top-level value must be an object")
    fields = data.get("fields", [])
    if not isinstance(fields, list) or not all(isinstance(f, str) for f in fields):
        raise ConfigParseError(path, "'fields' must be a list of strings")
    presets = data.get("presets", {})
    if not isinstance(presets, dict) or not all(isinstance(v, str) for v in presets.values()):
        raise ConfigParseError(path, "'presets' must map names to query strings")
    jira = data.get("jira", {})
    if not isinstance(jira, dict):
        raise ConfigParseError(path, "'jira' must be an object")
    latest = data.get("latestProject")
    if latest is not None and not isinstance(latest, str):
        raise ConfigParseError(path, "'latestProject' must be a string or null")
    result: ConfigData = data  # type: ignore[assignment]
    return result


class ConfigStore:
    """In-memory view of one configuration file.

    Mutators only touch memory; nothing reaches disk until ``persist()``.
    Members the CLI does not model are kept and written back unchanged.
    """

    def __init__(self, path: Path, data: ConfigData) -> None:
        self.path = path
        self._data = data

    @classmethod
    def load(cls, path: Path | str) -> ConfigStore:
        path = Path(path)
        if not path.exists():
            raise ConfigMissingError(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigParseError(path, str(exc)) from exc
        except OSError as exc:
            raise ConfigParseError(path, str(exc)) from exc
        return cls(path, _validate(path, raw))

    @classmethod
    def create(cls, path: Path | str, credentials: JiraCredentials) -> ConfigStore:
        """A new, unsaved store with no fields, presets or latest project."""
        data = ConfigData(jira=credentials, fields=[], presets={}, latestProject=None)
        return cls(Path(path), data)

    # -- accessors -----------------------------------------------------------

    @property
    def credentials(self) -> JiraCredentials:
        return self._data.get("jira", {})

    @property
    def fields(self) -> list[str]:
        return self._data.setdefault("fields", [])

    @property
    def presets(self) -> dict[str, str]:
        return self._data.setdefault("presets", {})

    @property
    def latest_project(self) -> str | None:
        return self._data.get("latestProject") or None

    @latest_project.setter
    def latest_project(self, project: str | None) -> None:
        self._data["latestProject"] = project

    # -- mutators ------------------------------------------------------------

    def add_field(self, name: str) -> bool:
        """Append ``name`` to the field list. Returns False if already present."""
        if name in self.fields:
            return False
        self.fields.append(name)
        return True

    def remove_field(self, name: str) -> bool:
        """Drop ``name`` from the field list. Returns False if it was absent."""
        if name not in self.fields:
            return False
        self.fields.remove(name)
        return True

    def add_preset(self, name: str, query: str) -> bool:
        if name in self.presets:
            return False
        self.presets[name] = query
        return True

    def remove_preset(self, name: str) -> bool:
        if name not in self.presets:
            return False
        del self.presets[name]
        return True

    def persist(self) -> None:
        """Rewrite the whole file from memory."""
        try:
            write_atomic(self.path, json.dumps(self._data, indent=2) + "\n")
        except OSError as exc:
            raise ConfigWriteError(self.path, exc) from exc
        logger.info("config persisted", extra={"args_data": {"path": str(self.path)}})
