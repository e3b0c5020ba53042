"""Structured JSON logging for jiracli.

Each config file gets its own JSONL log, ``.jiracli.log`` in the same
directory, rotated at 5MB with 3 backups. Every record carries the path of
the config file it was written for, and credential values never reach the
file.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOG_FILENAME = ".jiracli.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5MB
_BACKUP_COUNT = 3

# LogRecord attribute -> JSON key, in output order.
_EXTRA_KEYS = (
    ("config", "config"),
    ("command", "command"),
    ("field", "field"),
    ("kind", "kind"),
    ("args_data", "args"),
    ("duration_ms", "duration_ms"),
    ("error", "error"),
)
_SECRET_KEYS = frozenset({"password", "bearer", "token"})


def _redact(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: "***" if k in _SECRET_KEYS else _redact(v) for k, v in value.items()}
    return value


class _JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for attr, key in _EXTRA_KEYS:
            if hasattr(record, attr):
                entry[key] = _redact(getattr(record, attr))
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = str(record.exc_info[1])
        return json.dumps(entry, default=str)


class _ConfigStamp(logging.Filter):
    """Tag records with the config file the current command runs against."""

    def __init__(self, config_path: Path) -> None:
        super().__init__()
        self.config_path = str(config_path)

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "config"):
            record.config = self.config_path
        return True


def log_path_for(config_path: Path) -> Path:
    return config_path.parent / LOG_FILENAME


def setup_logging(config_path: Path) -> logging.Logger:
    """Route the ``jiracli`` logger to the log file beside ``config_path``.

    Calling it again for the same config file is a no-op. A different config
    file replaces the previous handler.
    """
    logger = logging.getLogger("jiracli")
    log_path = log_path_for(config_path)
    target = os.path.abspath(log_path)

    for h in logger.handlers[:]:
        if not isinstance(h, RotatingFileHandler):
            continue
        stamps = [f for f in h.filters if isinstance(f, _ConfigStamp)]
        if h.baseFilename == target and stamps and stamps[0].config_path == str(config_path):
            return logger
        logger.removeHandler(h)
        h.close()

    handler = RotatingFileHandler(str(log_path), maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT)
    handler.setFormatter(_JsonFormatter())
    handler.addFilter(_ConfigStamp(config_path))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger
