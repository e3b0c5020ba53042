"""jiracli: a command-line client for Jira fields, presets and issues."""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jiracli")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

logging.getLogger("jiracli").addHandler(logging.NullHandler())

from jiracli.config import ConfigStore
from jiracli.session import Session

__all__ = ["ConfigStore", "Session", "__version__"]
