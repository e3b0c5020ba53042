"""Exception taxonomy and the user-facing error reporter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    import httpx

    from jiracli.session import Session

logger = logging.getLogger(__name__)


class JiraCliError(Exception):
    """Base class for failures the CLI reports instead of crashing on."""


class ConfigMissingError(JiraCliError):
    """Raised when the configuration file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Config file {path} does not exist.")


class ConfigParseError(JiraCliError):
    """Raised when the configuration file is not a valid configuration document."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Config file {path} is malformed: {reason}")


class ConfigWriteError(JiraCliError):
    """Raised when the configuration file cannot be rewritten."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to write config file {path}: {cause}")


class RemoteError(JiraCliError):
    """A transport or HTTP failure reported by the Jira REST API.

    ``status_code`` is None for transport failures (DNS, refused connection,
    TLS, timeout). The underlying httpx exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        method: str = "",
        url: str = "",
        messages: list[str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.method = method
        self.url = url
        self.messages = messages or []
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> RemoteError:
        """Build from a non-2xx response, collecting Jira's error messages."""
        messages: list[str] = []
        try:
            body: Any = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            messages.extend(str(m) for m in body.get("errorMessages") or [])
            errors = body.get("errors") or {}
            if isinstance(errors, dict):
                messages.extend(f"{k}: {v}" for k, v in errors.items())
        detail = "; ".join(messages) or response.reason_phrase or "request failed"
        request = response.request
        return cls(
            detail,
            status_code=response.status_code,
            method=request.method,
            url=str(request.url),
            messages=messages,
        )


def _describe_remote(session: Session | None, failure: RemoteError) -> str:
    credentials = session.config.credentials if session is not None else {}
    host = credentials.get("host", "the Jira server")
    code = failure.status_code
    if code is None:
        return f"Unable to reach {host}: {failure}"
    if code == 401:
        user = credentials.get("username")
        who = f"{user}@{host}" if user else host
        return f"Authentication failed for {who}. Check the credentials in your config file."
    if code == 403:
        return f"Permission denied: {failure}"
    if code == 404:
        return f"Not found: {failure}"
    if code < 300:
        return f"Unexpected response from {host}: {failure}"
    return f"Jira returned HTTP {code}: {failure}"


def show_error(session: Session | None, failure: Exception) -> None:
    """Print a one-line diagnostic for ``failure`` and return.

    Never raises. Callers stop processing the current command afterwards.
    """
    if isinstance(failure, RemoteError):
        message = _describe_remote(session, failure)
    else:
        message = f"Error: {failure}"
    logger.warning(
        "command failed",
        extra={"error": type(failure).__name__, "args_data": {"message": str(failure)}},
    )
    click.echo(message, err=True)
