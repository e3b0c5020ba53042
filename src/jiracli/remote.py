"""RemoteFacade: the Jira REST client owned by one Session.

Two API bases are exposed: the standard REST API (``/rest/api/<version>``)
and the agile API (``/rest/agile/<version>``) used for boards and sprints.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from rich.console import Console

from jiracli.errors import RemoteError
from jiracli.types import JiraCredentials

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_API_VERSION = "2"
DEFAULT_AGILE_VERSION = "1.0"


def segment(value: str) -> str:
    """Percent-encode one path segment, slashes included."""
    return quote(value, safe="")


def _join(prefix: str, path: str) -> str:
    if not path.startswith("/"):
        path = "/" + path
    return prefix + path


class JiraRemote:
    """Builds URIs against the configured server and issues requests.

    Construction performs no network I/O; the ``httpx.AsyncClient`` is
    created on the first request so it binds to the running event loop.
    """

    def __init__(
        self,
        credentials: JiraCredentials,
        *,
        console: Console | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._credentials = credentials
        self._console = console if console is not None else Console(stderr=True)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -- URIs ----------------------------------------------------------------

    @property
    def root_url(self) -> str:
        c = self._credentials
        protocol = c.get("protocol", "https")
        host = c.get("host", "")
        port = c.get("port")
        netloc = f"{host}:{port}" if port else host
        base = c.get("base", "").rstrip("/")
        if base and not base.startswith("/"):
            base = "/" + base
        return f"{protocol}://{netloc}{base}"

    def make_uri(self, path: str) -> str:
        version = self._credentials.get("apiVersion", DEFAULT_API_VERSION)
        return _join(f"{self.root_url}/rest/api/{version}", path)

    def make_agile_uri(self, path: str) -> str:
        version = self._credentials.get("agileVersion", DEFAULT_AGILE_VERSION)
        return _join(f"{self.root_url}/rest/agile/{version}", path)

    def browse_url(self, issue_key: str) -> str:
        return f"{self.root_url}/browse/{issue_key}"

    # -- transport -----------------------------------------------------------

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            c = self._credentials
            headers = {"Accept": "application/json"}
            auth: tuple[str, str] | None = None
            if c.get("bearer"):
                headers["Authorization"] = f"Bearer {c['bearer']}"
            elif c.get("username"):
                auth = (c["username"], c.get("password", ""))
            kwargs: dict[str, Any] = {}
            if "timeout" in c:
                kwargs["timeout"] = c["timeout"]
            self._client = httpx.AsyncClient(
                auth=auth,
                headers=headers,
                verify=c.get("strictSSL", True),
                transport=self._transport,
                **kwargs,
            )
        return self._client

    async def _send(
        self,
        url: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        client = self._get_client()
        started = time.monotonic()
        try:
            response = await client.request(method, url, params=params, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            error = RemoteError.from_response(exc.response)
            logger.warning(
                "remote request failed",
                extra={
                    "args_data": {"method": method, "url": url, "status": exc.response.status_code},
                    "duration_ms": round((time.monotonic() - started) * 1000, 1),
                    "error": str(error),
                },
            )
            raise error from exc
        except httpx.RequestError as exc:
            error = RemoteError(str(exc) or type(exc).__name__, method=method, url=url)
            logger.warning(
                "remote request failed",
                extra={"args_data": {"method": method, "url": url}, "error": str(error)},
            )
            raise error from exc
        logger.info(
            "remote request",
            extra={
                "args_data": {"method": method, "url": url, "status": response.status_code},
                "duration_ms": round((time.monotonic() - started) * 1000, 1),
            },
        )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            content_type = response.headers.get("content-type", "unknown content type")
            error = RemoteError(
                f"response is not JSON ({content_type})",
                status_code=response.status_code,
                method=method,
                url=url,
            )
            logger.warning(
                "remote response undecodable",
                extra={
                    "args_data": {"method": method, "url": url, "status": response.status_code},
                    "error": str(error),
                },
            )
            raise error from exc

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Call the standard REST API and return the decoded JSON body."""
        return await self._send(self.make_uri(path), method=method, params=params, body=body)

    async def agile_request(
        self,
        path: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Call the agile REST API and return the decoded JSON body."""
        return await self._send(self.make_agile_uri(path), method=method, params=params, body=body)

    async def spin(self, label: str, operation: Awaitable[T]) -> T:
        """Await ``operation`` behind a spinner labelled ``label``.

        The spinner is stopped exactly once on every exit path. Failures are
        re-raised as the same exception object.
        """
        status = self._console.status(label)
        status.start()
        try:
            return await operation
        finally:
            status.stop()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
