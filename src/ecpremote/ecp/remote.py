"""Endpoint helpers for the device's External Control Protocol.

Maps remote-control actions (key presses, literal characters, app
launches, informational queries) onto single transport calls. The
``EcpRemote`` object only remembers call parameters; every method is one
independent request.
"""

from __future__ import annotations

import logging
from urllib.parse import quote, urlencode

import httpx

from ecpremote.config.settings import ECP_PORT
from ecpremote.domain.models import RequestOutcome
from ecpremote.transport.client import DEFAULT_TIMEOUT_MS, send_request
from ecpremote.utils.activity import LogSink

logger = logging.getLogger(__name__)

SELECT_KEY = "Select"
LITERAL_PREFIX = "Lit_"
QUERY_NAMES: tuple[str, ...] = ("device-info", "apps", "active-app")


def keypress_path(key: str) -> str:
    """Path for pressing ``key``, percent-encoded."""
    return f"/keypress/{quote(key, safe='')}"


def launch_path(app_id: str, params: dict[str, str] | None = None) -> str:
    """Path for launching ``app_id`` with optional query parameters."""
    qs = f"?{urlencode(params)}" if params else ""
    return f"/launch/{quote(app_id, safe='')}{qs}"


def query_path(name: str) -> str:
    return f"/query/{name}"


class EcpRemote:
    """Sends remote-control commands to one device.

    Example usage::

        remote = EcpRemote("192.168.1.20", log=ActivityLog())
        await remote.send_key("Home")
        await remote.send_literal("7")
        outcome = await remote.device_info()
    """

    def __init__(
        self,
        host: str,
        port: int = ECP_PORT,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        log: LogSink | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._timeout_ms = timeout_ms
        self._log = log
        self._transport = transport

    @property
    def host(self) -> str:
        return self._host

    async def _call(self, path: str, method: str) -> RequestOutcome:
        return await send_request(
            self._host,
            path,
            method,
            timeout_ms=self._timeout_ms,
            port=self._port,
            log=self._log,
            transport=self._transport,
        )

    async def send_key(self, key: str) -> RequestOutcome:
        """Press a named key (``Home``, ``Select``) or a ``Lit_`` key."""
        if not key:
            raise ValueError("key must not be empty")
        logger.debug("Pressing key: %s", key)
        return await self._call(keypress_path(key), "POST")

    async def send_literal(self, char: str) -> RequestOutcome:
        """Type one literal character."""
        if len(char) != 1:
            raise ValueError(f"expected exactly one character, got {char!r}")
        return await self.send_key(f"{LITERAL_PREFIX}{char}")

    async def launch(self, app_id: str, params: dict[str, str] | None = None) -> RequestOutcome:
        """Launch an application by its identifier."""
        if not app_id or not app_id.strip():
            raise ValueError("app_id is required")
        logger.debug("Launching app %s with %s", app_id, params or {})
        return await self._call(launch_path(app_id.strip(), params), "POST")

    async def query(self, name: str) -> RequestOutcome:
        """Run an informational query; the body is returned as opaque text."""
        if name not in QUERY_NAMES:
            raise ValueError(f"Unknown query {name!r}; expected one of {list(QUERY_NAMES)}")
        return await self._call(query_path(name), "GET")

    async def device_info(self) -> RequestOutcome:
        return await self.query("device-info")

    async def apps(self) -> RequestOutcome:
        return await self.query("apps")

    async def active_app(self) -> RequestOutcome:
        return await self.query("active-app")
