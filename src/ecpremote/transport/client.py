"""Single-shot HTTP transport for the device control protocol.

Each call opens its own client, issues exactly one request under a
deadline, and returns a ``Success`` or ``Failure`` instead of raising for
expected failure modes. Nothing is retained between calls.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from ecpremote.config.settings import ECP_PORT
from ecpremote.domain.models import Failure, FailureKind, RequestOutcome, Success
from ecpremote.utils.activity import LogSink, emit_to

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS: int = 5000
ALLOWED_METHODS: frozenset[str] = frozenset({"GET", "POST"})


class EcpRemoteError(Exception):
    """Base class for caller-usage errors raised by ecpremote."""

    def __init__(self, message: str, host: str = "") -> None:
        super().__init__(message)
        self.host = host


class BlankHostError(EcpRemoteError):
    """Raised before any network activity when no device host was given."""


def build_url(host: str, path: str, port: int = ECP_PORT) -> str:
    """Return ``http://{host}:{port}{path}``."""
    if not path.startswith("/"):
        path = "/" + path
    return f"http://{host.strip()}:{port}{path}"


async def send_request(
    host: str,
    path: str,
    method: str = "POST",
    body: bytes | str | None = None,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    *,
    headers: dict[str, str] | None = None,
    port: int = ECP_PORT,
    log: LogSink | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RequestOutcome:
    """Send one request to the device and classify the outcome.

    The exchange up to the response head is bounded by ``timeout_ms``;
    when the deadline passes the in-flight call is cancelled and a
    TIMEOUT failure is returned. Reading the body is best-effort: if it
    fails, the result is still a Success whose ``body_text`` is a
    placeholder and whose ``body_error`` holds the reason.

    Args:
        host: Device address (IP or hostname). Must not be blank.
        path: Request path, e.g. ``/keypress/Home``.
        method: ``"GET"`` or ``"POST"``.
        body: Optional request body.
        timeout_ms: Deadline in milliseconds. Must be positive.
        headers: Optional extra request headers.
        port: Device port; the protocol's well-known port by default.
        log: Sink receiving one line per attempt and one per outcome.
        transport: Optional httpx transport, used instead of the network.

    Returns:
        Success for any HTTP response (including non-2xx), otherwise a
        Failure of kind TIMEOUT or NETWORK.

    Raises:
        BlankHostError: If ``host`` is empty or whitespace.
        ValueError: If ``method`` or ``timeout_ms`` is invalid.
    """
    if not host or not host.strip():
        raise BlankHostError("Device host is required", host=host or "")
    if method not in ALLOWED_METHODS:
        raise ValueError(f"Unsupported method {method!r}; expected one of {sorted(ALLOWED_METHODS)}")
    if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int) or timeout_ms <= 0:
        raise ValueError(f"timeout_ms must be a positive integer, got {timeout_ms!r}")

    def emit(line: str) -> None:
        emit_to(log, line)

    url = build_url(host, path, port)
    timeout_s = timeout_ms / 1000

    emit(f"REQUEST {method} {url}{' (body)' if body else ''}")
    logger.info("%s %s", method, url)

    async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
        try:
            request = client.build_request(method, url, content=body, headers=headers)
            response = await asyncio.wait_for(client.send(request, stream=True), timeout_s)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            emit(f"ERROR: request timed out ({timeout_ms}ms)")
            logger.warning("%s %s timed out after %dms", method, url, timeout_ms)
            return Failure(kind=FailureKind.TIMEOUT, message="Request timed out")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = str(e) or type(e).__name__
            emit(f"ERROR: {message}")
            logger.warning("%s %s failed: %s", method, url, message)
            return Failure(kind=FailureKind.NETWORK, message=message)

        try:
            body_text, body_error = await _read_body(response)
        finally:
            await response.aclose()

    content_type = response.headers.get("content-type", "")
    emit(f"RESPONSE {response.status_code} {response.reason_phrase} - {content_type}")
    logger.info("%s %s -> %d", method, url, response.status_code)

    return Success(
        status_code=response.status_code,
        status_text=response.reason_phrase,
        body_text=body_text,
        headers=dict(response.headers),
        body_error=body_error,
    )


async def _read_body(response: httpx.Response) -> tuple[str, str | None]:
    """Read the response body as text, degrading to a placeholder on failure."""
    try:
        await response.aread()
        return response.text, None
    except (httpx.HTTPError, httpx.StreamError) as e:
        message = str(e) or type(e).__name__
        logger.debug("Body read failed: %s", message)
        return f"<unable to read body: {message}>", message
