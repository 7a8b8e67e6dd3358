"""Single-request HTTP transport for the device control protocol.

Public API:
    send_request -- One request with a deadline, classified outcome
    build_url -- Destination URL for a host, path, and port
    BlankHostError -- Raised when no device host is configured
"""

from ecpremote.transport.client import (
    ALLOWED_METHODS,
    DEFAULT_TIMEOUT_MS,
    BlankHostError,
    EcpRemoteError,
    build_url,
    send_request,
)

__all__ = [
    "ALLOWED_METHODS",
    "DEFAULT_TIMEOUT_MS",
    "BlankHostError",
    "EcpRemoteError",
    "build_url",
    "send_request",
]
