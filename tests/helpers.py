"""Test helpers shared by fixtures and test modules."""

from __future__ import annotations

import httpx

DEVICE_HOST = "192.168.1.20"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served.

    The handler may be a plain function or a coroutine function.
    """

    def __init__(self, handler) -> None:
        self.requests: list[httpx.Request] = []

        async def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            result = handler(request)
            if not isinstance(result, httpx.Response):
                result = await result
            return result

        super().__init__(record)
