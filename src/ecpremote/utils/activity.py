"""User-facing activity log.

An append-only accumulator of timestamped lines, newest first. Transport
and sequencer write every attempt and outcome here; a display layer reads
``lines``. Each entry is mirrored to the module logger at DEBUG.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

LogSink = Callable[[str], None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ActivityLog:
    """Timestamped, newest-first log of remote activity.

    Instances are callable so they can be passed wherever a ``LogSink``
    is expected::

        log = ActivityLog()
        await send_request("192.168.1.20", "/query/apps", "GET", log=log)
        print("\\n".join(log.lines))
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock
        self._entries: list[str] = []

    def append(self, message: str) -> None:
        stamp = self._clock().strftime("%H:%M:%S.%f")[:-3]
        self._entries.append(f"{stamp}  {message}")
        logger.debug("%s", message)

    __call__ = append

    @property
    def lines(self) -> list[str]:
        """All entries, newest first."""
        return list(reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def emit_to(sink: LogSink | None, line: str) -> None:
    """Write ``line`` to ``sink``; a failing sink is logged, never raised."""
    if sink is None:
        return
    try:
        sink(line)
    except Exception:
        logger.exception("Activity log sink failed on: %s", line)
