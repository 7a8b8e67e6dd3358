"""Types parsed integers on the device, one keypress per character.

Calls are strictly sequential with a fixed pacing delay between them.
The first transport failure halts the sequence; keypresses already sent
are not undone.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from ecpremote.domain.models import Failure, FailureKind, SequenceReport
from ecpremote.ecp.remote import SELECT_KEY, EcpRemote
from ecpremote.transport.client import BlankHostError
from ecpremote.utils.activity import LogSink, emit_to

logger = logging.getLogger(__name__)

DEFAULT_PACING_MS: int = 120

NETWORK_HINT = (
    "Network error: the device may be unreachable from this machine. "
    "Check the address and that both are on the same network."
)


async def send_values_as_keys(
    remote: EcpRemote,
    values: Sequence[int],
    press_select_after_each: bool = False,
    pacing_ms: int = DEFAULT_PACING_MS,
    log: LogSink | None = None,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> SequenceReport:
    """Send each value's decimal digits as literal keypresses.

    Args:
        remote: Target device.
        values: Integers to type, in order.
        press_select_after_each: Press Select after each value's digits.
        pacing_ms: Delay inserted before every call except the first.
        log: Sink for progress lines.
        sleep: Awaitable delay, replaceable in tests.

    Returns:
        SequenceReport counting completed presses and carrying the
        halting failure, if any.

    Raises:
        BlankHostError: If the remote has no host configured.
    """

    def emit(line: str) -> None:
        emit_to(log, line)

    if not remote.host or not remote.host.strip():
        raise BlankHostError("Device host is required", host=remote.host or "")

    if not values:
        emit("No parsed integers to send.")
        return SequenceReport()

    emit(f"Will send {len(values)} integer(s) to the device as literal characters.")

    presses = 0
    selects = 0
    issued = 0

    async def paced(call: Callable[[], Awaitable]) -> object:
        nonlocal issued
        if issued:
            await sleep(pacing_ms / 1000)
        issued += 1
        return await call()

    def halt(failure: Failure) -> SequenceReport:
        emit(f"Send failed: {failure.message}")
        if failure.kind is FailureKind.NETWORK:
            emit(NETWORK_HINT)
        logger.warning(
            "Sequence halted after %d keypress(es): %s", presses, failure.message
        )
        return SequenceReport(
            presses_completed=presses, selects_completed=selects, failure=failure
        )

    for value in values:
        for ch in str(value):
            outcome = await paced(lambda: remote.send_literal(ch))
            if isinstance(outcome, Failure):
                return halt(outcome)
            presses += 1
        if press_select_after_each:
            outcome = await paced(lambda: remote.send_key(SELECT_KEY))
            if isinstance(outcome, Failure):
                return halt(outcome)
            selects += 1

    emit("Finished sending parsed integers.")
    logger.info("Sent %d keypress(es) and %d select(s)", presses, selects)
    return SequenceReport(presses_completed=presses, selects_completed=selects)
