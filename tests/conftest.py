"""Shared test fixtures for the ecpremote test suite.

Provides common fixtures used across unit tests: activity logs with a
fixed clock, recording httpx mock transports, and mock remotes.
"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import httpx
import pytest

from ecpremote.domain.models import Success
from ecpremote.ecp.remote import EcpRemote
from ecpremote.utils.activity import ActivityLog
from tests.helpers import DEVICE_HOST, RecordingTransport


# ---------------------------------------------------------------------------
# Activity Log Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def activity_log() -> ActivityLog:
    """An ActivityLog whose clock always reads 12:00:00.123 UTC."""
    return ActivityLog(clock=lambda: datetime(2025, 1, 1, 12, 0, 0, 123000, tzinfo=timezone.utc))


# ---------------------------------------------------------------------------
# Transport Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ok_transport() -> RecordingTransport:
    """Answers every request with 200 and a small XML body."""
    return RecordingTransport(
        lambda request: httpx.Response(
            200,
            text="<device-info><model>test</model></device-info>",
            headers={"content-type": "text/xml; charset=utf-8"},
        )
    )


@pytest.fixture
def remote(ok_transport: RecordingTransport, activity_log: ActivityLog) -> EcpRemote:
    """An EcpRemote wired to the recording OK transport."""
    return EcpRemote(DEVICE_HOST, log=activity_log, transport=ok_transport)


# ---------------------------------------------------------------------------
# Mock Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_remote() -> AsyncMock:
    """A mock EcpRemote whose key presses all succeed."""
    mock = AsyncMock(spec=EcpRemote)
    mock.host = DEVICE_HOST
    mock.send_literal.return_value = Success(status_code=200, status_text="OK")
    mock.send_key.return_value = Success(status_code=200, status_text="OK")
    return mock
