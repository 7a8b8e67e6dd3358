"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from ecpremote.cli import main, parse_args
from ecpremote.domain.models import Failure, FailureKind, Success


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ROKU_IP", raising=False)
    monkeypatch.delenv("ECPREMOTE_DEVICE__HOST", raising=False)


@pytest.fixture
def fake_send(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    """Replace the transport call used by EcpRemote."""
    mock = AsyncMock(return_value=Success(status_code=200, status_text="OK", body_text="<apps/>"))
    monkeypatch.setattr("ecpremote.ecp.remote.send_request", mock)
    return mock


class TestParseArgs:
    def test_launch_params(self) -> None:
        args = parse_args(["launch", "12", "--param", "contentId=abc", "--param", "mediaType=movie"])
        assert args.app_id == "12"
        assert args.param == [("contentId", "abc"), ("mediaType", "movie")]

    def test_bad_param(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["launch", "12", "--param", "novalue"])

    def test_query_choices(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["query", "everything"])


class TestParseCommand:
    def test_prints_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["parse", "12, -7; 9999999999 abc 4"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Read 3 integer(s): 12, -7, 4"
        assert "  9999999999: out of 32-bit integer range" in out
        assert "  abc: not an integer token" in out

    def test_truncation_note(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["parse", "1 2 3 4 5"])
        out = capsys.readouterr().out
        assert "No warnings." in out
        assert "Note: Parsed the first 3 valid integers and ignored the rest." in out

    def test_invalid_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["parse", "1", "--limit", "0"]) == 2


class TestRemoteCommands:
    def test_blank_host(self, capsys: pytest.CaptureFixture[str], fake_send: AsyncMock) -> None:
        assert main(["key", "Home"]) == 1
        assert "Device host is required" in capsys.readouterr().err

    def test_key(self, capsys: pytest.CaptureFixture[str], fake_send: AsyncMock) -> None:
        assert main(["--host", "192.168.1.20", "key", "Home"]) == 0
        args = fake_send.await_args
        assert args.args[:3] == ("192.168.1.20", "/keypress/Home", "POST")
        assert "Key Home => status 200" in capsys.readouterr().out

    def test_query(self, capsys: pytest.CaptureFixture[str], fake_send: AsyncMock) -> None:
        assert main(["--host", "192.168.1.20", "query", "apps"]) == 0
        assert fake_send.await_args.args[1:3] == ("/query/apps", "GET")
        assert "<apps/>" in capsys.readouterr().out

    def test_failure_exit_status(self, capsys: pytest.CaptureFixture[str], fake_send: AsyncMock) -> None:
        fake_send.return_value = Failure(kind=FailureKind.TIMEOUT, message="Request timed out")
        assert main(["--host", "192.168.1.20", "launch", "12"]) == 1
        assert "Launch 12 failed: Request timed out" in capsys.readouterr().out

    def test_lit_requires_single_char(self, capsys: pytest.CaptureFixture[str], fake_send: AsyncMock) -> None:
        assert main(["--host", "192.168.1.20", "lit", "ab"]) == 2
        fake_send.assert_not_called()


class TestSendCommand:
    def test_sends_digits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], fake_send: AsyncMock
    ) -> None:
        config = tmp_path / "ecpremote.yaml"
        config.write_text("sequencer:\n  pacing_ms: 0\n")
        assert main(["-c", str(config), "--host", "192.168.1.20", "send", "4, x, -2", "--select"]) == 0
        paths = [c.args[1] for c in fake_send.await_args_list]
        assert paths == [
            "/keypress/Lit_4",
            "/keypress/Select",
            "/keypress/Lit_-",
            "/keypress/Lit_2",
            "/keypress/Select",
        ]
        assert "Finished sending parsed integers." in capsys.readouterr().out
