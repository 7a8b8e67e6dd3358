"""Command-line interface for ecpremote.

Provides the main entry point for parsing integer input, sending key
presses and app launches, running device queries, and typing parsed
integers on the device.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from ecpremote.domain.models import Failure, Success

logger = logging.getLogger(__name__)

_HOST_REQUIRED = "Device host is required: pass --host or set device.host / ROKU_IP."


def _key_value(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    return key, value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="ecpremote",
        description="Remote-control client for devices speaking the External Control Protocol",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/ecpremote.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Device address (overrides device.host from the config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse integers from text and show the result")
    parse_parser.add_argument("text", type=str, help="Free-form input text")
    parse_parser.add_argument("--limit", type=int, default=None, help="Maximum integers to accept")

    key_parser = subparsers.add_parser("key", help="Press a named key (e.g. Home, Select)")
    key_parser.add_argument("key", type=str)

    lit_parser = subparsers.add_parser("lit", help="Type one literal character")
    lit_parser.add_argument("char", type=str)

    launch_parser = subparsers.add_parser("launch", help="Launch an app by id")
    launch_parser.add_argument("app_id", type=str)
    launch_parser.add_argument(
        "--param", type=_key_value, action="append", default=[],
        help="Launch parameter as key=value (repeatable)",
    )

    query_parser = subparsers.add_parser("query", help="Run an informational query")
    query_parser.add_argument("name", choices=["device-info", "apps", "active-app"])

    send_parser = subparsers.add_parser("send", help="Parse integers and type them on the device")
    send_parser.add_argument("text", type=str, help="Free-form input text")
    send_parser.add_argument("--select", action="store_true", help="Press Select after each integer")
    send_parser.add_argument("--limit", type=int, default=None, help="Maximum integers to accept")

    return parser.parse_args(argv)


def _print_parse(text: str, limit: int) -> None:
    from ecpremote.parsing.summary import summarize_parse

    summary = summarize_parse(text, limit)
    print(summary.headline)
    if summary.warnings:
        print("Warnings:")
        for line in summary.warnings:
            print(f"  {line}")
    else:
        print("No warnings.")
    for note in summary.notes:
        print(f"Note: {note}")


def _print_log(log) -> None:
    for line in log.lines:
        print(line)


async def _run_remote(settings, args, log) -> int:
    """Run a single remote command and report its outcome."""
    from ecpremote.ecp.remote import EcpRemote

    remote = EcpRemote(
        host=settings.device.host,
        port=settings.device.port,
        timeout_ms=settings.device.timeout_ms,
        log=log,
    )

    if args.command == "key":
        label = f"Key {args.key}"
        outcome = await remote.send_key(args.key)
    elif args.command == "lit":
        label = f"Lit_{args.char}"
        outcome = await remote.send_literal(args.char)
    elif args.command == "launch":
        label = f"Launch {args.app_id}"
        outcome = await remote.launch(args.app_id, dict(args.param) or None)
    else:
        label = f"/query/{args.name}"
        outcome = await remote.query(args.name)

    return _report_outcome(label, outcome, log)


def _report_outcome(label: str, outcome: Success | Failure, log) -> int:
    if isinstance(outcome, Failure):
        log(f"{label} failed: {outcome.message}")
        return 1
    log(f"{label} => status {outcome.status_code}")
    log(outcome.body_text or "<no body>")
    return 0


async def _run_send(settings, args, log) -> int:
    """Parse the input and type the accepted integers on the device."""
    from ecpremote.ecp.remote import EcpRemote
    from ecpremote.parsing.tokenizer import parse_tokens
    from ecpremote.sequencer import send_values_as_keys

    result = parse_tokens(args.text, args.limit or settings.parsing.limit)
    remote = EcpRemote(
        host=settings.device.host,
        port=settings.device.port,
        timeout_ms=settings.device.timeout_ms,
        log=log,
    )
    report = await send_values_as_keys(
        remote,
        result.values,
        press_select_after_each=args.select or settings.sequencer.press_select_after_each,
        pacing_ms=settings.sequencer.pacing_ms,
        log=log,
    )
    return 0 if report.completed else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ecpremote CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return 0

    from ecpremote.config.settings import load_settings
    from ecpremote.transport.client import BlankHostError
    from ecpremote.utils.activity import ActivityLog
    from ecpremote.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"
    if args.host is not None:
        settings.device.host = args.host

    setup_logging(settings.logging)

    limit = getattr(args, "limit", None)
    if limit is None:
        limit = settings.parsing.limit
    if limit <= 0:
        print("--limit must be a positive integer", file=sys.stderr)
        return 2

    if args.command == "parse":
        _print_parse(args.text, limit)
        return 0

    if not settings.device.host.strip():
        print(_HOST_REQUIRED, file=sys.stderr)
        return 1

    log = ActivityLog()
    try:
        if args.command == "send":
            logger.info("Sending parsed integers to %s", settings.device.host)
            status = asyncio.run(_run_send(settings, args, log))
        else:
            status = asyncio.run(_run_remote(settings, args, log))
    except BlankHostError:
        print(_HOST_REQUIRED, file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid argument: {e}", file=sys.stderr)
        return 2
    finally:
        _print_log(log)

    return status


if __name__ == "__main__":
    sys.exit(main())
