"""Bounded integer tokenizer.

Extracts up to ``limit`` signed 32-bit integers from free-form text and
reports every token it refused along the way. Pure: no I/O, no state.
"""

from __future__ import annotations

import re

from ecpremote.domain.models import (
    INT32_MAX,
    INT32_MIN,
    ParsedToken,
    ParseResult,
    RejectReason,
)

DEFAULT_LIMIT: int = 3

_SEPARATORS = re.compile(r"[,\s;]+")
# ASCII digits only; \d would also accept other Unicode decimal digits
_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def split_tokens(text: str) -> list[str]:
    """Split text on runs of commas, whitespace, and semicolons."""
    return [tok for tok in _SEPARATORS.split(text) if tok]


def is_valid_int32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def is_int32_token(tok: str) -> bool:
    """Whether ``tok`` would be accepted as a value by ``parse_tokens``."""
    return _INTEGER_TOKEN.fullmatch(tok) is not None and is_valid_int32(int(tok))


def count_int32_tokens(text: str) -> int:
    """Count every acceptable token in ``text``, ignoring any limit."""
    return sum(1 for tok in split_tokens(text) if is_int32_token(tok))


def parse_tokens(text: str, limit: int = DEFAULT_LIMIT) -> ParseResult:
    """Parse up to ``limit`` signed 32-bit integers from ``text``.

    Scanning stops as soon as ``limit`` values are accepted; tokens after
    that point are neither accepted nor rejected.

    Args:
        text: Raw user input.
        limit: Maximum number of values to accept. Must be positive.

    Returns:
        ParseResult with accepted values and rejected tokens in input order.

    Raises:
        ValueError: If ``limit`` is not a positive integer.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")

    values: list[int] = []
    rejected: list[ParsedToken] = []

    for tok in split_tokens(text):
        if _INTEGER_TOKEN.fullmatch(tok) is None:
            rejected.append(ParsedToken(token=tok, reason=RejectReason.NOT_INTEGER))
            continue
        # int() is arbitrary precision, so the range check is exact
        value = int(tok)
        if not is_valid_int32(value):
            rejected.append(ParsedToken(token=tok, reason=RejectReason.OUT_OF_RANGE))
            continue
        values.append(value)
        if len(values) == limit:
            break

    return ParseResult(values=tuple(values), rejected=tuple(rejected))
