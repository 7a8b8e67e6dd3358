"""Domain models for ecpremote.

This package contains the value objects shared by the tokenizer, the
transport, and the sequencer. All models use Pydantic v2 and are frozen.
"""

from ecpremote.domain.models import (
    INT32_MAX,
    INT32_MIN,
    Failure,
    FailureKind,
    ParsedToken,
    ParseResult,
    RejectReason,
    RequestOutcome,
    SequenceReport,
    Success,
)

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "Failure",
    "FailureKind",
    "ParsedToken",
    "ParseResult",
    "RejectReason",
    "RequestOutcome",
    "SequenceReport",
    "Success",
]
