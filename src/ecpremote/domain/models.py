"""Core domain models for the ecpremote system.

These models represent the values flowing between the components: the
tokenizer's parse result, the transport's request outcome, and the
sequencer's report. All of them are frozen and created fresh per call.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

INT32_MIN: int = -2147483648
INT32_MAX: int = 2147483647


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class RejectReason(str, enum.Enum):
    """Why the tokenizer refused a token."""

    NOT_INTEGER = "not_integer"
    OUT_OF_RANGE = "out_of_range"

    @property
    def description(self) -> str:
        if self is RejectReason.NOT_INTEGER:
            return "not an integer token"
        return "out of 32-bit integer range"


class FailureKind(str, enum.Enum):
    """Closed set of transport failure kinds."""

    TIMEOUT = "timeout"  # Deadline expired before the response head arrived
    NETWORK = "network"  # Connection, DNS, or protocol failure
    BODY_READ_ERROR = "body_read_error"  # Reserved; body read failures degrade a Success


# ---------------------------------------------------------------------------
# Tokenizer Models
# ---------------------------------------------------------------------------


class ParsedToken(BaseModel):
    """A token the tokenizer rejected, with its original text."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(description="The token exactly as it appeared in the input")
    reason: RejectReason


class ParseResult(BaseModel):
    """Accepted integers and rejected tokens, both in input order."""

    model_config = ConfigDict(frozen=True)

    values: tuple[int, ...] = Field(default=(), description="Accepted signed 32-bit integers")
    rejected: tuple[ParsedToken, ...] = Field(default=(), description="Rejected tokens")


# ---------------------------------------------------------------------------
# Transport Models (discriminated union)
# ---------------------------------------------------------------------------


class Success(BaseModel):
    """The device answered with a status line.

    A non-2xx status is still a Success: the status code is the signal.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    status_code: int
    status_text: str = ""
    body_text: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    body_error: str | None = Field(
        default=None, description="Set when the body could not be read; body_text is then a placeholder"
    )

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Failure(BaseModel):
    """The call did not produce a response.

    Transport only returns TIMEOUT or NETWORK; a failed body read yields a
    Success with ``body_error`` set, never a BODY_READ_ERROR failure.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[FailureKind.TIMEOUT, FailureKind.NETWORK, FailureKind.BODY_READ_ERROR]
    message: str = ""


RequestOutcome = Annotated[
    Union[Success, Failure],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Sequencer Models
# ---------------------------------------------------------------------------


class SequenceReport(BaseModel):
    """How far a keypress sequence got before finishing or failing."""

    model_config = ConfigDict(frozen=True)

    presses_completed: int = Field(default=0, ge=0, description="Character keypresses that succeeded")
    selects_completed: int = Field(default=0, ge=0, description="Confirm keypresses that succeeded")
    failure: Failure | None = Field(default=None, description="The failure that halted the sequence")

    @property
    def completed(self) -> bool:
        return self.failure is None
