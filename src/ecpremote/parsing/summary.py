"""Plain-text summary of a parse, for display layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ecpremote.domain.models import ParseResult
from ecpremote.parsing.tokenizer import DEFAULT_LIMIT, count_int32_tokens, parse_tokens


class ParseSummary(BaseModel):
    """What a display layer needs to render one parse."""

    model_config = ConfigDict(frozen=True)

    result: ParseResult
    headline: str
    warnings: tuple[str, ...] = Field(default=())
    truncated: bool = False
    notes: tuple[str, ...] = Field(default=())


def summarize_parse(text: str, limit: int = DEFAULT_LIMIT) -> ParseSummary:
    """Parse ``text`` and describe the outcome.

    Strings are left unescaped.
    """
    result = parse_tokens(text, limit)

    if not text.strip():
        return ParseSummary(result=result, headline="No integers read.")

    if not result.values:
        headline = "No valid integers found."
    else:
        joined = ", ".join(str(v) for v in result.values)
        headline = f"Read {len(result.values)} integer(s): {joined}"

    warnings = tuple(f"{bad.token}: {bad.reason.description}" for bad in result.rejected)

    truncated = count_int32_tokens(text) > limit
    notes: tuple[str, ...] = ()
    if truncated:
        notes = (f"Parsed the first {limit} valid integers and ignored the rest.",)

    return ParseSummary(
        result=result,
        headline=headline,
        warnings=warnings,
        truncated=truncated,
        notes=notes,
    )
