"""Integer tokenizer and parse summaries.

Public API:
    parse_tokens -- Bounded signed 32-bit integer tokenizer
    split_tokens -- Separator splitting used by the tokenizer
    summarize_parse -- Headline, warnings, and truncation note for a parse
"""

from ecpremote.parsing.summary import ParseSummary, summarize_parse
from ecpremote.parsing.tokenizer import (
    DEFAULT_LIMIT,
    count_int32_tokens,
    is_int32_token,
    parse_tokens,
    split_tokens,
)

__all__ = [
    "DEFAULT_LIMIT",
    "ParseSummary",
    "count_int32_tokens",
    "is_int32_token",
    "parse_tokens",
    "split_tokens",
    "summarize_parse",
]
