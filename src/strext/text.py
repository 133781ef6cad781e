"""
strext Text Utilities.

Pure functions for fixed-length extraction, prefix/suffix trimming,
occurrence counting and positional splitting. Nothing here keeps state,
logs, or mutates its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from strext.comparison import DEFAULT_COMPARISON, Comparer, ComparisonMode, get_comparer
from strext.errors import InvalidArgumentError, NullArgumentError, RangeError


@dataclass(frozen=True, slots=True)
class SplitOptions:
    """
    Optional settings for split_part and split_parts.

    Attributes:
        limit: Maximum number of segments, 0 for unlimited
        comparison: Mode or strategy used to locate the delimiter
    """

    limit: int = 0
    comparison: ComparisonMode | Comparer = DEFAULT_COMPARISON


def _require(value: Optional[str], argument: str) -> str:
    if value is None:
        raise NullArgumentError(argument)
    return value


def _require_int(value: int, argument: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(
            f"Expected an integer, not {type(value).__name__}", argument
        )


def _check_length(source: str, length: int) -> None:
    _require_int(length, "length")
    if not 0 <= length <= len(source):
        raise RangeError(
            f"Length must be between 0 and the source length ({len(source)})", "length", length
        )


# =============================================================================
# Fixed-Length Extraction
# =============================================================================


def left(source: str, length: int) -> str:
    """Return the first `length` characters of source."""
    _check_length(_require(source, "source"), length)
    return source[:length]


def right(source: str, length: int) -> str:
    """Return the last `length` characters of source."""
    _check_length(_require(source, "source"), length)
    return source[len(source) - length :]


# =============================================================================
# Prefix / Suffix Trimming
# =============================================================================


def without_prefix(
    source: str, trim: str, comparison: ComparisonMode | Comparer = DEFAULT_COMPARISON
) -> str:
    """
    Remove one leading occurrence of trim, if source starts with it.

    An empty trim always matches and removes nothing. A source shorter than
    trim is returned unchanged.

    Example:
        without_prefix("v1.2.0", "v") -> "1.2.0"
        without_prefix("vv1", "v") -> "v1"
    """
    _require(source, "source")
    _require(trim, "trim")
    comparer = get_comparer(comparison)
    if len(source) < len(trim):
        return source
    return source[len(trim) :] if comparer.starts_with(source, trim) else source


def without_suffix(
    source: str, trim: str, comparison: ComparisonMode | Comparer = DEFAULT_COMPARISON
) -> str:
    """
    Remove one trailing occurrence of trim, if source ends with it.

    Example:
        without_suffix("report.txt", ".txt") -> "report"
    """
    _require(source, "source")
    _require(trim, "trim")
    comparer = get_comparer(comparison)
    if len(source) < len(trim):
        return source
    return source[: len(source) - len(trim)] if comparer.ends_with(source, trim) else source


# =============================================================================
# Counting
# =============================================================================


def count_occurrences(source: str, sub: str) -> int:
    """Count non-overlapping ordinal occurrences of sub in source."""
    _require(source, "source")
    if not sub:
        raise InvalidArgumentError("'sub' cannot be None or empty", "sub")
    return source.count(sub)


# =============================================================================
# Positional Splitting
# =============================================================================


def _resolve_options(
    options: Optional[SplitOptions],
    limit: Optional[int],
    comparison: ComparisonMode | Comparer | None,
) -> SplitOptions:
    if options is None:
        return SplitOptions(
            limit=0 if limit is None else limit,
            comparison=DEFAULT_COMPARISON if comparison is None else comparison,
        )
    if not isinstance(options, SplitOptions):
        raise InvalidArgumentError(
            f"Expected SplitOptions, not {type(options).__name__}; "
            "pass limit and comparison as keywords",
            "options",
        )
    if limit is not None or comparison is not None:
        raise InvalidArgumentError(
            "Pass either an options object or limit/comparison keywords, not both", "options"
        )
    return options


def split_parts(
    source: str,
    delimiter: str,
    options: Optional[SplitOptions] = None,
    *,
    limit: Optional[int] = None,
    comparison: ComparisonMode | Comparer | None = None,
) -> list[str]:
    """
    Split source on delimiter and return every segment.

    Scanning runs left to right. Once ``limit - 1`` delimiters have been
    consumed, the rest of the string becomes the final segment untouched,
    so ``limit`` caps the number of segments. An empty source or delimiter
    yields the source as the only segment.

    Example:
        split_parts("a,b,,c", ",") -> ["a", "b", "", "c"]
        split_parts("a,b,c,d", ",", limit=2) -> ["a", "b,c,d"]

    Raises:
        NullArgumentError: source or delimiter is None
        RangeError: limit is negative
        InvalidArgumentError: options is not a SplitOptions, or a number is not an int
    """
    _require(source, "source")
    _require(delimiter, "delimiter")
    options = _resolve_options(options, limit, comparison)
    _require_int(options.limit, "limit")
    if options.limit < 0:
        raise RangeError("Limit cannot be negative", "limit", options.limit)
    comparer = get_comparer(options.comparison)

    if not source or not delimiter:
        return [source]

    parts: list[str] = []
    start = 0
    splits = 0
    while True:
        index = comparer.index_of(source, delimiter, start)
        if index == -1 or (options.limit > 0 and splits >= options.limit - 1):
            parts.append(source[start:])
            break
        parts.append(source[start:index])
        start = index + len(delimiter)
        splits += 1
    return parts


def split_part(
    source: str,
    delimiter: str,
    position: int,
    options: Optional[SplitOptions] = None,
    *,
    limit: Optional[int] = None,
    comparison: ComparisonMode | Comparer | None = None,
) -> str:
    """
    Split source on delimiter and return the segment at position.

    Negative positions count from the end (-1 is the last segment) and are
    resolved against the segments the limit actually produced. Any position
    outside the segment list yields an empty string.

    With an empty source or delimiter nothing is split: positions 0 and -1
    return source, every other position returns "".

    Example:
        split_part("a,b,c", ",", 0) -> "a"
        split_part("a,b,c", ",", -1) -> "c"
        split_part("a,b,c,d", ",", 1, limit=2) -> "b,c,d"
        split_part("abc", "", 1) -> ""

    Raises:
        NullArgumentError: source or delimiter is None
        RangeError: limit is negative
        InvalidArgumentError: options is not a SplitOptions, or a number is not an int
    """
    _require_int(position, "position")
    parts = split_parts(source, delimiter, options, limit=limit, comparison=comparison)
    if position < 0:
        position += len(parts)
        if position < 0:
            return ""
    return parts[position] if position < len(parts) else ""
