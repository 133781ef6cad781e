"""
Comparison strategies for prefix, suffix and delimiter matching.

Every operation that matches text accepts either a ComparisonMode or a
Comparer instance. Modes resolve to shared, immutable comparers; passing a
Comparer directly is how callers plug in the collation of a specific locale,
for example ``CultureComparer(collate=icu_collator.compare)``.

All comparers match windows of exactly ``len(value)`` characters, so a match
found at index ``i`` always spans ``source[i:i + len(value)]``.
"""

from __future__ import annotations

import locale
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from strext.errors import InvalidArgumentError, NullArgumentError


class ComparisonMode(Enum):
    """Named comparison policies."""

    ORDINAL = "ordinal"
    """Exact code-point matching, independent of locale."""

    ORDINAL_IGNORE_CASE = "ordinal-ignore-case"
    """Code-point matching after Unicode case folding."""

    CULTURE_DEFAULT = "culture"
    """Collation rules of the process locale (LC_COLLATE)."""

    CULTURE_DEFAULT_IGNORE_CASE = "culture-ignore-case"
    """Process-locale collation after Unicode case folding."""

    @classmethod
    def parse(cls, text: str) -> ComparisonMode:
        """
        Resolve a mode from user-facing text.

        Accepts the enum value or member name, case-insensitively, with
        ``_`` and ``-`` interchangeable:

            ComparisonMode.parse("ORDINAL_IGNORE_CASE") -> ORDINAL_IGNORE_CASE
            ComparisonMode.parse("culture-default") -> CULTURE_DEFAULT
        """
        key = text.strip().lower().replace("_", "-")
        for mode in cls:
            if key in (mode.value, mode.name.lower().replace("_", "-")):
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise InvalidArgumentError(
            f"Unknown comparison mode '{text}' (expected one of: {choices})", "comparison"
        )


class Comparer(ABC):
    """
    Base class for comparison strategies.

    Subclasses only need to decide whether two equal-length strings match;
    searching and prefix/suffix tests are derived from that.
    """

    @abstractmethod
    def equals(self, a: str, b: str) -> bool:
        """Return True if ``a`` and ``b`` match under this strategy."""

    def index_of(self, source: str, value: str, start: int = 0) -> int:
        """Find the first match of value at or after start, -1 if none."""
        if not value:
            return start if start <= len(source) else -1
        width = len(value)
        for index in range(start, len(source) - width + 1):
            if self.equals(source[index : index + width], value):
                return index
        return -1

    def starts_with(self, source: str, value: str) -> bool:
        """Check if source starts with value."""
        if len(value) > len(source):
            return False
        return self.equals(source[: len(value)], value)

    def ends_with(self, source: str, value: str) -> bool:
        """Check if source ends with value."""
        if len(value) > len(source):
            return False
        return self.equals(source[len(source) - len(value) :], value)


@dataclass(frozen=True, slots=True)
class OrdinalComparer(Comparer):
    """Exact code-point comparison."""

    def equals(self, a: str, b: str) -> bool:
        return a == b

    def index_of(self, source: str, value: str, start: int = 0) -> int:
        if start > len(source):
            return -1
        return source.find(value, start)

    def starts_with(self, source: str, value: str) -> bool:
        return source.startswith(value)

    def ends_with(self, source: str, value: str) -> bool:
        return source.endswith(value)


@dataclass(frozen=True, slots=True)
class IgnoreCaseComparer(Comparer):
    """Code-point comparison of case-folded text."""

    def equals(self, a: str, b: str) -> bool:
        return a.casefold() == b.casefold()


@dataclass(frozen=True, slots=True)
class CultureComparer(Comparer):
    """
    Collation-based comparison.

    Two windows match when the collation function ranks them equal. The
    default, ``locale.strcoll``, follows whatever LC_COLLATE the host
    application has configured; this class never changes the locale itself.

    Attributes:
        collate: Three-way comparison function, negative/zero/positive
        ignore_case: Case-fold both sides before collating
    """

    collate: Callable[[str, str], int] = locale.strcoll
    ignore_case: bool = False

    def equals(self, a: str, b: str) -> bool:
        if self.ignore_case:
            a, b = a.casefold(), b.casefold()
        return self.collate(a, b) == 0


_MODE_COMPARERS: dict[ComparisonMode, Comparer] = {
    ComparisonMode.ORDINAL: OrdinalComparer(),
    ComparisonMode.ORDINAL_IGNORE_CASE: IgnoreCaseComparer(),
    ComparisonMode.CULTURE_DEFAULT: CultureComparer(),
    ComparisonMode.CULTURE_DEFAULT_IGNORE_CASE: CultureComparer(ignore_case=True),
}

DEFAULT_COMPARISON = ComparisonMode.CULTURE_DEFAULT


def get_comparer(comparison: ComparisonMode | Comparer) -> Comparer:
    """Resolve a mode or an explicit strategy to a Comparer."""
    if comparison is None:
        raise NullArgumentError("comparison")
    if isinstance(comparison, Comparer):
        return comparison
    if isinstance(comparison, ComparisonMode):
        return _MODE_COMPARERS[comparison]
    raise InvalidArgumentError(
        f"Expected a ComparisonMode or Comparer, not {type(comparison).__name__}", "comparison"
    )
