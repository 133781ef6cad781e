"""
strext - Stateless string extension utilities.

Fixed-length extraction, prefix/suffix trimming with pluggable comparison
strategies, occurrence counting, and positional splitting with split limits.
"""

from strext.comparison import (
    DEFAULT_COMPARISON,
    Comparer,
    ComparisonMode,
    CultureComparer,
    IgnoreCaseComparer,
    OrdinalComparer,
    get_comparer,
)
from strext.errors import InvalidArgumentError, NullArgumentError, RangeError, StrExtError
from strext.text import (
    SplitOptions,
    count_occurrences,
    left,
    right,
    split_part,
    split_parts,
    without_prefix,
    without_suffix,
)

__version__ = "0.1.0"
__all__ = [
    # Text utilities
    "left",
    "right",
    "without_prefix",
    "without_suffix",
    "count_occurrences",
    "split_part",
    "split_parts",
    "SplitOptions",
    # Comparison
    "ComparisonMode",
    "Comparer",
    "OrdinalComparer",
    "IgnoreCaseComparer",
    "CultureComparer",
    "get_comparer",
    "DEFAULT_COMPARISON",
    # Errors
    "StrExtError",
    "NullArgumentError",
    "InvalidArgumentError",
    "RangeError",
]
