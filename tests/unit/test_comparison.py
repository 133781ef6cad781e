"""
Unit tests for comparison modes and strategies.
"""

import pytest

from strext.comparison import (
    DEFAULT_COMPARISON,
    Comparer,
    ComparisonMode,
    CultureComparer,
    IgnoreCaseComparer,
    OrdinalComparer,
    get_comparer,
)
from strext.errors import InvalidArgumentError, NullArgumentError


class TestComparisonModeParse:
    """Tests for ComparisonMode.parse()."""

    def test_values(self):
        """Test parsing enum values."""
        assert ComparisonMode.parse("ordinal") is ComparisonMode.ORDINAL
        assert ComparisonMode.parse("culture") is ComparisonMode.CULTURE_DEFAULT

    def test_member_names(self):
        """Test parsing member names in any case and separator style."""
        assert ComparisonMode.parse("ORDINAL_IGNORE_CASE") is ComparisonMode.ORDINAL_IGNORE_CASE
        assert ComparisonMode.parse("culture-default") is ComparisonMode.CULTURE_DEFAULT
        assert (
            ComparisonMode.parse(" Culture_Ignore_Case ")
            is ComparisonMode.CULTURE_DEFAULT_IGNORE_CASE
        )

    def test_unknown(self):
        """Test unknown text is rejected with the valid choices."""
        with pytest.raises(InvalidArgumentError, match="expected one of"):
            ComparisonMode.parse("invariant")

    def test_default_is_culture(self):
        """Test the library default comparison."""
        assert DEFAULT_COMPARISON is ComparisonMode.CULTURE_DEFAULT


class TestGetComparer:
    """Tests for get_comparer()."""

    def test_modes(self):
        """Test each mode resolves to its strategy."""
        assert isinstance(get_comparer(ComparisonMode.ORDINAL), OrdinalComparer)
        assert isinstance(get_comparer(ComparisonMode.ORDINAL_IGNORE_CASE), IgnoreCaseComparer)
        assert isinstance(get_comparer(ComparisonMode.CULTURE_DEFAULT), CultureComparer)
        assert get_comparer(ComparisonMode.CULTURE_DEFAULT_IGNORE_CASE).ignore_case

    def test_every_mode_is_mapped(self):
        """Test no mode is left without a strategy."""
        for mode in ComparisonMode:
            assert isinstance(get_comparer(mode), Comparer)

    def test_comparer_passthrough(self):
        """Test an explicit comparer is returned as-is."""
        comparer = CultureComparer(ignore_case=True)
        assert get_comparer(comparer) is comparer

    def test_rejects_strings(self):
        """Test that raw strings are not accepted in place of a mode."""
        with pytest.raises(InvalidArgumentError):
            get_comparer("ordinal")

    def test_rejects_none(self):
        """Test None comparison."""
        with pytest.raises(NullArgumentError):
            get_comparer(None)


class TestOrdinalComparer:
    """Tests for OrdinalComparer."""

    def test_index_of(self):
        """Test searching from a start offset."""
        comparer = OrdinalComparer()
        assert comparer.index_of("a,b,c", ",") == 1
        assert comparer.index_of("a,b,c", ",", 2) == 3
        assert comparer.index_of("a,b,c", ";") == -1

    def test_empty_value(self):
        """Test empty value matches at the start offset."""
        comparer = OrdinalComparer()
        assert comparer.index_of("abc", "", 1) == 1
        assert comparer.index_of("abc", "", 3) == 3
        assert comparer.index_of("abc", "", 4) == -1
        assert comparer.starts_with("abc", "")
        assert comparer.ends_with("abc", "")

    def test_case_sensitive(self):
        """Test ordinal matching respects case."""
        comparer = OrdinalComparer()
        assert not comparer.starts_with("Hello", "hello")
        assert not comparer.equals("A", "a")


class TestIgnoreCaseComparer:
    """Tests for IgnoreCaseComparer."""

    def test_equals(self):
        """Test case-folded equality."""
        comparer = IgnoreCaseComparer()
        assert comparer.equals("HeLLo", "hello")
        assert comparer.equals("STRASSE", "strasse")
        assert not comparer.equals("abc", "abd")

    def test_index_of(self):
        """Test case-insensitive search."""
        comparer = IgnoreCaseComparer()
        assert comparer.index_of("abcABC", "C", 3) == 5
        assert comparer.index_of("abcABC", "bc") == 1
        assert comparer.index_of("abc", "abcd") == -1

    def test_prefix_suffix(self):
        """Test case-insensitive prefix and suffix checks."""
        comparer = IgnoreCaseComparer()
        assert comparer.starts_with("README.md", "readme")
        assert comparer.ends_with("README.MD", ".md")
        assert not comparer.ends_with("md", "x.md")


class TestCultureComparer:
    """Tests for CultureComparer."""

    def test_identical_strings(self):
        """Test identical text collates equal under any locale."""
        comparer = CultureComparer()
        assert comparer.equals("abc", "abc")
        assert comparer.index_of("x=y", "=") == 1

    def test_injected_collation(self):
        """Test a caller-supplied collation function."""

        def collate(a, b):
            a, b = a.lower(), b.lower()
            return (a > b) - (a < b)

        comparer = CultureComparer(collate=collate)
        assert comparer.equals("ABC", "abc")
        assert comparer.starts_with("Hello", "HE")

    def test_ignore_case(self):
        """Test case folding before collation."""
        comparer = CultureComparer(ignore_case=True)
        assert comparer.equals("ABC", "abc")
        assert comparer.ends_with("photo.JPG", ".jpg")

    def test_immutable(self):
        """Test comparers cannot be reconfigured after creation."""
        comparer = CultureComparer()
        with pytest.raises(AttributeError):
            comparer.ignore_case = True
