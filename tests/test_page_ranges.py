"""
Unit tests for the page-range parser.

The parser is lenient on purpose: anything it cannot interpret is ignored,
never reported, because it drives live price previews while the customer
is still typing.
"""

import pytest

from modules.page_ranges import parse_page_numbers


class TestSinglePages:
    """Single page number tokens."""

    def test_duplicates_collapse(self):
        """Repeated pages and overlapping ranges are counted once."""
        assert parse_page_numbers("1,1,2,2-3", 10) == [1, 2, 3]

    def test_output_is_ascending(self):
        assert parse_page_numbers("9, 3, 7, 1", 10) == [1, 3, 7, 9]

    def test_out_of_range_pages_dropped(self):
        assert parse_page_numbers("0, 5, 11, 100", 10) == [5]

    def test_whitespace_trimmed(self):
        assert parse_page_numbers("  2 ,   4  ", 10) == [2, 4]

    def test_non_integer_tokens_ignored(self):
        assert parse_page_numbers("1.5, two, 3", 10) == [3]


class TestRanges:
    """low-high range tokens."""

    def test_range_clamped_to_document(self):
        assert parse_page_numbers("5-100", 10) == [5, 6, 7, 8, 9, 10]

    def test_range_with_spaces_around_dash(self):
        assert parse_page_numbers("2 - 4", 10) == [2, 3, 4]

    def test_reversed_range_ignored(self):
        assert parse_page_numbers("3-1", 10) == []

    def test_range_starting_past_document_adds_nothing(self):
        assert parse_page_numbers("12-20", 10) == []

    def test_single_page_range(self):
        assert parse_page_numbers("4-4", 10) == [4]

    def test_range_with_zero_endpoint_ignored(self):
        assert parse_page_numbers("0-3", 10) == []

    def test_multiple_dashes_ignored(self):
        assert parse_page_numbers("1-2-3", 10) == []

    def test_open_ended_range_ignored(self):
        assert parse_page_numbers("3-, -4", 10) == []


class TestLenientInput:
    """Inputs that select nothing must never raise."""

    @pytest.mark.parametrize("expression", ["", "   ", None, ",,,", "0", "0, 0"])
    def test_nothing_selected(self, expression):
        assert parse_page_numbers(expression, 10) == []

    def test_malformed_tokens_skipped(self):
        """Only the valid literal survives; '3-1' is reversed and ignored."""
        assert parse_page_numbers("abc,1,-,3-1", 10) == [1]

    def test_zero_page_document(self):
        assert parse_page_numbers("1-5, 2", 0) == []

    def test_mixed_expression(self):
        assert parse_page_numbers("1-3, 8, 10-12, 0, x", 11) == [1, 2, 3, 8, 10, 11]

    def test_huge_single_number_ignored(self):
        assert parse_page_numbers("9" * 5000, 10) == []

    def test_huge_range_start_selects_nothing(self):
        assert parse_page_numbers("1" * 5000 + "-" + "2" * 5000, 10) == []

    def test_huge_range_end_clamped(self):
        assert parse_page_numbers("8-" + "9" * 5000, 10) == [8, 9, 10]

    def test_leading_zeros(self):
        assert parse_page_numbers("007, 00-3, 0002-0003", 10) == [2, 3, 7]
