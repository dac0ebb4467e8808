"""Tests for rep-range parsing and formatting."""

import pytest
from pydantic import ValidationError

from gymtrack.schemas.workout import RepRange
from gymtrack.tracker.rep_range import format_rep_range, parse_rep_range


class TestParse:
    @pytest.mark.parametrize(
        "text, expected_min, expected_max",
        [
            ("8-12", 8, 12),
            ("8", 8, None),
            (" 10 - 15 ", 10, 15),
            ("12-8", 8, 12),
            ("8-", 8, 8),
            ("-12", 1, 12),
            ("abc", 1, None),
            ("", 1, None),
            ("0", 1, None),
            ("10x", 10, None),
        ],
    )
    def test_parse(self, text, expected_min, expected_max):
        rep_range = parse_rep_range(text)
        assert rep_range.min == expected_min
        assert rep_range.max == expected_max


class TestFormat:
    def test_range(self):
        assert format_rep_range(RepRange(min=8, max=12)) == "8-12"

    def test_fixed(self):
        assert format_rep_range(RepRange(min=8)) == "8"

    def test_equal_bounds_use_single_number(self):
        assert format_rep_range(RepRange(min=10, max=10)) == "10"

    @pytest.mark.parametrize("text", ["8-12", "8", "5"])
    def test_canonical_strings_survive_parse_and_format(self, text):
        assert format_rep_range(parse_rep_range(text)) == text


class TestRepRangeModel:
    def test_max_below_min_rejected(self):
        with pytest.raises(ValidationError):
            RepRange(min=12, max=8)

    def test_zero_min_rejected(self):
        with pytest.raises(ValidationError):
            RepRange(min=0)
