"""
Tests for reservation duration bounds.
"""

import pytest

from reservationwindows.domain.duration import is_valid_duration, sanitize_duration


class TestSanitizeDuration:
    """Tests for sanitize_duration."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5),
            (90, 90),
            (1440, 1440),
            (1441, 1440),
            (15.7, 15),
            ("45", 45),
            ("  60 min ", 60),
            ("99999", 1440),
        ],
    )
    def test_accepted_values(self, value, expected):
        assert sanitize_duration(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, 0, -10, 4, float("nan"), float("inf"), "", "abc", "-", True, [30]],
    )
    def test_rejected_values(self, value):
        assert sanitize_duration(value) is None

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("30-45", 30),
            ("10.5.1", 10),
            ("1.2.3", None),
            ("2-50", None),
            (".", None),
        ],
    )
    def test_string_uses_leading_number(self, value, expected):
        """Test that only the leading number of a cleaned string is read."""
        assert sanitize_duration(value) == expected

    def test_custom_bounds(self):
        assert sanitize_duration(1, min_minutes=1, max_minutes=60) == 1
        assert sanitize_duration(90, min_minutes=1, max_minutes=60) == 60
        assert sanitize_duration("1.2.3", min_minutes=1) == 1


class TestIsValidDuration:
    """Tests for is_valid_duration."""

    def test_valid(self):
        assert is_valid_duration(5)
        assert is_valid_duration(1440)

    def test_invalid(self):
        assert not is_valid_duration(4)
        assert not is_valid_duration(1441)
        assert not is_valid_duration(30.0)
        assert not is_valid_duration("30")
        assert not is_valid_duration(True)
