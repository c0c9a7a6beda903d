"""
Tests for slot normalization.
"""

import copy
import json

from reservationwindows.domain.normalization import normalize_slots
from reservationwindows.domain.time_codec import compare_times


class TestNormalizeSlots:
    """Tests for normalize_slots."""

    def test_empty_list(self):
        assert normalize_slots([]) == []

    def test_sorts_by_start(self):
        slots = [["14:00", "16:00"], ["09:00", "12:00"], ["12:00", "13:00"]]

        assert normalize_slots(slots) == [
            ("09:00", "12:00"),
            ("12:00", "13:00"),
            ("14:00", "16:00"),
        ]

    def test_removes_duplicates(self):
        slots = [("09:00", "12:00"), ("13:00", "14:00"), ("09:00", "12:00")]

        assert normalize_slots(slots) == [("09:00", "12:00"), ("13:00", "14:00")]

    def test_same_start_keeps_input_order(self):
        """Test that sorting is stable for equal start times."""
        slots = [("09:00", "15:00"), ("09:00", "10:00")]

        assert normalize_slots(slots) == [("09:00", "15:00"), ("09:00", "10:00")]

    def test_idempotent(self):
        """Test that normalizing twice equals normalizing once."""
        inputs = [
            [["14:00", "16:00"], ["09:00", "12:00"], ["09:00", "12:00"]],
            [["bad", "10:00"], ["11:00", "12:00"], ["08:00", "09:00"], ["bad", "10:00"]],
            [["23:00", "23:59"]],
        ]

        for slots in inputs:
            once = normalize_slots(slots)
            assert normalize_slots(once) == once

    def test_does_not_mutate_input(self):
        slots = [["14:00", "16:00"], ["09:00", "12:00"], ["09:00", "12:00"]]
        before = json.dumps(slots)

        normalize_slots(slots)

        assert json.dumps(slots) == before

    def test_result_is_independent_of_input(self):
        """Test that changing the result leaves the input untouched."""
        slots = [["09:00", "12:00"], ["13:00", "14:00"]]
        original = copy.deepcopy(slots)

        result = normalize_slots(slots)
        result[0] = ("99:99", "99:99")
        result.append(("20:00", "21:00"))

        assert slots == original

    def test_malformed_entries_are_kept(self):
        """Test that malformed slots survive normalization for later reporting."""
        result = normalize_slots([["10:00", "11:00"], ["xx", "yy"]])

        assert ("xx", "yy") in result
        assert ("10:00", "11:00") in result

    def test_order_follows_compare_times(self):
        """Test that parseable starts end up in compare_times order."""
        result = normalize_slots([["18:00", "19:00"], ["08:30", "09:00"], ["12:00", "13:00"]])

        starts = [start for start, _ in result]
        assert all(compare_times(a, b) == -1 for a, b in zip(starts, starts[1:]))

    def test_malformed_starts_sort_last_in_input_order(self):
        """Test that unparseable starts follow every valid start, keeping their order."""
        result = normalize_slots([["bad", "11:00"], ["14:00", "15:00"], ["25:00", "26:00"], ["09:00", "10:00"]])

        assert result == [
            ("09:00", "10:00"),
            ("14:00", "15:00"),
            ("bad", "11:00"),
            ("25:00", "26:00"),
        ]
