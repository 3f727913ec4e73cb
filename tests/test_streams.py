# tests/test_streams.py
"""
Unit tests for collection pipeline operations and dictionary helpers.
"""

import pytest
from featuretour import maps, streams
from featuretour.streams import SAMPLE_COLLECTION


class TestStreams:
    """Test operations on the sample collection."""

    def test_filter_preserves_order(self):
        assert streams.filter_prefix(SAMPLE_COLLECTION, "a") == ["aaa2", "aaa1"]

    def test_sorted_then_filter(self):
        assert streams.sorted_filter_prefix(SAMPLE_COLLECTION, "a") == ["aaa1", "aaa2"]

    def test_upper_sorted(self):
        result = streams.upper_sorted(SAMPLE_COLLECTION)

        assert result[0] == "AAA1"
        assert result[-1] == "DDD2"
        assert len(result) == len(SAMPLE_COLLECTION)

    def test_any_match(self):
        assert streams.any_match_prefix(SAMPLE_COLLECTION, "a") is True
        assert streams.any_match_prefix(SAMPLE_COLLECTION, "z") is False

    def test_count(self):
        assert streams.count_prefix(SAMPLE_COLLECTION, "b") == 3

    def test_reduce(self):
        reduced = streams.reduce_joined(SAMPLE_COLLECTION)
        assert reduced.get() == "aaa1#aaa2#bbb1#bbb2#bbb3#ccc#ddd1#ddd2"

    def test_reduce_empty(self):
        assert not streams.reduce_joined([]).is_present()

    def test_source_untouched(self):
        """Test that operations do not mutate their input."""
        collection = list(SAMPLE_COLLECTION)
        streams.upper_sorted(collection)
        streams.reduce_joined(collection)

        assert collection == list(SAMPLE_COLLECTION)


class TestMaps:
    """Test put-if-absent and compute-if-present."""

    def test_build_value_map(self):
        values = maps.build_value_map(10)

        assert list(values) == list(range(10))
        assert values[0] == "val0"
        assert values[9] == "val9"

    def test_put_if_absent(self):
        values = {1: "one"}

        assert maps.put_if_absent(values, 1, "uno") == "one"
        assert maps.put_if_absent(values, 2, "two") is None
        assert values == {1: "one", 2: "two"}

    def test_put_if_absent_replaces_none(self):
        """Test a key mapped to None counts as absent."""
        values = {1: None}

        assert maps.put_if_absent(values, 1, "one") is None
        assert values == {1: "one"}

    def test_compute_if_present(self):
        values = maps.build_value_map(10)
        result = maps.compute_if_present(values, 3, lambda key, value: value + str(key))

        assert result == "val33"
        assert values[3] == "val33"

    def test_compute_if_absent_key(self):
        values = maps.build_value_map(3)
        assert maps.compute_if_present(values, 23, lambda key, value: value) is None
        assert 23 not in values

    def test_compute_returning_none_removes(self):
        values = maps.build_value_map(3)
        maps.compute_if_present(values, 1, lambda key, value: None)

        assert 1 not in values
