"""
Tests for Partition (Normalized Disjoint Interval Sets)
"""

import logging

import pytest
from interval_algebra import Interval, Partition, Relation


def assert_normalized(partition: Partition):
    """Every consecutive pair is separated by a gap."""
    intervals = partition.intervals
    assert all(not i.is_empty for i in intervals)
    for a, b in zip(intervals, intervals[1:]):
        assert a.relate(b) is Relation.BEFORE


class TestPartitionConstruction:
    """Test normalization on construction."""

    def test_empty(self):
        """Test an empty partition."""
        p = Partition()
        assert len(p) == 0
        assert not p
        assert p.intervals == ()
        assert str(p) == "{}"

    def test_overlapping_merge(self):
        """Test [1, 3], [2, 5], [8, 9] normalizes to {[1, 5], [8, 9]}."""
        p = Partition([Interval.closed(8, 9), Interval.closed(1, 3), Interval.closed(2, 5)])
        assert p.intervals == (Interval.closed(1, 5), Interval.closed(8, 9))
        assert str(p) == "{[1, 5], [8, 9]}"

    def test_adjacent_merge(self):
        """Test meeting intervals are merged."""
        p = Partition([Interval.lcro(1, 3), Interval.closed(3, 5)])
        assert p.intervals == (Interval.closed(1, 5),)

    def test_gap_at_excluded_point_kept(self):
        """Test [1, 3) and (3, 5] remain separate."""
        p = Partition([Interval.lcro(1, 3), Interval.lorc(3, 5)])
        assert len(p) == 2
        assert_normalized(p)

    def test_empties_dropped(self):
        """Test empty intervals are discarded."""
        p = Partition([Interval.open(1, 1), Interval.closed(4, 2)])
        assert len(p) == 0

    def test_intervals_is_snapshot(self):
        """Test the accessor does not expose the internal buffer."""
        p = Partition([Interval.closed(1, 2)])
        snapshot = p.intervals
        p.insert(Interval.closed(5, 6))
        assert snapshot == (Interval.closed(1, 2),)
        assert len(p) == 2


class TestPartitionInsert:
    """Test insertion."""

    def test_insert_disjoint(self):
        """Test inserting into a gap keeps order."""
        p = Partition([Interval.closed(1, 2), Interval.closed(8, 9)])
        p.insert(Interval.closed(4, 5))
        assert p.intervals == (Interval.closed(1, 2), Interval.closed(4, 5), Interval.closed(8, 9))

    def test_insert_bridges_run(self):
        """Test inserting an interval that spans several merges the whole run."""
        p = Partition([Interval.closed(1, 2), Interval.closed(4, 5), Interval.closed(7, 8), Interval.closed(10, 11)])
        p.insert(Interval.lorc(2, 7))
        assert p.intervals == (Interval.closed(1, 8), Interval.closed(10, 11))

    def test_insert_adjacent(self):
        """Test inserting a meeting interval merges it."""
        p = Partition([Interval.closed(1, 5)])
        p.insert(Interval.lorc(5, 10))
        assert p.intervals == (Interval.closed(1, 10),)

    def test_insert_empty_is_noop(self):
        """Test inserting an empty interval changes nothing."""
        p = Partition([Interval.closed(1, 5)])
        p.insert(Interval.open(3, 3))
        assert p.intervals == (Interval.closed(1, 5),)

    def test_insert_twice_idempotent(self):
        """Test inserting the same interval twice equals inserting once."""
        once = Partition([Interval.closed(1, 3), Interval.closed(6, 8)])
        once.insert(Interval.closed(2, 7))
        twice = once.copy()
        twice.insert(Interval.closed(2, 7))
        assert once == twice

    def test_insert_unbounded(self):
        """Test inserting an unbounded interval swallows everything above."""
        p = Partition([Interval.closed(1, 3), Interval.closed(6, 8)])
        p.insert(Interval.left_open(2))
        assert p.intervals == (Interval.left_closed(1),)

    def test_insert_logs_merge(self, caplog):
        """Test merges are logged at debug level."""
        p = Partition([Interval.closed(1, 3)])
        with caplog.at_level(logging.DEBUG, logger="interval_algebra.partitions.partition"):
            p.insert(Interval.closed(2, 5))
        assert "Merging" in caplog.text


class TestPartitionRemove:
    """Test removal."""

    def test_remove_splits(self):
        """Test removing [3, 5] from {[1, 10]} gives {[1, 3), (5, 10]}."""
        p = Partition([Interval.closed(1, 10)])
        p.remove(Interval.closed(3, 5))
        assert p.intervals == (Interval.lcro(1, 3), Interval.lorc(5, 10))
        assert str(p) == "{[1, 3), (5, 10]}"

    def test_remove_across_several(self):
        """Test removing a span that trims and deletes intervals."""
        p = Partition([Interval.closed(1, 3), Interval.closed(5, 6), Interval.closed(8, 10)])
        p.remove(Interval.open(2, 9))
        assert p.intervals == (Interval.closed(1, 2), Interval.closed(9, 10))

    def test_remove_untouched(self):
        """Test removing a gap leaves the partition unchanged."""
        p = Partition([Interval.lcro(1, 3), Interval.lorc(5, 10)])
        p.remove(Interval.closed(3, 5))
        assert p.intervals == (Interval.lcro(1, 3), Interval.lorc(5, 10))

    def test_remove_everything(self):
        """Test removing the entire domain."""
        p = Partition([Interval.closed(1, 3), Interval.closed(5, 6)])
        p.remove(Interval.unbounded())
        assert len(p) == 0

    def test_remove_empty_is_noop(self):
        """Test removing an empty interval changes nothing."""
        p = Partition([Interval.closed(1, 3)])
        p.remove(Interval.open(2, 2))
        assert p.intervals == (Interval.closed(1, 3),)


class TestPartitionQueries:
    """Test membership, clipping and coverage."""

    def setup_method(self):
        self.p = Partition([Interval.closed(1, 5), Interval.open(8, 9), Interval.left_closed(12)])

    def test_contains(self):
        """Test point membership."""
        assert self.p.contains(1)
        assert self.p.contains(5)
        assert not self.p.contains(6)
        assert not self.p.contains(8)
        assert self.p.contains(8.5)
        assert not self.p.contains(9)
        assert self.p.contains(10 ** 9)
        assert not self.p.contains(0)
        assert 3 in self.p

    def test_index(self):
        """Test the index of the containing interval."""
        assert self.p.index(3) == 0
        assert self.p.index(8.5) == 1
        assert self.p.index(100) == 2
        assert self.p.index(7) is None
        assert Partition().index(0) is None

    def test_intersect_interval(self):
        """Test clipping to an interval."""
        clipped = self.p.intersect_interval(Interval.closed(4, 13))
        assert clipped.intervals == (Interval.closed(4, 5), Interval.open(8, 9), Interval.closed(12, 13))
        assert self.p.intersect_interval(Interval.open(5, 8)).intervals == ()

    def test_is_covering(self):
        """Test coverage of an interval."""
        assert self.p.is_covering(Interval.closed(2, 4))
        assert self.p.is_covering(Interval.closed(1, 5))
        assert not self.p.is_covering(Interval.closed(4, 8.5))
        assert not self.p.is_covering(Interval.closed(8, 9))
        assert self.p.is_covering(Interval.open(8, 9))
        assert self.p.is_covering(Interval.left_open(12))
        assert not self.p.is_covering(Interval.unbounded())
        assert self.p.is_covering(Interval.open(6, 6))
        assert Interval.closed(2, 3) in self.p

    def test_is_covering_across_excluded_point(self):
        """Test a gap of a single excluded point breaks coverage."""
        p = Partition([Interval.lcro(1, 3), Interval.lorc(3, 5)])
        assert p.is_covering(Interval.closed(1, 2))
        assert not p.is_covering(Interval.closed(2, 4))

    def test_union(self):
        """Test union with an interval and with another partition."""
        other = Partition([Interval.closed(5, 8), Interval.closed(20, 30)])
        merged = self.p.union(other)
        assert merged.intervals == (Interval.lcro(1, 9), Interval.left_closed(12))
        assert self.p.union(Interval.closed(0, 1)).intervals[0] == Interval.closed(0, 5)
        assert len(self.p) == 3

    def test_union_result_round_trip(self):
        """Test union followed by clipping recovers each operand."""
        a = Interval.closed(1, 4)
        b = Interval.closed(6, 10)
        partition = a.union(b).partition
        assert partition.intersect_interval(a).intervals == (a,)
        assert partition.intersect_interval(b).intervals == (b,)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
