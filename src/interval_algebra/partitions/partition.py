"""
Partition: a Normalized Set of Disjoint Intervals

A partition keeps its intervals:
- non-empty
- sorted ascending by lower bound
- pairwise disjoint and never adjacent (touching intervals are merged)

Every mutation replaces a contiguous run of the interval buffer in one
splice, so the invariant holds after each call returns. The partition is
owned by a single writer; it performs no internal locking.
"""

import functools
import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from ..bounds import Role, Ordering, compare, compare_positions, admits
from ..formatting import format_partition
from ..interval import Interval, Relation

logger = logging.getLogger(__name__)

_ENDS_BEFORE = (Relation.BEFORE, Relation.MEETS)


def _by_lower(a: Interval, b: Interval) -> int:
    return int(compare(a.lower, b.lower, Role.LOWER))


def _normalize(intervals: Iterable[Interval]) -> List[Interval]:
    """Sort by lower bound and merge every overlapping or adjacent run."""
    ordered = sorted(
        (i for i in intervals if not i.is_empty),
        key=functools.cmp_to_key(_by_lower),
    )
    merged: List[Interval] = []
    for interval in ordered:
        if merged and merged[-1].union(interval).is_single:
            merged[-1] = merged[-1].hull(interval)
        else:
            merged.append(interval)
    return merged


class Partition:
    """
    Sorted, pairwise-disjoint, merged collection of intervals.

    Args:
        intervals: Initial intervals, in any order; normalized on construction
    """

    def __init__(self, intervals: Iterable[Interval] = ()):
        self._intervals: List[Interval] = _normalize(intervals)

    @classmethod
    def _from_normalized(cls, intervals: List[Interval]) -> 'Partition':
        partition = cls()
        partition._intervals = intervals
        return partition

    @property
    def intervals(self) -> Tuple[Interval, ...]:
        """Snapshot of the constituent intervals, in order."""
        return tuple(self._intervals)

    def copy(self) -> 'Partition':
        return Partition._from_normalized(list(self._intervals))

    # Mutation

    def insert(self, interval: Interval) -> None:
        """
        Add an interval, merging it with every interval it overlaps or meets.

        The affected intervals form one contiguous run of the sorted buffer,
        which is replaced by the hull of the run and the new interval.
        """
        if interval.is_empty:
            return

        start = 0
        while start < len(self._intervals) and self._intervals[start].relate(interval) is Relation.BEFORE:
            start += 1

        end = start
        merged = interval
        while end < len(self._intervals) and self._intervals[end].relate(interval) is not Relation.AFTER:
            merged = merged.hull(self._intervals[end])
            end += 1

        if end - start > 0:
            logger.debug("Merging %s with %d interval(s) into %s", interval, end - start, merged)
        self._intervals[start:end] = [merged]

    def remove(self, interval: Interval) -> None:
        """
        Remove every point of an interval.

        Each constituent interval overlapping it is replaced by the at most
        two pieces left uncovered; all others are untouched.
        """
        if interval.is_empty:
            return

        start = 0
        while start < len(self._intervals) and self._intervals[start].relate(interval) in _ENDS_BEFORE:
            start += 1

        end = start
        pieces: List[Interval] = []
        while end < len(self._intervals) and self._intervals[end].intersects(interval):
            pieces.extend(self._intervals[end].difference(interval))
            end += 1

        if end - start > 0:
            logger.debug("Removing %s split %d interval(s) into %d", interval, end - start, len(pieces))
        self._intervals[start:end] = pieces

    # Queries

    def index(self, point: Any) -> Optional[int]:
        """Position of the interval containing the point, found by binary search."""
        lo, hi = 0, len(self._intervals)
        while lo < hi:
            mid = (lo + hi) // 2
            candidate = self._intervals[mid]
            if not admits(candidate.lower, Role.LOWER, point):
                hi = mid
            elif not admits(candidate.upper, Role.UPPER, point):
                lo = mid + 1
            else:
                return mid
        return None

    def contains(self, point: Any) -> bool:
        return self.index(point) is not None

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Interval):
            return self.is_covering(item)
        return self.contains(item)

    def intersect_interval(self, interval: Interval) -> 'Partition':
        """New partition holding the parts of this one inside the interval."""
        clipped = [j.intersect(interval) for j in self._intervals]
        return Partition._from_normalized([j for j in clipped if not j.is_empty])

    def is_covering(self, interval: Interval) -> bool:
        """
        True if every point of the interval lies in this partition.

        Walks the intervals in order, advancing a frontier (the lower bound
        of the part not yet covered) until it passes the interval's upper
        bound or a gap is found.
        """
        if interval.is_empty:
            return True

        frontier = interval.lower
        for j in self._intervals:
            if compare_positions(j.upper, Role.UPPER, frontier, Role.LOWER) is Ordering.LESS:
                continue
            if compare(j.lower, frontier, Role.LOWER) is Ordering.GREATER:
                return False
            if compare(j.upper, interval.upper, Role.UPPER) >= Ordering.EQUAL:
                return True
            frontier = j.upper.complement()
        return False

    def union(self, other: Union[Interval, 'Partition']) -> 'Partition':
        """New partition covering this one and other."""
        result = self.copy()
        for interval in (other if isinstance(other, Partition) else (other,)):
            result.insert(interval)
        return result

    # Container protocol

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(tuple(self._intervals))

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return self._intervals == other._intervals

    __hash__ = None

    def __repr__(self) -> str:
        return f"Partition({list(self._intervals)!r})"

    def __str__(self) -> str:
        return format_partition(self._intervals)
