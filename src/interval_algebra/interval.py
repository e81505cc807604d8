"""
Intervals Over an Ordered Domain

An interval is a pair of bounds over any totally ordered value type.
Each end may be closed, open or unbounded, and every operation here is
derived from the bound primitives, so all kind combinations are handled
by the same code path:

- Containment of points and of intervals
- Intersection, hull and union (union keeps disjoint operands apart)
- Difference (the pieces not covered by another interval)
- Allen-style classification into one of 13 relations

Intervals are immutable. Empty intervals are ordinary values: the
plain constructor never raises, and operations on empty operands have
well-defined results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple

from .bounds import (
    Bound,
    Role,
    Ordering,
    UNBOUNDED,
    compare,
    compare_positions,
    tighter_lower,
    tighter_upper,
    looser_lower,
    looser_upper,
    adjacent,
    admits,
)
from .formatting import format_interval


class ValidationError(ValueError):
    """Raised by validated construction when the bounds decrease."""

    def __init__(self, lower: Bound, upper: Bound):
        super().__init__(f"Decreasing bounds: {lower!r} > {upper!r}")
        self.lower = lower
        self.upper = upper


class Relation(Enum):
    """Qualitative relation between two intervals A and B (A relative to B)."""
    BEFORE = "before"              # A ends, gap, B starts
    MEETS = "meets"                # A ends exactly where B starts
    OVERLAPS = "overlaps"          # A starts first, ends inside B
    STARTS = "starts"              # Same start, A ends first
    CONTAINED_BY = "contained_by"  # A strictly inside B
    FINISHES = "finishes"          # Same end, A starts later
    EQUAL = "equal"
    FINISHED_BY = "finished_by"
    CONTAINS = "contains"
    STARTED_BY = "started_by"
    OVERLAPPED_BY = "overlapped_by"
    MET_BY = "met_by"
    AFTER = "after"
    DISJOINT = "disjoint"          # Either operand is empty

    @property
    def inverse(self) -> 'Relation':
        """The relation of B relative to A."""
        return _INVERSES[self]


_INVERSES = {
    Relation.BEFORE: Relation.AFTER,
    Relation.MEETS: Relation.MET_BY,
    Relation.OVERLAPS: Relation.OVERLAPPED_BY,
    Relation.STARTS: Relation.STARTED_BY,
    Relation.CONTAINED_BY: Relation.CONTAINS,
    Relation.FINISHES: Relation.FINISHED_BY,
    Relation.EQUAL: Relation.EQUAL,
    Relation.DISJOINT: Relation.DISJOINT,
}
_INVERSES.update({v: k for k, v in list(_INVERSES.items())})

# Relation from (lower comparison, upper comparison) of two overlapping intervals
_OVERLAP_RELATIONS = {
    (Ordering.EQUAL, Ordering.EQUAL): Relation.EQUAL,
    (Ordering.EQUAL, Ordering.LESS): Relation.STARTS,
    (Ordering.EQUAL, Ordering.GREATER): Relation.STARTED_BY,
    (Ordering.GREATER, Ordering.EQUAL): Relation.FINISHES,
    (Ordering.LESS, Ordering.EQUAL): Relation.FINISHED_BY,
    (Ordering.GREATER, Ordering.LESS): Relation.CONTAINED_BY,
    (Ordering.LESS, Ordering.GREATER): Relation.CONTAINS,
    (Ordering.LESS, Ordering.LESS): Relation.OVERLAPS,
    (Ordering.GREATER, Ordering.GREATER): Relation.OVERLAPPED_BY,
}


class UnionKind(Enum):
    """Shape of a union result."""
    SINGLE = "single"      # Operands overlap or meet: one interval
    DISJOINT = "disjoint"  # A gap remains: two intervals


@dataclass(frozen=True)
class UnionResult:
    """
    Result of Interval.union.

    Attributes:
        kind: Whether the union collapsed to a single interval
        intervals: One interval (SINGLE) or two, ordered by lower bound (DISJOINT)
    """
    kind: UnionKind
    intervals: Tuple['Interval', ...]

    @property
    def is_single(self) -> bool:
        return self.kind is UnionKind.SINGLE

    @property
    def interval(self) -> 'Interval':
        """The single union interval; raises ValueError if the union is disjoint."""
        if self.kind is not UnionKind.SINGLE:
            raise ValueError(
                f"Union is disjoint: {', '.join(str(i) for i in self.intervals)}"
            )
        return self.intervals[0]

    @property
    def partition(self):
        """The union as a Partition (valid for either kind)."""
        from .partitions.partition import Partition
        return Partition(self.intervals)


@dataclass(frozen=True, eq=False)
class Interval:
    """
    An interval between a lower and an upper bound.

    Attributes:
        lower: The lower (left-hand) bound
        upper: The upper (right-hand) bound
    """
    lower: Bound = UNBOUNDED
    upper: Bound = UNBOUNDED

    # Construction

    @classmethod
    def validated(cls, lower: Bound, upper: Bound) -> 'Interval':
        """
        Construct an interval, raising ValidationError if the bounds decrease.

        Two closed bounds may share a value; any other pair of finite bounds
        must have the lower value strictly below the upper one, so (1, 1),
        [1, 1) and (1, 1] are rejected.
        """
        if compare_positions(lower, Role.LOWER, upper, Role.UPPER) is Ordering.GREATER:
            raise ValidationError(lower, upper)
        return cls(lower, upper)

    @classmethod
    def closed(cls, left: Any, right: Any) -> 'Interval':
        """[left, right]"""
        return cls(Bound.closed(left), Bound.closed(right))

    @classmethod
    def open(cls, left: Any, right: Any) -> 'Interval':
        """(left, right)"""
        return cls(Bound.open(left), Bound.open(right))

    @classmethod
    def lcro(cls, left: Any, right: Any) -> 'Interval':
        """[left, right)"""
        return cls(Bound.closed(left), Bound.open(right))

    @classmethod
    def lorc(cls, left: Any, right: Any) -> 'Interval':
        """(left, right]"""
        return cls(Bound.open(left), Bound.closed(right))

    @classmethod
    def left_closed(cls, left: Any) -> 'Interval':
        """[left, inf)"""
        return cls(Bound.closed(left), UNBOUNDED)

    @classmethod
    def left_open(cls, left: Any) -> 'Interval':
        """(left, inf)"""
        return cls(Bound.open(left), UNBOUNDED)

    @classmethod
    def right_closed(cls, right: Any) -> 'Interval':
        """(-inf, right]"""
        return cls(UNBOUNDED, Bound.closed(right))

    @classmethod
    def right_open(cls, right: Any) -> 'Interval':
        """(-inf, right)"""
        return cls(UNBOUNDED, Bound.open(right))

    @classmethod
    def unbounded(cls) -> 'Interval':
        """The entire domain."""
        return cls(UNBOUNDED, UNBOUNDED)

    @classmethod
    def degenerate(cls, value: Any) -> 'Interval':
        """The single point [value, value]."""
        return cls(Bound.closed(value), Bound.closed(value))

    @classmethod
    def unit(cls) -> 'Interval':
        """[0, 1]"""
        return cls.closed(0, 1)

    # Properties

    @property
    def is_empty(self) -> bool:
        return compare_positions(self.lower, Role.LOWER, self.upper, Role.UPPER) is Ordering.GREATER

    @property
    def is_degenerate(self) -> bool:
        """True for a closed single-point interval [a, a]."""
        return (
            self.lower.is_closed and self.upper.is_closed
            and not self.lower.value < self.upper.value
            and not self.lower.value > self.upper.value
        )

    @property
    def is_bounded(self) -> bool:
        return not (self.lower.is_unbounded or self.upper.is_unbounded)

    # Containment

    def contains(self, point: Any) -> bool:
        return admits(self.lower, Role.LOWER, point) and admits(self.upper, Role.UPPER, point)

    def __contains__(self, point: Any) -> bool:
        if isinstance(point, Interval):
            return self.contains_interval(point)
        return self.contains(point)

    def contains_interval(self, other: 'Interval') -> bool:
        """True if every point of other lies in self. Empty intervals are contained everywhere."""
        if other.is_empty:
            return True
        if self.is_empty:
            return False
        return (
            compare(other.lower, self.lower, Role.LOWER) >= Ordering.EQUAL
            and compare(other.upper, self.upper, Role.UPPER) <= Ordering.EQUAL
        )

    # Set operations

    def intersect(self, other: 'Interval') -> 'Interval':
        """Intersection of two intervals. The result may be empty."""
        return Interval(
            tighter_lower(self.lower, other.lower),
            tighter_upper(self.upper, other.upper),
        )

    def hull(self, other: 'Interval') -> 'Interval':
        """
        Smallest interval spanning both operands, ignoring any gap.

        Empty operands contribute nothing: the hull of an empty interval
        and X is X.
        """
        if other.is_empty:
            return self
        if self.is_empty:
            return other
        return Interval(
            looser_lower(self.lower, other.lower),
            looser_upper(self.upper, other.upper),
        )

    def union(self, other: 'Interval') -> UnionResult:
        """
        Union of two intervals.

        Overlapping or adjacent operands merge into their hull. Operands
        separated by a gap are returned as two intervals ordered by lower
        bound, never silently merged.
        """
        if self.is_empty or other.is_empty or not self._separated_from(other):
            return UnionResult(UnionKind.SINGLE, (self.hull(other),))

        first, second = self, other
        if compare(second.lower, first.lower, Role.LOWER) is Ordering.LESS:
            first, second = second, first
        return UnionResult(UnionKind.DISJOINT, (first, second))

    def difference(self, other: 'Interval') -> List['Interval']:
        """
        Pieces of self not covered by other.

        Returns at most two intervals, ordered, with empty pieces dropped.
        """
        if self.is_empty:
            return []
        if other.is_empty or not self.intersects(other):
            return [self]

        pieces = []
        if not other.lower.is_unbounded:
            pieces.append(Interval(self.lower, tighter_upper(self.upper, other.lower.complement())))
        if not other.upper.is_unbounded:
            pieces.append(Interval(tighter_lower(self.lower, other.upper.complement()), self.upper))
        return [p for p in pieces if not p.is_empty]

    # Relations

    def _ends_before(self, other: 'Interval') -> bool:
        # self's upper bound lies below other's lower bound (gap or meeting point)
        return compare_positions(self.upper, Role.UPPER, other.lower, Role.LOWER) is Ordering.LESS

    def _separated_from(self, other: 'Interval') -> bool:
        # A gap of at least one excluded point lies between the two intervals
        if self._ends_before(other):
            return not adjacent(self.upper, other.lower)
        if other._ends_before(self):
            return not adjacent(other.upper, self.lower)
        return False

    def relate(self, other: 'Interval') -> Relation:
        """
        Classify self relative to other.

        Returns one of the 13 Allen relations, or DISJOINT when either
        operand is empty.
        """
        if self.is_empty or other.is_empty:
            return Relation.DISJOINT

        if self._ends_before(other):
            return Relation.MEETS if adjacent(self.upper, other.lower) else Relation.BEFORE
        if other._ends_before(self):
            return Relation.MET_BY if adjacent(other.upper, self.lower) else Relation.AFTER

        key = (
            compare(self.lower, other.lower, Role.LOWER),
            compare(self.upper, other.upper, Role.UPPER),
        )
        return _OVERLAP_RELATIONS[key]

    def intersects(self, other: 'Interval') -> bool:
        """True if the two intervals share at least one point."""
        if self.is_empty or other.is_empty:
            return False
        return not (self._ends_before(other) or other._ends_before(self))

    def adjacent(self, other: 'Interval') -> bool:
        return self.relate(other) in (Relation.MEETS, Relation.MET_BY)

    # Partitioning

    def linspace(self, n_partitions: int):
        """Uniform grid of n_partitions subintervals over a bounded closed interval."""
        from .partitions.uniform import Uniform

        if not (self.lower.is_closed and self.upper.is_closed):
            raise ValueError(f"linspace requires a bounded closed interval, got {self}")
        return Uniform(n_partitions, self.lower.value, self.upper.value)

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if self.is_empty or other.is_empty:
            return self.is_empty and other.is_empty
        return self.lower == other.lower and self.upper == other.upper

    def __hash__(self) -> int:
        if self.is_empty:
            return hash(())
        return hash((self.lower, self.upper))

    def __str__(self) -> str:
        return format_interval(self)
