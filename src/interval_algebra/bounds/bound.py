"""
Bound Model

An endpoint of an interval: a value tagged with a kind (closed, open or
unbounded). The role a bound plays (lower or upper) is supplied by the
interval holding it, and together kind and role decide whether the value
itself belongs to the interval.

Every higher-level operation is derived from the primitives here:
- compare / compare_positions: ordering of bounds along the value line
- tighter_* / looser_*: the bound chosen by intersection and hull
- adjacent: an upper and a lower bound that touch with no excluded point
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class BoundKind(Enum):
    """The three kinds of endpoint."""
    CLOSED = "closed"        # Value included
    OPEN = "open"            # Value excluded
    UNBOUNDED = "unbounded"  # No value, extends to infinity


class Role(Enum):
    """Which end of an interval a bound sits at."""
    LOWER = "lower"
    UPPER = "upper"


class Ordering(IntEnum):
    """Result of comparing two bounds."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Bound:
    """
    One endpoint of an interval.

    Attributes:
        kind: Closed, open or unbounded
        value: The endpoint value (None when unbounded)
    """
    kind: BoundKind
    value: Any = None

    def __post_init__(self):
        # Unbounded bounds carry no value
        if self.kind is BoundKind.UNBOUNDED and self.value is not None:
            object.__setattr__(self, "value", None)

    @classmethod
    def closed(cls, value: Any) -> 'Bound':
        return cls(BoundKind.CLOSED, value)

    @classmethod
    def open(cls, value: Any) -> 'Bound':
        return cls(BoundKind.OPEN, value)

    @classmethod
    def unbounded(cls) -> 'Bound':
        return UNBOUNDED

    @property
    def is_closed(self) -> bool:
        return self.kind is BoundKind.CLOSED

    @property
    def is_open(self) -> bool:
        return self.kind is BoundKind.OPEN

    @property
    def is_unbounded(self) -> bool:
        return self.kind is BoundKind.UNBOUNDED

    def complement(self) -> 'Bound':
        """
        Return the bound that starts where this one stops.

        A closed lower bound at v is complemented by an open upper bound at v,
        and vice versa, so that the two sides partition the line at v.
        Unbounded bounds have no complement and are returned unchanged.
        """
        if self.is_closed:
            return Bound.open(self.value)
        if self.is_open:
            return Bound.closed(self.value)
        return self

    def __repr__(self) -> str:
        if self.is_unbounded:
            return "Bound.unbounded()"
        return f"Bound.{self.kind.value}({self.value!r})"


UNBOUNDED = Bound(BoundKind.UNBOUNDED)


def _offset(bound: Bound, role: Role) -> int:
    # Position of the bound relative to its value: an open lower bound begins
    # just after the value, an open upper bound ends just before it.
    if bound.is_closed:
        return 0
    return 1 if role is Role.LOWER else -1


def _infinity(role: Role) -> int:
    return -1 if role is Role.LOWER else 1


def _sign(x: int) -> Ordering:
    if x < 0:
        return Ordering.LESS
    if x > 0:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_positions(a: Bound, a_role: Role, b: Bound, b_role: Role) -> Ordering:
    """
    Compare where two bounds sit on the value line.

    Each bound is placed at its value, nudged just after it for an open
    lower bound and just before it for an open upper bound. An unbounded
    lower bound sits below everything, an unbounded upper bound above
    everything. Bounds may have different roles: comparing an upper bound
    with a lower bound tells whether one interval ends before the next
    begins (LESS), on the same point (EQUAL), or after it (GREATER).

    Args:
        a: First bound
        a_role: Role of the first bound
        b: Second bound
        b_role: Role of the second bound

    Returns:
        Ordering of a relative to b
    """
    if a.is_unbounded or b.is_unbounded:
        a_pos = _infinity(a_role) if a.is_unbounded else 0
        b_pos = _infinity(b_role) if b.is_unbounded else 0
        return _sign(a_pos - b_pos)

    if a.value < b.value:
        return Ordering.LESS
    if a.value > b.value:
        return Ordering.GREATER
    return _sign(_offset(a, a_role) - _offset(b, b_role))


def compare(a: Bound, b: Bound, role: Role) -> Ordering:
    """Compare two bounds of the same role."""
    return compare_positions(a, role, b, role)


def tighter_lower(a: Bound, b: Bound) -> Bound:
    """The more restrictive of two lower bounds (the intersection's lower bound)."""
    return b if compare(a, b, Role.LOWER) is Ordering.LESS else a


def tighter_upper(a: Bound, b: Bound) -> Bound:
    """The more restrictive of two upper bounds (the intersection's upper bound)."""
    return b if compare(a, b, Role.UPPER) is Ordering.GREATER else a


def looser_lower(a: Bound, b: Bound) -> Bound:
    """The less restrictive of two lower bounds (the hull's lower bound)."""
    return b if compare(a, b, Role.LOWER) is Ordering.GREATER else a


def looser_upper(a: Bound, b: Bound) -> Bound:
    """The less restrictive of two upper bounds (the hull's upper bound)."""
    return b if compare(a, b, Role.UPPER) is Ordering.LESS else a


def adjacent(upper: Bound, lower: Bound) -> bool:
    """
    True if an upper bound and a lower bound meet with no gap and no overlap.

    Both bounds must sit on the same value with exactly one of them closed,
    so the value belongs to exactly one side.
    """
    if upper.is_unbounded or lower.is_unbounded:
        return False
    if upper.value < lower.value or upper.value > lower.value:
        return False
    return upper.is_closed != lower.is_closed


def admits(bound: Bound, role: Role, point: Any) -> bool:
    """True if the point lies on the inner side of the bound."""
    if bound.is_unbounded:
        return True
    if role is Role.LOWER:
        return point >= bound.value if bound.is_closed else point > bound.value
    return point <= bound.value if bound.is_closed else point < bound.value

