"""
Interval Algebra - One-Dimensional Intervals and Partitions

This package models ranges over any totally ordered value domain, with
endpoints that are closed, open or unbounded, and the complete algebra
between them:

- Bounds: exhaustive comparison and tighter/looser selection rules
- Interval: containment, intersection, hull, union, difference and
  Allen-style relation classification
- Partition: a normalized set of disjoint intervals under insertion
  and removal
- Grid partitions (Uniform, Declarative) for locating values in cells

All interval operations are total: empty intervals are ordinary values
and no operation raises for them.
"""

from .bounds import (
    Bound,
    BoundKind,
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
)
from .interval import (
    Interval,
    Relation,
    UnionKind,
    UnionResult,
    ValidationError,
)
from .partitions import (
    Partition,
    GridPartition,
    SubInterval,
    PartitionError,
    Uniform,
    Declarative,
)
from .formatting import (
    format_bound,
    format_interval,
    format_partition,
)

__version__ = "0.1.0"

__all__ = [
    # Bounds
    "Bound",
    "BoundKind",
    "Role",
    "Ordering",
    "UNBOUNDED",
    "compare",
    "compare_positions",
    "tighter_lower",
    "tighter_upper",
    "looser_lower",
    "looser_upper",
    "adjacent",
    # Intervals
    "Interval",
    "Relation",
    "UnionKind",
    "UnionResult",
    "ValidationError",
    # Partitions
    "Partition",
    "GridPartition",
    "SubInterval",
    "PartitionError",
    "Uniform",
    "Declarative",
    # Formatting
    "format_bound",
    "format_interval",
    "format_partition",
]
