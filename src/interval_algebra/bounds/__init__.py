"""
Bounds Module: Interval Endpoints

Provides the endpoint model shared by every interval operation:
- Bound: a value tagged with a kind (closed, open, unbounded)
- Comparison of bounds within a role and across roles
- Tighter/looser selection used by intersection and hull
- Adjacency of an upper bound with a lower bound
"""

from .bound import (
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
    admits,
)

__all__ = [
    'Bound',
    'BoundKind',
    'Role',
    'Ordering',
    'UNBOUNDED',
    'compare',
    'compare_positions',
    'tighter_lower',
    'tighter_upper',
    'looser_lower',
    'looser_upper',
    'adjacent',
    'admits',
]
