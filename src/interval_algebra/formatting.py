"""
Bracket notation for bounds, intervals and partitions.

    [1, 5)      closed lower bound, open upper bound
    (-∞, 3]     unbounded below
    {[1, 5], [8, 9]}  a partition
"""

from typing import Iterable

from .bounds import Bound, Role

INFINITY = "∞"


def format_bound(bound: Bound, role: Role) -> str:
    if role is Role.LOWER:
        if bound.is_unbounded:
            return f"(-{INFINITY}"
        return f"{'[' if bound.is_closed else '('}{bound.value}"

    if bound.is_unbounded:
        return f"{INFINITY})"
    return f"{bound.value}{']' if bound.is_closed else ')'}"


def format_interval(interval) -> str:
    return f"{format_bound(interval.lower, Role.LOWER)}, {format_bound(interval.upper, Role.UPPER)}"


def format_partition(intervals: Iterable) -> str:
    return "{" + ", ".join(format_interval(i) for i in intervals) + "}"
