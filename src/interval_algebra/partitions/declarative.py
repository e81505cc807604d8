"""
Explicitly defined grid partition.
"""

from typing import Any, Sequence
import numpy as np

from .base import GridPartition, PartitionError


class Declarative(GridPartition):
    """
    A grid over explicitly given, non-decreasing edges.

    >>> grid = Declarative([0, 5, 10])
    >>> grid.index(3), grid.index(6), grid.index(10)
    (0, 1, 1)

    Args:
        edges: At least two non-decreasing values x0..xn

    Raises:
        PartitionError: If fewer than two edges are given or they decrease
    """

    def __init__(self, edges: Sequence[Any]):
        edges = list(edges)
        if len(edges) < 2:
            raise PartitionError(edges, f"A partition needs at least two edges, got {len(edges)}")
        if not all(a <= b for a, b in zip(edges, edges[1:])):
            raise PartitionError(edges)
        self._edges = np.asarray(edges)

    @property
    def edges(self) -> np.ndarray:
        return self._edges.copy()

    def __getitem__(self, k: int) -> Any:
        return self._edges[k].item()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Declarative):
            return NotImplemented
        return np.array_equal(self._edges, other._edges)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Declarative({self._edges.tolist()!r})"
