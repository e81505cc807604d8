"""
Grid Partitions

A grid splits a bounded closed interval [x0, xn] into n consecutive
subintervals at a sorted array of edges:

    [x0, x1), [x1, x2), ..., [x(n-1), xn]

Every subinterval is closed on the left and open on the right except the
last, which is closed, so each point of [x0, xn] falls in exactly one
subinterval. Lookup is a binary search over the edge array.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional
import numpy as np

from ..bounds import Bound
from ..interval import Interval


class PartitionError(ValueError):
    """Raised when grid edges are ill-formed."""

    def __init__(self, edges: Any, message: str = None):
        super().__init__(message or f"The bounds {list(edges)} are not well defined.")
        self.edges = edges


@dataclass(frozen=True)
class SubInterval:
    """
    One cell of a grid partition.

    Attributes:
        index: Position of the cell in the grid
        interval: The cell's interval
    """
    index: int
    interval: Interval

    @property
    def width(self):
        return self.interval.upper.value - self.interval.lower.value

    @property
    def midpoint(self):
        """Centre of the cell, by true division (a float even on integer grids)."""
        return (self.interval.lower.value + self.interval.upper.value) / 2


class GridPartition(ABC):
    """Base class for partitions of a closed interval into consecutive cells."""

    @property
    @abstractmethod
    def edges(self) -> np.ndarray:
        """Sorted cell edges x0..xn."""

    def __len__(self) -> int:
        return len(self.edges) - 1

    def digitise_many(self, values: Iterable[Any]) -> np.ndarray:
        """
        Cell index of each value, vectorised.

        Args:
            values: Values to locate

        Returns:
            Integer array of cell indices, -1 where a value lies outside the grid
        """
        edges = self.edges
        values = np.asarray(values)
        n = len(edges) - 1

        indices = np.searchsorted(edges, values, side='right') - 1
        indices = np.where(values == edges[-1], n - 1, indices)
        outside = (indices < 0) | (indices >= n)
        return np.where(outside, -1, indices).astype(np.int64)

    def index(self, value: Any) -> Optional[int]:
        """Index of the cell containing value, or None outside the grid."""
        k = int(self.digitise_many([value])[0])
        return None if k < 0 else k

    def subinterval(self, k: int) -> Optional[SubInterval]:
        """The k-th cell, or None if k is out of range."""
        n = len(self)
        if not 0 <= k < n:
            return None

        left = self.edges[k].item()
        right = self.edges[k + 1].item()
        upper = Bound.closed(right) if k == n - 1 else Bound.open(right)
        return SubInterval(index=k, interval=Interval(Bound.closed(left), upper))

    def digitise(self, value: Any) -> Optional[SubInterval]:
        """The cell containing value."""
        k = self.index(value)
        return None if k is None else self.subinterval(k)

    def __iter__(self) -> Iterator[SubInterval]:
        for k in range(len(self)):
            yield self.subinterval(k)

    def __str__(self) -> str:
        n = len(self)
        left, right = self.edges[0].item(), self.edges[-1].item()
        if n == 1:
            return f"{{{left} = x0, x1 = {right}}}"
        if n == 2:
            return f"{{{left} = x0, x1, x2 = {right}}}"
        return f"{{{left} = x0, x1, ..., x{n} = {right}}}"
