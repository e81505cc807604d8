"""
Uniform grid partition of a closed numeric interval.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np

from .base import GridPartition, PartitionError


@dataclass(frozen=True)
class Uniform(GridPartition):
    """
    A closed interval [left, right] split into `size` cells of equal width.

    >>> grid = Uniform(size=5, left=0.0, right=1.0)
    >>> grid.index(0.2), grid.index(0.7)
    (1, 3)

    Attributes:
        size: Number of cells
        left: Left end of the interval
        right: Right end of the interval
    """
    size: int
    left: Any
    right: Any

    def __post_init__(self):
        if self.size < 1:
            raise PartitionError(
                (self.left, self.right),
                f"A uniform partition needs at least one cell, got size={self.size}",
            )
        if self.left > self.right:
            raise PartitionError((self.left, self.right))

    @property
    def partition_width(self):
        return (self.right - self.left) / self.size

    @property
    def edges(self) -> np.ndarray:
        return np.linspace(self.left, self.right, self.size + 1)

    def __len__(self) -> int:
        return self.size
