"""
Partitions Module

- Partition: normalized set of disjoint intervals under insert/remove
- Grid partitions of a closed interval: Uniform (equal widths) and
  Declarative (explicit edges), with point lookup (digitise)
"""

from .partition import Partition
from .base import (
    GridPartition,
    SubInterval,
    PartitionError,
)
from .uniform import Uniform
from .declarative import Declarative

__all__ = [
    'Partition',
    'GridPartition',
    'SubInterval',
    'PartitionError',
    'Uniform',
    'Declarative',
]
