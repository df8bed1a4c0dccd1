"""
Largest Differencing Method Library

A k-way number partitioning library implementing the Karmarkar-Karp
largest differencing heuristic, generalized from two to k subsets.

This library provides:
- Subset and Partition value types with move-on-merge semantics
- The priority-queue driven Karmarkar-Karp partitioner
- Input normalization for lists, NumPy arrays and PyTorch tensors
- Summaries and batch processing with spread statistics
"""

from .core import Subset, Partition, ConsumedError, OwnedSubsetError
from .algorithms import (
    karmarkar_karp,
    as_numbers,
    partition_sums,
    partition_summary,
    BatchPartitioner
)

__version__ = "1.0.0"
__author__ = "LDM Partition Contributors"

__all__ = [
    "Subset",
    "Partition",
    "ConsumedError",
    "OwnedSubsetError",
    "karmarkar_karp",
    "as_numbers",
    "partition_sums",
    "partition_summary",
    "BatchPartitioner"
]
