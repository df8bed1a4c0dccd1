"""
High-level algorithms for k-way number partitioning.

This module provides the Karmarkar-Karp largest differencing driver,
input normalization for lists, NumPy arrays and PyTorch tensors, and
helpers for summarizing and batching partition runs.
"""

import heapq
import logging
import operator
import torch
import numpy as np
from typing import Iterable, List, Union, Dict, Any
from .core import Partition

logger = logging.getLogger(__name__)

UINT64_MAX = int(np.iinfo(np.uint64).max)

NumberSequence = Union[Iterable[int], np.ndarray, torch.Tensor]


def as_numbers(values: NumberSequence) -> List[int]:
    """
    Normalize an input sequence to a list of Python ints.

    Args:
        values: Non-empty sequence of non-negative integers that fit in
            64 unsigned bits

    Returns:
        The numbers as a flat list, in input order
    """
    if isinstance(values, torch.Tensor):
        if values.is_floating_point() or values.is_complex() or values.dtype == torch.bool:
            raise TypeError(f"expected an integer tensor, got dtype {values.dtype}")
        values = values.detach().cpu().flatten().tolist()
    elif isinstance(values, np.ndarray):
        if values.dtype.kind not in "iu":
            raise TypeError(f"expected an integer array, got dtype {values.dtype}")
        values = values.ravel().tolist()
    else:
        numbers = []
        for value in values:
            if isinstance(value, (bool, np.bool_)):
                raise TypeError(f"expected an integer, got {value!r}")
            numbers.append(operator.index(value))
        values = numbers

    if len(values) == 0:
        raise ValueError("cannot partition an empty sequence")

    for value in values:
        if value < 0 or value > UINT64_MAX:
            raise ValueError(f"number out of range [0, 2**64 - 1]: {value}")

    return values


def _as_k(k: int) -> int:
    if isinstance(k, bool):
        raise TypeError(f"k must be an integer, got {k!r}")
    k = operator.index(k)
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    return k


def karmarkar_karp(numbers: NumberSequence, k: int) -> Partition:
    """
    Split numbers into k subsets with nearly equal sums.

    Every number starts in its own partition. The two partitions with the
    largest spread are repeatedly taken off a max-heap, the largest absorbs
    the second-largest, and the result goes back on the heap until a single
    partition is left.

    Ties between equal spreads are resolved by insertion order, so the
    output is deterministic for a given input but subset membership among
    tied partitions should not be relied on.

    Args:
        numbers: Non-empty sequence of non-negative integers
        k: Number of subsets, at least 1

    Returns:
        Partition with exactly k subsets covering every number once
    """
    numbers = as_numbers(numbers)
    k = _as_k(k)

    # heapq is a min-heap: key on negated spread, sequence number breaks ties
    heap = [(-partition.difference, seq, partition)
            for seq, partition in enumerate(Partition(number, k) for number in numbers)]
    heapq.heapify(heap)
    seq = len(heap)

    while len(heap) > 1:
        _, _, largest = heapq.heappop(heap)
        _, _, second = heapq.heappop(heap)
        largest.merge(second)
        heapq.heappush(heap, (-largest.difference, seq, largest))
        seq += 1

    result = heap[0][2]
    logger.debug("partitioned %d numbers into %d subsets, difference=%d",
                 len(numbers), k, result.difference)
    return result


def partition_sums(numbers: NumberSequence, k: int) -> List[int]:
    """Descending subset sums of the Karmarkar-Karp partition."""
    return karmarkar_karp(numbers, k).sums


def partition_summary(partition: Partition) -> Dict[str, Any]:
    """
    Summarize a partition for reporting.

    Args:
        partition: A finished partition

    Returns:
        Dictionary with k, sums, difference, total, mean and relative_spread
    """
    sums = partition.sums
    total = sum(sums)
    mean = total / len(sums)
    difference = partition.difference

    return {
        'k': len(sums),
        'sums': sums,
        'difference': difference,
        'total': total,
        'mean': mean,
        'relative_spread': difference / mean if mean else 0.0,
    }


class BatchPartitioner:
    """
    Batch processor for partitioning many inputs into the same k.

    Keeps running statistics over the spreads of the produced partitions.
    """

    def __init__(self, k: int, track_statistics: bool = True):
        """
        Initialize batch partitioner.

        Args:
            k: Number of subsets for every input
            track_statistics: Whether to track spread statistics
        """
        self.k = _as_k(k)
        self.track_statistics = track_statistics
        self.reset_statistics()

    def reset_statistics(self):
        """Reset operation statistics."""
        self.operation_count = 0
        self.total_difference = 0
        self.max_difference = 0
        self.min_difference = None

    def partition_batch(self, batch_values: List[NumberSequence]) -> List[Partition]:
        """
        Partition multiple sequences.

        Args:
            batch_values: List of number sequences

        Returns:
            List of partitions, one per input sequence
        """
        results = []

        for values in batch_values:
            partition = karmarkar_karp(values, self.k)
            results.append(partition)

            if self.track_statistics:
                difference = partition.difference
                self.operation_count += 1
                self.total_difference += difference
                self.max_difference = max(self.max_difference, difference)
                if self.min_difference is None or difference < self.min_difference:
                    self.min_difference = difference

        return results

    def get_statistics(self) -> dict:
        """Get operation statistics."""
        if not self.track_statistics or self.operation_count == 0:
            return {}

        return {
            'operation_count': self.operation_count,
            'average_difference': self.total_difference / self.operation_count,
            'max_difference': self.max_difference,
            'min_difference': self.min_difference,
            'total_difference': self.total_difference,
        }
