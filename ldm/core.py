"""
Core value types for largest differencing partitioning.

This module contains the two building blocks of the k-way Karmarkar-Karp
heuristic: the Subset bucket and the Partition, a fixed-size collection of
subsets that can absorb another partition.
"""

from typing import List, Optional, Tuple
import numpy as np


class ConsumedError(RuntimeError):
    """Raised when a subset or partition is used after being merged away."""


class OwnedSubsetError(RuntimeError):
    """Raised when a subset held by a partition is merged directly."""


class Subset:
    """
    One bucket of a partition.

    Holds the numbers assigned to it together with their running sum. The sum
    is maintained incrementally on merge and never recomputed. Once a
    Partition takes a subset, only that partition may change it.

    Attributes:
        numbers: Numbers assigned to this bucket, in insertion order
        sum: Sum of ``numbers``
    """

    __slots__ = ("_numbers", "_sum", "_consumed", "_owned")

    def __init__(self, number: Optional[int] = None):
        """
        Initialize a subset.

        Args:
            number: Optional single member; omitted for an empty subset
        """
        if number is None:
            self._numbers = []
            self._sum = 0
        else:
            self._numbers = [number]
            self._sum = number
        self._consumed = False
        self._owned = False

    def _check_alive(self):
        if self._consumed:
            raise ConsumedError("subset has already been merged into another subset")

    @property
    def numbers(self) -> Tuple[int, ...]:
        """Read-only view of the members."""
        self._check_alive()
        return tuple(self._numbers)

    @property
    def sum(self) -> int:
        """Sum of the members."""
        self._check_alive()
        return self._sum

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def owned(self) -> bool:
        """Whether a partition holds this subset."""
        return self._owned

    def merge(self, other: "Subset"):
        """
        Move every member of ``other`` into this subset.

        The donor's numbers are appended after the receiver's. ``other`` is
        left empty and may not be used afterwards. Subsets held by a
        partition are changed through ``Partition.merge`` only.

        Args:
            other: Subset to absorb
        """
        if other is self:
            raise ValueError("cannot merge a subset into itself")
        self._check_alive()
        other._check_alive()
        if self._owned or other._owned:
            raise OwnedSubsetError("subset belongs to a partition; merge the partition instead")

        self._absorb(other)

    def _absorb(self, other: "Subset"):
        self._numbers.extend(other._numbers)
        self._sum += other._sum

        other._numbers = []
        other._sum = 0
        other._consumed = True
        other._owned = False

    def __len__(self) -> int:
        self._check_alive()
        return len(self._numbers)

    def __str__(self) -> str:
        return "[" + ",".join(str(n) for n in self.numbers) + "]"

    def __repr__(self) -> str:
        if self._consumed:
            return "Subset(<consumed>)"
        return f"Subset(numbers={self._numbers!r}, sum={self._sum})"


def _by_sum(subset: Subset) -> int:
    return subset.sum


class Partition:
    """
    A candidate k-way split of the numbers seen so far.

    Owns exactly ``k`` subsets, kept sorted by descending sum. The spread
    between the first and last subset is the partition's ``difference``,
    which the driver uses as its priority.

    Attributes:
        subsets: The k subsets, largest sum first
        difference: Largest subset sum minus smallest subset sum
    """

    __slots__ = ("_subsets", "_consumed")

    def __init__(self, number: int, k: int):
        """
        Initialize a partition holding a single number.

        Args:
            number: The number placed in the first subset
            k: Number of subsets, at least 1
        """
        if k < 1:
            raise ValueError(f"partition needs at least one subset, got k={k}")

        self._subsets = [Subset() for _ in range(k)]
        # Remaining subsets are empty, so the order is already descending.
        self._subsets[0].merge(Subset(number))
        for subset in self._subsets:
            subset._owned = True
        self._consumed = False

    def _check_alive(self):
        if self._consumed:
            raise ConsumedError("partition has already been merged into another partition")

    @property
    def subsets(self) -> Tuple[Subset, ...]:
        self._check_alive()
        return tuple(self._subsets)

    @property
    def difference(self) -> int:
        """Spread between the largest and the smallest subset sum."""
        self._check_alive()
        return self._subsets[0].sum - self._subsets[-1].sum

    @property
    def sums(self) -> List[int]:
        """Subset sums in descending order."""
        self._check_alive()
        return [subset.sum for subset in self._subsets]

    @property
    def total(self) -> int:
        return sum(self.sums)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def merge(self, other: "Partition"):
        """
        Absorb another partition of the same size.

        The receiver's smallest subset takes the donor's largest, the
        second-smallest takes the second-largest, and so on. The subsets are
        then re-sorted by descending sum. ``other`` is consumed.

        Args:
            other: Partition to absorb, with the same number of subsets
        """
        if other is self:
            raise ValueError("cannot merge a partition into itself")
        self._check_alive()
        other._check_alive()
        if len(self._subsets) != len(other._subsets):
            raise ValueError(
                f"cannot merge partitions of different sizes: "
                f"{len(self._subsets)} != {len(other._subsets)}"
            )

        # Check every subset before any of them changes
        mine_ids = {id(subset) for subset in self._subsets}
        for subset in self._subsets + other._subsets:
            subset._check_alive()
        if any(id(subset) in mine_ids for subset in other._subsets):
            raise ValueError("partitions share a subset")

        for mine, theirs in zip(reversed(self._subsets), other._subsets):
            mine._absorb(theirs)
        self._subsets.sort(key=_by_sum, reverse=True)

        other._subsets = []
        other._consumed = True

    def to_numpy(self) -> np.ndarray:
        """
        Get the subset sums as an array.

        Returns:
            uint64 array of the sums, or an object array when a sum no
            longer fits in 64 bits
        """
        sums = self.sums
        if sums and sums[0] > np.iinfo(np.uint64).max:
            return np.array(sums, dtype=object)
        return np.array(sums, dtype=np.uint64)

    def __len__(self) -> int:
        self._check_alive()
        return len(self._subsets)

    def __str__(self) -> str:
        sums = self.sums
        return f"{len(sums)} partitions: " + ",".join(f"[{s}]" for s in sums)

    def __repr__(self) -> str:
        if self._consumed:
            return "Partition(<consumed>)"
        return f"Partition(subsets=[{', '.join(str(s) for s in self._subsets)}])"
