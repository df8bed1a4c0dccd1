#!/usr/bin/env python3
"""
Pytest configuration and fixtures for partitioning tests.

This file contains shared test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import numpy as np
import torch
from collections import Counter
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture(scope="session")
def random_seed():
    """Set random seed for reproducible tests."""
    seed = 42
    np.random.seed(seed)
    torch.manual_seed(seed)
    return seed


@pytest.fixture
def simple_data():
    """Simple test data for basic functionality tests."""
    return [1, 2, 4]


@pytest.fixture
def repeated_triples():
    """The {1, 2, 4} triple repeated four times, total 28."""
    return [1, 2, 4] * 4


@pytest.fixture
def repeated_triples_expected():
    """
    Expected descending sums for ``repeated_triples`` per k.

    These k values never have to break a tie between different outcomes:
    equal numbers are always merged among themselves first.
    """
    return {
        1: [28],
        2: [14, 14],
        4: [7, 7, 7, 7],
        12: [4, 4, 4, 4, 2, 2, 2, 2, 1, 1, 1, 1],
    }


@pytest.fixture
def random_numbers():
    """Random non-negative integers."""
    rng = np.random.RandomState(42)
    return rng.randint(0, 1000, size=500).tolist()


@pytest.fixture(params=[1, 2, 3, 4, 5, 6])
def gpu_count(request):
    """Parameterized fixture for partition counts."""
    return request.param


def _corner_cases(size):
    return [
        [[1, 2, 4][i % 3] for i in range(size)],
        [4] * (size - 2) + [1, 2],
        [1] * size + [2, 4],
    ]


@pytest.fixture(scope="session")
def corner_cases():
    """Repeating and lopsided {1, 2, 4} inputs for several sizes."""
    cases = []
    for size in (8, 16, 32, 64, 128, 256):
        cases.extend(_corner_cases(size))
    return cases


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark tests that take long time as slow
        if "large" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)

        # Mark integration tests
        if "integration" in item.name or "end_to_end" in item.name:
            item.add_marker(pytest.mark.integration)


class PartitionChecker:
    """Utility class for checking partition invariants."""

    @staticmethod
    def assert_conserved(partition, numbers):
        """Assert that a partition holds exactly the input multiset."""
        members = Counter()
        for subset in partition.subsets:
            members.update(subset.numbers)
            assert subset.sum == sum(subset.numbers)

        expected = Counter(numbers)
        assert members == expected, (
            f"Multiset mismatch:\n"
            f"Missing: {expected - members}\n"
            f"Extra: {members - expected}"
        )
        assert partition.total == sum(numbers)

    @staticmethod
    def assert_sorted_descending(partition):
        """Assert that subset sums are non-increasing."""
        sums = partition.sums
        assert all(a >= b for a, b in zip(sums, sums[1:])), f"Not sorted: {sums}"


@pytest.fixture
def partition_checker():
    """Fixture providing partition invariant checks."""
    return PartitionChecker()
