"""
Test suite for the Largest Differencing Method Library.

This package contains tests for all components of the partitioning
library, including unit tests and integration tests.

Test Structure:
- test_core.py: Tests for Subset and Partition
- test_algorithms.py: Tests for the Karmarkar-Karp driver and helpers
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run specific test file
    pytest tests/test_core.py

    # Run tests with coverage
    pytest --cov=ldm

    # Run only fast tests
    pytest -m "not slow"
"""

__version__ = "1.0.0"
