#!/usr/bin/env python3
"""
Basic usage examples for the Largest Differencing Method Library.

This script spreads synthetic workloads of size 1, 2 and 4 across a
varying number of GPUs and prints the per-GPU load that the Karmarkar-Karp
heuristic chooses.
"""

import argparse
import logging
import numpy as np
from typing import List

# Import the partitioning library
import sys
sys.path.append('..')

from ldm import (
    karmarkar_karp,
    partition_summary,
    BatchPartitioner
)

WORKLOADS = [1, 2, 4]


def build_test_cases(sizes: List[int]) -> List[List[int]]:
    """
    Build the repeating and lopsided workload cases for each size.

    Args:
        sizes: Number of workloads per case

    Returns:
        Three cases per size: 1,2,4 repeating; mostly 4s; mostly 1s
    """
    test_cases = []
    print("Building test cases...")

    for size in sizes:
        print(f"Generating test cases for size {size}")
        test_cases.append([WORKLOADS[i % 3] for i in range(size)])

        # Lots of 4s and just one 1 and one 2
        print("Generating corner case 1")
        test_cases.append([4] * (size - 2) + [1, 2])

        # Lots of 1s and just one 2 and one 4
        print("Generating corner case 2")
        test_cases.append([1] * size + [2, 4])

    print("Test cases built.")
    return test_cases


def demonstrate_gpu_allocation(test_cases: List[List[int]], gpu_counts: List[int],
                               show_numbers: bool = False):
    """Partition every case across every GPU count."""
    print("=" * 60)
    print("DEMONSTRATION: GPU Allocation")
    print("=" * 60)

    for gpu_count in gpu_counts:
        print(f"GPU count: {gpu_count}")
        print("Test cases:")
        for test_case in test_cases:
            print("\tTest case: " + " ".join(str(n) for n in test_case))
            partition = karmarkar_karp(test_case, gpu_count)
            print(f"\tResult: {partition}")
            if show_numbers:
                for i, subset in enumerate(partition.subsets):
                    print(f"\t  GPU {i}: {subset}")
    print()


def demonstrate_batch_statistics(test_cases: List[List[int]], gpu_counts: List[int]):
    """Show spread statistics per GPU count."""
    print("=" * 60)
    print("DEMONSTRATION: Batch Statistics")
    print("=" * 60)

    print(f"{'GPUs':<6} {'Cases':<8} {'Avg diff':<10} {'Max diff':<10} {'Min diff':<10}")
    print("-" * 46)

    for gpu_count in gpu_counts:
        partitioner = BatchPartitioner(k=gpu_count)
        partitioner.partition_batch(test_cases)
        stats = partitioner.get_statistics()

        print(f"{gpu_count:<6} {stats['operation_count']:<8} "
              f"{stats['average_difference']:<10.2f} {stats['max_difference']:<10} "
              f"{stats['min_difference']:<10}")
    print()


def demonstrate_random_workloads(gpu_counts: List[int], seed: int):
    """Partition random workloads and report relative spread."""
    print("=" * 60)
    print("DEMONSTRATION: Random Workloads")
    print("=" * 60)

    rng = np.random.RandomState(seed)
    data = rng.randint(1, 1000, size=1000)
    print(f"1000 random workloads in [1, 1000), total {int(data.sum())}")
    print()

    for gpu_count in gpu_counts:
        summary = partition_summary(karmarkar_karp(data, gpu_count))
        print(f"GPUs: {gpu_count:<3} difference: {summary['difference']:<6} "
              f"relative spread: {summary['relative_spread']:.2e}")
    print()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Spread workloads across GPUs with Karmarkar-Karp")
    parser.add_argument("--sizes", type=int, nargs="+", default=[8, 16, 32, 64, 128, 256],
                        help="number of workloads per test case")
    parser.add_argument("--gpu-counts", type=int, nargs="+", default=[1, 2, 3, 4, 5, 6],
                        help="GPU counts to partition across")
    parser.add_argument("--seed", type=int, default=42,
                        help="seed for the random workload demonstration")
    parser.add_argument("--show-numbers", action="store_true",
                        help="print the workloads assigned to each GPU")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging from the library")
    return parser.parse_args(argv)


def main(argv=None):
    """Run all demonstrations."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    print("LARGEST DIFFERENCING METHOD LIBRARY - BASIC USAGE EXAMPLES")
    print("=" * 60)
    print()

    test_cases = build_test_cases(args.sizes)
    demonstrate_gpu_allocation(test_cases, args.gpu_counts, args.show_numbers)
    demonstrate_batch_statistics(test_cases, args.gpu_counts)
    demonstrate_random_workloads(args.gpu_counts, args.seed)

    print("=" * 60)
    print("All demonstrations completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
