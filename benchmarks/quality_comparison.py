#!/usr/bin/env python3
"""
Partition quality benchmarks for the largest differencing method.

This script compares the final spread and running time of Karmarkar-Karp
against simple round-robin and greedy baselines across input sizes,
partition counts and value distributions.
"""

import argparse
import heapq
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from typing import Dict, List, Callable
import sys
sys.path.append('..')

from ldm import karmarkar_karp


def round_robin_spread(numbers: List[int], k: int) -> int:
    """Deal numbers out in input order."""
    sums = [0] * k
    for i, number in enumerate(numbers):
        sums[i % k] += number
    return max(sums) - min(sums)


def greedy_spread(numbers: List[int], k: int) -> int:
    """Place each number, largest first, on the currently lightest subset."""
    sums = [(0, i) for i in range(k)]
    for number in sorted(numbers, reverse=True):
        total, i = heapq.heappop(sums)
        heapq.heappush(sums, (total + number, i))
    totals = [total for total, _ in sums]
    return max(totals) - min(totals)


def kk_spread(numbers: List[int], k: int) -> int:
    return karmarkar_karp(numbers, k).difference


class QualityBenchmark:
    """
    Spread and timing benchmark suite for partitioning algorithms.
    """

    def __init__(self, seed: int = 42):
        self.algorithms: Dict[str, Callable[[List[int], int], int]] = {
            'round_robin': round_robin_spread,
            'greedy': greedy_spread,
            'karmarkar_karp': kk_spread,
        }
        self.seed = seed
        self.results = []

    def generate_test_case(self, case_type: str, size: int) -> List[int]:
        """
        Generate input numbers for a given distribution.

        Args:
            case_type: Name of the distribution
            size: Number of values

        Returns:
            List of non-negative integers
        """
        rng = np.random.RandomState(self.seed)

        if case_type == 'uniform':
            data = rng.randint(1, 10 ** 6, size=size)
        elif case_type == 'exponential':
            data = np.ceil(rng.exponential(1000.0, size=size))
        elif case_type == 'powers_of_two':
            data = 2 ** rng.randint(0, 20, size=size)
        elif case_type == 'gpu_workloads':
            data = rng.choice([1, 2, 4], size=size)
        else:
            raise ValueError(f"Unknown case type: {case_type}")

        return [int(x) for x in data]

    def run_single_benchmark(self, test_name: str, numbers: List[int], k: int) -> dict:
        """Run every algorithm on one input."""
        result = {'test_name': test_name, 'size': len(numbers), 'k': k,
                  'mean_load': sum(numbers) / k}

        for alg_name, func in self.algorithms.items():
            start = time.perf_counter()
            spread = func(numbers, k)
            result[f'{alg_name}_time'] = time.perf_counter() - start
            result[f'{alg_name}_spread'] = spread

        return result

    def run_comprehensive_benchmark(self, sizes: List[int], ks: List[int]) -> pd.DataFrame:
        """
        Run benchmark across all test cases, sizes and partition counts.

        Returns:
            DataFrame with all benchmark results
        """
        test_cases = ['uniform', 'exponential', 'powers_of_two', 'gpu_workloads']

        total_tests = len(test_cases) * len(sizes) * len(ks)
        print("Running partition quality benchmark...")
        print(f"Test cases: {len(test_cases)}")
        print(f"Sizes: {sizes}")
        print(f"Partition counts: {ks}")
        print(f"Total combinations: {total_tests}")
        print()

        test_count = 0
        for case_type in test_cases:
            for size in sizes:
                numbers = self.generate_test_case(case_type, size)
                for k in ks:
                    test_count += 1
                    test_name = f"{case_type}_{size}_k{k}"
                    print(f"[{test_count}/{total_tests}] Running {test_name}...")

                    result = self.run_single_benchmark(test_name, numbers, k)
                    result['case_type'] = case_type
                    self.results.append(result)

        return pd.DataFrame(self.results)

    def analyze_results(self, df: pd.DataFrame) -> None:
        """
        Display mean spread and time per algorithm.

        Args:
            df: DataFrame with benchmark results
        """
        print("\n" + "=" * 80)
        print("PARTITION QUALITY ANALYSIS")
        print("=" * 80)

        print("\nMEAN SPREAD BY CASE TYPE:")
        print("-" * 60)
        spread_cols = [f'{alg}_spread' for alg in self.algorithms]
        print(df.groupby('case_type')[spread_cols].mean().to_string(float_format='{:.1f}'.format))

        print("\nMEAN TIME (ms) BY SIZE:")
        print("-" * 60)
        time_cols = [f'{alg}_time' for alg in self.algorithms]
        print((df.groupby('size')[time_cols].mean() * 1000).to_string(float_format='{:.3f}'.format))

        kk_wins = (df['karmarkar_karp_spread'] <= df['greedy_spread']).mean()
        print(f"\nKarmarkar-Karp at least as balanced as greedy in {kk_wins:.0%} of cases")

    def plot_results(self, df: pd.DataFrame, save_plots: bool = True) -> None:
        """Plot relative spread against input size."""
        plt.figure(figsize=(10, 6))

        for alg in self.algorithms:
            relative = df[f'{alg}_spread'] / df['mean_load']
            per_size = relative.groupby(df['size']).median()
            plt.plot(per_size.index, per_size.values, marker='o', label=alg)

        plt.xlabel('Input Size')
        plt.ylabel('Median Relative Spread (log scale)')
        plt.title('Partition Balance vs Input Size')
        plt.xscale('log')
        plt.yscale('symlog', linthresh=1e-6)
        plt.legend()
        plt.grid(True, alpha=0.3)

        if save_plots:
            plt.savefig('spread_vs_size.png', dpi=300, bbox_inches='tight')
        plt.show()


def main():
    """Run the partition quality benchmark suite."""
    parser = argparse.ArgumentParser(description="Compare partition balance across algorithms")
    parser.add_argument("--sizes", type=int, nargs="+", default=[16, 128, 1024, 8192])
    parser.add_argument("--ks", type=int, nargs="+", default=[2, 3, 4, 8])
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--no-plots", action="store_true")
    args = parser.parse_args()

    print("LARGEST DIFFERENCING METHOD LIBRARY - QUALITY BENCHMARK")
    print("=" * 60)

    benchmark = QualityBenchmark(seed=args.seed)
    results_df = benchmark.run_comprehensive_benchmark(args.sizes, args.ks)

    results_df.to_csv('quality_benchmark_results.csv', index=False)
    print("\nResults saved to quality_benchmark_results.csv")

    benchmark.analyze_results(results_df)

    if not args.no_plots:
        benchmark.plot_results(results_df)

    print("\n" + "=" * 60)
    print("Quality benchmark completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
