#!/usr/bin/env python3
"""
Mate Suite Benchmark Runner

Runs the chess mate suite at multiple depths. Run it once more with
--no-prune to see how many nodes alpha-beta pruning saves.

Usage:
    python tools/run_benchmark.py [--depths 2,3] [--seed 7] [--no-prune] [--verbose]
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game_search.utils.log import setup_logger
from game_search.utils.testing import MATE_POSITIONS, evaluate_position


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(depths: list[int], seed: int | None = None, prune: bool = True, verbose: bool = False):
    """
    Run the mate suite at multiple depths.

    Args:
        depths: List of depths to test
        seed: Tie-break seed
        prune: Enable alpha-beta cutoffs
        verbose: If True, print detailed results for each position
    """
    print("=" * 80)
    print("MATE SUITE BENCHMARK - game_search")
    print("=" * 80)
    print(f"Search: Minimax {'with' if prune else 'without'} Alpha-Beta Pruning")
    print(f"Depths: {depths}")
    print(f"Positions: {len(MATE_POSITIONS)}")
    print("=" * 80)

    all_results = []

    for depth in depths:
        print(f"\n{'=' * 80}")
        print(f"DEPTH {depth}")
        print("=" * 80)

        results = [
            evaluate_position(position, depth, seed=seed, prune=prune, verbose=verbose)
            for position in MATE_POSITIONS
        ]

        correct = sum(1 for r in results if r.correct)
        total_time = sum(r.time_taken for r in results)
        total_nodes = sum(r.nodes_searched for r in results)
        nodes_per_sec = total_nodes / total_time if total_time > 0 else 0

        all_results.append({
            'depth': depth,
            'score': correct,
            'total': len(results),
            'total_time': total_time,
            'total_nodes': total_nodes,
            'nodes_per_sec': nodes_per_sec,
            'results': results,
        })

        print(f"\nResults at depth {depth}:")
        print(f"  Correct: {correct}/{len(results)}")
        print(f"  Total time: {format_time(total_time)}")
        print(f"  Total nodes: {total_nodes:,}")
        print(f"  Nodes/sec: {nodes_per_sec:,.0f}")

        failed = [r for r in results if not r.correct]
        if failed and verbose:
            print(f"\n  Failed positions:")
            for r in failed:
                print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move or '-'}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Correct':<12} {'Time':<12} {'Nodes':<15} {'Nodes/sec':<15}")
    print("-" * 80)

    for r in all_results:
        print(f"{r['depth']:<8} {r['score']}/{r['total']:<10} {format_time(r['total_time']):<12} "
              f"{r['total_nodes']:<15,} {r['nodes_per_sec']:>12,.0f}")

    print("=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the chess mate suite at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="2,3",
        help="Comma-separated list of depths to test (default: 2,3)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Tie-break seed for reproducible runs"
    )
    parser.add_argument(
        "--no-prune",
        action="store_true",
        help="Disable alpha-beta pruning (exhaustive minimax)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log search values at DEBUG level"
    )

    args = parser.parse_args()
    setup_logger(debug=args.debug)

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(depths, seed=args.seed, prune=not args.no_prune, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n\nError running benchmark: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
