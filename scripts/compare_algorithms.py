"""Time BFS, DFS and union-find on the same graph.

Usage:
  # Random graph with 50k vertices and 80k edges
  python scripts/compare_algorithms.py --n 50000 --m 80000 --seed 7

  # Graph from a JSON file ({"n": ..., "edges": [...]})
  python scripts/compare_algorithms.py --file graph.json
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

from clusterlens.config import get_settings
from clusterlens.services.analysis_service import AnalysisService
from clusterlens.utils.exceptions import GraphAnalysisError
from clusterlens.utils.logging import setup_logging


def random_edges(n: int, m: int, seed: int | None = None) -> list[list[int]]:
    rng = random.Random(seed)
    return [[rng.randint(1, n), rng.randint(1, n)] for _ in range(m)]


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare connectivity algorithm timings")
    parser.add_argument("--file", help="JSON file with 'n' and 'edges'")
    parser.add_argument("--n", type=int, default=10_000)
    parser.add_argument("--m", type=int, default=15_000, help="Random edge count")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    setup_logging(log_level="WARNING", log_format="console")

    if args.file:
        graph = json.loads(Path(args.file).read_text())
        n, edges = graph.get("n"), graph.get("edges")
    else:
        n, edges = args.n, random_edges(args.n, args.m, args.seed)

    try:
        results = AnalysisService(get_settings()).compare(n, edges)
    except GraphAnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    print(f"n={n} edges={len(edges)}")
    print(f"{'algorithm':<12} {'components':>10} {'time (ms)':>10}")
    for name, entry in results.items():
        print(f"{name:<12} {entry.components:>10} {entry.time:>10.3f}")


if __name__ == "__main__":
    main()
