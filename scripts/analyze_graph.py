"""Analyze a graph's connected components from the command line.

Usage:
  # Graph from a JSON file ({"n": 6, "edges": [[1, 2], [2, 3]]})
  python scripts/analyze_graph.py --file graph.json --algorithm dfs

  # Graph typed inline, in the same "u v, u v" form as the web form
  python scripts/analyze_graph.py --n 6 --edges "1 2, 2 3, 4 5"

  # Send the request to a running server instead of analyzing locally
  python scripts/analyze_graph.py --n 6 --edges "1 2" --url http://localhost:8000/api/v1/analyze
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import httpx

from clusterlens.config import get_settings
from clusterlens.services.analysis_service import AnalysisService
from clusterlens.utils.exceptions import GraphAnalysisError
from clusterlens.utils.logging import setup_logging
from clusterlens.utils.text_processing import parse_edge_text


def _load_graph(args: argparse.Namespace) -> dict:
    if args.file:
        path = Path(args.file)
        if not path.exists():
            print(f"Error: file not found: {path}", file=sys.stderr)
            sys.exit(1)
        return json.loads(path.read_text())
    return {"n": args.n, "edges": parse_edge_text(args.edges or "")}


def _post(url: str, payload: dict) -> dict:
    with httpx.Client(timeout=60.0) as client:
        try:
            resp = client.post(url, json=payload)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
            print(e.response.text, file=sys.stderr)
            sys.exit(1)
        except httpx.HTTPError as e:
            print(f"Request failed: {e}", file=sys.stderr)
            sys.exit(1)
    return resp.json()


def main() -> None:
    parser = argparse.ArgumentParser(description="Find connected components of an undirected graph")
    parser.add_argument("--file", help="JSON file with 'n' and 'edges'")
    parser.add_argument("--n", type=int, help="Vertex count (vertices are 1..n)")
    parser.add_argument("--edges", help='Edges as "u v" pairs separated by commas')
    parser.add_argument("--algorithm", default="bfs", choices=["bfs", "dfs", "union-find"])
    parser.add_argument("--url", help="Analyze endpoint of a running server")
    parser.add_argument("--show-components", type=int, default=10, help="Components to list (0 for none)")
    args = parser.parse_args()

    setup_logging(log_level="WARNING", log_format="console")

    try:
        graph = _load_graph(args)
        payload = {**graph, "algorithm": args.algorithm}
        if args.url:
            data = _post(args.url, payload)
        else:
            service = AnalysisService(get_settings())
            response = service.analyze(graph.get("n"), graph.get("edges"), args.algorithm)
            data = response.model_dump(by_alias=True)
    except GraphAnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    print(f"=== {data['components']} connected component(s) ===")
    for key, value in data["statistics"].items():
        print(f"  {key}: {value}")

    listed = data["componentInfo"][: args.show_components]
    if listed:
        print()
        for index, component in enumerate(listed, start=1):
            preview = ", ".join(str(v) for v in component["nodes"][:12])
            more = " ..." if component["size"] > 12 else ""
            print(
                f"  #{index}: size={component['size']} edges={component['edges']} "
                f"density={component['density']:.3f} [{preview}{more}]"
            )


if __name__ == "__main__":
    main()
