"""
Command line entry point for graphmath.

Usage:
    graphmath gcd 123612 13892347912
    graphmath dijkstra --source 1
    graphmath dijkstra --source 2 --edges edges.csv --html distances.html
    graphmath demo --html results.html
"""

import argparse
import logging
import sys

import numpy as np

from . import config
from .algorithms import dijkstra, euclidean, format_distance
from .datasets import load_edge_csv, wiki_graph
from .errors import InvalidArgument
from .fake_data import generate_random_weighted_graph
from .visualize import visualize_shortest_distances
from .visualize_html import export_figures_to_tabbed_html

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _distance_table(distances: np.ndarray) -> str:
    return "\n".join(f"{node_id}\t{format_distance(d)}" for node_id, d in enumerate(distances, start=1))


def _distance_row(distances: np.ndarray) -> str:
    return " ".join(format_distance(d) for d in distances)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphmath",
        description="Euclidean GCD and Dijkstra shortest distances.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s, env GRAPHMATH_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    gcd_parser = subparsers.add_parser("gcd", help="Greatest common divisor of two integers")
    gcd_parser.add_argument("a", type=int)
    gcd_parser.add_argument("b", type=int)

    dijkstra_parser = subparsers.add_parser("dijkstra", help="Shortest distances from a source node")
    dijkstra_parser.add_argument("--source", type=int, required=True, help="Source node id")
    dijkstra_parser.add_argument(
        "--edges",
        default=None,
        help="CSV file with a v1,v2,w header (default: bundled example graph)",
    )
    dijkstra_parser.add_argument("--html", default=None, help="Write a plot of the distances to this file")

    demo_parser = subparsers.add_parser("demo", help="Run the documented examples")
    demo_parser.add_argument(
        "--html",
        nargs="?",
        const=str(config.DEFAULT_HTML_OUTPUT),
        default=None,
        help="Export all demo plots to one tabbed page (default path: %(const)s)",
    )

    return parser


def run_gcd(args: argparse.Namespace) -> None:
    print(euclidean(args.a, args.b))


def run_dijkstra(args: argparse.Namespace) -> None:
    graph = load_edge_csv(args.edges) if args.edges else wiki_graph()
    distances = dijkstra(graph, args.source)
    print(_distance_table(distances))

    if args.html:
        fig = visualize_shortest_distances(
            graph, distances, args.source, title=f"Distances from node {args.source}", return_fig=True
        )
        export_figures_to_tabbed_html([(f"Source {args.source}", fig)], args.html)


def run_demo(args: argparse.Namespace) -> None:
    print("=== Euclidean GCD ===")
    for a, b in [(123612, 13892347912), (1000, 100)]:
        print(f"  gcd({a}, {b}) = {euclidean(a, b)}")

    print("\n=== Dijkstra on the example graph ===")
    graph = wiki_graph()
    runs = []
    for source in (1, 3):
        distances = dijkstra(graph, source)
        print(f"  from node {source}: {_distance_row(distances)}")
        runs.append((f"Example graph, source {source}", graph, distances, source))

    print("\n=== Dijkstra on a random graph ===")
    data = generate_random_weighted_graph()
    random_graph = {"v1": data["v1"], "v2": data["v2"], "w": data["w"]}
    print(f"  {data['n_nodes']} nodes, {data['n_edges']} edges")
    if data["n_edges"]:
        source = int(data["v1"][0])
        distances = dijkstra(random_graph, source)
        print(f"  from node {source}: {_distance_row(distances)}")
        runs.append((f"Random graph, source {source}", random_graph, distances, source))

    if args.html:
        print("\n=== Building Visualizations ===")
        figures = []
        for name, g, distances, source in runs:
            print(f"  Building: {name}")
            fig = visualize_shortest_distances(g, distances, source, title=name, return_fig=True)
            figures.append((name, fig))
        export_figures_to_tabbed_html(figures, args.html, title="graphmath demo")


COMMANDS = {
    "gcd": run_gcd,
    "dijkstra": run_dijkstra,
    "demo": run_demo,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        COMMANDS[args.command](args)
    except (InvalidArgument, OSError) as exc:
        logger.debug("Rejected arguments for %s", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
