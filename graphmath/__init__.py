"""Euclidean GCD and Dijkstra shortest distances over edge lists."""

from .algorithms import NON_EXISTENT, dijkstra, euclidean
from .datasets import load_edge_csv, wiki_graph
from .errors import InvalidArgument
from .fake_data import generate_random_weighted_graph

__version__ = "0.1.0"

__all__ = [
    "InvalidArgument",
    "NON_EXISTENT",
    "dijkstra",
    "euclidean",
    "generate_random_weighted_graph",
    "load_edge_csv",
    "wiki_graph",
]
