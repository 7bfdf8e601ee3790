"""Graph and number theory algorithms."""

from .common.edge_utils import as_edge_arrays, build_adjacency_csr, graph_nodes
from .dijkstra import NON_EXISTENT, dijkstra, format_distance
from .euclidean import euclidean

__all__ = [
    "NON_EXISTENT",
    "as_edge_arrays",
    "build_adjacency_csr",
    "dijkstra",
    "euclidean",
    "format_distance",
    "graph_nodes",
]
