"""Shared utilities reused by the algorithms."""

from .edge_utils import EDGE_FIELDS, as_edge_arrays, build_adjacency_csr, graph_nodes
from .scalars import as_integral_scalar

__all__ = [
    "EDGE_FIELDS",
    "as_edge_arrays",
    "as_integral_scalar",
    "build_adjacency_csr",
    "graph_nodes",
]
