"""Dijkstra single-source shortest distances over an edge list."""

import logging

import numpy as np
from numba import njit

from ..errors import InvalidArgument
from .common.edge_utils import as_edge_arrays, build_adjacency_csr
from .common.scalars import as_integral_scalar

logger = logging.getLogger(__name__)

# Distance reported for ids in 1..max_node_id that no edge mentions.
NON_EXISTENT = np.nan


def format_distance(value: float) -> str:
    """Render one distance as text: ``NA`` for non-existent, ``Inf`` for unreachable."""

    if np.isnan(value):
        return "NA"
    if np.isinf(value):
        return "Inf"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4g}"


@njit
def _dijkstra_distances(
    indptr: np.ndarray,
    heads: np.ndarray,
    weights: np.ndarray,
    source: int,
) -> np.ndarray:
    """Compute distances from ``source`` using O(n^2) linear-scan Dijkstra."""

    n_nodes = indptr.shape[0] - 1
    dist = np.full(n_nodes, np.inf)
    visited = np.zeros(n_nodes, dtype=np.bool_)

    dist[source] = 0.0

    for _ in range(n_nodes):
        u = -1
        min_val = np.inf
        for i in range(n_nodes):
            if (not visited[i]) and (dist[i] < min_val):
                min_val = dist[i]
                u = i

        # Everything left is unreachable from the source.
        if u == -1:
            break

        for k in range(indptr[u], indptr[u + 1]):
            v = heads[k]
            if visited[v]:
                continue
            alt = dist[u] + weights[k]
            if alt < dist[v]:
                dist[v] = alt

        visited[u] = True

    return dist


def dijkstra(graph, init_node) -> np.ndarray:
    """
    Shortest distances from ``init_node`` to every node id in ``1..max_node_id``.

    Args:
        graph: Directed edge list with origin ``v1``, destination ``v2`` and
            non-negative weight ``w``. Either a mapping of columns, a
            structured array, an ``(m, 3)`` array or a sequence of triples.
        init_node: Source node id; must appear in some edge.

    Returns:
        Float array where position ``i`` is the distance to node ``i + 1``:
        ``0`` for the source, ``inf`` for unreachable nodes and
        ``NON_EXISTENT`` (NaN) for ids no edge mentions.

    Raises:
        InvalidArgument: malformed graph, negative weights, or a source that
            is not a scalar node id of the graph.
    """

    v1, v2, w = as_edge_arrays(graph)
    source = as_integral_scalar(init_node, "init_node")

    nodes = np.unique(np.concatenate([v1, v2]))
    if not np.any(nodes == source):
        raise InvalidArgument(f"init_node {source} is not a node of the graph")

    n_nodes = int(nodes[-1])
    logger.debug(
        "Running Dijkstra from node %d: %d nodes, %d edges, max id %d",
        source, nodes.size, v1.shape[0], n_nodes,
    )

    indptr, heads, weights = build_adjacency_csr(v1, v2, w, n_nodes)
    distances = _dijkstra_distances(indptr, heads, weights, source - 1)

    exists = np.zeros(n_nodes, dtype=np.bool_)
    exists[nodes - 1] = True
    distances[~exists] = NON_EXISTENT

    unreachable = int(np.count_nonzero(np.isinf(distances)))
    if unreachable:
        logger.debug("%d node(s) unreachable from node %d", unreachable, source)

    return distances
