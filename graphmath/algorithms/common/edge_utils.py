"""Utilities for normalising edge lists and building CSR adjacency arrays."""

from collections.abc import Mapping

import numpy as np

from ...errors import InvalidArgument

EDGE_FIELDS = ("v1", "v2", "w")


def _split_columns(graph) -> tuple:
    """Pull the origin, destination and weight columns out of any supported graph shape."""

    field_names = getattr(getattr(graph, "dtype", None), "names", None)
    if field_names:
        missing = [name for name in EDGE_FIELDS if name not in field_names]
        if missing:
            raise InvalidArgument(f"graph is missing fields: {', '.join(missing)}")
        return tuple(graph[name] for name in EDGE_FIELDS)

    # dict of columns, or anything DataFrame-like
    if isinstance(graph, Mapping) or hasattr(graph, "columns"):
        missing = [name for name in EDGE_FIELDS if name not in graph]
        if missing:
            raise InvalidArgument(f"graph is missing columns: {', '.join(missing)}")
        return tuple(graph[name] for name in EDGE_FIELDS)

    if graph is None or isinstance(graph, (str, bytes)):
        raise InvalidArgument(f"graph must be an edge list, got {type(graph).__name__}")

    try:
        table = np.asarray(graph, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"graph must hold numeric (v1, v2, w) triples: {exc}") from exc

    if table.size == 0:
        table = table.reshape(0, 3)
    if table.ndim != 2 or table.shape[1] != 3:
        raise InvalidArgument(f"graph must have shape (m, 3), got {table.shape}")

    return table[:, 0], table[:, 1], table[:, 2]


def _as_numeric_column(values, name: str) -> np.ndarray:
    column = np.asarray(values)
    if column.ndim != 1:
        raise InvalidArgument(f"graph column '{name}' must be one-dimensional")
    if column.dtype == np.bool_ or not np.issubdtype(column.dtype, np.number):
        raise InvalidArgument(f"graph column '{name}' must be numeric, got dtype {column.dtype}")
    if np.issubdtype(column.dtype, np.complexfloating):
        raise InvalidArgument(f"graph column '{name}' must be real-valued")
    return column


def _as_node_ids(values, name: str) -> np.ndarray:
    column = _as_numeric_column(values, name)
    if not np.issubdtype(column.dtype, np.integer):
        as_float = column.astype(np.float64)
        if not np.all(np.isfinite(as_float)) or not np.all(as_float == np.floor(as_float)):
            raise InvalidArgument(f"node ids in '{name}' must be integers")
    nodes = column.astype(np.int64)
    if nodes.size and nodes.min() < 1:
        raise InvalidArgument(f"node ids in '{name}' must be positive, got {int(nodes.min())}")
    return nodes


def as_edge_arrays(graph) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Normalise a graph into aligned ``(v1, v2, w)`` arrays of int64, int64, float64."""

    raw_v1, raw_v2, raw_w = _split_columns(graph)

    v1 = _as_node_ids(raw_v1, "v1")
    v2 = _as_node_ids(raw_v2, "v2")
    w = _as_numeric_column(raw_w, "w").astype(np.float64)

    if not (v1.shape[0] == v2.shape[0] == w.shape[0]):
        raise InvalidArgument(
            f"graph columns are not aligned: v1={v1.shape[0]}, v2={v2.shape[0]}, w={w.shape[0]}"
        )
    if np.any(np.isnan(w)):
        raise InvalidArgument("edge weights must not be NaN")
    if np.any(w < 0.0):
        raise InvalidArgument(f"edge weights must be non-negative, got {float(w.min())}")

    return v1, v2, w


def graph_nodes(graph) -> np.ndarray:
    """Return the sorted unique node ids appearing in any edge."""

    v1, v2, _ = as_edge_arrays(graph)
    return np.unique(np.concatenate([v1, v2]))


def build_adjacency_csr(
    v1: np.ndarray,
    v2: np.ndarray,
    w: np.ndarray,
    n_nodes: int,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Group edges by origin into CSR arrays indexed by ``node_id - 1``.

    Outgoing edges of node ``u`` (zero-based) are
    ``heads[indptr[u]:indptr[u + 1]]`` with matching ``weights``.
    """

    tails = v1 - 1
    order = np.argsort(tails, kind="stable")

    counts = np.bincount(tails, minlength=n_nodes)
    indptr = np.zeros(n_nodes + 1, dtype=np.int64)
    indptr[1:] = np.cumsum(counts)

    heads = (v2[order] - 1).astype(np.int64)
    weights = w[order].astype(np.float64)

    return indptr, heads, weights
