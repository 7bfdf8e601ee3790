"""Bundled example graph and edge-list file loading."""

import logging
from pathlib import Path

import numpy as np

from .algorithms.common.edge_utils import EDGE_FIELDS
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

# Directed version of the 6-node example from the Wikipedia article on Dijkstra's algorithm.
_WIKI_V1 = (1, 1, 1, 2, 2, 2, 3, 3, 3, 3, 4, 4, 4, 5, 5, 6, 6, 6)
_WIKI_V2 = (2, 3, 6, 1, 3, 4, 1, 2, 4, 6, 2, 3, 5, 4, 6, 1, 3, 5)
_WIKI_W = (7, 9, 14, 7, 10, 15, 9, 10, 11, 2, 15, 11, 6, 6, 9, 14, 2, 9)


def wiki_graph() -> dict[str, np.ndarray]:
    """Return a fresh copy of the 18-edge example graph as ``v1``/``v2``/``w`` columns."""

    return dict(
        v1=np.array(_WIKI_V1, dtype=np.int64),
        v2=np.array(_WIKI_V2, dtype=np.int64),
        w=np.array(_WIKI_W, dtype=np.float64),
    )


def load_edge_csv(path: str | Path) -> np.ndarray:
    """Read a comma-separated edge list with a ``v1,v2,w`` header into a structured array."""

    table = np.genfromtxt(path, delimiter=",", names=True, dtype=np.float64, encoding="utf-8")
    field_names = table.dtype.names or ()
    missing = [name for name in EDGE_FIELDS if name not in field_names]
    if missing:
        raise InvalidArgument(f"{path}: missing columns {', '.join(missing)}")

    # a single data row comes back zero-dimensional
    table = np.atleast_1d(table)

    # genfromtxt reads unparsable or empty cells as NaN
    for name in EDGE_FIELDS:
        bad_rows = np.flatnonzero(np.isnan(table[name]))
        if bad_rows.size:
            # +2: one-based lines plus the header
            raise InvalidArgument(
                f"{path}: non-numeric or empty value in column '{name}' on line {int(bad_rows[0]) + 2}"
            )

    logger.debug("Loaded %d edges from %s", table.shape[0], path)
    return table
