"""Synthetic weighted directed graph generation utilities."""

from typing import Dict

import networkx as nx
import numpy as np

from . import config


def generate_random_weighted_graph(
    n_nodes: int = config.RANDOM_GRAPH_NODES,
    edge_probability: float = config.RANDOM_GRAPH_EDGE_PROBABILITY,
    weight_low: float = config.RANDOM_GRAPH_WEIGHT_LOW,
    weight_high: float = config.RANDOM_GRAPH_WEIGHT_HIGH,
    integer_weights: bool = True,
    seed: int = config.RANDOM_GRAPH_SEED,
) -> Dict[str, object]:
    """Generate a random directed graph with node ids ``1..n_nodes`` and non-negative weights."""

    rng = np.random.default_rng(seed)

    # =============== 1. Random directed topology ===============
    G_raw = nx.gnp_random_graph(n_nodes, edge_probability, seed=seed, directed=True)
    G = nx.relabel_nodes(G_raw, {node: node + 1 for node in G_raw.nodes()})

    # =============== 2. Edge weights ===============
    edges = sorted(G.edges())
    m = len(edges)

    if integer_weights:
        weights = rng.integers(int(weight_low), int(weight_high) + 1, size=m).astype(float)
    else:
        weights = rng.uniform(weight_low, weight_high, size=m)

    edge_v1 = np.zeros(m, dtype=np.int64)
    edge_v2 = np.zeros(m, dtype=np.int64)
    for k, (u, v) in enumerate(edges):
        edge_v1[k], edge_v2[k] = u, v
        G[u][v]["weight"] = float(weights[k])

    # =============== 3. Pack everything into one dict ===============
    return dict(
        graph=G,
        v1=edge_v1,
        v2=edge_v2,
        w=weights,
        n_nodes=n_nodes,
        n_edges=m,
    )
