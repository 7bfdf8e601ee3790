"""Plotly-based visualization of shortest distances on a graph."""

import networkx as nx
import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from . import config
from .algorithms.common.edge_utils import as_edge_arrays
from .algorithms.dijkstra import format_distance


def _build_digraph(v1: np.ndarray, v2: np.ndarray, w: np.ndarray) -> nx.DiGraph:
    G = nx.DiGraph()
    G.add_nodes_from(int(n) for n in np.unique(np.concatenate([v1, v2])))
    for u, v, weight in zip(v1, v2, w):
        u, v = int(u), int(v)
        # keep the cheapest of parallel edges
        if G.has_edge(u, v) and G[u][v]["weight"] <= weight:
            continue
        G.add_edge(u, v, weight=float(weight))
    return G


def _build_edge_traces(G: nx.DiGraph, pos: dict) -> list[go.Scatter]:
    edge_x, edge_y, mid_x, mid_y, edge_text = [], [], [], [], []
    for u, v, data in G.edges(data=True):
        x0, y0 = pos[u]
        x1, y1 = pos[v]
        edge_x += [x0, x1, None]
        edge_y += [y0, y1, None]

        # shift the label sideways so u->v and v->u do not overlap
        dx, dy = x1 - x0, y1 - y0
        length = float(np.hypot(dx, dy)) or 1.0
        mid_x.append((x0 + x1) / 2.0 - 0.06 * dy / length)
        mid_y.append((y0 + y1) / 2.0 + 0.06 * dx / length)
        edge_text.append(format_distance(data["weight"]))

    edge_lines_trace = go.Scatter(
        x=edge_x,
        y=edge_y,
        mode="lines",
        line=dict(width=1.5, color="lightgray"),
        hoverinfo="none",
        showlegend=False,
    )

    edge_label_trace = go.Scatter(
        x=mid_x,
        y=mid_y,
        mode="text",
        text=edge_text,
        textfont=dict(size=10, color="black"),
        hoverinfo="text",
        showlegend=False,
        name="weight",
    )

    return [edge_lines_trace, edge_label_trace]


def visualize_shortest_distances(
    graph,
    distances: np.ndarray,
    source: int,
    node_size: int = config.NODE_SIZE,
    title: str = "Shortest distances",
    return_fig: bool = False,
) -> go.Figure | None:
    """Draw the graph with nodes coloured by distance next to a per-node bar chart."""

    v1, v2, w = as_edge_arrays(graph)
    G = _build_digraph(v1, v2, w)
    pos = nx.circular_layout(G)

    nodes = sorted(G.nodes())
    node_dist = np.array([distances[n - 1] for n in nodes], dtype=float)
    reachable = np.isfinite(node_dist)

    reachable_nodes = [n for n, ok in zip(nodes, reachable) if ok]
    unreachable_nodes = [n for n, ok in zip(nodes, reachable) if not ok]

    reachable_trace = go.Scatter(
        x=[pos[n][0] for n in reachable_nodes],
        y=[pos[n][1] for n in reachable_nodes],
        mode="markers+text",
        marker=dict(
            size=node_size,
            color=node_dist[reachable],
            colorscale="Viridis",
            colorbar=dict(title="distance", x=0.55),
            line=dict(
                width=[3 if n == source else 0.5 for n in reachable_nodes],
                color="black",
            ),
            symbol=["star" if n == source else "circle" for n in reachable_nodes],
        ),
        text=[str(n) for n in reachable_nodes],
        textposition="top center",
        hovertext=[f"node {n}: {format_distance(distances[n - 1])}" for n in reachable_nodes],
        hoverinfo="text",
        name="reachable",
    )

    unreachable_trace = go.Scatter(
        x=[pos[n][0] for n in unreachable_nodes],
        y=[pos[n][1] for n in unreachable_nodes],
        mode="markers+text",
        marker=dict(size=node_size, color="lightgray", line=dict(width=0.5, color="black")),
        text=[str(n) for n in unreachable_nodes],
        textposition="top center",
        hovertext=[f"node {n}: unreachable" for n in unreachable_nodes],
        hoverinfo="text",
        name="unreachable",
    )

    node_ids = np.arange(1, distances.shape[0] + 1)
    bar_heights = np.where(np.isfinite(distances), distances, 0.0)
    bar_trace = go.Bar(
        x=node_ids,
        y=bar_heights,
        text=[format_distance(d) for d in distances],
        textposition="outside",
        marker=dict(color=["#4CAF50" if np.isfinite(d) else "lightgray" for d in distances]),
        showlegend=False,
        hovertemplate="node %{x}: %{text}<extra></extra>",
    )

    fig = make_subplots(
        rows=1,
        cols=2,
        column_widths=[0.6, 0.4],
        subplot_titles=(f"Graph (source {source})", "Distance per node"),
    )

    for trace in _build_edge_traces(G, pos):
        fig.add_trace(trace, row=1, col=1)
    fig.add_trace(reachable_trace, row=1, col=1)
    if unreachable_nodes:
        fig.add_trace(unreachable_trace, row=1, col=1)
    fig.add_trace(bar_trace, row=1, col=2)

    fig.update_xaxes(visible=False, row=1, col=1)
    fig.update_yaxes(visible=False, scaleanchor="x", scaleratio=1, row=1, col=1)
    fig.update_xaxes(title_text="node", dtick=1, row=1, col=2)
    fig.update_yaxes(title_text="distance", row=1, col=2)

    fig.update_layout(
        title=title,
        legend=dict(orientation="h", yanchor="bottom", y=-0.15, xanchor="left", x=0.0),
        height=config.FIGURE_HEIGHT,
    )

    if return_fig:
        return fig
    fig.show(renderer="browser")
