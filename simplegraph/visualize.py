"""
Draw a graph with an optional highlighted path or cycle.

Positions come from a networkx spring layout with a fixed seed so repeated
renders of the same graph look identical.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import matplotlib
import networkx as nx
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .graph import Edge, Graph
from .model_io import to_networkx


def layout(graph: Graph, seed: int = 7) -> Dict[Any, Tuple[float, float]]:
    G = to_networkx(graph)
    if G.number_of_nodes() == 0:
        return {}
    return {k: (float(x), float(y)) for k, (x, y) in nx.spring_layout(G, seed=seed).items()}


def plot_graph(
    graph: Graph,
    path: Optional[List[Edge]] = None,
    ax: Any = None,
    title: Optional[str] = None,
) -> Any:
    """Draw `graph` on `ax` (a new Figure if None); path edges are colored in order."""
    if ax is None:
        fig = Figure(figsize=(6, 6))
        FigureCanvasAgg(fig)
        fig.patch.set_facecolor("white")
        ax = fig.add_subplot(111)
    pos = layout(graph)
    vertices, edges = graph

    # Light background for every edge
    for e in edges:
        u, v = tuple(e)
        p0, p1 = pos[u], pos[v]
        ax.plot([p0[0], p1[0]], [p0[1], p1[1]], color="#bbbbbb", linewidth=1.0, linestyle="--", zorder=1)

    if path:
        colors = matplotlib.colormaps.get_cmap("viridis")
        k = max(len(path) - 1, 1)
        for idx, e in enumerate(path):
            u, v = tuple(e)
            p0, p1 = pos[u], pos[v]
            ax.plot([p0[0], p1[0]], [p0[1], p1[1]], color=colors(idx / k), linewidth=2.5, zorder=2)

    if vertices:
        xs, ys = zip(*(pos[v] for v in vertices))
        ax.scatter(xs, ys, color="black", s=20, zorder=3)
        for v in vertices:
            x, y = pos[v]
            ax.text(x, y, str(v), color="#d1342b", fontsize=9, weight="bold", zorder=4)

    if title:
        ax.set_title(title)
    ax.set_axis_off()
    return ax


def save_plot(graph: Graph, path: Optional[List[Edge]], out: str, title: Optional[str] = None) -> None:
    ax = plot_graph(graph, path, title=title)
    fig = ax.figure
    fig.tight_layout()
    fig.savefig(out)
