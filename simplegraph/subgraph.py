"""Induced subgraphs, intersections and complete graphs."""

from __future__ import annotations

from itertools import combinations
from typing import Any, Callable, Iterable

from .graph import Graph, Vertex, edge, uniq


def clique(vertices: Iterable[Vertex]) -> Graph:
    """
    Complete graph on `vertices`: one edge per unordered pair of distinct vertices.

    Repeated input vertices collapse, so the edge list never holds duplicates.
    """
    vertices = list(vertices)
    edges = uniq(edge(u, v) for u, v in combinations(vertices, 2) if u != v)
    return vertices, edges


def delete_vertex(graph: Graph, vertex: Vertex) -> Graph:
    """Induced subgraph on every vertex except `vertex`. Absent vertices are a no-op."""
    v, e = graph
    return [x for x in v if x != vertex], [x for x in e if vertex not in x]


def delete_vertices_by(graph: Graph, condition: Callable[[Any], bool]) -> Graph:
    """
    Induced subgraph after removing every vertex that satisfies `condition`.

    Same result as intersecting the single-vertex deletions of each matching
    vertex, so deletion order does not matter.
    """
    v, e = graph
    doomed = {x for x in v if condition(x)}
    if not doomed:
        return list(v), list(e)
    return [x for x in v if x not in doomed], [x for x in e if doomed.isdisjoint(x)]


def intersection(g1: Graph, g2: Graph) -> Graph:
    """Vertices and edges present in both graphs. Vertex lists are treated as sets."""
    v1, e1 = g1
    v2, e2 = g2
    v2_set = set(v2)
    e2_set = set(e2)
    return uniq(x for x in v1 if x in v2_set), uniq(x for x in e1 if x in e2_set)
