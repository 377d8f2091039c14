"""Edge subdivision through a shared new vertex."""

from __future__ import annotations

from typing import Iterable, List

from .graph import Edge, Graph, Vertex, ends_by_position, position_index, uniq


def subdivide(graph: Graph, edges_to_subdivide: Iterable[Edge], new_vertex: Vertex) -> Graph:
    """
    Replace each listed edge {a, b} of the graph with {a, new_vertex} and {b, new_vertex}.

    Listed edges that are not in the graph are ignored. The new vertex is added
    once; edges collapsing onto a single endpoint (when `new_vertex` already is
    one of them) are dropped and duplicates merged.
    """
    vertices, edges = graph
    edge_set = set(edges)
    targets = uniq(e for e in edges_to_subdivide if e in edge_set)
    if not targets:
        return list(vertices), list(edges)

    doomed = set(targets)
    index = position_index(vertices)
    spokes: List[Edge] = [
        frozenset((end, new_vertex)) for e in targets for end in ends_by_position(e, index)
    ]
    kept = [e for e in edges if e not in doomed]
    result = [e for e in uniq(spokes + kept) if len(e) == 2]
    return uniq(list(vertices) + [new_vertex]), result
