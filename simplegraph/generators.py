"""Small graph families used as fixtures and by the `generate` CLI command."""

from __future__ import annotations

from typing import Dict, Tuple

from .graph import Graph, canonical_pair, edge


class GraphGenerators:
    """Build undirected graphs as (vertices, edges) tuples."""

    @staticmethod
    def _finalize(vertices, pairs) -> Graph:
        edges = sorted({edge(u, v) for u, v in pairs}, key=canonical_pair)
        return list(vertices), edges

    @staticmethod
    def cycle_graph(n: int) -> Graph:
        if n < 3:
            raise ValueError("Cycle requires at least 3 vertices")
        vertices = list(range(n))
        return GraphGenerators._finalize(vertices, [(i, (i + 1) % n) for i in vertices])

    @staticmethod
    def path_graph(n: int) -> Graph:
        if n < 1:
            raise ValueError("Path requires at least 1 vertex")
        vertices = list(range(n))
        return GraphGenerators._finalize(vertices, [(i, i + 1) for i in range(n - 1)])

    @staticmethod
    def complete_graph(n: int) -> Graph:
        vertices = list(range(n))
        return GraphGenerators._finalize(vertices, [(i, j) for i in range(n) for j in range(i + 1, n)])

    @staticmethod
    def tetrahedron() -> Graph:
        return GraphGenerators.complete_graph(4)

    @staticmethod
    def cube() -> Graph:
        vertices = list(range(8))
        pairs = set()
        for u in vertices:
            for bit in (1, 2, 4):
                v = u ^ bit
                pairs.add((min(u, v), max(u, v)))
        return GraphGenerators._finalize(vertices, pairs)

    @staticmethod
    def octahedron() -> Graph:
        vertices = list(range(6))
        forbidden = {(0, 1), (2, 3), (4, 5)}
        pairs = [(u, v) for u in vertices for v in vertices if u < v and (u, v) not in forbidden]
        return GraphGenerators._finalize(vertices, pairs)

    @staticmethod
    def triangular_prism() -> Graph:
        vertices = list(range(6))
        pairs = [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3), (0, 3), (1, 4), (2, 5)]
        return GraphGenerators._finalize(vertices, pairs)


def disjoint_union(g1: Graph, g2: Graph, tags: Tuple[str, str] = ("a", "b")) -> Graph:
    """Union of two graphs with vertices relabelled (tag, v) so they cannot collide."""
    left, right = tags
    if left == right:
        raise ValueError("disjoint_union needs two distinct tags")
    vertices = [(left, x) for x in g1[0]] + [(right, x) for x in g2[0]]
    edges = [frozenset((left, x) for x in e) for e in g1[1]]
    edges += [frozenset((right, x) for x in e) for e in g2[1]]
    return vertices, edges


GENERATORS: Dict[str, object] = {
    "cycle": GraphGenerators.cycle_graph,
    "path": GraphGenerators.path_graph,
    "complete": GraphGenerators.complete_graph,
    "tetrahedron": GraphGenerators.tetrahedron,
    "cube": GraphGenerators.cube,
    "octahedron": GraphGenerators.octahedron,
    "triangular_prism": GraphGenerators.triangular_prism,
}

SIZED_GENERATORS = {"cycle", "path", "complete"}


__all__ = ["GraphGenerators", "disjoint_union", "GENERATORS", "SIZED_GENERATORS"]
