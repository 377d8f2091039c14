"""Ordering the edges of a cycle graph into traversal order."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .graph import Graph, ends_by_position, path_vertices, position_index
from .path_search import admit_all, ascending, find_path_by

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortedCycle:
    """Successful `cycle_sort`: same vertices, edges in traversal order."""

    graph: Graph
    ok = True


@dataclass(frozen=True)
class NotACycle:
    """Failed `cycle_sort`, with the reason the graph was rejected."""

    reason: str
    ok = False


CycleSortResult = Union[SortedCycle, NotACycle]


def _reject(reason: str) -> NotACycle:
    logger.debug("not a cycle: %s", reason)
    return NotACycle(reason)


def cycle_sort(graph: Graph) -> CycleSortResult:
    """
    Reorder the edges of a single simple cycle so consecutive edges share a vertex.

    The first edge {p, q} is held out; a path p -> q is searched over the
    remaining edges and must visit every vertex, after which the held-out edge
    closes the cycle. Disjoint unions of cycles, branching vertices and
    vertex/edge count mismatches come back as NotACycle.
    """
    v, e = graph
    n = len(v)
    if n != len(e):
        return _reject(f"{n} vertices but {len(e)} edges")
    if n == 0:
        return _reject("empty graph")

    ref = e[0]
    p, q = ends_by_position(ref, position_index(v))
    path = find_path_by((v, e[1:]), p, q, admit_all, ascending)
    if path is None:
        return _reject(f"no path closes edge {p!r}-{q!r}")

    visited = path_vertices(path, p)
    if len(path) != n - 1 or set(visited) != set(v):
        return _reject(f"cycle through {len(visited)} of {n} vertices")

    return SortedCycle((list(v), path + [ref]))
