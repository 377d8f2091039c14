"""
Constrained path search.

`find_path_by` walks from a start vertex towards a target with a depth-first
search that never revisits a vertex on the current path. Two caller-supplied
callables steer it:

- `admit(v)` decides whether an intermediate vertex may be entered. The target
  is always admitted; the start vertex is never checked.
- `tie_break(a, b)` answers "may `a` come before `b`?". Among the admissible
  neighbours of the current vertex the search steps to the first one that no
  other candidate strictly precedes.

On a dead end the current vertex is deleted from a private working graph and
the search backs up one step. The working graph shrinks on every backtrack,
so the search always terminates, and a vertex proven to be a dead end is
never tried again through another route.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence

from .graph import Edge, Graph, Vertex, edge, order_key, other_endpoint
from .subgraph import delete_vertex

logger = logging.getLogger(__name__)

Admit = Callable[[Any], bool]
TieBreak = Callable[[Any, Any], bool]


def ascending(a: Vertex, b: Vertex) -> bool:
    """Default order: ints before strings (by type name), natural order within a type.

    Values of one type that cannot be compared keep their edge-list order.
    """
    try:
        return order_key(a) <= order_key(b)
    except TypeError:
        return True


def descending(a: Vertex, b: Vertex) -> bool:
    try:
        return order_key(a) >= order_key(b)
    except TypeError:
        return True


_NO_CANDIDATE = object()


def admit_all(_vertex: Vertex) -> bool:
    return True


def _best(candidates: Sequence[Vertex], tie_break: TieBreak) -> Any:
    """First candidate that no later candidate strictly precedes (stable minimum)."""
    if not candidates:
        return _NO_CANDIDATE
    best = candidates[0]
    for c in candidates[1:]:
        if not tie_break(best, c):
            best = c
    return best


def _next_vertex(
    edges: List[Edge],
    prev: Vertex,
    target: Vertex,
    admit: Admit,
    tie_break: TieBreak,
    used: set,
) -> Any:
    candidates = []
    for e in edges:
        if prev not in e:
            continue
        w = other_endpoint(e, prev)
        if w in used:
            continue
        if w == target or admit(w):
            candidates.append(w)
    return _best(candidates, tie_break)


def _chain(vertices: List[Vertex]) -> List[Edge]:
    return [edge(u, v) for u, v in zip(vertices, vertices[1:])]


def find_path_by(
    graph: Graph,
    start: Vertex,
    target: Vertex,
    admit: Admit,
    tie_break: TieBreak = ascending,
) -> Optional[List[Edge]]:
    """
    Return the edges of a simple path from `start` to `target` whose
    intermediate vertices all satisfy `admit`, or None when there is none.

    On the complete graph over 1..9 with `admit` = "is even", the default
    ascending order yields 1-2-4-6-8-9 while `descending` jumps straight to 9.
    """
    if start == target:
        return []

    working: Graph = (list(graph[0]), list(graph[1]))
    used: List[Vertex] = []
    used_set = set()
    prev = start

    while True:
        nxt = _next_vertex(working[1], prev, target, admit, tie_break, used_set)

        if nxt is not _NO_CANDIDATE and nxt == target:
            path = _chain(used + [prev, target])
            logger.debug("path %r -> %r found with %d edges", start, target, len(path))
            return path

        if nxt is _NO_CANDIDATE and not used:
            logger.debug("no path %r -> %r", start, target)
            return None

        if nxt is _NO_CANDIDATE or nxt in used_set:
            # Dead end: drop it from the working graph and back up.
            logger.debug("backtrack from %r", prev)
            working = delete_vertex(working, prev)
            prev = used.pop()
            used_set.discard(prev)
            continue

        used.append(prev)
        used_set.add(prev)
        prev = nxt
