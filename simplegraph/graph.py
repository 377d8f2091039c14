"""Graph model shared by every operation: (vertices, edges) tuples with frozenset edges."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Hashable, Iterable, List, Tuple

Vertex = Hashable
Edge = FrozenSet[Any]  # unordered pair {u, v}, u != v
Graph = Tuple[List[Any], List[Edge]]


def edge(u: Vertex, v: Vertex) -> Edge:
    """Build the undirected edge {u, v}. Self-loops are rejected."""
    if u == v:
        raise ValueError(f"degenerate edge: both endpoints are {u!r}")
    return frozenset((u, v))


def other_endpoint(e: Edge, v: Vertex) -> Vertex:
    """Return the endpoint of `e` that is not `v`."""
    for w in e:
        if w != v:
            return w
    raise ValueError(f"{v!r} has no opposite endpoint in {set(e)!r}")


def order_key(v: Any) -> Tuple[str, Any]:
    """Sort key grouping vertices by type name first, so ints and string labels compare."""
    return (type(v).__name__, v)


def canonical_pair(e: Edge) -> Tuple[Any, Any]:
    """Ordered (min, max) view of an edge, usable for printing and serialization."""
    u, v = sorted(e, key=order_key)
    return (u, v)


def position_index(vertices: Iterable[Any]) -> Dict[Any, int]:
    return {w: i for i, w in enumerate(vertices)}


def ends_by_position(e: Edge, index: Dict[Any, int]) -> Tuple[Any, Any]:
    """Endpoints of `e` in vertex-list order (see `position_index`); needs only equality and hashing."""
    u, v = sorted(e, key=lambda w: index.get(w, len(index)))
    return (u, v)


def uniq(items: Iterable[Any]) -> List[Any]:
    """Drop repeats, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def validate_graph(graph: Graph) -> None:
    """Raise ValueError if `graph` breaks the simple-graph invariants."""
    vertices, edges = graph
    if len(set(vertices)) != len(vertices):
        raise ValueError("vertex collection contains duplicates")
    vertex_set = set(vertices)
    seen = set()
    for e in edges:
        if len(e) != 2:
            raise ValueError(f"edge {set(e)!r} does not have two distinct endpoints")
        if e in seen:
            raise ValueError(f"duplicate edge {tuple(e)}")
        missing = [w for w in e if w not in vertex_set]
        if missing:
            raise ValueError(f"edge {tuple(e)} references unknown vertex {missing[0]!r}")
        seen.add(e)


def path_vertices(path: List[Edge], start: Vertex) -> List[Vertex]:
    """Walk an edge sequence from `start` and return the visited vertices in order."""
    walk = [start]
    for e in path:
        if walk[-1] not in e:
            raise ValueError(f"edge {tuple(e)} does not continue the walk at {walk[-1]!r}")
        walk.append(other_endpoint(e, walk[-1]))
    return walk
