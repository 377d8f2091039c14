"""Operations on finite, simple, undirected graphs stored as (vertices, edges) tuples."""

from .cycles import CycleSortResult, NotACycle, SortedCycle, cycle_sort
from .graph import Edge, Graph, canonical_pair, edge, path_vertices, validate_graph
from .path_search import admit_all, ascending, descending, find_path_by
from .subdivision import subdivide
from .subgraph import clique, delete_vertex, delete_vertices_by, intersection

__all__ = [
    "Edge",
    "Graph",
    "edge",
    "canonical_pair",
    "path_vertices",
    "validate_graph",
    "clique",
    "delete_vertex",
    "delete_vertices_by",
    "intersection",
    "subdivide",
    "find_path_by",
    "admit_all",
    "ascending",
    "descending",
    "cycle_sort",
    "SortedCycle",
    "NotACycle",
    "CycleSortResult",
]
