"""
JSON model files and networkx interop.

Accepted JSON shapes:
  - {"name": "...", "vertices": [...], "edges": [[u, v], ...]}
  - {"vertices": [...], "edges": [{"source": u, "target": v}, ...]}
  - {"adjacency": {"0": [1, 2], "1": [0], ...}}
Vertex records can be scalars or dicts carrying "id"/"name"/"key"/"index".
"""

from __future__ import annotations

import json
import os
from collections.abc import Hashable
from typing import Any, Dict, List, Optional, Tuple

import networkx as nx

from .graph import Edge, Graph, canonical_pair, uniq


# ----------------------------
# JSON -> Graph parsing
# ----------------------------

def _as_node_id(v: Any, idx_fallback: int) -> Any:
    """Try to extract a stable node id from a vertex record; else fallback to index."""
    if isinstance(v, (int, str)):
        return v
    if isinstance(v, dict):
        for k in ("id", "name", "key", "index"):
            if k in v:
                return v[k]
    return idx_fallback


def _scalar(x: Any, what: str, source: str) -> Any:
    if not isinstance(x, Hashable):
        raise ValueError(f"{source}: {what} must be a scalar, got {x!r}")
    return x


def graph_from_dict(data: Dict[str, Any], source: str = "<dict>") -> Graph:
    """Build a graph from an already-decoded JSON document."""
    vertices: List[Any] = []
    pairs: List[Tuple[Any, Any]] = []

    if "adjacency" in data and isinstance(data["adjacency"], dict):
        for u, nbrs in data["adjacency"].items():
            vertices.append(u)
            for v in nbrs:
                pairs.append((u, str(v) if isinstance(v, int) else _scalar(v, "edge endpoint", source)))
    else:
        records = data.get("vertices", [])
        if not isinstance(records, list):
            raise ValueError(f"{source}: 'vertices' must be a list")
        node_ids = [_scalar(_as_node_id(v, i), "vertex id", source) for i, v in enumerate(records)]
        vertices.extend(node_ids)
        # Integer endpoints index into the vertex list only when records carry their own ids.
        remap = any(isinstance(v, dict) for v in records)

        def resolve_endpoint(x: Any) -> Any:
            if remap and isinstance(x, int) and 0 <= x < len(node_ids):
                return node_ids[x]
            return _scalar(x, "edge endpoint", source)

        edges = data.get("edges", [])
        if not isinstance(edges, list):
            raise ValueError(f"{source}: 'edges' must be a list")
        for e in edges:
            if isinstance(e, (list, tuple)) and len(e) >= 2:
                pairs.append((resolve_endpoint(e[0]), resolve_endpoint(e[1])))
            elif isinstance(e, dict):
                u = e.get("source", e.get("u"))
                v = e.get("target", e.get("v"))
                if u is None or v is None:
                    raise ValueError(f"{source}: edge dict missing endpoints: {e}")
                pairs.append((resolve_endpoint(u), resolve_endpoint(v)))
            else:
                raise ValueError(f"{source}: unsupported edge record: {e}")

    pairs = [(u, v) for u, v in pairs if u != v]
    for u, v in pairs:
        vertices.extend((u, v))
    edge_list: List[Edge] = uniq(frozenset(p) for p in pairs)
    return uniq(vertices), edge_list


def load_graph_from_json(path: str) -> Tuple[Graph, str]:
    """Load a model file; returns (graph, name). The name falls back to the file stem."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be an object")
    name = data.get("name") or os.path.splitext(os.path.basename(path))[0]
    return graph_from_dict(data, source=path), name


def graph_to_json(graph: Graph, name: Optional[str] = None) -> Dict[str, Any]:
    vertices, edges = graph
    out: Dict[str, Any] = {
        "vertices": list(vertices),
        "edges": [list(canonical_pair(e)) for e in edges],
    }
    if name:
        out["name"] = name
    return out


def save_graph_to_json(graph: Graph, path: str, name: Optional[str] = None) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(graph_to_json(graph, name), f, indent=2, ensure_ascii=False)


# ----------------------------
# networkx bridge
# ----------------------------

def to_networkx(graph: Graph) -> nx.Graph:
    vertices, edges = graph
    G = nx.Graph()
    G.add_nodes_from(vertices)
    G.add_edges_from(tuple(e) for e in edges)
    return G


def from_networkx(G: nx.Graph) -> Graph:
    if G.is_directed():
        raise ValueError("directed graphs are not supported")
    if G.is_multigraph():
        raise ValueError("multigraphs are not supported")
    vertices = list(G.nodes())
    edges = uniq(frozenset((u, v)) for u, v in G.edges() if u != v)
    return vertices, edges
