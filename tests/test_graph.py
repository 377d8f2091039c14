import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from simplegraph.graph import (
    canonical_pair,
    edge,
    ends_by_position,
    order_key,
    other_endpoint,
    path_vertices,
    position_index,
    uniq,
    validate_graph,
)


def test_edge_is_unordered():
    assert edge(1, 2) == edge(2, 1)
    assert hash(edge("a", "b")) == hash(edge("b", "a"))


def test_degenerate_edge_rejected():
    with pytest.raises(ValueError, match="degenerate"):
        edge(3, 3)


def test_other_endpoint():
    assert other_endpoint(edge(1, 2), 1) == 2
    assert other_endpoint(edge(1, 2), 2) == 1


def test_canonical_pair_mixed_types():
    assert canonical_pair(edge(2, 1)) == (1, 2)
    # ints sort before strs by type name, so a subdivision label never breaks ordering
    assert canonical_pair(edge("x", 4)) == (4, "x")


def test_uniq_keeps_first_occurrence():
    assert uniq([3, 1, 3, 2, 1]) == [3, 1, 2]


@pytest.mark.parametrize(
    "graph, message",
    [
        (([1, 1], []), "duplicates"),
        (([1, 2], [edge(1, 2), edge(2, 1)]), "duplicate edge"),
        (([1, 2], [edge(1, 3)]), "unknown vertex"),
        (([1], [frozenset([1])]), "two distinct"),
    ],
)
def test_validate_graph_reports_broken_invariant(graph, message):
    with pytest.raises(ValueError, match=message):
        validate_graph(graph)


def test_path_vertices():
    path = [edge(1, 2), edge(2, 4), edge(4, 3)]
    assert path_vertices(path, 1) == [1, 2, 4, 3]
    with pytest.raises(ValueError):
        path_vertices(path, 3)


def test_ends_by_position_follows_vertex_list():
    index = position_index(["b", 3, "a"])
    assert ends_by_position(edge("a", "b"), index) == ("b", "a")
    assert ends_by_position(edge(3, "b"), index) == ("b", 3)


def test_order_key_puts_ints_before_strings():
    assert sorted(["x", 2, 1], key=order_key) == [1, 2, "x"]
