import logging
import math

import pytest

from astar_network.errors import InvalidCostError, MissingEdgeError, UnknownNodeError
from astar_network.graph import Edge, Graph


def test_add_edge_autocreates_endpoints():
    g = Graph()
    g.add_edge("X", "Y", 3, bidirectional=False)
    assert "X" in g and "Y" in g
    assert g.neighbors("X") == [Edge("Y", 3.0)]
    assert g.neighbors("Y") == []


def test_bidirectional_edge_is_reciprocal():
    g = Graph()
    g.add_edge("A", "B", 2.5)
    assert Edge("B", 2.5) in g.neighbors("A")
    assert Edge("A", 2.5) in g.neighbors("B")


def test_duplicate_add_node_keeps_edges(caplog):
    g = Graph()
    g.add_edge("A", "B", 4)
    g.add_edge("A", "C", 2)
    before = list(g.neighbors("A"))

    with caplog.at_level(logging.WARNING, logger="astar_network.graph"):
        g.add_node("A")

    assert g.neighbors("A") == before
    assert any("'A'" in r.getMessage() for r in caplog.records)


def test_edge_insertion_does_not_warn_for_known_nodes(caplog):
    g = Graph()
    g.add_node("A")
    with caplog.at_level(logging.WARNING, logger="astar_network.graph"):
        g.add_edge("A", "B", 1)
    assert caplog.records == []


def test_unknown_neighbor_lookup_fails_loudly():
    g = Graph()
    g.add_node("A")
    with pytest.raises(UnknownNodeError):
        g.neighbors("Z")
    # still a lookup error for callers catching KeyError
    with pytest.raises(KeyError):
        g.neighbors("Z")


@pytest.mark.parametrize("cost", [-1, math.inf, math.nan])
def test_invalid_costs_rejected(cost):
    g = Graph()
    with pytest.raises(InvalidCostError):
        g.add_edge("A", "B", cost)
    assert len(g) == 0


def test_edge_cost_and_path_cost(reference):
    graph, _, _ = reference
    assert graph.edge_cost("C", "E") == 3
    assert graph.edge_cost("E", "C") == 3
    assert graph.path_cost(["A", "C", "E", "F"]) == 6
    assert graph.path_cost(["A"]) == 0
    with pytest.raises(MissingEdgeError):
        graph.edge_cost("A", "F")


def test_to_networkx_matches_adjacency(reference):
    graph, _, _ = reference
    G = graph.to_networkx()
    assert set(G.nodes()) == set(graph.nodes())
    assert G.number_of_edges() == len(list(graph.edges()))
    for u, v, cost in graph.edges():
        assert G[u][v]["weight"] == cost


def test_to_networkx_keeps_cheapest_parallel_edge():
    g = Graph()
    g.add_edge("A", "B", 5, bidirectional=False)
    g.add_edge("A", "B", 2, bidirectional=False)
    assert g.to_networkx()["A"]["B"]["weight"] == 2


def test_edge_cost_uses_cheapest_parallel_edge():
    g = Graph()
    g.add_edge("A", "B", 5)
    g.add_edge("B", "A", 2)
    # A now holds two edges to B
    assert len(g.neighbors("A")) == 2
    assert g.edge_cost("A", "B") == 2
    assert g.path_cost(["A", "B"]) == 2


@pytest.mark.parametrize("cost", ["fast", None, [1]])
def test_non_numeric_cost_rejected(cost):
    g = Graph()
    with pytest.raises(InvalidCostError):
        g.add_edge("A", "B", cost)
    assert len(g) == 0
