import pytest

from astar_network.heuristic import make_euclid
from astar_network.network_builder import build_reference_network


@pytest.fixture
def reference():
    graph, positions = build_reference_network()
    return graph, positions, make_euclid(positions)
