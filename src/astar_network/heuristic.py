import math
from collections import namedtuple

from astar_network.errors import UnknownNodeError

# 2D position of a node; positions live outside the Graph
Node = namedtuple("Node", ["x", "y"])


def _lookup(node, positions):
    try:
        return positions[node]
    except KeyError:
        raise UnknownNodeError(node, where="positions") from None


def euclid(a, b, positions):
    """Straight-line distance between the coordinates of a and b.

    Only admissible when every edge cost is >= the distance between its endpoints.
    """
    xa, ya = _lookup(a, positions)
    xb, yb = _lookup(b, positions)
    return math.hypot(xa - xb, ya - yb)


def make_euclid(positions, scale=1.0):
    # bind the coordinate map so the engine only sees (node, node) -> float
    def heuristic(a, b):
        return scale * euclid(a, b, positions)

    return heuristic


def zero_heuristic(a, b):
    return 0.0
