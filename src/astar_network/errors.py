class AStarNetworkError(Exception):
    """Base class for every error raised by astar_network."""


class UnknownNodeError(AStarNetworkError, KeyError):
    """A node id was looked up in a graph or coordinate map that lacks it."""

    def __init__(self, node, where="graph"):
        self.node = node
        self.where = where
        super().__init__(node)

    def __str__(self):
        return f"unknown node {self.node!r} in {self.where}"


class MissingEdgeError(AStarNetworkError, KeyError):
    def __init__(self, src, dst):
        self.src = src
        self.dst = dst
        super().__init__((src, dst))

    def __str__(self):
        return f"no edge {self.src!r} -> {self.dst!r}"


class InvalidCostError(AStarNetworkError, ValueError):
    """Edge cost is negative, NaN or infinite."""
