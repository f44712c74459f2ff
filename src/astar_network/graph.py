import logging
import math
from collections import namedtuple

import networkx as nx

from astar_network.errors import InvalidCostError, MissingEdgeError, UnknownNodeError

logger = logging.getLogger(__name__)

# outgoing link owned by the source node's adjacency list
Edge = namedtuple("Edge", ["to", "cost"])


class Graph:
    """
    Weighted directed graph stored as an adjacency list:
    - adj[node] -> list of outgoing Edge(to, cost)
    - every Edge.to is also a key of adj (endpoints are auto-registered)
    - a bidirectional link is just two directed edges with the same cost
    """

    def __init__(self):
        self.adj = {}

    def __contains__(self, node):
        return node in self.adj

    def __len__(self):
        return len(self.adj)

    def __iter__(self):
        return iter(self.adj)

    def add_node(self, node):
        if node in self.adj:
            # never reset the existing edges
            logger.warning("node %r already registered, pick another name", node)
            return
        self.adj[node] = []

    def add_edge(self, src, dst, cost, bidirectional=True):
        try:
            cost = float(cost)
        except (TypeError, ValueError):
            raise InvalidCostError(f"edge {src!r} -> {dst!r}: cost must be a number, got {cost!r}") from None
        if not math.isfinite(cost):
            raise InvalidCostError(f"edge {src!r} -> {dst!r}: cost must be finite, got {cost}")
        if cost < 0:
            raise InvalidCostError(f"edge {src!r} -> {dst!r}: negative cost {cost} breaks A*")

        for node in (src, dst):
            if node not in self.adj:
                self.adj[node] = []

        self.adj[src].append(Edge(dst, cost))
        if bidirectional:
            self.adj[dst].append(Edge(src, cost))

    def neighbors(self, node):
        try:
            return self.adj[node]
        except KeyError:
            raise UnknownNodeError(node) from None

    def nodes(self):
        return list(self.adj)

    def edges(self):
        for u, out in self.adj.items():
            for edge in out:
                yield u, edge.to, edge.cost

    def edge_cost(self, src, dst):
        # cheapest of any parallel edges, same one the search relaxes
        costs = [edge.cost for edge in self.neighbors(src) if edge.to == dst]
        if not costs:
            raise MissingEdgeError(src, dst)
        return min(costs)

    def path_cost(self, path):
        return sum(self.edge_cost(u, v) for u, v in zip(path[:-1], path[1:]))

    def to_networkx(self):
        """Export as nx.DiGraph with a 'weight' attribute (cheapest parallel edge wins)."""
        G = nx.DiGraph()
        G.add_nodes_from(self.adj)
        for u, v, cost in self.edges():
            if G.has_edge(u, v) and G[u][v]["weight"] <= cost:
                continue
            G.add_edge(u, v, weight=cost)
        return G
