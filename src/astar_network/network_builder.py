import logging
import math

import networkx as nx
import numpy as np

from astar_network import config
from astar_network.graph import Graph
from astar_network.heuristic import Node

logger = logging.getLogger(__name__)


def build_reference_network():
    """
    Six-node sample network A..F.
    Returns (graph, positions); A -> F is cheapest via C and E (cost 6).
    """
    positions = {name: Node(*xy) for name, xy in config.REFERENCE_POSITIONS.items()}

    g = Graph()
    for u, v, cost in config.REFERENCE_EDGES:
        g.add_edge(u, v, cost)
    return g, positions


def build_random_network(n_nodes=config.N_NODES, edge_prob=config.EDGE_PROB,
                         area_size=config.AREA_SIZE, delay_factor_max=config.DELAY_FACTOR_MAX,
                         bidirectional=True, seed=None, max_attempts=config.MAX_SKELETON_ATTEMPTS):
    """
    Random delay network with node coordinates:
    - Erdos-Renyi skeleton, re-drawn until connected (ValueError after max_attempts).
    - Nodes scattered uniformly over an area_size x area_size square.
    - Edge cost = euclidean length * uniform(1, delay_factor_max), so the
      euclid heuristic never overestimates.
    - With bidirectional=False each direction gets its own delay factor.
    Returns (graph, positions) with node ids n1..nN.
    """
    if delay_factor_max < 1:
        raise ValueError("delay_factor_max must be >= 1 to keep euclid admissible")

    rng = np.random.default_rng(seed)

    skeleton = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=seed)
    attempts = 1
    # make sure the graph is connected (n_nodes == 1 is trivially connected)
    while n_nodes > 1 and not nx.is_connected(skeleton):
        if attempts >= max_attempts:
            raise ValueError(
                f"no connected {n_nodes}-node skeleton after {attempts} attempts, edge_prob={edge_prob} is too low"
            )
        skeleton = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=int(rng.integers(1, 1_000_000)))
        attempts += 1
    logger.debug("connected skeleton after %d attempt(s): %d edges", attempts, skeleton.number_of_edges())

    coords = rng.uniform(0.0, area_size, size=(n_nodes, 2))
    mapping = {i: f"n{i + 1}" for i in skeleton.nodes()}
    positions = {mapping[i]: Node(float(coords[i, 0]), float(coords[i, 1])) for i in skeleton.nodes()}

    g = Graph()
    for i in skeleton.nodes():
        g.add_node(mapping[i])

    for u, v in skeleton.edges():
        length = math.dist(coords[u], coords[v])
        if bidirectional:
            g.add_edge(mapping[u], mapping[v], length * rng.uniform(1.0, delay_factor_max))
        else:
            g.add_edge(mapping[u], mapping[v], length * rng.uniform(1.0, delay_factor_max), bidirectional=False)
            g.add_edge(mapping[v], mapping[u], length * rng.uniform(1.0, delay_factor_max), bidirectional=False)

    return g, positions
