import heapq
import itertools
import logging
from dataclasses import dataclass, field

from astar_network.errors import UnknownNodeError

logger = logging.getLogger(__name__)

FOUND = "found"
NO_PATH = "no_path"
CANCELLED = "cancelled"


@dataclass
class PathResult:
    status: str
    path: list = None
    total_cost: float = None
    expanded: int = field(default=0, compare=False)

    @property
    def found(self):
        return self.status == FOUND

    def __iter__(self):
        # allows: path, cost = find_path(...)
        return iter((self.path, self.total_cost))


def reconstruct_path(came_from, current):
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def find_path(graph, start, goal, heuristic, should_cancel=None):
    """
    A* search from start to goal.
    - heuristic(node, goal) -> estimated remaining cost, must be admissible for optimality
    - should_cancel() is polled once per loop; True stops with a CANCELLED result
    Returns a PathResult; no path is a normal outcome, not an exception.
    """
    for node in (start, goal):
        if node not in graph:
            raise UnknownNodeError(node)

    logger.debug("A* search %r -> %r over %d nodes", start, goal, len(graph))

    g_score = {start: 0.0}  # missing key means +inf
    came_from = {}
    closed = set()

    # (f, seq, node): seq keeps FIFO order on equal f and avoids comparing node ids
    counter = itertools.count()
    open_list = [(heuristic(start, goal), next(counter), start)]

    while open_list:
        if should_cancel is not None and should_cancel():
            logger.debug("A* search %r -> %r cancelled after %d expansions", start, goal, len(closed))
            return PathResult(CANCELLED, expanded=len(closed))

        _, _, current = heapq.heappop(open_list)

        if current == goal:
            path = reconstruct_path(came_from, current)
            logger.debug("path found: %s (cost %s, %d expansions)", path, g_score[current], len(closed))
            return PathResult(FOUND, path, g_score[current], expanded=len(closed))

        # skip outdated entries
        if current in closed:
            continue
        closed.add(current)

        for neighbor, weight in graph.neighbors(current):
            tentative = g_score[current] + weight
            if tentative < g_score.get(neighbor, float("inf")):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f = tentative + heuristic(neighbor, goal)  # f = g + h
                heapq.heappush(open_list, (f, next(counter), neighbor))

    logger.debug("no path %r -> %r (%d expansions)", start, goal, len(closed))
    return PathResult(NO_PATH, expanded=len(closed))
