import numpy as np
import pandas as pd

from astar_network.pathfinding.astar import CANCELLED


def hop_table(graph, path):
    """Per-hop costs of a path, re-derived from the graph's adjacency lists."""
    rows = []
    cumulative = 0.0
    for step, (u, v) in enumerate(zip(path[:-1], path[1:]), 1):
        cost = graph.edge_cost(u, v)
        cumulative += cost
        rows.append({"step": step, "from": u, "to": v, "cost": cost, "cumulative_cost": cumulative})
    return pd.DataFrame(rows, columns=["step", "from", "to", "cost", "cumulative_cost"])


def path_summary(graph, path):
    """
    Statistics of a path:
    - hops, total/avg/std/max edge cost
    """
    if not path or len(path) < 2:
        return {
            "hops": 0,
            "total_cost": 0.0,
            "avg_cost": 0.0,
            "std_cost": 0.0,
            "max_cost": 0.0,
        }

    costs = np.array([graph.edge_cost(u, v) for u, v in zip(path[:-1], path[1:])])
    return {
        "hops": len(costs),
        "total_cost": float(costs.sum()),
        "avg_cost": float(costs.mean()),
        "std_cost": round(float(np.std(costs)), 3),
        "max_cost": float(costs.max()),
    }


def format_result(graph, start, goal, result):
    lines = [
        f"Searching optimal route from node {start} to node {goal}",
        "-" * 50,
    ]
    if result.status == CANCELLED:
        lines.append("Search cancelled before a route was found.")
        return "\n".join(lines)
    if not result.found:
        lines.append("No route exists between these two nodes.")
        return "\n".join(lines)

    lines.append("Optimal path:")
    lines.append(" -> ".join(str(n) for n in result.path))
    lines.append("")
    lines.append(f"Total cost (delay): {result.total_cost:g}")

    table = hop_table(graph, result.path)
    if not table.empty:
        lines.append("")
        lines.append("Hop by hop:")
        for row in table.itertuples(index=False):
            lines.append(f"   - {row[1]} -> {row[2]}: cost = {row.cost:g}")

        summary = path_summary(graph, result.path)
        lines.append("")
        lines.append(
            f"{summary['hops']} hops, avg cost {summary['avg_cost']:g}, "
            f"max {summary['max_cost']:g}, std {summary['std_cost']:g}"
        )
    return "\n".join(lines)
