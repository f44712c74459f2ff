import logging
import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import networkx as nx  # noqa: E402

from astar_network import config  # noqa: E402

logger = logging.getLogger(__name__)


def draw_graph_with_path(graph, positions, path=None, output_link=config.PLOT_OUTPUT,
                         title="Network Graph with Highlighted Path"):
    """Draw the graph at its node coordinates, highlight path in red, save to output_link."""
    G = graph.to_networkx()
    pos = {n: tuple(positions[n]) for n in G.nodes()}

    plt.figure(figsize=(10, 8))

    on_path = set(zip(path, path[1:])) if path else set()
    path_nodes = set(path or [])
    edges = list(G.edges())
    weights = nx.get_edge_attributes(G, "weight")

    nx.draw_networkx_nodes(G, pos, node_size=500,
                           node_color=["#FF6F61" if n in path_nodes else "#A0CBE2" for n in G.nodes()])
    nx.draw_networkx_labels(G, pos, font_size=9)
    nx.draw_networkx_edges(G, pos, edgelist=edges, arrows=True, arrowstyle="->",
                           edge_color=["red" if e in on_path else "black" for e in edges],
                           width=[3.0 if e in on_path else 1.0 for e in edges],
                           arrowsize=14)
    # path hops are labelled in red on top of the plain cost labels
    for subset, color, size in ((set(edges) - on_path, "black", 8), (on_path & set(edges), "red", 10)):
        nx.draw_networkx_edge_labels(G, pos, font_color=color, font_size=size,
                                     edge_labels={e: f"{weights[e]:g}" for e in subset})

    plt.title(title, fontsize=12)
    plt.tight_layout()
    out_dir = os.path.dirname(output_link)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plt.savefig(output_link)
    plt.close()
    logger.info("saved %s", output_link)
    return output_link
