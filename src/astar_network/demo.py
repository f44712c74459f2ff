import argparse
import logging

from astar_network import config
from astar_network.errors import UnknownNodeError
from astar_network.heuristic import make_euclid
from astar_network.network_builder import build_random_network, build_reference_network
from astar_network.pathfinding.astar import find_path
from astar_network.report import format_result


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="A* least-delay route between two network nodes")
    parser.add_argument("start", nargs="?", default=None)
    parser.add_argument("goal", nargs="?", default=None)
    parser.add_argument("--random", type=int, metavar="N", default=None,
                        help="use a random N-node network instead of the reference one")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--plot", nargs="?", const=config.PLOT_OUTPUT, default=None, metavar="FILE",
                        help="save a drawing of the network with the path highlighted")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.random is not None and args.random < 1:
        parser.error("--random needs at least 1 node")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=config.LOG_FORMAT)

    if args.random is not None:
        graph, positions = build_random_network(n_nodes=args.random, seed=args.seed)
        nodes = graph.nodes()
        start = args.start or nodes[0]
        goal = args.goal or nodes[-1]
    else:
        graph, positions = build_reference_network()
        start = args.start or config.REFERENCE_START
        goal = args.goal or config.REFERENCE_GOAL

    try:
        result = find_path(graph, start, goal, make_euclid(positions))
    except UnknownNodeError as e:
        print(f"Error: {e}")
        return 2
    print(format_result(graph, start, goal, result))

    if args.plot:
        # imported lazily: matplotlib is only needed for drawing
        from astar_network.visualize_network import draw_graph_with_path
        draw_graph_with_path(graph, positions, result.path, output_link=args.plot)

    return 0 if result.found else 1


if __name__ == "__main__":
    raise SystemExit(main())
