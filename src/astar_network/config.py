# Reference network: node coordinates (used by the heuristic only)
REFERENCE_POSITIONS = {
    "A": (0, 0),  # start
    "B": (2, 3),
    "C": (4, 1),
    "D": (6, 4),
    "E": (8, 2),
    "F": (10, 0),  # goal
}

# (node 1, node 2, cost); every link is bidirectional
REFERENCE_EDGES = [
    ("A", "B", 4),
    ("A", "C", 2),
    ("B", "D", 5),
    ("C", "D", 7),
    ("C", "E", 3),
    ("D", "E", 2),
    ("E", "F", 1),
]

REFERENCE_START = "A"
REFERENCE_GOAL = "F"

# Random geometric network defaults
N_NODES = 15
EDGE_PROB = 0.3
AREA_SIZE = 100.0
# cost = euclidean length * uniform(1, DELAY_FACTOR_MAX), keeps euclid admissible
DELAY_FACTOR_MAX = 1.5
# give up redrawing a disconnected skeleton after this many tries
MAX_SKELETON_ATTEMPTS = 1000

PLOT_OUTPUT = "plots/astar_path.png"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
