"""
Run Kruskal's algorithm on the bundled example graphs.

    python main.py --example classic --debug
"""

import logging
from collections.abc import Callable

from constants import LOG_FORMAT
from graphs import UndirectedGraph, connected_components, minimum_spanning_forest

logger = logging.getLogger(__name__)


def classic_graph() -> UndirectedGraph[int, int]:
    """Seven-node textbook graph whose minimum spanning tree weighs 42."""
    return UndirectedGraph.from_edges(
        [
            (1, 2, 8),
            (1, 3, 5),
            (2, 3, 10),
            (2, 4, 2),
            (2, 5, 18),
            (3, 4, 3),
            (3, 6, 16),
            (4, 5, 12),
            (4, 6, 30),
            (4, 7, 14),
            (5, 7, 4),
            (6, 7, 26),
        ]
    )


def star_graph() -> UndirectedGraph[int, int]:
    """Dense star around node 0 plus a detached {10, 11} component."""
    graph = UndirectedGraph[int, int].from_nodes(range(12))
    for hub, weight in ((0, 10), (1, 20), (2, 30), (3, 100)):
        for i in range(hub + 1, 10):
            graph.put_edge_value(hub, i, weight)
    graph.put_edge_value(10, 11, 100)
    return graph


EXAMPLES: dict[str, Callable[[], UndirectedGraph[int, int]]] = {
    "classic": classic_graph,
    "star": star_graph,
}


def run_example(name: str) -> UndirectedGraph[int, int]:
    graph = EXAMPLES[name]()
    logger.info(
        f"Graph '{name}': {len(graph)} nodes, {graph.number_of_edges()} edges"
    )

    forest = minimum_spanning_forest(graph)

    for component in sorted(connected_components(forest), key=min):
        logger.info(f"Tree over {sorted(component)}")
    for u, v, weight in forest.edges():
        logger.info(f"  ({u}, {v}) = {weight}")
    logger.info(f"Total weight: {forest.total_weight()}")
    return forest


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Minimum spanning forest demo")
    parser.add_argument(
        "--example",
        choices=sorted(EXAMPLES),
        default="classic",
        help="Example graph to use",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    run_example(args.example)
