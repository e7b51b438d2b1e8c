"""
Minimum spanning forest via Kruskal's algorithm.

Edges are scanned by ascending weight and accepted whenever they join two
different components of the forest built so far. Component membership is
tracked with a DisjointSet, so the whole run costs O(E log E) for the sort
plus O(E α(V)) for the union-find work.
"""

import logging
from operator import attrgetter
from typing import Any

from disjoint import DisjointSet, NotAMember

from .types import GraphBuilder, MutableWeightedGraph, WeightedGraph
from .undirected import UndirectedGraph

logger = logging.getLogger(__name__)


def minimum_spanning_forest(
    graph: WeightedGraph[Any, Any],
    builder: GraphBuilder = UndirectedGraph.from_nodes,
) -> MutableWeightedGraph:
    """
    Computes a minimum spanning forest of an undirected weighted graph.

    One spanning tree is produced per connected component. When several
    forests share the minimum weight, equal-weight edges are taken in the
    order `graph.edges()` yields them.

    Self-loops are never selected since both ends already share a
    component. Parallel edges are all considered and the cheapest wins.
    Weights must be totally ordered (no NaN).

    Args:
        graph: Any object exposing `nodes()` and `edges()`.
        builder: Creates the output graph from a node iterable. Defaults
            to an `UndirectedGraph` with the same nodes.

    Returns:
        The forest, holding every node of `graph` and the selected edges
        with their original weights.

    Raises:
        NotAMember: If an edge names a node missing from `graph.nodes()`,
            checked for every edge before any is selected.
    """
    nodes = list(graph.nodes())
    components = DisjointSet(nodes)
    sorted_edges = sorted(graph.edges(), key=attrgetter("weight"))
    for u, v, _ in sorted_edges:
        for endpoint in (u, v):
            if endpoint not in components:
                raise NotAMember(endpoint)
    forest = builder(nodes)

    logger.debug(
        f"Kruskal over {len(nodes)} nodes and {len(sorted_edges)} edges"
    )

    verbose = logger.isEnabledFor(logging.DEBUG)
    accepted = 0
    for u, v, weight in sorted_edges:
        if components.set_count() <= 1:
            break
        if components.same_set(u, v):
            if verbose:
                logger.debug(f"  skip ({u!r}, {v!r}) = {weight!r}")
            continue
        forest.put_edge_value(u, v, weight)
        components.union(u, v)
        accepted += 1
        if verbose:
            logger.debug(f"  take ({u!r}, {v!r}) = {weight!r}")

    logger.debug(
        f"Forest has {accepted} edges over {components.set_count()} component(s)"
    )
    return forest


kruskal = minimum_spanning_forest
