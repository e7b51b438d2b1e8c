"""
Connected components of undirected graphs, tracked with a DisjointSet.
"""

from typing import Any, TypeVar

from disjoint import DisjointSet

from .types import WeightedGraph

T = TypeVar("T")


def _union_edges(graph: WeightedGraph[T, Any]) -> DisjointSet[T]:
    components = DisjointSet(graph.nodes())
    for u, v, _ in graph.edges():
        components.union(u, v)
    return components


def connected_components(graph: WeightedGraph[T, Any]) -> frozenset[frozenset[T]]:
    """
    Partition the nodes of graph into connected components.

    Returns:
        frozenset[frozenset[T]]: one block per component, isolated nodes
        included as singletons.
    """
    return _union_edges(graph).sets()


def component_count(graph: WeightedGraph[Any, Any]) -> int:
    return _union_edges(graph).set_count()
