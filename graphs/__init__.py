"""
Undirected weighted graphs and algorithms over them.

**Container** (undirected.py, types.py)
    - UndirectedGraph: adjacency-map graph, one weight per node pair
    - Edge: (u, v, weight) named tuple
    - WeightedGraph: protocol of anything exposing nodes() and edges()

**Spanning forests** (spanning.py)
    - minimum_spanning_forest / kruskal: Kruskal's algorithm on a DisjointSet

**Components** (components.py)
    - connected_components, component_count: union-find partition

**Matrices** (matrix.py)
    - to_dense_adjacency, to_sparse_adjacency, from_dense_adjacency
"""

from .components import component_count, connected_components
from .matrix import (
    from_dense_adjacency,
    to_dense_adjacency,
    to_sparse_adjacency,
)
from .spanning import kruskal, minimum_spanning_forest
from .types import Edge, MutableWeightedGraph, WeightedGraph
from .undirected import UndirectedGraph

__all__ = [
    # Container
    "Edge",
    "MutableWeightedGraph",
    "UndirectedGraph",
    "WeightedGraph",
    # Spanning forests
    "kruskal",
    "minimum_spanning_forest",
    # Components
    "component_count",
    "connected_components",
    # Matrices
    "from_dense_adjacency",
    "to_dense_adjacency",
    "to_sparse_adjacency",
]
