"""
Adjacency-matrix conversions.

Dense matrices are symmetric numpy arrays; sparse matrices keep only the
upper triangle, which is what scipy.sparse.csgraph expects for undirected
input. In both, a zero entry means "no edge", so zero-weight edges and
self-loops are not representable.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

import numpy as np
from scipy import sparse

from .types import WeightedGraph
from .undirected import UndirectedGraph

T = TypeVar("T")


def _node_order(
    graph: WeightedGraph[T, Any], order: Sequence[T] | None
) -> tuple[T, ...]:
    nodes = tuple(graph.nodes())
    if order is None:
        return nodes
    if len(order) != len(nodes) or set(order) != set(nodes):
        raise ValueError("Node order must list every node of the graph once")
    return tuple(order)


def _triplets(
    graph: WeightedGraph[T, Any], nodes: tuple[T, ...]
) -> tuple[list[int], list[int], list[Any]]:
    """
    Row, column and weight lists with row < column.

    Parallel edges collapse to their cheapest weight, the only one a
    spanning forest can use. Self-loops are dropped.
    """
    position = {node: i for i, node in enumerate(nodes)}
    cheapest: dict[tuple[int, int], Any] = {}
    for u, v, weight in graph.edges():
        i, j = sorted((position[u], position[v]))
        if i == j:
            continue
        if (i, j) not in cheapest or weight < cheapest[i, j]:
            cheapest[i, j] = weight
    rows = [i for i, _ in cheapest]
    cols = [j for _, j in cheapest]
    return rows, cols, list(cheapest.values())


def to_dense_adjacency(
    graph: WeightedGraph[T, Any],
    order: Sequence[T] | None = None,
    dtype: Any = float,
) -> tuple[np.ndarray, tuple[T, ...]]:
    """
    Symmetric dense adjacency matrix of graph.

    Args:
        graph: Graph to convert.
        order: Node for each row/column. Defaults to `graph.nodes()` order.
        dtype: numpy dtype of the matrix.

    Returns:
        Tuple of (matrix, nodes labelling rows and columns).
    """
    nodes = _node_order(graph, order)
    rows, cols, weights = _triplets(graph, nodes)
    matrix = np.zeros((len(nodes), len(nodes)), dtype=dtype)
    if weights:
        matrix[rows, cols] = weights
        matrix[cols, rows] = weights
    return matrix, nodes


def to_sparse_adjacency(
    graph: WeightedGraph[T, Any],
    order: Sequence[T] | None = None,
    dtype: Any = float,
) -> tuple[sparse.csr_array, tuple[T, ...]]:
    """
    Upper-triangular sparse adjacency matrix of graph.

    Returns:
        Tuple of (CSR matrix, nodes labelling rows and columns).
    """
    nodes = _node_order(graph, order)
    rows, cols, weights = _triplets(graph, nodes)
    matrix = sparse.coo_array(
        (
            np.asarray(weights, dtype=dtype),
            (np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp)),
        ),
        shape=(len(nodes), len(nodes)),
    )
    return matrix.tocsr(), nodes


def from_dense_adjacency(
    matrix: Any, nodes: Sequence[T] | None = None
) -> UndirectedGraph[Any, Any]:
    """
    Build a graph from a symmetric adjacency matrix.

    Non-zero off-diagonal entries become edges; the diagonal is ignored.

    Args:
        matrix: Square, symmetric array-like.
        nodes: Label of each row. Defaults to 0..n-1.

    Raises:
        ValueError: If the matrix is not square, not symmetric, or the
            labels do not match its size.
    """
    array = np.asarray(matrix)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got {array.shape}")
    if not np.array_equal(array, array.T):
        raise ValueError("Adjacency matrix of an undirected graph must be symmetric")

    size = array.shape[0]
    labels = list(range(size)) if nodes is None else list(nodes)
    if len(labels) != size:
        raise ValueError(f"Expected {size} node labels, got {len(labels)}")

    graph = UndirectedGraph.from_nodes(labels)
    rows, cols = np.nonzero(np.triu(array, k=1))
    for i, j in zip(rows.tolist(), cols.tolist()):
        graph.put_edge_value(labels[i], labels[j], array[i, j].item())
    return graph
