"""
Undirected, edge-weighted graph container.

Nodes are hashable values; each unordered pair of distinct nodes carries at
most one weight. Putting a new weight on an existing edge replaces it.
"""

from collections.abc import Iterable, Iterator
from typing import Generic

from typing_extensions import Self

from .types import Edge, Node, Weight


class UndirectedGraph(Generic[Node, Weight]):
    """
    Adjacency-map graph with weighted undirected edges.

    Example:
        >>> graph = UndirectedGraph[str, int]()
        >>> graph.put_edge_value("a", "b", 3)
        >>> graph.degree("a")
        1
        >>> graph.edge_value("b", "a")
        3
    """

    def __init__(self, allows_self_loops: bool = False) -> None:
        self.allows_self_loops = allows_self_loops
        self._adjacency: dict[Node, dict[Node, Weight]] = {}
        self._edge_count = 0

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node], allows_self_loops: bool = False) -> Self:
        """Graph with the given nodes and no edges."""
        graph = cls(allows_self_loops=allows_self_loops)
        for node in nodes:
            graph.add_node(node)
        return graph

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[Node, Node, Weight]],
        nodes: Iterable[Node] = (),
        allows_self_loops: bool = False,
    ) -> Self:
        """
        Graph built from (u, v, weight) triples plus optional isolated nodes.

        Nodes appear in the order edge endpoints are first seen, followed by
        any extra `nodes` not already present.
        """
        graph = cls(allows_self_loops=allows_self_loops)
        for u, v, weight in edges:
            graph.put_edge_value(u, v, weight)
        for node in nodes:
            graph.add_node(node)
        return graph

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_node(self, node: Node) -> bool:
        """Add node, returns False if it was already present."""
        if node in self._adjacency:
            return False
        self._adjacency[node] = {}
        return True

    def put_edge_value(self, u: Node, v: Node, weight: Weight) -> Weight | None:
        """
        Connect u and v with the given weight, adding missing endpoints.

        Returns:
            The weight previously on the edge, or None for a new edge.

        Raises:
            ValueError: If u == v and the graph does not allow self-loops.
        """
        if u == v and not self.allows_self_loops:
            raise ValueError(f"Self-loop on {u!r} is not allowed in this graph")
        self.add_node(u)
        self.add_node(v)
        previous = self._adjacency[u].get(v)
        if v not in self._adjacency[u]:
            self._edge_count += 1
        self._adjacency[u][v] = weight
        self._adjacency[v][u] = weight
        return previous

    # =========================================================================
    # Queries
    # =========================================================================

    def nodes(self) -> Iterator[Node]:
        return iter(self._adjacency)

    def edges(self) -> Iterator[Edge[Node, Weight]]:
        """Each undirected edge exactly once, in insertion order of nodes."""
        seen: set[Node] = set()
        for u, neighbours in self._adjacency.items():
            seen.add(u)
            for v, weight in neighbours.items():
                if v not in seen or v == u:
                    yield Edge(u, v, weight)

    def adjacent_nodes(self, node: Node) -> frozenset[Node]:
        return frozenset(self._neighbours(node))

    def degree(self, node: Node) -> int:
        """Number of incident edges, a self-loop counting twice."""
        neighbours = self._neighbours(node)
        return len(neighbours) + (1 if node in neighbours else 0)

    def has_edge(self, u: Node, v: Node) -> bool:
        return u in self._adjacency and v in self._adjacency[u]

    def edge_value(
        self, u: Node, v: Node, default: Weight | None = None
    ) -> Weight | None:
        if u not in self._adjacency:
            return default
        return self._adjacency[u].get(v, default)

    def number_of_edges(self) -> int:
        return self._edge_count

    def total_weight(self):
        """Sum of all edge weights."""
        return sum(edge.weight for edge in self.edges())

    def _neighbours(self, node: Node) -> dict[Node, Weight]:
        try:
            return self._adjacency[node]
        except KeyError:
            raise KeyError(f"Node {node!r} is not in the graph") from None

    # =========================================================================
    # Python protocols
    # =========================================================================

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._adjacency == other._adjacency

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(nodes={len(self._adjacency)}, "
            f"edges={self._edge_count})"
        )
