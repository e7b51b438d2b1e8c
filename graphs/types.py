"""
Type definitions shared by the graph modules.
"""

from collections.abc import Iterable
from typing import Any, Callable, Generic, NamedTuple, Protocol, TypeVar

Node = TypeVar("Node")
Weight = TypeVar("Weight")

NodeCo = TypeVar("NodeCo", covariant=True)
WeightCo = TypeVar("WeightCo", covariant=True)


class Edge(NamedTuple, Generic[Node, Weight]):
    """An undirected weighted edge. Endpoint order carries no meaning."""

    u: Node
    v: Node
    weight: Weight


class WeightedGraph(Protocol[NodeCo, WeightCo]):
    """What the spanning forest routine needs from a graph."""

    def nodes(self) -> Iterable[NodeCo]: ...

    def edges(self) -> Iterable[Edge[NodeCo, WeightCo]]: ...


class MutableWeightedGraph(Protocol):
    """What the spanning forest routine needs from its output graph."""

    def put_edge_value(self, u: Any, v: Any, weight: Any) -> Any: ...


GraphBuilder = Callable[[Iterable[Any]], MutableWeightedGraph]
