"""Tests for graphs/components.py"""

from graphs import (
    UndirectedGraph,
    component_count,
    connected_components,
)


def two_triangles_and_a_point() -> UndirectedGraph[int, int]:
    return UndirectedGraph.from_edges(
        [(0, 1, 1), (1, 2, 1), (2, 0, 1), (3, 4, 1), (4, 5, 1), (5, 3, 1)],
        nodes=[6],
    )


class TestConnectedComponents:
    def test_empty_graph(self):
        assert connected_components(UndirectedGraph()) == frozenset()
        assert component_count(UndirectedGraph()) == 0

    def test_isolated_nodes(self):
        graph = UndirectedGraph.from_nodes("abc")
        assert connected_components(graph) == {
            frozenset("a"),
            frozenset("b"),
            frozenset("c"),
        }

    def test_two_triangles_and_a_point(self):
        graph = two_triangles_and_a_point()
        expected = frozenset(
            [frozenset({0, 1, 2}), frozenset({3, 4, 5}), frozenset({6})]
        )
        assert connected_components(graph) == expected
        assert component_count(graph) == 3


class TestLine:
    def test_path_is_one_component(self):
        graph = UndirectedGraph.from_edges((i, i + 1, 1) for i in range(4))
        assert connected_components(graph) == frozenset([frozenset(range(5))])
        assert component_count(graph) == 1

    def test_adding_an_edge_merges_components(self):
        graph = two_triangles_and_a_point()
        graph.put_edge_value(2, 6, 1)
        assert connected_components(graph) == frozenset(
            [frozenset({0, 1, 2, 6}), frozenset({3, 4, 5})]
        )
