from pathfinder.domain.models import Edge
from pathfinder.graph.model import Graph


def test_neighbors_of_unknown_vertex_is_empty():
    graph = Graph()

    assert graph.neighbors("missing") == []


def test_add_edge_registers_only_the_source():
    graph = Graph()
    graph.add_edge("A", "B", 3)

    assert "A" in graph
    assert "B" not in graph
    assert graph.neighbors("A") == [("B", 3)]
    assert graph.neighbors("B") == []


def test_add_edge_overwrites_existing_weight():
    graph = Graph()
    graph.add_edge("A", "B", 3)
    graph.add_edge("A", "B", 1)

    assert graph.neighbors("A") == [("B", 1)]
    assert graph.weight("A", "B") == 1
    assert graph.weight("B", "A") is None


def test_add_vertex_keeps_existing_edges():
    graph = Graph()
    graph.add_edge("A", "B", 3)
    graph.add_vertex("A")
    graph.add_vertex("B")

    assert graph.neighbors("A") == [("B", 3)]
    assert graph.vertices() == ["A", "B"]


def test_from_mapping_preserves_neighbor_order():
    graph = Graph.from_mapping({"A": {"C": 3, "B": 2}, "B": {}, "C": {"A": 1}})

    assert graph.vertices() == ["A", "B", "C"]
    assert graph.neighbors("A") == [("C", 3), ("B", 2)]
    assert len(graph) == 3


def test_from_edges_accepts_edges_and_triples():
    graph = Graph.from_edges([Edge("A", "B", 1.5), ("B", "C", 2)])

    assert graph.edges() == [Edge("A", "B", 1.5), Edge("B", "C", 2)]


def test_to_dict_returns_a_copy():
    graph = Graph.from_mapping({"A": {"B": 1}})
    copy = graph.to_dict()
    copy["A"]["B"] = 99

    assert graph.weight("A", "B") == 1


def test_negative_weights_are_stored_without_validation():
    graph = Graph()
    graph.add_edge("A", "B", -4)

    assert graph.neighbors("A") == [("B", -4)]


def test_iteration_and_repr():
    graph = Graph.from_mapping({"A": {"B": 1, "C": 2}, "B": {}})

    assert list(graph) == ["A", "B"]
    assert repr(graph) == "Graph(vertices=2, edges=2)"


def test_graph_can_be_built_from_another_graph():
    original = Graph.from_mapping({"A": {"B": 1}, "B": {}})

    copy = Graph(original)
    via_mapping = Graph.from_mapping(original)
    copy.add_edge("B", "A", 7)

    assert via_mapping.to_dict() == {"A": {"B": 1}, "B": {}}
    assert original.neighbors("B") == []
    assert copy.neighbors("B") == [("A", 7)]
