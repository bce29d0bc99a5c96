"""Unit tests for the graph data model."""

import pytest

from graph import Edge, Graph, Node, default_label
from graph.convert import as_float, as_int


class TestConstruction:
    def test_ids_are_dense(self):
        g = Graph()
        ids = [g.add_node().id for _ in range(5)]
        assert ids == [0, 1, 2, 3, 4]

    def test_default_labels(self):
        assert default_label(0) == "A"
        assert default_label(25) == "Z"
        assert default_label(26) == "A1"
        assert Node(2).label == "C"

    def test_undirected_edge_is_symmetric(self, cycle4):
        assert (1, 1) in cycle4.neighbours(0)
        assert (0, 1) in cycle4.neighbours(1)
        assert cycle4.edge_count() == 4

    def test_directed_edge_tracks_in_degree(self, small_dag):
        assert small_dag.neighbour_ids(2) == [3]
        assert small_dag.neighbour_ids(3) == []
        assert small_dag.in_degrees() == [0, 0, 2, 1]

    def test_self_loop_rejected(self):
        g = Graph.from_edges(2, [])
        with pytest.raises(ValueError):
            g.add_edge(1, 1)

    def test_duplicate_rejected_both_directions(self, cycle4):
        with pytest.raises(ValueError):
            cycle4.add_edge(1, 0)

    def test_directed_reverse_is_not_duplicate(self, small_dag):
        small_dag.add_edge(3, 0)
        assert small_dag.has_edge(3, 0)
        assert not small_dag.has_edge(0, 3)

    def test_negative_weight_rejected(self):
        g = Graph.from_edges(2, [])
        with pytest.raises(ValueError):
            g.add_edge(0, 1, weight=-1)

    def test_unknown_vertex_rejected(self):
        g = Graph.from_edges(2, [])
        with pytest.raises(ValueError):
            g.add_edge(0, 2)


class TestQueries:
    def test_has_node_rejects_out_of_range_and_non_int(self, cycle4):
        assert cycle4.has_node(3)
        assert not cycle4.has_node(4)
        assert not cycle4.has_node(-1)
        assert not cycle4.has_node("0")

    def test_degree_directed_counts_both_ways(self, small_dag):
        assert small_dag.degree(2) == 3

    def test_edge_between_is_order_free_when_undirected(self, cycle4):
        assert cycle4.edge_between(1, 0) is cycle4.edge_between(0, 1)

    def test_total_weight(self):
        g = Graph.from_edges(3, [(0, 1, 4), (1, 2, 5)])
        assert g.total_weight() == 9


class TestEdge:
    def test_immutable(self):
        e = Edge(0, 1, 3)
        with pytest.raises(AttributeError):
            e.weight = 7

    def test_other_end(self):
        e = Edge(0, 1)
        assert e.other_end(0) == 1
        assert e.other_end(1) == 0
        assert e.other_end(5) is None
        assert Edge(0, 1, directed=True).other_end(1) is None


class TestSerialisation:
    def test_dict_round_trip_preserves_structure(self, small_dag):
        copy = Graph.from_dict(small_dag.to_dict())
        assert copy.directed
        assert [e.key() for e in copy.edges()] == [e.key() for e in small_dag.edges()]
        assert copy.in_degrees() == small_dag.in_degrees()

    def test_from_dict_rejects_gapped_ids(self):
        data = {"nodes": [{"id": 0}, {"id": 2}], "edges": []}
        with pytest.raises(ValueError):
            Graph.from_dict(data)

    def test_from_dict_rejects_self_loop(self):
        data = {"nodes": [{"id": 0}], "edges": [{"source": 0, "target": 0}]}
        with pytest.raises(ValueError):
            Graph.from_dict(data)


class TestNodeImmutability:
    def test_node_is_immutable(self):
        node = Node(0, 1.0, 2.0)
        with pytest.raises(AttributeError):
            node.x = 5.0

    def test_graph_nodes_cannot_be_moved(self, cycle4):
        with pytest.raises(AttributeError):
            cycle4.nodes[0].label = "Z"
        assert cycle4.label(0) == "A"


class TestStrictParsing:
    def test_as_int(self):
        assert as_int(3) == 3
        assert as_int(2.0) == 2
        assert as_int("4") == 4
        for bad in (1.7, True, "x", None, [1], float("inf")):
            with pytest.raises(ValueError):
                as_int(bad)

    def test_as_float(self):
        assert as_float(3) == 3.0
        assert as_float("2.5") == 2.5
        for bad in ("left", None, False, float("nan")):
            with pytest.raises(ValueError):
                as_float(bad)

    def test_fractional_weight_is_rejected(self):
        data = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"source": 0, "target": 1, "weight": 1.7}]}
        with pytest.raises(ValueError):
            Graph.from_dict(data)

    def test_fractional_id_is_rejected(self):
        with pytest.raises(ValueError):
            Graph.from_dict({"nodes": [{"id": 0.5}], "edges": []})

    def test_integral_float_is_accepted(self):
        data = {"nodes": [{"id": 0.0}, {"id": 1}], "edges": [{"source": 0, "target": 1.0, "weight": 3.0}]}
        g = Graph.from_dict(data)
        assert g.edge_between(0, 1).weight == 3

    def test_non_numeric_position_is_rejected(self):
        with pytest.raises(ValueError):
            Graph.from_dict({"nodes": [{"id": 0, "x": "left"}], "edges": []})
