"""Unit tests for the Kahn helpers and the interactive session."""

import pytest

from algorithms.topological import is_acyclic, is_topological_order, topological_order
from engine import TopologicalSession
from generators import GraphKind, generate
from graph import Graph


class TestBatchHelpers:
    def test_lowest_id_first(self, small_dag):
        assert topological_order(small_dag) == [0, 1, 2, 3]

    def test_cycle_leaves_order_short(self):
        g = Graph.from_edges(3, [(0, 1), (1, 2), (2, 1)], directed=True)
        assert topological_order(g) == [0]
        assert not is_acyclic(g)

    def test_is_topological_order(self, small_dag):
        assert is_topological_order(small_dag, [1, 0, 2, 3])
        assert not is_topological_order(small_dag, [0, 2, 1, 3])
        assert not is_topological_order(small_dag, [0, 1, 2])


class TestSession:
    def test_small_dag_walkthrough(self, small_dag):
        s = TopologicalSession(small_dag)
        assert s.available() == [0, 1]

        assert s.process_next(0)
        assert s.available() == [1]
        assert s.process_next(1)
        assert s.available() == [2]
        assert s.process_next(2)
        assert s.available() == [3]
        assert s.process_next(3)

        assert s.is_complete
        assert s.order == [0, 1, 2, 3]

    def test_rejects_unavailable_vertex(self, small_dag):
        s = TopologicalSession(small_dag)
        assert not s.process_next(2)
        assert s.order == []
        assert s.in_degree == [0, 0, 2, 1]

    def test_rejects_processed_and_unknown(self, small_dag):
        s = TopologicalSession(small_dag)
        s.process_next(0)
        assert not s.process_next(0)
        assert not s.process_next(17)
        assert not s.process_next(-1)
        assert s.order == [0]

    def test_replay_rebuilds_state(self, small_dag):
        s = TopologicalSession.replay(small_dag, [1, 0])
        assert s.available() == [2]
        with pytest.raises(ValueError):
            TopologicalSession.replay(small_dag, [2])

    def test_stuck_only_on_cycle(self):
        g = Graph.from_edges(2, [(0, 1), (1, 0)], directed=True)
        assert TopologicalSession(g).is_stuck

    def test_any_available_choice_yields_valid_order(self, rng):
        for level in range(1, 11):
            for _ in range(5):
                dag = generate(GraphKind.LAYERED_DAG, level, rng=rng)
                s = TopologicalSession(dag)
                while not s.is_complete:
                    choices = s.available()
                    assert choices, "a DAG never deadlocks"
                    assert s.process_next(rng.choice(choices))
                assert is_topological_order(dag, s.order)
