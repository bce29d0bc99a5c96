"""
Unit tests for the random structure generators.

Property loops run every level 1..20 with several seeds.
"""

import pytest

import config
from algorithms.predicates import has_cycle, is_bipartite, is_connected
from algorithms.topological import is_acyclic
from generators import (
    CONNECTED_KINDS,
    GraphKind,
    Maze,
    generate,
    generate_maze,
    left_side,
    maze_size,
    solve_maze,
)
from graph import Graph

LEVELS = range(1, 21)
SEEDS = range(5)


class TestGraphInvariants:
    @pytest.mark.parametrize("kind", CONNECTED_KINDS)
    def test_game_graphs_are_connected(self, kind):
        for level in LEVELS:
            for seed in SEEDS:
                g = generate(kind, level, seed=seed)
                assert is_connected(g), f"{kind} level={level} seed={seed}"

    @pytest.mark.parametrize("kind", [k for k in GraphKind if k is not GraphKind.MAZE])
    def test_no_self_loops_or_duplicates(self, kind):
        for level in LEVELS:
            g = generate(kind, level, seed=level)
            keys = [e.key() for e in g.edges()]
            assert len(keys) == len(set(keys))
            assert all(a != b for a, b in keys)

    def test_size_grows_with_level_and_is_capped(self):
        sizes = [generate(GraphKind.GRID, level, seed=0).node_count() for level in LEVELS]
        assert sizes == sorted(sizes)
        assert sizes[0] == 10
        assert max(sizes) == config.TRAVERSAL_MAX_NODES
        assert generate(GraphKind.WEIGHTED_GRID, 20, seed=0).node_count() == config.WEIGHTED_MAX_NODES
        assert generate(GraphKind.SPANNING, 1, seed=0).node_count() == 6

    def test_level_below_one_is_clamped(self):
        for kind in (GraphKind.GRID, GraphKind.BIPARTITE, GraphKind.LAYERED_DAG):
            assert generate(kind, 0, seed=3).to_dict() == generate(kind, 1, seed=3).to_dict()
            assert generate(kind, -5, seed=3).to_dict() == generate(kind, 1, seed=3).to_dict()

    def test_seed_makes_generation_reproducible(self):
        for kind in GraphKind:
            a = generate(kind, 4, seed=99)
            b = generate(kind, 4, seed=99)
            assert a.to_dict() == b.to_dict()

    def test_kind_accepts_string_value(self):
        assert isinstance(generate("weighted_grid", 2, seed=1), Graph)

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            generate("hexagon", 1)

    def test_weighted_grid_weights_are_positive(self):
        for level in LEVELS:
            g = generate(GraphKind.WEIGHTED_GRID, level, seed=level)
            assert all(e.weight >= 1 for e in g.edges())


class TestColoringGraphs:
    def test_level_picks_shape(self):
        cycle = generate(GraphKind.COLORING, 1, seed=0)
        assert cycle.edge_count() == cycle.node_count()
        assert all(cycle.degree(v) == 2 for v in cycle.node_ids())

        wheel = generate(GraphKind.COLORING, 3, seed=0)
        hub = wheel.node_count() - 1
        assert wheel.degree(hub) == wheel.node_count() - 1
        assert has_cycle(wheel)

    def test_clustered_stays_within_cap(self):
        for level in range(5, 21):
            g = generate(GraphKind.COLORING, level, seed=level)
            assert g.node_count() == config.COLORING_MAX_NODES


class TestLayeredDag:
    def test_acyclic_at_every_level(self):
        for level in LEVELS:
            for seed in SEEDS:
                g = generate(GraphKind.LAYERED_DAG, level, seed=seed)
                assert g.directed
                assert is_acyclic(g)

    def test_edges_only_reach_next_layer(self):
        g = generate(GraphKind.LAYERED_DAG, 6, seed=1)
        layer_of = {n.id: n.x for n in g.nodes}
        assert all(layer_of[e.target] - layer_of[e.source] == 120 for e in g.edges())


class TestBipartite:
    def test_partition(self):
        for level in LEVELS:
            g = generate(GraphKind.BIPARTITE, level, seed=level)
            side = g.node_count() // 2
            assert is_bipartite(g)
            assert all(e.source < side <= e.target for e in g.edges())
            assert set(left_side(g)) == set(range(side))
            assert g.nodes[0].label == "L1" and g.nodes[side].label == "R1"
            assert all(1 <= e.weight <= 10 for e in g.edges())


class TestMaze:
    def test_size(self):
        assert maze_size(1) == 16
        assert maze_size(0) == 16
        assert maze_size(100) == config.MAZE_MAX_SIZE

    def test_border_is_solid(self):
        m = generate_maze(3, seed=4)
        last = m.size - 1
        for i in range(m.size):
            assert m.walls[0][i] and m.walls[last][i]
            assert m.walls[i][0] and m.walls[i][last]

    def test_start_reaches_end_at_every_level(self):
        for level in range(1, 12):
            for seed in SEEDS:
                m = generate_maze(level, seed=seed)
                assert m.is_open(*m.start) and m.is_open(*m.end)
                assert solve_maze(m).solved, f"level={level} seed={seed}"

    def test_solution_is_a_corridor_walk(self):
        m = generate_maze(4, seed=8)
        solution = solve_maze(m)
        assert solution.path[0] == m.start
        assert solution.path[-1] == m.end
        for (x1, y1), (x2, y2) in zip(solution.path, solution.path[1:]):
            assert abs(x1 - x2) + abs(y1 - y2) == 1
            assert m.is_open(x2, y2)
        assert solution.visited[0] == m.start

    def test_maze_kind(self):
        assert isinstance(generate(GraphKind.MAZE, 2, seed=1), Maze)

    def test_to_graph_vertices_are_open_cells(self):
        m = generate_maze(1, seed=2)
        g, cells = m.to_graph()
        assert g.node_count() == len(m.open_cells()) == len(cells)
        assert is_connected(g)
