"""
builders.py — Random Structure Generator
========================================
Factory functions that turn (kind, level) into a puzzle instance.

Every builder takes an injectable `random.Random`; pass a seed (or your
own Random) and the whole level is reproducible.  Vertex count and
density grow with the level up to a per-kind cap, and levels below 1
are clamped to 1.

Guarantees:
  - no self-loops, no duplicate edges (the Graph refuses them)
  - GRID / WEIGHTED_GRID / SPANNING graphs are connected: isolated
    vertices are attached to their nearest vertex by layout distance,
    then any remaining components are bridged at their closest pair
  - LAYERED_DAG only has edges from a layer into the next one, so it is
    acyclic by construction
"""

import logging
import math
import random
from enum import Enum
from typing import Callable, List, Optional, Union

import config
from graph import Graph
from algorithms.predicates import connected_components
from generators.maze import Maze, generate_maze

logger = logging.getLogger(__name__)

WeightFn = Callable[[float], int]


class GraphKind(Enum):
    GRID          = "grid"            # traversal game: grid layout + random nearby links
    WEIGHTED_GRID = "weighted_grid"   # shortest-path game: as GRID, distance-based weights
    SPANNING      = "spanning"        # MST game: random weighted graph on a circle
    CYCLE         = "cycle"
    WHEEL         = "wheel"
    CLUSTERED     = "clustered"
    COLORING      = "coloring"        # cycle / wheel / clustered depending on level
    LAYERED_DAG   = "layered_dag"     # topological-sort game
    BIPARTITE     = "bipartite"       # matching game
    MAZE          = "maze"


def generate(
    kind: Union[GraphKind, str],
    level: int = 1,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Union[Graph, Maze]:
    """
    Build one instance.  `kind` may be the enum or its string value;
    an unknown string raises ValueError.
    """
    kind = GraphKind(kind)
    rng = rng or random.Random(seed)
    level = max(level, config.MIN_LEVEL)

    builder = _BUILDERS[kind]
    result = builder(level, rng)
    logger.debug("generated %s level=%d: %r", kind.value, level, result)
    return result


# ==========================================================================
# Grid layouts (traversal / shortest-path games)
# ==========================================================================
def grid_graph(level: int, rng: random.Random) -> Graph:
    n = min(config.TRAVERSAL_BASE_NODES + config.TRAVERSAL_NODES_PER_LEVEL * level, config.TRAVERSAL_MAX_NODES)
    g = Graph(directed=False, weighted=False)
    _place_on_grid(g, n, config.TRAVERSAL_SPACING, config.TRAVERSAL_JITTER, rng)

    radius = config.TRAVERSAL_SPACING * config.LINK_RADIUS_FACTOR
    for i in g.node_ids():
        max_links = min(config.TRAVERSAL_MAX_LINKS, rng.randint(2, 4))
        _link_nearby(g, i, max_links, radius, rng, lambda d: 1)

    _repair_connectivity(g, lambda d: 1)
    return g


def weighted_grid_graph(level: int, rng: random.Random) -> Graph:
    n = min(config.WEIGHTED_BASE_NODES + level, config.WEIGHTED_MAX_NODES)
    g = Graph(directed=False, weighted=True)
    _place_on_grid(g, n, config.WEIGHTED_SPACING, config.WEIGHTED_JITTER, rng)

    def link_weight(d: float) -> int:
        return int(d // config.WEIGHTED_DISTANCE_DIVISOR) + rng.randint(0, config.WEIGHTED_NOISE_MAX) + 1

    def repair_weight(d: float) -> int:
        return int(d // config.WEIGHTED_DISTANCE_DIVISOR) + config.WEIGHTED_REPAIR_BONUS

    radius = config.WEIGHTED_SPACING * config.LINK_RADIUS_FACTOR
    max_links = min(config.WEIGHTED_MAX_LINKS, n - 1)
    for i in g.node_ids():
        _link_nearby(g, i, max_links, radius, rng, link_weight)

    _repair_connectivity(g, repair_weight)
    return g


# ==========================================================================
# Circle layouts
# ==========================================================================
def spanning_graph(level: int, rng: random.Random) -> Graph:
    n = min(config.SPANNING_BASE_NODES + level, config.SPANNING_MAX_NODES)
    g = Graph(directed=False, weighted=True)
    _place_on_circle(g, n, radius=120 + level * 15)

    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < config.SPANNING_EDGE_PROBABILITY:
                g.add_edge(i, j, weight=rng.randint(*config.SPANNING_WEIGHT_RANGE))

    components = connected_components(g)
    for other in components[1:]:
        logger.debug("spanning: bridging component %s to %s", other, components[0])
        g.add_edge(components[0][0], other[0], weight=rng.randint(*config.SPANNING_WEIGHT_RANGE))
    return g


def _coloring_size(level: int) -> int:
    return min(config.COLORING_BASE_NODES + config.COLORING_NODES_PER_LEVEL * level, config.COLORING_MAX_NODES)


def cycle_graph(level: int, rng: random.Random) -> Graph:
    n = _coloring_size(level)
    g = Graph(directed=False, weighted=False)
    _place_on_circle(g, n, radius=config.CIRCLE_RADIUS)
    for i in range(n):
        g.add_edge(i, (i + 1) % n)
    return g


def wheel_graph(level: int, rng: random.Random) -> Graph:
    """Rim of n-1 vertices plus a hub (the last id) joined to every rim vertex."""
    n = _coloring_size(level)
    rim = n - 1
    g = Graph(directed=False, weighted=False)
    _place_on_circle(g, rim, radius=config.CIRCLE_RADIUS)
    hub = g.add_node(*config.CANVAS_CENTER).id
    for i in range(rim):
        g.add_edge(i, (i + 1) % rim)
        g.add_edge(i, hub)
    return g


def clustered_graph(level: int, rng: random.Random) -> Graph:
    """Dense clusters joined by one or two links per cluster pair."""
    n = _coloring_size(level)
    clusters = min(config.CLUSTER_BASE + level // 2, config.CLUSTER_MAX)
    per = math.ceil(n / clusters)
    g = Graph(directed=False, weighted=False)

    bounds: List[range] = []
    for c in range(clusters):
        start, stop = c * per, min((c + 1) * per, n)
        if start >= stop:
            break
        cx, cy = 200 + (c % 2) * 300, 150 + (c // 2) * 300
        size = stop - start
        for k in range(size):
            angle = 2 * math.pi * k / size
            g.add_node(cx + 80 * math.cos(angle), cy + 80 * math.sin(angle))
        bounds.append(range(start, stop))

    for members in bounds:
        for i in members:
            for j in range(i + 1, members.stop):
                if rng.random() < config.CLUSTER_EDGE_PROBABILITY:
                    g.add_edge(i, j)

    for a in range(len(bounds)):
        for b in range(a + 1, len(bounds)):
            for _ in range(rng.randint(1, 2)):
                u = rng.choice(bounds[a])
                v = rng.choice(bounds[b])
                if not g.has_edge(u, v):
                    g.add_edge(u, v)
    return g


def coloring_graph(level: int, rng: random.Random) -> Graph:
    if level <= config.CYCLE_MAX_LEVEL:
        return cycle_graph(level, rng)
    if level <= config.WHEEL_MAX_LEVEL:
        return wheel_graph(level, rng)
    return clustered_graph(level, rng)


# ==========================================================================
# Layered DAG
# ==========================================================================
def layered_dag(level: int, rng: random.Random) -> Graph:
    n = min(config.DAG_BASE_NODES + level, config.DAG_MAX_NODES)
    layers = min(config.DAG_BASE_LAYERS + level // 2, config.DAG_MAX_LAYERS)
    per = math.ceil(n / layers)
    g = Graph(directed=True, weighted=False)

    for i in range(n):
        layer, slot = divmod(i, per)
        in_layer = min(per, n - layer * per)
        g.add_node(100 + layer * 120, 100 + slot * 300 / in_layer)

    # edges only go from layer k to layer k+1
    for i in range(n):
        next_start = (i // per + 1) * per
        next_stop = min(next_start + per, n)
        if next_start >= n:
            continue
        links = min(rng.randint(1, config.DAG_MAX_OUT_EDGES), next_stop - next_start)
        for _ in range(links):
            target = rng.randrange(next_start, next_stop)
            if not g.has_edge(i, target):
                g.add_edge(i, target)
    return g


# ==========================================================================
# Bipartite
# ==========================================================================
def bipartite_graph(level: int, rng: random.Random) -> Graph:
    """
    Left vertices are ids 0..L-1 (labels L1…), right vertices L..L+R-1
    (labels R1…).  Every edge is stored left → right.
    """
    side = min(config.BIPARTITE_BASE_SIDE + level, config.BIPARTITE_MAX_SIDE)
    g = Graph(directed=False, weighted=True)
    for i in range(side):
        g.add_node(150, 100 + i * 300 / side, label=f"L{i + 1}")
    for i in range(side):
        g.add_node(450, 100 + i * 300 / side, label=f"R{i + 1}")

    for left in range(side):
        count = rng.randint(1, side)
        for right in rng.sample(range(side), count):
            g.add_edge(left, side + right, weight=rng.randint(*config.BIPARTITE_WEIGHT_RANGE))
    return g


def left_side(graph: Graph) -> List[int]:
    """Vertices that appear as an edge source (the left partition of a generated bipartite graph)."""
    return sorted({e.source for e in graph.edges()})


# ==========================================================================
# Layout helpers
# ==========================================================================
def _place_on_grid(g: Graph, n: int, spacing: float, jitter: float, rng: random.Random) -> None:
    side = math.ceil(math.sqrt(n))
    for i in range(n):
        row, col = divmod(i, side)
        x = config.GRID_OFFSET + col * spacing + (rng.random() - 0.5) * jitter
        y = config.GRID_OFFSET + row * spacing + (rng.random() - 0.5) * jitter
        g.add_node(x, y)


def _place_on_circle(g: Graph, n: int, radius: float) -> None:
    cx, cy = config.CANVAS_CENTER
    for i in range(n):
        angle = 2 * math.pi * i / n
        g.add_node(cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def _link_nearby(
    g: Graph,
    i: int,
    max_links: int,
    radius: float,
    rng: random.Random,
    weight_fn: WeightFn,
) -> None:
    """Scan vertices in id order, linking i to close ones with LINK_PROBABILITY."""
    nodes = g.nodes
    links = 0
    for j in g.node_ids():
        if links >= max_links:
            break
        if i == j:
            continue
        d = nodes[i].distance_to(nodes[j])
        if d < radius and not g.has_edge(i, j) and rng.random() < config.LINK_PROBABILITY:
            g.add_edge(i, j, weight=weight_fn(d))
            links += 1


# ==========================================================================
# Repair passes
# ==========================================================================
def _repair_connectivity(g: Graph, weight_fn: WeightFn) -> None:
    """
    1. every isolated vertex gets an edge to its nearest vertex
    2. while several components remain, join the first one to the closest
       vertex outside it
    Each edge added removes one isolated vertex or merges two components,
    so both loops terminate.
    """
    nodes = g.nodes
    if len(nodes) < 2:
        return

    for v in g.node_ids():
        if g.degree(v) > 0:
            continue
        nearest = min((u for u in g.node_ids() if u != v), key=lambda u: (nodes[v].distance_to(nodes[u]), u))
        d = nodes[v].distance_to(nodes[nearest])
        logger.debug("repair: attaching isolated vertex %d to nearest %d", v, nearest)
        g.add_edge(v, nearest, weight=weight_fn(d))

    components = connected_components(g)
    while len(components) > 1:
        inside = set(components[0])
        d, a, b = min(
            (nodes[a].distance_to(nodes[b]), a, b)
            for a in inside
            for b in g.node_ids()
            if b not in inside
        )
        logger.debug("repair: bridging components via %d-%d", a, b)
        g.add_edge(a, b, weight=weight_fn(d))
        components = connected_components(g)


def _maze(level: int, rng: random.Random) -> Maze:
    return generate_maze(level, rng=rng)


_BUILDERS = {
    GraphKind.GRID:          grid_graph,
    GraphKind.WEIGHTED_GRID: weighted_grid_graph,
    GraphKind.SPANNING:      spanning_graph,
    GraphKind.CYCLE:         cycle_graph,
    GraphKind.WHEEL:         wheel_graph,
    GraphKind.CLUSTERED:     clustered_graph,
    GraphKind.COLORING:      coloring_graph,
    GraphKind.LAYERED_DAG:   layered_dag,
    GraphKind.BIPARTITE:     bipartite_graph,
    GraphKind.MAZE:          _maze,
}

# Kinds whose instances must be connected (traversal / shortest-path / MST games)
CONNECTED_KINDS = (GraphKind.GRID, GraphKind.WEIGHTED_GRID, GraphKind.SPANNING)
