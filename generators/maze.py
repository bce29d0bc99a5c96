"""
maze.py — Perfect Maze Generation & Solving
===========================================
Grid of size×size squares.  Odd-coordinate squares are "cells", the
squares between two cells are "walls"; the border is always wall.

Generation is recursive backtracking with an explicit stack: from the
cell on top of the stack, pick a random unvisited cell two squares away,
knock down the wall between them and push it; pop when nothing is left.

Afterwards the end square (size-2, size-2) is opened and start→end
reachability is checked with the BFS predicate.  If it fails (always the
case for even sizes, where the end is not a cell) a corridor is forced
from the end leftwards along its row, then up column 1 to the start.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import config
from graph import Graph
from algorithms.bfs import bfs
from algorithms.predicates import is_reachable

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (x, y)

# up, right, down, left; two squares per move
CARVE_DIRECTIONS: Tuple[Cell, ...] = ((0, -2), (2, 0), (0, 2), (-2, 0))


@dataclass(frozen=True)
class Maze:
    """
    Attributes:
        size  : Side length in squares.
        walls : walls[y][x] is True where the square is solid.
        start : Top-left cell (1, 1).
        end   : (size-2, size-2).
    """

    size:  int
    walls: Tuple[Tuple[bool, ...], ...]
    start: Cell
    end:   Cell

    def is_open(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size and not self.walls[y][x]

    def open_cells(self) -> List[Cell]:
        """Row-major order, the vertex order of to_graph()."""
        return [(x, y) for y in range(self.size) for x in range(self.size) if not self.walls[y][x]]

    def to_graph(self) -> Tuple[Graph, List[Cell]]:
        """Open squares as vertices, 4-neighbour adjacency as unit edges."""
        return _grid_graph(self.walls)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size":  self.size,
            "walls": [[1 if w else 0 for w in row] for row in self.walls],
            "start": list(self.start),
            "end":   list(self.end),
        }


@dataclass(frozen=True)
class MazeSolution:
    visited: Tuple[Cell, ...] = ()
    path:    Tuple[Cell, ...] = ()

    @property
    def solved(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visited": [list(c) for c in self.visited],
            "path":    [list(c) for c in self.path],
        }


def maze_size(level: int) -> int:
    level = max(level, config.MIN_LEVEL)
    return min(config.MAZE_BASE_SIZE + level, config.MAZE_MAX_SIZE)


def generate_maze(
    level: int = 1,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Maze:
    rng = rng or random.Random(seed)
    size = maze_size(level)
    grid = [[True] * size for _ in range(size)]

    start: Cell = (1, 1)
    grid[1][1] = False
    stack: List[Cell] = [start]

    while stack:
        cx, cy = stack[-1]
        candidates = [
            (cx + dx, cy + dy)
            for dx, dy in CARVE_DIRECTIONS
            if 0 < cx + dx < size - 1 and 0 < cy + dy < size - 1 and grid[cy + dy][cx + dx]
        ]
        if not candidates:
            stack.pop()
            continue
        nx, ny = rng.choice(candidates)
        grid[(cy + ny) // 2][(cx + nx) // 2] = False
        grid[ny][nx] = False
        stack.append((nx, ny))

    end: Cell = (size - 2, size - 2)
    grid[end[1]][end[0]] = False

    graph, cells = _grid_graph(grid)
    index = {cell: i for i, cell in enumerate(cells)}
    if not is_reachable(graph, index[start], index[end]):
        logger.debug("maze %dx%d: end not reachable, forcing a corridor", size, size)
        _force_corridor(grid, end)

    return Maze(
        size=size,
        walls=tuple(tuple(row) for row in grid),
        start=start,
        end=end,
    )


def solve_maze(maze: Maze) -> MazeSolution:
    """BFS from start to end over open squares."""
    graph, cells = maze.to_graph()
    index = {cell: i for i, cell in enumerate(cells)}
    if maze.start not in index or maze.end not in index:
        return MazeSolution()

    result = bfs(graph, index[maze.start], index[maze.end])
    return MazeSolution(
        visited=tuple(cells[s.current] for s in result.steps),
        path=tuple(cells[v] for v in result.path),
    )


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------
def _grid_graph(walls) -> Tuple[Graph, List[Cell]]:
    size = len(walls)
    cells = [(x, y) for y in range(size) for x in range(size) if not walls[y][x]]
    index = {cell: i for i, cell in enumerate(cells)}

    g = Graph(directed=False, weighted=False)
    for x, y in cells:
        g.add_node(x, y, label=f"{x},{y}")
    for (x, y), i in index.items():
        for nbr in ((x + 1, y), (x, y + 1)):
            j = index.get(nbr)
            if j is not None:
                g.add_edge(i, j)
    return g, cells


def _force_corridor(grid: List[List[bool]], end: Cell) -> None:
    x, y = end
    grid[y][x] = False
    while x > 1 or y > 1:
        if x > 1:
            x -= 1
        else:
            y -= 1
        grid[y][x] = False
