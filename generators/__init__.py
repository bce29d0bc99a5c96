from generators.builders import GraphKind, generate, left_side, CONNECTED_KINDS
from generators.maze import Maze, MazeSolution, generate_maze, solve_maze, maze_size

__all__ = [
    "GraphKind", "generate", "left_side", "CONNECTED_KINDS",
    "Maze", "MazeSolution", "generate_maze", "solve_maze", "maze_size",
]
