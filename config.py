"""
Configuration constants for the graph game engine.

Generation limits mirror the games that consume each structure kind.
Server settings come from environment variables.
"""

import os
import secrets

# =============================================================================
# Server Configuration
# =============================================================================

SECRET_KEY = os.environ.get("GAMEHUB_SECRET_KEY") or secrets.token_hex(32)
LOG_LEVEL = os.environ.get("GAMEHUB_LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("GAMEHUB_HOST", "127.0.0.1")
PORT = int(os.environ.get("GAMEHUB_PORT", "5000"))

# =============================================================================
# Difficulty
# =============================================================================

MIN_LEVEL = 1

# =============================================================================
# Traversal graph (BFS / DFS game)
# =============================================================================

TRAVERSAL_BASE_NODES = 8
TRAVERSAL_NODES_PER_LEVEL = 2
TRAVERSAL_MAX_NODES = 15
TRAVERSAL_SPACING = 120
TRAVERSAL_JITTER = 30
TRAVERSAL_MAX_LINKS = 4          # per vertex; the floor is 2

# =============================================================================
# Weighted graph (shortest-path game)
# =============================================================================

WEIGHTED_BASE_NODES = 6
WEIGHTED_MAX_NODES = 10
WEIGHTED_SPACING = 140
WEIGHTED_JITTER = 40
WEIGHTED_MAX_LINKS = 3
WEIGHTED_DISTANCE_DIVISOR = 20   # weight = floor(d / 20) + noise + 1
WEIGHTED_NOISE_MAX = 7
WEIGHTED_REPAIR_BONUS = 5        # repair weight = floor(d / 20) + 5

# Shared by both grid layouts
LINK_RADIUS_FACTOR = 1.8         # connect only within 1.8 * spacing
LINK_PROBABILITY = 0.7
GRID_OFFSET = 50

# =============================================================================
# Spanning-tree graph (MST game)
# =============================================================================

SPANNING_BASE_NODES = 5
SPANNING_MAX_NODES = 10
SPANNING_EDGE_PROBABILITY = 0.6
SPANNING_WEIGHT_RANGE = (1, 20)

# =============================================================================
# Coloring graphs (cycle / wheel / clustered)
# =============================================================================

COLORING_BASE_NODES = 6
COLORING_NODES_PER_LEVEL = 2
COLORING_MAX_NODES = 15
CYCLE_MAX_LEVEL = 2              # levels 1-2 get a plain cycle
WHEEL_MAX_LEVEL = 4              # levels 3-4 get a wheel
CLUSTER_BASE = 3
CLUSTER_MAX = 4
CLUSTER_EDGE_PROBABILITY = 0.8

# =============================================================================
# Layered DAG (topological-sort game)
# =============================================================================

DAG_BASE_NODES = 5
DAG_MAX_NODES = 10
DAG_BASE_LAYERS = 3
DAG_MAX_LAYERS = 5
DAG_MAX_OUT_EDGES = 2

# =============================================================================
# Bipartite graph (matching game)
# =============================================================================

BIPARTITE_BASE_SIDE = 4
BIPARTITE_MAX_SIDE = 8
BIPARTITE_WEIGHT_RANGE = (1, 10)

# =============================================================================
# Maze
# =============================================================================

MAZE_BASE_SIZE = 15
MAZE_MAX_SIZE = 25

# =============================================================================
# Layout canvas (generation-time positions only)
# =============================================================================

CANVAS_CENTER = (300, 200)
CIRCLE_RADIUS = 150
