"""
main.py — Graph Game Engine Flask API
=====================================
Thin JSON layer the game UI talks to.  Every computation happens in the
engine packages; routes only parse input, call in, and serialise.

Routes:
  GET  /api/algorithms         – registry metadata
  POST /api/graph/generate     – generate a graph or maze for (kind, level)
  POST /api/run                – BFS / DFS / Dijkstra with trace + metrics
  POST /api/mst                – Kruskal
  POST /api/matching           – greedy (default) or exact matching
  POST /api/check              – structural predicates / win conditions
  POST /api/topo/start         – begin an interactive topological sort
  POST /api/topo/process       – process one available vertex
  GET  /api/topo/state         – available / processed state
  POST /api/compare            – two traceable algorithms side by side

State management:
  The Flask (cookie) session holds:
    • graph       – the last generated graph, as Graph.to_dict()
    • topo_order  – vertices processed so far in the topological game;
                    the session is rebuilt by replaying them
  Any POST may instead carry its own "graph" object.

Errors:
  ValueError (bad JSON fields, unknown kind or algorithm, malformed
  graph) and rejected engine results become HTTP 400 {"error": ...}.
"""

import logging
from typing import List, Optional, Tuple

from flask import Flask, jsonify, request, session

import config
from graph import Graph
from graph.convert import as_int
from algorithms import get_algorithm, list_algorithms, run_algorithm
from algorithms.coloring import chromatic_upper_bound, greedy_coloring, is_valid_coloring
from algorithms.kruskal import creates_cycle, kruskal
from algorithms.matching import greedy_matching, optimal_matching
from algorithms.network import average_clustering, diameter
from algorithms.predicates import (
    connected_components,
    degree_sequence,
    has_cycle,
    is_bipartite,
    is_connected,
    path_weight,
)
from algorithms.topological import is_acyclic, is_topological_order, topological_order
from engine import TopologicalSession, compare, summarize
from generators import GraphKind, Maze, generate

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY


# ---------------------------------------------------------------------------
# Structural checks available to /api/check (name -> graph -> JSON value)
# ---------------------------------------------------------------------------
CHECKS = {
    "connected":             is_connected,
    "components":            connected_components,
    "has_cycle":             has_cycle,
    "bipartite":             is_bipartite,
    "acyclic":               is_acyclic,
    "degree_sequence":       degree_sequence,
    "chromatic_upper_bound": chromatic_upper_bound,
    "greedy_coloring":       greedy_coloring,
    "topological_order":     topological_order,
    "diameter":              diameter,
    "average_clustering":    average_clustering,
}

DEFAULT_CHECKS = ("connected", "has_cycle", "bipartite", "degree_sequence")


# ---------------------------------------------------------------------------
# Request / Session Helpers
# ---------------------------------------------------------------------------
def _payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _int_field(data: dict, name: str, default=None, required: bool = False):
    value = data.get(name, default)
    if value is None:
        if required:
            raise ValueError(f"'{name}' is required")
        return None
    return as_int(value, name)


def _str_field(data: dict, name: str, default: str) -> str:
    value = data.get(name, default)
    if not isinstance(value, str):
        raise ValueError(f"'{name}' must be a string")
    return value


def _str_list(data: dict, name: str, default: List[str]) -> List[str]:
    value = data.get(name) or default
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'{name}' must be a list of strings")
    return value


def _int_list(data: dict, name: str, allow_none: bool = False) -> List[Optional[int]]:
    value = data[name]
    if not isinstance(value, list):
        raise ValueError(f"'{name}' must be a list")
    return [None if (v is None and allow_none) else as_int(v, name) for v in value]


def _pair_list(data: dict, name: str) -> List[Tuple[int, int]]:
    value = data[name]
    if not isinstance(value, list) or not all(isinstance(p, list) and len(p) == 2 for p in value):
        raise ValueError(f"'{name}' must be a list of [u, v] pairs")
    return [(as_int(u, name), as_int(v, name)) for u, v in value]


def get_graph(data: dict) -> Graph:
    """The request's own graph if it sent one, else the session's."""
    raw = data.get("graph")
    if raw is None:
        raw = session.get("graph")
    if raw is None:
        raise ValueError("No graph: generate one first or send 'graph'")
    if not isinstance(raw, dict):
        raise ValueError("'graph' must be an object")
    try:
        return Graph.from_dict(raw)
    except (AttributeError, KeyError, TypeError) as exc:
        raise ValueError(f"Malformed graph: {exc}") from None


def save_graph(graph: Graph) -> None:
    session["graph"] = graph.to_dict()
    session.pop("topo_order", None)


def get_topo_session(data: dict) -> TopologicalSession:
    return TopologicalSession.replay(get_graph(data), session.get("topo_order", []))


@app.errorhandler(ValueError)
def handle_value_error(exc):
    logger.warning("rejected %s %s: %s", request.method, request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


# ---------------------------------------------------------------------------
# API: Graph Generation
# ---------------------------------------------------------------------------
@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    data  = _payload()
    kind  = GraphKind(_str_field(data, "kind", GraphKind.GRID.value))
    level = _int_field(data, "level", default=1)
    seed  = _int_field(data, "seed")

    instance = generate(kind, level, seed=seed)
    logger.info("generated %s level=%d seed=%s", kind.value, level, seed)

    if isinstance(instance, Maze):
        return jsonify({"kind": kind.value, "level": level, "maze": instance.to_dict()})

    save_graph(instance)
    return jsonify({"kind": kind.value, "level": level, "graph": instance.to_dict()})


# ---------------------------------------------------------------------------
# API: Traceable Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data     = _payload()
    graph    = get_graph(data)
    algo_key = _str_field(data, "algo", "bfs")
    source   = _int_field(data, "source", required=True)
    target   = _int_field(data, "target")

    result = run_algorithm(algo_key, graph, source, target)
    if not result.accepted:
        raise ValueError(f"Source/target out of range for a graph of {graph.node_count()} vertices")

    info = get_algorithm(algo_key)
    body = result.to_dict()
    body["algo"] = algo_key
    body["pseudocode"] = info.pseudocode
    body["metrics"] = summarize(result, graph, algo_key, source, target).to_dict()
    return jsonify(body)


@app.route("/api/compare", methods=["POST"])
def api_compare():
    data   = _payload()
    graph  = get_graph(data)
    algos  = _str_list(data, "algos", ["bfs", "dfs"])
    source = _int_field(data, "source", required=True)
    target = _int_field(data, "target")

    if not graph.has_node(source) or (target is not None and not graph.has_node(target)):
        raise ValueError(f"Source/target out of range for a graph of {graph.node_count()} vertices")
    return jsonify(compare(graph, algos, source, target).to_dict())


# ---------------------------------------------------------------------------
# API: MST & Matching
# ---------------------------------------------------------------------------
@app.route("/api/mst", methods=["POST"])
def api_mst():
    graph = get_graph(_payload())
    return jsonify(kruskal(graph).to_dict())


@app.route("/api/matching", methods=["POST"])
def api_matching():
    data  = _payload()
    graph = get_graph(data)
    exact = bool(data.get("exact", False))

    matching = optimal_matching(graph.edges()) if exact else greedy_matching(graph.edges())
    body = matching.to_dict()
    body["exact"] = exact
    return jsonify(body)


# ---------------------------------------------------------------------------
# API: Structural Checks
# ---------------------------------------------------------------------------
@app.route("/api/check", methods=["POST"])
def api_check():
    """
    Body: {graph?, checks?: [names], path?: [ids], colors?: [c|null],
           order?: [ids], selection?: [[u, v], ...]}
    Optional fields add path_weight / valid_coloring / topological /
    creates_cycle to the response.
    """
    data   = _payload()
    graph  = get_graph(data)
    names  = _str_list(data, "checks", list(DEFAULT_CHECKS))

    unknown = [n for n in names if n not in CHECKS]
    if unknown:
        raise ValueError(f"Unknown checks: {unknown}")

    body = {name: CHECKS[name](graph) for name in names}

    if "path" in data:
        body["path_weight"] = path_weight(graph, _int_list(data, "path"))
    if "colors" in data:
        body["valid_coloring"] = is_valid_coloring(graph, _int_list(data, "colors", allow_none=True))
    if "order" in data:
        body["topological"] = is_topological_order(graph, _int_list(data, "order"))
    if "selection" in data:
        pairs = _pair_list(data, "selection")
        if not all(graph.has_node(u) and graph.has_node(v) for u, v in pairs):
            raise ValueError("'selection' must be [u, v] pairs of existing vertices")
        body["creates_cycle"] = creates_cycle(graph.node_count(), pairs)
    return jsonify(body)


# ---------------------------------------------------------------------------
# API: Interactive Topological Sort
# ---------------------------------------------------------------------------
@app.route("/api/topo/start", methods=["POST"])
def api_topo_start():
    data  = _payload()
    graph = get_graph(data)
    if not graph.directed:
        raise ValueError("Topological sort needs a directed graph")

    save_graph(graph)
    session["topo_order"] = []
    return jsonify(TopologicalSession(graph).to_dict())


@app.route("/api/topo/process", methods=["POST"])
def api_topo_process():
    data   = _payload()
    vertex = _int_field(data, "vertex", required=True)
    topo   = TopologicalSession.replay(get_graph({}), session.get("topo_order", []))

    if not topo.process_next(vertex):
        logger.info("topo: vertex %d not available (available=%s)", vertex, topo.available())
        body = topo.to_dict()
        body["accepted"] = False
        return jsonify(body), 400

    session["topo_order"] = topo.order
    body = topo.to_dict()
    body["accepted"] = True
    return jsonify(body)


@app.route("/api/topo/state", methods=["GET"])
def api_topo_state():
    return jsonify(get_topo_session({}).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Graph game engine API on http://%s:%d", config.HOST, config.PORT)
    app.run(host=config.HOST, port=config.PORT)
