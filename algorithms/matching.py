"""
matching.py — Bipartite Matching
================================
Two ways to build a reference matching for the matching game:

  greedy_matching   – sort edges by weight (descending, stable) and take
                      each edge whose endpoints are both still free.
                      Fast and plausible, but an APPROXIMATION: with
                      L1-R1 (3), L1-R2 (2), L2-R1 (2) it takes 3 while
                      the optimum is 2 + 2 = 4.
  optimal_matching  – exact maximum-weight matching by dynamic
                      programming over subsets of right-side vertices.
                      O(L · 2^R · R); the game caps R at 8.

Both take a plain edge list so they work on a Graph's edges() as well
as on a player's selection.  optimal_matching works out the two sides
itself; edges may be stored in either direction.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Set, Tuple

from graph import Edge


@dataclass(frozen=True)
class Matching:
    edges:        Tuple[Edge, ...] = ()
    total_weight: int              = 0

    def __len__(self) -> int:
        return len(self.edges)

    def matched_vertices(self) -> Set[int]:
        out: Set[int] = set()
        for e in self.edges:
            out.update(e.endpoints)
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edges":        [e.to_dict() for e in self.edges],
            "total_weight": self.total_weight,
            "size":         len(self.edges),
        }


def greedy_matching(edges: Iterable[Edge]) -> Matching:
    used: Set[int] = set()
    accepted: List[Edge] = []
    for edge in sorted(edges, key=lambda e: -e.weight):
        if edge.source in used or edge.target in used:
            continue
        accepted.append(edge)
        used.add(edge.source)
        used.add(edge.target)
    return Matching(edges=tuple(accepted), total_weight=sum(e.weight for e in accepted))


def optimal_matching(edges: Sequence[Edge]) -> Matching:
    """
    Exact maximum-weight matching for a bipartite edge list.

    Sides come from 2-coloring the edges (each component's lowest id
    goes left), so the stored source/target orientation does not matter.
    Raises ValueError if the edges contain an odd cycle.  On equal
    weight, fewer edges are preferred; remaining ties resolve to the
    first edge in input order.
    """
    oriented = _orient(edges)
    lefts  = sorted({left for left, _, _ in oriented})
    rights = sorted({right for _, right, _ in oriented})
    bit    = {r: 1 << i for i, r in enumerate(rights)}

    by_left: Dict[int, List[Tuple[int, Edge]]] = {u: [] for u in lefts}
    for left, right, e in oriented:
        by_left[left].append((right, e))

    # best[mask] = (weight, -edge count, chosen edges) after processing a prefix of lefts
    best: Dict[int, Tuple[int, int, Tuple[Edge, ...]]] = {0: (0, 0, ())}
    for u in lefts:
        nxt = dict(best)
        for mask, (w, neg_count, chosen) in best.items():
            for right, e in by_left[u]:
                b = bit[right]
                if mask & b:
                    continue
                cand = (w + e.weight, neg_count - 1, chosen + (e,))
                cur = nxt.get(mask | b)
                if cur is None or cand[:2] > cur[:2]:
                    nxt[mask | b] = cand
        best = nxt

    weight, _, chosen = max(best.values(), key=lambda t: t[:2])
    return Matching(edges=chosen, total_weight=weight)


def _orient(edges: Sequence[Edge]) -> List[Tuple[int, int, Edge]]:
    """(left, right, edge) for every edge, sides taken from a BFS 2-coloring."""
    adj: Dict[int, List[int]] = {}
    for e in edges:
        adj.setdefault(e.source, []).append(e.target)
        adj.setdefault(e.target, []).append(e.source)

    side: Dict[int, int] = {}
    for start in sorted(adj):
        if start in side:
            continue
        side[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if v not in side:
                    side[v] = 1 - side[u]
                    queue.append(v)
                elif side[v] == side[u]:
                    raise ValueError(f"Edges are not bipartite: {u} and {v} fall on the same side")

    return [
        (e.source, e.target, e) if side[e.source] == 0 else (e.target, e.source, e)
        for e in edges
    ]


# ---------------------------------------------------------------------------
# Win-condition checks for a player-built selection
# ---------------------------------------------------------------------------
def is_matching(edges: Iterable[Edge]) -> bool:
    seen: Set[int] = set()
    for e in edges:
        if e.source in seen or e.target in seen:
            return False
        seen.add(e.source)
        seen.add(e.target)
    return True


def is_maximal_matching(selected: Sequence[Edge], all_edges: Iterable[Edge]) -> bool:
    """No edge of the graph can be added without breaking the matching."""
    if not is_matching(selected):
        return False
    used: Set[int] = set()
    for e in selected:
        used.update(e.endpoints)
    return not any(e.source not in used and e.target not in used for e in all_edges)


def is_perfect_matching(selected: Sequence[Edge], vertex_count: int) -> bool:
    return is_matching(selected) and 2 * len(selected) == vertex_count
