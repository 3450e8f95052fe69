"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra with a linear minimum scan over the unvisited
set (no heap), so ties go to the node that appears first in insertion
order.

Yields a Step at:
  1. Initialise distances (0 at the source, ∞ elsewhere)
  2. Select the unvisited node with the smallest known distance
  3. Every STRICT improvement of a neighbour's distance
  4. Final: the full distance table

Stops as soon as the smallest remaining distance is ∞ (the rest of the
graph is unreachable).

Correctness note: Dijkstra requires non-negative weights.  Negative
weights are not rejected; the results are then undefined.
"""

import math
from typing import Dict, Generator, List

from structures import Graph
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                    # 0
    "    dist ← {v: ∞ for v in V}; dist[source] ← 0",  # 1
    "    unvisited ← V",                               # 2
    "    while unvisited is not empty:",               # 3
    "        u ← argmin(dist[v] for v in unvisited)",  # 4
    "        if dist[u] = ∞: break",                   # 5
    "        unvisited.remove(u)",                     # 6
    "        for (v, w) in adj(u) ∩ unvisited:",       # 7
    "            if dist[u] + w < dist[v]:",           # 8
    "                dist[v] ← dist[u] + w",           # 9
    "    return dist",                                 # 10
]


def _fmt(d: float):
    return "∞" if math.isinf(d) else d


def dijkstra(graph: Graph, source: str) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event during Dijkstra execution.

    Args:
        graph  : The graph to search (read-only).
        source : Starting node id.
    """
    sb = StepBuilder()
    name = graph.value_of
    dist: Dict[str, float] = {nid: (0 if nid == source else math.inf) for nid in graph.nodes}
    unvisited = list(graph.nodes)
    settled: List[str] = []

    sb.distances = dict(dist)
    yield sb.emit(StepKind.START, f"Starting Dijkstra's algorithm from node {name(source)}",
                  highlight_nodes=[source], line=1)

    while unvisited:
        current, best = None, math.inf
        for nid in unvisited:
            if dist[nid] < best:
                current, best = nid, dist[nid]
        if current is None:
            break

        unvisited.remove(current)
        settled.append(current)
        sb.visited = list(settled)
        yield sb.emit(StepKind.VISIT, f"Processing node {name(current)} with distance {_fmt(dist[current])}",
                      highlight_nodes=[current], line=6)

        for nbr, edge in graph.neighbours(current):
            if nbr not in unvisited:
                continue
            candidate = dist[current] + edge.weight
            if candidate < dist[nbr]:
                dist[nbr] = candidate
                sb.distances = dict(dist)
                yield sb.emit(StepKind.RELAX, f"Updated distance to node {name(nbr)}: {candidate}",
                              highlight_nodes=[nbr], highlight_edge=edge.id, line=9)

    reachable = sum(1 for d in dist.values() if not math.isinf(d))
    yield sb.emit(StepKind.COMPLETE, "Dijkstra's algorithm complete", line=10,
                  output=("Dijkstra's algorithm complete - shortest paths computed "
                          f"({reachable} of {len(dist)} nodes reachable)"),
                  is_final=True)
