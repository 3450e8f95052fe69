"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The signature "matrix algorithm".  Every step carries the full NxN
distance matrix so the UI can render it as a live grid.

Structure:
  for k in nodes:          ← "intermediate" node
      for i in nodes:
          for j in nodes:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

Yields a Step for:
  1. Initialisation (edges → matrix; mirrored when undirected)
  2. Each (i, j) relaxation that STRICTLY improves the matrix
  3. Final matrix
"""

import math
from typing import Generator, List

from structures import Graph
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def FloydWarshall(graph):",                   # 0
    "    dist ← ∞; dist[i][i] ← 0",                # 1
    "    dist[u][v] ← w for every edge",           # 2
    "    for k in 0 … n-1:",                       # 3
    "        for i in 0 … n-1:",                   # 4
    "            for j in 0 … n-1:",               # 5
    "                if dist[i][k]+dist[k][j]",    # 6
    "                      < dist[i][j]:",         # 7
    "                    dist[i][j] = …",          # 8
    "    return dist",                             # 9
]


def initial_matrix(graph: Graph) -> List[List[float]]:
    ids = graph.node_ids()
    index = {nid: i for i, nid in enumerate(ids)}
    n = len(ids)
    dist = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for edge in graph.edges.values():
        i, j = index.get(edge.source), index.get(edge.target)
        if i is None or j is None:
            continue
        dist[i][j] = edge.weight
        if not graph.directed:
            dist[j][i] = edge.weight
    return dist


def floyd_warshall(graph: Graph) -> Generator[Step, None, None]:
    sb = StepBuilder()
    name = graph.value_of
    ids = graph.node_ids()
    n = len(ids)
    dist = initial_matrix(graph)

    sb.matrix_nodes = list(ids)
    sb.matrix = [row[:] for row in dist]
    yield sb.emit(StepKind.START, "Floyd-Warshall: Initial distance matrix created", line=2)

    for k in range(n):
        for i in range(n):
            for j in range(n):
                via = dist[i][k] + dist[k][j]
                if via < dist[i][j]:
                    dist[i][j] = via
                    sb.matrix = [row[:] for row in dist]
                    yield sb.emit(
                        StepKind.UPDATE,
                        f"Updated distance from {name(ids[i])} to {name(ids[j])} via {name(ids[k])}: {via}",
                        highlight_nodes=[ids[k]], line=8, cell=(i, j),
                    )

    yield sb.emit(StepKind.COMPLETE, "Floyd-Warshall algorithm complete", line=9,
                  output="All-pairs shortest paths computed successfully", is_final=True)
