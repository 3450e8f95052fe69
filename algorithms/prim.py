"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows a single tree from the first node in insertion order.  Each
round linearly scans EVERY edge for the cheapest one crossing the
visited / unvisited cut (direction ignored); first-found wins ties.

A disconnected graph yields a partial tree: the loop ends the first
round no crossing edge exists.
"""

from typing import Generator, List

from structures import Graph
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def Prim(graph):",                                   # 0
    "    visited ← {first node}",                         # 1
    "    while |visited| < |V|:",                         # 2
    "        e ← min-weight edge with one end in visited", # 3
    "        if no such edge: break",                     # 4
    "        visited.add(new end of e)",                  # 5
    "        mst.add(e)",                                 # 6
    "    return mst",                                     # 7
]


def prim(graph: Graph) -> Generator[Step, None, None]:
    sb = StepBuilder()
    name = graph.value_of
    node_ids = graph.node_ids()

    if not node_ids:
        yield sb.emit(StepKind.COMPLETE, "Prim's MST complete. Total weight: 0",
                      output="MST Complete! Total weight: 0, Edges: 0", is_final=True)
        return

    start = node_ids[0]
    visited: List[str] = [start]
    sb.visited = list(visited)
    yield sb.emit(StepKind.START, f"Starting Prim's MST from node {name(start)}",
                  highlight_nodes=[start], line=1)

    while len(visited) < len(node_ids):
        chosen = None
        for edge in graph.edges.values():
            if (edge.source in visited) != (edge.target in visited):
                if chosen is None or edge.weight < chosen.weight:
                    chosen = edge
        if chosen is None:
            break

        new_node = chosen.target if chosen.source in visited else chosen.source
        visited.append(new_node)
        sb.visited = list(visited)
        sb.mst_edges.append(chosen.id)
        sb.total_weight += chosen.weight
        yield sb.emit(StepKind.ADD_EDGE,
                      f"Added edge ({name(chosen.source)}, {name(chosen.target)}) with weight {chosen.weight}",
                      highlight_nodes=[new_node], highlight_edge=chosen.id, line=6)

    yield sb.emit(StepKind.COMPLETE, f"Prim's MST complete. Total weight: {sb.total_weight}", line=7,
                  output=f"MST Complete! Total weight: {sb.total_weight}, Edges: {len(sb.mst_edges)}",
                  is_final=True)
