"""
boruvka.py — Borůvka's (Sollin's) Minimum Spanning Tree
========================================================
Every node starts as its own component.  Each round:
  1. For every component (in creation order) find the cheapest edge
     with exactly one end inside it; first-found wins ties.
  2. Add each such edge once (dedup by edge id), merging the two
     components it joins.
  3. Stop when one component is left, or when a round adds nothing
     (disconnected graph → spanning forest).

Edge direction is ignored.
"""

from typing import Dict, Generator, List, Optional, Set

from structures import Graph
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def Boruvka(graph):",                                     # 0
    "    components ← {{v} for v in V}",                       # 1
    "    while |components| > 1:",                             # 2
    "        for C in components:",                            # 3
    "            cheapest[C] ← min edge leaving C",            # 4
    "        for e in cheapest (unique):",                     # 5
    "            if e joins two components: mst.add(e), merge", # 6
    "        if nothing added: break",                         # 7
    "    return mst",                                          # 8
]


def _owner(components: Dict[str, Set[str]], node_id: str) -> Optional[str]:
    for key, members in components.items():
        if node_id in members:
            return key
    return None


def boruvka(graph: Graph) -> Generator[Step, None, None]:
    sb = StepBuilder()
    name = graph.value_of
    components: Dict[str, Set[str]] = {nid: {nid} for nid in graph.node_ids()}

    yield sb.emit(StepKind.START,
                  f"Starting Borůvka's MST algorithm with {len(components)} components",
                  line=1, components=len(components))

    rnd = 0
    while len(components) > 1:
        rnd += 1
        cheapest = []
        for key, members in components.items():
            best = None
            for edge in graph.edges.values():
                if _owner(components, edge.source) == _owner(components, edge.target):
                    continue
                if edge.source in members or edge.target in members:
                    if best is None or edge.weight < best.weight:
                        best = edge
            if best is not None:
                cheapest.append(best)

        added = 0
        for edge in cheapest:
            if edge.id in sb.mst_edges:
                continue
            a, b = _owner(components, edge.source), _owner(components, edge.target)
            if a == b:
                # an earlier merge this round already joined these two
                continue
            merged = components.pop(a) | components.pop(b)
            components[edge.id] = merged
            sb.mst_edges.append(edge.id)
            sb.total_weight += edge.weight
            added += 1
            yield sb.emit(StepKind.ADD_EDGE,
                          f"Added edge ({name(edge.source)}, {name(edge.target)}) with weight {edge.weight}",
                          highlight_nodes=[edge.source, edge.target], highlight_edge=edge.id,
                          line=6, round=rnd, components=len(components))

        if not added:
            break

    yield sb.emit(StepKind.COMPLETE, f"Borůvka's MST complete. Total weight: {sb.total_weight}",
                  line=8, components=len(components),
                  output=f"MST Complete! Total weight: {sb.total_weight}, Edges: {len(sb.mst_edges)}",
                  is_final=True)
