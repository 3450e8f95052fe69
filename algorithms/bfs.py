"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over an explicit FIFO queue.  Yields a Step at
every meaningful event:
  1. Dequeue from the FRONT  →  highlight it
  2. Already visited?        →  skip
  3. Mark visited            →  full visited snapshot
  4. Enqueue to the REAR     →  every unvisited neighbour not already queued
  5. Final step              →  total visited count

Neighbours are discovered by scanning the edge list in creation order,
so the queue reads in the same order the edges were drawn.
"""

from collections import deque
from typing import Generator, List

from structures import Graph
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                      # 0
    "    queue ← [start]",                         # 1
    "    visited ← {}",                            # 2
    "    while queue is not empty:",               # 3
    "        node ← queue.dequeue()",              # 4
    "        if node in visited: continue",        # 5
    "        visited.add(node)",                   # 6
    "        for nbr in adj(node) - visited:",     # 7
    "            if nbr not in queue:",            # 8
    "                queue.enqueue(nbr)",          # 9
    "    return visited",                          # 10
]


def unvisited_neighbours(graph: Graph, node_id: str, visited) -> List[str]:
    """Neighbour ids of `node_id` not yet visited, in edge-creation order."""
    return [nbr for nbr, _ in graph.neighbours(node_id) if nbr not in visited]


def bfs(graph: Graph, start: str) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event during BFS execution.

    Args:
        graph : The graph to traverse (read-only).
        start : Starting node id.
    """
    sb = StepBuilder()
    queue = deque([start])
    visited: List[str] = []
    name = graph.value_of

    sb.queue = list(queue)
    yield sb.emit(StepKind.START, f"Starting BFS from node {name(start)}",
                  highlight_nodes=[start], line=1)

    while queue:
        yield sb.emit(StepKind.DEQUEUE, f"🔍 Dequeue from FRONT: {name(queue[0])}",
                      highlight_nodes=[queue[0]], line=4)
        current = queue.popleft()
        sb.queue = list(queue)

        if current in visited:
            yield sb.emit(StepKind.SKIP, f"⚠️ Node {name(current)} already visited, skipping", line=5)
            continue

        visited.append(current)
        sb.visited = list(visited)
        yield sb.emit(StepKind.VISIT, f"✅ Mark {name(current)} as visited",
                      highlight_nodes=[current], line=6)

        neighbours = unvisited_neighbours(graph, current, visited)
        if not neighbours:
            yield sb.emit(StepKind.SKIP, f"🚫 No unvisited neighbors for {name(current)}", line=7)
            continue

        added = []
        for nbr in neighbours:
            if nbr not in queue:
                queue.append(nbr)
                added.append(nbr)
        if added:
            sb.queue = list(queue)
            yield sb.emit(StepKind.ENQUEUE,
                          f"➕ Enqueue to REAR: {', '.join(str(name(n)) for n in added)}",
                          highlight_nodes=added, line=9)

    yield sb.emit(StepKind.COMPLETE, "BFS traversal complete", line=10,
                  output=f"BFS Complete: Visited {len(visited)} nodes", is_final=True)
