"""
dfs.py — Depth-First Search
============================
Iterative DFS with an explicit LIFO stack.  Same event shape as BFS
(pop, skip, mark visited, push) except that unvisited neighbours are
pushed in REVERSE discovery order, so popping them yields the original
left-to-right order and the stack panel reads naturally.
"""

from typing import Generator, List

from structures import Graph
from algorithms.bfs import unvisited_neighbours
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",                              # 0
    "    stack ← [start]",                                 # 1
    "    visited ← {}",                                    # 2
    "    while stack is not empty:",                       # 3
    "        node ← stack.pop()",                          # 4
    "        if node in visited: continue",                # 5
    "        visited.add(node)",                           # 6
    "        for nbr in reversed(adj(node) - visited):",   # 7
    "            if nbr not in stack:",                    # 8
    "                stack.push(nbr)",                     # 9
    "    return visited",                                  # 10
]


def dfs(graph: Graph, start: str) -> Generator[Step, None, None]:
    sb = StepBuilder()
    stack: List[str] = [start]
    visited: List[str] = []
    name = graph.value_of

    sb.stack = list(stack)
    yield sb.emit(StepKind.START, f"Starting DFS from node {name(start)}",
                  highlight_nodes=[start], line=1)

    while stack:
        yield sb.emit(StepKind.POP, f"🔍 Pop from TOP: {name(stack[-1])}",
                      highlight_nodes=[stack[-1]], line=4)
        current = stack.pop()
        sb.stack = list(stack)

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

        pushed = []
        for nbr in reversed(neighbours):
            if nbr not in stack:
                stack.append(nbr)
                pushed.append(nbr)
        if pushed:
            sb.stack = list(stack)
            yield sb.emit(StepKind.PUSH,
                          f"📚 Push to TOP: {', '.join(str(name(n)) for n in pushed)}",
                          highlight_nodes=pushed, line=9)

    yield sb.emit(StepKind.COMPLETE, "DFS traversal complete", line=10,
                  output=f"DFS Complete: Visited {len(visited)} nodes", is_final=True)
