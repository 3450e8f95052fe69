"""
algorithms/__init__.py — Engine Registry
==========================================
Single source of truth for every narrating engine the visualizer knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, structure, tags, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The session and the web layer
both consume it, so adding an engine is: write the generator, add one
entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all engine modules
# ---------------------------------------------------------------------------
from algorithms.bfs            import bfs,            PSEUDOCODE as _bfs_pc
from algorithms.dfs            import dfs,            PSEUDOCODE as _dfs_pc
from algorithms.dijkstra       import dijkstra,       PSEUDOCODE as _dij_pc
from algorithms.prim           import prim,           PSEUDOCODE as _prim_pc
from algorithms.boruvka        import boruvka,        PSEUDOCODE as _bor_pc
from algorithms.floyd_warshall import floyd_warshall, PSEUDOCODE as _fw_pc
from algorithms.heap_ops       import heap_insert, heap_extract, heap_peek, PSEUDOCODE as _heap_pc
from algorithms.trie_ops       import trie_insert, trie_search, trie_starts_with, PSEUDOCODE as _trie_pc
from algorithms.hash_ops       import hash_add, hash_remove, hash_lookup, PSEUDOCODE as _hash_pc
from algorithms.bst_ops        import bst_insert, bst_delete, bst_search, bst_traverse, PSEUDOCODE as _bst_pc
from algorithms.list_ops       import list_insert, list_delete, list_search, list_traverse, PSEUDOCODE as _list_pc
from algorithms.linear_ops     import (
    stack_push, stack_pop, stack_peek, stack_clear,
    queue_enqueue, queue_dequeue, queue_front, queue_rear, queue_clear,
    PSEUDOCODE as _lin_pc,
)
from algorithms.step           import Step, StepBuilder, StepKind


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each engine
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    structure:         str                    # store it narrates: "graph", "heap", …
    tags:              List[str] = field(default_factory=list)
    supports_negative: bool     = False       # meaningful on negative weights?
    is_all_pairs:      bool     = False       # Floyd-Warshall style?
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key": self.key, "label": self.label, "structure": self.structure,
            "tags": list(self.tags), "pseudocode": list(self.pseudocode),
            "supports_negative": self.supports_negative, "is_all_pairs": self.is_all_pairs,
            "complexity_time": self.complexity_time, "complexity_space": self.complexity_space,
            "description": self.description,
        }


def _info(key, label, fn, pc, structure, **kw) -> AlgoInfo:
    return AlgoInfo(key=key, label=label, fn=fn, pseudocode=pc, structure=structure, **kw)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {info.key: info for info in [

    # -- graph --
    _info("bfs", "Breadth-First Search", bfs, _bfs_pc, "graph",
          tags=["traversal", "unweighted"],
          complexity_time="O(V · E)", complexity_space="O(V)",
          description="Explores layer-by-layer with a FIFO queue."),
    _info("dfs", "Depth-First Search", dfs, _dfs_pc, "graph",
          tags=["traversal", "unweighted"],
          complexity_time="O(V · E)", complexity_space="O(V)",
          description="Dives deep with a LIFO stack before backtracking."),
    _info("dijkstra", "Dijkstra's Algorithm", dijkstra, _dij_pc, "graph",
          tags=["weighted", "shortest-path"],
          complexity_time="O(V²)", complexity_space="O(V)",
          description="Settles the closest unvisited node each round. Non-negative weights only."),
    _info("prim", "Prim's MST", prim, _prim_pc, "graph",
          tags=["weighted", "mst"], supports_negative=True,
          complexity_time="O(V · E)", complexity_space="O(V)",
          description="Grows one tree across the cheapest crossing edge."),
    _info("boruvka", "Borůvka's MST", boruvka, _bor_pc, "graph",
          tags=["weighted", "mst"], supports_negative=True,
          complexity_time="O(E · V log V)", complexity_space="O(V)",
          description="Every component grabs its cheapest outgoing edge at once."),
    _info("floyd_warshall", "Floyd–Warshall", floyd_warshall, _fw_pc, "graph",
          tags=["weighted", "all-pairs", "shortest-path"], is_all_pairs=True,
          complexity_time="O(V³)", complexity_space="O(V²)",
          description="All-pairs shortest paths via dynamic programming. Watch the matrix evolve!"),

    # -- heap --
    _info("heap_insert", "Heap Insert (sift-up)", heap_insert, _heap_pc, "heap",
          tags=["sift"], complexity_time="O(log n)", complexity_space="O(1)"),
    _info("heap_extract", "Heap Extract (sift-down)", heap_extract, _heap_pc, "heap",
          tags=["sift"], complexity_time="O(log n)", complexity_space="O(1)"),
    _info("heap_peek", "Heap Peek", heap_peek, _heap_pc, "heap",
          tags=["read-only"], complexity_time="O(1)", complexity_space="O(1)"),

    # -- trie --
    _info("trie_insert", "Trie Insert", trie_insert, _trie_pc, "trie",
          complexity_time="O(L)", complexity_space="O(L)"),
    _info("trie_search", "Trie Search", trie_search, _trie_pc, "trie",
          tags=["read-only"], complexity_time="O(L)", complexity_space="O(1)"),
    _info("trie_starts_with", "Trie Prefix Check", trie_starts_with, _trie_pc, "trie",
          tags=["read-only"], complexity_time="O(L)", complexity_space="O(1)"),

    # -- hashing --
    _info("hash_add", "Hash Add / Put", hash_add, _hash_pc, "hash",
          tags=["chaining"], complexity_time="O(1 + α)", complexity_space="O(1)"),
    _info("hash_remove", "Hash Remove", hash_remove, _hash_pc, "hash",
          tags=["chaining"], complexity_time="O(1 + α)", complexity_space="O(1)"),
    _info("hash_lookup", "Hash Contains / Get", hash_lookup, _hash_pc, "hash",
          tags=["chaining", "read-only"], complexity_time="O(1 + α)", complexity_space="O(1)"),

    # -- bst --
    _info("bst_insert", "BST Insert", bst_insert, _bst_pc, "bst",
          complexity_time="O(h)", complexity_space="O(1)"),
    _info("bst_delete", "BST Delete", bst_delete, _bst_pc, "bst",
          complexity_time="O(h)", complexity_space="O(1)"),
    _info("bst_search", "BST Search", bst_search, _bst_pc, "bst",
          tags=["read-only"], complexity_time="O(h)", complexity_space="O(1)"),
    _info("bst_traverse", "BST Traversal", bst_traverse, _bst_pc, "bst",
          tags=["traversal", "read-only"], complexity_time="O(n)", complexity_space="O(h)"),

    # -- linked list --
    _info("list_insert", "List Insert", list_insert, _list_pc, "linked-list",
          complexity_time="O(n)", complexity_space="O(1)"),
    _info("list_delete", "List Delete", list_delete, _list_pc, "linked-list",
          complexity_time="O(n)", complexity_space="O(1)"),
    _info("list_search", "List Search", list_search, _list_pc, "linked-list",
          tags=["read-only"], complexity_time="O(n)", complexity_space="O(1)"),
    _info("list_traverse", "List Traversal", list_traverse, _list_pc, "linked-list",
          tags=["traversal", "read-only"], complexity_time="O(n)", complexity_space="O(1)"),

    # -- stack / queue --
    _info("stack_push", "Stack Push", stack_push, _lin_pc, "stack", complexity_time="O(1)"),
    _info("stack_pop", "Stack Pop", stack_pop, _lin_pc, "stack", complexity_time="O(1)"),
    _info("stack_peek", "Stack Peek", stack_peek, _lin_pc, "stack", tags=["read-only"], complexity_time="O(1)"),
    _info("stack_clear", "Stack Clear", stack_clear, _lin_pc, "stack", complexity_time="O(n)"),
    _info("queue_enqueue", "Queue Enqueue", queue_enqueue, _lin_pc, "queue", complexity_time="O(1)"),
    _info("queue_dequeue", "Queue Dequeue", queue_dequeue, _lin_pc, "queue", complexity_time="O(1)"),
    _info("queue_front", "Queue Front", queue_front, _lin_pc, "queue", tags=["read-only"], complexity_time="O(1)"),
    _info("queue_rear", "Queue Rear", queue_rear, _lin_pc, "queue", tags=["read-only"], complexity_time="O(1)"),
    _info("queue_clear", "Queue Clear", queue_clear, _lin_pc, "queue", complexity_time="O(n)"),
]}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered engines in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


# Session kinds whose engines are registered under a shared structure name
STRUCTURE_ALIASES: Dict[str, str] = {
    "hashset":   "hash",
    "hashtable": "hash",
}


def algorithms_for(structure: str) -> List[AlgoInfo]:
    """Every engine that narrates the given store kind (session kind or structure name)."""
    structure = STRUCTURE_ALIASES.get(structure, structure)
    return [a for a in REGISTRY.values() if a.structure == structure]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "STRUCTURE_ALIASES",
    "Step",
    "StepBuilder",
    "StepKind",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "algorithms_for",
]
