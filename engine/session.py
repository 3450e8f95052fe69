"""
session.py — Visualizer Session Aggregate
==========================================
One VisualizerSession per visualizer page.  It owns exactly one
structure store, one Recorder and one PlaybackController, plus the
page's console log, and exposes a single entry point:

    session = VisualizerSession("heap")
    result  = session.run_operation("insert", value=42)

Every operation follows the same order:
  1. validate arguments          (InvalidInput, nothing touched)
  2. check emptiness             (EmptyStructure, nothing touched)
  3. mutate the store eagerly
  4. run the engine through the Recorder → StepSequence
  5. hand the sequence to playback (old timer cancelled, index → -1)
  6. append the final step's output to the console

Structure edits with nothing to narrate (graph edits, clear, sample,
heap type toggle) produce an empty StepSequence but still reset
playback, so stale steps never outlive the shape they described.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from algorithms import get_algorithm
from algorithms.bst_ops import TRAVERSALS
from engine.config import Config
from engine.playback import PlaybackController
from engine.recorder import Recorder, RunMetrics, StepSequence
from engine.scheduler import Scheduler
from structures import (
    BinarySearchTree, EmptyStructure, Graph, HashSet, HashTable, Heap,
    InvalidInput, LinkedList, Queue, Stack, Trie, UnknownOperation, VisualizerError,
)
from structures.node import new_id

logger = logging.getLogger(__name__)


KINDS = ("graph", "heap", "trie", "hashset", "hashtable", "bst", "linked-list", "stack", "queue")

OPERATIONS: Dict[str, Tuple[str, ...]] = {
    "graph":       ("add_node", "remove_node", "add_edge", "remove_edge", "set_directed",
                    "bfs", "dfs", "dijkstra", "prim", "boruvka", "floyd_warshall", "clear", "sample"),
    "heap":        ("insert", "extract", "peek", "set_type", "clear", "sample"),
    "trie":        ("insert", "search", "starts_with", "clear", "sample"),
    "hashset":     ("add", "remove", "contains", "clear", "sample"),
    "hashtable":   ("put", "get", "remove", "clear"),
    "bst":         ("insert", "delete", "search", "traverse", "clear", "sample"),
    "linked-list": ("insert", "delete", "search", "traverse", "clear", "sample"),
    "stack":       ("push", "pop", "peek", "clear", "sample"),
    "queue":       ("enqueue", "dequeue", "front", "rear", "clear", "sample"),
}

# (engine key or None, engine args, console line when nothing is narrated)
Plan = Tuple[Optional[str], tuple, str]


@dataclass
class OperationResult:
    kind:      str
    op:        str
    structure: Dict[str, Any]
    steps:     StepSequence
    output:    str                  = ""
    metrics:   Optional[RunMetrics] = None

    def to_dict(self) -> dict:
        return {
            "kind":      self.kind,
            "op":        self.op,
            "structure": self.structure,
            "steps":     self.steps.to_list(),
            "output":    self.output,
        }


# ---------------------------------------------------------------------------
# Argument coercion
# ---------------------------------------------------------------------------
def as_int(value: Any, what: str = "number") -> int:
    """Accept ints and integer strings; everything else is InvalidInput."""
    if isinstance(value, bool):
        raise InvalidInput(f"Please enter a valid {what}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidInput(f"Please enter a valid {what}")


def as_text(value: Any, what: str = "value") -> str:
    text = "" if value is None else str(value).strip()
    if not text:
        raise InvalidInput(f"Please enter a {what}")
    return text


def as_optional_text(value: Any) -> Optional[str]:
    """Blank or missing becomes None; anything else is stripped text."""
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise InvalidInput("Please enter plain text")
    return str(value).strip() or None


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _require(args: Dict[str, Any], name: str) -> Any:
    if name not in args:
        raise InvalidInput(f"Missing argument '{name}'")
    return args[name]


def _build_store(kind: str, bucket_count: int):
    factories: Dict[str, Callable[[], Any]] = {
        "graph":       Graph,
        "heap":        Heap,
        "trie":        Trie,
        "hashset":     lambda: HashSet(bucket_count),
        "hashtable":   lambda: HashTable(bucket_count),
        "bst":         BinarySearchTree,
        "linked-list": LinkedList,
        "stack":       Stack,
        "queue":       Queue,
    }
    return factories[kind]()


# ---------------------------------------------------------------------------
# VisualizerSession
# ---------------------------------------------------------------------------
class VisualizerSession:
    """
    Attributes:
        id       : Short session id.
        kind     : Page kind, one of KINDS.
        store    : The structure store for this page.
        recorder : Turns engine generators into StepSequences.
        playback : Steps through the latest StepSequence.
        console  : Output lines, oldest first.
    """

    def __init__(self, kind: str, scheduler: Optional[Scheduler] = None,
                 bucket_count: Optional[int] = None, session_id: Optional[str] = None):
        if kind not in KINDS:
            raise InvalidInput(f"Unknown visualizer '{kind}' (expected one of {', '.join(KINDS)})")
        self.id:       str                = session_id or new_id()
        self.kind:     str                = kind
        self.store                        = _build_store(kind, bucket_count or Config.bucket_count)
        self.recorder: Recorder           = Recorder()
        self.playback: PlaybackController = PlaybackController(kind, scheduler=scheduler)
        self.console:  List[str]          = []

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def run_operation(self, op: str, /, **args: Any) -> OperationResult:
        if op not in OPERATIONS[self.kind]:
            raise UnknownOperation(f"'{op}' is not an operation on {self.kind}")
        handler = getattr(self, f"_{self.kind.replace('-', '_')}_{op}", None) or getattr(self, f"_any_{op}")

        try:
            engine_key, engine_args, message = handler(args)
        except VisualizerError as exc:
            logger.warning("%s.%s rejected: %s", self.kind, op, exc)
            raise

        if engine_key is None:
            sequence = self.recorder.clear()
            output = message
        else:
            sequence = self.recorder.record(get_algorithm(engine_key), *engine_args)
            output = sequence.final.output if sequence.final else ""

        self.playback.load(sequence)
        if output:
            self.console.append(output)
        logger.info("%s.%s → %d steps", self.kind, op, len(sequence))
        return OperationResult(self.kind, op, self.structure(), sequence, output, self.recorder.metrics)

    apply_operation = run_operation

    def structure(self) -> Dict[str, Any]:
        return self.store.to_dict()

    def to_dict(self) -> dict:
        return {
            "session_id": self.id,
            "kind":       self.kind,
            "structure":  self.structure(),
            "playback":   self.playback.to_dict(),
            "console":    list(self.console),
        }

    def close(self) -> None:
        self.playback.pause()

    # ------------------------------------------------------------------
    # Shared
    # ------------------------------------------------------------------
    def _any_clear(self, args) -> Plan:
        self.store.clear()
        return None, (), f"Cleared {self.kind}"

    def _any_sample(self, args) -> Plan:
        self.store.load_sample()
        return None, (), f"Loaded sample {self.kind}"

    # ------------------------------------------------------------------
    # Graph
    # ------------------------------------------------------------------
    def _graph_add_node(self, args) -> Plan:
        value = as_text(args.get("value"), "node value")
        label = as_optional_text(args.get("label"))
        node_id = as_optional_text(args.get("node_id"))
        m = self.store.add_node(value, label=label, node_id=node_id)
        return None, (), f"Added node {m.node.value}"

    def _graph_remove_node(self, args) -> Plan:
        node_id = as_text(_require(args, "node_id"), "node id")
        m = self.store.remove_node(node_id)
        return None, (), f"Removed node {m.node.value} and {len(m.removed_edges)} edge(s)"

    def _graph_add_edge(self, args) -> Plan:
        source = as_text(_require(args, "source"), "source node")
        target = as_text(_require(args, "target"), "target node")
        weight = as_int(args.get("weight", 1), "weight")
        m = self.store.add_edge(source, target, weight)
        e = m.edge
        return None, (), f"Added edge {self.store.value_of(e.source)} - {self.store.value_of(e.target)} (weight: {e.weight})"

    def _graph_remove_edge(self, args) -> Plan:
        edge_id = as_text(_require(args, "edge_id"), "edge id")
        self.store.remove_edge(edge_id)
        return None, (), "Removed edge"

    def _graph_set_directed(self, args) -> Plan:
        directed = as_bool(args.get("directed", True))
        self.store.set_directed(directed)
        return None, (), f"Graph is now {'directed' if directed else 'undirected'}"

    def _graph_start(self, args) -> str:
        if self.store.is_empty():
            raise EmptyStructure("Graph is empty!")
        start = args.get("start")
        if start is None:
            return self.store.node_ids()[0]
        start = as_text(start, "start node")
        if self.store.get_node(start) is None:
            raise InvalidInput(f"Unknown start node '{start}'")
        return start

    def _graph_bfs(self, args) -> Plan:
        return "bfs", (self.store, self._graph_start(args)), ""

    def _graph_dfs(self, args) -> Plan:
        return "dfs", (self.store, self._graph_start(args)), ""

    def _graph_dijkstra(self, args) -> Plan:
        return "dijkstra", (self.store, self._graph_start(args)), ""

    def _graph_whole(self, key: str) -> Plan:
        if self.store.is_empty():
            raise EmptyStructure("Graph is empty!")
        return key, (self.store,), ""

    def _graph_prim(self, args) -> Plan:
        return self._graph_whole("prim")

    def _graph_boruvka(self, args) -> Plan:
        return self._graph_whole("boruvka")

    def _graph_floyd_warshall(self, args) -> Plan:
        return self._graph_whole("floyd_warshall")

    # ------------------------------------------------------------------
    # Heap
    # ------------------------------------------------------------------
    def _heap_insert(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "heap_insert", (self.store, self.store.push(value)), ""

    def _heap_extract(self, args) -> Plan:
        return "heap_extract", (self.store, self.store.pop()), ""

    def _heap_peek(self, args) -> Plan:
        if not len(self.store):
            raise EmptyStructure("Heap is empty!")
        return "heap_peek", (self.store,), ""

    def _heap_set_type(self, args) -> Plan:
        if "type" in args:
            heap_type = str(args["type"]).strip().lower()
            if heap_type not in ("min", "max"):
                raise InvalidInput(f"Unknown heap type '{heap_type}'")
            is_min = heap_type == "min"
        else:
            is_min = as_bool(args.get("is_min", True))
        self.store.set_min_heap(is_min)
        return None, (), f"Switched to {self.store.kind_label} Heap"

    # ------------------------------------------------------------------
    # Trie
    # ------------------------------------------------------------------
    def _trie_insert(self, args) -> Plan:
        word = as_text(_require(args, "word"), "word")
        return "trie_insert", (self.store, self.store.insert(word)), ""

    def _trie_search(self, args) -> Plan:
        word = as_text(_require(args, "word"), "word")
        return "trie_search", (self.store, word), ""

    def _trie_starts_with(self, args) -> Plan:
        prefix = as_text(_require(args, "prefix"), "prefix")
        return "trie_starts_with", (self.store, prefix), ""

    # ------------------------------------------------------------------
    # Hash set / hash table
    # ------------------------------------------------------------------
    def _hashset_add(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "hash_add", (self.store, self.store.add(value)), ""

    def _hashset_remove(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "hash_remove", (self.store, self.store.remove(value)), ""

    def _hashset_contains(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "hash_lookup", (self.store, value), ""

    def _hashtable_put(self, args) -> Plan:
        key = as_int(_require(args, "key"), "key")
        value = as_text(_require(args, "value"), "value")
        return "hash_add", (self.store, self.store.put(key, value)), ""

    def _hashtable_get(self, args) -> Plan:
        key = as_int(_require(args, "key"), "key")
        return "hash_lookup", (self.store, key), ""

    def _hashtable_remove(self, args) -> Plan:
        key = as_int(_require(args, "key"), "key")
        return "hash_remove", (self.store, self.store.remove(key)), ""

    # ------------------------------------------------------------------
    # BST
    # ------------------------------------------------------------------
    def _bst_insert(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "bst_insert", (self.store, self.store.insert(value)), ""

    def _bst_delete(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "bst_delete", (self.store, self.store.delete(value)), ""

    def _bst_search(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "bst_search", (self.store, value), ""

    def _bst_traverse(self, args) -> Plan:
        order = str(args.get("order", "inorder")).lower().replace("-", "")
        if order not in TRAVERSALS:
            raise InvalidInput(f"Unknown traversal '{order}'")
        if not len(self.store):
            raise EmptyStructure("Tree is empty!")
        return "bst_traverse", (self.store, order), ""

    # ------------------------------------------------------------------
    # Linked list
    # ------------------------------------------------------------------
    def _linked_list_insert(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        position = str(args.get("position", "tail")).lower()
        index = args.get("index")
        if position == "index":
            index = as_int(index, "position")
        return "list_insert", (self.store, self.store.insert(value, position, index)), ""

    def _linked_list_delete(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "list_delete", (self.store, self.store.delete(value)), ""

    def _linked_list_search(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "list_search", (self.store, value), ""

    def _linked_list_traverse(self, args) -> Plan:
        if not len(self.store):
            raise EmptyStructure("List is empty!")
        return "list_traverse", (self.store,), ""

    # ------------------------------------------------------------------
    # Stack / queue
    # ------------------------------------------------------------------
    def _stack_push(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "stack_push", (self.store, self.store.push(value)), ""

    def _stack_pop(self, args) -> Plan:
        return "stack_pop", (self.store, self.store.pop()), ""

    def _stack_peek(self, args) -> Plan:
        self.store.peek()
        return "stack_peek", (self.store,), ""

    def _stack_clear(self, args) -> Plan:
        return "stack_clear", (self.store, self.store.clear()), ""

    def _queue_enqueue(self, args) -> Plan:
        value = as_int(_require(args, "value"))
        return "queue_enqueue", (self.store, self.store.enqueue(value)), ""

    def _queue_dequeue(self, args) -> Plan:
        return "queue_dequeue", (self.store, self.store.dequeue()), ""

    def _queue_front(self, args) -> Plan:
        self.store.front()
        return "queue_front", (self.store,), ""

    def _queue_rear(self, args) -> Plan:
        self.store.rear()
        return "queue_rear", (self.store,), ""

    def _queue_clear(self, args) -> Plan:
        return "queue_clear", (self.store, self.store.clear()), ""
