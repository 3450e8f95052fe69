"""
step.py — Algorithm Step Snapshot
==================================
Every engine is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • Which nodes / edge are highlighted right now
    • The traversal's own stack or queue (BFS, DFS, tree walks)
    • The running distance table or matrix (Dijkstra, Floyd–Warshall)
    • The accumulated MST edge list and its weight (Prim, Borůvka)
    • Which pair is being compared or swapped (heap)
    • A plain-English narration of what just happened

Design decisions:
  - Step is a frozen dataclass and every container it holds is frozen
    too: lists become tuples, dicts become read-only mappings, sets
    become sorted tuples.  The generator keeps mutating its working
    collections after a yield; recorded steps never see that.
  - Each Step is a COMPLETE snapshot.  The playback controller can jump
    straight to step i without replaying 0..i-1.
  - `overlay` is a free-form mapping for structure-specific extras
    (heap array, bucket index, trie character, …).
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class StepKind(str, Enum):
    START      = "start"
    VISIT      = "visit"
    SKIP       = "skip"
    COMPARE    = "compare"
    SWAP       = "swap"
    MOVE       = "move"
    SETTLE     = "settle"
    PUSH       = "push"
    POP        = "pop"
    PEEK       = "peek"
    ENQUEUE    = "enqueue"
    DEQUEUE    = "dequeue"
    INSERT     = "insert"
    CREATE     = "create"
    DELETE     = "delete"
    UPDATE     = "update"
    RELAX      = "relax"
    ADD_EDGE   = "add-edge"
    HASH       = "hash"
    COLLISION  = "collision"
    EXISTS     = "exists"
    FOUND      = "found"
    NOT_FOUND  = "not-found"
    INCOMPLETE = "incomplete"
    LEVEL      = "level"
    COMPLETE   = "complete"


def _empty_mapping() -> Mapping[str, Any]:
    return MappingProxyType({})


def freeze(value: Any) -> Any:
    """Recursively turn lists/dicts/sets into their immutable counterparts."""
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return tuple(sorted(value, key=str))
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    return value


def _jsonable(value: Any) -> Any:
    if isinstance(value, float) and math.isinf(value):
        return "∞"
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_jsonable(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _jsonable(v) for k, v in value.items()}
    return value


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        kind            : What happened (StepKind).
        description     : Narration shown verbatim in the UI.
        highlight_nodes : Node ids to highlight this frame.
        highlight_edge  : Edge id being examined / added (or None).
        visited         : Node ids visited so far, in visit order.
        stack           : Traversal stack, bottom → top.
        queue           : Traversal queue, front → rear.
        distances       : {node_id: distance} (Dijkstra).
        matrix          : Full distance matrix (Floyd–Warshall).
        matrix_nodes    : Row/column node ids for `matrix`.
        mst_edges       : Edge ids accepted into the MST so far.
        total_weight    : Running MST weight.
        swap_pair       : (id_a, id_b) being swapped (heap).
        compare_pair    : (id_a, id_b) being compared.
        path            : Node ids walked so far (trie / BST / list).
        pseudocode_line : 0-based index of the PSEUDOCODE line executing now.
        overlay         : Structure-specific extras.
        output          : One-line console summary (final step).
        is_final        : True on the very last step.
    """

    step_number:     int                          = 0
    kind:            StepKind                     = StepKind.START
    description:     str                          = ""
    highlight_nodes: Tuple[str, ...]              = ()
    highlight_edge:  Optional[str]                = None
    visited:         Tuple[str, ...]              = ()
    stack:           Tuple[Any, ...]              = ()
    queue:           Tuple[Any, ...]              = ()
    distances:       Mapping[str, float]          = field(default_factory=_empty_mapping)
    matrix:          Tuple[Tuple[float, ...], ...] = ()
    matrix_nodes:    Tuple[str, ...]              = ()
    mst_edges:       Tuple[str, ...]              = ()
    total_weight:    float                        = 0
    swap_pair:       Optional[Tuple[str, str]]    = None
    compare_pair:    Optional[Tuple[str, str]]    = None
    path:            Tuple[str, ...]              = ()
    pseudocode_line: int                          = 0
    overlay:         Mapping[str, Any]            = field(default_factory=_empty_mapping)
    output:          str                          = ""
    is_final:        bool                         = False

    def to_dict(self) -> dict:
        """JSON-safe rendering; infinite distances become "∞"."""
        return {
            "step_number":     self.step_number,
            "kind":            self.kind.value,
            "description":     self.description,
            "highlight_nodes": list(self.highlight_nodes),
            "highlight_edge":  self.highlight_edge,
            "visited":         list(self.visited),
            "stack":           _jsonable(self.stack),
            "queue":           _jsonable(self.queue),
            "distances":       _jsonable(self.distances),
            "matrix":          _jsonable(self.matrix),
            "matrix_nodes":    list(self.matrix_nodes),
            "mst_edges":       list(self.mst_edges),
            "total_weight":    self.total_weight,
            "swap_pair":       _jsonable(self.swap_pair),
            "compare_pair":    _jsonable(self.compare_pair),
            "path":            list(self.path),
            "pseudocode_line": self.pseudocode_line,
            "overlay":         _jsonable(self.overlay),
            "output":          self.output,
            "is_final":        self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience builder so engines don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that engines use to construct Steps cleanly.

    Persistent state (visited, stack, queue, distances, matrix, MST,
    path, overlay) carries over from one emitted step to the next, so
    each Step is a complete snapshot.  Per-frame fields (highlights,
    swap/compare pairs, output) are passed to `emit` and apply to that
    one step only.

    Usage inside an engine generator:
        sb = StepBuilder()
        sb.visited.append("n1")
        sb.queue = ["n2", "n4"]
        yield sb.emit(StepKind.VISIT, "✅ Mark A as visited", highlight_nodes=["n1"])
    """

    def __init__(self):
        self.step_no = 0
        self.reset()

    def reset(self):
        self.visited:      list            = []
        self.stack:        list            = []
        self.queue:        list            = []
        self.distances:    dict            = {}
        self.matrix:       list            = []
        self.matrix_nodes: list            = []
        self.mst_edges:    list            = []
        self.total_weight: float           = 0
        self.path:         list            = []
        self.overlay:      dict            = {}

    def emit(
        self,
        kind: StepKind,
        description: str,
        highlight_nodes=(),
        highlight_edge: Optional[str] = None,
        swap_pair: Optional[Tuple[str, str]] = None,
        compare_pair: Optional[Tuple[str, str]] = None,
        line: int = 0,
        output: str = "",
        is_final: bool = False,
        **overlay: Any,
    ) -> Step:
        """Build the next Step.  Extra kwargs land in this step's overlay only."""
        merged = dict(self.overlay)
        merged.update(overlay)
        step = Step(
            step_number=self.step_no,
            kind=kind,
            description=description,
            highlight_nodes=freeze(list(highlight_nodes)),
            highlight_edge=highlight_edge,
            visited=freeze(self.visited),
            stack=freeze(self.stack),
            queue=freeze(self.queue),
            distances=freeze(self.distances),
            matrix=freeze(self.matrix),
            matrix_nodes=freeze(self.matrix_nodes),
            mst_edges=freeze(self.mst_edges),
            total_weight=self.total_weight,
            swap_pair=freeze(swap_pair),
            compare_pair=freeze(compare_pair),
            path=freeze(self.path),
            pseudocode_line=line,
            overlay=freeze(merged),
            output=output,
            is_final=is_final,
        )
        self.step_no += 1
        return step
