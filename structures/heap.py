"""
heap.py — Binary Heap Store
===========================
Dense-array binary heap parameterised by a min/max flag.

The store performs the real sift-up / sift-down and, while doing so,
keeps a trace of every comparison, swap and settle point (with a
snapshot of the array at that instant).  The heap engine turns the
trace into narrated Steps; it never re-runs the sift itself.

Comparator:
    violates(parent, child) = parent > child   (min-heap)
                              parent < child   (max-heap)
Strict inequality — equal values never swap.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from structures.errors import EmptyStructure
from structures.node import new_id


Snapshot = Tuple[Tuple[str, int], ...]     # ((node_id, value), …) in array order


class HeapNode:
    __slots__ = ("id", "value", "index")

    def __init__(self, value: int, index: int, node_id: Optional[str] = None):
        self.id:    str = node_id or new_id()
        self.value: int = value
        self.index: int = index

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "index": self.index}

    def __repr__(self) -> str:
        return f"HeapNode({self.value}@{self.index})"


@dataclass(frozen=True)
class SiftEvent:
    """
    One moment of a sift walk.

    kind         : "compare" | "swap" | "move" | "settle"
    node_id      : The node being sifted (the propagating node).
    index        : Its array index when the event happened.
    pair         : (id, id) of the two nodes compared / swapped.
    values       : Their values, same order as `pair`.
    target_index : Index the propagating node is compared against / moves to.
    side         : "parent", "left" or "right" for comparisons.
    array        : Array snapshot at this instant.
    """
    kind:         str
    node_id:      str
    index:        int
    pair:         Tuple[str, ...]   = ()
    values:       Tuple[int, ...]   = ()
    target_index: Optional[int]     = None
    side:         str               = ""
    array:        Snapshot          = ()


@dataclass
class HeapMutation:
    op:          str
    node_id:     str                     # inserted node / extracted root
    value:       int
    final_index: int                     = 0
    moved:       Optional[Tuple[str, int]] = None   # last element moved to the root on extract
    events:      List[SiftEvent]         = field(default_factory=list)
    before:      Snapshot                = ()


class Heap:
    """
    Attributes:
        items  : Heap array; items[i].index == i always holds.
        is_min : Min-heap when True, max-heap otherwise.
    """

    SAMPLE_VALUES = (10, 20, 15, 30, 40, 50, 100, 25, 45)

    def __init__(self, is_min: bool = True):
        self.items:  List[HeapNode] = []
        self.is_min: bool           = is_min

    # ------------------------------------------------------------------
    # Index helpers
    # ------------------------------------------------------------------
    @staticmethod
    def parent_index(i: int) -> int:
        return (i - 1) // 2

    @staticmethod
    def left_index(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def right_index(i: int) -> int:
        return 2 * i + 2

    def violates(self, parent_value: int, child_value: int) -> bool:
        if self.is_min:
            return parent_value > child_value
        return parent_value < child_value

    @property
    def kind_label(self) -> str:
        return "Min" if self.is_min else "Max"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def push(self, value: int) -> HeapMutation:
        before = self.snapshot()
        node = HeapNode(value, len(self.items))
        self.items.append(node)
        events = self._sift_up(node.index)
        return HeapMutation(op="insert", node_id=node.id, value=value,
                            final_index=node.index, events=events, before=before)

    def pop(self) -> HeapMutation:
        if not self.items:
            raise EmptyStructure("Heap is empty!")
        before = self.snapshot()
        root = self.items[0]
        last = self.items.pop()
        if not self.items:
            return HeapMutation(op="extract", node_id=root.id, value=root.value, before=before)

        self.items[0] = last
        last.index = 0
        events = self._sift_down(0)
        return HeapMutation(op="extract", node_id=root.id, value=root.value,
                            final_index=last.index, moved=(last.id, last.value),
                            events=events, before=before)

    def peek(self) -> HeapNode:
        if not self.items:
            raise EmptyStructure("Heap is empty!")
        return self.items[0]

    def set_min_heap(self, is_min: bool) -> None:
        """Switch comparator and rebuild the current contents under it."""
        self.is_min = bool(is_min)
        self._heapify()

    def clear(self) -> None:
        self.items = []

    def load_sample(self) -> None:
        self.items = [HeapNode(v, i) for i, v in enumerate(self.SAMPLE_VALUES)]
        self._heapify()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def values(self) -> List[int]:
        return [n.value for n in self.items]

    def snapshot(self) -> Snapshot:
        return tuple((n.id, n.value) for n in self.items)

    def is_valid(self) -> bool:
        """Heap order holds at every parent/child pair."""
        return all(
            not self.violates(self.items[self.parent_index(i)].value, self.items[i].value)
            for i in range(1, len(self.items))
        )

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"is_min": self.is_min, "items": [n.to_dict() for n in self.items]}

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _swap(self, i: int, j: int) -> None:
        self.items[i], self.items[j] = self.items[j], self.items[i]
        self.items[i].index = i
        self.items[j].index = j

    def _sift_up(self, i: int) -> List[SiftEvent]:
        events: List[SiftEvent] = []
        node = self.items[i]
        while i > 0:
            p = self.parent_index(i)
            parent = self.items[p]
            events.append(SiftEvent("compare", node.id, i, (node.id, parent.id),
                                    (node.value, parent.value), p, "parent", self.snapshot()))
            if not self.violates(parent.value, node.value):
                events.append(SiftEvent("settle", node.id, i, array=self.snapshot()))
                return events
            events.append(SiftEvent("swap", node.id, i, (node.id, parent.id),
                                    (node.value, parent.value), p, "parent", self.snapshot()))
            self._swap(i, p)
            i = p
            events.append(SiftEvent("move", node.id, i, array=self.snapshot()))
        return events

    def _sift_down(self, i: int) -> List[SiftEvent]:
        events: List[SiftEvent] = []
        node = self.items[i]
        n = len(self.items)
        while True:
            left, right = self.left_index(i), self.right_index(i)
            target = i
            if left < n:
                child = self.items[left]
                events.append(SiftEvent("compare", node.id, i, (node.id, child.id),
                                        (node.value, child.value), left, "left", self.snapshot()))
                if self.violates(node.value, child.value):
                    target = left
            if right < n:
                best = self.items[target]
                child = self.items[right]
                events.append(SiftEvent("compare", node.id, i, (best.id, child.id),
                                        (best.value, child.value), right, "right", self.snapshot()))
                if self.violates(best.value, child.value):
                    target = right
            if target == i:
                events.append(SiftEvent("settle", node.id, i, array=self.snapshot()))
                return events
            other = self.items[target]
            events.append(SiftEvent("swap", node.id, i, (node.id, other.id),
                                    (node.value, other.value), target, "", self.snapshot()))
            self._swap(i, target)
            i = target
            events.append(SiftEvent("move", node.id, i, array=self.snapshot()))

    def _heapify(self) -> None:
        for i in range(len(self.items) // 2 - 1, -1, -1):
            self._sift_down(i)
