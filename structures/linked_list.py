"""
linked_list.py — Singly Linked List Store
=========================================
Nodes held in a dict and chained through `next` ids from `head`.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from structures.errors import InvalidInput
from structures.node import new_id


POSITIONS = ("head", "tail", "index")


class ListNode:
    __slots__ = ("id", "value", "next")

    def __init__(self, value: int, node_id: Optional[str] = None):
        self.id:    str           = node_id or new_id()
        self.value: int           = value
        self.next:  Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "next": self.next}


@dataclass
class ListMutation:
    op:        str
    value:     int
    node_id:   Optional[str]            = None
    index:     Optional[int]            = None
    position:  str                      = ""
    was_empty: bool                     = False
    before:    Tuple[Tuple[str, int], ...] = ()   # (id, value) in list order before the call
    found:     bool                     = False


class LinkedList:
    SAMPLE_VALUES = (10, 20, 30, 40)

    def __init__(self):
        self.nodes: Dict[str, ListNode] = {}
        self.head:  Optional[str]       = None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def insert(self, value: int, position: str = "tail", index: Optional[int] = None) -> ListMutation:
        if position not in POSITIONS:
            raise InvalidInput(f"Unknown insert position '{position}'")
        if position == "index" and (index is None or index < 0):
            raise InvalidInput("Please enter a valid position")

        ordered = self.ordered()
        mutation = ListMutation(op="insert", value=value, position=position,
                                was_empty=not ordered, before=self.snapshot())
        node = ListNode(value)
        self.nodes[node.id] = node
        mutation.node_id = node.id

        if position == "head":
            at = 0
        elif position == "tail":
            at = len(ordered)
        else:
            at = min(index, len(ordered))

        if at == 0:
            node.next = self.head
            self.head = node.id
        else:
            prev = ordered[at - 1]
            node.next = prev.next
            prev.next = node.id
        mutation.index = at
        return mutation

    def delete(self, value: int) -> ListMutation:
        ordered = self.ordered()
        mutation = ListMutation(op="delete", value=value, before=self.snapshot())
        for i, node in enumerate(ordered):
            if node.value == value:
                if i == 0:
                    self.head = node.next
                else:
                    ordered[i - 1].next = node.next
                del self.nodes[node.id]
                mutation.found = True
                mutation.index = i
                mutation.node_id = node.id
                break
        return mutation

    def clear(self) -> None:
        self.nodes = {}
        self.head = None

    def load_sample(self) -> None:
        self.clear()
        for v in self.SAMPLE_VALUES:
            self.insert(v, "tail")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def ordered(self) -> List[ListNode]:
        out: List[ListNode] = []
        current = self.head
        while current is not None:
            node = self.nodes[current]
            out.append(node)
            current = node.next
        return out

    def values(self) -> List[int]:
        return [n.value for n in self.ordered()]

    def snapshot(self) -> Tuple[Tuple[str, int], ...]:
        return tuple((n.id, n.value) for n in self.ordered())

    def __len__(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> dict:
        return {"head": self.head, "nodes": [n.to_dict() for n in self.ordered()]}
