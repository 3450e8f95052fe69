"""
node.py — Graph Node
====================
Identity-bearing vertex record.  `id` never changes once created; only
the edges around it do.

Design decisions:
  - `value` is a string (graph pages let the user name nodes with words).
  - `label` is optional display text; falls back to `value`.
  - No algorithm state lives on the node.  Engines keep their own
    working sets and publish them through Steps, so a node can be
    rendered mid-playback without any cleanup between runs.
"""

from typing import Optional
import uuid


def new_id() -> str:
    """Short random identifier used by every structure store."""
    return uuid.uuid4().hex[:8]


class Node:
    """
    Attributes:
        id    : Unique identifier (generated unless supplied).
        value : Name shown inside the circle.
        label : Optional caption shown under the node.
    """

    __slots__ = ("id", "value", "label")

    def __init__(
        self,
        value: str,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
    ):
        self.id:    str           = node_id or new_id()
        self.value: str           = value
        self.label: Optional[str] = label

    @property
    def display(self) -> str:
        return self.label or self.value

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "label": self.label}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(value=data["value"], label=data.get("label"), node_id=data["id"])

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, value={self.value})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
