"""
edge.py — Graph Edge
====================
Connects two nodes with a signed integer weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - An undirected edge is stored ONCE; traversal treats it as
    bidirectional via `touches()` / `other_end()`.
"""

from typing import Optional

from structures.node import new_id


class Edge:
    """
    Attributes:
        id       : Unique identifier.
        source   : ID of the tail node ("from").
        target   : ID of the head node ("to").
        weight   : Signed integer cost.
        directed : If False, traversal works in both directions.
    """

    __slots__ = ("id", "source", "target", "weight", "directed")

    def __init__(
        self,
        source: str,
        target: str,
        weight: int = 1,
        directed: bool = False,
        edge_id: Optional[str] = None,
    ):
        self.id:       str  = edge_id or new_id()
        self.source:   str  = source
        self.target:   str  = target
        self.weight:   int  = weight
        self.directed: bool = directed

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def leaves(self, node_id: str, directed: bool) -> bool:
        """True if this edge can be followed out of `node_id`."""
        return self.source == node_id or (not directed and self.target == node_id)

    def other_end(self, node_id: str) -> str:
        return self.target if self.source == node_id else self.source

    def connects(self, node_a: str, node_b: str, directed: bool) -> bool:
        if self.source == node_a and self.target == node_b:
            return True
        return not directed and self.source == node_b and self.target == node_a

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":       self.id,
            "from":     self.source,
            "to":       self.target,
            "weight":   self.weight,
            "directed": self.directed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["from"],
            target=data["to"],
            weight=data.get("weight", 1),
            directed=data.get("directed", False),
            edge_id=data.get("id"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
