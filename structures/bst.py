"""
bst.py — Binary Search Tree Store
=================================
Pointer-based BST keyed by integer value.  Nodes are held in a dict
and linked by id; deleting a node with two children RELINKS the
in-order successor into its place instead of copying values, so every
surviving node keeps its identity.

Duplicates are rejected as a narrated no-op (the mutation reports
`duplicate=True` and nothing changes).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from structures.node import new_id


class TreeNode:
    __slots__ = ("id", "value", "left", "right")

    def __init__(self, value: int, node_id: Optional[str] = None):
        self.id:    str           = node_id or new_id()
        self.value: int           = value
        self.left:  Optional[str] = None
        self.right: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "left": self.left, "right": self.right}

    def __repr__(self) -> str:
        return f"TreeNode({self.value})"


@dataclass
class BSTMutation:
    """
    op             : "insert" | "delete"
    value          : Value inserted / deleted.
    path           : Node ids compared on the way down, root first.
    node_id        : Inserted node, or the node removed.
    side           : "left" / "right" — where the new node hangs off its parent.
    was_empty      : Tree had no root before an insert.
    duplicate      : Insert found the value already present.
    found          : Delete located the value.
    case           : "leaf" | "one-child" | "two-children" for a delete.
    successor_id   : In-order successor relinked into the removed node's place.
    successor_path : Node ids walked to find the successor.
    replacement_id : Node now occupying the removed node's place (None for a leaf).
    """
    op:             str
    value:          int
    path:           List[str]       = field(default_factory=list)
    node_id:        Optional[str]   = None
    side:           str             = ""
    was_empty:      bool            = False
    duplicate:      bool            = False
    found:          bool            = False
    case:           str             = ""
    successor_id:   Optional[str]   = None
    successor_path: List[str]       = field(default_factory=list)
    replacement_id: Optional[str]   = None


class BinarySearchTree:
    SAMPLE_VALUES = (25, 15, 35, 10, 20, 30, 40)

    def __init__(self):
        self.nodes: Dict[str, TreeNode] = {}
        self.root:  Optional[str]       = None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def insert(self, value: int) -> BSTMutation:
        mutation = BSTMutation(op="insert", value=value, was_empty=self.root is None)
        if self.root is None:
            node = TreeNode(value)
            self.nodes[node.id] = node
            self.root = node.id
            mutation.node_id = node.id
            return mutation

        current = self.nodes[self.root]
        while True:
            mutation.path.append(current.id)
            if value == current.value:
                mutation.duplicate = True
                mutation.node_id = current.id
                return mutation
            side = "left" if value < current.value else "right"
            child_id = getattr(current, side)
            if child_id is None:
                node = TreeNode(value)
                self.nodes[node.id] = node
                setattr(current, side, node.id)
                mutation.node_id = node.id
                mutation.side = side
                return mutation
            current = self.nodes[child_id]

    def delete(self, value: int) -> BSTMutation:
        mutation = BSTMutation(op="delete", value=value)
        parent: Optional[TreeNode] = None
        current_id = self.root
        while current_id is not None:
            current = self.nodes[current_id]
            mutation.path.append(current_id)
            if value == current.value:
                break
            parent = current
            current_id = current.left if value < current.value else current.right
        if current_id is None:
            return mutation

        target = self.nodes[current_id]
        mutation.found = True
        mutation.node_id = target.id

        if target.left is None or target.right is None:
            mutation.case = "leaf" if target.left is None and target.right is None else "one-child"
            mutation.replacement_id = target.left or target.right
            self._replace_child(parent, target.id, target.left or target.right)
        else:
            mutation.case = "two-children"
            succ_parent = target
            succ = self.nodes[target.right]
            mutation.successor_path.append(succ.id)
            while succ.left is not None:
                succ_parent = succ
                succ = self.nodes[succ.left]
                mutation.successor_path.append(succ.id)
            if succ_parent is not target:
                succ_parent.left = succ.right
                succ.right = target.right
            succ.left = target.left
            self._replace_child(parent, target.id, succ.id)
            mutation.successor_id = succ.id
            mutation.replacement_id = succ.id

        del self.nodes[target.id]
        return mutation

    def clear(self) -> None:
        self.nodes = {}
        self.root = None

    def load_sample(self) -> None:
        self.clear()
        for v in self.SAMPLE_VALUES:
            self.insert(v)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find(self, value: int) -> Optional[TreeNode]:
        current_id = self.root
        while current_id is not None:
            node = self.nodes[current_id]
            if value == node.value:
                return node
            current_id = node.left if value < node.value else node.right
        return None

    def inorder_values(self) -> List[int]:
        out: List[int] = []

        def walk(node_id: Optional[str]) -> None:
            if node_id is None:
                return
            node = self.nodes[node_id]
            walk(node.left)
            out.append(node.value)
            walk(node.right)

        walk(self.root)
        return out

    def is_valid(self) -> bool:
        """BST ordering holds across the whole tree (strict, no duplicates)."""
        values = self.inorder_values()
        return len(values) == len(self.nodes) and all(a < b for a, b in zip(values, values[1:]))

    def value_of(self, node_id: Optional[str]) -> Optional[int]:
        return self.nodes[node_id].value if node_id else None

    def __len__(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> dict:
        return {"root": self.root, "nodes": [n.to_dict() for n in self.nodes.values()]}

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _replace_child(self, parent: Optional[TreeNode], old_id: str, new_id: Optional[str]) -> None:
        if parent is None:
            self.root = new_id
        elif parent.left == old_id:
            parent.left = new_id
        else:
            parent.right = new_id
