"""
graph.py — Graph Store
======================
Single source of truth for the graph page.  Structure-editing
operations mutate it eagerly; the traversal / shortest-path / MST
engines only ever read it.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Adjacency queries                      (edges_from, neighbours)
  3. Sample graph factory                   (six nodes, seven edges)
  4. Serialisation                          (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id.  Dict insertion
    order IS the iteration order every engine relies on for tie-breaks.
  - Neighbour queries scan the edge dict rather than keeping a
    separate adjacency index: the scan order (edge creation order) is
    part of the narrated behaviour, and graphs on a teaching page are
    tiny.
  - `directed` is a graph-level flag; each Edge also carries it so
    serialisation is self-contained.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from structures.errors import InvalidInput
from structures.node import Node
from structures.edge import Edge


@dataclass
class GraphMutation:
    """What a graph edit changed — enough for the caller to report it."""
    op:            str
    node:          Optional[Node]  = None
    edge:          Optional[Edge]  = None
    removed_edges: List[Edge]      = field(default_factory=list)


class Graph:
    """
    Attributes:
        nodes    : {node_id: Node}
        edges    : {edge_id: Edge}
        directed : bool – graph-level directedness
    """

    def __init__(self, directed: bool = False):
        self.nodes:    Dict[str, Node] = {}
        self.edges:    Dict[str, Edge] = {}
        self.directed: bool            = directed

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, value: str, label: Optional[str] = None, node_id: Optional[str] = None) -> GraphMutation:
        value = (value or "").strip()
        if not value:
            raise InvalidInput("Please enter a node name/value")
        if node_id is not None and node_id in self.nodes:
            raise InvalidInput(f"Node id '{node_id}' already exists")
        node = Node(value=value, label=(label or "").strip() or None, node_id=node_id)
        self.nodes[node.id] = node
        return GraphMutation(op="add-node", node=node)

    def remove_node(self, node_id: str) -> GraphMutation:
        node = self._require_node(node_id)
        removed = [e for e in self.edges.values() if e.source == node_id or e.target == node_id]
        for e in removed:
            del self.edges[e.id]
        del self.nodes[node_id]
        return GraphMutation(op="remove-node", node=node, removed_edges=removed)

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, source: str, target: str, weight: int = 1, edge_id: Optional[str] = None) -> GraphMutation:
        self._require_node(source)
        self._require_node(target)
        if source == target:
            raise InvalidInput("Cannot create edge from a node to itself")
        if self.get_edge_between(source, target) is not None:
            raise InvalidInput("Edge already exists between these nodes")
        edge = Edge(source=source, target=target, weight=weight, directed=self.directed, edge_id=edge_id)
        self.edges[edge.id] = edge
        return GraphMutation(op="add-edge", edge=edge)

    def remove_edge(self, edge_id: str) -> GraphMutation:
        edge = self.edges.pop(edge_id, None)
        if edge is None:
            raise InvalidInput(f"Unknown edge '{edge_id}'")
        return GraphMutation(op="remove-edge", edge=edge)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b (direction-aware)."""
        for e in self.edges.values():
            if e.connects(a, b, self.directed):
                return e
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def edges_from(self, node_id: str) -> List[Edge]:
        """Every edge that can be followed out of `node_id`, in creation order."""
        return [e for e in self.edges.values() if e.leaves(node_id, self.directed)]

    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """[(neighbour_id, edge)] in edge-creation order."""
        return [(e.other_end(node_id), e) for e in self.edges_from(node_id)]

    def value_of(self, node_id: str) -> str:
        node = self.nodes.get(node_id)
        return node.value if node else node_id

    # ==================================================================
    # WHOLE-GRAPH EDITS
    # ==================================================================
    def set_directed(self, directed: bool) -> GraphMutation:
        self.directed = bool(directed)
        for e in self.edges.values():
            e.directed = self.directed
        return GraphMutation(op="set-directed")

    def clear(self) -> GraphMutation:
        self.nodes.clear()
        self.edges.clear()
        return GraphMutation(op="clear")

    def load_sample(self) -> GraphMutation:
        """Six nodes A–F and seven weighted edges."""
        self.clear()
        for nid, value in (("n1", "A"), ("n2", "B"), ("n3", "C"),
                           ("n4", "D"), ("n5", "E"), ("n6", "F")):
            self.add_node(value, node_id=nid)
        for eid, src, tgt, w in (("e1", "n1", "n2", 4), ("e2", "n1", "n4", 2),
                                 ("e3", "n2", "n3", 3), ("e4", "n2", "n5", 1),
                                 ("e5", "n3", "n6", 5), ("e6", "n4", "n5", 7),
                                 ("e7", "n5", "n6", 2)):
            self.add_edge(src, tgt, weight=w, edge_id=eid)
        return GraphMutation(op="sample")

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(directed=data.get("directed", False))
        for nd in data.get("nodes", []):
            node = Node.from_dict(nd)
            g.nodes[node.id] = node
        for ed in data.get("edges", []):
            edge = Edge.from_dict(ed)
            g.edges[edge.id] = edge
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def _require_node(self, node_id: str) -> Node:
        node = self.nodes.get(node_id)
        if node is None:
            raise InvalidInput(f"Unknown node '{node_id}'")
        return node

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def is_empty(self) -> bool:
        return not self.nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)}, directed={self.directed})"
