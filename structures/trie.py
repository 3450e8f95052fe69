"""
trie.py — Trie Store
====================
Character-per-node prefix tree hanging off a synthetic ROOT node.

Every character is folded to lowercase before it is looked up or
inserted, so "Cat" and "cat" share a path.  A word is present only if
the node at the end of its path has `is_end_of_word` set; a path that
exists without the flag is a prefix, not a word.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from structures.errors import InvalidInput
from structures.node import new_id


class TrieNode:
    __slots__ = ("id", "char", "is_end_of_word", "children", "parent", "level")

    def __init__(self, char: str, parent: Optional[str] = None, level: int = 0, node_id: Optional[str] = None):
        self.id:             str            = node_id or new_id()
        self.char:           str            = char
        self.is_end_of_word: bool           = False
        self.children:       Dict[str, str] = {}      # char → node id
        self.parent:         Optional[str]  = parent
        self.level:          int            = level

    def to_dict(self) -> dict:
        return {
            "id":             self.id,
            "char":           self.char,
            "is_end_of_word": self.is_end_of_word,
            "children":       dict(self.children),
            "parent":         self.parent,
            "level":          self.level,
        }


@dataclass
class TrieMutation:
    word:         str
    path:         List[str]        = field(default_factory=list)   # root … last node
    created:      Set[str]         = field(default_factory=set)    # ids created by this insert
    already_word: bool             = False


def normalise(text: str, what: str = "word") -> str:
    text = (text or "").strip()
    if not text:
        raise InvalidInput(f"Please enter a {what}")
    return text.lower()


class Trie:
    """
    Attributes:
        nodes   : {node_id: TrieNode}, including the root.
        root_id : ID of the synthetic ROOT node.
    """

    SAMPLE_WORDS = ("bee", "bear", "bare", "beer", "apex", "apron")

    def __init__(self):
        self.nodes:   Dict[str, TrieNode] = {}
        self.root_id: str                 = ""
        self.clear()

    @property
    def root(self) -> TrieNode:
        return self.nodes[self.root_id]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def insert(self, word: str) -> TrieMutation:
        word = normalise(word)
        mutation = TrieMutation(word=word, path=[self.root_id])
        current = self.root
        for char in word:
            child_id = current.children.get(char)
            if child_id is None:
                child = TrieNode(char, parent=current.id, level=current.level + 1)
                self.nodes[child.id] = child
                current.children[char] = child.id
                mutation.created.add(child.id)
                child_id = child.id
            current = self.nodes[child_id]
            mutation.path.append(current.id)
        mutation.already_word = current.is_end_of_word
        current.is_end_of_word = True
        return mutation

    def find_path(self, text: str) -> Tuple[List[str], int]:
        """
        Walk as far as `text` allows.
        Returns (path of node ids from root, number of characters matched).
        """
        path = [self.root_id]
        current = self.root
        for i, char in enumerate(text.lower()):
            child_id = current.children.get(char)
            if child_id is None:
                return path, i
            current = self.nodes[child_id]
            path.append(current.id)
        return path, len(text)

    def contains(self, word: str) -> bool:
        word = word.lower()
        path, matched = self.find_path(word)
        return matched == len(word) and self.nodes[path[-1]].is_end_of_word

    def starts_with(self, prefix: str) -> bool:
        prefix = prefix.lower()
        return self.find_path(prefix)[1] == len(prefix)

    def words(self) -> List[str]:
        """Every stored word, lexicographically."""
        found: List[str] = []

        def walk(node: TrieNode, prefix: str) -> None:
            if node.is_end_of_word:
                found.append(prefix)
            for char in sorted(node.children):
                walk(self.nodes[node.children[char]], prefix + char)

        walk(self.root, "")
        return found

    def clear(self) -> None:
        root = TrieNode("ROOT")
        self.nodes = {root.id: root}
        self.root_id = root.id

    def load_sample(self) -> None:
        self.clear()
        for word in self.SAMPLE_WORDS:
            self.insert(word)

    def label(self, node_id: str) -> str:
        return self.nodes[node_id].char

    def __len__(self) -> int:
        return len(self.nodes) - 1

    def to_dict(self) -> dict:
        return {"root": self.root_id, "nodes": [n.to_dict() for n in self.nodes.values()]}
