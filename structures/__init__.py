"""
structures/
-----------
Structure Store layer.  Public API:

    from structures import Graph, Heap, Trie, HashSet, HashTable
    from structures import BinarySearchTree, LinkedList, Stack, Queue
    from structures import InvalidInput, EmptyStructure
"""

from structures.errors      import VisualizerError, InvalidInput, EmptyStructure, UnknownOperation
from structures.node        import Node
from structures.edge        import Edge
from structures.graph       import Graph, GraphMutation
from structures.heap        import Heap, HeapNode, HeapMutation, SiftEvent
from structures.trie        import Trie, TrieNode, TrieMutation
from structures.hashing     import HashSet, HashTable, HashMutation
from structures.bst         import BinarySearchTree, TreeNode, BSTMutation
from structures.linked_list import LinkedList, ListNode, ListMutation
from structures.linear      import Stack, Queue, Item

__all__ = [
    "VisualizerError", "InvalidInput", "EmptyStructure", "UnknownOperation",
    "Node", "Edge", "Graph", "GraphMutation",
    "Heap", "HeapNode", "HeapMutation", "SiftEvent",
    "Trie", "TrieNode", "TrieMutation",
    "HashSet", "HashTable", "HashMutation",
    "BinarySearchTree", "TreeNode", "BSTMutation",
    "LinkedList", "ListNode", "ListMutation",
    "Stack", "Queue", "Item",
]
