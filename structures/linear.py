"""
linear.py — Stack & Queue Stores
================================
Array-backed LIFO stack and FIFO queue of integer items.  Each item
keeps a stable id so the renderer can animate it sliding in and out.
"""

from collections import deque
from typing import Deque, List, Optional

from structures.errors import EmptyStructure
from structures.node import new_id


class Item:
    __slots__ = ("id", "value")

    def __init__(self, value: int, item_id: Optional[str] = None):
        self.id:    str = item_id or new_id()
        self.value: int = value

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value}

    def __repr__(self) -> str:
        return f"Item({self.value})"


class Stack:
    SAMPLE_VALUES = (10, 20, 30, 40, 50)

    def __init__(self):
        self.items: List[Item] = []      # index 0 = bottom

    def push(self, value: int) -> Item:
        item = Item(value)
        self.items.append(item)
        return item

    def pop(self) -> Item:
        if not self.items:
            raise EmptyStructure("Stack is empty!")
        return self.items.pop()

    def peek(self) -> Item:
        if not self.items:
            raise EmptyStructure("Stack is empty!")
        return self.items[-1]

    def clear(self) -> List[Item]:
        removed, self.items = self.items, []
        return removed

    def load_sample(self) -> None:
        self.items = [Item(v) for v in self.SAMPLE_VALUES]

    def values(self) -> List[int]:
        return [i.value for i in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"items": [i.to_dict() for i in self.items]}


class Queue:
    SAMPLE_VALUES = (10, 20, 30, 40, 50)

    def __init__(self):
        self.items: Deque[Item] = deque()    # left = front

    def enqueue(self, value: int) -> Item:
        item = Item(value)
        self.items.append(item)
        return item

    def dequeue(self) -> Item:
        if not self.items:
            raise EmptyStructure("Queue is empty!")
        return self.items.popleft()

    def front(self) -> Item:
        if not self.items:
            raise EmptyStructure("Queue is empty!")
        return self.items[0]

    def rear(self) -> Item:
        if not self.items:
            raise EmptyStructure("Queue is empty!")
        return self.items[-1]

    def clear(self) -> List[Item]:
        removed = list(self.items)
        self.items = deque()
        return removed

    def load_sample(self) -> None:
        self.items = deque(Item(v) for v in self.SAMPLE_VALUES)

    def values(self) -> List[int]:
        return [i.value for i in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"items": [i.to_dict() for i in self.items]}
