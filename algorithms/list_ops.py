"""
list_ops.py — Singly Linked List Narration
===========================================
Insert and delete are narrated from the store's ListMutation, which
carries the list as it was BEFORE the call, so the walk to the right
position can be replayed node by node.  Search and traverse are
read-only walks from the head.
"""

from typing import Generator, List

from structures import LinkedList, ListMutation
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def find(list, v):",                       # 0
    "    node ← head; i ← 0",                   # 1
    "    while node is not None:",              # 2
    "        if node.value = v: return i",      # 3
    "        node ← node.next; i ← i + 1",      # 4
    "    return NOT FOUND",                     # 5
    "insert(v, i): walk to i-1, link new node", # 6
    "delete(v): prev.next ← node.next",         # 7
]


def _ids(pairs) -> List[str]:
    return [nid for nid, _ in pairs]


def list_insert(lst: LinkedList, mutation: ListMutation) -> Generator[Step, None, None]:
    sb = StepBuilder()
    value, at = mutation.value, mutation.index
    sb.overlay["values"] = [v for _, v in mutation.before]

    if mutation.was_empty:
        sb.overlay["values"] = lst.values()
        yield sb.emit(StepKind.INSERT, f"Inserted {value} as the first node",
                      highlight_nodes=[mutation.node_id], line=6,
                      output=f"Inserted {value} as the first node", is_final=True)
        return

    if mutation.position == "head":
        desc = f"Inserted {value} at the head"
    else:
        for pos, (nid, v) in enumerate(mutation.before[:at]):
            sb.path.append(nid)
            yield sb.emit(StepKind.VISIT, f"Moving to position {pos} (value: {v})",
                          highlight_nodes=[nid], line=4)
        if mutation.position == "tail" or at == len(mutation.before):
            desc = f"Inserted {value} at the tail"
        else:
            desc = f"Inserted {value} at position {at}"

    sb.path.append(mutation.node_id)
    sb.overlay["values"] = lst.values()
    yield sb.emit(StepKind.INSERT, desc, highlight_nodes=[mutation.node_id], line=6,
                  output=desc, is_final=True)


def list_delete(lst: LinkedList, mutation: ListMutation) -> Generator[Step, None, None]:
    sb = StepBuilder()
    value = mutation.value
    sb.overlay["values"] = [v for _, v in mutation.before]
    yield sb.emit(StepKind.START, f"Searching for node with value {value}", line=1)

    stop = mutation.index if mutation.found else len(mutation.before) - 1
    for pos, (nid, v) in enumerate(mutation.before[:stop + 1]):
        sb.path.append(nid)
        yield sb.emit(StepKind.COMPARE, f"Checking node at position {pos} (value: {v})",
                      highlight_nodes=[nid], line=3)

    if not mutation.found:
        yield sb.emit(StepKind.NOT_FOUND, f"Value {value} not found in the list", line=5,
                      output=f"{value} not found", is_final=True)
        return

    sb.overlay["values"] = lst.values()
    sb.path = _ids(mutation.before[:mutation.index])
    yield sb.emit(StepKind.DELETE, f"Deleted node with value {value}",
                  highlight_nodes=[mutation.node_id], line=7,
                  output=f"Deleted {value} from position {mutation.index}", is_final=True)


def list_search(lst: LinkedList, value: int) -> Generator[Step, None, None]:
    sb = StepBuilder()
    sb.overlay["values"] = lst.values()
    yield sb.emit(StepKind.START, f"Searching for {value}", line=1)

    for pos, node in enumerate(lst.ordered()):
        sb.path.append(node.id)
        yield sb.emit(StepKind.COMPARE, f"Checking node at position {pos} (value: {node.value})",
                      highlight_nodes=[node.id], line=3)
        if node.value == value:
            yield sb.emit(StepKind.FOUND, f"Found! Node with value {value} is at position {pos}",
                          highlight_nodes=[node.id], line=3,
                          output=f"Found {value} at position {pos}", is_final=True)
            return

    yield sb.emit(StepKind.NOT_FOUND, f"Value {value} not found in the list", line=5,
                  output=f"{value} not found", is_final=True)


def list_traverse(lst: LinkedList) -> Generator[Step, None, None]:
    sb = StepBuilder()
    sb.overlay["values"] = lst.values()
    for pos, node in enumerate(lst.ordered()):
        sb.visited.append(node.id)
        yield sb.emit(StepKind.VISIT, f"Visiting node at position {pos} (value: {node.value})",
                      highlight_nodes=[node.id], line=4)
    values = " → ".join(str(v) for v in lst.values())
    yield sb.emit(StepKind.COMPLETE, "Traversal complete",
                  output=f"Traversal: {values}", is_final=True)
