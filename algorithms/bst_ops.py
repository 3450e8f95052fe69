"""
bst_ops.py — Binary Search Tree Narration
==========================================
Insert / delete are narrated from the store's BSTMutation (the compare
path it recorded on the way down).  Search and the four traversals are
read-only walks over the current tree.

Traversals narrate their OWN auxiliary stack or queue: every push, pop,
enqueue and dequeue of that helper structure is a step, separate from
the tree nodes being visited.

  inorder    : push the left spine, pop & visit, move right
  preorder   : stack seeded with the root, push right then left
  postorder  : push the left spine, peek; go right if the right child is
               unvisited, otherwise pop & visit
  levelorder : FIFO queue, one LEVEL step per depth
"""

from collections import deque
from typing import Generator, List

from structures import BinarySearchTree, BSTMutation
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def insert(node, v):",                           # 0
    "    if node is None: return new Node(v)",        # 1
    "    if v < node.value: node.left ← insert(node.left, v)",    # 2
    "    elif v > node.value: node.right ← insert(node.right, v)", # 3
    "    return node",                                # 4
    "def search(node, v):",                           # 5
    "    while node: if v = node.value: return node", # 6
    "        node ← v < node.value ? left : right",   # 7
    "    return NOT FOUND",                           # 8
]

TRAVERSALS = {
    "inorder":    "In-order",
    "preorder":   "Pre-order",
    "postorder":  "Post-order",
    "levelorder": "Level-order",
}


# ---------------------------------------------------------------------------
# Insert / delete / search
# ---------------------------------------------------------------------------
def bst_insert(tree: BinarySearchTree, mutation: BSTMutation) -> Generator[Step, None, None]:
    sb = StepBuilder()
    value = mutation.value

    if mutation.was_empty:
        sb.path = [mutation.node_id]
        yield sb.emit(StepKind.INSERT, f"Inserted {value} as root node",
                      highlight_nodes=[mutation.node_id], line=1)
        yield sb.emit(StepKind.COMPLETE, f"Successfully inserted {value}",
                      highlight_nodes=[mutation.node_id],
                      output=f"Inserted {value} as root", is_final=True)
        return

    for node_id in mutation.path:
        sb.path.append(node_id)
        yield sb.emit(StepKind.COMPARE, f"Comparing {value} with {tree.value_of(node_id)}",
                      highlight_nodes=[node_id], line=2)

    if mutation.duplicate:
        yield sb.emit(StepKind.EXISTS, f"Value {value} already exists in the tree",
                      highlight_nodes=[mutation.node_id], line=4,
                      output=f"{value} already exists", is_final=True)
        return

    parent = tree.value_of(mutation.path[-1])
    op = "<" if mutation.side == "left" else ">"
    sb.path.append(mutation.node_id)
    yield sb.emit(StepKind.INSERT, f"{value} {op} {parent}, inserting as {mutation.side} child",
                  highlight_nodes=[mutation.node_id], line=2 if mutation.side == "left" else 3)
    yield sb.emit(StepKind.COMPLETE, f"Successfully inserted {value}",
                  highlight_nodes=[mutation.node_id],
                  output=f"Inserted {value}", is_final=True)


def bst_delete(tree: BinarySearchTree, mutation: BSTMutation) -> Generator[Step, None, None]:
    """
    The target node is already gone from `tree`, so the compare path's
    last entry is narrated from the mutation's value.
    """
    sb = StepBuilder()
    value = mutation.value
    yield sb.emit(StepKind.START, f"Deleting {value} from the tree")

    for node_id in mutation.path:
        sb.path.append(node_id)
        shown = value if node_id == mutation.node_id else tree.value_of(node_id)
        yield sb.emit(StepKind.COMPARE, f"Checking node with value {shown}", highlight_nodes=[node_id], line=6)

    if not mutation.found:
        yield sb.emit(StepKind.NOT_FOUND, f"Value {value} not found in the tree", line=8,
                      output=f"{value} not found", is_final=True)
        return

    yield sb.emit(StepKind.FOUND, f"Found {value}", highlight_nodes=[mutation.node_id], line=6)

    if mutation.case == "leaf":
        yield sb.emit(StepKind.DELETE, f"{value} is a leaf, removing it", highlight_nodes=[mutation.node_id])
    elif mutation.case == "one-child":
        child = tree.value_of(mutation.replacement_id)
        yield sb.emit(StepKind.DELETE, f"{value} has one child, replacing it with {child}",
                      highlight_nodes=[mutation.node_id, mutation.replacement_id])
    else:
        yield sb.emit(StepKind.VISIT, f"{value} has two children, finding in-order successor",
                      highlight_nodes=[mutation.node_id])
        for i, node_id in enumerate(mutation.successor_path):
            where = "right child" if i == 0 else "left"
            yield sb.emit(StepKind.VISIT, f"Moving {where} to {tree.value_of(node_id)}",
                          highlight_nodes=[node_id])
        succ = tree.value_of(mutation.successor_id)
        yield sb.emit(StepKind.MOVE, f"In-order successor {succ} takes the place of {value}",
                      highlight_nodes=[mutation.successor_id], swap_pair=(mutation.node_id, mutation.successor_id))

    yield sb.emit(StepKind.COMPLETE, f"Successfully deleted {value}",
                  output=f"Deleted {value}", is_final=True)


def bst_search(tree: BinarySearchTree, value: int) -> Generator[Step, None, None]:
    sb = StepBuilder()
    yield sb.emit(StepKind.START, f"Searching for {value}", line=5)

    current_id = tree.root
    while current_id is not None:
        node = tree.nodes[current_id]
        sb.path.append(current_id)
        yield sb.emit(StepKind.COMPARE, f"Checking node with value {node.value}",
                      highlight_nodes=[current_id], line=6)
        if value == node.value:
            yield sb.emit(StepKind.FOUND, f"Found! Value {value} exists in the tree",
                          highlight_nodes=[current_id], line=6,
                          output=f"Found {value}", is_final=True)
            return
        if value < node.value:
            yield sb.emit(StepKind.VISIT, f"{value} < {node.value}, searching left subtree",
                          highlight_nodes=[current_id], line=7)
            current_id = node.left
        else:
            yield sb.emit(StepKind.VISIT, f"{value} > {node.value}, searching right subtree",
                          highlight_nodes=[current_id], line=7)
            current_id = node.right

    yield sb.emit(StepKind.NOT_FOUND, f"Value {value} not found in the tree", line=8,
                  output=f"{value} not found", is_final=True)


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
def _visit(sb: StepBuilder, tree: BinarySearchTree, node_id: str) -> Step:
    sb.visited.append(node_id)
    return sb.emit(StepKind.POP, f"🔍 Pop {tree.value_of(node_id)} from stack - VISIT",
                   highlight_nodes=[node_id])


def _inorder(sb: StepBuilder, tree: BinarySearchTree):
    current = tree.root
    while current is not None or sb.stack:
        while current is not None:
            sb.stack.append(current)
            yield sb.emit(StepKind.PUSH, f"📚 Push {tree.value_of(current)} to stack, go left",
                          highlight_nodes=[current])
            current = tree.nodes[current].left
        node_id = sb.stack.pop()
        yield _visit(sb, tree, node_id)
        current = tree.nodes[node_id].right
        if current is not None:
            yield sb.emit(StepKind.MOVE, f"➡️ Move to right child of {tree.value_of(node_id)}",
                          highlight_nodes=[current])


def _preorder(sb: StepBuilder, tree: BinarySearchTree):
    sb.stack.append(tree.root)
    while sb.stack:
        node_id = sb.stack.pop()
        yield _visit(sb, tree, node_id)
        node = tree.nodes[node_id]
        if node.right is not None:
            sb.stack.append(node.right)
            yield sb.emit(StepKind.PUSH, f"📚 Push right child {tree.value_of(node.right)} to stack")
        if node.left is not None:
            sb.stack.append(node.left)
            yield sb.emit(StepKind.PUSH, f"📚 Push left child {tree.value_of(node.left)} to stack")


def _postorder(sb: StepBuilder, tree: BinarySearchTree):
    done = set()
    current = tree.root
    while current is not None or sb.stack:
        if current is not None:
            sb.stack.append(current)
            yield sb.emit(StepKind.PUSH, f"📚 Push {tree.value_of(current)} to stack",
                          highlight_nodes=[current])
            current = tree.nodes[current].left
            continue
        top = tree.nodes[sb.stack[-1]]
        if top.right is not None and top.right not in done:
            yield sb.emit(StepKind.MOVE, f"➡️ Move to right child of {top.value}")
            current = top.right
        else:
            node_id = sb.stack.pop()
            done.add(node_id)
            yield _visit(sb, tree, node_id)


def _levelorder(sb: StepBuilder, tree: BinarySearchTree):
    queue = deque([tree.root])
    sb.queue = list(queue)
    level = 0
    while queue:
        level += 1
        size = len(queue)
        yield sb.emit(StepKind.LEVEL, f"📊 Processing level {level} ({size} nodes)", level=level)
        for _ in range(size):
            yield sb.emit(StepKind.DEQUEUE, f"🔍 Dequeue from FRONT: {tree.value_of(queue[0])}",
                          highlight_nodes=[queue[0]], level=level)
            node_id = queue.popleft()
            sb.queue = list(queue)
            sb.visited.append(node_id)
            node = tree.nodes[node_id]
            for side in ("left", "right"):
                child = getattr(node, side)
                if child is not None:
                    queue.append(child)
                    sb.queue = list(queue)
                    yield sb.emit(StepKind.ENQUEUE,
                                  f"➕ Enqueue {side} child {tree.value_of(child)} to REAR", level=level)


_WALKERS = {
    "inorder":    (_inorder,    "Stack-based"),
    "preorder":   (_preorder,   "Stack-based"),
    "postorder":  (_postorder,  "Stack-based"),
    "levelorder": (_levelorder, "Queue-based"),
}


def bst_traverse(tree: BinarySearchTree, order: str) -> Generator[Step, None, None]:
    """order ∈ TRAVERSALS.  An empty tree yields just the start and final steps."""
    walker, flavour = _WALKERS[order]
    label = TRAVERSALS[order]
    sb = StepBuilder()
    if tree.root is not None and order == "levelorder":
        sb.queue = [tree.root]
    elif tree.root is not None and order == "preorder":
        sb.stack = [tree.root]
    yield sb.emit(StepKind.START, f"🌳 Starting {label} traversal ({flavour})")
    sb.stack, sb.queue = [], []

    if tree.root is not None:
        yield from walker(sb, tree)

    values = " → ".join(str(tree.value_of(n)) for n in sb.visited)
    sb.stack, sb.queue = [], []
    yield sb.emit(StepKind.COMPLETE, f"✅ {label} traversal complete",
                  output=f"{label} Traversal: {values}", is_final=True)
