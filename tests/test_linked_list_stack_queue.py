import pytest

from algorithms.linear_ops import queue_dequeue, queue_front, stack_pop, stack_push
from algorithms.list_ops import list_delete, list_insert, list_search, list_traverse
from algorithms.step import StepKind
from structures import EmptyStructure, InvalidInput, LinkedList, Queue, Stack


# ---------------------------------------------------------------------------
# Linked list
# ---------------------------------------------------------------------------
@pytest.fixture
def lst():
    l = LinkedList()
    l.load_sample()
    return l


def test_insert_positions(lst):
    lst.insert(5, "head")
    lst.insert(50, "tail")
    lst.insert(25, "index", 3)
    assert lst.values() == [5, 10, 20, 25, 30, 40, 50]


def test_insert_index_past_end_appends(lst):
    m = lst.insert(99, "index", 42)
    assert m.index == 4
    assert lst.values()[-1] == 99
    assert list(list_insert(lst, m))[-1].description == "Inserted 99 at the tail"


@pytest.mark.parametrize("position, index", [("middle", None), ("index", None), ("index", -1)])
def test_insert_rejects_bad_position(lst, position, index):
    with pytest.raises(InvalidInput):
        lst.insert(1, position, index)
    assert lst.values() == [10, 20, 30, 40]


def test_insert_walks_to_position(lst):
    m = lst.insert(25, "index", 2)
    steps = list(list_insert(lst, m))
    assert [s.description for s in steps] == [
        "Moving to position 0 (value: 10)",
        "Moving to position 1 (value: 20)",
        "Inserted 25 at position 2",
    ]
    assert steps[0].overlay["values"] == (10, 20, 30, 40)
    assert steps[-1].overlay["values"] == (10, 20, 25, 30, 40)


def test_insert_into_empty_list():
    l = LinkedList()
    steps = list(list_insert(l, l.insert(7)))
    assert len(steps) == 1
    assert steps[0].output == "Inserted 7 as the first node"


def test_delete_relinks_and_keeps_ids(lst):
    ids = [n.id for n in lst.ordered()]
    m = lst.delete(30)
    assert m.found and m.index == 2
    assert [n.id for n in lst.ordered()] == [ids[0], ids[1], ids[3]]
    steps = list(list_delete(lst, m))
    assert steps[-1].output == "Deleted 30 from position 2"
    assert sum(s.kind is StepKind.COMPARE for s in steps) == 3


def test_delete_missing_and_from_empty(lst):
    m = lst.delete(99)
    assert not m.found
    assert list(list_delete(lst, m))[-1].kind is StepKind.NOT_FOUND
    empty = LinkedList()
    steps = list(list_delete(empty, empty.delete(1)))
    assert [s.kind for s in steps] == [StepKind.START, StepKind.NOT_FOUND]


def test_search_and_traverse(lst):
    found = list(list_search(lst, 30))
    assert found[-1].output == "Found 30 at position 2"
    assert len(found[-1].path) == 3
    assert list(list_search(lst, 31))[-1].kind is StepKind.NOT_FOUND
    walk = list(list_traverse(lst))
    assert walk[-1].output == "Traversal: 10 → 20 → 30 → 40"
    assert len(walk[-1].visited) == 4


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def test_stack_is_lifo():
    s = Stack()
    for v in (1, 2, 3):
        s.push(v)
    assert [s.pop().value for _ in range(3)] == [3, 2, 1]
    with pytest.raises(EmptyStructure, match="Stack is empty!"):
        s.pop()
    with pytest.raises(EmptyStructure):
        s.peek()


def test_stack_narration_tracks_items():
    s = Stack()
    s.load_sample()
    item = s.push(60)
    push = list(stack_push(s, item))
    assert len(push[0].stack) == 5
    assert push[1].stack[-1] == item.id
    assert push[-1].description == "Stack size is now 6"

    popped = s.pop()
    pop = list(stack_pop(s, popped))
    assert pop[0].stack[-1] == popped.id
    assert popped.id not in pop[1].stack
    assert pop[-1].output == "Popped 60"


def test_stack_clear_returns_removed():
    s = Stack()
    s.load_sample()
    removed = s.clear()
    assert [i.value for i in removed] == [10, 20, 30, 40, 50]
    assert len(s) == 0


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def test_queue_is_fifo():
    q = Queue()
    for v in (1, 2, 3):
        q.enqueue(v)
    assert q.front().value == 1
    assert q.rear().value == 3
    assert [q.dequeue().value for _ in range(3)] == [1, 2, 3]
    for read in (q.dequeue, q.front, q.rear):
        with pytest.raises(EmptyStructure, match="Queue is empty!"):
            read()


def test_queue_narration():
    q = Queue()
    q.load_sample()
    item = q.dequeue()
    steps = list(queue_dequeue(q, item))
    assert steps[0].queue[0] == item.id
    assert steps[1].overlay["values"] == (20, 30, 40, 50)
    assert steps[-1].output == "Dequeued 10"
    front = list(queue_front(q))
    assert front[-1].output == "Front: 20"
    assert len(q) == 4
