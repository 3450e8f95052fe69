import pytest

from algorithms.heap_ops import heap_extract, heap_insert, heap_peek
from algorithms.step import StepKind
from structures import EmptyStructure, Heap


def test_inserting_sample_values_keeps_min_heap_order():
    heap = Heap()
    for v in Heap.SAMPLE_VALUES:
        heap.push(v)
    assert heap.values()[0] == 10
    assert heap.is_valid()
    for i in range(1, len(heap)):
        assert heap.items[Heap.parent_index(i)].value <= heap.items[i].value


def test_sift_up_narration_and_positions():
    heap = Heap()
    heap.push(10)
    heap.push(20)
    m = heap.push(5)
    steps = list(heap_insert(heap, m))

    assert steps[0].description == "🌟 Inserting 5 into Min Heap"
    assert steps[1].description == "📍 Added 5 at index 2 (last position in array)"
    compare, swap, move = steps[2:5]
    assert compare.kind is StepKind.COMPARE
    assert compare.description == "🔍 Comparing 5 at [2] with parent 10 at [0]"
    assert compare.overlay["current_index"] == 2 and compare.overlay["target_index"] == 0
    assert swap.description == "🔄 Swapping 5 with 10 (5 < 10)"
    ten = next(n for n in heap.items if n.value == 10)
    assert swap.swap_pair == (m.node_id, ten.id)
    assert move.description == "⬆️ Node 5 propagated up to index 0"
    assert steps[-1].description == "🎉 Successfully inserted 5 into heap at final position [0]"
    assert [v for _, v in steps[-1].overlay["heap_array"]] == heap.values()


def test_equal_values_never_swap():
    heap = Heap()
    heap.push(10)
    m = heap.push(10)
    kinds = [e.kind for e in m.events]
    assert kinds == ["compare", "settle"]
    assert m.final_index == 1


def test_extract_moves_last_to_root_and_sifts_down():
    heap = Heap()
    heap.load_sample()
    m = heap.pop()
    assert m.value == 10
    assert heap.is_valid()
    assert heap.values()[0] == 15

    steps = list(heap_extract(heap, m))
    assert steps[0].description == "Extracting minimum value: 10"
    assert steps[1].description.startswith("Moving last element")
    assert steps[-1].description == "Successfully extracted 10 from heap"
    assert any(s.kind is StepKind.SWAP for s in steps)


def test_extract_single_element_empties_heap():
    heap = Heap()
    heap.push(7)
    m = heap.pop()
    steps = list(heap_extract(heap, m))
    assert len(heap) == 0
    assert [s.description for s in steps] == ["Extracting minimum value: 7", "Heap is now empty"]


def test_extract_and_peek_on_empty_heap_raise():
    heap = Heap()
    with pytest.raises(EmptyStructure):
        heap.pop()
    with pytest.raises(EmptyStructure):
        heap.peek()


def test_peek_is_read_only():
    heap = Heap()
    heap.load_sample()
    before = heap.snapshot()
    steps = list(heap_peek(heap))
    assert heap.snapshot() == before
    assert [s.description for s in steps] == [
        "Peeking at minimum value", "Minimum value is 10", "Heap remains unchanged",
    ]


def test_switching_to_max_heap_rebuilds_contents():
    heap = Heap()
    heap.load_sample()
    heap.set_min_heap(False)
    assert heap.values()[0] == 100
    assert heap.is_valid()
    assert sorted(heap.values()) == sorted(Heap.SAMPLE_VALUES)
    m = heap.push(500)
    assert m.final_index == 0
    steps = list(heap_insert(heap, m))
    assert steps[0].description == "🌟 Inserting 500 into Max Heap"
    assert any("(500 > 100)" in s.description for s in steps)


def test_node_identity_survives_sifting():
    heap = Heap()
    m = heap.push(30)
    heap.push(1)
    node = next(n for n in heap.items if n.id == m.node_id)
    assert node.value == 30
    assert node.index == heap.items.index(node)


def _heap_of(values, is_min=True):
    heap = Heap(is_min=is_min)
    for v in values:
        heap.push(v)
    return heap


def test_sift_down_prefers_right_child_when_it_is_stricter():
    heap = _heap_of([1, 5, 3, 9])
    m = heap.pop()
    assert heap.values() == [3, 5, 9]

    compares = [e for e in m.events if e.kind == "compare"]
    assert [(e.side, e.values) for e in compares] == [("left", (9, 5)), ("right", (5, 3))]
    swap = next(e for e in m.events if e.kind == "swap")
    assert swap.values == (9, 3)
    assert swap.target_index == 2

    descriptions = [s.description for s in heap_extract(heap, m)]
    assert descriptions == [
        "Extracting minimum value: 1",
        "Moving last element 9 to root position",
        "Comparing 9 with left child 5",
        "Comparing 5 with right child 3",
        "Swapping 9 with 3",
        "Moved 9 down to index 2",
        "Heap property satisfied, 9 stays at index 2",
        "Successfully extracted 1 from heap",
    ]


def test_max_heap_extract_narration():
    heap = _heap_of([9, 3, 5, 1], is_min=False)
    assert heap.values() == [9, 3, 5, 1]
    m = heap.pop()
    assert m.value == 9
    assert heap.values() == [5, 3, 1]
    assert heap.is_valid()

    right = [e for e in m.events if e.kind == "compare" and e.side == "right"]
    assert right[0].values == (3, 5)
    steps = list(heap_extract(heap, m))
    assert steps[0].description == "Extracting maximum value: 9"
    assert "Swapping 1 with 5" in [s.description for s in steps]
    assert steps[-1].output == "Extracted 9"
