"""
heap_ops.py — Heap Sift-Up / Sift-Down Narration
=================================================
The heap store performs the real sift and hands back a trace of
SiftEvents; these generators turn that trace into Steps.  Every step
carries the array snapshot of its instant plus the propagating node's
id and current / target index, so the renderer can draw the bubble
moving without touching the live heap.
"""

from typing import Generator, List

from structures import Heap, HeapMutation, SiftEvent
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def insert(heap, v):",                                  # 0
    "    heap.append(v); i ← len(heap) - 1",                 # 1
    "    while i > 0 and violates(heap[parent(i)], heap[i]):", # 2
    "        swap(heap[i], heap[parent(i)]); i ← parent(i)", # 3
    "def extract(heap):",                                    # 4
    "    root ← heap[0]; heap[0] ← heap.pop()",              # 5
    "    while a child violates order with heap[i]:",        # 6
    "        swap with the most violating child",            # 7
    "    return root",                                       # 8
]


def _relation(heap: Heap, a: int, b: int) -> str:
    return f"{a} < {b}" if heap.is_min else f"{a} > {b}"


def _event_step(sb: StepBuilder, heap: Heap, ev: SiftEvent, insert: bool) -> Step:
    sb.overlay["heap_array"] = list(ev.array)
    common = dict(highlight_nodes=[ev.node_id], propagating=ev.node_id,
                  current_index=ev.index, target_index=ev.target_index)

    if ev.kind == "compare":
        a, b = ev.values
        if insert:
            desc = f"🔍 Comparing {a} at [{ev.index}] with parent {b} at [{ev.target_index}]"
        else:
            desc = f"Comparing {a} with {ev.side} child {b}"
        return sb.emit(StepKind.COMPARE, desc, compare_pair=ev.pair,
                       line=2 if insert else 6, **common)

    if ev.kind == "swap":
        a, b = ev.values
        if insert:
            desc = f"🔄 Swapping {a} with {b} ({_relation(heap, a, b)})"
        else:
            desc = f"Swapping {a} with {b}"
        return sb.emit(StepKind.SWAP, desc, swap_pair=ev.pair, line=3 if insert else 7, **common)

    value = dict(ev.array)[ev.node_id]
    if ev.kind == "move":
        desc = (f"⬆️ Node {value} propagated up to index {ev.index}" if insert
                else f"Moved {value} down to index {ev.index}")
        return sb.emit(StepKind.MOVE, desc, line=3 if insert else 7, **common)

    desc = (f"✅ Heap property satisfied! {value} stays at index {ev.index}" if insert
            else f"Heap property satisfied, {value} stays at index {ev.index}")
    return sb.emit(StepKind.SETTLE, desc, line=2 if insert else 6, **common)


def heap_insert(heap: Heap, mutation: HeapMutation) -> Generator[Step, None, None]:
    sb = StepBuilder()
    value = mutation.value
    added_at = len(mutation.before)

    sb.overlay["heap_array"] = list(mutation.before)
    yield sb.emit(StepKind.START, f"🌟 Inserting {value} into {heap.kind_label} Heap", line=0)

    sb.overlay["heap_array"] = list(mutation.before) + [(mutation.node_id, value)]
    yield sb.emit(StepKind.INSERT, f"📍 Added {value} at index {added_at} (last position in array)",
                  highlight_nodes=[mutation.node_id], propagating=mutation.node_id,
                  current_index=added_at, line=1)

    for ev in mutation.events:
        yield _event_step(sb, heap, ev, insert=True)

    sb.overlay["heap_array"] = list(heap.snapshot())
    yield sb.emit(StepKind.COMPLETE,
                  f"🎉 Successfully inserted {value} into heap at final position [{mutation.final_index}]",
                  highlight_nodes=[mutation.node_id], line=3,
                  output=f"Inserted {value} at index {mutation.final_index}", is_final=True)


def heap_extract(heap: Heap, mutation: HeapMutation) -> Generator[Step, None, None]:
    sb = StepBuilder()
    which = "minimum" if heap.is_min else "maximum"

    sb.overlay["heap_array"] = list(mutation.before)
    yield sb.emit(StepKind.POP, f"Extracting {which} value: {mutation.value}",
                  highlight_nodes=[mutation.node_id], line=5)

    if mutation.moved is None:
        sb.overlay["heap_array"] = []
        yield sb.emit(StepKind.COMPLETE, "Heap is now empty", line=8,
                      output=f"Extracted {mutation.value}", is_final=True)
        return

    moved_id, moved_value = mutation.moved
    if mutation.events:
        sb.overlay["heap_array"] = list(mutation.events[0].array)
    yield sb.emit(StepKind.MOVE, f"Moving last element {moved_value} to root position",
                  highlight_nodes=[moved_id], propagating=moved_id, current_index=0, line=5)

    for ev in mutation.events:
        yield _event_step(sb, heap, ev, insert=False)

    sb.overlay["heap_array"] = list(heap.snapshot())
    yield sb.emit(StepKind.COMPLETE, f"Successfully extracted {mutation.value} from heap", line=8,
                  output=f"Extracted {mutation.value}", is_final=True)


def heap_peek(heap: Heap) -> Generator[Step, None, None]:
    sb = StepBuilder()
    root = heap.peek()
    which = "minimum" if heap.is_min else "maximum"
    sb.overlay["heap_array"] = list(heap.snapshot())

    yield sb.emit(StepKind.PEEK, f"Peeking at {which} value", highlight_nodes=[root.id])
    yield sb.emit(StepKind.FOUND, f"{which.capitalize()} value is {root.value}", highlight_nodes=[root.id])
    yield sb.emit(StepKind.COMPLETE, "Heap remains unchanged",
                  output=f"Peek: {root.value}", is_final=True)
