"""
linear_ops.py — Stack & Queue Narration
========================================
Three short steps per operation: announce, act, report the new size.
`stack` / `queue` on each Step hold item ids bottom→top and front→rear;
the overlay carries the matching values.
"""

from typing import Generator, List

from structures import Item, Queue, Stack
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "push(v):    items.append(v)",        # 0
    "pop():      return items.removeLast()", # 1
    "peek():     return items[last]",     # 2
    "enqueue(v): items.append(v)",        # 3
    "dequeue():  return items.removeFirst()", # 4
    "front():    return items[0]",        # 5
    "rear():     return items[last]",     # 6
]


def _show_stack(sb: StepBuilder, items: List[Item]) -> None:
    sb.stack = [i.id for i in items]
    sb.overlay["values"] = [i.value for i in items]


def _show_queue(sb: StepBuilder, items: List[Item]) -> None:
    sb.queue = [i.id for i in items]
    sb.overlay["values"] = [i.value for i in items]


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def stack_push(stack: Stack, item: Item) -> Generator[Step, None, None]:
    sb = StepBuilder()
    before = stack.items[:-1]
    _show_stack(sb, before)
    yield sb.emit(StepKind.START, f"Pushing {item.value} onto the stack", line=0)
    _show_stack(sb, stack.items)
    yield sb.emit(StepKind.PUSH, f"{item.value} added to top of stack (index {len(before)})",
                  highlight_nodes=[item.id], line=0)
    yield sb.emit(StepKind.COMPLETE, f"Stack size is now {len(stack)}",
                  output=f"Pushed {item.value}", is_final=True)


def stack_pop(stack: Stack, item: Item) -> Generator[Step, None, None]:
    sb = StepBuilder()
    _show_stack(sb, stack.items + [item])
    yield sb.emit(StepKind.START, "Popping from top of stack", highlight_nodes=[item.id], line=1)
    _show_stack(sb, stack.items)
    yield sb.emit(StepKind.POP, f"Removed {item.value} from stack", highlight_nodes=[item.id], line=1)
    yield sb.emit(StepKind.COMPLETE, f"Stack size is now {len(stack)}",
                  output=f"Popped {item.value}", is_final=True)


def stack_peek(stack: Stack) -> Generator[Step, None, None]:
    sb = StepBuilder()
    top = stack.peek()
    _show_stack(sb, stack.items)
    yield sb.emit(StepKind.PEEK, "Peeking at top of stack", highlight_nodes=[top.id], line=2)
    yield sb.emit(StepKind.FOUND, f"Top element is {top.value}", highlight_nodes=[top.id], line=2)
    yield sb.emit(StepKind.COMPLETE, "Stack remains unchanged",
                  output=f"Peek: {top.value}", is_final=True)


def stack_clear(stack: Stack, removed: List[Item]) -> Generator[Step, None, None]:
    sb = StepBuilder()
    _show_stack(sb, removed)
    yield sb.emit(StepKind.DELETE, "Clearing all elements from stack")
    _show_stack(sb, stack.items)
    yield sb.emit(StepKind.COMPLETE, "Stack is now empty",
                  output=f"Cleared {len(removed)} items", is_final=True)


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def queue_enqueue(queue: Queue, item: Item) -> Generator[Step, None, None]:
    sb = StepBuilder()
    before = list(queue.items)[:-1]
    _show_queue(sb, before)
    yield sb.emit(StepKind.START, f"Enqueuing {item.value} to the rear of queue", line=3)
    _show_queue(sb, list(queue.items))
    yield sb.emit(StepKind.ENQUEUE, f"{item.value} added to rear of queue (index {len(before)})",
                  highlight_nodes=[item.id], line=3)
    yield sb.emit(StepKind.COMPLETE, f"Queue size is now {len(queue)}",
                  output=f"Enqueued {item.value}", is_final=True)


def queue_dequeue(queue: Queue, item: Item) -> Generator[Step, None, None]:
    sb = StepBuilder()
    _show_queue(sb, [item] + list(queue.items))
    yield sb.emit(StepKind.START, "Dequeuing from front of queue", highlight_nodes=[item.id], line=4)
    _show_queue(sb, list(queue.items))
    yield sb.emit(StepKind.DEQUEUE, f"Removed {item.value} from queue", highlight_nodes=[item.id], line=4)
    yield sb.emit(StepKind.COMPLETE, f"Queue size is now {len(queue)}",
                  output=f"Dequeued {item.value}", is_final=True)


def _queue_read(queue: Queue, end: str) -> Generator[Step, None, None]:
    sb = StepBuilder()
    item = queue.front() if end == "front" else queue.rear()
    line = 5 if end == "front" else 6
    _show_queue(sb, list(queue.items))
    yield sb.emit(StepKind.PEEK, f"Getting {end} element of queue", highlight_nodes=[item.id], line=line)
    yield sb.emit(StepKind.FOUND, f"{end.capitalize()} element is {item.value}",
                  highlight_nodes=[item.id], line=line)
    yield sb.emit(StepKind.COMPLETE, "Queue remains unchanged",
                  output=f"{end.capitalize()}: {item.value}", is_final=True)


def queue_front(queue: Queue) -> Generator[Step, None, None]:
    return _queue_read(queue, "front")


def queue_rear(queue: Queue) -> Generator[Step, None, None]:
    return _queue_read(queue, "rear")


def queue_clear(queue: Queue, removed: List[Item]) -> Generator[Step, None, None]:
    sb = StepBuilder()
    _show_queue(sb, removed)
    yield sb.emit(StepKind.DELETE, "Clearing all elements from queue")
    _show_queue(sb, list(queue.items))
    yield sb.emit(StepKind.COMPLETE, "Queue is now empty",
                  output=f"Cleared {len(removed)} items", is_final=True)
