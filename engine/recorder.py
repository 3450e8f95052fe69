"""
recorder.py — Step Recorder & Run Analytics
============================================
Exhausts an engine generator into an immutable StepSequence, then
computes the small analytics card the UI shows under the player.

Usage:
    rec = Recorder()
    seq = rec.record(get_algorithm("bfs"), graph, "n1")
    rec.metrics                      # RunMetrics for that run
    rec.export()                     # serialisable snapshot

The Recorder never touches a store; the generator it is handed reads
whatever state the operation already left behind.
"""

import logging
import sys
import time
from collections import Counter
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from algorithms import AlgoInfo
from algorithms.step import Step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# StepSequence — the immutable product of one operation
# ---------------------------------------------------------------------------
class StepSequence(Sequence):
    """
    Ordered, read-only collection of Steps.

    Attributes:
        steps : Tuple of Steps, in emission order.
        key   : Registry key of the engine that produced them ("" if none).
    """

    __slots__ = ("_steps", "_key")

    def __init__(self, steps=(), key: str = ""):
        self._steps: Tuple[Step, ...] = tuple(steps)
        self._key:   str              = key

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    @property
    def key(self) -> str:
        return self._key

    @property
    def final(self) -> Optional[Step]:
        return self._steps[-1] if self._steps else None

    def __getitem__(self, index: Union[int, slice]):
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"StepSequence(key={self._key!r}, steps={len(self._steps)})"

    def to_list(self) -> list:
        return [s.to_dict() for s in self._steps]


EMPTY_SEQUENCE = StepSequence()


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str            = ""
    algo_label:    str            = ""
    total_steps:   int            = 0          # number of Steps yielded
    nodes_visited: int            = 0          # visited set size on the final step
    mst_weight:    float          = 0          # Prim / Borůvka only
    wall_time_ms:  float          = 0.0        # wall-clock time to exhaust the generator
    memory_bytes:  int            = 0          # approx size of the step buffer
    kinds:         Dict[str, int] = field(default_factory=dict)   # StepKind → count
    output:        str            = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        sequence : StepSequence from the most recent run.
        metrics  : RunMetrics for that run (None before the first run).
    """

    def __init__(self):
        self.sequence: StepSequence         = EMPTY_SEQUENCE
        self.metrics:  Optional[RunMetrics] = None
        self._info:    Optional[AlgoInfo]   = None

    def record(self, info: AlgoInfo, *args, **kwargs) -> StepSequence:
        """Run `info.fn(*args, **kwargs)` to completion and freeze the result."""
        self._info = info
        start = time.monotonic()
        steps = list(info.fn(*args, **kwargs))
        wall_ms = (time.monotonic() - start) * 1000

        self.sequence = StepSequence(steps, key=info.key)
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("recorded %s: %d steps in %.2f ms", info.key, len(steps), wall_ms)
        return self.sequence

    def clear(self) -> StepSequence:
        """Forget the last run (structure edits that narrate nothing)."""
        self._info = None
        self.sequence = EMPTY_SEQUENCE
        self.metrics = None
        return self.sequence

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._info.key if self._info else "",
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    self.sequence.to_list(),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._info
        last = self.sequence.final

        mem = sys.getsizeof(self.sequence.steps)
        for s in self.sequence:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            total_steps=len(self.sequence),
            nodes_visited=len(last.visited) if last else 0,
            mst_weight=last.total_weight if last else 0,
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            kinds=dict(Counter(s.kind.value for s in self.sequence)),
            output=last.output if last else "",
        )
