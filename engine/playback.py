"""
playback.py — Step Playback Controller
=======================================
The PlaybackController is the ONLY object the presentation layer moves
through a StepSequence with.  It owns the current index, the speed
preset and the one recurring timer that drives auto-play.

State machine:
    IDLE     (no steps)      →  load()  →  PAUSED
    PAUSED   →  play()       →  PLAYING
    PLAYING  →  pause()      →  PAUSED
    PLAYING  →  last step    →  FINISHED   (timer cancelled by the tick)
    any      →  reset()      →  PAUSED at index -1
    any      →  load()       →  PAUSED at index -1 with the new steps

Timer rule: at most one timer is live per controller.  Every path that
pauses, resets, finishes or loads a new sequence cancels it first, so
two playback loops can never drive the same overlay.

Index -1 means "no active step": the structure is shown in its final,
fully mutated state with no overlay.  Scrubbing never touches a store.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from algorithms.step import Step
from engine.config import Config
from engine.recorder import EMPTY_SEQUENCE, StepSequence
from engine.scheduler import CooperativeScheduler, Scheduler, TimerHandle
from structures.errors import InvalidInput

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


class PlaybackController:
    """
    Attributes:
        steps         : The StepSequence being played.
        current_index : -1 … len(steps)-1.
        speed         : Preset name ("slow" | "normal" | "fast").
        presets       : {preset: seconds per step} for this page.
        scheduler     : Where the recurring timer comes from.
        on_step       : Optional callback(Step | None) fired on every index change.
    """

    def __init__(
        self,
        kind: str = "default",
        scheduler: Optional[Scheduler] = None,
        on_step: Optional[Callable[[Optional[Step]], None]] = None,
    ):
        self.steps:         StepSequence      = EMPTY_SEQUENCE
        self.current_index: int               = -1
        self.presets:       Dict[str, float]  = Config.presets_for(kind)
        self.speed:         str               = Config.default_speed if Config.default_speed in self.presets else "normal"
        self.scheduler:     Scheduler         = scheduler or CooperativeScheduler()
        self.on_step:       Optional[Callable[[Optional[Step]], None]] = on_step
        self._timer:        Optional[TimerHandle] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, sequence: StepSequence) -> None:
        """Replace the sequence.  Any running timer is cancelled first."""
        self._cancel_timer()
        self.steps = sequence
        self._goto(-1)
        logger.debug("loaded %d steps", len(sequence))

    def reset(self) -> None:
        self._cancel_timer()
        self._goto(-1)

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> bool:
        """Start auto-advancing.  No-op (False) when empty or already at the end."""
        if self.is_playing:
            return True
        if not self.steps or self.at_end:
            return False
        self._schedule()
        logger.debug("play from %d at %s", self.current_index, self.speed)
        return True

    def pause(self) -> None:
        if self._timer is not None:
            logger.debug("pause at %d", self.current_index)
        self._cancel_timer()

    def toggle_play(self) -> bool:
        if self.is_playing:
            self.pause()
            return False
        return self.play()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step.  Returns False if already at the last step."""
        if self.at_end:
            return False
        self._goto(self.current_index + 1)
        if self.at_end:
            self._cancel_timer()
        return True

    def step_backward(self) -> bool:
        """Rewind one step, down to -1.  Returns False if already there."""
        if self.current_index < 0:
            return False
        self._goto(self.current_index - 1)
        return True

    def seek(self, index: int) -> bool:
        """Jump straight to `index` (-1 … len-1).  Out of range → False, nothing changes."""
        if not -1 <= index < len(self.steps):
            return False
        self._goto(index)
        if self.at_end:
            self._cancel_timer()
        return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        if preset not in self.presets:
            raise InvalidInput(f"Unknown speed '{preset}' (expected one of {', '.join(self.presets)})")
        self.speed = preset
        if self.is_playing:
            self._cancel_timer()
            self._schedule()

    @property
    def interval(self) -> float:
        return self.presets[self.speed]

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def current_overlay(self) -> Optional[Step]:
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    @property
    def is_playing(self) -> bool:
        return self._timer is not None and self._timer.active

    @property
    def at_end(self) -> bool:
        return self.current_index >= len(self.steps) - 1

    @property
    def state(self) -> PlaybackState:
        if not self.steps:
            return PlaybackState.IDLE
        if self.is_playing:
            return PlaybackState.PLAYING
        if self.at_end:
            return PlaybackState.FINISHED
        return PlaybackState.PAUSED

    def to_dict(self) -> dict:
        step = self.current_overlay()
        return {
            "state":         self.state.value,
            "current_index": self.current_index,
            "total_steps":   len(self.steps),
            "is_playing":    self.is_playing,
            "speed":         self.speed,
            "interval":      self.interval,
            "current_step":  step.to_dict() if step else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _schedule(self) -> None:
        self._timer = self.scheduler.call_every(self.interval, self._tick)

    def _tick(self) -> None:
        if not self.step_forward():
            self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _goto(self, index: int) -> None:
        self.current_index = index
        if self.on_step:
            self.on_step(self.current_overlay())
