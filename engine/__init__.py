"""
engine/
-------
Recording, playback & session layer.

    from engine import VisualizerSession, PlaybackController, Recorder
"""

from engine.config    import Config, configure_logging
from engine.scheduler import Scheduler, CooperativeScheduler, TimerHandle
from engine.recorder  import Recorder, RunMetrics, StepSequence, EMPTY_SEQUENCE
from engine.playback  import PlaybackController, PlaybackState
from engine.session   import VisualizerSession, OperationResult, KINDS, OPERATIONS

__all__ = [
    "Config",
    "configure_logging",
    "Scheduler",
    "CooperativeScheduler",
    "TimerHandle",
    "Recorder",
    "RunMetrics",
    "StepSequence",
    "EMPTY_SEQUENCE",
    "PlaybackController",
    "PlaybackState",
    "VisualizerSession",
    "OperationResult",
    "KINDS",
    "OPERATIONS",
]
