"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Player, Recorder
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS, DEFAULT_SPEED
from engine.player   import Player
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "DEFAULT_SPEED",
    "Player",
    "Recorder",
    "RunMetrics",
]
