"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object the UI interacts with during playback.
It holds the input array and its precomputed trace, tracks the index
being displayed, and exposes a clean play/pause/next/prev/speed API.

State machine:
    IDLE     →  load()    →  PAUSED
    PAUSED   →  play()    →  PLAYING
    PLAYING  →  pause()   →  PAUSED
    PLAYING  →  (trace exhausted) → FINISHED
    FINISHED →  rewind()  →  PAUSED
    any      →  reset()   →  IDLE

Frame 0 convention:
  Index 0 never shows trace[0]; it shows the raw input with nothing
  highlighted.  Every other index shows trace[index] verbatim.

Thread safety:
  This class is NOT thread-safe.  Call it from a single thread, or let
  a Player (engine/player.py) be the only caller while it is running.
"""

import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   0.5,    # teaching mode
    "medium": 0.1,
    "fast":   0.03,   # demo mode
    "turbo":  0.01,
}

DEFAULT_SPEED   = SPEED_PRESETS["medium"]
MIN_SPEED       = 0.01

# speed slider: right = faster, interval_ms = SLIDER_OFFSET - value
SLIDER_MIN      = 10
SLIDER_MAX      = 500
SLIDER_OFFSET   = 510


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        values      : The unmodified input array (shown at index 0).
        steps       : The precomputed trace.
        current_idx : Index into `steps` that is currently displayed.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time the current frame changes.
                      The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.values:      List[int]    = []
        self.steps:       List[Step]   = []
        self.current_idx: int          = 0
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = DEFAULT_SPEED
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        # for auto-play timing
        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, values: Sequence[int], trace: Sequence[Step]) -> None:
        """Attach a freshly built trace and show frame 0."""
        self.values      = list(values)
        self.steps       = list(trace)
        self.state       = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Back to IDLE — caller must call load() again."""
        self.values      = []
        self.steps       = []
        self.current_idx = 0
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False (and finishes) if already at end."""
        if self.state == StepperState.IDLE:
            return False
        target = self.current_idx + 1
        if target >= len(self.steps):
            self.state = StepperState.FINISHED
            return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if self.state == StepperState.IDLE:
            return False
        if 0 <= idx < max(len(self.steps), 1):
            self._goto(idx)
            if self.state == StepperState.FINISHED:
                self.state = StepperState.PAUSED
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.state == StepperState.IDLE:
            return
        self.state = StepperState.PAUSED
        self._goto(0)

    def jump_to_end(self) -> None:
        """Jump to the final step."""
        if self.state == StepperState.IDLE:
            return
        if self.steps:
            self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Call periodically (e.g. every 10 ms).  If playing and enough
        time has elapsed, advances one step.  Returns True if a step
        was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic()
        if now - self._last_tick >= self.speed:
            self._last_tick = now
            return self.next_step()
        return False

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, DEFAULT_SPEED)

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_SPEED, seconds)

    def set_speed_slider(self, value: int) -> None:
        """Slider in [SLIDER_MIN, SLIDER_MAX]; higher is faster."""
        value = min(SLIDER_MAX, max(SLIDER_MIN, value))
        self.set_speed_value((SLIDER_OFFSET - value) / 1000)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_frame(self) -> Step:
        if not self.steps or self.current_idx == 0:
            return Step(array=self.values)
        return self.steps[self.current_idx]

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step:
            self.on_step(self.current_frame)
