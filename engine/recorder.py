"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete sorting run (all Steps), then computes the
analytics metrics the UI needs for the Analytics panel.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", values=[5, 3, 8, 1])
    rec.run_to_completion()          # builds the whole trace
    metrics = rec.get_metrics()      # the analytics card
    rec.stepper.next_step()          # play it back
    rec.export()                     # serialisable snapshot for save/replay

The trace is built completely before it is handed to a new Stepper, so
a consumer holding the previous Stepper never sees a half-built run.
"""

import logging
import sys
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from algorithms import get_algorithm, AlgoInfo
from algorithms.step import Step
from engine.stepper import Stepper


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    array_size:      int   = 0
    total_steps:     int   = 0          # number of Steps in the trace
    comparisons:     int   = 0          # steps highlighting a comparison
    swaps:           int   = 0          # steps marking a swap / write
    wall_time_ms:    float = 0.0        # wall-clock time to build the trace
    memory_bytes:    int   = 0          # approx size of the step buffer (sys.getsizeof)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps       : Full list of Steps from the run.
        metrics     : Computed RunMetrics (available after run_to_completion).
        stepper     : Stepper loaded with the finished trace.
        lock        : Held by hosts that drive `stepper` from several threads.
    """

    def __init__(self):
        self.steps:     List[Step]           = []
        self.metrics:   Optional[RunMetrics] = None
        self.stepper:   Optional[Stepper]    = None
        self.lock                            = threading.Lock()

        self._algo_info:  Optional[AlgoInfo] = None
        self._values:     List[int]          = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Sequence[int]) -> None:
        """Choose the engine and input for this run."""
        self._algo_info = get_algorithm(algo_key)
        self._values    = list(values)
        self.steps      = []
        self.metrics    = None
        self.stepper    = None

    def run_to_completion(self) -> RunMetrics:
        """Build the whole trace, load it into a Stepper, compute metrics."""
        if self._algo_info is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        steps   = self._algo_info.fn(self._values)
        wall_ms = (time.monotonic() - started) * 1000

        stepper = Stepper()
        stepper.load(self._values, steps)

        self.steps   = steps
        self.stepper = stepper
        self.metrics = self._compute_metrics(wall_ms)

        logger.info(
            "%s on %d values: %d steps in %.2f ms",
            self._algo_info.label, len(self._values), len(steps), wall_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def algo_info(self) -> Optional[AlgoInfo]:
        return self._algo_info

    @property
    def values(self) -> List[int]:
        return list(self._values)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "array":    list(self._values),
            "metrics":  self.metrics.__dict__ if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s) + sys.getsizeof(s.array)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            array_size=len(self._values),
            total_steps=len(self.steps),
            comparisons=sum(1 for s in self.steps if len(s.comparing) == 2),
            swaps=sum(1 for s in self.steps if s.swapping),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
        )
