"""
player.py — Background Auto-Play
=================================
A cancelable repeating timer that drives a Stepper.

    player = Player(stepper)
    player.start()          # PLAYING, advances every stepper.speed seconds
    player.stop()           # cancel; the current frame stays where it is

The cancellation token is a threading.Event: the loop waits on it for
`stepper.speed` seconds between advances, so stop() takes effect
immediately instead of after the current interval.  Steps are
pre-materialized, so stopping never needs a rollback.

While running, the Player's thread is the only caller of
Stepper.next_step(); do not navigate the stepper from elsewhere until
stop() returns.
"""

import logging
import threading
from typing import Optional

from engine.stepper import Stepper, StepperState


logger = logging.getLogger(__name__)


class Player:

    def __init__(self, stepper: Stepper):
        self.stepper = stepper
        self._cancel = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self.is_running:
            return
        self.stepper.play()
        if not self.stepper.is_playing:
            return
        self._cancel.clear()
        self._thread = threading.Thread(target=self._run, name="sort-player", daemon=True)
        self._thread.start()
        logger.debug("Player started at %.3fs per step", self.stepper.speed)

    def stop(self) -> None:
        self._cancel.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None
        self.stepper.pause()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until playback ends.  Returns True if it did within `timeout`."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        while not self._cancel.wait(self.stepper.speed):
            if self.stepper.state != StepperState.PLAYING:
                break
            if not self.stepper.next_step():
                logger.debug("Player reached the end of the trace")
                break
