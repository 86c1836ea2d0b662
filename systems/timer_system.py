"""
timer_system.py – Frame-driven one-shot timers.

OneShotTimer  : explicit ``running`` / ``time_left`` state, fires a
                callback once when its countdown reaches zero
TimerService  : scene-level owner that advances every registered
                timer once per frame, before entities update

Callbacks run synchronously inside ``update`` on the main loop thread.
The timer is marked stopped *before* its callback runs, so a callback
may immediately re-arm the same timer.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class OneShotTimer:
    """Countdown that calls back once, then stops."""

    def __init__(self, name: str = "timer"):
        self.name = name
        self.running: bool = False
        self.time_left: float = 0.0
        self.duration: float = 0.0
        self._callback: Callable[[], None] | None = None

    # ── IdleTimer port ────────────────────────────────────

    def is_running(self) -> bool:
        return self.running

    def start_once(self, duration: float, callback: Callable[[], None]):
        self.duration = max(0.0, duration)
        self.time_left = self.duration
        self._callback = callback
        self.running = True
        logger.debug("%s armed for %.2fs", self.name, self.duration)

    # ── Per-frame ─────────────────────────────────────────

    def update(self, dt: float):
        if not self.running:
            return
        self.time_left -= dt
        if self.time_left > 0:
            return
        self.time_left = 0.0
        self.running = False
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()

    def stop(self):
        self.running = False
        self._callback = None


class TimerService:
    """Owns and ticks timers for a scene."""

    def __init__(self):
        self._timers: list[OneShotTimer] = []

    def create(self, name: str = "timer") -> OneShotTimer:
        timer = OneShotTimer(name)
        self._timers.append(timer)
        return timer

    def remove(self, timer: OneShotTimer):
        timer.stop()
        if timer in self._timers:
            self._timers.remove(timer)

    def update(self, dt: float):
        for timer in list(self._timers):
            timer.update(dt)

    def __len__(self) -> int:
        return len(self._timers)
