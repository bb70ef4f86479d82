"""Countdown timers driven by a shared controller."""

from __future__ import annotations

import weakref


class Timer:
    """A countdown in milliseconds; finished until started."""

    def __init__(self, controller: TimerController | None = None) -> None:
        # -1 rather than 0 keeps elapsed/duration defined before a start.
        self._duration = -1.0
        self._elapsed = 0.0
        self._finished = True
        if controller is not None:
            controller.register(self)

    def update(self, elapsed_time: float) -> None:
        if not self._finished:
            self._elapsed += elapsed_time
            if self._elapsed > self._duration:
                self._finished = True

    def start(self, duration: float) -> None:
        self._duration = duration
        self._elapsed = 0.0
        self._finished = False

    def stop(self) -> None:
        self._elapsed = self._duration
        self._finished = True

    def finished(self) -> bool:
        return self._finished

    def elapsed(self) -> float:
        return self._elapsed

    def duration(self) -> float:
        return self._duration

    def was_set(self) -> bool:
        return self._duration > 0

    def elapsed_percentage(self) -> float:
        return self._elapsed / self._duration if self._duration else 1.0


class TimerController:
    """Advances every registered timer; timers drop out when discarded."""

    def __init__(self) -> None:
        self._timers: weakref.WeakSet[Timer] = weakref.WeakSet()

    def register(self, timer: Timer) -> None:
        self._timers.add(timer)

    def unregister(self, timer: Timer) -> None:
        self._timers.discard(timer)

    def update(self, elapsed_time: float) -> None:
        for timer in list(self._timers):
            timer.update(elapsed_time)

    def __len__(self) -> int:
        return len(self._timers)

    def __contains__(self, timer: object) -> bool:
        return timer in self._timers