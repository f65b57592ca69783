"""Simulation-clock timers: one-shot delays and repeating held-control actions."""

from __future__ import annotations

from typing import Callable, List, Optional


class ScheduledTask:
    """A callback waiting on the simulation clock; cancel it to drop it."""

    def __init__(self, delay: float, callback: Callable[[], None], interval: Optional[float] = None) -> None:
        self.remaining = max(0.0, delay)
        self.callback = callback
        self.interval = interval
        self.cancelled = False
        self.done = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.done)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """Runs tasks as the owner advances simulated time."""

    def __init__(self) -> None:
        self.time = 0.0
        self._tasks: List[ScheduledTask] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(delay, callback)
        self._tasks.append(task)
        return task

    def call_every(self, interval: float, callback: Callable[[], None]) -> ScheduledTask:
        if interval <= 0:
            raise ValueError("repeat interval must be positive")
        task = ScheduledTask(interval, callback, interval=interval)
        self._tasks.append(task)
        return task

    def advance(self, dt: float) -> None:
        self.time += dt
        for task in list(self._tasks):
            if not task.active:
                continue
            task.remaining -= dt
            while task.active and task.remaining <= 0.0:
                if task.interval is None:
                    task.done = True
                    task.callback()
                    break
                task.remaining += task.interval
                task.callback()
        self._tasks = [task for task in self._tasks if task.active]

    def cancel_all(self) -> None:
        for task in self._tasks:
            task.cancel()
        self._tasks = []

    @property
    def pending(self) -> int:
        return sum(1 for task in self._tasks if task.active)


class HoldRepeater:
    """Repeat an action at a fixed cadence while a control stays held."""

    def __init__(self, scheduler: Scheduler, interval: float, *, immediate: bool = True) -> None:
        self.scheduler = scheduler
        self.interval = interval
        self.immediate = immediate
        self._task: Optional[ScheduledTask] = None

    @property
    def held(self) -> bool:
        return self._task is not None and self._task.active

    def start(self, action: Callable[[], None]) -> None:
        self.stop()
        if self.immediate:
            action()
        self._task = self.scheduler.call_every(self.interval, action)

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None


__all__ = ["HoldRepeater", "ScheduledTask", "Scheduler"]
