"""Shared fixtures: a manually driven scheduler for deterministic ticks."""
from typing import Any, Callable, List, Tuple

import pytest


class ManualHandle:
    def __init__(self, when: float, callback: Callable[..., Any], args: Tuple[Any, ...]):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """call_later-compatible scheduler whose clock only moves when told to."""

    def __init__(self) -> None:
        self.time = 0.0
        self.handles: List[ManualHandle] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ManualHandle:
        handle = ManualHandle(self.time + delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> List[ManualHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def fire(self, handle: ManualHandle) -> None:
        """Deliver a callback unconditionally, even if it was cancelled."""
        handle.fired = True
        handle.callback(*handle.args)

    def run_next(self) -> bool:
        pending = self.pending
        if not pending:
            return False
        handle = min(pending, key=lambda h: h.when)
        self.time = max(self.time, handle.when)
        self.fire(handle)
        return True

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        ticks = 0
        while self.run_next():
            ticks += 1
            if ticks >= max_ticks:
                raise AssertionError("scheduler did not go idle")
        return ticks


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
