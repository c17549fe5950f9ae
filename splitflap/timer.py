"""
TransitionTimer - Single-owner cancellable handle for the next display tick
"""

import asyncio
import logging
from typing import Any, Callable, Optional, Protocol


class Scheduler(Protocol):
    """Anything with an asyncio-style call_later (an event loop qualifies)"""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Any:
        ...


class AsyncioScheduler:
    """Schedules callbacks on an asyncio event loop, resolved when first needed"""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback, *args)


class TransitionTimer:
    """
    One pending tick.

    The timer fires at most once. After cancel() the callback never runs, even
    if the underlying scheduler delivers the call anyway.
    """

    def __init__(self, scheduler: Scheduler, delay: float, callback: Callable[[], None]):
        self._scheduler = scheduler
        self._delay = delay
        self._callback = callback
        self._handle = None
        self._started = False
        self._cancelled = False
        self._fired = False

    @property
    def active(self) -> bool:
        """True while scheduled and neither fired nor cancelled"""
        return self._started and not self._cancelled and not self._fired

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> "TransitionTimer":
        if self._started:
            raise RuntimeError("TransitionTimer can only be started once")
        self._started = True
        self._handle = self._scheduler.call_later(self._delay, self._fire)
        return self

    def cancel(self) -> None:
        if self._cancelled or self._fired:
            return
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        if not self.active:
            logging.debug("Ignoring late tick for a cancelled timer")
            return
        self._fired = True
        self._handle = None
        self._callback()

    def __enter__(self) -> "TransitionTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()
