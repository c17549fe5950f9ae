"""
TransitionEngine - Rolls a splitflap display from its current value to a target value
Advances every cell one character-set position per tick until all cells land on the goal.
"""

import asyncio
import logging
from typing import Callable, Iterable, List, Optional, Tuple

from .config import ConfigError, DisplayConfig
from .text import align_pair, sanitize
from .timer import AsyncioScheduler, Scheduler, TransitionTimer

FrameListener = Callable[["TransitionEngine"], None]


class TransitionEngine:
    """
    State machine behind one splitflap display.

    Idle: converged on the last goal, no timer pending.
    Advancing: exactly one TransitionTimer pending.
    """

    def __init__(self, config: Optional[DisplayConfig] = None, scheduler: Optional[Scheduler] = None,
                 listeners: Optional[Iterable[FrameListener]] = None):
        self.config = config or DisplayConfig()
        self.charset = self.config.character_set
        self.scheduler = scheduler or _default_scheduler()

        # Start blank and roll into the initial value
        blank = self.charset.fallback * len(sanitize(self.config.initial_value, self.charset))
        self.previous_value = blank
        self.current_value = blank
        self.goal: Optional[str] = None
        self.tick_count = 0

        self._timer: Optional[TransitionTimer] = None
        self._listeners: List[FrameListener] = list(listeners or [])
        self._destroyed = False

        self.set_target(self.config.initial_value)

    @property
    def is_advancing(self) -> bool:
        return self._timer is not None and self._timer.active

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def set_target(self, value: str) -> None:
        """Start rolling towards value; preempts any transition in flight"""
        if self._destroyed:
            logging.warning(f"Ignoring target {value!r} for a destroyed display")
            return

        goal = sanitize(value, self.charset)
        if self.is_advancing and goal == self.goal:
            logging.debug(f"Transition to {goal!r} already in flight")
            return

        self._cancel_timer()
        self.step(goal)

    def step(self, goal: str) -> None:
        """Advance every cell one position towards goal and schedule the next tick"""
        if self.is_advancing:
            return
        # Cells stuck on the fallback for an unrepresentable goal count as arrived
        settled = sanitize(goal, self.charset)
        if self.goal == goal and self.current_value == settled:
            return

        next_value = "".join(self._next_char(idx, want) for idx, want in enumerate(goal))

        timer = None
        if next_value != settled:
            try:
                timer = TransitionTimer(self.scheduler, self.config.step_interval,
                                        lambda: self._on_timer(goal)).start()
            except RuntimeError as e:
                logging.error(f"Could not schedule next tick towards {goal!r}: {e}")
                return

        self.previous_value = self.current_value
        self.current_value = next_value
        self.goal = goal
        self.tick_count += 1
        self._timer = timer
        if timer is None:
            logging.debug(f"Display converged on {goal!r} after {self.tick_count} ticks")

        self._notify()

    def _next_char(self, idx: int, want: str) -> str:
        cur = self.current_value[idx] if idx < len(self.current_value) else self.charset.fallback
        if cur == want:
            return cur
        if self.charset.index(cur) == 0 and want not in self.charset:
            # Unrepresentable goal: stay on the fallback instead of cycling forever
            return cur
        return self.charset.next_symbol(cur)

    def _on_timer(self, goal: str) -> None:
        self._timer = None
        self.step(goal)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def current_frame(self) -> List[Tuple[str, str]]:
        """Aligned (previous_char, current_char) pairs, one per cell"""
        return align_pair(self.previous_value, self.current_value, self.charset,
                          self.config.min_width, self.config.pad_direction)

    def subscribe(self, listener: FrameListener) -> Callable[[], None]:
        """Call listener after every tick. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logging.error(f"Frame listener failed: {e}")

    async def wait_idle(self) -> None:
        """Wait until the running transition has converged"""
        while self.is_advancing:
            await asyncio.sleep(self.config.step_interval)

    def snapshot(self) -> dict:
        return {
            "previous_value": self.previous_value,
            "current_value": self.current_value,
            "goal": self.goal,
            "advancing": self.is_advancing,
            "frame": [list(pair) for pair in self.current_frame()],
            "config": self.config.to_dict(),
        }

    def destroy(self) -> None:
        """Cancel any pending tick; the engine schedules nothing afterwards"""
        self._cancel_timer()
        self._listeners.clear()
        self._destroyed = True

    def __enter__(self) -> "TransitionEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()


def _default_scheduler() -> AsyncioScheduler:
    try:
        return AsyncioScheduler(asyncio.get_running_loop())
    except RuntimeError:
        raise ConfigError("No running event loop: create the engine inside a running loop or pass a scheduler") from None
