"""
Display Manager

Owns every named splitflap display served by the application.
Each display is a TransitionEngine; its ticks are pushed to WebSocket clients.
"""
import asyncio
import logging
from typing import Dict, List, Optional, Set

from config import MAX_DISPLAYS
from splitflap import DisplayConfig, Scheduler, TransitionEngine
from splitflap.text import display_glyph


class DisplayManager:
    """Registry of named TransitionEngines"""

    def __init__(self, websocket_manager=None, scheduler: Optional[Scheduler] = None,
                 max_displays: int = MAX_DISPLAYS):
        self.websocket_manager = websocket_manager
        self.scheduler = scheduler
        self.max_displays = max_displays
        self.displays: Dict[str, TransitionEngine] = {}
        self._broadcast_tasks: Set[asyncio.Task] = set()

    async def create_display(self, name: str, config: Optional[DisplayConfig] = None) -> TransitionEngine:
        """Create (or replace) a display

        Args:
            name: Display name used in API paths
            config: Display configuration, defaults when None

        Returns:
            The new TransitionEngine

        Raises:
            ValueError: If the registry is full
        """
        if name not in self.displays and len(self.displays) >= self.max_displays:
            raise ValueError(f"Display limit reached ({self.max_displays})")

        await self.remove_display(name)

        config = config or DisplayConfig()
        # Listener attached before the first tick from initial_value
        engine = TransitionEngine(config, scheduler=self.scheduler,
                                  listeners=[lambda e, display_name=name: self._on_frame(display_name, e)])
        self.displays[name] = engine

        logging.info(f"Created display '{name}' ({len(config.character_set)} symbols, "
                     f"min_width={config.min_width}, step={config.step_interval_ms}ms)")
        return engine

    def get_display(self, name: str) -> Optional[TransitionEngine]:
        return self.displays.get(name)

    async def set_target(self, name: str, value: str) -> Optional[TransitionEngine]:
        """Set the target value of a display. Returns None if the display does not exist."""
        engine = self.displays.get(name)
        if engine is None:
            return None

        logging.info(f"Display '{name}' target -> {value!r}")
        engine.set_target(value)
        return engine

    async def remove_display(self, name: str) -> bool:
        engine = self.displays.pop(name, None)
        if engine is None:
            return False
        engine.destroy()
        logging.info(f"Removed display '{name}'")
        return True

    def list_displays(self) -> List[dict]:
        return [self.display_status(name) for name in self.displays]

    def display_status(self, name: str) -> dict:
        status = self.displays[name].snapshot()
        status["name"] = name
        return status

    def frame_glyphs(self, name: str) -> List[List[str]]:
        """Current frame with the renderer-facing blank glyph substituted"""
        return _glyph_frame(self.displays[name])

    def _on_frame(self, name: str, engine: TransitionEngine) -> None:
        if self.websocket_manager is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logging.debug(f"No running event loop, frame of '{name}' not broadcast")
            return

        data = {"name": name, "frame": _glyph_frame(engine), "advancing": engine.is_advancing}
        task = loop.create_task(self.websocket_manager.broadcast("frame", data))
        self._broadcast_tasks.add(task)
        task.add_done_callback(self._broadcast_tasks.discard)

    async def cleanup(self):
        """Destroy every display"""
        for name in list(self.displays):
            await self.remove_display(name)

        for task in list(self._broadcast_tasks):
            task.cancel()
        self._broadcast_tasks.clear()
        logging.info("All displays destroyed")


def _glyph_frame(engine: TransitionEngine) -> List[List[str]]:
    return [[display_glyph(prev), display_glyph(curr)] for prev, curr in engine.current_frame()]
