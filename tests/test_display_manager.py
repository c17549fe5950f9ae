"""Tests for managers.display_manager: DisplayManager."""
import asyncio

import pytest

from managers.display_manager import DisplayManager
from splitflap import ALPHA, DisplayConfig


class RecordingWebSocketManager:
    def __init__(self) -> None:
        self.events = []

    async def broadcast(self, event_type, data):
        self.events.append((event_type, data))


@pytest.fixture
def ws() -> RecordingWebSocketManager:
    return RecordingWebSocketManager()


@pytest.fixture
def manager(scheduler, ws) -> DisplayManager:
    return DisplayManager(ws, scheduler=scheduler, max_displays=2)


@pytest.mark.asyncio
async def test_create_and_get(manager) -> None:
    engine = await manager.create_display("gate", DisplayConfig(min_width=3))
    assert manager.get_display("gate") is engine
    assert manager.get_display("missing") is None


@pytest.mark.asyncio
async def test_create_replaces_and_destroys_existing(manager, scheduler) -> None:
    old = await manager.create_display("gate")
    await manager.set_target("gate", "9")
    assert scheduler.pending

    new = await manager.create_display("gate")
    assert old.destroyed
    assert new is not old
    assert scheduler.pending == []


@pytest.mark.asyncio
async def test_display_limit(manager) -> None:
    await manager.create_display("a")
    await manager.create_display("b")
    with pytest.raises(ValueError, match="limit"):
        await manager.create_display("c")
    # replacing an existing name is still allowed
    await manager.create_display("a")


@pytest.mark.asyncio
async def test_set_target_unknown_display(manager) -> None:
    assert await manager.set_target("nope", "1") is None


@pytest.mark.asyncio
async def test_set_target_rolls(manager, scheduler) -> None:
    await manager.create_display("gate")
    await manager.set_target("gate", "42")
    scheduler.run_until_idle()
    status = manager.display_status("gate")
    assert status["name"] == "gate"
    assert status["current_value"] == "42"
    assert status["advancing"] is False


@pytest.mark.asyncio
async def test_frame_glyphs_substitute_spaces(manager) -> None:
    await manager.create_display("board", DisplayConfig(character_set=ALPHA, min_width=2))
    await manager.set_target("board", "A")
    blank = "\u2007"
    assert manager.frame_glyphs("board") == [[blank, blank], [blank, "A"]]


@pytest.mark.asyncio
async def test_ticks_are_broadcast(manager, ws) -> None:
    await manager.create_display("gate")
    await manager.set_target("gate", "2")
    await asyncio.sleep(0)
    assert ws.events
    event, data = ws.events[-1]
    assert event == "frame"
    assert data["name"] == "gate"
    assert data["frame"][-1] == ["0", "1"]


@pytest.mark.asyncio
async def test_initial_value_first_tick_is_broadcast(manager, ws) -> None:
    await manager.create_display("gate", DisplayConfig(initial_value="42"))
    await asyncio.sleep(0)
    assert [event for event, _ in ws.events] == ["frame"]
    data = ws.events[0][1]
    assert data["name"] == "gate"
    assert data["frame"][-2:] == [["0", "1"], ["0", "1"]]


@pytest.mark.asyncio
async def test_remove_and_cleanup(manager, scheduler) -> None:
    a = await manager.create_display("a")
    b = await manager.create_display("b")
    await manager.set_target("a", "7")

    assert await manager.remove_display("a") is True
    assert await manager.remove_display("a") is False
    assert a.destroyed

    await manager.cleanup()
    assert b.destroyed
    assert manager.list_displays() == []
    assert scheduler.pending == []
