"""Tests for managers.websocket_manager: WebSocketManager."""
import json

import pytest

from managers.websocket_manager import WebSocketManager


class FakeWebSocket:
    def __init__(self, fail: bool = False) -> None:
        self.accepted = False
        self.sent = []
        self.fail = fail

    async def accept(self) -> None:
        self.accepted = True

    async def send_text(self, text: str) -> None:
        if self.fail:
            raise ConnectionError("gone")
        self.sent.append(json.loads(text))


@pytest.mark.asyncio
async def test_connect_sends_initial_state() -> None:
    manager = WebSocketManager()
    ws = FakeWebSocket()
    await manager.connect(ws, initial_data={"displays": []})
    assert ws.accepted
    assert ws.sent == [{"event": "displays", "data": {"displays": []}}]
    assert manager.get_connection_count() == 1


@pytest.mark.asyncio
async def test_broadcast_respects_display_filter() -> None:
    manager = WebSocketManager()
    everything, gate, other = FakeWebSocket(), FakeWebSocket(), FakeWebSocket()
    await manager.connect(everything)
    await manager.connect(gate, display="gate")
    await manager.connect(other, display="other")

    await manager.broadcast("frame", {"name": "gate", "frame": [["0", "1"]]})

    assert len(everything.sent) == 1
    assert gate.sent[0]["data"]["name"] == "gate"
    assert other.sent == []


@pytest.mark.asyncio
async def test_dead_connections_removed() -> None:
    manager = WebSocketManager()
    await manager.connect(FakeWebSocket(fail=True))
    alive = FakeWebSocket()
    await manager.connect(alive)

    await manager.broadcast("frame", {"name": "main"})

    assert manager.get_connection_count() == 1
    assert alive.sent[0]["event"] == "frame"


@pytest.mark.asyncio
async def test_disconnect() -> None:
    manager = WebSocketManager()
    ws = FakeWebSocket()
    await manager.connect(ws)
    await manager.disconnect(ws)
    await manager.disconnect(ws)
    assert manager.get_connection_count() == 0
