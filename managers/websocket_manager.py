"""
WebSocket Manager

Manages WebSocket connections and pushes display frames to connected clients.
A client may follow every display or a single named one.
"""
import logging
import json
from typing import Any, Dict, Optional
from fastapi import WebSocket


class WebSocketManager:
    """Manages WebSocket connections and frame broadcasting"""

    def __init__(self):
        # connection -> followed display name (None = all displays)
        self.active_connections: Dict[WebSocket, Optional[str]] = {}

    async def connect(self, websocket: WebSocket, display: Optional[str] = None, initial_data: dict = None):
        """Accept and register a new WebSocket connection

        Args:
            websocket: The WebSocket connection to register
            display: Only forward frames of this display, None for all displays
            initial_data: Optional display state sent right after connecting
        """
        await websocket.accept()
        self.active_connections[websocket] = display
        logging.info(f"WebSocket connected (display={display or '*'}). "
                     f"Total connections: {len(self.active_connections)}")

        if initial_data:
            try:
                await websocket.send_text(json.dumps({"event": "displays", "data": initial_data}))
            except Exception as e:
                logging.warning(f"Failed to send initial display state: {e}")

    async def disconnect(self, websocket: WebSocket):
        """Unregister a WebSocket connection"""
        self.active_connections.pop(websocket, None)
        logging.info(f"WebSocket disconnected. Total connections: {len(self.active_connections)}")

    async def broadcast(self, event_type: str, data: Dict[str, Any]):
        """Send an event to every client following data['name'] (or all displays)"""
        if not self.active_connections:
            return

        display = data.get("name")
        message = json.dumps({"event": event_type, "data": data})

        dead_connections = []
        for websocket, followed in list(self.active_connections.items()):
            if followed is not None and followed != display:
                continue
            try:
                await websocket.send_text(message)
            except Exception as e:
                logging.warning(f"Failed to send {event_type} to WebSocket client: {e}")
                dead_connections.append(websocket)

        for websocket in dead_connections:
            self.active_connections.pop(websocket, None)

        if dead_connections:
            logging.info(f"Removed {len(dead_connections)} dead WebSocket connections")

    def get_connection_count(self) -> int:
        """Get the number of active WebSocket connections"""
        return len(self.active_connections)
