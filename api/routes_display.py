"""
Display Routes

Handles splitflap display creation, target updates and frame output.
"""
import logging
from typing import TYPE_CHECKING, Optional

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.responses import Response

from models.request_models import DisplayCreateRequest, TargetRequest
from utils.route_helpers import build_display_config, require_display

if TYPE_CHECKING:
    from managers.display_manager import DisplayManager
    from managers.websocket_manager import WebSocketManager
    from splitflap import SplitflapRenderer


def setup_display_routes(display_manager: 'DisplayManager', renderer: 'SplitflapRenderer') -> APIRouter:
    """
    Setup display routes with dependency injection

    Args:
        display_manager: DisplayManager instance owning the displays
        renderer: SplitflapRenderer used for PNG frames

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    @router.get("/displays")
    async def list_displays():
        """List every display with its current state"""
        return {"displays": display_manager.list_displays()}

    @router.post("/displays")
    async def create_display(request: DisplayCreateRequest):
        """Create a display, replacing any display with the same name"""
        config = build_display_config(request)
        try:
            await display_manager.create_display(request.name, config)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return display_manager.display_status(request.name)

    @router.get("/displays/{name}")
    async def get_display(name: str):
        """Get display state"""
        require_display(display_manager, name)
        return display_manager.display_status(name)

    @router.post("/displays/{name}/target")
    async def set_target(name: str, request: TargetRequest):
        """Roll a display towards a new value"""
        require_display(display_manager, name)
        await display_manager.set_target(name, request.value)
        return display_manager.display_status(name)

    @router.get("/displays/{name}/frame")
    async def get_frame(name: str):
        """Current (previous, current) pairs as shown by the cell renderer"""
        engine = require_display(display_manager, name)
        return {
            "name": name,
            "frame": display_manager.frame_glyphs(name),
            "advancing": engine.is_advancing,
        }

    @router.get("/displays/{name}/frame.png")
    async def get_frame_png(name: str):
        """Current frame rendered as a PNG image"""
        engine = require_display(display_manager, name)
        try:
            png = renderer.render_png(engine.current_frame())
        except Exception as e:
            logging.error(f"Failed to render frame for display '{name}': {e}")
            raise HTTPException(status_code=500, detail=f"Failed to render frame: {str(e)}")
        return Response(content=png, media_type="image/png")

    @router.delete("/displays/{name}")
    async def delete_display(name: str):
        """Destroy a display and cancel its pending transition"""
        if not await display_manager.remove_display(name):
            raise HTTPException(status_code=404, detail=f"Display '{name}' not found")
        return {"message": f"Display '{name}' removed"}

    return router


def setup_websocket_routes(websocket_manager: 'WebSocketManager', display_manager: 'DisplayManager') -> APIRouter:
    """
    Setup the frame event WebSocket

    Args:
        websocket_manager: WebSocketManager broadcasting frame events
        display_manager: DisplayManager providing the initial state

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    @router.websocket("/ws")
    async def frames_websocket(websocket: WebSocket, display: Optional[str] = None):
        """Frame events for every display, or only ?display=<name>"""
        displays = display_manager.list_displays()
        if display is not None:
            displays = [status for status in displays if status["name"] == display]
        await websocket_manager.connect(websocket, display=display, initial_data={"displays": displays})
        try:
            while True:
                # Clients only listen; incoming messages are ignored
                await websocket.receive_text()
        except WebSocketDisconnect:
            pass
        finally:
            await websocket_manager.disconnect(websocket)

    return router
