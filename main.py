"""
Splitflap Display Service

This is the entry point for the splitflap display application.
It wires together the display manager, the renderer and the API routes.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

# Managers
from managers.display_manager import DisplayManager
from managers.websocket_manager import WebSocketManager

# API routes
from routes import setup_display_routes, setup_websocket_routes

# Splitflap
from splitflap import CharacterSetError, ConfigError, DisplayConfig, Scheduler, SplitflapRenderer

# Config
from config import (
    BACKGROUND_COLOR,
    CELL_FONT_SIZE,
    CELL_HEIGHT,
    CELL_SPACING,
    CELL_WIDTH,
    DEFAULT_DISPLAY_NAME,
    DEFAULT_PORT,
    LOG_LEVEL,
    PRODUCTION_PORT,
)

# Logging setup
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def create_app(scheduler: Optional[Scheduler] = None,
               default_config: Optional[DisplayConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        scheduler: Tick scheduler for every display, None = the running asyncio loop
        default_config: Config of the default display, None = read from the environment
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan management for FastAPI application.
        Handles startup and shutdown tasks.
        """
        # STARTUP
        logging.info("Starting splitflap display service...")

        try:
            websocket_manager = WebSocketManager()
            display_manager = DisplayManager(websocket_manager, scheduler=scheduler)
            renderer = SplitflapRenderer(CELL_WIDTH, CELL_HEIGHT, CELL_FONT_SIZE,
                                         CELL_SPACING, BACKGROUND_COLOR)

            config = default_config or DisplayConfig.from_env()
            logging.info(f"Creating default display '{DEFAULT_DISPLAY_NAME}'...")
            await display_manager.create_display(DEFAULT_DISPLAY_NAME, config)

            logging.info("Setting up API routes...")
            app.include_router(setup_display_routes(display_manager, renderer))
            app.include_router(setup_websocket_routes(websocket_manager, display_manager))

            app.state.display_manager = display_manager
            app.state.websocket_manager = websocket_manager

            logging.info("Splitflap display service started successfully!")

        except (CharacterSetError, ConfigError) as e:
            logging.error(f"Invalid display configuration: {e}")
            raise
        except Exception as e:
            logging.error(f"Failed to start splitflap display service: {e}")
            import traceback
            logging.error(f"Traceback: {traceback.format_exc()}")
            raise

        yield  # Application is running

        # SHUTDOWN
        logging.info("Shutting down splitflap display service...")

        try:
            await display_manager.cleanup()
            logging.info("Splitflap display service shut down successfully!")
        except Exception as e:
            logging.error(f"Error during shutdown: {e}")

    return FastAPI(
        title="Splitflap Display",
        description="Split-flap display transition engine with HTTP and WebSocket access",
        version="1.0.0",
        lifespan=lifespan
    )


app = create_app()


if __name__ == "__main__":
    import argparse
    import uvicorn

    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Splitflap display service')
    parser.add_argument('--production', action='store_true',
                        help='Run in production mode (port 80)')
    parser.add_argument('--port', type=int, default=None,
                        help='Custom port (overrides --production)')
    args = parser.parse_args()

    # Determine port
    if args.port:
        port = args.port
    elif args.production:
        port = PRODUCTION_PORT
    else:
        port = DEFAULT_PORT

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=port,
        log_level="info",
        reload=False
    )
