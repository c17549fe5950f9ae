"""
Splitflap Service Configuration

Central configuration file for service-level constants and settings.
Per-display settings live in splitflap.config.DisplayConfig.
"""
import os

# Server Configuration
DEFAULT_PORT = int(os.getenv("SPLITFLAP_PORT", "8000"))
PRODUCTION_PORT = 80
LOG_LEVEL = os.getenv("SPLITFLAP_LOG_LEVEL", "INFO").upper()

# Display registry
DEFAULT_DISPLAY_NAME = os.getenv("SPLITFLAP_DEFAULT_DISPLAY", "main")
MAX_DISPLAYS = int(os.getenv("SPLITFLAP_MAX_DISPLAYS", "16"))

# Renderer Configuration (pixels)
CELL_WIDTH = int(os.getenv("SPLITFLAP_CELL_WIDTH", "60"))
CELL_HEIGHT = int(os.getenv("SPLITFLAP_CELL_HEIGHT", "80"))
CELL_FONT_SIZE = int(os.getenv("SPLITFLAP_CELL_FONT_SIZE", "50"))
CELL_SPACING = 6
BACKGROUND_COLOR = (20, 20, 30)
