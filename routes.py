"""
Unified Routes Module

Consolidates all API route setup functions from the api/ directory.
Provides setup functions for each route group that can be imported by main.py.
"""
from api.routes_display import setup_display_routes, setup_websocket_routes

__all__ = ['setup_display_routes', 'setup_websocket_routes']
