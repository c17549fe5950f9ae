"""
Shared route helper utilities.

Reduces boilerplate in the route modules for display lookup and config validation.
"""
import logging

from fastapi import HTTPException

from splitflap import CharacterSetError, ConfigError, DisplayConfig


def require_display(display_manager, name: str):
    """
    Look up a display by name.

    Args:
        display_manager: DisplayManager instance
        name: Display name

    Returns:
        The display's TransitionEngine

    Raises:
        HTTPException: If no display has that name
    """
    engine = display_manager.get_display(name)
    if engine is None:
        raise HTTPException(status_code=404, detail=f"Display '{name}' not found")
    return engine


def build_display_config(request) -> DisplayConfig:
    """
    Build a DisplayConfig from a DisplayCreateRequest.

    Raises:
        HTTPException: 400 if the configuration is invalid
    """
    kwargs = dict(
        min_width=request.min_width,
        pad_direction=request.pad_direction,
        step_interval_ms=request.step_interval_ms,
        initial_value=request.initial_value,
    )
    if request.alphabet is not None and request.character_set is not None:
        raise HTTPException(status_code=400, detail="Give either character_set or alphabet, not both")
    if request.alphabet is not None:
        kwargs["character_set"] = list(request.alphabet)
    elif request.character_set is not None:
        kwargs["character_set"] = request.character_set

    try:
        return DisplayConfig(**kwargs)
    except (CharacterSetError, ConfigError) as e:
        logging.warning(f"Rejected display configuration for '{request.name}': {e}")
        raise HTTPException(status_code=400, detail=str(e))
