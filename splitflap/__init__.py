"""
Splitflap Display System
Transition engine, text rules and still rendering for split-flap displays
"""

from .charset import CharacterSet, CharacterSetError, NUMERIC, ALPHA, ALPHANUMERIC, PUNCTUATION, PRESETS, get_preset
from .text import PadDirection, sanitize, align, align_pair, display_glyph, BLANK_GLYPH
from .config import DisplayConfig, ConfigError
from .timer import AsyncioScheduler, Scheduler, TransitionTimer
from .engine import TransitionEngine
from .digit import SplitflapCell
from .renderer import SplitflapRenderer

__all__ = [
    'CharacterSet', 'CharacterSetError', 'NUMERIC', 'ALPHA', 'ALPHANUMERIC', 'PUNCTUATION', 'PRESETS', 'get_preset',
    'PadDirection', 'sanitize', 'align', 'align_pair', 'display_glyph', 'BLANK_GLYPH',
    'DisplayConfig', 'ConfigError',
    'AsyncioScheduler', 'Scheduler', 'TransitionTimer',
    'TransitionEngine',
    'SplitflapCell', 'SplitflapRenderer',
]
