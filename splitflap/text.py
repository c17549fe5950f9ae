"""
Text helpers for splitflap displays
Sanitizes arbitrary input against a character set and pads values to a fixed cell width.
"""

from enum import Enum
from typing import List, Optional, Tuple, Union

from .charset import CharacterSet

# Figure space: keeps blank cells from collapsing in a rendered row
BLANK_GLYPH = "\u2007"


class PadDirection(str, Enum):
    """Side on which padding is added"""

    LEFT = "left"    # pad before, value appears right-aligned
    RIGHT = "right"  # pad after

    @classmethod
    def parse(cls, value: Union["PadDirection", str, None]) -> "PadDirection":
        """Accept an enum member or a string; anything but 'right' pads left"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == cls.RIGHT.value:
            return cls.RIGHT
        return cls.LEFT


def sanitize(value: str, charset: CharacterSet) -> str:
    """Replace every character outside the set with the fallback symbol"""
    fallback = charset.fallback
    return "".join(char if char in charset else fallback for char in value)


def align(value: str, charset: CharacterSet, min_width: Optional[int],
          direction: Union[PadDirection, str] = PadDirection.LEFT) -> List[str]:
    """
    Pad value with fallback symbols up to min_width.

    Args:
        value: Sanitized display value
        charset: Character set providing the fallback symbol
        min_width: Minimum number of cells; 0 or None disables padding
        direction: LEFT pads before the value, RIGHT pads after it

    Returns:
        List of per-cell characters
    """
    chars = list(value)
    if not min_width or len(chars) >= min_width:
        return chars

    fill = [charset.fallback] * (min_width - len(chars))
    if PadDirection.parse(direction) is PadDirection.RIGHT:
        return chars + fill
    return fill + chars


def align_pair(previous: str, current: str, charset: CharacterSet, min_width: Optional[int],
               direction: Union[PadDirection, str] = PadDirection.LEFT) -> List[Tuple[str, str]]:
    """Align both frames to one shared width and pair them cell by cell"""
    width = max(min_width or 0, len(previous), len(current))
    return list(zip(
        align(previous, charset, width, direction),
        align(current, charset, width, direction),
    ))


def display_glyph(char: str) -> str:
    """Renderer-facing glyph for a cell character"""
    return BLANK_GLYPH if char == " " else char
