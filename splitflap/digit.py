"""
SplitflapCell - Still rendering of a single splitflap cell
Draws the current character on the upper flap and the previous character on the lower flap
"""

import logging
from typing import Tuple
from PIL import Image, ImageDraw, ImageFont

from .text import display_glyph

FONT_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"


def load_font(font_size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype(FONT_PATH, font_size)
    except OSError:
        logging.debug(f"Font {FONT_PATH} not available, using default font")
        return ImageFont.load_default(size=font_size)


class SplitflapCell:
    """Renders one (previous, current) character pair"""

    def __init__(self, width: int, height: int, font_size: int):
        self.width = width
        self.height = height
        self.font_size = font_size

        # Colors
        self.bg_color = (45, 45, 55)        # Dark background
        self.text_color = (255, 255, 255)   # White text
        self.shadow_color = (20, 20, 25)    # Darker shadow
        self.highlight_color = (70, 70, 80)  # Light highlight

        self.font = load_font(font_size)

    def _draw_char(self, img: Image.Image, char: str) -> Image.Image:
        """Draw char centered on a full-size flap"""
        flap = img.copy()
        draw = ImageDraw.Draw(flap)

        bbox = draw.textbbox((0, 0), char, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        text_x = (self.width - text_width) // 2 - bbox[0]
        text_y = (self.height - text_height) // 2 - bbox[1]

        draw.text((text_x + 1, text_y + 1), char, fill=self.shadow_color, font=self.font)
        draw.text((text_x, text_y), char, fill=self.text_color, font=self.font)
        return flap

    def _background(self) -> Image.Image:
        img = Image.new('RGB', (self.width, self.height), self.bg_color)
        draw = ImageDraw.Draw(img)
        for y in range(self.height):
            intensity = 45 + int(10 * (y / self.height))  # Subtle gradient
            draw.line([(0, y), (self.width, y)], fill=(intensity, intensity, intensity + 10))
        return img

    def render(self, previous_char: str, current_char: str) -> Image.Image:
        """Render the cell mid-flip: new character on top, old character below"""
        background = self._background()
        top = self._draw_char(background, display_glyph(current_char))
        bottom = self._draw_char(background, display_glyph(previous_char))

        center_y = self.height // 2
        img = background
        img.paste(top.crop((0, 0, self.width, center_y)), (0, 0))
        img.paste(bottom.crop((0, center_y, self.width, self.height)), (0, center_y))

        draw = ImageDraw.Draw(img)
        # Split line
        draw.line([(0, center_y), (self.width, center_y)], fill=self.shadow_color, width=2)
        # Border
        draw.rectangle([0, 0, self.width - 1, self.height - 1], outline=self.shadow_color, width=2)
        draw.rectangle([2, 2, self.width - 3, self.height - 3], outline=self.highlight_color, width=1)
        return img

    def get_size(self) -> Tuple[int, int]:
        return (self.width, self.height)
