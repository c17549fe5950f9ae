"""
SplitflapRenderer - Composes a full display frame into a single image
Consumes the (previous, current) pairs produced by a TransitionEngine
"""

import io
from typing import List, Sequence, Tuple
from PIL import Image

from .digit import SplitflapCell

Frame = Sequence[Tuple[str, str]]


class SplitflapRenderer:
    """Renders a row of splitflap cells"""

    def __init__(self, cell_width: int = 60, cell_height: int = 80, font_size: int = 50,
                 spacing: int = 6, background_color: Tuple[int, int, int] = (20, 20, 30)):
        self.cell = SplitflapCell(cell_width, cell_height, font_size)
        self.spacing = spacing
        self.background_color = background_color

    def get_display_size(self, cell_count: int) -> Tuple[int, int]:
        """Total size for a row of cell_count cells, including outer spacing"""
        width = cell_count * self.cell.width + (cell_count + 1) * self.spacing
        height = self.cell.height + 2 * self.spacing
        return (max(width, 1), height)

    def render(self, frame: Frame) -> Image.Image:
        """Render every cell of frame left to right"""
        img = Image.new('RGB', self.get_display_size(len(frame)), self.background_color)

        current_x = self.spacing
        for previous_char, current_char in frame:
            img.paste(self.cell.render(previous_char, current_char), (current_x, self.spacing))
            current_x += self.cell.width + self.spacing

        return img

    def render_png(self, frame: Frame) -> bytes:
        buffer = io.BytesIO()
        # compress_level=1: fastest, frames are regenerated every tick
        self.render(frame).save(buffer, format="PNG", compress_level=1)
        return buffer.getvalue()

    @staticmethod
    def render_text(frame: Frame) -> List[str]:
        """Plain two-line text rendering: previous row, current row"""
        return [
            "".join(previous for previous, _ in frame),
            "".join(current for _, current in frame),
        ]
