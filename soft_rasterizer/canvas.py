#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from .color import Color, BLACK

logger = logging.getLogger(__name__)


class Canvas:
    """
    True-color pixel surface the rasterizers draw into.

    Pixels live in a (height, width, 4) uint8 RGBA array whose row 0 is
    y = 0. Rendering treats y as growing upwards, so callers flip the
    canvas once before export to get a top-down image.
    """
    __slots__ = ['width', 'height', 'background', 'pixels']

    def __init__(self, width: int, height: int, background: Color = BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width, self.height = width, height
        self.background = Color(*background)
        self.pixels = np.empty((height, width, 4), dtype=np.uint8)
        self.pixels[:, :] = self.background

    def set_pixel(self, x: int, y: int, color: Color):
        if x < 0 or x >= self.width or y < 0 or y >= self.height: return
        self.pixels[y, x] = color

    def get_pixel(self, x: int, y: int) -> Color:
        return Color(*(int(c) for c in self.pixels[y, x]))

    def count_set(self, background: Color = None) -> int:
        """Number of pixels that differ from the background color."""
        bg = np.asarray(background if background is not None else self.background,
                        dtype=np.uint8)
        return int(np.any(self.pixels != bg, axis=2).sum())

    def flip_vertically(self):
        """Reverse row order in place."""
        self.pixels = np.ascontiguousarray(self.pixels[::-1])

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.pixels[:, :, :3]))

    def write_to_file(self, path, rle: bool = True) -> Path:
        """
        Save the canvas as an RGB image. '.tga' files are written as
        Truevision TGA, run-length encoded when `rle` is set; any other
        extension is handed to Pillow's format detection.
        """
        path = Path(path)
        image = self.to_image()
        if path.suffix.lower() == '.tga':
            params = {'format': 'TGA'}
            if rle:
                params['compression'] = 'tga_rle'
            image.save(path, **params)
        else:
            image.save(path)
        logger.info("Wrote %dx%d image to %s", self.width, self.height, path)
        return path
