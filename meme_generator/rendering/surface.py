"""Drawing surface: an explicitly sized RGBA pixel buffer.

Both the preview and the export draw into their own ``Surface``; the
compositor never touches ambient drawing state.
"""
from __future__ import annotations

import io

import numpy as np
from PIL import Image

from meme_generator.services.errors import RenderError


TRANSPARENT = (0, 0, 0, 0)


class Surface:
    """RGBA pixel buffer of a fixed, positive size."""

    def __init__(self, width: int, height: int):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise RenderError(f"Surface must have a positive area, got {width}x{height}")
        self._image = Image.new('RGBA', (width, height), TRANSPARENT)

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self):
        return self._image.size

    @property
    def image(self) -> Image.Image:
        """The underlying Pillow image (drawn into by the compositor)."""
        return self._image

    def clear(self) -> None:
        self._image.paste(TRANSPARENT, (0, 0, self.width, self.height))

    def as_array(self) -> np.ndarray:
        """Return a copy of the pixels as a ``(height, width, 4)`` uint8 array."""
        return np.array(self._image)

    def encode_png(self) -> bytes:
        """Encode the pixels as a lossless PNG byte buffer."""
        buffer = io.BytesIO()
        self._image.save(buffer, format='PNG')
        return buffer.getvalue()

    def __repr__(self):
        return f"Surface({self.width}x{self.height})"
