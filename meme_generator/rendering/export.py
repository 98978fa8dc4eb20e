"""Export controller: one-shot high-resolution render encoded as PNG."""
from __future__ import annotations

import logging
import math
import os
import time
from typing import Callable, NamedTuple, Optional

from meme_generator.core import MemeDocument
from meme_generator.services.errors import ExportError, RenderError
from .compositor import render
from .surface import Surface


logger = logging.getLogger(__name__)

DEFAULT_EXPORT_SCALE = 2


class ExportResult(NamedTuple):
    filename: str
    data: bytes
    width: int
    height: int


def export_filename(timestamp: float) -> str:
    """Deterministic download name, e.g. ``meme-1700000000000.png``."""
    return f"meme-{int(timestamp * 1000)}.png"


class ExportController:
    """Render the document at ``scale`` times its native size and encode it.

    Every call allocates its own surface; nothing is cached between exports
    and the preview surface is never reused.
    """

    def __init__(self, scale: float = DEFAULT_EXPORT_SCALE, font_path: Optional[str] = None,
                 clock: Callable[[], float] = time.time):
        self.scale = scale
        self.font_path = font_path
        self.clock = clock

    def export(self, document: MemeDocument, scale: Optional[float] = None) -> ExportResult:
        """Return the encoded composite. Raises ``ExportError`` on any failure."""
        image = document.image
        if image is None:
            raise ExportError("No image loaded")
        k = self.scale if scale is None else scale
        if not (isinstance(k, (int, float)) and math.isfinite(k) and k > 0):
            raise ExportError(f"Export scale must be a positive finite number, got {k!r}")

        width, height = int(round(image.width * k)), int(round(image.height * k))
        logger.info("Exporting %dx%d composite (scale %s)", width, height, k)
        try:
            surface = Surface(width, height)
            render(surface, image, document.top, document.bottom, font_path=self.font_path)
        except RenderError as e:
            logger.error("Export render failed: %s", e)
            raise ExportError(f"Render failed: {e}")
        except (MemoryError, OverflowError, ValueError) as e:
            logger.error("Export surface too large: %dx%d", width, height)
            raise ExportError(f"Surface {width}x{height} too large: {e}")

        try:
            data = surface.encode_png()
        except (OSError, ValueError) as e:
            logger.error("PNG encoding failed: %s", e)
            raise ExportError(f"Encoding failed: {e}")

        return ExportResult(export_filename(self.clock()), data, width, height)

    def save(self, result: ExportResult, output_dir: str) -> str:
        """Write ``result`` into ``output_dir`` and return the file path."""
        try:
            os.makedirs(output_dir, exist_ok=True)
            path = os.path.join(output_dir, result.filename)
            with open(path, 'wb') as f:
                f.write(result.data)
        except OSError as e:
            logger.error("Failed to save %s: %s", result.filename, e)
            raise ExportError(f"Cannot save export: {e}")
        logger.info("Export saved to %s (%d bytes)", path, len(result.data))
        return path
