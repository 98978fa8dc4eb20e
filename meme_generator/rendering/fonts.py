"""Font resolution for caption rendering.

Fonts are looked up once per (path, size) and cached, so repeated renders
use the very same font object and produce identical glyph layout.
"""
from __future__ import annotations

import functools
import logging
from typing import Optional

from PIL import ImageFont


logger = logging.getLogger(__name__)

# Bold sans-serif faces commonly used for captions, tried in order
CANDIDATE_FONTS = (
    "Impact.ttf",
    "impact.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/Impact.ttf",
    "/System/Library/Fonts/Supplemental/Impact.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "arialbd.ttf",
)


@functools.lru_cache(maxsize=64)
def load_font(size: int, font_path: Optional[str] = None) -> ImageFont.FreeTypeFont:
    """Return a TrueType font of ``size`` pixels.

    An explicit ``font_path`` that cannot be opened raises ``OSError``.
    Without one, the candidate list is tried and Pillow's bundled scalable
    default font is the last resort.
    """
    if font_path:
        return ImageFont.truetype(font_path, size=size)
    for candidate in CANDIDATE_FONTS:
        try:
            return ImageFont.truetype(candidate, size=size)
        except OSError:
            continue
    logger.debug("No caption font found, using Pillow default font")
    return ImageFont.load_default(size=size)
