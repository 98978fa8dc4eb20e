"""Pure caption layout math.

Converts a ``TextLayer`` into absolute drawing parameters for a surface of
a given size. Keeping this free of drawing calls lets the preview, the
export and the CLI dry-run agree on exactly the same numbers.
"""
from __future__ import annotations

from typing import NamedTuple

from .text_layer import TextLayer


class CaptionPlacement(NamedTuple):
    """Where and how large a caption is drawn on a specific surface."""

    x: float
    y: float
    font_px: int
    stroke_px: float


def resolution_scale(surface_height: int, reference_height: int) -> float:
    """Ratio between the output height and the height captions were authored at."""
    if reference_height <= 0:
        raise ValueError('Reference height must be positive')
    return surface_height / reference_height


def caption_placement(layer: TextLayer, surface_width: int, surface_height: int,
                      reference_height: int) -> CaptionPlacement:
    """Compute the anchor point, font size and stroke extent for ``layer``.

    - x is the horizontal centre of the surface
    - y is the baseline, at ``vertical_position`` percent of the height
    - the font size scales with ``surface_height / reference_height``
    - the stroke is centred on the glyph outline, so only half of the
      scaled width extends outwards (0 means no outline); the extent is
      kept fractional so it stays proportional at every resolution
    """
    scale = resolution_scale(surface_height, reference_height)
    x = surface_width / 2
    y = layer.vertical_position / 100 * surface_height
    font_px = max(1, int(round(layer.font_size * scale)))
    stroke_px = 0.0
    if layer.stroke_width > 0:
        stroke_px = layer.stroke_width * scale / 2
    return CaptionPlacement(x, y, font_px, stroke_px)
