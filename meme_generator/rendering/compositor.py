"""Compositor: draws an image and its two captions onto a pre-sized surface.

The output depends only on the arguments, so the preview and the export can
call the same function at different resolutions and get the same composite.
"""
from __future__ import annotations

import logging
from typing import Optional

from PIL import ImageDraw

from meme_generator.core import ImageHandle, TextLayer, caption_placement, parse_color
from meme_generator.services.errors import RenderError
from .fonts import load_font
from .surface import Surface


logger = logging.getLogger(__name__)


def _caption_text(layer: TextLayer) -> str:
    # Single line: line breaks render as spaces, nothing is wrapped
    return ' '.join(layer.content.splitlines())


def _draw_caption(draw, layer: TextLayer, surface: Surface, reference_height: int,
                  font_path: Optional[str]) -> None:
    placement = caption_placement(layer, surface.width, surface.height, reference_height)
    try:
        font = load_font(placement.font_px, font_path)
    except OSError as e:
        raise RenderError(f"Cannot load font {font_path!r}: {e}")

    text = _caption_text(layer)
    position = (placement.x, placement.y)
    if placement.stroke_px > 0:
        stroke = parse_color(layer.stroke_color)
        draw.text(position, text, font=font, fill=stroke, anchor='ms',
                  stroke_width=placement.stroke_px, stroke_fill=stroke)
    draw.text(position, text, font=font, fill=parse_color(layer.color), anchor='ms')


def render(surface: Surface, image: ImageHandle, top_text: TextLayer, bottom_text: TextLayer,
           font_path: Optional[str] = None) -> None:
    """Draw ``image`` and the captions onto ``surface``.

    The image is stretched to the surface size; callers pick a surface with
    the image's aspect ratio. Captions are scaled by ``surface.height /
    image.height`` and may overflow the surface horizontally.

    Raises ``RenderError`` if the image has no pixels or the surface has no
    positive area.
    """
    if image is None or image.width <= 0 or image.height <= 0:
        raise RenderError("Image has invalid dimensions")
    if surface is None or surface.width <= 0 or surface.height <= 0:
        raise RenderError("Surface has no positive area")

    logger.debug("Rendering %r onto %r", image, surface)
    surface.clear()
    surface.image.paste(image.resized(surface.width, surface.height), (0, 0))

    draw = ImageDraw.Draw(surface.image)
    for layer in (top_text, bottom_text):
        if layer.is_empty:
            continue
        _draw_caption(draw, layer, surface, image.height, font_path)
