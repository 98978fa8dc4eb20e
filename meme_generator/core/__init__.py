"""
Core model and domain helpers for the Meme Generator.

This package hosts pure, side-effect-free logic (caption model, colors,
layout math) shared by the preview, the export and the CLI.
"""

__all__ = [
    "TextLayer",
    "default_top_layer",
    "default_bottom_layer",
    "parse_color",
    "CaptionPlacement",
    "caption_placement",
    "resolution_scale",
    "ImageHandle",
    "MemeDocument",
    "LAYER_NAMES",
]

from .text_layer import TextLayer, default_top_layer, default_bottom_layer
from .colors import parse_color
from .layout import CaptionPlacement, caption_placement, resolution_scale
from .document import ImageHandle, MemeDocument, LAYER_NAMES
