"""Rendering layer.

The compositor is a pure drawing routine; the preview and export
controllers call it at display and export resolution respectively.
"""

__all__ = [
    "Surface",
    "render",
    "load_font",
    "PreviewController",
    "ExportController",
    "ExportResult",
]

from .surface import Surface
from .fonts import load_font
from .compositor import render
from .preview import PreviewController
from .export import ExportController, ExportResult
