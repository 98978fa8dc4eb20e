"""Editing facade used by hosts (UIs, the CLI).

Wires image selection, the live preview and the export together around a
single ``MemeDocument``. Every setter replaces one field of one caption and
triggers a preview render.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .config import Config
from .core import ImageHandle, MemeDocument, TextLayer
from .rendering import ExportController, ExportResult, PreviewController
from .services.errors import DecodeError
from .services.images import ImageSelection, decode_image


logger = logging.getLogger(__name__)


def document_from_config(config: Config) -> MemeDocument:
    """Build an image-less document with the configured caption defaults."""
    top = TextLayer.from_dict(config.get('top_text') or {}, base=TextLayer(vertical_position=15))
    bottom = TextLayer.from_dict(config.get('bottom_text') or {}, base=TextLayer(vertical_position=85))
    return MemeDocument(None, top, bottom)


class MemeEditor:
    """One editing session: a document, its preview and its exporter."""

    def __init__(self, config: Optional[Config] = None,
                 on_error: Optional[Callable[[Exception], None]] = None,
                 decoder: Callable = decode_image,
                 executor=None,
                 dispatch: Optional[Callable] = None,
                 clock: Callable[[], float] = time.time):
        self.config = config or Config()
        self.on_error = on_error
        preview_cfg = self.config.get('preview') or {}
        font_path = self.config.get('font_path')

        self.preview = PreviewController(
            document_from_config(self.config),
            max_display=(preview_cfg.get('max_width', 800), preview_cfg.get('max_height', 400)),
            font_path=font_path,
            on_error=self._report,
        )
        self.exporter = ExportController(
            scale=self.config.get('export_scale', 2),
            font_path=font_path,
            clock=clock,
        )
        self.selection = ImageSelection(
            on_loaded=self._image_loaded,
            on_failed=self._image_failed,
            decoder=decoder,
            executor=executor,
            dispatch=dispatch,
        )

    @property
    def document(self) -> MemeDocument:
        return self.preview.document

    @property
    def image(self) -> Optional[ImageHandle]:
        return self.preview.document.image

    # Image source boundary

    def select_image(self, source) -> int:
        """Start loading ``source``; returns the selection token."""
        return self.selection.select(source)

    def apply_generated(self, source, top: Optional[str] = None, bottom: Optional[str] = None) -> int:
        """Load a generated image and fill in any captions that came with it."""
        with self.preview.coalesce():
            if top:
                self.set_content('top', top)
            if bottom:
                self.set_content('bottom', bottom)
            return self.select_image(source)

    def _image_loaded(self, handle: ImageHandle) -> None:
        self.preview.set_image(handle)

    def _image_failed(self, error: DecodeError) -> None:
        self.preview.set_image(None)
        self._report(error)

    def _report(self, error: Exception) -> None:
        logger.error("%s: %s", type(error).__name__, error)
        if self.on_error is not None:
            self.on_error(error)

    # Control boundary

    def update_layer(self, which: str, **changes) -> TextLayer:
        """Replace fields of one caption and re-render the preview."""
        layer = self.document.layer(which).replace(**changes)
        self.preview.set_layer(which, layer)
        return layer

    def set_content(self, which: str, content: str) -> TextLayer:
        return self.update_layer(which, content=content)

    def set_font_size(self, which: str, font_size: float) -> TextLayer:
        return self.update_layer(which, font_size=font_size)

    def set_color(self, which: str, color) -> TextLayer:
        return self.update_layer(which, color=color)

    def set_stroke_color(self, which: str, color) -> TextLayer:
        return self.update_layer(which, stroke_color=color)

    def set_stroke_width(self, which: str, width: float) -> TextLayer:
        return self.update_layer(which, stroke_width=width)

    def set_vertical_position(self, which: str, position: float) -> TextLayer:
        return self.update_layer(which, vertical_position=position)

    # Export output

    def export(self, scale: Optional[float] = None) -> ExportResult:
        """Render and encode the current document. Raises ``ExportError``."""
        return self.exporter.export(self.document, scale=scale)

    def save(self, output_dir: Optional[str] = None, scale: Optional[float] = None) -> str:
        """Export and write the PNG into ``output_dir``; returns the file path."""
        result = self.export(scale=scale)
        return self.exporter.save(result, output_dir or self.config.get('output_dir', './output'))
