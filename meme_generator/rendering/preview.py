"""Preview controller: keeps an on-screen surface in sync with the document."""
from __future__ import annotations

import contextlib
import logging
from typing import Callable, Optional, Tuple

from meme_generator.core import ImageHandle, MemeDocument, TextLayer
from meme_generator.services.errors import RenderError
from .compositor import render
from .surface import Surface


logger = logging.getLogger(__name__)

# Same cap as the original on-screen preview (max-height: 400px)
DEFAULT_MAX_DISPLAY = (800, 400)


class PreviewController:
    """Re-render the preview whenever the image or a caption changes.

    The surface always has the image's native pixel size; ``display_size``
    tells the host how large to show it. Inside ``coalesce()`` any number of
    changes produce a single render when the block exits.
    """

    def __init__(self, document: Optional[MemeDocument] = None,
                 max_display: Tuple[int, int] = DEFAULT_MAX_DISPLAY,
                 font_path: Optional[str] = None,
                 on_render: Optional[Callable[[Surface], None]] = None,
                 on_error: Optional[Callable[[Exception], None]] = None):
        self.document = document if document is not None else MemeDocument()
        self.max_display = max_display
        self.font_path = font_path
        self.on_render = on_render
        self.on_error = on_error
        self.surface: Optional[Surface] = None
        self.error: Optional[RenderError] = None
        self.render_count = 0
        self._batch_depth = 0
        self._dirty = False

    @property
    def available(self) -> bool:
        """True when the surface holds a render of the current document."""
        return self.surface is not None and self.error is None

    def set_document(self, document: MemeDocument) -> None:
        self.document = document
        self._changed()

    def set_image(self, image: Optional[ImageHandle]) -> None:
        self.set_document(self.document.with_image(image))

    def set_layer(self, which: str, layer: TextLayer) -> None:
        self.set_document(self.document.with_layer(which, layer))

    @contextlib.contextmanager
    def coalesce(self):
        """Collapse all changes made inside the block into one render."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self.refresh()

    def display_size(self) -> Optional[Tuple[int, int]]:
        """Size to show the preview at, fitted inside ``max_display``.

        The surface itself is never resampled; only the on-screen size shrinks.
        """
        image = self.document.image
        if image is None or image.width <= 0 or image.height <= 0:
            return None
        max_w, max_h = self.max_display
        ratio = min(1.0, max_w / image.width, max_h / image.height)
        return max(1, int(round(image.width * ratio))), max(1, int(round(image.height * ratio)))

    def refresh(self) -> None:
        """Render the current document into a fresh native-size surface."""
        self._dirty = False
        image = self.document.image
        if image is None:
            self.surface = None
            self.error = None
            return
        try:
            surface = Surface(image.width, image.height)
            render(surface, image, self.document.top, self.document.bottom,
                   font_path=self.font_path)
        except RenderError as e:
            logger.error("Preview unavailable: %s", e)
            self.surface = None
            self.error = e
            if self.on_error is not None:
                self.on_error(e)
            return
        self.surface = surface
        self.error = None
        self.render_count += 1
        logger.debug("Preview rendered (%d)", self.render_count)
        if self.on_render is not None:
            self.on_render(surface)

    def _changed(self) -> None:
        if self._batch_depth:
            self._dirty = True
        else:
            self.refresh()
