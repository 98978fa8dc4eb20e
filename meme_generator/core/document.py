"""Document model: the decoded image plus the two captions."""
from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image

from .text_layer import TextLayer, default_bottom_layer, default_top_layer


LAYER_NAMES = ('top', 'bottom')


class ImageHandle:
    """An already-decoded raster image.

    The handle owns a private RGBA copy of the pixels so later changes to
    the source ``Image`` cannot leak into renders. ``image`` hands out copies.
    """

    def __init__(self, image: Image.Image, source: Optional[str] = None):
        pixels = image.convert('RGBA') if image.mode != 'RGBA' else image.copy()
        pixels.load()
        self._image = pixels
        self._source = source

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def image(self) -> Image.Image:
        return self._image.copy()

    def resized(self, width: int, height: int) -> Image.Image:
        """Return the pixels resampled to exactly ``width`` x ``height``."""
        if (width, height) == self._image.size:
            return self._image.copy()
        return self._image.resize((width, height), Image.Resampling.LANCZOS)

    def __repr__(self):
        return f"ImageHandle({self.width}x{self.height}, source={self._source!r})"


class MemeDocument:
    """The (image, top caption, bottom caption) triple that determines a composite.

    Documents are treated as values: the ``with_*`` methods return new
    documents and leave the original untouched.
    """

    def __init__(self, image: Optional[ImageHandle] = None,
                 top: Optional[TextLayer] = None, bottom: Optional[TextLayer] = None):
        self.image = image
        self.top = top if top is not None else default_top_layer()
        self.bottom = bottom if bottom is not None else default_bottom_layer()

    @property
    def has_image(self) -> bool:
        return self.image is not None

    def layer(self, which: str) -> TextLayer:
        if which == 'top':
            return self.top
        if which == 'bottom':
            return self.bottom
        raise ValueError(f"Unknown text layer: {which!r} (expected 'top' or 'bottom')")

    def with_image(self, image: Optional[ImageHandle]) -> 'MemeDocument':
        return MemeDocument(image, self.top, self.bottom)

    def with_layer(self, which: str, layer: TextLayer) -> 'MemeDocument':
        if which not in LAYER_NAMES:
            raise ValueError(f"Unknown text layer: {which!r} (expected 'top' or 'bottom')")
        if which == 'top':
            return MemeDocument(self.image, layer, self.bottom)
        return MemeDocument(self.image, self.top, layer)

    def __eq__(self, other):
        if not isinstance(other, MemeDocument):
            return NotImplemented
        return (self.image is other.image and self.top == other.top
                and self.bottom == other.bottom)

    def __repr__(self):
        return f"MemeDocument(image={self.image!r}, top={self.top!r}, bottom={self.bottom!r})"
