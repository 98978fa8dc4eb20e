"""Image decoding and selection tracking.

``decode_image`` turns a source (bytes, path, file object or URL) into an
``ImageHandle``. ``ImageSelection`` tags every decode with a token so that
only the most recent selection can ever become the active image.
"""
from __future__ import annotations

import io
import logging
import os
from typing import Callable, Optional

from PIL import Image, UnidentifiedImageError

from meme_generator.core import ImageHandle
from .assets import fetch_image_bytes
from .errors import AssetDownloadError, DecodeError


logger = logging.getLogger(__name__)


def _describe(source) -> str:
    if isinstance(source, (bytes, bytearray)):
        return f"<{len(source)} bytes>"
    return str(getattr(source, 'name', source))


def decode_image(source) -> ImageHandle:
    """Decode ``source`` into an ``ImageHandle``.

    ``source`` may be raw bytes, a filesystem path, an ``http(s)`` URL or a
    binary file object. Raises ``DecodeError`` if the source cannot be read
    or is not a supported image.
    """
    label = _describe(source)
    try:
        if isinstance(source, (bytes, bytearray)):
            stream = io.BytesIO(source)
        elif isinstance(source, str) and source.startswith(('http://', 'https://')):
            stream = io.BytesIO(fetch_image_bytes(source))
        elif isinstance(source, (str, os.PathLike)):
            stream = source
        elif hasattr(source, 'read'):
            stream = source
        else:
            raise DecodeError(f"Unsupported image source: {source!r}")

        with Image.open(stream) as img:
            img.load()
            handle = ImageHandle(img, source=label)
    except DecodeError:
        raise
    except (AssetDownloadError, OSError, UnidentifiedImageError, Image.DecompressionBombError,
            ValueError, SyntaxError) as e:
        logger.error("Failed to decode image %s: %s", label, e)
        raise DecodeError(f"Cannot decode image {label}: {e}")

    logger.info("Decoded image %s (%dx%d)", label, handle.width, handle.height)
    return handle


class ImageSelection:
    """Track the current image selection and apply only its decode result.

    Every ``select`` bumps a generation counter. A completed decode is
    delivered to ``on_loaded``/``on_failed`` only if its token is still the
    current one; superseded results are dropped.

    Without an ``executor`` decoding runs inline. With one, the decode runs
    on the executor and its completion is passed to ``dispatch``, which must
    move it back onto the host's event thread (for example
    ``loop.call_soon_threadsafe``). An executor without ``dispatch`` is
    rejected: callbacks would otherwise touch the document from a worker.
    """

    def __init__(self, on_loaded: Callable[[ImageHandle], None],
                 on_failed: Optional[Callable[[DecodeError], None]] = None,
                 decoder: Callable[[object], ImageHandle] = decode_image,
                 executor=None,
                 dispatch: Optional[Callable] = None):
        if executor is not None and dispatch is None:
            raise ValueError("An executor requires a dispatch callable for completions")
        self.on_loaded = on_loaded
        self.on_failed = on_failed
        self.decoder = decoder
        self.executor = executor
        self.dispatch = dispatch
        self._generation = 0

    @property
    def current_token(self) -> int:
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def select(self, source) -> int:
        """Start decoding ``source`` and return its selection token."""
        self._generation += 1
        token = self._generation
        logger.debug("Image selection %d: %s", token, _describe(source))

        if self.executor is None:
            try:
                handle = self.decoder(source)
            except DecodeError as e:
                self.complete(token, error=e)
            except Exception as e:
                logger.error("Decoder failed for selection %d: %s", token, e)
                self.complete(token, error=DecodeError(str(e)))
            else:
                self.complete(token, handle=handle)
            return token

        future = self.executor.submit(self.decoder, source)
        future.add_done_callback(lambda f: self._deliver(token, f))
        return token

    def _deliver(self, token: int, future) -> None:
        self.dispatch(self._complete_future, token, future)

    def _complete_future(self, token: int, future) -> None:
        error = future.exception()
        if error is None:
            self.complete(token, handle=future.result())
        elif isinstance(error, DecodeError):
            self.complete(token, error=error)
        else:
            self.complete(token, error=DecodeError(str(error)))

    def complete(self, token: int, handle: Optional[ImageHandle] = None,
                 error: Optional[DecodeError] = None) -> bool:
        """Apply a decode result. Returns False when ``token`` is stale."""
        if not self.is_current(token):
            logger.debug("Discarding stale decode %d (current %d)", token, self._generation)
            return False
        if error is not None:
            if self.on_failed is not None:
                self.on_failed(error)
            else:
                logger.error("Image decode failed: %s", error)
            return True
        self.on_loaded(handle)
        return True
