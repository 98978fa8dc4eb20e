"""Shared fixtures for the rendering tests."""
import io
from concurrent.futures import Future

import numpy as np
from PIL import Image

from meme_generator.core import ImageHandle


BACKGROUND = (90, 120, 150)


def make_handle(width=800, height=800, color=BACKGROUND):
    return ImageHandle(Image.new('RGB', (width, height), color))


def png_bytes(width=64, height=48, color=BACKGROUND):
    buffer = io.BytesIO()
    Image.new('RGB', (width, height), color).save(buffer, format='PNG')
    return buffer.getvalue()


def ink_mask(pixels, color=BACKGROUND):
    """Boolean mask of pixels that differ from the plain background."""
    return np.any(pixels[:, :, :3] != np.array(color, dtype=np.uint8), axis=2)


def ink_bbox(pixels, color=BACKGROUND):
    ys, xs = np.nonzero(ink_mask(pixels, color))
    return xs.min(), ys.min(), xs.max(), ys.max()


class ManualExecutor:
    """Executor stand-in whose jobs complete only when ``run`` is called."""

    def __init__(self):
        self.jobs = []

    def submit(self, fn, *args):
        future = Future()
        self.jobs.append((future, fn, args))
        return future

    def run(self, index):
        future, fn, args = self.jobs[index]
        try:
            future.set_result(fn(*args))
        except Exception as e:
            future.set_exception(e)


def dispatch_now(fn, *args):
    """Dispatcher that hands completions straight back, like a drained event loop."""
    fn(*args)


def oversized_icc_png():
    """A valid-looking PNG whose compressed iCCP chunk inflates past Pillow's limit."""
    buffer = io.BytesIO()
    Image.new('RGB', (4, 4), BACKGROUND).save(buffer, format='PNG',
                                               icc_profile=b'\0' * (4 * 1024 * 1024))
    return buffer.getvalue()
