"""Pure color parsing helpers shared by the model and the renderer."""
from __future__ import annotations

from typing import Tuple

from PIL import ImageColor


RGBA = Tuple[int, int, int, int]


def parse_color(value) -> RGBA:
    """Normalise a color value to an ``(r, g, b, a)`` tuple.

    Accepts anything Pillow's ``ImageColor`` understands (``"#FFF"``,
    ``"#FF0000"``, ``"white"``, ``"rgb(0, 0, 0)"``) as well as RGB/RGBA
    sequences, which is how colors are written in YAML configuration.
    Raises ``ValueError`` for anything else.
    """
    if isinstance(value, str):
        try:
            rgb = ImageColor.getrgb(value.strip())
        except ValueError:
            raise ValueError(f"Invalid color value: {value!r}")
        return rgb + (255,) if len(rgb) == 3 else tuple(rgb)
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        channels = []
        for c in value:
            if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
                raise ValueError(f"Invalid color channel in {value!r}")
            channels.append(c)
        if len(channels) == 3:
            channels.append(255)
        return tuple(channels)
    raise ValueError(f"Unsupported color format: {value!r}")
