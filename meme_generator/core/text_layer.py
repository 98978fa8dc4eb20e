"""Caption model: content and style of one text layer (top or bottom)."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from .colors import parse_color


ColorValue = Union[str, tuple, list]

# Keys used by the original web editor, mapped to field names
_ALIASES = {
    'fontSize': 'font_size',
    'stroke': 'stroke_color',
    'strokeColor': 'stroke_color',
    'strokeWidth': 'stroke_width',
    'verticalPosition': 'vertical_position',
    'y': 'vertical_position',
}

NUMERIC_FIELDS = ('font_size', 'stroke_width', 'vertical_position')


def _is_number(value) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


@dataclass(frozen=True)
class TextLayer:
    """Immutable description of a caption.

    ``font_size`` is expressed in points at the image's natural height and
    is scaled with the output resolution. ``vertical_position`` is the
    baseline position as a percentage of the image height.
    """

    content: str = ''
    font_size: float = 48
    color: ColorValue = '#FFFFFF'
    stroke_color: ColorValue = '#000000'
    stroke_width: float = 3
    vertical_position: float = 15

    def __post_init__(self):
        if not isinstance(self.content, str):
            raise ValueError('Caption content must be a string')
        for name in NUMERIC_FIELDS:
            if not _is_number(getattr(self, name)):
                raise ValueError(f'{name} must be a number, got {getattr(self, name)!r}')
        if not self.font_size > 0:
            raise ValueError(f'Font size must be positive, got {self.font_size}')
        if self.stroke_width < 0:
            raise ValueError(f'Stroke width must be non-negative, got {self.stroke_width}')
        if not 0 <= self.vertical_position <= 100:
            raise ValueError(
                f'Vertical position must be within [0, 100], got {self.vertical_position}'
            )
        parse_color(self.color)
        parse_color(self.stroke_color)

    @property
    def is_empty(self) -> bool:
        return self.content == ''

    def replace(self, **changes: Any) -> 'TextLayer':
        """Return a copy with ``changes`` applied (validated like the constructor)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: 'TextLayer' = None) -> 'TextLayer':
        """Build a layer from a mapping, starting from ``base`` (or the defaults).

        Unknown keys raise ``ValueError``.
        """
        fields = {f.name for f in dataclasses.fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _ALIASES.get(key, key)
            if name not in fields:
                raise ValueError(f'Unknown text layer field: {key}')
            if value is None:
                continue
            if name in NUMERIC_FIELDS and not _is_number(value):
                try:
                    value = float(value)
                except (TypeError, ValueError):
                    raise ValueError(f'{key} must be a number, got {value!r}')
            values[name] = value
        if isinstance(values.get('color'), list):
            values['color'] = tuple(values['color'])
        if isinstance(values.get('stroke_color'), list):
            values['stroke_color'] = tuple(values['stroke_color'])
        return dataclasses.replace(base or cls(), **values)


def default_top_layer() -> TextLayer:
    return TextLayer(vertical_position=15)


def default_bottom_layer() -> TextLayer:
    return TextLayer(vertical_position=85)
