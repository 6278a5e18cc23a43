"""Brush styling value objects."""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .. import config


@dataclass
class Shadow:
    """Drop shadow applied to the preview and to committed paths.

    Attributes:
        color: CSS-style color string.
        blur: Blur radius in pixels.
        offset_x: Horizontal offset in pixels.
        offset_y: Vertical offset in pixels.
        affect_stroke: Whether the shadow follows the stroke outline. The
            finalizer turns this on for committed paths.
    """
    color: str = config.DEFAULT_COLOR
    blur: float = 0
    offset_x: float = 0
    offset_y: float = 0
    affect_stroke: bool = False

    def copy(self, **changes) -> Shadow:
        return replace(self, **changes)


@dataclass
class BrushStyle:
    """Stroke styling read by the brush when a stroke starts.

    Set by the host before the press; the engine never modifies it.

    Example:
        >>> style = BrushStyle(color='#ff0000', width=4)
        >>> style.line_cap
        'round'
    """
    color: str = config.DEFAULT_COLOR
    width: float = config.DEFAULT_WIDTH
    line_cap: str = config.DEFAULT_LINE_CAP
    line_join: str = config.DEFAULT_LINE_JOIN
    miter_limit: float = config.DEFAULT_MITER_LIMIT
    dash_array: Optional[Tuple[float, ...]] = None
    shadow: Optional[Shadow] = None

    def __post_init__(self):
        if self.width < 0:
            raise ValueError(f'Brush width must be non-negative, got {self.width}')
        if self.line_cap not in config.LINE_CAPS:
            raise ValueError(f'Unknown line cap {self.line_cap!r}')
        if self.line_join not in config.LINE_JOINS:
            raise ValueError(f'Unknown line join {self.line_join!r}')
        if self.dash_array is not None:
            self.dash_array = tuple(self.dash_array)
