"""Preview drawing surfaces.

The brush paints every captured segment immediately onto a preview surface,
using the same small set of operations as an HTML canvas 2D context. This
module defines that interface and two implementations.

The module provides the following classes:
    PreviewSurface: Protocol implemented by every preview surface.
    RecordingSurface: Records each call, used by tests and for replay checks.
    RasterSurface: Paints into a Pillow RGBA image.

Example usage::

    from freehand_lib.scene.surface import RasterSurface
    from freehand_lib.domain import BrushStyle, Point

    surface = RasterSurface(size=(64, 64))
    surface.apply_style(BrushStyle(width=3))
    surface.begin_path()
    surface.move_to(Point(5, 5))
    surface.line_to(Point(60, 60))
    surface.stroke()
    pixels = surface.to_array()
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw, ImageFilter

from .. import config
from ..domain.geometry import Point
from ..domain.style import BrushStyle, Shadow
from ..utils.bezier import flatten_cubic


class PreviewSurface(Protocol):
    """Immediate-mode drawing surface for live stroke feedback."""

    def apply_style(self, style: BrushStyle) -> None:
        """Set stroke color, width, cap, join, miter limit and dashes."""
        ...

    def set_shadow(self, shadow: Optional[Shadow]) -> None:
        """Set or remove (None) the shadow for subsequent strokes."""
        ...

    def begin_path(self) -> None: ...

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def bezier_curve_to(self, handle_1: Point, handle_2: Point, end: Point) -> None: ...

    def close_path(self) -> None: ...

    def stroke(self) -> None: ...

    def clear(self) -> None:
        """Erase everything painted so far."""
        ...


class RecordingSurface:
    """Surface that records calls instead of painting.

    Each call is stored as a (name, args) tuple in ``calls``. ``clear``
    is recorded too, so a test can tell what was visible before it.
    """

    def __init__(self):
        self.calls: List[Tuple[str, tuple]] = []
        self.style: Optional[BrushStyle] = None
        self.shadow: Optional[Shadow] = None

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))

    def apply_style(self, style: BrushStyle) -> None:
        self.style = style
        self._record('apply_style', style)

    def set_shadow(self, shadow: Optional[Shadow]) -> None:
        self.shadow = shadow
        self._record('set_shadow', shadow)

    def begin_path(self) -> None:
        self._record('begin_path')

    def move_to(self, point: Point) -> None:
        self._record('move_to', point)

    def line_to(self, point: Point) -> None:
        self._record('line_to', point)

    def bezier_curve_to(self, handle_1: Point, handle_2: Point, end: Point) -> None:
        self._record('bezier_curve_to', handle_1, handle_2, end)

    def close_path(self) -> None:
        self._record('close_path')

    def stroke(self) -> None:
        self._record('stroke')

    def clear(self) -> None:
        self._record('clear')

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def geometry_calls(self, since_last_clear: bool = False) -> List[Tuple[str, tuple]]:
        """Only the move/line/curve calls, optionally after the last clear."""
        calls = self.calls
        if since_last_clear and 'clear' in self.names():
            last = len(calls) - 1 - self.names()[::-1].index('clear')
            calls = calls[last + 1:]
        return [c for c in calls if c[0] in ('move_to', 'line_to', 'bezier_curve_to')]


class RasterSurface:
    """Preview surface backed by a Pillow RGBA image.

    Follows canvas semantics: ``move_to`` starts a sub-path, ``close_path``
    joins the current sub-path back to its start, and ``stroke`` paints all
    sub-paths of the current path. Curves are flattened into
    CURVE_FLATTEN_STEPS line pieces. Dash patterns are not rasterized.
    """

    def __init__(self, size: Tuple[int, int] = config.DEFAULT_CANVAS_SIZE,
                 background=config.DEFAULT_BACKGROUND,
                 flatten_steps: int = config.CURVE_FLATTEN_STEPS):
        self.size = size
        self.background = background
        self.flatten_steps = flatten_steps
        self.image = Image.new('RGBA', size, background)
        self._style = BrushStyle()
        self._shadow: Optional[Shadow] = None
        self._subpaths: List[List[Tuple[float, float]]] = []

    def apply_style(self, style: BrushStyle) -> None:
        self._style = style

    def set_shadow(self, shadow: Optional[Shadow]) -> None:
        self._shadow = shadow

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, point: Point) -> None:
        self._subpaths.append([point.to_tuple()])

    def _current(self) -> List[Tuple[float, float]]:
        if not self._subpaths:
            self._subpaths.append([])
        return self._subpaths[-1]

    def line_to(self, point: Point) -> None:
        self._current().append(point.to_tuple())

    def bezier_curve_to(self, handle_1: Point, handle_2: Point, end: Point) -> None:
        current = self._current()
        if not current:
            current.append(handle_1.to_tuple())
        start = Point.from_tuple(current[-1])
        pts = flatten_cubic(start, handle_1, handle_2, end, self.flatten_steps)
        current.extend((float(x), float(y)) for x, y in pts[1:])

    def close_path(self) -> None:
        if self._subpaths and len(self._subpaths[-1]) > 1:
            start = self._subpaths[-1][0]
            self._subpaths[-1].append(start)
            self._subpaths.append([start])

    def _paint(self, draw: ImageDraw.ImageDraw, color, offset=(0.0, 0.0)) -> None:
        width = max(1, int(round(self._style.width)))
        joint = 'curve' if self._style.line_join == 'round' else None
        for subpath in self._subpaths:
            pts = [(x + offset[0], y + offset[1]) for x, y in subpath]
            if len(pts) < 2:
                continue
            draw.line(pts, fill=color, width=width, joint=joint)
            if self._style.line_cap == 'round' and width > 1:
                r = width / 2
                for x, y in (pts[0], pts[-1]):
                    draw.ellipse((x - r, y - r, x + r, y + r), fill=color)

    def stroke(self) -> None:
        if self._shadow is not None:
            layer = Image.new('RGBA', self.size, (0, 0, 0, 0))
            self._paint(ImageDraw.Draw(layer), ImageColor.getrgb(self._shadow.color),
                        (self._shadow.offset_x, self._shadow.offset_y))
            if self._shadow.blur:
                layer = layer.filter(ImageFilter.GaussianBlur(self._shadow.blur / 2))
            self.image.alpha_composite(layer)
        self._paint(ImageDraw.Draw(self.image), ImageColor.getrgb(self._style.color))

    def clear(self) -> None:
        self.image = Image.new('RGBA', self.size, self.background)
        self._subpaths = []

    def to_array(self) -> np.ndarray:
        """Current pixels as an (H, W, 4) uint8 array."""
        return np.asarray(self.image)
