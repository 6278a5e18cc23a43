"""Committed vector path objects.

A VectorPath is what a finished stroke becomes: the stroke's path
description plus its styling, positioned in scene coordinates. Position is
stored as ``left``/``top`` relative to the object's origin convention
(``origin_x`` in left/center/right, ``origin_y`` in top/center/bottom);
``width``/``height`` are the tight bounds of the geometry, including curve
extrema.

Example usage::

    from freehand_lib.scene.vector_path import VectorPath

    path = VectorPath('M 0 0 C 0 10, 10 10, 10 0', stroke='#000', stroke_width=2)
    path.width, path.height   # (10.0, 7.5)
    path.get_center_point()   # Point(x=5.0, y=3.75)
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from .. import config
from ..domain.geometry import BBox, Point
from ..domain.path import LineTo, MoveTo, PathDescription, QuadTo
from ..domain.style import BrushStyle, Shadow
from ..utils.bezier import path_bounds
from .surface import PreviewSurface

# Offset of each origin name from the center, as a fraction of the size
_ORIGIN_X = {'left': -0.5, 'center': 0.0, 'right': 0.5}
_ORIGIN_Y = {'top': -0.5, 'center': 0.0, 'bottom': 0.5}


def _origin_offset(origin_x: str, origin_y: str) -> Tuple[float, float]:
    try:
        return _ORIGIN_X[origin_x], _ORIGIN_Y[origin_y]
    except KeyError as e:
        raise ValueError(f'Unknown origin {e.args[0]!r}') from e


class VectorPath:
    """Finalized stroke geometry with styling.

    Attributes:
        path: PathDescription holding the geometry.
        bounds: Tight bounding box of the geometry in scene coordinates.
        left, top: Position of the object's origin point.
        width, height: Size of the geometry bounds.
        coords: Corner points ('tl', 'tr', 'br', 'bl') after set_coords.
    """

    def __init__(self, path: Union[PathDescription, str], *,
                 stroke: str = config.DEFAULT_COLOR,
                 stroke_width: float = config.DEFAULT_WIDTH,
                 stroke_line_cap: str = config.DEFAULT_LINE_CAP,
                 stroke_line_join: str = config.DEFAULT_LINE_JOIN,
                 stroke_miter_limit: float = config.DEFAULT_MITER_LIMIT,
                 stroke_dash_array: Optional[Tuple[float, ...]] = None,
                 fill: Optional[str] = None,
                 origin_x: str = 'left',
                 origin_y: str = 'top'):
        if isinstance(path, str):
            path = PathDescription.parse(path)
        _origin_offset(origin_x, origin_y)

        self.path = path.copy()
        self.stroke = stroke
        self.stroke_width = stroke_width
        self.stroke_line_cap = stroke_line_cap
        self.stroke_line_join = stroke_line_join
        self.stroke_miter_limit = stroke_miter_limit
        self.stroke_dash_array = stroke_dash_array
        self.fill = fill
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.shadow: Optional[Shadow] = None
        self.coords: Dict[str, Point] = {}

        self.bounds: BBox = path_bounds(self.path)
        self.width = self.bounds.width
        self.height = self.bounds.height
        # Authored position is the bounds corner, expressed in this origin
        self.left, self.top = self.translate_to_given_origin(
            self.bounds.top_left, 'left', 'top', origin_x, origin_y).to_tuple()

    @property
    def path_data(self) -> str:
        return self.path.to_text()

    def translate_to_given_origin(self, point: Point, from_origin_x: str, from_origin_y: str,
                                  to_origin_x: str, to_origin_y: str) -> Point:
        """Move point from one origin convention of this object to another."""
        fx, fy = _origin_offset(from_origin_x, from_origin_y)
        tx, ty = _origin_offset(to_origin_x, to_origin_y)
        return Point(point.x + (tx - fx) * self.width,
                     point.y + (ty - fy) * self.height)

    def get_bounding_rect(self) -> BBox:
        """Geometry bounds at the object's current position."""
        corner = self.translate_to_given_origin(
            Point(self.left, self.top), self.origin_x, self.origin_y, 'left', 'top')
        return BBox(corner.x, corner.y, corner.x + self.width, corner.y + self.height)

    def get_center_point(self) -> Point:
        """Center of the object in scene coordinates."""
        return self.get_bounding_rect().center

    def set_position_by_origin(self, position: Point, origin_x: str, origin_y: str) -> None:
        """Place the object so that its (origin_x, origin_y) point is position."""
        point = self.translate_to_given_origin(
            position, origin_x, origin_y, self.origin_x, self.origin_y)
        self.left, self.top = point.x, point.y

    def set_shadow(self, shadow: Optional[Shadow]) -> None:
        self.shadow = shadow

    def set_coords(self) -> Dict[str, Point]:
        """Recompute the corner coordinates from the current position."""
        rect = self.get_bounding_rect()
        self.coords = {
            'tl': rect.top_left,
            'tr': Point(rect.x_max, rect.y_min),
            'br': rect.bottom_right,
            'bl': Point(rect.x_min, rect.y_max),
        }
        return self.coords

    def brush_style(self) -> BrushStyle:
        return BrushStyle(
            color=self.stroke,
            width=self.stroke_width,
            line_cap=self.stroke_line_cap,
            line_join=self.stroke_line_join,
            miter_limit=self.stroke_miter_limit,
            dash_array=self.stroke_dash_array,
            shadow=self.shadow,
        )

    def replay(self, surface: PreviewSurface) -> None:
        """Paint the stored geometry onto a surface.

        Uses the same operations the brush used for the live preview, so a
        RecordingSurface sees identical moves, control points and ends.
        """
        surface.apply_style(self.brush_style())
        surface.set_shadow(self.shadow)
        surface.begin_path()
        current = Point(0, 0)
        for command in self.path:
            if isinstance(command, MoveTo):
                surface.move_to(command.point)
            elif isinstance(command, LineTo):
                surface.line_to(command.point)
            else:
                if isinstance(command, QuadTo):
                    command = command.to_cubic(current)
                surface.bezier_curve_to(command.handle_1, command.handle_2, command.end)
            current = command.end
        surface.stroke()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        shadow = None
        if self.shadow is not None:
            shadow = {
                'color': self.shadow.color,
                'blur': self.shadow.blur,
                'offset_x': self.shadow.offset_x,
                'offset_y': self.shadow.offset_y,
                'affect_stroke': self.shadow.affect_stroke,
            }
        return {
            'type': 'path',
            'path': self.path_data,
            'left': self.left,
            'top': self.top,
            'width': self.width,
            'height': self.height,
            'origin_x': self.origin_x,
            'origin_y': self.origin_y,
            'fill': self.fill,
            'stroke': self.stroke,
            'stroke_width': self.stroke_width,
            'stroke_line_cap': self.stroke_line_cap,
            'stroke_line_join': self.stroke_line_join,
            'stroke_miter_limit': self.stroke_miter_limit,
            'stroke_dash_array': list(self.stroke_dash_array) if self.stroke_dash_array else None,
            'shadow': shadow,
        }

    def __repr__(self) -> str:
        return (f'VectorPath(left={self.left}, top={self.top}, '
                f'width={self.width}, height={self.height}, path={self.path_data!r})')
