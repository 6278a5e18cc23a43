"""Pencil brush: pointer-event entry point for freehand drawing.

PencilBrush adapts host pointer callbacks to a StrokeSession. The host
calls on_mouse_down, on_mouse_move and on_mouse_up in order; the brush
paints the preview on ``canvas.context_top`` while dragging and, on
release, adds a VectorPath to the canvas and fires 'path:created'.

Example usage::

    from freehand_lib import BrushStyle, Canvas, PencilBrush

    canvas = Canvas()
    canvas.on('path:created', lambda e: print(e['path'].path_data))

    brush = PencilBrush(canvas, BrushStyle(color='#336699', width=4))
    brush.on_mouse_down((10, 10))
    for x in range(12, 60, 4):
        brush.on_mouse_move((x, 10 + x / 2))
    brush.on_mouse_up()
"""

from __future__ import annotations

from typing import Any, List, Optional

from .. import config
from ..domain.geometry import Point
from ..domain.path import PathDescription
from ..domain.style import BrushStyle
from ..scene.canvas import Canvas
from ..scene.vector_path import VectorPath
from .finalizer import PathFinalizer
from .session import SessionState, StrokeSession


class PencilBrush:
    """Freehand brush drawing smooth cubic strokes.

    Args:
        canvas: Host canvas.
        style: Brush style; defaults to a 1px round black pencil.
        tension: Handle tension for the curve segments.
        origin_x: Horizontal origin convention of committed paths.
        origin_y: Vertical origin convention of committed paths.
    """

    def __init__(self, canvas: Canvas, style: Optional[BrushStyle] = None,
                 tension: float = config.DEFAULT_TENSION,
                 origin_x: str = 'left', origin_y: str = 'top'):
        self.canvas = canvas
        self.session = StrokeSession(
            canvas, style, tension, PathFinalizer(canvas, origin_x, origin_y))

    @property
    def style(self) -> BrushStyle:
        return self.session.style

    @style.setter
    def style(self, value: BrushStyle) -> None:
        # Read at the next press
        self.session.style = value

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def points(self) -> List[Point]:
        return self.session.buffer.to_list()

    @property
    def path(self) -> PathDescription:
        return self.session.path

    def on_mouse_down(self, pointer: Any) -> None:
        self.session.press(Point.from_pointer(pointer))

    def on_mouse_move(self, pointer: Any) -> None:
        self.session.move(Point.from_pointer(pointer))

    def on_mouse_up(self) -> Optional[VectorPath]:
        return self.session.release()

    def convert_points_to_svg_path(self) -> str:
        """Path text of the stroke drawn so far."""
        return self.session.path.to_text()

    def create_path(self, path_data: str) -> VectorPath:
        """Build a VectorPath from path text with this brush's styling."""
        return self.session.finalizer.create_path(PathDescription.parse(path_data), self.style)
