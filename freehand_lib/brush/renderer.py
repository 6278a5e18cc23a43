"""Incremental stroke renderer.

The renderer turns the live tail of a stroke into one smooth segment per
captured point. Each call paints the segment on the preview surface and
appends the same commands to the stroke's path description, so the
description always mirrors what the user saw.

Which segment to draw depends on how many points the buffer holds when the
point is captured:

    NOTHING        empty buffer, nothing to draw
    ANCHOR         one point, or two distinct points; only a move is emitted
    DOT            two identical points, a click with no motion
    FIRST_SEGMENT  three points; the two leading anchors are taken first, then
                   the front point is repeated so the trailing anchors come
                   from the padded window. The curve collapses onto the
                   second point and the window keeps three points
    SEGMENT        four points; a cubic is drawn between the middle two

Example usage::

    from freehand_lib.brush.buffer import PointBuffer
    from freehand_lib.brush.renderer import IncrementalRenderer, classify_buffer
    from freehand_lib.domain import BrushStyle, PathDescription, Point
    from freehand_lib.scene.surface import RecordingSurface

    buffer = PointBuffer()
    for p in [(0, 0), (10, 0), (20, 5), (30, 15)]:
        buffer.append(Point(*p))
    renderer = IncrementalRenderer(RecordingSurface(), PathDescription())
    renderer.render(buffer, BrushStyle(), classify_buffer(buffer))
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .. import config
from ..domain.geometry import Point
from ..domain.path import CurveTo, LineTo, MoveTo, PathDescription
from ..domain.style import BrushStyle
from ..scene.surface import PreviewSurface
from .buffer import PointBuffer
from .control_points import get_control_points

_logger = logging.getLogger(__name__)


class RenderCase(Enum):
    """What one render call draws, decided from the buffer once per capture."""
    NOTHING = 'nothing'
    ANCHOR = 'anchor'
    DOT = 'dot'
    FIRST_SEGMENT = 'first_segment'
    SEGMENT = 'segment'


def classify_buffer(buffer: PointBuffer) -> RenderCase:
    """Decide the render case for the current buffer contents."""
    n = len(buffer)
    if n == 0:
        return RenderCase.NOTHING
    if n == 1:
        return RenderCase.ANCHOR
    if n == 2:
        return RenderCase.DOT if buffer[0] == buffer[1] else RenderCase.ANCHOR
    if n == 3:
        return RenderCase.FIRST_SEGMENT
    return RenderCase.SEGMENT


class IncrementalRenderer:
    """Draws one smooth segment per captured point.

    Attributes:
        surface: Preview surface receiving the immediate-mode paint calls.
        path: Path description receiving the matching commands.
        tension: Handle tension passed to get_control_points.
    """

    def __init__(self, surface: PreviewSurface, path: PathDescription,
                 tension: float = config.DEFAULT_TENSION):
        self.surface = surface
        self.path = path
        self.tension = tension

    def render(self, buffer: PointBuffer, style: BrushStyle,
               case: Optional[RenderCase] = None) -> RenderCase:
        """Paint and record the segment for the current buffer.

        Args:
            buffer: Live stroke tail. Consumed points are evicted from the
                front, the dot case replaces its two points with widened
                copies.
            style: Active brush style; its width sets the dot widening.
            case: Render case from classify_buffer. Classified here when
                omitted.

        Returns:
            The render case that was drawn.
        """
        if case is None:
            case = classify_buffer(buffer)
        if case is RenderCase.NOTHING:
            return case

        surface = self.surface
        surface.begin_path()

        if case is RenderCase.DOT:
            # Identical points produce no visible path on most backends
            half = style.width / config.DOT_WIDTH_DIVISOR
            buffer.replace(0, buffer[0].shifted_x(-half))
            buffer.replace(1, buffer[1].shifted_x(half))

        p0 = buffer[0]
        surface.move_to(p0)
        self.path.append(MoveTo(p0))

        if case is RenderCase.DOT:
            p1 = buffer[1]
            surface.line_to(p1)
            self.path.append(LineTo(p1))
            buffer.shift()
        elif case in (RenderCase.FIRST_SEGMENT, RenderCase.SEGMENT):
            p1 = buffer[1]
            if case is RenderCase.FIRST_SEGMENT:
                # Leading anchors are bound before the front point is repeated
                buffer.unshift(p0)
            self._draw_segment(p0, p1, buffer[2], buffer[3])
            buffer.shift()

        surface.close_path()
        surface.stroke()
        _logger.debug("Rendered %s, %d points left in buffer", case.value, len(buffer))
        return case

    def _draw_segment(self, p0: Point, p1: Point, p2: Point, p3: Point) -> None:
        p1_handles = get_control_points(p0, p1, p2, self.tension)
        p2_handles = get_control_points(p1, p2, p3, self.tension)

        self.surface.move_to(p1)
        self.path.append(MoveTo(p1))

        self.surface.bezier_curve_to(p1_handles.handle_out, p2_handles.handle_in, p2)
        self.path.append(CurveTo(p1_handles.handle_out, p2_handles.handle_in, p2))
