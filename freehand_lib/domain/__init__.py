"""Domain objects for freehand strokes.

This module provides the value objects shared by the brush engine and the
host-side scene objects.

Geometry classes:
    Point: Immutable 2D point with vector operations.
    BBox: Immutable bounding box.

Path classes:
    MoveTo, LineTo, CurveTo, QuadTo: Drawing commands.
    PathDescription: Ordered command log for one stroke.

Style classes:
    BrushStyle: Stroke color, width, caps, joins, dashes and shadow.
    Shadow: Drop shadow settings.

Example usage::

    from freehand_lib.domain import Point, PathDescription

    path = PathDescription.parse('M 0 0 C 1 1, 2 2, 3 3')
    path[-1].end  # Point(x=3.0, y=3.0)
"""

from .geometry import BBox, Point
from .path import (
    EMPTY_STROKE_COMMANDS,
    CurveTo,
    LineTo,
    MoveTo,
    PathDescription,
    PathSyntaxError,
    QuadTo,
    format_number,
)
from .style import BrushStyle, Shadow

__all__ = [
    'Point', 'BBox',
    'MoveTo', 'LineTo', 'CurveTo', 'QuadTo', 'PathDescription',
    'PathSyntaxError', 'EMPTY_STROKE_COMMANDS', 'format_number',
    'BrushStyle', 'Shadow',
]
