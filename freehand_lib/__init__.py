"""Freehand stroke capture and smoothing.

This package turns a live stream of pointer positions into a smooth
preview curve while the pointer is dragged, and into a committed vector
path when it is released.

The package is organized into the following modules:
    domain: Value objects (Point, BBox, path commands, BrushStyle, Shadow).
    brush: The engine: point buffer, control-point solver, incremental
        renderer, stroke session state machine, finalizer and the
        PencilBrush facade.
    scene: Host-side collaborators: preview surfaces, VectorPath and a
        reference Canvas.
    utils: numpy helpers for Bezier evaluation and bounds.
    config: Tunable constants and style defaults.

Example usage::

    from freehand_lib import Canvas, PencilBrush

    canvas = Canvas()
    brush = PencilBrush(canvas)
    brush.on_mouse_down((0, 0))
    brush.on_mouse_move((10, 0))
    brush.on_mouse_move((20, 10))
    brush.on_mouse_move((30, 30))
    path = brush.on_mouse_up()
    print(path.path_data)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .brush import (
    PathFinalizer,
    PencilBrush,
    PointBuffer,
    SessionState,
    StrokeSession,
    get_control_points,
)
from .domain import BBox, BrushStyle, PathDescription, Point, Shadow
from .scene import Canvas, RasterSurface, RecordingSurface, VectorPath

__all__ = [
    # Domain objects
    'Point', 'BBox', 'PathDescription', 'BrushStyle', 'Shadow',
    # Engine
    'PointBuffer', 'get_control_points', 'StrokeSession', 'SessionState',
    'PathFinalizer', 'PencilBrush',
    # Scene
    'Canvas', 'VectorPath', 'RecordingSurface', 'RasterSurface',
]

__version__ = '1.0.0'
