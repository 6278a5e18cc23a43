"""Freehand brush engine.

Components, leaf first:
    PointBuffer: Deduplicated live tail of the stroke.
    get_control_points: Distance-weighted G1 handles for one anchor.
    IncrementalRenderer: One smooth segment per captured point.
    StrokeSession: press / move / release state machine.
    PathFinalizer: Turns the path description into a committed VectorPath.
    PencilBrush: Pointer-event facade over a StrokeSession.
"""

from .buffer import PointBuffer
from .control_points import ControlHandles, get_control_points
from .finalizer import PathFinalizer
from .pencil import PencilBrush
from .renderer import IncrementalRenderer, RenderCase, classify_buffer
from .session import SessionState, StrokeSession

__all__ = [
    'PointBuffer', 'ControlHandles', 'get_control_points',
    'IncrementalRenderer', 'RenderCase', 'classify_buffer',
    'StrokeSession', 'SessionState', 'PathFinalizer', 'PencilBrush',
]
