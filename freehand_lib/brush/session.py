"""Stroke session state machine.

A session covers exactly one press, move..., release gesture:

    IDLE --press--> CAPTURING --move--> CAPTURING --release--> FINALIZING --> IDLE

The session owns the point buffer, the path description and the renderer,
and is the only code that touches them or the preview surface. A press in
any state starts over from a clean buffer and description; moves and
releases outside CAPTURING are ignored.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .. import config
from ..domain.geometry import Point
from ..domain.path import PathDescription
from ..domain.style import BrushStyle
from ..scene.canvas import Canvas
from ..scene.vector_path import VectorPath
from .buffer import PointBuffer
from .finalizer import PathFinalizer
from .renderer import IncrementalRenderer, RenderCase, classify_buffer

_logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle state of a stroke session."""
    IDLE = 'idle'
    CAPTURING = 'capturing'
    FINALIZING = 'finalizing'


class StrokeSession:
    """Capture, render and finalize pipeline for one stroke at a time.

    Attributes:
        canvas: Host canvas; its context_top is the preview surface.
        style: Brush style read at press time.
        buffer: Live stroke tail.
        path: Path description of the current stroke.
        state: Current SessionState.
        last_case: Render case of the most recent capture.
    """

    def __init__(self, canvas: Canvas, style: Optional[BrushStyle] = None,
                 tension: float = config.DEFAULT_TENSION,
                 finalizer: Optional[PathFinalizer] = None):
        self.canvas = canvas
        self.style = style if style is not None else BrushStyle()
        self.buffer = PointBuffer()
        self.path = PathDescription()
        self.renderer = IncrementalRenderer(canvas.context_top, self.path, tension)
        self.finalizer = finalizer if finalizer is not None else PathFinalizer(canvas)
        self.state = SessionState.IDLE
        self.last_case: Optional[RenderCase] = None

    def reset(self) -> None:
        """Clear the buffer and the path description."""
        self.buffer.reset()
        self.path.clear()
        self.last_case = None

    def _prepare_surface(self) -> None:
        surface = self.canvas.context_top
        self.renderer.surface = surface
        surface.apply_style(self.style)
        surface.set_shadow(self.style.shadow)

    def _render(self) -> RenderCase:
        self.last_case = classify_buffer(self.buffer)
        return self.renderer.render(self.buffer, self.style, self.last_case)

    def press(self, point: Point) -> RenderCase:
        """Start a new stroke at point, abandoning any previous one."""
        if self.state is not SessionState.IDLE:
            _logger.debug("Press while %s, starting over", self.state.value)
        self.reset()
        self._prepare_surface()
        self.buffer.seed(point)
        self.canvas.context_top.move_to(point)
        self.state = SessionState.CAPTURING
        return self._render()

    def move(self, point: Point) -> Optional[RenderCase]:
        """Capture a drag sample and draw the segment it completes.

        Returns:
            The render case drawn, or None when the sample was ignored
            (no stroke in progress, or a repeat of the last sample).
        """
        if self.state is not SessionState.CAPTURING:
            _logger.debug("Ignoring move to (%s, %s) while %s", point.x, point.y, self.state.value)
            return None
        if not self.buffer.append(point):
            return None
        return self._render()

    def release(self) -> Optional[VectorPath]:
        """Finish the stroke and commit it to the canvas.

        Returns:
            The committed VectorPath, or None for an empty stroke or when
            no stroke was in progress.
        """
        if self.state is not SessionState.CAPTURING:
            _logger.warning("Release without a stroke in progress (state %s)", self.state.value)
            return None
        self.state = SessionState.FINALIZING
        try:
            return self.finalizer.finalize(self.path, self.style)
        finally:
            self.state = SessionState.IDLE
