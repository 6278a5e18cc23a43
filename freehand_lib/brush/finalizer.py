"""Conversion of a finished stroke into a committed vector path."""

from __future__ import annotations

import logging
from typing import Optional

from .. import config
from ..domain.path import PathDescription
from ..domain.style import BrushStyle
from ..scene.canvas import Canvas
from ..scene.vector_path import VectorPath

_logger = logging.getLogger(__name__)


class PathFinalizer:
    """Builds the VectorPath for a released stroke and hands it to the canvas.

    Attributes:
        canvas: Host canvas owning the preview surface and object list.
        origin_x: Horizontal origin convention of created paths.
        origin_y: Vertical origin convention of created paths.
    """

    def __init__(self, canvas: Canvas, origin_x: str = 'left', origin_y: str = 'top'):
        self.canvas = canvas
        self.origin_x = origin_x
        self.origin_y = origin_y

    def create_path(self, path: PathDescription, style: BrushStyle) -> VectorPath:
        """Create a styled VectorPath anchored by its geometric center.

        The stored position is recomputed from the center under the path's
        origin convention, so it does not depend on how the commands
        happened to be authored.
        """
        vector_path = VectorPath(
            path,
            stroke=style.color,
            stroke_width=style.width,
            stroke_line_cap=style.line_cap,
            stroke_miter_limit=style.miter_limit,
            stroke_line_join=style.line_join,
            stroke_dash_array=style.dash_array,
            fill=None,
            origin_x=self.origin_x,
            origin_y=self.origin_y,
        )
        center = vector_path.get_center_point()
        vector_path.set_position_by_origin(center, 'center', 'center')
        if style.shadow is not None:
            vector_path.set_shadow(style.shadow.copy(affect_stroke=True))
        return vector_path

    def finalize(self, path: PathDescription, style: BrushStyle) -> Optional[VectorPath]:
        """Commit the stroke described by path.

        An empty stroke is discarded and only a repaint is requested. In
        every case the preview surface ends up cleared.

        Returns:
            The committed VectorPath, or None when the stroke was discarded.
        """
        surface = self.canvas.context_top
        surface.close_path()

        vector_path = None
        try:
            if path.is_empty_stroke():
                _logger.debug("Discarding empty stroke %r", path.to_text())
                self.canvas.request_render_all()
                return None
            vector_path = self.create_path(path, style)
        finally:
            self.canvas.clear_context(surface)
            surface.set_shadow(None)

        self.canvas.add(vector_path)
        self.canvas.render_all()
        vector_path.set_coords()
        _logger.debug("Committed stroke with %d commands", len(path))

        self.canvas.fire(config.PATH_CREATED_EVENT, {'path': vector_path})
        return vector_path
