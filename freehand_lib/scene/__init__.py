"""Host-side scene objects.

Exports:
    PreviewSurface: Protocol for live preview drawing surfaces.
    RecordingSurface: Surface recording every call.
    RasterSurface: Pillow-backed raster surface.
    VectorPath: Committed stroke object.
    Canvas: Reference host holding objects and dispatching events.
"""

from .canvas import Canvas
from .surface import PreviewSurface, RasterSurface, RecordingSurface
from .vector_path import VectorPath

__all__ = ['PreviewSurface', 'RecordingSurface', 'RasterSurface', 'VectorPath', 'Canvas']
