"""Shared configuration for the freehand brush.

This module centralizes the tunable constants used by:
    - brush.control_points (handle tension)
    - brush.renderer (dot widening)
    - domain.style (default brush styling)
    - scene.surface and utils.bezier (raster preview)

The tension and dot divisor values reproduce the established curve shape
exactly. Changing them changes the curvature of every committed stroke.
"""

# Handle length as a fraction of the neighbour chord (see get_control_points)
DEFAULT_TENSION = 0.4

# A zero-motion click is widened by style.width / DOT_WIDTH_DIVISOR on each side
DOT_WIDTH_DIVISOR = 1000

# Default brush styling
DEFAULT_COLOR = 'rgb(0, 0, 0)'
DEFAULT_WIDTH = 1
DEFAULT_LINE_CAP = 'round'
DEFAULT_LINE_JOIN = 'round'
DEFAULT_MITER_LIMIT = 10

LINE_CAPS = ('butt', 'round', 'square')
LINE_JOINS = ('bevel', 'round', 'miter')

# Preview raster defaults
DEFAULT_CANVAS_SIZE = (512, 512)
DEFAULT_BACKGROUND = (0, 0, 0, 0)

# Number of line pieces used to flatten one cubic on the raster preview
CURVE_FLATTEN_STEPS = 16

# Event fired by the canvas when a stroke is committed
PATH_CREATED_EVENT = 'path:created'
