"""Numeric utilities for curve geometry.

Exports:
    cubic_points: Evaluate a cubic Bezier at parameter values.
    flatten_cubic: Sample a cubic into a polyline.
    cubic_bounds: Tight bounding box of one cubic.
    path_bounds: Bounding box of a whole path description.
"""

from .bezier import cubic_bounds, cubic_points, flatten_cubic, path_bounds

__all__ = ['cubic_points', 'flatten_cubic', 'cubic_bounds', 'path_bounds']
