"""Cubic Bezier evaluation utilities.

This module provides the numeric helpers used by scene objects: evaluating
curves, flattening them into polylines for the raster preview, and
computing exact path bounds from curve extrema.

The module provides the following functions:
    cubic_points: Evaluate a cubic at an array of parameters.
    flatten_cubic: Sample a cubic into an (n + 1, 2) polyline.
    cubic_bounds: Tight bounding box of a cubic segment.
    path_bounds: Bounding box of a whole path description.

Example usage::

    from freehand_lib.domain import Point
    from freehand_lib.utils.bezier import cubic_bounds

    box = cubic_bounds(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))
    box.y_max  # 7.5
"""

from __future__ import annotations

import numpy as np

from ..domain.geometry import BBox, Point
from ..domain.path import CurveTo, PathDescription, QuadTo

_EPS = 1e-12


def _control_array(p0: Point, p1: Point, p2: Point, p3: Point) -> np.ndarray:
    return np.array([p0.to_tuple(), p1.to_tuple(), p2.to_tuple(), p3.to_tuple()], dtype=float)


def cubic_points(p0: Point, p1: Point, p2: Point, p3: Point, t) -> np.ndarray:
    """Evaluate a cubic Bezier at parameter values t.

    Args:
        p0: Start point.
        p1: First handle.
        p2: Second handle.
        p3: End point.
        t: Scalar or array of parameters in [0, 1].

    Returns:
        Array of shape (len(t), 2) with the curve points.
    """
    ctrl = _control_array(p0, p1, p2, p3)
    t = np.atleast_1d(np.asarray(t, dtype=float))[:, None]
    mt = 1.0 - t
    return (mt ** 3 * ctrl[0] + 3 * mt ** 2 * t * ctrl[1] +
            3 * mt * t ** 2 * ctrl[2] + t ** 3 * ctrl[3])


def flatten_cubic(p0: Point, p1: Point, p2: Point, p3: Point, steps: int) -> np.ndarray:
    """Sample a cubic into steps + 1 evenly parameterized points."""
    return cubic_points(p0, p1, p2, p3, np.linspace(0.0, 1.0, max(1, steps) + 1))


def _derivative_roots(a: float, b: float, c: float) -> list:
    """Roots in (0, 1) of a*t^2 + b*t + c."""
    if abs(a) < _EPS:
        if abs(b) < _EPS:
            return []
        roots = [-c / b]
    else:
        disc = b * b - 4 * a * c
        if disc < 0:
            return []
        sq = np.sqrt(disc)
        roots = [(-b + sq) / (2 * a), (-b - sq) / (2 * a)]
    return [float(t) for t in roots if 0.0 < t < 1.0]


def cubic_bounds(p0: Point, p1: Point, p2: Point, p3: Point) -> BBox:
    """Tight bounding box of a cubic segment.

    Uses the end points plus every interior extremum, found where the
    derivative of either coordinate vanishes.
    """
    ctrl = _control_array(p0, p1, p2, p3)
    params = [0.0, 1.0]
    for axis in range(2):
        v0, v1, v2, v3 = ctrl[:, axis]
        a = -v0 + 3 * v1 - 3 * v2 + v3
        b = 2 * (v0 - 2 * v1 + v2)
        c = v1 - v0
        params.extend(_derivative_roots(a, b, c))
    pts = cubic_points(p0, p1, p2, p3, params)
    mins = pts.min(axis=0)
    maxs = pts.max(axis=0)
    return BBox(float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


def path_bounds(path: PathDescription) -> BBox:
    """Bounding box of all geometry in a path description."""
    current = Point(0, 0)
    boxes = []
    for command in path:
        if isinstance(command, QuadTo):
            command = command.to_cubic(current)
        if isinstance(command, CurveTo):
            boxes.append(cubic_bounds(current, command.handle_1, command.handle_2, command.end))
        else:
            boxes.append(BBox.from_points(command.points()))
        current = command.end
    if not boxes:
        return BBox(0, 0, 0, 0)
    arr = np.array([box.to_tuple() for box in boxes], dtype=float)
    return BBox(float(arr[:, 0].min()), float(arr[:, 1].min()),
                float(arr[:, 2].max()), float(arr[:, 3].max()))
