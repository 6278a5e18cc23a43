"""Control handles for smooth joins between curve segments.

One way to think of a chain of cubic Bezier curves is as a sequence of
anchor points, each with two handles: handle in and handle out. Two curves
meeting at an anchor look smooth when both handles lie on one line through
the anchor. This is G1 continuity: the tangent direction matches across the
join, the magnitude need not.

Handles here are parallel to the chord from the anchor to its successor and
scaled by the distance to each neighbour. Dense samples give short handles
and tight curvature, sparse samples give long handles and loose curvature.
The construction is described at
http://scaledinnovation.com/analytics/splines/aboutSplines.html
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .. import config
from ..domain.geometry import Point

_logger = logging.getLogger(__name__)


class ControlHandles(NamedTuple):
    """Incoming and outgoing handle of one anchor."""
    handle_in: Point
    handle_out: Point


def get_control_points(p0: Point, p1: Point, p2: Point,
                       tension: float = config.DEFAULT_TENSION) -> ControlHandles:
    """Compute G1 handles for anchor p1 from its neighbours.

    Args:
        p0: Previous anchor.
        p1: Anchor receiving the handles.
        p2: Next anchor.
        tension: Handle length as a fraction of the neighbour distances.

    Returns:
        ControlHandles where handle_in precedes p1 and handle_out follows
        it along the p1 -> p2 direction. When all three points coincide
        both handles collapse onto p1.

    Example:
        >>> h = get_control_points(Point(0, 0), Point(10, 0), Point(20, 0))
        >>> h.handle_in, h.handle_out
        (Point(x=8.0, y=0.0), Point(x=12.0, y=0.0))
    """
    d_01 = p1.distance_to(p0)
    d_12 = p2.distance_to(p1)
    total = d_01 + d_12
    if total == 0:
        _logger.debug("Coincident anchor triple at (%s, %s)", p1.x, p1.y)
        return ControlHandles(p1, p1)

    f_in = tension * d_01 / total
    f_out = tension * d_12 / total

    p1p2 = p2 - p1
    return ControlHandles(p1 - p1p2 * f_in, p1 + p1p2 * f_out)
