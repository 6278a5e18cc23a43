"""Geometric value objects for stroke capture."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Tuple
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point.

    Equality is exact on both coordinates, which is what the point buffer
    relies on to drop repeated pointer samples.
    """
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def shifted_x(self, dx: float) -> Point:
        """Copy of this point moved horizontally by dx."""
        return Point(self.x + dx, self.y)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> Point:
        """Create from tuple."""
        return cls(t[0], t[1])

    @classmethod
    def from_pointer(cls, pointer: Any) -> Point:
        """Create from a host pointer position.

        Accepts a Point, an (x, y) sequence, a mapping with 'x' and 'y'
        keys, or any object exposing x and y attributes.
        """
        if isinstance(pointer, Point):
            return pointer
        if isinstance(pointer, dict):
            return cls(float(pointer['x']), float(pointer['y']))
        if hasattr(pointer, 'x') and hasattr(pointer, 'y'):
            return cls(float(pointer.x), float(pointer.y))
        x, y = pointer
        return cls(float(x), float(y))


@dataclass(frozen=True)
class BBox:
    """Immutable bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Point:
        return Point(
            (self.x_min + self.x_max) / 2,
            (self.y_min + self.y_max) / 2
        )

    @property
    def top_left(self) -> Point:
        return Point(self.x_min, self.y_min)

    @property
    def bottom_right(self) -> Point:
        return Point(self.x_max, self.y_max)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Convert to tuple for compatibility."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BBox:
        """Create bounding box containing all points."""
        points = list(points)
        if not points:
            return cls(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))
