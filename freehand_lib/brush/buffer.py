"""Point buffer holding the unconsumed tail of a stroke."""

from __future__ import annotations
from typing import Iterator, List, Optional

from ..domain.geometry import Point


class PointBuffer:
    """Sliding window of captured pointer samples.

    Points are appended on capture and evicted from the front once the
    renderer has consumed them, so at most four points are live at any
    render call. A sample equal to the last buffered point is dropped.
    """

    def __init__(self):
        self._points: List[Point] = []

    def append(self, point: Point) -> bool:
        """Add a sample, ignoring an exact repeat of the last one.

        Returns:
            True if the point was added, False if it was dropped.
        """
        if self._points and point == self._points[-1]:
            return False
        self._points.append(point)
        return True

    def seed(self, point: Point) -> None:
        """Start a stroke at point.

        The press position is held twice, once as the anchor and once as
        the first sample, so a click with no motion renders as a dot.
        """
        self._points[:] = [point, point]

    def reset(self) -> None:
        self._points.clear()

    def shift(self) -> Point:
        """Evict and return the front point."""
        return self._points.pop(0)

    def unshift(self, point: Point) -> None:
        """Insert point at the front."""
        self._points.insert(0, point)

    def replace(self, index: int, point: Point) -> None:
        self._points[index] = point

    @property
    def last(self) -> Optional[Point]:
        return self._points[-1] if self._points else None

    def to_list(self) -> List[Point]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, idx) -> Point:
        return self._points[idx]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)
