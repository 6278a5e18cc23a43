"""Path description commands.

A stroke is recorded as an ordered list of drawing commands, one entry for
every move, line or curve sent to the preview surface. The same list is the
source for the committed vector path, so the preview and the final object
always describe identical geometry.

The module provides the following classes:
    MoveTo: Start a new sub-path at a point.
    LineTo: Straight segment to a point.
    CurveTo: Cubic Bezier segment with two handles.
    QuadTo: Quadratic Bezier segment (parsed from text only).
    PathDescription: Ordered command log for one stroke.
    PathSyntaxError: Raised when path text cannot be parsed.

Text form, used at the interchange boundary only::

    M x y
    L x y
    C h1x h1y, h2x h2y, x y

Example usage::

    from freehand_lib.domain.path import PathDescription, MoveTo, LineTo
    from freehand_lib.domain.geometry import Point

    path = PathDescription()
    path.append(MoveTo(Point(0, 0)))
    path.append(LineTo(Point(10, 5)))
    path.to_text()  # 'M 0 0 L 10 5'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, List, Tuple, Union

from .geometry import Point


class PathSyntaxError(ValueError):
    """Path text could not be parsed into commands."""


def format_number(value: float) -> str:
    """Format a coordinate in its shortest exact form.

    Integral values are printed without a decimal point so that a stroke
    captured on whole pixels reads 'M 5 5' rather than 'M 5.0 5.0'.

    Example:
        >>> format_number(5.0)
        '5'
        >>> format_number(4.99)
        '4.99'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _pair(point: Point) -> str:
    return f'{format_number(point.x)} {format_number(point.y)}'


@dataclass(frozen=True)
class MoveTo:
    """Start a new sub-path at point."""
    point: Point

    letter: ClassVar[str] = 'M'

    @property
    def end(self) -> Point:
        return self.point

    def points(self) -> Tuple[Point, ...]:
        return (self.point,)

    def to_text(self) -> str:
        return f'M {_pair(self.point)}'


@dataclass(frozen=True)
class LineTo:
    """Straight segment from the current point to point."""
    point: Point

    letter: ClassVar[str] = 'L'

    @property
    def end(self) -> Point:
        return self.point

    def points(self) -> Tuple[Point, ...]:
        return (self.point,)

    def to_text(self) -> str:
        return f'L {_pair(self.point)}'


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bezier from the current point to end.

    Attributes:
        handle_1: Outgoing handle of the segment start.
        handle_2: Incoming handle of the segment end.
        end: Segment end point.
    """
    handle_1: Point
    handle_2: Point
    end: Point

    letter: ClassVar[str] = 'C'

    def points(self) -> Tuple[Point, ...]:
        return (self.handle_1, self.handle_2, self.end)

    def to_text(self) -> str:
        return f'C {_pair(self.handle_1)}, {_pair(self.handle_2)}, {_pair(self.end)}'


@dataclass(frozen=True)
class QuadTo:
    """Quadratic Bezier from the current point to end."""
    handle: Point
    end: Point

    letter: ClassVar[str] = 'Q'

    def points(self) -> Tuple[Point, ...]:
        return (self.handle, self.end)

    def to_cubic(self, start: Point) -> CurveTo:
        """Equivalent cubic segment when starting at start."""
        return CurveTo(
            start + (self.handle - start) * (2 / 3),
            self.end + (self.handle - self.end) * (2 / 3),
            self.end,
        )

    def to_text(self) -> str:
        return f'Q {_pair(self.handle)}, {_pair(self.end)}'


PathCommand = Union[MoveTo, LineTo, CurveTo, QuadTo]

# Operand count per command letter
_ARITY = {'M': 2, 'L': 2, 'C': 6, 'Q': 4}

_TOKEN_RE = re.compile(
    r'(?P<cmd>[A-Za-z])'
    r'|(?P<num>[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)'
    r'|(?P<sep>[\s,]+)'
    r'|(?P<bad>.)'
)


def _build(letter: str, values: List[float]) -> PathCommand:
    pts = [Point(values[i], values[i + 1]) for i in range(0, len(values), 2)]
    if letter == 'M':
        return MoveTo(pts[0])
    if letter == 'L':
        return LineTo(pts[0])
    if letter == 'C':
        return CurveTo(pts[0], pts[1], pts[2])
    return QuadTo(pts[0], pts[1])


class PathDescription:
    """Ordered command log for one stroke.

    Appended to by the incremental renderer while the stroke is drawn and
    read once by the finalizer. Equality compares the command sequences.
    """

    def __init__(self, commands: Iterable[PathCommand] = ()):
        self._commands: List[PathCommand] = list(commands)

    def append(self, command: PathCommand) -> None:
        self._commands.append(command)

    def clear(self) -> None:
        self._commands.clear()

    def copy(self) -> PathDescription:
        return PathDescription(self._commands)

    @property
    def commands(self) -> Tuple[PathCommand, ...]:
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self._commands)

    def __getitem__(self, idx) -> PathCommand:
        return self._commands[idx]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PathDescription):
            return NotImplemented
        return self._commands == other._commands

    def __repr__(self) -> str:
        return f'PathDescription({self.to_text()!r})'

    def __str__(self) -> str:
        return self.to_text()

    def points(self) -> List[Point]:
        """All anchor and handle points in command order."""
        result = []
        for command in self._commands:
            result.extend(command.points())
        return result

    def is_empty_stroke(self) -> bool:
        """True for a description with no real geometry.

        Either nothing was recorded, or the description is the canonical
        zero-extent marker at the origin.
        """
        return not self._commands or tuple(self._commands) == EMPTY_STROKE_COMMANDS

    def to_text(self) -> str:
        """Join the commands into a single path string."""
        return ' '.join(command.to_text() for command in self._commands)

    @classmethod
    def parse(cls, text: str) -> PathDescription:
        """Parse absolute M/L/C/Q path text.

        Extra operand groups repeat the previous command, except after a
        move where they continue as lines.

        Raises:
            PathSyntaxError: On unknown commands, stray characters, or a
                command with a wrong number of operands.
        """
        commands: List[PathCommand] = []
        letter = None
        values: List[float] = []

        def flush():
            nonlocal letter
            if letter is None:
                if values:
                    raise PathSyntaxError(f'Coordinates before first command in {text!r}')
                return
            arity = _ARITY[letter]
            if not values or len(values) % arity:
                raise PathSyntaxError(
                    f'{letter} expects a multiple of {arity} numbers, got {len(values)}')
            current = letter
            for start in range(0, len(values), arity):
                commands.append(_build(current, values[start:start + arity]))
                if current == 'M':
                    current = 'L'
            values.clear()

        for match in _TOKEN_RE.finditer(text):
            if match.group('bad') is not None:
                raise PathSyntaxError(f'Unexpected character {match.group("bad")!r} in path')
            if match.group('cmd') is not None:
                cmd = match.group('cmd')
                if cmd not in _ARITY:
                    raise PathSyntaxError(f'Unsupported path command {cmd!r}')
                flush()
                letter = cmd
            elif match.group('num') is not None:
                values.append(float(match.group('num')))
        flush()
        return cls(commands)


_ORIGIN = Point(0, 0)

# Zero-extent move + curve + line at the origin, never committed
EMPTY_STROKE_COMMANDS: Tuple[PathCommand, ...] = (
    MoveTo(_ORIGIN),
    CurveTo(_ORIGIN, _ORIGIN, _ORIGIN),
    LineTo(_ORIGIN),
)
