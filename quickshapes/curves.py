"""Thick lines, bezier connection curves and spectrum shapes as triangle-strip vertices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from quickshapes.color import Color

Point = tuple[float, float]

MIN_HANDLE_LENGTH = 50
MAX_HANDLE_LENGTH = 80
MIN_SEGMENTS = 16.0
MAX_SEGMENTS = 50.0
PIXELS_PER_SEGMENT = 25


def _add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def _sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def _scale(a: Point, factor: float) -> Point:
    return (a[0] * factor, a[1] * factor)


def normal_from_tangent(tangent: Point) -> Point:
    """Unit normal of a tangent vector; (0, 0) for a zero tangent."""
    tx, ty = tangent
    if abs(tx) + abs(ty) == 0:
        return (0.0, 0.0)
    nx, ny = ty, -tx
    length = math.hypot(nx, ny)
    return (nx / length, ny / length)


def bezier_point(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """Point at parameter t on the cubic bezier curve p0..p3."""
    u = 1 - t
    terms = (
        _scale(p0, u * u * u),
        _scale(p1, 3 * u * u * t),
        _scale(p2, 3 * u * t * t),
        _scale(p3, t * t * t),
    )
    return (sum(p[0] for p in terms), sum(p[1] for p in terms))


def bezier_tangent(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """Derivative of the cubic bezier curve p0..p3 at parameter t."""
    u = 1 - t
    tt = t * t
    uu = u * u
    terms = (
        _scale(p0, -3 * uu),
        _scale(p1, 3 * (uu - 2 * t * u)),
        _scale(p2, 3 * (-tt + u * 2 * t)),
        _scale(p3, 3 * tt),
    )
    return (sum(p[0] for p in terms), sum(p[1] for p in terms))


def connection_line_vertices(start: Point, end: Point, line_width: float) -> list[Point]:
    """Triangle-strip vertices of a horizontal-handled bezier from start to end."""
    handle = max(MIN_HANDLE_LENGTH, min(int(end[0] - start[0]), MAX_HANDLE_LENGTH))
    p1 = (start[0] + handle, start[1])
    p2 = (end[0] - handle, end[1])
    segments = int(
        max(MIN_SEGMENTS, min(abs(end[1] - start[1]) / PIXELS_PER_SEGMENT, MAX_SEGMENTS))
    )
    offset = line_width / 2
    vertices: list[Point] = []
    for i in range(segments):
        t = i / (segments - 1)
        pos = bezier_point(t, start, p1, p2, end)
        normal = normal_from_tangent(bezier_tangent(t, start, p1, p2, end))
        vertices.append(_sub(pos, _scale(normal, offset)))
        vertices.append(_add(pos, _scale(normal, offset)))
    return vertices


@dataclass
class LineItem:
    """A straight line of a given width between (x1, y1) and (x2, y2)."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    color: Color = field(default_factory=lambda: Color.from_name("blue"))
    line_width: float = 1.0

    def vertices(self) -> list[Point]:
        """The four triangle-strip corners of the line."""
        begin = (self.x1, self.y1)
        end = (self.x2, self.y2)
        normal = normal_from_tangent(_sub(end, begin))
        shift = _scale(normal, self.line_width / 2.0)
        return [_add(begin, shift), _sub(begin, shift), _add(end, shift), _sub(end, shift)]


@dataclass
class NodeConnectionLines:
    """Bezier curves from the right middle of an item to connected nodes."""

    width: float = 0.0
    height: float = 0.0
    color: Color = field(default_factory=lambda: Color.from_name("blue"))
    line_width: float = 1.0

    @property
    def start(self) -> Point:
        return (self.width, self.height / 2)

    def geometries(self, targets: Sequence[Optional[Point]]) -> list[list[Point]]:
        """One vertex list per target, in item coordinates; empty for missing targets."""
        return [
            [] if target is None
            else connection_line_vertices(self.start, target, self.line_width)
            for target in targets
        ]


@dataclass
class SpectrumItem:
    """A filled spectrum graph with a white outline; values are in [0, 1]."""

    width: float = 0.0
    height: float = 0.0
    points: list[float] = field(default_factory=list)
    color: Color = field(default_factory=lambda: Color.from_name("blue"))
    outline_color: Color = field(default_factory=lambda: Color.from_name("#fff"))
    line_width: float = 3.0

    def _xy(self, index: int) -> Point:
        count = len(self.points)
        return (
            self.width * (index / (count - 1)),
            self.height * (1 - self.points[index]),
        )

    def fill_vertices(self) -> list[Point]:
        """Triangle strip from the baseline to each value; empty with fewer than 2 points."""
        if len(self.points) < 2:
            return []
        vertices: list[Point] = []
        for index in range(len(self.points)):
            x, y = self._xy(index)
            vertices.extend([(x, self.height), (x, y)])
        return vertices

    def outline_vertices(self) -> list[Point]:
        """Four outline vertices per value; empty with fewer than 2 points."""
        count = len(self.points)
        if count < 2:
            return []
        offset = self.line_width / 2.0
        step = self.width / count
        vertices: list[Point] = []
        for index, value in enumerate(self.points):
            x, y = self._xy(index)
            pos = (x, y - offset)
            prev_normal: Point = (0.0, -1.0)
            next_normal: Point = (0.0, -1.0)
            if 0 < index < count - 1:
                prev_slope = (value - self.points[index - 1]) * self.height
                next_slope = (self.points[index + 1] - value) * self.height
                prev_normal = normal_from_tangent((step, -prev_slope))
                next_normal = normal_from_tangent((step, -next_slope))
            vertices.extend([
                _add(pos, _scale(prev_normal, offset)),
                _sub(pos, _scale(prev_normal, offset)),
                _add(pos, _scale(next_normal, offset)),
                _sub(pos, _scale(next_normal, offset)),
            ])
        return vertices