"""Points, polygons and the geometric predicates used by the partition algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Sequence, Union


class PartitionError(Exception):
    """Raised when a polygon cannot be partitioned or triangulated."""


class Orientation(IntEnum):
    """Winding order of a polygon."""

    CW = -1
    NONE = 0
    CCW = 1


class VertexType(IntEnum):
    """Vertex classification used by monotone partitioning."""

    REGULAR = 0
    START = 1
    END = 2
    SPLIT = 3
    MERGE = 4


@dataclass(frozen=True, eq=False)
class Point:
    """A 2D point carrying an optional user identifier.

    The identifier is copied along with the point but takes no part in
    comparisons or arithmetic.
    """

    x: float
    y: float
    id: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> Point:
        return Point(self.x / factor, self.y / factor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))


PointLike = Union[Point, Sequence[float]]


def _to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


class Polygon:
    """A polygon as an ordered list of points with a hole flag."""

    def __init__(self, points: Iterable[PointLike] = (), hole: bool = False) -> None:
        self.points: list[Point] = [_to_point(p) for p in points]
        self.hole = hole

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __setitem__(self, index: int, point: PointLike) -> None:
        self.points[index] = _to_point(point)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.hole == other.hole and self.points == other.points

    def __repr__(self) -> str:
        return f"Polygon({self.points!r}, hole={self.hole!r})"

    @classmethod
    def triangle(cls, p1: PointLike, p2: PointLike, p3: PointLike) -> Polygon:
        """Create a triangle from three points."""
        return cls([p1, p2, p3])

    def is_valid(self) -> bool:
        """A polygon needs at least three points."""
        return len(self.points) >= 3

    def orientation(self) -> Orientation:
        """Return the winding order given by the signed area."""
        area = 0.0
        count = len(self.points)
        for i, p in enumerate(self.points):
            q = self.points[(i + 1) % count]
            area += p.x * q.y - p.y * q.x
        if area > 0:
            return Orientation.CCW
        if area < 0:
            return Orientation.CW
        return Orientation.NONE

    def set_orientation(self, orientation: Orientation) -> None:
        """Reverse the points if the polygon has a different, measurable winding."""
        current = self.orientation()
        if current != Orientation.NONE and current != orientation:
            self.invert()

    def invert(self) -> None:
        """Reverse the order of the vertices."""
        self.points.reverse()


def _cross(p1: Point, p2: Point, p3: Point) -> float:
    return (p3.y - p1.y) * (p2.x - p1.x) - (p3.x - p1.x) * (p2.y - p1.y)


def is_convex(p1: Point, p2: Point, p3: Point) -> bool:
    """True if p1, p2, p3 make a strict left turn."""
    return _cross(p1, p2, p3) > 0


def is_reflex(p1: Point, p2: Point, p3: Point) -> bool:
    """True if p1, p2, p3 make a strict right turn."""
    return _cross(p1, p2, p3) < 0


def is_inside(p1: Point, p2: Point, p3: Point, p: Point) -> bool:
    """True if p lies inside the counter-clockwise triangle p1, p2, p3."""
    if is_convex(p1, p, p2):
        return False
    if is_convex(p2, p, p3):
        return False
    if is_convex(p3, p, p1):
        return False
    return True


def in_cone(p1: Point, p2: Point, p3: Point, p: Point) -> bool:
    """True if p lies in the cone at p2 spanned by the edges to p1 and p3."""
    if is_convex(p1, p2, p3):
        return is_convex(p1, p2, p) and is_convex(p2, p3, p)
    return is_convex(p1, p2, p) or is_convex(p2, p3, p)


def intersects(p11: Point, p12: Point, p21: Point, p22: Point) -> bool:
    """True if segments p11-p12 and p21-p22 cross; shared endpoints do not count."""
    if p11 == p21 or p11 == p22 or p12 == p21 or p12 == p22:
        return False

    v1ort = Point(p12.y - p11.y, p11.x - p12.x)
    v2ort = Point(p22.y - p21.y, p21.x - p22.x)

    def dot(a: Point, b: Point) -> float:
        return a.x * b.x + a.y * b.y

    dot21 = dot(p21 - p11, v1ort)
    dot22 = dot(p22 - p11, v1ort)
    dot11 = dot(p11 - p21, v2ort)
    dot12 = dot(p12 - p21, v2ort)

    if dot11 * dot12 > 0:
        return False
    if dot21 * dot22 > 0:
        return False
    return True


def normalize(p: Point) -> Point:
    """Return p scaled to unit length, or the origin for a zero vector."""
    n = math.sqrt(p.x * p.x + p.y * p.y)
    if n != 0:
        return p / n
    return Point(0.0, 0.0)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def below(p1: Point, p2: Point) -> bool:
    """True if p1 comes below p2: smaller y, or equal y and smaller x."""
    if p1.y < p2.y:
        return True
    return p1.y == p2.y and p1.x < p2.x