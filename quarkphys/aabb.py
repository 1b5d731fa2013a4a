"""Axis-aligned bounding boxes."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple, Union

from quarkphys.polygon import Point

PointLike = Union[Point, Sequence[float]]

_FAR = 9999999.0


def _to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


class AABB:
    """An axis-aligned box given by its minimum and maximum corners."""

    def __init__(self, min_pos: PointLike = (0.0, 0.0), max_pos: PointLike = (0.0, 0.0)) -> None:
        self.min_pos = _to_point(min_pos)
        self.max_pos = _to_point(max_pos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.min_pos == other.min_pos and self.max_pos == other.max_pos

    def __repr__(self) -> str:
        return f"AABB({self.min_pos!r}, {self.max_pos!r})"

    def set_min_max(self, min_pos: PointLike, max_pos: PointLike) -> AABB:
        """Replace both corners; returns the box itself."""
        self.min_pos = _to_point(min_pos)
        self.max_pos = _to_point(max_pos)
        return self

    @property
    def size(self) -> Point:
        return self.max_pos - self.min_pos

    @property
    def perimeter(self) -> float:
        size = self.size
        return 2.0 * (size.x + size.y)

    @property
    def area(self) -> float:
        size = self.size
        return size.x * size.y

    @property
    def volume(self) -> float:
        return self.area

    @property
    def center(self) -> Point:
        return (self.min_pos + self.max_pos) * 0.5

    def contains(self, other: AABB) -> bool:
        """True if other lies wholly within this box."""
        return (
            self.min_pos.x <= other.min_pos.x
            and self.min_pos.y <= other.min_pos.y
            and self.max_pos.x >= other.max_pos.x
            and self.max_pos.y >= other.max_pos.y
        )

    def combine(self, other: AABB) -> AABB:
        """Return the smallest box enclosing both boxes."""
        return AABB(
            Point(min(self.min_pos.x, other.min_pos.x), min(self.min_pos.y, other.min_pos.y)),
            Point(max(self.max_pos.x, other.max_pos.x), max(self.max_pos.y, other.max_pos.y)),
        )

    def fatten(self, amount: float) -> None:
        """Grow the box in place by amount on every side."""
        grow = Point(amount, amount)
        self.set_min_max(self.min_pos - grow, self.max_pos + grow)

    def fattened(self, amount: float) -> AABB:
        """Return a copy grown by amount on every side."""
        grow = Point(amount, amount)
        return AABB(self.min_pos - grow, self.max_pos + grow)

    def fattened_with_rate(self, rate: float) -> AABB:
        """Return a copy grown by rate times its size, split between both sides."""
        grow = self.size * rate * 0.5
        return AABB(self.min_pos - grow, self.max_pos + grow)

    def collides_with(self, other: AABB) -> bool:
        """True if the boxes overlap or touch."""
        return (
            self.max_pos.x >= other.min_pos.x
            and self.min_pos.x <= other.max_pos.x
            and self.max_pos.y >= other.min_pos.y
            and self.min_pos.y <= other.max_pos.y
        )

    @classmethod
    def from_circles(cls, circles: Iterable[Tuple[PointLike, float]]) -> AABB:
        """Bound a set of (position, radius) circles.

        Radii of 0.5 or less are treated as points.
        """
        min_x = min_y = _FAR
        max_x = max_y = -_FAR
        for position, radius in circles:
            p = _to_point(position)
            r = radius if radius > 0.5 else 0.0
            min_x = min(min_x, p.x - r)
            min_y = min(min_y, p.y - r)
            max_x = max(max_x, p.x + r)
            max_y = max(max_y, p.y + r)
        return cls(Point(min_x, min_y), Point(max_x, max_y))