"""Spatial hashing broad phase with per-cell sweep and prune."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterator, MutableSequence, Optional, Set, Tuple

from quarkphys.broadphase import Body, BodyPair, BroadPhase, CanCollide


@dataclass(frozen=True)
class CellRange:
    """Inclusive range of grid cells covered by a box."""

    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for x in range(self.min_x, self.max_x + 1):
            for y in range(self.min_y, self.max_y + 1):
                yield (x, y)


def _sort_key(body: Body) -> Tuple[float, float]:
    aabb = body.aabb
    return (aabb.min_pos.x, -aabb.max_pos.y)


class SpatialHashing(BroadPhase):
    """Buckets bodies into square cells and tests pairs sharing a cell."""

    def __init__(
        self,
        bodies: Optional[MutableSequence[Body]] = None,
        cell_size: float = 128.0,
        can_collide: Optional[CanCollide] = None,
    ) -> None:
        super().__init__(bodies, can_collide)
        self._cells: defaultdict[Tuple[int, int], list] = defaultdict(list)
        self._body_cells: dict = {}
        self.cell_size = 128.0
        self._factor = 1.0 / self.cell_size
        self.set_cell_size(cell_size)

    def clear(self) -> None:
        """Drop every body from the grid and forget the pairs."""
        self._body_cells.clear()
        self._cells.clear()
        self._pairs.clear()

    def _cell_range(self, body: Body) -> CellRange:
        aabb = body.aabb
        f = self._factor
        return CellRange(
            math.floor(aabb.min_pos.x * f),
            math.floor(aabb.min_pos.y * f),
            math.floor(aabb.max_pos.x * f),
            math.floor(aabb.max_pos.y * f),
        )

    def _remove_from_cells(self, body: Body, cells: CellRange) -> None:
        for key in cells:
            bucket = self._cells[key]
            if body in bucket:
                bucket.remove(body)

    def insert(self, body: Body) -> None:
        """Place a body in the cells its box covers, moving it if it changed."""
        cells = self._cell_range(body)
        old = self._body_cells.get(body)
        if old is not None:
            if old == cells:
                return
            self._remove_from_cells(body, old)
        self._body_cells[body] = cells
        for key in cells:
            self._cells[key].append(body)

    def remove(self, body: Body) -> None:
        """Take a body out of the grid; unknown bodies are ignored."""
        old = self._body_cells.pop(body, None)
        if old is not None:
            self._remove_from_cells(body, old)

    def set_cell_size(self, size: float) -> None:
        """Change the cell size; this empties the grid."""
        self.clear()
        self.cell_size = size
        self._factor = 1.0 / size

    def get_pairs(self) -> Set[BodyPair]:
        """Return pairs of bodies whose boxes overlap within a shared cell."""
        self._pairs.clear()
        for bucket in self._cells.values():
            if len(bucket) <= 1:
                continue
            bucket.sort(key=_sort_key)
            for i, body_a in enumerate(bucket[:-1]):
                box_a = body_a.aabb
                for body_b in bucket[i + 1:]:
                    if self._has_pair(body_a, body_b):
                        continue
                    if not self.bodies_can_collide(body_a, body_b):
                        continue
                    box_b = body_b.aabb
                    if box_a.max_pos.x < box_b.min_pos.x:
                        break
                    if box_a.min_pos.y <= box_b.max_pos.y and box_a.max_pos.y >= box_b.min_pos.y:
                        self._add_pair(body_a, body_b)
        return super().get_pairs()