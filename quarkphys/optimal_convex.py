"""Optimal convex partitioning of a simple polygon (Keil-Snoeyink)."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Tuple

from quarkphys.polygon import PartitionError, Point, Polygon, in_cone, intersects, is_reflex

_UNREACHED = 2147483647

Diagonal = Tuple[int, int]


@dataclass
class _State:
    visible: bool = True
    weight: int = 0
    pairs: Deque[Diagonal] = field(default_factory=deque)


class _Solver:
    """Dynamic programming tables for one polygon."""

    def __init__(self, polygon: Polygon) -> None:
        self.points: List[Point] = list(polygon.points)
        n = len(self.points)
        self.n = n
        self.convex = [False] * n
        for i in range(1, n):
            self.convex[i] = not is_reflex(self._prev(i), self.points[i], self._next(i))
        self.states = [[_State() for _ in range(n)] for _ in range(n)]

    def _prev(self, i: int) -> Point:
        return self.points[(i - 1) % self.n]

    def _next(self, i: int) -> Point:
        return self.points[(i + 1) % self.n]

    def _in_cone_at(self, i: int, p: Point) -> bool:
        return in_cone(self._prev(i), self.points[i], self._next(i), p)

    def _visible(self, i: int, j: int) -> bool:
        p1 = self.points[i]
        p2 = self.points[j]
        if not self._in_cone_at(i, p2):
            return False
        if not self._in_cone_at(j, p1):
            return False
        for k in range(self.n):
            if intersects(p1, p2, self.points[k], self._next(k)):
                return False
        return True

    def initialise(self) -> None:
        n = self.n
        for i in range(n - 1):
            for j in range(i + 1, n):
                state = self.states[i][j]
                state.visible = True
                state.weight = 0 if j == i + 1 else _UNREACHED
                if j != i + 1:
                    state.visible = self._visible(i, j)
        for i in range(n - 2):
            state = self.states[i][i + 2]
            if state.visible:
                state.weight = 0
                state.pairs.append((i + 1, i + 1))
        self.states[0][n - 1].visible = True
        self.convex[0] = False  # by convention

    def _update_state(self, a: int, b: int, w: int, i: int, j: int) -> None:
        state = self.states[a][b]
        if w > state.weight:
            return
        pairs = state.pairs
        if w < state.weight:
            pairs.clear()
            pairs.appendleft((i, j))
            state.weight = w
            return
        if pairs and i <= pairs[0][0]:
            return
        while pairs and pairs[0][1] >= j:
            pairs.popleft()
        pairs.appendleft((i, j))

    def _type_a(self, i: int, j: int, k: int) -> None:
        states, pts = self.states, self.points
        if not states[i][j].visible:
            return
        top = j
        w = states[i][j].weight
        if k - j > 1:
            if not states[j][k].visible:
                return
            w += states[j][k].weight + 1
        if j - i > 1:
            last = None
            for diagonal in reversed(states[i][j].pairs):
                if not is_reflex(pts[diagonal[1]], pts[j], pts[k]):
                    last = diagonal
                else:
                    break
            if last is None:
                w += 1
            elif is_reflex(pts[k], pts[i], pts[last[0]]):
                w += 1
            else:
                top = last[0]
        self._update_state(i, k, w, top, j)

    def _type_b(self, i: int, j: int, k: int) -> None:
        states, pts = self.states, self.points
        if not states[j][k].visible:
            return
        top = j
        w = states[j][k].weight
        if j - i > 1:
            if not states[i][j].visible:
                return
            w += states[i][j].weight + 1
        if k - j > 1:
            pairs = states[j][k].pairs
            if pairs and not is_reflex(pts[i], pts[j], pts[pairs[0][0]]):
                last = pairs[0]
                for diagonal in pairs:
                    if not is_reflex(pts[i], pts[j], pts[diagonal[0]]):
                        last = diagonal
                    else:
                        break
                if is_reflex(pts[last[1]], pts[k], pts[i]):
                    w += 1
                else:
                    top = last[1]
            else:
                w += 1
        self._update_state(i, k, w, j, top)

    def solve(self) -> None:
        n, convex, states = self.n, self.convex, self.states
        for gap in range(3, n):
            for i in range(n - gap):
                if convex[i]:
                    continue
                k = i + gap
                if not states[i][k].visible:
                    continue
                if not convex[k]:
                    for j in range(i + 1, k):
                        self._type_a(i, j, k)
                else:
                    for j in range(i + 1, k - 1):
                        if convex[j]:
                            continue
                        self._type_a(i, j, k)
                    self._type_a(i, k - 1, k)
            for k in range(gap, n):
                if convex[k]:
                    continue
                i = k - gap
                if convex[i] and states[i][k].visible:
                    self._type_b(i, i + 1, k)
                    for j in range(i + 2, k):
                        if convex[j]:
                            continue
                        self._type_b(i, j, k)

    def recover(self) -> None:
        """Prune the pair lists down to one consistent solution."""
        states, convex = self.states, self.convex
        diagonals: Deque[Diagonal] = deque([(0, self.n - 1)])
        while diagonals:
            a, b = diagonals.popleft()
            if b - a <= 1:
                continue
            pairs = states[a][b].pairs
            if not pairs:
                raise PartitionError("no convex partition found")
            if not convex[a]:
                last = pairs[-1]
                j = last[1]
                diagonals.appendleft((j, b))
                if j - a > 1:
                    if last[0] != last[1]:
                        pairs2 = states[a][j].pairs
                        while True:
                            if not pairs2:
                                raise PartitionError("no convex partition found")
                            if last[0] != pairs2[-1][0]:
                                pairs2.pop()
                            else:
                                break
                    diagonals.appendleft((a, j))
            else:
                first = pairs[0]
                j = first[0]
                diagonals.appendleft((a, j))
                if b - j > 1:
                    if first[0] != first[1]:
                        pairs2 = states[j][b].pairs
                        while True:
                            if not pairs2:
                                raise PartitionError("no convex partition found")
                            if first[1] != pairs2[0][1]:
                                pairs2.popleft()
                            else:
                                break
                    diagonals.appendleft((j, b))

    def parts(self) -> List[Polygon]:
        states, convex = self.states, self.convex
        result: List[Polygon] = []
        diagonals: Deque[Diagonal] = deque([(0, self.n - 1)])
        while diagonals:
            diagonal = diagonals.popleft()
            if diagonal[1] - diagonal[0] <= 1:
                continue
            indices = [diagonal[0], diagonal[1]]
            pending: Deque[Diagonal] = deque([diagonal])
            while pending:
                a, b = pending.popleft()
                if b - a <= 1:
                    continue
                pairs = states[a][b].pairs
                if not pairs:
                    raise PartitionError("no convex partition found")
                ij_real = jk_real = True
                if not convex[a]:
                    last = pairs[-1]
                    j = last[1]
                    if last[0] != last[1]:
                        ij_real = False
                else:
                    first = pairs[0]
                    j = first[0]
                    if first[0] != first[1]:
                        jk_real = False
                (diagonals if ij_real else pending).append((a, j))
                (diagonals if jk_real else pending).append((j, b))
                indices.append(j)
            result.append(Polygon(self.points[i] for i in sorted(indices)))
        return result


def convex_partition_opt(polygon: Polygon) -> List[Polygon]:
    """Partition a counter-clockwise polygon into the fewest convex parts.

    Runs in O(n^3) time. Raises PartitionError if the polygon is invalid or
    no partition is found; a bare triangle is reported as a failure, since
    its only candidate diagonal is an edge.
    """
    if not polygon.is_valid():
        raise PartitionError("a polygon needs at least three points")
    solver = _Solver(polygon)
    solver.initialise()
    solver.solve()
    solver.recover()
    return solver.parts()