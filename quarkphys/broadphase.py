"""Base broad phase: the interface that finds candidate pairs of colliding bodies."""

from __future__ import annotations

from typing import Any, Callable, Hashable, MutableSequence, Optional, Set, Tuple

Body = Any
BodyPair = Tuple[Body, Body]
CanCollide = Callable[[Body, Body], bool]


def _always(body_a: Body, body_b: Body) -> bool:
    return True


class BroadPhase:
    """Keeps the world's bodies and reports pairs that may collide.

    Bodies are any hashable objects with an ``aabb`` attribute holding an
    :class:`~quarkphys.aabb.AABB`. The base class finds no pairs; subclasses
    supply a real search.
    """

    def __init__(
        self,
        bodies: Optional[MutableSequence[Body]] = None,
        can_collide: Optional[CanCollide] = None,
    ) -> None:
        self.bodies: MutableSequence[Body] = bodies if bodies is not None else []
        self._can_collide: CanCollide = can_collide or _always
        self._pairs: dict[frozenset, BodyPair] = {}

    def bodies_can_collide(self, body_a: Body, body_b: Body) -> bool:
        """Ask the collision filter whether two bodies may collide."""
        return bool(self._can_collide(body_a, body_b))

    def _has_pair(self, body_a: Hashable, body_b: Hashable) -> bool:
        return frozenset((body_a, body_b)) in self._pairs

    def _add_pair(self, body_a: Body, body_b: Body) -> None:
        self._pairs.setdefault(frozenset((body_a, body_b)), (body_a, body_b))

    def clear(self) -> None:
        """Forget any cached state."""

    def get_pairs(self) -> Set[BodyPair]:
        """Return the candidate pairs; each unordered pair appears once."""
        return set(self._pairs.values())

    def insert(self, body: Body) -> None:
        """Add or update a body."""

    def remove(self, body: Body) -> None:
        """Remove a body."""