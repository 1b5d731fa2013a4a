from quarkphys.aabb import AABB
from quarkphys.broadphase import BroadPhase


class Body:
    def __init__(self, name, lo, hi):
        self.name = name
        self.aabb = AABB(lo, hi)


def test_base_finds_no_pairs():
    a = Body("a", (0, 0), (1, 1))
    b = Body("b", (0, 0), (1, 1))
    bp = BroadPhase([a, b])
    bp.insert(a)
    bp.insert(b)
    assert bp.get_pairs() == set()


def test_bodies_kept_by_reference():
    bodies = []
    bp = BroadPhase(bodies)
    bodies.append(Body("a", (0, 0), (1, 1)))
    assert len(bp.bodies) == 1


def test_default_filter_allows_everything():
    a = Body("a", (0, 0), (1, 1))
    b = Body("b", (5, 5), (6, 6))
    assert BroadPhase([a, b]).bodies_can_collide(a, b) is True


def test_custom_filter_is_used():
    a = Body("a", (0, 0), (1, 1))
    b = Body("b", (0, 0), (1, 1))
    bp = BroadPhase([a, b], can_collide=lambda x, y: x.name == y.name)
    assert bp.bodies_can_collide(a, b) is False
    assert bp.bodies_can_collide(a, a) is True


def test_remove_and_clear_keep_no_pairs():
    a = Body("a", (0, 0), (1, 1))
    bp = BroadPhase([a])
    bp.remove(a)
    bp.clear()
    assert bp.get_pairs() == set()