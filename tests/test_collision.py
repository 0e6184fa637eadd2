"""Proximity and collision tests."""
from __future__ import annotations

import pytest

from collision import cut_tails, eat_prey, hits_wall, hook_on_body, hook_on_head, self_hit
from config import CRAB, FISH, HEIGHT, HOOK_TIP_OFFSET, SEGMENT_SPACING, WIDTH
from eel import Eel
from entities import Prey, Vec2
from hook import REELING, Hook


def _straight_eel(segments=5):
    """Head at (100, 100), body hanging straight down at exact spacing."""
    body = [Vec2(100.0, 100.0 + SEGMENT_SPACING * (i + 1)) for i in range(segments)]
    return Eel(Vec2(100.0, 100.0), Vec2(0.0, -1.0), body)


def _hook_with_tip_at(x, y):
    hook = Hook(x, y - HOOK_TIP_OFFSET)
    hook.marker_y = y - HOOK_TIP_OFFSET
    return hook


def test_wall_bounds_are_inclusive():
    assert not hits_wall(Vec2(0, 0))
    assert not hits_wall(Vec2(WIDTH, HEIGHT))
    assert hits_wall(Vec2(-0.1, 10))
    assert hits_wall(Vec2(10, HEIGHT + 0.1))


@pytest.mark.parametrize("kind, reward", [(FISH, 1), (CRAB, 3)])
def test_prey_in_range_is_eaten(kind, reward):
    eel = _straight_eel()
    prey = [Prey(110.0, 100.0, kind)]
    eaten = eat_prey(eel, prey)
    assert len(eaten) == 1
    assert eel.pending_growth == reward
    assert prey == []
    assert not eaten[0].alive


def test_simultaneous_captures_all_apply():
    eel = _straight_eel()
    far = Prey(300.0, 400.0, FISH)
    prey = [Prey(90.0, 100.0, FISH), far, Prey(100.0, 112.0, CRAB)]
    eat_prey(eel, prey)
    assert eel.pending_growth == 4
    assert prey == [far]


def test_prey_outside_radius_survives():
    eel = _straight_eel()
    prey = [Prey(117.0, 100.0, FISH)]
    assert eat_prey(eel, prey) == []
    assert len(prey) == 1


def test_first_two_segments_never_self_collide():
    eel = Eel(Vec2(0, 0), Vec2(1, 0), [Vec2(0, 0), Vec2(1, 1), Vec2(100, 100)])
    assert self_hit(eel) is None


def test_third_segment_can_self_collide():
    eel = Eel(Vec2(0, 0), Vec2(1, 0), [Vec2(28, 0), Vec2(28, 28), Vec2(10, 10)])
    assert self_hit(eel) == 2


def test_hook_tip_on_head():
    eel = _straight_eel()
    hook = _hook_with_tip_at(105.0, 105.0)
    assert hook_on_head(eel, [hook]) is hook
    hook.start_reel()
    assert hook_on_head(eel, [hook]) is None


def test_cut_at_segment_two_of_five():
    eel = _straight_eel(5)
    hook = _hook_with_tip_at(100.0, eel.body[2].y)
    cuts = cut_tails(eel, [hook])
    assert cuts == [(hook, 3)]
    assert eel.length == 2
    assert len(hook.cargo) == 3
    assert hook.state == REELING
    assert hook.cargo == [(0.0, 0.0), (0.0, SEGMENT_SPACING), (0.0, 2 * SEGMENT_SPACING)]


def test_tail_segment_is_never_cut():
    eel = _straight_eel(5)
    hook = _hook_with_tip_at(100.0, eel.body[4].y)
    assert hook_on_body(eel, hook) is None
    assert cut_tails(eel, [hook]) == []
    assert eel.length == 5


def test_reeling_hook_cannot_cut():
    eel = _straight_eel(5)
    hook = _hook_with_tip_at(100.0, eel.body[2].y)
    hook.start_reel()
    assert cut_tails(eel, [hook]) == []


def test_first_hook_in_order_claims_overlapping_tail():
    eel = _straight_eel(5)
    first = _hook_with_tip_at(100.0, eel.body[2].y)
    second = _hook_with_tip_at(100.0, eel.body[3].y)
    cuts = cut_tails(eel, [first, second])
    assert cuts == [(first, 3)]
    assert second.cargo is None
    assert second.catchable


def test_hook_order_decides_which_cut_happens():
    eel = _straight_eel(5)
    first = _hook_with_tip_at(100.0, eel.body[3].y)
    second = _hook_with_tip_at(100.0, eel.body[2].y)
    cuts = cut_tails(eel, [first, second])
    assert cuts == [(first, 2)]
    assert eel.length == 3
    assert second.catchable


def test_snag_on_first_segment_keeps_one_segment():
    eel = _straight_eel(2)
    hook = _hook_with_tip_at(100.0, eel.body[0].y)
    cuts = cut_tails(eel, [hook])
    assert cuts == [(hook, 1)]
    assert eel.length == 1
    assert eel.body[0].y == 100.0 + SEGMENT_SPACING
