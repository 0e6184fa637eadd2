"""Steering assist and target reacquisition tests."""
from __future__ import annotations

import pytest

from config import DRIFT_DIST, INITIAL_DRIFT, TURN_ARC
from eel import Eel, make_eel
from entities import Vec2
from steering import SteeringTarget, handle_tap, reacquire


def _eel_at(x, y, hx=0.0, hy=1.0):
    return Eel(Vec2(x, y), Vec2(hx, hy))


def test_initial_target_is_ahead_of_new_eel():
    eel = make_eel()
    target = SteeringTarget.drifting_from(eel)
    assert target.current.as_tuple() == (eel.head.x, eel.head.y + INITIAL_DRIFT)
    assert target.queued is None


def test_tap_inside_dead_zone_is_ignored():
    eel = _eel_at(160, 171)
    target = SteeringTarget(Vec2(160, 371))
    assert not handle_tap(eel, target, 170, 180)
    assert target.current.as_tuple() == (160, 371)


def test_forward_tap_sets_target_directly():
    eel = _eel_at(160, 171)
    target = SteeringTarget(Vec2(0, 0), queued=Vec2(1, 1))
    assert handle_tap(eel, target, 200, 300)
    assert target.current.as_tuple() == (200, 300)
    assert target.queued is None


def test_tap_straight_behind_turns_left():
    eel = _eel_at(160, 171)
    target = SteeringTarget(Vec2(160, 371))
    handle_tap(eel, target, 160, 50)
    assert target.current.as_tuple() == pytest.approx((160 - TURN_ARC, 171))
    assert target.queued.as_tuple() == (160, 50)


def test_tap_behind_on_right_turns_right():
    eel = _eel_at(160, 171)
    target = SteeringTarget(Vec2(160, 371))
    handle_tap(eel, target, 200, 100)
    assert target.current.as_tuple() == pytest.approx((160 + TURN_ARC, 171))
    assert target.queued.as_tuple() == (200, 100)


def test_queued_target_promoted_once_on_arrival():
    eel = _eel_at(160, 171)
    target = SteeringTarget(Vec2(160, 371))
    handle_tap(eel, target, 160, 50)

    reacquire(eel, target)
    assert target.queued is not None

    eel.head = Vec2(100.5, 171)
    reacquire(eel, target)
    assert target.current.as_tuple() == (160, 50)
    assert target.queued is None

    reacquire(eel, target)
    assert target.current.as_tuple() == (160, 50)


def test_arrival_without_queue_drifts_ahead():
    eel = _eel_at(50, 50, 1.0, 0.0)
    target = SteeringTarget(Vec2(51, 50))
    reacquire(eel, target)
    assert target.current.as_tuple() == (51 + DRIFT_DIST, 50)


def test_zero_heading_falls_back_to_up():
    eel = _eel_at(50, 50, 0.0, 0.0)
    target = SteeringTarget(Vec2(50, 50))
    reacquire(eel, target)
    assert eel.heading.as_tuple() == (0.0, -1.0)
    assert target.current.as_tuple() == (50, 50 - DRIFT_DIST)
