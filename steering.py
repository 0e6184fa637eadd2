# ==================================================
#   STEERING ASSIST
# ==================================================
import logging
from config import (
    TURN_ARC, TAP_DEAD_ZONE, BEHIND_DOT, ARRIVE_DIST, DRIFT_DIST,
    MIN_HEADING_SQ, FALLBACK_HEADING, INITIAL_DRIFT,
)
from entities import Vec2
from utils import dist, dot, cross_sign, len_sq

logger = logging.getLogger(__name__)


class SteeringTarget:
    """Where the head is going now, and where it goes after that.

    ``queued`` is only set by an assisted turn and is promoted exactly once,
    when the head arrives at ``current``.
    """
    def __init__(self, current, queued=None):
        self.current = current
        self.queued = queued

    @classmethod
    def drifting_from(cls, eel):
        """Initial target: straight ahead of a freshly built eel."""
        return cls(Vec2(eel.head.x + eel.heading.x * INITIAL_DRIFT,
                        eel.head.y + eel.heading.y * INITIAL_DRIFT))


def handle_tap(eel, target, tx, ty):
    """Turn a tap into a direct target or a two-step assisted turn.

    Returns False when the tap was inside the dead zone and ignored.
    """
    head = eel.head
    d = dist(head.x, head.y, tx, ty)
    if d < TAP_DEAD_ZONE:
        logger.debug("tap (%.1f, %.1f) inside dead zone, ignored", tx, ty)
        return False

    want_x = (tx - head.x) / d
    want_y = (ty - head.y) / d
    cur_x, cur_y = eel.heading.x, eel.heading.y

    if dot(want_x, want_y, cur_x, cur_y) < BEHIND_DOT:
        # behind us: side-step first so the eel never reverses in place
        side = cross_sign(cur_x, cur_y, want_x, want_y) or 1
        perp_x = -cur_y * side
        perp_y = cur_x * side
        target.current = Vec2(head.x + perp_x * TURN_ARC, head.y + perp_y * TURN_ARC)
        target.queued = Vec2(tx, ty)
        logger.debug("assisted turn via (%.1f, %.1f)", target.current.x, target.current.y)
    else:
        target.current = Vec2(tx, ty)
        target.queued = None
    return True


def reacquire(eel, target):
    """Pick the next target once the head has reached the current one."""
    head = eel.head
    if dist(head.x, head.y, target.current.x, target.current.y) >= ARRIVE_DIST:
        return

    if target.queued is not None:
        target.current = target.queued
        target.queued = None
        return

    if len_sq(eel.heading.x, eel.heading.y) < MIN_HEADING_SQ:
        eel.heading = Vec2(*FALLBACK_HEADING)
    target.current = Vec2(target.current.x + eel.heading.x * DRIFT_DIST,
                          target.current.y + eel.heading.y * DRIFT_DIST)
