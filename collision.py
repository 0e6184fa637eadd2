# ==================================================
#   PROXIMITY / COLLISION
# ==================================================
import logging
from config import (
    WIDTH, HEIGHT, PREY_RADIUS, SELF_RADIUS, HOOK_RADIUS, SELF_SAFE_SEGMENTS,
)
from utils import within_radius

logger = logging.getLogger(__name__)


def hits_wall(head):
    """True when the head has left the arena rectangle."""
    return not (0 <= head.x <= WIDTH and 0 <= head.y <= HEIGHT)


def eat_prey(eel, prey):
    """Consume every live prey touching the head. Returns what was eaten."""
    hx, hy = eel.head.x, eel.head.y
    eaten = []
    for p in prey:
        if p.alive and within_radius(hx, hy, p.x, p.y, PREY_RADIUS):
            p.alive = False
            eel.grow(p.reward)
            eaten.append(p)
    if eaten:
        prey[:] = [p for p in prey if p.alive]
    return eaten


def self_hit(eel):
    """Index of the first body segment the head runs into, or None.

    The two segments right behind the head are always close to it and are
    skipped.
    """
    hx, hy = eel.head.x, eel.head.y
    for i in range(SELF_SAFE_SEGMENTS, len(eel.body)):
        seg = eel.body[i]
        if within_radius(hx, hy, seg.x, seg.y, SELF_RADIUS):
            return i
    return None


def hook_on_head(eel, hooks):
    """First catchable hook whose tip touches the head, or None."""
    hx, hy = eel.head.x, eel.head.y
    for hook in hooks:
        if not hook.catchable:
            continue
        tx, ty = hook.tip
        if within_radius(tx, ty, hx, hy, HOOK_RADIUS):
            return hook
    return None


def hook_on_body(eel, hook):
    """Index of the first segment the hook snags, or None.

    The tail-most segment is never scanned.
    """
    if not hook.catchable:
        return None
    tx, ty = hook.tip
    for i in range(len(eel.body) - 1):
        seg = eel.body[i]
        if within_radius(tx, ty, seg.x, seg.y, HOOK_RADIUS):
            return i
    return None


def cut_tails(eel, hooks):
    """Let each hook sever at most one tail, in hook order.

    A hook that cuts starts reeling at once, so it drops out of the scan;
    later hooks only see the body that is left. A snag on body[0] cuts
    behind it, so the eel always keeps one segment. Returns [(hook, count)].
    """
    cuts = []
    for hook in hooks:
        index = hook_on_body(eel, hook)
        if index is None:
            continue
        index = max(index, 1)
        tail = eel.cut_at(index)
        hook.attach(tail)
        hook.start_reel()
        cuts.append((hook, len(tail)))
        logger.debug("tail cut at segment %d (%d taken)", index, len(tail))
    return cuts
