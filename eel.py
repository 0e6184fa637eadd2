# ==================================================
#   EEL BODY + LOCOMOTION
# ==================================================
from config import (
    WIDTH, HEIGHT, EEL_SPEED, SEGMENT_SPACING, INITIAL_SEGMENTS,
    HEADING_KEEP_DIST,
)
from entities import Vec2
from utils import dist, vec_len


class Eel:
    """Player-controlled serpent: a head followed by a chain of segments.

    body[0] is the segment nearest the head. Chain order is the order the
    follower relaxes in and the order hooks scan in, so it must never be
    shuffled.
    """
    def __init__(self, head, heading, body=None):
        self.head = head
        self.heading = heading
        self.body = list(body) if body else []
        self.pending_growth = 0

    @property
    def length(self):
        """Segments currently in the chain, not counting the head."""
        return len(self.body)

    def grow(self, amount):
        """Queue segments to be appended by the follower."""
        if amount > 0:
            self.pending_growth += amount

    def cut_at(self, index):
        """Detach body[index:] as one contiguous tail and return it."""
        tail = self.body[index:]
        del self.body[index:]
        return tail

    def chain(self):
        """Head followed by every body segment, in chain order."""
        return [self.head] + self.body


def make_eel():
    """Starter eel: head in the upper third, body stacked above, heading down."""
    head = Vec2(WIDTH / 2, HEIGHT / 3)
    body = [Vec2(head.x, head.y - i * SEGMENT_SPACING)
            for i in range(1, INITIAL_SEGMENTS + 1)]
    return Eel(head, Vec2(0.0, 1.0), body)


def move_head(eel, tx, ty, dt):
    """Advance the head toward (tx, ty) at EEL_SPEED.

    Within HEADING_KEEP_DIST of the target the last heading is kept so the
    head does not flip direction on top of its destination.
    """
    dx = tx - eel.head.x
    dy = ty - eel.head.y
    d = vec_len(dx, dy)

    if d > HEADING_KEEP_DIST:
        eel.heading.x = dx / d
        eel.heading.y = dy / d

    step = EEL_SPEED * dt
    eel.head.x += eel.heading.x * step
    eel.head.y += eel.heading.y * step


def follow_segments(eel):
    """One relaxation pass over the chain, then append queued growth."""
    lead_x, lead_y = eel.head.x, eel.head.y

    for seg in eel.body:
        gap = dist(lead_x, lead_y, seg.x, seg.y)
        if gap > SEGMENT_SPACING:
            # pull forward by the excess only; closer segments stay slack
            pull = (gap - SEGMENT_SPACING) / gap
            seg.x += (lead_x - seg.x) * pull
            seg.y += (lead_y - seg.y) * pull
        lead_x, lead_y = seg.x, seg.y

    while eel.pending_growth > 0:
        tail = eel.body[-1] if eel.body else eel.head
        eel.body.append(Vec2(tail.x, tail.y))
        eel.pending_growth -= 1
