# ==================================================
#   FISHING HOOKS (descend -> bob -> reel)
# ==================================================
import math
import logging
from config import (
    HOOK_TOP, HOOK_TIP_OFFSET, HOOK_DESCEND_TIME, HOOK_BOB_PERIOD,
    HOOK_BOB_CYCLES, HOOK_BOB_AMPLITUDE, HOOK_REEL_TIME,
)
from utils import lerp

logger = logging.getLogger(__name__)

DESCENDING = "descending"
BOBBING = "bobbing"
REELING = "reeling"

BOB_TIME = HOOK_BOB_PERIOD * HOOK_BOB_CYCLES


class Hook:
    """A hazard lowered from the top edge on a line.

    The animation is a phase timer advanced by the frame delta, so a
    collision can cut any phase short with ``start_reel``. Cargo is stored
    as offsets from the tip and rides along while reeling.
    """
    def __init__(self, x, depth):
        self.x = x
        self.depth = depth
        self.marker_y = HOOK_TOP
        self.state = DESCENDING
        self.elapsed = 0.0
        self.reel_from = depth
        self.cargo = None
        self.done = False

    @property
    def tip(self):
        """Point of the hook used for collision tests."""
        return self.x, self.marker_y + HOOK_TIP_OFFSET

    @property
    def reeling(self):
        return self.state == REELING

    @property
    def catchable(self):
        """Only hooks still going down or bobbing can snag the eel."""
        return not self.done and self.state != REELING

    def update(self, dt):
        """Advance the phase timer, rolling leftover time into the next phase."""
        if self.done:
            return
        self.elapsed += dt

        if self.state == DESCENDING and self.elapsed >= HOOK_DESCEND_TIME:
            self.elapsed -= HOOK_DESCEND_TIME
            self.state = BOBBING
        if self.state == BOBBING and self.elapsed >= BOB_TIME:
            self.elapsed -= BOB_TIME
            self.reel_from = self.depth
            self.state = REELING
        if self.state == REELING and self.elapsed >= HOOK_REEL_TIME:
            self.marker_y = HOOK_TOP
            self.done = True
            return

        self.marker_y = self._marker_at()

    def _marker_at(self):
        if self.state == DESCENDING:
            return lerp(HOOK_TOP, self.depth, self.elapsed / HOOK_DESCEND_TIME)
        if self.state == BOBBING:
            phase = self.elapsed / HOOK_BOB_PERIOD * math.tau
            return self.depth + HOOK_BOB_AMPLITUDE * math.sin(phase)
        return lerp(self.reel_from, HOOK_TOP, self.elapsed / HOOK_REEL_TIME)

    def start_reel(self):
        """Cancel whatever is running and reel up from where the hook is now."""
        if self.reeling or self.done:
            return False
        self.reel_from = self.marker_y
        self.state = REELING
        self.elapsed = 0.0
        return True

    def attach(self, segments):
        """Take ownership of severed segments, pinned relative to the tip."""
        tx, ty = self.tip
        self.cargo = [(s.x - tx, s.y - ty) for s in segments]
        logger.debug("hook at x=%.1f took %d segments", self.x, len(self.cargo))

    def cargo_points(self):
        """World positions of the cargo, following the tip."""
        if not self.cargo:
            return []
        tx, ty = self.tip
        return [(tx + dx, ty + dy) for dx, dy in self.cargo]
