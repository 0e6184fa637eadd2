# ==================================================
#   SESSION (alive -> retracting -> dead)
# ==================================================
import logging
from config import (
    WIDTH, HEIGHT, PREY_REWARD, HOOK_MIN_DEPTH, HOOK_MAX_DEPTH, HOOK_REEL_TIME,
    REASON_WALL, REASON_SELF, REASON_HOOKED,
)
from entities import Prey, GameEvent, HookView, RenderState
from eel import make_eel, move_head, follow_segments
from steering import SteeringTarget, handle_tap, reacquire
from hook import Hook
from collision import hits_wall, eat_prey, self_hit, hook_on_head, cut_tails
from utils import clamp, is_finite

logger = logging.getLogger(__name__)

ALIVE = "alive"
RETRACTING = "retracting"
DEAD = "dead"


class Session:
    """Owns the eel, its steering target, the prey and the hooks.

    Taps and spawn requests are buffered and applied at the start of the
    next ``advance`` so nothing changes halfway through a frame. ``dead``
    is absorbing until ``restart``.
    """
    def __init__(self):
        self._reset()

    def _reset(self):
        self.eel = make_eel()
        self.target = SteeringTarget.drifting_from(self.eel)
        self.prey = []
        self.hooks = []
        self.state = ALIVE
        self.reason = None
        self.time = 0.0
        self.score = 0
        self.captor = None
        self.retract_timer = 0.0
        self._taps = []
        self._prey_spawns = []
        self._hook_spawns = []
        self._events = []

    @property
    def alive(self):
        return self.state == ALIVE

    @property
    def dead(self):
        return self.state == DEAD

    # ==================================================
    #   EXTERNAL INPUT
    # ==================================================
    def restart(self):
        """Throw the whole session away and start over."""
        logger.info("session restarted")
        self._reset()

    def on_tap(self, x, y):
        """Queue a steering tap for the next tick."""
        if not is_finite(x, y):
            logger.debug("ignoring tap with bad coordinates %r, %r", x, y)
            return False
        if self.state != ALIVE:
            return False
        self._taps.append((float(x), float(y)))
        return True

    def spawn_prey(self, x, y, kind):
        """Queue a prey of the given kind at (x, y)."""
        if kind not in PREY_REWARD:
            logger.debug("ignoring unknown prey kind %r", kind)
            return False
        if not is_finite(x, y) or self.state == DEAD:
            return False
        self._prey_spawns.append((clamp(x, 0, WIDTH), clamp(y, 0, HEIGHT), kind))
        return True

    def spawn_hook(self, x, depth):
        """Queue a hook dropping at column x down to the given depth."""
        if not is_finite(x, depth) or self.state == DEAD:
            return False
        self._hook_spawns.append((clamp(x, 0, WIDTH),
                                  clamp(depth, HOOK_MIN_DEPTH, HOOK_MAX_DEPTH)))
        return True

    def drain_events(self):
        """Hand over queued events, oldest first."""
        events, self._events = self._events, []
        return events

    # ==================================================
    #   UPDATE LOOP
    # ==================================================
    def advance(self, dt):
        """Run one frame of simulation."""
        if not is_finite(dt) or dt < 0:
            dt = 0.0
        if self.state == DEAD:
            return

        self.time += dt
        self._flush_spawns()

        if self.state == ALIVE:
            for tx, ty in self._taps:
                handle_tap(self.eel, self.target, tx, ty)
            self._taps.clear()
            reacquire(self.eel, self.target)
            move_head(self.eel, self.target.current.x, self.target.current.y, dt)
            follow_segments(self.eel)

        self._update_hooks(dt)
        self._expire_prey()

        if self.state == RETRACTING:
            self._pin_head()
            follow_segments(self.eel)
            self.retract_timer -= dt
            if self.retract_timer <= 0:
                self._die(REASON_HOOKED)
            return

        self._collide()

    def _flush_spawns(self):
        for x, y, kind in self._prey_spawns:
            self.prey.append(Prey(x, y, kind, spawn_time=self.time))
            logger.debug("%s spawned at (%.1f, %.1f)", kind, x, y)
        for x, depth in self._hook_spawns:
            self.hooks.append(Hook(x, depth))
            logger.debug("hook spawned at x=%.1f, depth %.1f", x, depth)
        self._prey_spawns.clear()
        self._hook_spawns.clear()

    def _update_hooks(self, dt):
        for hook in self.hooks:
            hook.update(dt)
        gone = [h for h in self.hooks if h.done]
        if gone:
            self.hooks[:] = [h for h in self.hooks if not h.done]
            for h in gone:
                self._events.append(GameEvent("hook_gone", {"x": h.x}))

    def _expire_prey(self):
        stale = [p for p in self.prey if p.expired(self.time)]
        if stale:
            self.prey[:] = [p for p in self.prey if not p.expired(self.time)]
            for p in stale:
                p.alive = False
                self._events.append(GameEvent("prey_expired", {"kind": p.kind}))

    def _pin_head(self):
        self.eel.head.x, self.eel.head.y = self.captor.tip

    def _collide(self):
        hook = hook_on_head(self.eel, self.hooks)
        if hook is not None:
            self._capture(hook)
            return

        if hits_wall(self.eel.head):
            self._die(REASON_WALL)
            return

        for p in eat_prey(self.eel, self.prey):
            self.score += p.reward
            self._events.append(GameEvent("prey_eaten", {"kind": p.kind, "reward": p.reward}))

        if self_hit(self.eel) is not None:
            self._die(REASON_SELF)
            return

        for hook, count in cut_tails(self.eel, self.hooks):
            self._events.append(GameEvent("tail_cut", {"segments": count, "x": hook.x}))

    def _capture(self, hook):
        hook.start_reel()
        self.captor = hook
        self.state = RETRACTING
        self.retract_timer = HOOK_REEL_TIME
        self._taps.clear()
        self._pin_head()
        self._events.append(GameEvent("hooked", {"x": hook.x}))
        logger.info("eel hooked at (%.1f, %.1f)", self.eel.head.x, self.eel.head.y)

    def _die(self, reason):
        if self.state == DEAD:
            return
        self.state = DEAD
        self.reason = reason
        self._taps.clear()
        self._events.append(GameEvent("game_over", {"reason": reason}))
        logger.info("game over: %s (length %d, score %d)", reason, self.eel.length, self.score)

    # ==================================================
    #   RENDER FEED
    # ==================================================
    def snapshot(self):
        """Freeze everything the renderer needs for one frame."""
        eel = self.eel
        return RenderState(
            state=self.state,
            reason=self.reason,
            head=eel.head.as_tuple(),
            heading=eel.heading.as_tuple(),
            body=tuple(s.as_tuple() for s in eel.body),
            prey=tuple((p.x, p.y, p.kind) for p in self.prey),
            hooks=tuple(HookView(h.tip, h.state, tuple(h.cargo_points()))
                        for h in self.hooks),
            score=self.score,
            time=self.time,
        )
