# ==================================================
#   SPAWN POLICY
# ==================================================
import random
from config import (
    WIDTH, SPAWN_PAD, PREY_SPAWN_EVERY, MAX_PREY, CRAB_CHANCE,
    HOOK_SPAWN_EVERY, MAX_HOOKS, HOOK_MIN_DEPTH, HOOK_MAX_DEPTH, FISH, CRAB,
)
from utils import rand_point


class Spawner:
    """Decides when and where prey and hooks appear.

    Lives outside the session: it only ever calls ``spawn_prey`` and
    ``spawn_hook``.
    """
    def __init__(self, session, rng=None):
        self.session = session
        self.rng = rng or random.Random()
        self.prey_t = PREY_SPAWN_EVERY
        self.hook_t = HOOK_SPAWN_EVERY

    def reset(self):
        self.prey_t = PREY_SPAWN_EVERY
        self.hook_t = HOOK_SPAWN_EVERY

    def update(self, dt):
        """Count down both timers and spawn when they run out."""
        if not self.session.alive:
            return

        self.prey_t -= dt
        if self.prey_t <= 0:
            self.prey_t += PREY_SPAWN_EVERY
            if len(self.session.prey) < MAX_PREY:
                x, y = rand_point(SPAWN_PAD, self.rng)
                kind = CRAB if self.rng.random() < CRAB_CHANCE else FISH
                self.session.spawn_prey(x, y, kind)

        self.hook_t -= dt
        if self.hook_t <= 0:
            self.hook_t += HOOK_SPAWN_EVERY
            if len(self.session.hooks) < MAX_HOOKS:
                x = self.rng.uniform(SPAWN_PAD, WIDTH - SPAWN_PAD)
                depth = self.rng.uniform(HOOK_MIN_DEPTH, HOOK_MAX_DEPTH)
                self.session.spawn_hook(x, depth)
