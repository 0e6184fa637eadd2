# ==================================================
#   WORLD ENTITIES
# ==================================================
from dataclasses import dataclass, field
from config import PREY_REWARD, PREY_TTL


@dataclass
class Vec2:
    """Mutable 2-D point or direction."""
    x: float
    y: float

    def copy(self):
        return Vec2(self.x, self.y)

    def as_tuple(self):
        return (self.x, self.y)


@dataclass
class Prey:
    """Consumable fish or crab that grows the eel when eaten."""
    x: float
    y: float
    kind: str
    spawn_time: float = 0.0
    alive: bool = True

    @property
    def reward(self):
        """Body segments gained by eating this prey."""
        return PREY_REWARD[self.kind]

    def expired(self, now):
        """Check whether this prey has outlived its TTL."""
        return now - self.spawn_time >= PREY_TTL


@dataclass
class GameEvent:
    """Something the renderer or HUD may want to react to."""
    kind: str
    data: dict = field(default_factory=dict)


# ==================================================
#   RENDER SNAPSHOT
# ==================================================
@dataclass(frozen=True)
class HookView:
    tip: tuple
    state: str
    cargo: tuple = ()


@dataclass(frozen=True)
class RenderState:
    """Immutable frame handed to the drawing layer."""
    state: str
    reason: str
    head: tuple
    heading: tuple
    body: tuple
    prey: tuple       # ((x, y, kind), ...)
    hooks: tuple      # (HookView, ...)
    score: int
    time: float
