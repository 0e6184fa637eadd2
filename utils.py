# ==================================================
#   UTILITY FUNCTIONS
# ==================================================
import math
import random
from config import WIDTH, HEIGHT


def clamp(x, lo, hi):
    """Clamp value between lo and hi."""
    return max(lo, min(hi, x))


def vec_len(vx, vy):
    """Calculate vector length."""
    return math.hypot(vx, vy)


def len_sq(vx, vy):
    """Squared vector length."""
    return vx * vx + vy * vy


def norm(vx, vy):
    """Normalize vector to unit length, (0, 0) when it has none."""
    l = vec_len(vx, vy)
    if l <= 0.0001:
        return 0.0, 0.0
    return vx / l, vy / l


def dist(ax, ay, bx, by):
    """Calculate distance between two points."""
    return math.hypot(ax - bx, ay - by)


def dist_sq(ax, ay, bx, by):
    """Squared distance, for radius checks without a sqrt."""
    dx = bx - ax
    dy = by - ay
    return dx * dx + dy * dy


def within_radius(ax, ay, bx, by, r):
    """True when b lies inside (or on) the circle of radius r around a."""
    return dist_sq(ax, ay, bx, by) <= r * r


def dot(ax, ay, bx, by):
    return ax * bx + ay * by


def cross_sign(ax, ay, bx, by):
    """Sign of the 2-D cross product: 1 left, -1 right, 0 collinear."""
    c = ax * by - ay * bx
    if c > 0:
        return 1
    if c < 0:
        return -1
    return 0


def lerp(a, b, t):
    return a + (b - a) * t


def is_finite(*values):
    """True when every value is a real, finite number."""
    try:
        return all(math.isfinite(v) for v in values)
    except TypeError:
        return False


def rand_point(margin=24, rng=random):
    """Generate random point within screen bounds."""
    return (
        rng.uniform(margin, WIDTH - margin),
        rng.uniform(margin, HEIGHT - margin),
    )
