# ==================================================
#   EEL ESCAPE - CONFIGURATION
# ==================================================

# --- arena ---
WIDTH, HEIGHT = 320, 512
FPS = 60
SKY_HEIGHT = 24

# --- eel ---
EEL_SPEED = 140               # units per second
SEGMENT_SPACING = 28
INITIAL_SEGMENTS = 3
INITIAL_DRIFT = 200           # first target sits this far below the head
HEADING_KEEP_DIST = 1         # closer than this, keep the last heading

# --- steering ---
TURN_ARC = 60                 # side-step length for assisted turns
TAP_DEAD_ZONE = 24
BEHIND_DOT = -0.15            # roughly 99 degrees off the heading
ARRIVE_DIST = 2
DRIFT_DIST = 1000
MIN_HEADING_SQ = 0.0001
FALLBACK_HEADING = (0.0, -1.0)   # straight up

# --- collision radii ---
PREY_RADIUS = 16
SELF_RADIUS = 18
HOOK_RADIUS = 14
SELF_SAFE_SEGMENTS = 2        # body[0] and body[1] never self-collide

# --- prey ---
FISH = "fish"
CRAB = "crab"
PREY_REWARD = {FISH: 1, CRAB: 3}
PREY_TTL = 10.0

# --- hooks ---
HOOK_TOP = 0.0
HOOK_TIP_OFFSET = 12
HOOK_DESCEND_TIME = 1.6
HOOK_BOB_PERIOD = 1.0
HOOK_BOB_CYCLES = 3
HOOK_BOB_AMPLITUDE = 6
HOOK_REEL_TIME = 1.2
HOOK_MIN_DEPTH = HEIGHT * 0.25
HOOK_MAX_DEPTH = HEIGHT * 0.85

# --- spawn policy (host side) ---
SPAWN_PAD = 24
PREY_SPAWN_EVERY = 1.5
MAX_PREY = 6
CRAB_CHANCE = 0.25
HOOK_SPAWN_EVERY = 3.5
MAX_HOOKS = 3

# --- game over reasons ---
REASON_WALL = "wall"
REASON_SELF = "self-tangle"
REASON_HOOKED = "hooked"

# --- palette ---
BACK = (0, 0, 0)
SKY = (4, 24, 48)
WATER_TOP = (36, 75, 102)
WATER_BOTTOM = (8, 26, 40)
HEAD_COLOR = (244, 211, 94)
BODY_COLOR = (244, 211, 94)
FISH_COLOR = (70, 192, 240)
CRAB_COLOR = (0, 132, 255)
HOOKLINE = (255, 255, 255)
HUD_COLOR = (230, 230, 230)
OVERLAY = (0, 0, 0, 150)
