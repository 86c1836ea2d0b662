"""
settings.py - Tunables for the patrol enemy controller.

All configurable values live here so they're easy to tweak
and easy to reference from any module.  Config dataclasses
(MovementConfig, AIConfig) take their defaults from this file.
"""

# ── Screen ────────────────────────────────────────────────
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 480
FPS = 60
FIXED_DT = 1.0 / FPS           # seconds per physics tick
TITLE = "Patrol Enemy – Behavior Controller Demo"
BG_COLOR = (24, 26, 34)

# ── Colors (R, G, B) ─────────────────────────────────────
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (90, 90, 100)
BLUE = (60, 120, 255)          # Player
RED = (220, 50, 50)
YELLOW = (255, 220, 60)
CYAN = (80, 220, 255)
GREEN = (50, 200, 50)
PURPLE = (180, 80, 255)
ORANGE = (255, 160, 40)

# ── Body dimensions (pixels) ─────────────────────────────
ENEMY_WIDTH = 16
ENEMY_HEIGHT = 16
PLAYER_WIDTH = 14
PLAYER_HEIGHT = 24

# ── Movement (pixels, seconds) ───────────────────────────
MAX_SPEED = 120.0              # px/s horizontal cap
JUMP_HEIGHT = 40.0             # px apex height of a jump
GRAVITY = 310.0                # px/s² while ascending after a jump
GRAVITY_STRONG = 900.0         # px/s² falling / jump released
ACCELERATION = 512.0           # px/s² when speeding up
DECELERATION = 1024.0          # px/s² when braking or turning
AIR_BUFFER_SECONDS = 0.1       # coyote time
JUMP_BUFFER_SECONDS = 0.1      # early jump memory

PLAYER_MAX_SPEED = 150.0
PLAYER_JUMP_HEIGHT = 56.0

# ── AI ────────────────────────────────────────────────────
PATROL_RANGE = 100.0           # px either side of spawn
CHASE_RANGE = 160.0            # px – start/keep chasing below this
ATTACK_RANGE = 24.0            # px – reported to combat code only
EDGE_CHECK_DISTANCE = 12.0     # px ahead of body center for ledge ray
EDGE_PROBE_LENGTH = 16.0       # px downward ray length
ATTACK_SETTLE_SPEED = 5.0      # px/s – attack ends below this |vx|
DEFAULT_STUN_DURATION = 1.5    # seconds (demo "S" key)

# ── Idle / form selector ─────────────────────────────────
IDLE_EPISODE_BASE = 20.0       # seconds, scaled by IDLE_JITTER
ACTIVE_EPISODE_BASE = 10.0     # seconds, scaled by IDLE_JITTER
IDLE_JITTER = (0.3, 1.2)

# Form catalog: name -> flipped.  Flipped forms were drawn facing
# left, so their sprites are mirrored relative to travel direction.
FORM_FLIP_TABLE = {
    "slime": False,
    "beetle": False,
    "bat": True,
    "skull": True,
}
FORM_COLORS = {
    "slime": GREEN,
    "beetle": ORANGE,
    "bat": PURPLE,
    "skull": (220, 220, 200),
}

# ── Animation ─────────────────────────────────────────────
ANIM_FRAME_DURATION = 0.12     # seconds per frame at speed 1.0
ANIM_WALK_FRAMES = 4
ANIM_IDLE_FRAMES = 2

# ── Level layout (x, y, w, h) ────────────────────────────
FLOOR_Y = 400
LEVEL_SOLIDS = [
    (0, FLOOR_Y, 520, 80),         # main floor, ends in a ledge
    (600, FLOOR_Y, 200, 80),       # far floor past the gap
    (0, 0, 16, SCREEN_HEIGHT),     # left wall
    (784, 0, 16, SCREEN_HEIGHT),   # right wall
    (160, 320, 120, 12),           # floating platform
    (320, 370, 24, 30),            # low crate (wall for patrols)
]
ENEMY_START_X = 240.0
ENEMY_START_Y = FLOOR_Y - ENEMY_HEIGHT
PLAYER_START_X = 60.0
PLAYER_START_Y = FLOOR_Y - PLAYER_HEIGHT
PERCH_X = 213.0                 # scripted player spot on the floating platform
PERCH_Y = 320 - PLAYER_HEIGHT

# ── Statistics ────────────────────────────────────────────
STATS_PLOT_FILE = "patrol_trace.png"
