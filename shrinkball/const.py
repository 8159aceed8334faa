# -----------------------------
# Configuration (tweak as needed)
# -----------------------------

SCREEN_W, SCREEN_H = 1280, 720     # Initial window size; the window is resizable
FPS = 60
DEFAULT_GAME = "shrinking-ball"

# Difficulty defaults (overridable via manifest options.difficulty)
BASE_SPEED = 200.0                 # px/s speed cap at score 0 and first-hit speed
SPEED_STEP = 20.0                  # px/s added to the cap per point
SHRINK_FACTOR = 0.98               # radius multiplier per hit
SPEED_BOOST = 1.03                 # speed multiplier per hit after the first
INITIAL_RADIUS = 100.0             # px
INITIAL_COLOR = (255, 0, 0)
MIN_RADIUS = 0.0                   # 0 means the radius has no floor

BACKGROUND_COLOR = (0, 0, 0)
