# --- Config ---
# Geometry and speeds are in pixels and pixels/tick.

FALLBACK_SIZE = (800, 600)   # used when full-screen mode is unavailable
TITLE = "Paddle Ball"
FPS = 60

PADDLE_W, PADDLE_H = 100, 10
PADDLE_BOTTOM_GAP = 50       # paddle top sits this far above the arena bottom
BALL_SIZE = 20               # diameter
BALL_START_VX, BALL_START_VY = 3, 3

# Colors
BG_COLOR = (0, 0, 0)
PADDLE_COLOR = (0, 255, 0)
BALL_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)

# Text
FONT_NAME = "arial"
SCORE_FONT_SIZE = 20
HEADLINE_FONT_SIZE = 30
PROMPT_FONT_SIZE = 20
SCORE_ANCHOR = (10, 30)      # text baseline, top-left of the arena
