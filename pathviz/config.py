# ==========================================
# DEFAULTS
# Every value here can be overridden from the command line (see main.py).
# ==========================================
ROWS = 20
COLS = 20
CELL_SIZE = 30  # Pixels per cell

# Step pacing (milliseconds between expansions)
DEFAULT_DELAY_MS = 50
MIN_DELAY_MS = 1
MAX_DELAY_MS = 500
DELAY_STEP_MS = 10
MAX_STEPS_PER_TICK = 50

FPS = 60
HUD_HEIGHT = 70

DEFAULT_ALGO = "astar"

# Colours
COLOR_BG = (255, 255, 255)
COLOR_GRID_LINE = (204, 204, 204)   # #ccc
COLOR_WALL = (0, 0, 0)
COLOR_VISITED = (204, 229, 255)     # #cce5ff
COLOR_FRONTIER = (153, 204, 255)    # #99ccff
COLOR_START = (0, 128, 0)
COLOR_GOAL = (255, 0, 0)
COLOR_PATH = (255, 255, 0)
COLOR_HUD_BG = (30, 30, 30)
COLOR_HUD_TEXT = (255, 255, 255)
COLOR_NOTICE = (255, 120, 120)
