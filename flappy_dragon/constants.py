"""
constants.py: Centralized configuration for the game grid, physics and display.
"""

# -------- Grid Config --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
PLAYER_OFFSET = 20              # Fixed screen column of the player
PLAYER_START = (20, 25)         # World x, row on restart
MENU_PLAYER_START = (0, 25)

# Time synchronization
FRAME_DURATION = 75.0           # Milliseconds of frame time per physics tick

# -------- Physics Config (rows / tick) --------
GRAVITY_STEP = 0.2              # Velocity gained per tick
TERMINAL_VELOCITY = 2.0         # Clamping for stability
FLAP_VELOCITY = -2.1            # Instantaneous velocity after a flap

# -------- Obstacle Config --------
MAX_GAP = 20                    # Gap size at score 0
MIN_GAP = 2
GAP_Y_RANGE = (10, 40)          # Half-open range for the gap centre

# -------- Glyphs & Colours (RGB) --------
PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

# -------- Text --------
MENU_TITLE = "Welcome to Flappy Dragon"
MENU_SUBTITLE = "Fly through the gaps!"
END_TITLE = "You have died."

# -------- Display Config --------
WINDOW_TITLE = "Flappy Dragon"
RENDER_FPS = 30
CELL_SIZE = 12                  # Pixels per grid cell
