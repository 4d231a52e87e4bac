"""
constants.py: Centralized configuration for the game window, physics and obstacles.
"""

# -------- Window Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 640
GROUND_HEIGHT = 80
PLAY_BOTTOM = SCREEN_HEIGHT - GROUND_HEIGHT  # Ground line (y grows downward)
RENDER_FPS = 60                 # One game tick per rendered frame

# -------- Player Config --------
BIRD_X = SCREEN_WIDTH * 0.30    # Fixed bird X position
RESPAWN_Y = SCREEN_HEIGHT * 0.50
BIRD_RADIUS = 20                # For collision detection
BIRD_SPRITE_WIDTH = 60          # Sprite is scaled to this width, aspect kept

# -------- Physics Config (pixels / tick) --------
# Frame-coupled: there is no delta-time compensation.
GRAVITY = 0.55                  # Added to velocity every tick
LIFT = -8.6                     # Velocity set by a flap
SCROLL_SPEED = 3.2              # Horizontal column speed

# -------- Column Config --------
COLUMN_WIDTH = 90
SPAWN_INTERVAL = 95             # Ticks between spawns
MIN_GAP_H = 140
MAX_GAP_H = 210
GAP_MARGIN = 50                 # Kept clear above and below the gap
GAP_OFFSET = 40                 # Extra clearance below the top edge

# -------- Teeth Config --------
TEETH_COUNT = 3
TOOTH_LEN = 20
TOOTH_INSET = 8

# -------- Colours --------
BACKGROUND_COLOR = (22, 28, 35)
GROUND_COLOR = (40, 110, 85)
PILLAR_COLOR = (18, 22, 26)
TOOTH_COLOR = (255, 255, 255)
OUTLINE_COLOR = (255, 255, 255, 60)
GUIDE_COLOR = (255, 255, 255, 110)
OVERLAY_COLOR = (0, 0, 0, 160)
BIRD_FALLBACK_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)

# -------- Audio Config --------
MUSIC_VOLUME = 0.25


class ConfigError(ValueError):
    """Raised when the constants above cannot produce a valid column."""


def check_config():
    """Fails fast when the play area cannot hold the largest gap."""
    low = GAP_MARGIN + GAP_OFFSET
    high = PLAY_BOTTOM - GAP_MARGIN - MAX_GAP_H
    if MIN_GAP_H > MAX_GAP_H:
        raise ConfigError(f"MIN_GAP_H ({MIN_GAP_H}) exceeds MAX_GAP_H ({MAX_GAP_H})")
    if low > high:
        raise ConfigError(
            f"Empty gap_y range [{low}, {high}]: play area too short for MAX_GAP_H={MAX_GAP_H}")
    if 2 * TOOTH_LEN >= MIN_GAP_H:
        raise ConfigError(f"Teeth of length {TOOTH_LEN} would close a {MIN_GAP_H}px gap")
    if TEETH_COUNT < 1:
        raise ConfigError("TEETH_COUNT must be at least 1")
