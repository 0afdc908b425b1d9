"""
Table Tracker Constants and Configuration
Palette, window geometry, seating layout values and storage locations.
"""
import os

# Palette
PAPER_WHITE = (255, 255, 255)
INK_BLACK = (0, 0, 0)
GRIMOIRE_DARK = (34, 24, 44)          # Window background
CANDLE_YELLOW = (255, 210, 0)         # Titles / status
BONE_WHITE = (236, 240, 241)          # Text/UI
BUTTON_PURPLE = (110, 60, 160)
BUTTON_GREEN = (46, 160, 100)
DELETE_RED = (200, 60, 60)

# Window Configuration
SCREEN_WIDTH: int = 1024
SCREEN_HEIGHT: int = 768
FPS: int = 60

# Drawing surface (logical resolution of the seating chart)
TABLE_SURFACE_WIDTH: int = 800
TABLE_SURFACE_HEIGHT: int = 800

# Seating layout
TABLE_INSET: int = 200        # margin kept free for the seat labels
SEAT_OFFSET: int = 50         # seats sit this far outside the table circle
HIT_RADIUS: int = 50          # clicks closer than this select a seat
DEAD_MARK_HALF_WIDTH: int = 25
NAME_BASELINE_OFFSET: int = 8
NAME_MAX_WIDTH: int = 100
NAME_FONT_SIZE: int = 22

# Roster list
ROW_HEIGHT: int = 48

# Persistence
STATE_VERSION: int = 1
STATE_KEY: str = f"botct_state_{STATE_VERSION}"
SAVE_DEBOUNCE_SECONDS: float = 0.5

# File locations (use environment variables)
STATE_DIR: str = os.getenv("BOTCT_STATE_DIR", os.path.join(os.path.expanduser("~"), ".botct"))
EXPORT_DIR: str = os.getenv("BOTCT_EXPORT_DIR", os.getcwd())
