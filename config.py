# Configuration file for Bouncing Circles
# All configurable parameters are centralized here for easy modification

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Bouncing Circles"
FPS = 60
BACKGROUND_COLOR = (0, 0, 0)  # Black

# =============================================================================
# SIMULATION SETTINGS
# =============================================================================
MAX_CIRCLES = 50  # Oldest circle is evicted once this is exceeded
EXPAND_BORDERS = 100.0  # How far circles may grow past the viewport edges
SEED_CIRCLE_POSITION = (100.0, 100.0)  # Circle present when the app starts

# =============================================================================
# CIRCLE SETTINGS
# =============================================================================
INITIAL_RADIUS = 1.0
INITIAL_VELOCITY = 0.9  # Radius change per frame
MIN_RADIUS = 1.0  # A shrinking circle turns around at or below this radius

# Circle colors are chosen uniformly from this palette
CIRCLE_COLORS = [
    (0xFC, 0x37, 0x61),  # Red
    (0x38, 0x76, 0xFD),  # Blue
    (0x84, 0xCE, 0x73),  # Green
    (0xFD, 0x8F, 0x38),  # Orange
    (0x8E, 0x4D, 0xBB),  # Purple
    (0xFD, 0xD7, 0x49),  # Yellow
]

# =============================================================================
# RENDERING SETTINGS
# =============================================================================
CIRCLE_STROKE_WIDTH = 3

# Safe rendering limits
MAX_RENDER_RADIUS = 100000

# =============================================================================
# UI SETTINGS
# =============================================================================
UI_FONT_SIZE = 28
UI_TEXT_COLOR = (255, 255, 255)  # White
UI_TITLE_COLOR = (200, 200, 200)  # Light gray
UI_SECONDARY_COLOR = (150, 150, 150)  # Medium gray

# UI positioning
UI_MARGIN = 10
UI_LINE_HEIGHT = 30
UI_STATS_SPACING = 26

# Controls positioning
CONTROLS_FROM_BOTTOM = 110
CONTROLS_LINE_HEIGHT = 22

# Clear button (bottom right corner)
CLEAR_BUTTON_RADIUS = 28
CLEAR_BUTTON_MARGIN = 16
CLEAR_BUTTON_COLOR = (0x38, 0x76, 0xFD)
CLEAR_BUTTON_ICON_COLOR = (255, 255, 255)
CLEAR_BUTTON_ICON_WIDTH = 4

# =============================================================================
# RECORDING SETTINGS
# =============================================================================
RECORDINGS_DIR = "recordings"
VIDEO_WIDTH = 1280
VIDEO_HEIGHT = 720
VIDEO_FPS = 60
VIDEO_DURATION = 30  # seconds
VIDEO_TAPS_PER_SECOND = 1.5
VIDEO_PROGRESS_INTERVAL = 5  # seconds of video time between progress lines
VIDEO_FOURCC = "mp4v"

# =============================================================================
# CONTROL SETTINGS
# =============================================================================
# Key bindings (using pygame constants)
import pygame

KEY_EXIT = pygame.K_ESCAPE
KEY_CLEAR = pygame.K_c
KEY_TOGGLE_UI = pygame.K_h  # 'H' for hide/show
TAP_MOUSE_BUTTON = 1  # Left button

# Control descriptions for UI
CONTROLS = [
    "Controls (H to hide):",
    "Click: Add circle",
    "C / Clear button: Remove all circles",
    "ESC: Exit"
]
