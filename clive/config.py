"""Application configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 60

# Window
WINDOW_TITLE = "clive"
WINDOW_W = 1280
WINDOW_H = 800

# Font settings
FONT_SIZE = 18
LINE_HEIGHT = 22
LINE_PADDING = 5
INFOBAR_PADDING = 30

# Colours (r, g, b, a)
BG_COLOR = (45, 45, 45, 255)
INFOBAR_BG = (0, 0, 0, 190)
INFOBAR_FG = (255, 255, 255, 255)
INFOBAR_MODE_BG = (52, 120, 190, 255)
ERROR_BG = (170, 40, 40, 255)
SUCCESS_BG = (40, 140, 60, 255)
HELP_BG = (20, 20, 20, 220)

# View
ZOOM_STEP = 1.1
MIN_ZOOM = 0.05
MAX_ZOOM = 20.0
PAN_STEP_PX = 50.0
PAN_MIN_VISIBLE_FRAC = 0.1

# Navigation
SKIP_FRACTION = 0.1

# Status messages
MESSAGE_TIMEOUT_S = 1.5

# Policy switches
KEEP_VIEW_ON_NAVIGATE = False  # zoom/pan survive moving to another image
REMOVE_AFTER_COPY = False      # copied images leave the collection like moved ones

# Files
DEFAULT_DEST_FOLDER = "./keep"
DEFAULT_PATTERN = "*"
MAX_FILE_SIZE_MB = 200

# Supported image extensions
IMG_EXTS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tga", ".qoi", ".webp"})
# Formats raylib reads natively; everything else goes through Pillow
RL_NATIVE_EXTS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tga", ".qoi"})

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_B = 66
KEY_C = 67
KEY_D = 68
KEY_F = 70
KEY_G = 71
KEY_H = 72
KEY_J = 74
KEY_K = 75
KEY_M = 77
KEY_Q = 81
KEY_T = 84
KEY_W = 87
KEY_X = 88
KEY_Z = 90
KEY_MINUS = 45
KEY_PERIOD = 46
KEY_SLASH = 47
KEY_SEMICOLON = 59
KEY_EQUAL = 61
KEY_ESCAPE = 256
KEY_ENTER = 257
KEY_BACKSPACE = 259
KEY_DELETE = 261
KEY_RIGHT = 262
KEY_LEFT = 263
KEY_DOWN = 264
KEY_UP = 265
KEY_PAGE_UP = 266
KEY_PAGE_DOWN = 267
KEY_HOME = 268
KEY_END = 269
KEY_F11 = 300
KEY_KP_SUBTRACT = 333
KEY_KP_ADD = 334
KEY_KP_ENTER = 335
KEY_LEFT_SHIFT = 340
KEY_RIGHT_SHIFT = 344

# Every key the event pump reports as a KeyEvent
WATCHED_KEYS = (
    KEY_B, KEY_C, KEY_D, KEY_F, KEY_G, KEY_H, KEY_J, KEY_K, KEY_M, KEY_Q,
    KEY_T, KEY_W, KEY_X, KEY_Z, KEY_MINUS, KEY_PERIOD, KEY_SLASH,
    KEY_SEMICOLON, KEY_EQUAL, KEY_ESCAPE, KEY_ENTER, KEY_BACKSPACE,
    KEY_DELETE, KEY_RIGHT, KEY_LEFT, KEY_DOWN, KEY_UP, KEY_PAGE_UP,
    KEY_PAGE_DOWN, KEY_HOME, KEY_END, KEY_F11, KEY_KP_SUBTRACT, KEY_KP_ADD,
    KEY_KP_ENTER,
)
