"""
Screen dimensions, colors, scene constants for the occluder, light and ray
fan, and logging configuration.
"""

import os

WIDTH, HEIGHT = 800, 600
FPS = 60
WINDOW_TITLE = "Interactive Raytracer"
BG_COLOR = (30, 30, 30)
TEXT_COLOR = (235, 235, 235)
HINT_COLOR = (160, 160, 160)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16

# Scene Settings
OCCLUDER_CENTER = (400, 300)
OCCLUDER_RADIUS = 50
LIGHT_START = (WIDTH / 2, HEIGHT / 2)   # center of the viewport
LIGHT_RADIUS = 20                       # marker size
PICK_RADIUS = 20                        # grab distance for the light

# Ray Fan Settings
RAY_COUNT = 360
RAY_LENGTH = 1000                  # "infinity" for rays that miss
CIRCLE_SEGMENTS = 32
EPSILON = 0.001                    # minimum forward hit distance
UNIT_TOLERANCE = 1e-6

# Colors and opacity
OCCLUDER_COLOR = (0, 120, 200)
RAY_COLOR = (255, 255, 0)
LIGHT_COLOR = (255, 255, 0)
OPAQUE = 255
RAY_HIT_ALPHA = 100
RAY_MISS_ALPHA = 50

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
