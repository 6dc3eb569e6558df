import math

# Screen settings
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
FPS = 60
# Window title for the demo
WINDOW_TITLE = "Sprite Rotate"

# Rotation settings
# Angle (degrees) recorded for a sprite before any rotation is applied
DEFAULT_ANGLE = 0.0
# Positive angles turn clockwise on screen (pygame's y-down space, matching atan2)
CLOCKWISE_ROTATION = True

# Colors
BACKGROUND_COLOR = (24, 24, 32)
ARROW_COLOR = (255, 102, 0)
TARGET_COLOR = (90, 200, 250)

# Demo sprites
# Arrow image size in pixels (width, height); the tip points along +X
ARROW_SIZE = (48, 24)
# Target marker diameter in pixels
TARGET_SIZE = 16
# Distance of the orbiting target from the screen center (pixels)
TARGET_ORBIT_RADIUS = 160.0
# Orbit speed of the target (radians per second)
TARGET_ORBIT_SPEED = math.pi / 3

# Logging level used by main.py
LOG_LEVEL = "INFO"
