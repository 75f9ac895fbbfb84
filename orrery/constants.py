#!/usr/bin/env python3
"""
Shared constants for the Solar System viewer (scene units unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier. Distances and radii are relative scene units;
angles are radians; angular speeds and spin increments are radians per frame.
"""
import math

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
FPS = 60

# Backgrounds and page backdrops (three gradient stops each)
DARK_BACKGROUND = (0, 0, 17)  # #000011
LIGHT_BACKGROUND = (135, 206, 235)  # #87CEEB
DARK_BACKDROP = ((12, 12, 12), (26, 26, 46), (22, 33, 62))
LIGHT_BACKDROP = ((135, 206, 235), (152, 216, 232), (176, 224, 230))

# Camera
CAMERA_FOV = 75.0  # degrees, vertical
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0
CAMERA_START = (0.0, 30.0, 60.0)
ORBIT_RADIUS = 60.0  # camera distance used while drag-orbiting
ORBIT_SENSITIVITY = 0.01  # radians per pixel of pointer travel
KEY_ORBIT_STEP = 2  # pixels of equivalent drag per frame while an arrow key is held
PITCH_LIMIT = math.pi / 2

# Zoom
ZOOM_STEP = 0.1  # fraction of camera distance per wheel tick
MIN_CAMERA_DISTANCE = 5.0
MAX_CAMERA_DISTANCE = 400.0

# Lights
SUN_LIGHT_COLOR = (255, 255, 170)  # #FFFFAA
SUN_LIGHT_INTENSITY = 2.0
SUN_LIGHT_RANGE = 200.0
AMBIENT_LIGHT_COLOR = (64, 64, 64)  # #404040
AMBIENT_LIGHT_INTENSITY = 0.3

# Starfield
STAR_COUNT = 10000
STARFIELD_HALF_WIDTH = 200.0
STAR_COLOR = (255, 255, 255)
STAR_OPACITY = 0.8

# Sun glow and orbit guides
GLOW_RADIUS = 4.0
GLOW_OPACITY = 0.3
ORBIT_RING_HALF_WIDTH = 0.1
ORBIT_RING_SEGMENTS = 64
ORBIT_RING_COLOR = (51, 51, 51)  # #333333
ORBIT_RING_OPACITY = 0.3

# Per-frame increments
SUN_SPIN_STEP = 0.01
PLANET_SPIN_STEP = 0.02
STARFIELD_SPIN_STEP = 0.0005

# Speed sliders
SPEED_SLIDER_MIN = 0.0
SPEED_SLIDER_MAX = 5.0
SPEED_SLIDER_STEP = 0.1
SPEED_DEFAULT = 1.0

# Hover label
LABEL_OFFSET = (10, -10)
LABEL_WIDTH = 260
LABEL_PADDING = 8
LABEL_BACKGROUND = (10, 10, 30, 220)
LABEL_BORDER = (90, 110, 170)
LABEL_NAME_COLOR = (255, 221, 0)
LABEL_TEXT_COLOR = (220, 220, 230)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
