TITLE = "Smileys"
WIDTH = 640
HEIGHT = 480
# Window can't be resized below this
MIN_WIDTH = 200
MIN_HEIGHT = 200
VERBOSE = False

BACKGROUND_COLOR = (0, 80, 160, 255)

# Face sprite geometry (pixels)
FACE_SIZE = (100, 100)
HEAD_RECT = (0, 0, 90, 90)
SHADOW_RECT = (10, 10, 90, 90)
EYE_RECTS = ((20, 20, 15, 20), (55, 20, 15, 20))
MOUTH_RECT = (20, 60, 50, 10)
# Drop shadow and the eye/mouth cut-outs share this
SHADOW_COLOR = (0, 0, 0, 96)

# Loop timing (milliseconds)
TICK_INTERVAL_MS = 100
POLL_TIMEOUT_MS = 10

# Per-tick color drift (max change per channel)
SMILEY1_DRIFT = 30
SMILEY2_DRIFT = 20
# randomize_color picks channels in [MIN, MIN + SPAN - 1]
RANDOM_CHANNEL_MIN = 50
RANDOM_CHANNEL_SPAN = 175

# Arrow keys move smiley 2 by this many pixels
MOVE_STEP = 20

SMILEY1_START = (200, 200)
SMILEY1_COLOR = (255, 220, 0, 255)
SMILEY2_START = (400, 280)
SMILEY2_COLOR = (255, 120, 40, 255)
