"""Window layout and control dimensions."""

SCREEN_W = 360
SCREEN_H = 500

RING_CENTER = (SCREEN_W // 2, 170)

BUTTON_W = 150
BUTTON_H = 44
BUTTON_Y = 300
BUTTON_FONT_SIZE = 24

SEGMENT_W = 300
SEGMENT_H = 32
DURATION_Y = 370
SIZE_Y = 416
SEGMENT_FONT_SIZE = 14

STATUS_H = 28
HINT_FONT_SIZE = 12

# Polygon resolution for a full turn
ARC_STEPS = 96
