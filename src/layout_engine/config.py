# Sprite box drawn for each roster member (px)
SPRITE_WIDTH = 128
SPRITE_HEIGHT = 128

# Party grid shape
GRID_COLUMNS = 3
GRID_ROWS = 2

# Responsive spacing: viewport width * ratio, clamped to [min, max]
SPACING_RATIO = 0.15
SPACING_MIN = 150
SPACING_MAX = 200

# Gap between the title region's bottom edge and the grid (px)
TITLE_GAP = 40

# Grid top when the title region cannot be measured:
# top padding (80) + title height (60) + title margin (32) + gap (40)
FALLBACK_GRID_TOP = 80 + 60 + 32 + TITLE_GAP

# Jump highlight durations (ms)
CLICK_JUMP_MS = 250
CELEBRATION_JUMP_MS = 600
CELEBRATION_STAGGER_MS = 100

# Nominal frame interval used by FrameScheduler.tick (ms)
FRAME_INTERVAL_MS = 16
