# constants.py

# ─── Canvas ─────────────────────────────────────────────────────────────────────
FRAME_WIDTH = 600
FRAME_HEIGHT = 700

# ─── Inset layout (legacy) ──────────────────────────────────────────────────────
INSET_MAX_WIDTH = 400
INSET_TOP_OFFSET = 20
INSET_AREA_PADDING = 40     # taken off the image area to get the height cap
INSET_MIN_AREA = 0.3        # fraction of frame height
INSET_MAX_AREA = 0.8

# ─── Caption ────────────────────────────────────────────────────────────────────
DEFAULT_TEXT_COLOR = '#ffffff'
DEFAULT_FONT_SIZE = 24
MIN_FONT_SIZE = 16
MAX_FONT_SIZE = 48
LINE_SPACING = 10           # added to the font size for each line
TEXT_SIDE_PADDING = 20      # wrap width is frame width minus twice this
CAPTION_MARGIN = 30
SHADOW_OFFSET = (2, 2)
SHADOW_BLUR = 4
SHADOW_COLOR = (0, 0, 0, 204)

# ─── Interaction ────────────────────────────────────────────────────────────────
HIT_RADIUS = 50
DEBOUNCE_MS = 300
OVERLAY_DASH_DEGREES = 12
OVERLAY_HANDLE_RADIUS = 6

# ─── Masks ──────────────────────────────────────────────────────────────────────
MASK_SUPERSAMPLE = 4
CIRCLE_SEGMENTS = 64
BEZIER_STEPS = 16
STAR_INNER_RATIO = 0.4

# ─── Shapes ─────────────────────────────────────────────────────────────────────
SHAPE_BUTTONS = {
    'circle':   ('Circle', '⭕'),
    'square':   ('Square', '⬜'),
    'triangle': ('Triangle', '🔺'),
    'hexagon':  ('Hexagon', '⬡'),
    'star':     ('Star', '⭐'),
    'heart':    ('Heart', '❤️'),
    'diamond':  ('Diamond', '💎'),
    'none':     ('No Frame', '📷'),
}
SHAPE_TYPES = list(SHAPE_BUTTONS.keys())
DEFAULT_SHAPE = 'circle'

# ─── Output ─────────────────────────────────────────────────────────────────────
DOWNLOAD_FILENAME = 'joke-photo.png'
OUTPUT_FORMAT = 'PNG'
