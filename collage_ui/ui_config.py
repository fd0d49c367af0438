from collage.Geometry import CardSlot

WINDOW_WIDTH = 1100
WINDOW_HEIGHT = 760

CONTAINER_WIDTH_RATIO = 0.5
CONTAINER_HEIGHT_RATIO = 0.46
CONTAINER_TOP_RATIO = 0.14
CARD_WIDTH_RATIO = 0.2
CARD_ASPECT = 0.68
CONTROLS_TOP_RATIO = 0.66
FPS_MS = 16

# Card motion spring.
CARD_STIFFNESS = 300.0
CARD_DAMPING = 30.0
CARD_MASS = 1.0
# Toggle knob spring, expressed as perceived duration and bounce.
TOGGLE_VISUAL_DURATION = 0.2
TOGGLE_BOUNCE = 0.2
TOGGLE_HOVER_SCALE = 1.05
TOGGLE_PRESS_SCALE = 0.95
# Slider rows fade and slide in after a mode switch.
INPUT_REVEAL_DURATION = 0.3
INPUT_REVEAL_OFFSET = 10
REST_DELTA = 0.01
REST_SPEED = 0.01

UNIFORM_RANGE = (5, 20)
CUSTOM_RANGE = (0, 20)
SLIDER_STEP = 1

# (id, slot, z-index, photo index); higher z draws on top.
DEMO_CARDS = (
    ("card-a", CardSlot.CENTER, 5, 0),
    ("card-b", CardSlot.TOP_LEFT, 4, 1),
    ("card-c", CardSlot.TOP_RIGHT, 3, 2),
    ("card-d", CardSlot.BOTTOM_LEFT, 2, 3),
    ("card-e", CardSlot.BOTTOM_RIGHT, 1, 4),
)

MODE_TEXT = {"Uniform": "Uniform", "Custom": "Custom"}
MODE_HINT = {
    "Uniform": "Same value for both axes",
    "Custom": "Separate X and Y control",
}

THEME = {
    "bg_base": "#f8fafc",
    "container_outline": "#e2e8f0",
    "label_text": "#374151",
    "hint_text": "#6b7280",
    "uniform_accent": "#2563eb",
    "custom_accent": "#9333ea",
    "toggle_off": "#d1d5db",
    "toggle_knob": "#ffffff",
    "toggle_shadow": "#9ca3af",
    "track_fill": "#0b1011",
    "track_outline": "#1d2628",
    "card_paper": "#fffdf7",
    "card_border": "#d6d3d1",
    "card_text": "#1f2937",
    "card_footer": "#6b7280",
    "shadow": "#cbd5e1",
}

MONO_FONT = "Courier"
