"""Display constants and color definitions."""

# Timing
FPS = 60

# Windowed-mode default size
DEFAULT_SIZE = (1280, 720)

# Colors
GRADIENT_TOP = (102, 126, 234)
GRADIENT_BOTTOM = (118, 75, 162)
TEXT_COLOR = (255, 255, 255)

UNIT_LABELS: dict[str, str] = {
    "days": "Days",
    "hours": "Hours",
    "minutes": "Minutes",
    "seconds": "Seconds",
}

SEPARATOR = ":"
