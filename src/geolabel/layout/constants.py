"""Layout constants for label sizing, collision resolution and leader lines."""

from __future__ import annotations

__all__ = [
    "CANDIDATE_OFFSETS",
    "DEFAULT_OFFSET",
    "LABEL_HEIGHT",
    "LABEL_HEIGHT_WITH_NAMES",
    "LABEL_H_PADDING",
    "LABEL_PADDING",
    "LEADER_THRESHOLD",
    "MAX_ITER",
    "MIN_LABEL_WIDTH",
    "NAMES_CHAR_WIDTH",
    "NAMES_SEPARATOR",
    "PUSH_STEP",
    "TITLE_CHAR_WIDTH",
]

# --- Offsets (pixels, relative to the projected anchor) ---

# Where a fresh or reset label box puts its top-left corner.
DEFAULT_OFFSET: tuple[float, float] = (10.0, -20.0)

# Relocation catalog, tried in this order.
CANDIDATE_OFFSETS: tuple[tuple[float, float], ...] = (
    (10.0, -20.0),  # right, top (default)
    (10.0, 5.0),  # right, bottom
    (-100.0, -20.0),  # left, top
    (-100.0, 5.0),  # left, bottom
    (-45.0, -50.0),  # top, centered
    (-45.0, 25.0),  # bottom, centered
    (15.0, -45.0),  # upper right
    (15.0, 20.0),  # lower right
)

# --- Collision resolution ---

LABEL_PADDING = 5.0  # Minimum clear gap between two label boxes
MAX_ITER = 10  # Resolver passes before accepting residual overlaps
PUSH_STEP = 30.0  # Vertical push per pass when no candidate fits

# --- Leader lines ---

LEADER_THRESHOLD = 30.0  # Offsets at or below this length get no connector

# --- Label size estimation ---

TITLE_CHAR_WIDTH = 8.0  # Bold point name
NAMES_CHAR_WIDTH = 6.5  # Smaller caption line
LABEL_H_PADDING = 16.0  # Left + right box padding
MIN_LABEL_WIDTH = 60.0
LABEL_HEIGHT = 26.0  # Title line only
LABEL_HEIGHT_WITH_NAMES = 42.0  # Title plus caption line
NAMES_SEPARATOR = ", "
