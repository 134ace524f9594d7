"""Drawing and viewport constants."""

from __future__ import annotations

__all__ = [
    "CONNECTOR_DASH",
    "CONNECTOR_WIDTH",
    "DEFAULT_CENTER",
    "DEFAULT_ZOOM",
    "LABEL_CORNER_RADIUS",
    "LABEL_TEXT_INSET",
    "MAX_ZOOM",
    "MERCATOR_LAT_BOUND",
    "NAMES_BASELINE",
    "NAMES_FONT_SIZE",
    "POINT_FILL_OPACITY",
    "POINT_RADIUS",
    "POINT_STROKE_WIDTH",
    "TILE_SIZE",
    "TITLE_BASELINE",
    "TITLE_FONT_SIZE",
    "VIEWPORT_HEIGHT",
    "VIEWPORT_WIDTH",
]

# --- Viewport ---

DEFAULT_CENTER: tuple[float, float] = (39.8283, -98.5795)  # Contiguous US
DEFAULT_ZOOM = 4
MAX_ZOOM = 22
TILE_SIZE = 256  # World size at zoom 0, in pixels
MERCATOR_LAT_BOUND = 85.05112878
VIEWPORT_WIDTH = 960
VIEWPORT_HEIGHT = 600

# --- Point markers ---

POINT_RADIUS = 8.0
POINT_STROKE_WIDTH = 2.0
POINT_FILL_OPACITY = 0.8

# --- Labels ---

LABEL_CORNER_RADIUS = 4.0
LABEL_TEXT_INSET = 8.0  # Left inset of text inside the label box
TITLE_FONT_SIZE = 13.0
NAMES_FONT_SIZE = 11.0
TITLE_BASELINE = 17.0  # From box top
NAMES_BASELINE = 33.0  # From box top

# --- Connectors ---

CONNECTOR_WIDTH = 1.5
CONNECTOR_DASH = "4,3"
