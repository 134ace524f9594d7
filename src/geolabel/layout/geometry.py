"""Axis-aligned box helpers shared by the resolver and the leader router."""

from __future__ import annotations

__all__ = ["BBox", "boxes_overlap", "label_bbox", "offset_distance"]

import math

from geolabel.layout.constants import LABEL_PADDING

# (x_min, y_min, x_max, y_max) in viewport pixels, y growing downward.
BBox = tuple[float, float, float, float]


def label_bbox(
    anchor: tuple[float, float],
    offset: tuple[float, float],
    size: tuple[float, float],
) -> BBox:
    """Return the box of a label whose top-left corner sits at anchor + offset."""
    x = anchor[0] + offset[0]
    y = anchor[1] + offset[1]
    return (x, y, x + size[0], y + size[1])


def boxes_overlap(a: BBox, b: BBox, padding: float = LABEL_PADDING) -> bool:
    """Check if two boxes come closer than *padding* on both axes."""
    return not (
        a[2] + padding < b[0]
        or b[2] + padding < a[0]
        or a[3] + padding < b[1]
        or b[3] + padding < a[1]
    )


def offset_distance(offset: tuple[float, float]) -> float:
    return math.hypot(offset[0], offset[1])
