"""Leader lines from a point to its displaced label."""

from __future__ import annotations

__all__ = ["Connector", "nearest_edge_point", "route_leader"]

from dataclasses import dataclass

from geolabel.layout.constants import LEADER_THRESHOLD
from geolabel.layout.geometry import BBox, label_bbox, offset_distance


@dataclass(frozen=True)
class Connector:
    """Line from the anchor to the nearest point on the label box."""

    start: tuple[float, float]
    end: tuple[float, float]


def nearest_edge_point(anchor: tuple[float, float], box: BBox) -> tuple[float, float]:
    """Point on the boundary of *box* closest to *anchor*.

    Outside the box this is the anchor clamped to the box extent: a corner
    when the anchor is diagonal to the box, the perpendicular foot on an
    edge otherwise.  An anchor inside the box maps to the box center.
    """
    ax, ay = anchor
    x_min, y_min, x_max, y_max = box
    if x_min <= ax <= x_max and y_min <= ay <= y_max:
        return ((x_min + x_max) / 2, (y_min + y_max) / 2)
    return (min(max(ax, x_min), x_max), min(max(ay, y_min), y_max))


def route_leader(
    anchor: tuple[float, float],
    offset: tuple[float, float],
    size: tuple[float, float],
    threshold: float = LEADER_THRESHOLD,
) -> Connector | None:
    """Return the connector for a label, or None when it sits close enough.

    The threshold is inclusive: an offset of exactly *threshold* pixels
    draws nothing.
    """
    if offset_distance(offset) <= threshold:
        return None
    box = label_bbox(anchor, offset, size)
    return Connector(start=anchor, end=nearest_edge_point(anchor, box))
