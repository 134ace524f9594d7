"""Placement pipeline: resolve label offsets, then route leader lines."""

from __future__ import annotations

__all__ = ["LabelPlacement", "PlacementPass", "compute_placements", "place_marker"]

from collections.abc import Collection
from dataclasses import dataclass, field

from geolabel.layout.collisions import ResolveResult, resolve_collisions
from geolabel.layout.constants import LABEL_PADDING, LEADER_THRESHOLD, MAX_ITER
from geolabel.layout.leaders import Connector, route_leader
from geolabel.layout.sizing import LabelSize, estimate_label_size
from geolabel.model import LabelledMarker, PlacementRegistry
from geolabel.projection import PixelProjector


@dataclass(frozen=True)
class LabelPlacement:
    """Final drawing instructions for one label."""

    point_id: str
    anchor: tuple[float, float]
    offset: tuple[float, float]
    size: LabelSize
    connector: Connector | None


@dataclass
class PlacementPass:
    placements: list[LabelPlacement] = field(default_factory=list)
    result: ResolveResult | None = None


def place_marker(
    marker: LabelledMarker,
    projector: PixelProjector,
    leader_threshold: float = LEADER_THRESHOLD,
) -> LabelPlacement:
    """Placement for *marker* at its current offset."""
    anchor = projector.project(marker.point.lat, marker.point.lng)
    size = estimate_label_size(marker.point_id, marker.names)
    return LabelPlacement(
        point_id=marker.point_id,
        anchor=anchor,
        offset=marker.offset,
        size=size,
        connector=route_leader(anchor, marker.offset, size, leader_threshold),
    )


def compute_placements(
    registry: PlacementRegistry,
    projector: PixelProjector,
    resolve: bool = True,
    padding: float = LABEL_PADDING,
    max_iter: int = MAX_ITER,
    leader_threshold: float = LEADER_THRESHOLD,
    held: Collection[str] = (),
) -> PlacementPass:
    """Compute placements for every marker in registry order.

    With ``resolve=False`` the stored offsets are used as they are and
    only leader lines are re-routed.  Markers in *held* keep their current
    offset during resolution.
    """
    result = None
    if resolve:
        result = resolve_collisions(
            registry, projector, padding=padding, max_iter=max_iter, held=held
        )
    placements = [
        place_marker(m, projector, leader_threshold) for m in registry.ordered()
    ]
    return PlacementPass(placements, result)
