"""Collision resolution for point labels.

Bounded-iteration heuristic: every unpinned label starts from the default
offset, then overlapping pairs are pulled apart by moving one member to the
first catalog position that clears all other labels.  When no catalog
position clears, the label is pushed down further on each pass.  The pass
count is capped, so dense or pinned clusters may keep overlapping; that is
reported in the result and never raised.

Cost is O(n^2 * max_iter) box comparisons, plus O(n) per relocation.
"""

from __future__ import annotations

__all__ = ["ResolveResult", "resolve_collisions"]

import logging
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass, field

from geolabel.layout.constants import (
    CANDIDATE_OFFSETS,
    DEFAULT_OFFSET,
    LABEL_PADDING,
    MAX_ITER,
    PUSH_STEP,
)
from geolabel.layout.geometry import BBox, boxes_overlap, label_bbox
from geolabel.layout.overlaps import overlap_clusters
from geolabel.layout.sizing import estimate_label_size
from geolabel.model import LabelledMarker, PlacementRegistry
from geolabel.projection import PixelProjector

logger = logging.getLogger(__name__)


@dataclass
class ResolveResult:
    """Outcome of one resolve call."""

    passes: int
    converged: bool
    relocated: list[str] = field(default_factory=list)
    pushes: int = 0  # Relocations where no catalog offset fit
    unresolved: list[frozenset[str]] = field(default_factory=list)


def resolve_collisions(
    registry: PlacementRegistry,
    projector: PixelProjector,
    padding: float = LABEL_PADDING,
    max_iter: int = MAX_ITER,
    candidates: Sequence[tuple[float, float]] = CANDIDATE_OFFSETS,
    push_step: float = PUSH_STEP,
    held: Collection[str] = (),
) -> ResolveResult:
    """Assign offsets to unpinned markers so their label boxes stop overlapping.

    Offsets are written onto the markers in place.  Pinned markers keep
    their offset bit for bit.

    For each overlapping pair (first, second) in registry order, *second*
    is relocated unless it is pinned, in which case *first* is, unless it
    too is pinned and the pair is left alone.  A pass without any overlap
    ends resolution early.

    Ids in *held* are treated as pinned for this call only, e.g. a label
    that is being dragged.
    """
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")

    markers = registry.ordered()
    fixed = {m.point_id for m in markers if m.pinned or m.point_id in held}
    for marker in markers:
        if marker.point_id not in fixed:
            marker.offset = DEFAULT_OFFSET

    # One projection per resolve: the viewport cannot change mid-call.
    anchors = {
        m.point_id: projector.project(m.point.lat, m.point.lng) for m in markers
    }
    sizes = {m.point_id: estimate_label_size(m.point_id, m.names) for m in markers}

    def bbox(marker: LabelledMarker) -> BBox:
        pid = marker.point_id
        return label_bbox(anchors[pid], marker.offset, sizes[pid])

    relocated: list[str] = []
    pushes = 0
    for iteration in range(max_iter):
        collided = False
        for i, first in enumerate(markers):
            for second in markers[i + 1 :]:
                if not boxes_overlap(bbox(first), bbox(second), padding):
                    continue
                collided = True
                if second.point_id not in fixed:
                    target = second
                elif first.point_id not in fixed:
                    target = first
                else:
                    continue
                if not _relocate(
                    target, markers, bbox, iteration, candidates, padding, push_step
                ):
                    pushes += 1
                if target.point_id not in relocated:
                    relocated.append(target.point_id)

        if not collided:
            logger.debug(
                "Resolved %d label(s) in %d pass(es), relocated %s, %d push(es)",
                len(markers),
                iteration + 1,
                relocated,
                pushes,
            )
            return ResolveResult(iteration + 1, True, relocated, pushes)

    unresolved = overlap_clusters({m.point_id: bbox(m) for m in markers}, padding)
    logger.debug(
        "Label overlaps remain after %d passes: %s",
        max_iter,
        [sorted(c) for c in unresolved],
    )
    return ResolveResult(max_iter, False, relocated, pushes, unresolved)


def _relocate(
    marker: LabelledMarker,
    markers: list[LabelledMarker],
    bbox: Callable[[LabelledMarker], BBox],
    iteration: int,
    candidates: Sequence[tuple[float, float]],
    padding: float,
    push_step: float,
) -> bool:
    """Move *marker* to the first candidate offset clear of every other label.

    Falls back to pushing the last tried offset down by a step that grows
    with the pass index.  Returns True when a clear candidate was found.
    """
    others = [m for m in markers if m is not marker]
    for candidate in candidates:
        marker.offset = candidate
        box = bbox(marker)
        if not any(boxes_overlap(box, bbox(other), padding) for other in others):
            return True

    dx, dy = marker.offset
    marker.offset = (dx, dy + push_step * (iteration + 1))
    return False
