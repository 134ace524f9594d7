"""Placement orchestration: owns the registry and drives recompute + render.

Every mutating intent (add or remove a point, edit names, drag end,
viewport change) ends in :meth:`PlacementOrchestrator.recompute`, which
resets and resolves unpinned offsets, routes leader lines and issues
drawing commands.  Everything runs synchronously on the caller's thread.
"""

from __future__ import annotations

__all__ = ["PlacementOrchestrator"]

import logging
from collections.abc import Iterable

from geolabel.layout.collisions import ResolveResult
from geolabel.layout.constants import LABEL_PADDING, LEADER_THRESHOLD, MAX_ITER
from geolabel.layout.drag import DragSession, DragState, DragUpdate
from geolabel.layout.engine import LabelPlacement, compute_placements, place_marker
from geolabel.model import Entry, GeoPoint, LabelledMarker, PlacementRegistry
from geolabel.points import US_CITIES, PointCatalog
from geolabel.projection import PixelProjector
from geolabel.render.base import LabelContent, Renderer

logger = logging.getLogger(__name__)


class PlacementOrchestrator:
    """Entry point for input surfaces: add/remove entries, drag labels, move the map."""

    def __init__(
        self,
        projector: PixelProjector,
        renderer: Renderer,
        points: Iterable[GeoPoint] | PointCatalog = US_CITIES,
        padding: float = LABEL_PADDING,
        max_iter: int = MAX_ITER,
        leader_threshold: float = LEADER_THRESHOLD,
    ) -> None:
        if max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {max_iter}")
        self.projector = projector
        self.renderer = renderer
        self.catalog = points if isinstance(points, PointCatalog) else PointCatalog(points)
        self.registry = PlacementRegistry()
        self.padding = padding
        self.max_iter = max_iter
        self.leader_threshold = leader_threshold
        self.drag = DragSession()
        self.last_result: ResolveResult | None = None
        self._pending_projector: PixelProjector | None = None
        self._rendered: set[str] = set()

    # --- Input intents ---

    def add_entry(self, point_id: str, name: str = "") -> bool:
        """Put *point_id* on the map and add *name* to its label.

        Unknown points are ignored.  Blank names just place the point,
        repeated names are dropped.  Returns True if anything changed.
        """
        point = self.catalog.find(point_id)
        if point is None:
            logger.debug("Ignoring add for unknown point %r", point_id)
            return False
        created = point_id not in self.registry
        marker = self.registry.add(point)
        name = name.strip()
        added = bool(name) and marker.add_name(name)
        if not (created or added):
            return False
        logger.debug("Added %r (names: %s)", point_id, marker.names)
        self.recompute()
        return True

    def remove_entry(self, point_id: str) -> bool:
        """Remove a point together with its label, connector and marker."""
        if self.registry.remove(point_id) is None:
            logger.debug("Ignoring remove for absent point %r", point_id)
            return False
        if self.drag.point_id == point_id and self.drag.active:
            self.drag.cancel()
        self._erase(point_id)
        self.recompute()
        return True

    def remove_name(self, point_id: str, name: str) -> bool:
        marker = self.registry.get(point_id)
        if marker is None or not marker.remove_name(name):
            return False
        self.recompute()
        return True

    def unpin(self, point_id: str) -> bool:
        """Hand a dragged label back to automatic placement."""
        marker = self.registry.get(point_id)
        if marker is None or not marker.pinned:
            return False
        marker.pinned = False
        self.recompute()
        return True

    def list_entries(self) -> list[Entry]:
        return self.registry.entries()

    # --- Viewport ---

    def viewport_changed(self, projector: PixelProjector, defer: bool = False) -> None:
        """Switch to a new viewport transform.

        With *defer*, only the newest projector is kept until :meth:`flush`,
        so a burst of pan/zoom events costs a single recompute.
        """
        if defer:
            self._pending_projector = projector
            return
        self._pending_projector = None
        self.projector = projector
        self.recompute()

    def flush(self) -> bool:
        """Apply a deferred viewport change, if any."""
        if self._pending_projector is None:
            return False
        self.viewport_changed(self._pending_projector)
        return True

    # --- Dragging ---

    def drag_start(self, point_id: str, pointer: tuple[float, float]) -> DragUpdate | None:
        marker = self.registry.get(point_id)
        if marker is None:
            return None
        update = self.drag.start(point_id, pointer, self._anchor(marker))
        self._apply_drag(marker, update)
        return update

    def drag_move(self, pointer: tuple[float, float]) -> DragUpdate | None:
        marker = self._dragged_marker()
        if marker is None:
            return None
        update = self.drag.move(pointer, self._anchor(marker))
        self._apply_drag(marker, update)
        return update

    def drag_end(self, pointer: tuple[float, float]) -> DragUpdate | None:
        """Commit the dragged offset, pin the label and re-place the others."""
        marker = self._dragged_marker()
        if marker is None:
            return None
        update = self.drag.end(pointer, self._anchor(marker))
        marker.offset = update.offset
        marker.pinned = True
        logger.debug("Pinned %r at offset %s", marker.point_id, marker.offset)
        self.recompute()
        return update

    def drag_state(self, point_id: str) -> DragState | None:
        marker = self.registry.get(point_id)
        if marker is None:
            return None
        if self.drag.active and self.drag.point_id == point_id:
            return DragState.DRAGGING
        return DragState.PINNED if marker.pinned else DragState.IDLE

    def _dragged_marker(self) -> LabelledMarker | None:
        if not self.drag.active:
            return None
        marker = self.registry.get(self.drag.point_id)
        if marker is None:
            self.drag.cancel()
        return marker

    def _apply_drag(self, marker: LabelledMarker, update: DragUpdate) -> None:
        # Live feedback only; other labels stay put until the drag ends.
        marker.offset = update.offset
        self._render(place_marker(marker, self.projector, self.leader_threshold), marker)

    # --- Recompute ---

    def recompute(self, resolve: bool = True) -> list[LabelPlacement]:
        """Reset, resolve, route and render every label.

        ``resolve=False`` keeps the stored offsets and only re-routes and
        re-renders, which gives the same output when nothing changed.
        A label being dragged keeps its live offset and the others are
        resolved around it.
        """
        held = (self.drag.point_id,) if self.drag.active else ()
        placement_pass = compute_placements(
            self.registry,
            self.projector,
            resolve=resolve,
            padding=self.padding,
            max_iter=self.max_iter,
            leader_threshold=self.leader_threshold,
            held=held,
        )
        if placement_pass.result is not None:
            self.last_result = placement_pass.result

        for pid in sorted(self._rendered - set(self.registry.ids())):
            self._erase(pid)
        for placement in placement_pass.placements:
            marker = self.registry.get(placement.point_id)
            if marker is None:
                continue
            self._render(placement, marker)
        return placement_pass.placements

    def _anchor(self, marker: LabelledMarker) -> tuple[float, float]:
        return self.projector.project(marker.point.lat, marker.point.lng)

    def _render(self, placement: LabelPlacement, marker: LabelledMarker) -> None:
        pid = placement.point_id
        self.renderer.place_point_marker(pid, placement.anchor)
        self.renderer.place_label(
            pid,
            placement.anchor,
            placement.offset,
            LabelContent(pid, tuple(marker.names)),
        )
        if placement.connector is None:
            self.renderer.remove_connector(pid)
        else:
            self.renderer.place_connector(
                pid, placement.connector.start, placement.connector.end
            )
        self._rendered.add(pid)

    def _erase(self, point_id: str) -> None:
        self.renderer.remove_label(point_id)
        self.renderer.remove_connector(point_id)
        self.renderer.remove_point_marker(point_id)
        self._rendered.discard(point_id)

    # --- Teardown ---

    def close(self) -> None:
        """Remove everything drawn and drop all state."""
        for pid in sorted(self._rendered):
            self._erase(pid)
        self.drag.cancel()
        self.registry.clear()
        self._pending_projector = None
