"""Geographic <-> viewport pixel projection."""

from __future__ import annotations

__all__ = ["PixelProjector", "WebMercatorProjector"]

import math
from dataclasses import dataclass, replace
from typing import Protocol

from geolabel.render.constants import (
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
    MAX_ZOOM,
    MERCATOR_LAT_BOUND,
    TILE_SIZE,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)


class PixelProjector(Protocol):
    """Maps coordinates for one viewport transform.

    Results must not be cached across a viewport change.
    """

    def project(self, lat: float, lng: float) -> tuple[float, float]: ...

    def unproject(self, x: float, y: float) -> tuple[float, float]: ...


def _world_size(zoom: float) -> float:
    return TILE_SIZE * (2**zoom)


def _to_world(lat: float, lng: float, world_size: float) -> tuple[float, float]:
    lat = max(min(lat, MERCATOR_LAT_BOUND), -MERCATOR_LAT_BOUND)
    x = (lng + 180.0) / 360.0 * world_size
    sin_lat = math.sin(math.radians(lat))
    y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * world_size
    return x, y


def _from_world(x: float, y: float, world_size: float) -> tuple[float, float]:
    lng = x / world_size * 360.0 - 180.0
    n = math.pi - 2 * math.pi * y / world_size
    lat = math.degrees(math.atan(math.sinh(n)))
    return lat, lng


@dataclass(frozen=True)
class WebMercatorProjector:
    """Spherical Web Mercator viewport, pixel (0, 0) at the top-left corner.

    Instances are immutable; panning or zooming returns a new projector,
    so a stale instance can never report positions for a newer view.
    """

    center_lat: float = DEFAULT_CENTER[0]
    center_lng: float = DEFAULT_CENTER[1]
    zoom: float = DEFAULT_ZOOM
    width: int = VIEWPORT_WIDTH
    height: int = VIEWPORT_HEIGHT

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Viewport size must be positive, got {self.width}x{self.height}"
            )
        if not 0 <= self.zoom <= MAX_ZOOM:
            raise ValueError(f"Zoom must be within 0..{MAX_ZOOM}, got {self.zoom}")
        size = _world_size(self.zoom)
        cx, cy = _to_world(self.center_lat, self.center_lng, size)
        object.__setattr__(self, "_world", size)
        object.__setattr__(self, "_origin", (cx - self.width / 2, cy - self.height / 2))

    def project(self, lat: float, lng: float) -> tuple[float, float]:
        wx, wy = _to_world(lat, lng, self._world)
        ox, oy = self._origin
        return wx - ox, wy - oy

    def unproject(self, x: float, y: float) -> tuple[float, float]:
        ox, oy = self._origin
        return _from_world(x + ox, y + oy, self._world)

    def panned(self, dx: float, dy: float) -> WebMercatorProjector:
        """Shift the view by (dx, dy) pixels."""
        lat, lng = self.unproject(self.width / 2 + dx, self.height / 2 + dy)
        return replace(self, center_lat=lat, center_lng=lng)

    def zoomed(self, zoom: float) -> WebMercatorProjector:
        return replace(self, zoom=zoom)
