"""Data model: reference points, labelled markers and the placement registry."""

from __future__ import annotations

__all__ = ["Entry", "GeoPoint", "LabelledMarker", "PlacementRegistry"]

from dataclasses import dataclass, field

from geolabel.layout.constants import DEFAULT_OFFSET, NAMES_SEPARATOR


@dataclass(frozen=True)
class GeoPoint:
    """A named geographic point from the reference list."""

    name: str
    lat: float
    lng: float


@dataclass(frozen=True)
class Entry:
    """Read-only view of one registry entry for list displays."""

    point_id: str
    names: tuple[str, ...]


@dataclass
class LabelledMarker:
    """A point currently on the map together with its label state."""

    point: GeoPoint
    names: list[str] = field(default_factory=list)
    offset: tuple[float, float] = DEFAULT_OFFSET
    pinned: bool = False

    @property
    def point_id(self) -> str:
        return self.point.name

    @property
    def caption(self) -> str:
        """Names joined for the label's second line ('' when there are none)."""
        return NAMES_SEPARATOR.join(self.names)

    def add_name(self, name: str) -> bool:
        """Append *name* unless already present. Returns True if it was added."""
        if name in self.names:
            return False
        self.names.append(name)
        return True

    def remove_name(self, name: str) -> bool:
        if name not in self.names:
            return False
        self.names.remove(name)
        return True


class PlacementRegistry:
    """Markers keyed by point identifier.

    Iteration is sorted by identifier so that collision resolution, which
    displaces whichever marker of a pair comes second, is reproducible
    regardless of the order points were added in.
    """

    def __init__(self) -> None:
        self._markers: dict[str, LabelledMarker] = {}

    def __contains__(self, point_id: object) -> bool:
        return point_id in self._markers

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self):
        return iter(self.ordered())

    def get(self, point_id: str) -> LabelledMarker | None:
        return self._markers.get(point_id)

    def ids(self) -> list[str]:
        return sorted(self._markers)

    def ordered(self) -> list[LabelledMarker]:
        return [self._markers[pid] for pid in self.ids()]

    def add(self, point: GeoPoint) -> LabelledMarker:
        """Return the marker for *point*, creating it at the default offset."""
        marker = self._markers.get(point.name)
        if marker is None:
            marker = LabelledMarker(point=point)
            self._markers[point.name] = marker
        return marker

    def remove(self, point_id: str) -> LabelledMarker | None:
        return self._markers.pop(point_id, None)

    def clear(self) -> None:
        self._markers.clear()

    def entries(self) -> list[Entry]:
        return [Entry(m.point_id, tuple(m.names)) for m in self.ordered()]
