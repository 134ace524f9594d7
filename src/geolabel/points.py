"""Reference list of known points and lookups against it."""

from __future__ import annotations

__all__ = ["PointCatalog", "US_CITIES", "UnknownPointError"]

from collections.abc import Iterable

from geolabel.model import GeoPoint

US_CITIES: tuple[GeoPoint, ...] = (
    GeoPoint("Albuquerque", 35.0844, -106.6504),
    GeoPoint("Anchorage", 61.2181, -149.9003),
    GeoPoint("Atlanta", 33.7490, -84.3880),
    GeoPoint("Austin", 30.2672, -97.7431),
    GeoPoint("Baltimore", 39.2904, -76.6122),
    GeoPoint("Boise", 43.6150, -116.2023),
    GeoPoint("Boston", 42.3601, -71.0589),
    GeoPoint("Charlotte", 35.2271, -80.8431),
    GeoPoint("Chicago", 41.8781, -87.6298),
    GeoPoint("Cleveland", 41.4993, -81.6944),
    GeoPoint("Columbus", 39.9612, -82.9988),
    GeoPoint("Dallas", 32.7767, -96.7970),
    GeoPoint("Denver", 39.7392, -104.9903),
    GeoPoint("Detroit", 42.3314, -83.0458),
    GeoPoint("El Paso", 31.7619, -106.4850),
    GeoPoint("Fort Worth", 32.7555, -97.3308),
    GeoPoint("Honolulu", 21.3069, -157.8583),
    GeoPoint("Houston", 29.7604, -95.3698),
    GeoPoint("Indianapolis", 39.7684, -86.1581),
    GeoPoint("Jacksonville", 30.3322, -81.6557),
    GeoPoint("Kansas City", 39.0997, -94.5786),
    GeoPoint("Las Vegas", 36.1699, -115.1398),
    GeoPoint("Los Angeles", 34.0522, -118.2437),
    GeoPoint("Louisville", 38.2527, -85.7585),
    GeoPoint("Memphis", 35.1495, -90.0490),
    GeoPoint("Miami", 25.7617, -80.1918),
    GeoPoint("Milwaukee", 43.0389, -87.9065),
    GeoPoint("Minneapolis", 44.9778, -93.2650),
    GeoPoint("Nashville", 36.1627, -86.7816),
    GeoPoint("New Orleans", 29.9511, -90.0715),
    GeoPoint("New York", 40.7128, -74.0060),
    GeoPoint("Oakland", 37.8044, -122.2712),
    GeoPoint("Oklahoma City", 35.4676, -97.5164),
    GeoPoint("Omaha", 41.2565, -95.9345),
    GeoPoint("Philadelphia", 39.9526, -75.1652),
    GeoPoint("Phoenix", 33.4484, -112.0740),
    GeoPoint("Pittsburgh", 40.4406, -79.9959),
    GeoPoint("Portland", 45.5152, -122.6784),
    GeoPoint("Raleigh", 35.7796, -78.6382),
    GeoPoint("Sacramento", 38.5816, -121.4944),
    GeoPoint("Salt Lake City", 40.7608, -111.8910),
    GeoPoint("San Antonio", 29.4241, -98.4936),
    GeoPoint("San Diego", 32.7157, -117.1611),
    GeoPoint("San Francisco", 37.7749, -122.4194),
    GeoPoint("San Jose", 37.3382, -121.8863),
    GeoPoint("Seattle", 47.6062, -122.3321),
    GeoPoint("St. Louis", 38.6270, -90.1994),
    GeoPoint("Tacoma", 47.2529, -122.4443),
    GeoPoint("Tampa", 27.9506, -82.4572),
    GeoPoint("Tucson", 32.2226, -110.9747),
    GeoPoint("Washington", 38.9072, -77.0369),
)


class UnknownPointError(KeyError):
    """Raised by strict lookups for an identifier outside the reference list."""


class PointCatalog:
    """Closed set of points that may be placed on the map."""

    def __init__(self, points: Iterable[GeoPoint] = US_CITIES) -> None:
        self._points: dict[str, GeoPoint] = {p.name: p for p in points}

    def __contains__(self, point_id: object) -> bool:
        return point_id in self._points

    def __len__(self) -> int:
        return len(self._points)

    def find(self, point_id: str) -> GeoPoint | None:
        return self._points.get(point_id)

    def get(self, point_id: str) -> GeoPoint:
        try:
            return self._points[point_id]
        except KeyError:
            raise UnknownPointError(point_id) from None

    def names(self) -> list[str]:
        return sorted(self._points)
