"""Shared test fixtures and helpers for the geolabel test suite."""

from __future__ import annotations

import pytest

from geolabel.model import GeoPoint, PlacementRegistry
from geolabel.orchestrator import PlacementOrchestrator


class FakeProjector:
    """Projector for tests: latitude is pixel y, longitude is pixel x."""

    def __init__(self, dx: float = 0.0, dy: float = 0.0) -> None:
        self.dx = dx
        self.dy = dy
        self.calls = 0

    def project(self, lat: float, lng: float) -> tuple[float, float]:
        self.calls += 1
        return (lng + self.dx, lat + self.dy)

    def unproject(self, x: float, y: float) -> tuple[float, float]:
        return (y - self.dy, x - self.dx)


class RecordingRenderer:
    """Renderer that records commands and tracks what is currently drawn."""

    def __init__(self) -> None:
        self.commands: list[tuple] = []
        self.labels: dict[str, tuple] = {}
        self.connectors: dict[str, tuple] = {}
        self.points: dict[str, tuple[float, float]] = {}

    def place_label(self, point_id, anchor, offset, content):
        self.commands.append(("place_label", point_id))
        self.labels[point_id] = (anchor, offset, content)

    def remove_label(self, point_id):
        self.commands.append(("remove_label", point_id))
        self.labels.pop(point_id, None)

    def place_connector(self, point_id, start, end):
        self.commands.append(("place_connector", point_id))
        self.connectors[point_id] = (start, end)

    def remove_connector(self, point_id):
        self.commands.append(("remove_connector", point_id))
        self.connectors.pop(point_id, None)

    def place_point_marker(self, point_id, anchor):
        self.commands.append(("place_point_marker", point_id))
        self.points[point_id] = anchor

    def remove_point_marker(self, point_id):
        self.commands.append(("remove_point_marker", point_id))
        self.points.pop(point_id, None)


def _point_at(name: str, x: float, y: float) -> GeoPoint:
    return GeoPoint(name, lat=y, lng=x)


# Anchors in FakeProjector pixels.
TEST_POINTS = (
    _point_at("Seattle", 100, 100),
    _point_at("Portland", 100, 110),
    _point_at("Tacoma", 20, 100),
    _point_at("Boise", 400, 100),
    _point_at("Casper", 400, 135),
    _point_at("Denver", 700, 400),
)


# --- Pytest fixtures ---


@pytest.fixture
def projector() -> FakeProjector:
    return FakeProjector()


@pytest.fixture
def make_projector():
    """Factory for projectors shifted by (dx, dy) pixels."""
    return FakeProjector


@pytest.fixture
def make_point():
    """Factory for a point whose fake anchor is (x, y)."""
    return _point_at


@pytest.fixture
def make_registry():
    """Factory for a registry holding the given points."""

    def _make(*points: GeoPoint) -> PlacementRegistry:
        registry = PlacementRegistry()
        for p in points:
            registry.add(p)
        return registry

    return _make


@pytest.fixture
def known_points() -> tuple[GeoPoint, ...]:
    return TEST_POINTS


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def orchestrator(projector, renderer) -> PlacementOrchestrator:
    """Orchestrator over TEST_POINTS with a fake projector and recorder."""
    return PlacementOrchestrator(projector, renderer, points=TEST_POINTS)
