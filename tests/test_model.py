"""Tests for the data model and the reference point catalog."""

import pytest

from geolabel.layout.constants import DEFAULT_OFFSET
from geolabel.model import GeoPoint, LabelledMarker, PlacementRegistry
from geolabel.points import US_CITIES, PointCatalog, UnknownPointError

SEATTLE = GeoPoint("Seattle", 47.6062, -122.3321)


def test_new_marker_defaults():
    marker = LabelledMarker(SEATTLE)
    assert marker.point_id == "Seattle"
    assert marker.offset == DEFAULT_OFFSET
    assert not marker.pinned
    assert marker.names == []
    assert marker.caption == ""


def test_marker_names_keep_first_occurrence_order():
    marker = LabelledMarker(SEATTLE)
    assert marker.add_name("Bob")
    assert marker.add_name("Alice")
    assert not marker.add_name("Bob")
    assert marker.names == ["Bob", "Alice"]
    assert marker.caption == "Bob, Alice"


def test_registry_add_is_idempotent():
    registry = PlacementRegistry()
    first = registry.add(SEATTLE)
    first.add_name("Alice")
    assert registry.add(SEATTLE) is first
    assert len(registry) == 1


def test_registry_iterates_sorted():
    registry = PlacementRegistry()
    for name in ("Tacoma", "Boise", "Portland"):
        registry.add(GeoPoint(name, 0, 0))
    assert registry.ids() == ["Boise", "Portland", "Tacoma"]
    assert [m.point_id for m in registry] == ["Boise", "Portland", "Tacoma"]


def test_registry_remove_and_clear():
    registry = PlacementRegistry()
    registry.add(SEATTLE)
    assert registry.remove("Nowhere") is None
    assert registry.remove("Seattle").point is SEATTLE
    registry.add(SEATTLE)
    registry.clear()
    assert "Seattle" not in registry


def test_catalog_lookups():
    catalog = PointCatalog()
    assert len(catalog) == len(US_CITIES)
    assert catalog.find("Seattle") == SEATTLE
    assert catalog.find("Atlantis") is None
    with pytest.raises(UnknownPointError):
        catalog.get("Atlantis")


def test_catalog_names_sorted():
    names = PointCatalog().names()
    assert names == sorted(names)
    assert "New York" in names
