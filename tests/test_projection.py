"""Tests for the Web Mercator viewport projector."""

import pytest

from geolabel.points import PointCatalog
from geolabel.projection import WebMercatorProjector


def test_center_projects_to_viewport_middle():
    proj = WebMercatorProjector(center_lat=40.0, center_lng=-100.0, width=800, height=600)
    x, y = proj.project(40.0, -100.0)
    assert x == pytest.approx(400)
    assert y == pytest.approx(300)


def test_north_is_up_east_is_right():
    proj = WebMercatorProjector()
    seattle = PointCatalog().get("Seattle")
    miami = PointCatalog().get("Miami")
    sx, sy = proj.project(seattle.lat, seattle.lng)
    mx, my = proj.project(miami.lat, miami.lng)
    assert sx < mx
    assert sy < my


def test_unproject_inverts_project():
    proj = WebMercatorProjector(zoom=6)
    x, y = proj.project(47.6062, -122.3321)
    lat, lng = proj.unproject(x, y)
    assert lat == pytest.approx(47.6062)
    assert lng == pytest.approx(-122.3321)


def test_zoom_in_doubles_pixel_distances():
    a = WebMercatorProjector(zoom=4)
    b = a.zoomed(5)
    ax0, _ = a.project(40, -100)
    ax1, _ = a.project(40, -90)
    bx0, _ = b.project(40, -100)
    bx1, _ = b.project(40, -90)
    assert bx1 - bx0 == pytest.approx(2 * (ax1 - ax0))


def test_pan_shifts_points_opposite():
    proj = WebMercatorProjector()
    moved = proj.panned(100, -50)
    x, y = proj.project(35.0, -90.0)
    mx, my = moved.project(35.0, -90.0)
    assert mx == pytest.approx(x - 100)
    assert my == pytest.approx(y + 50)


def test_projector_is_immutable():
    proj = WebMercatorProjector()
    proj.zoomed(7)
    assert proj.zoom == 4


@pytest.mark.parametrize(
    "kwargs",
    [{"width": 0}, {"height": -5}, {"zoom": -1}, {"zoom": 23}],
)
def test_invalid_viewport(kwargs):
    with pytest.raises(ValueError):
        WebMercatorProjector(**kwargs)
