"""Tests for leader line routing."""

import pytest

from geolabel.layout.leaders import Connector, nearest_edge_point, route_leader

BOX = (10, 10, 50, 30)


class TestNearestEdgePoint:
    """Tests for nearest_edge_point over the nine anchor regions."""

    @pytest.mark.parametrize(
        "anchor, expected",
        [
            ((0, 0), (10, 10)),  # above left -> top-left corner
            ((60, 0), (50, 10)),  # above right -> top-right corner
            ((0, 40), (10, 30)),  # below left -> bottom-left corner
            ((60, 40), (50, 30)),  # below right -> bottom-right corner
        ],
    )
    def test_corner_regions(self, anchor, expected):
        assert nearest_edge_point(anchor, BOX) == expected

    @pytest.mark.parametrize(
        "anchor, expected",
        [
            ((30, 0), (30, 10)),  # above -> top edge
            ((30, 45), (30, 30)),  # below -> bottom edge
            ((0, 20), (10, 20)),  # left -> left edge
            ((70, 25), (50, 25)),  # right -> right edge
        ],
    )
    def test_edge_regions(self, anchor, expected):
        assert nearest_edge_point(anchor, BOX) == expected

    def test_inside_maps_to_center(self):
        assert nearest_edge_point((20, 20), BOX) == (30, 20)


class TestRouteLeader:
    """Tests for route_leader."""

    def test_default_offset_has_no_connector(self):
        assert route_leader((100, 100), (10, -20), (72, 26)) is None

    def test_exactly_threshold_has_no_connector(self):
        assert route_leader((0, 0), (30, 0), (60, 26)) is None
        assert route_leader((0, 0), (18, 24), (60, 26)) is None

    def test_just_over_threshold_has_connector(self):
        assert route_leader((0, 0), (30, 0.5), (60, 26)) is not None

    def test_connector_runs_to_nearest_edge(self):
        connector = route_leader((100, 100), (-100, -20), (72, 26))
        assert connector == Connector(start=(100, 100), end=(72, 100))

    def test_connector_to_corner(self):
        connector = route_leader((100, 100), (-120, 10), (72, 26))
        assert connector.end == (52, 110)

    def test_custom_threshold(self):
        assert route_leader((0, 0), (10, -20), (60, 26), threshold=20) is not None
