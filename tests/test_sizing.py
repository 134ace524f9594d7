"""Tests for label size estimation."""

from geolabel.layout.constants import (
    LABEL_HEIGHT,
    LABEL_HEIGHT_WITH_NAMES,
    MIN_LABEL_WIDTH,
)
from geolabel.layout.sizing import estimate_label_size, estimated_width


def test_title_only():
    # 7 chars * 8 + 16 padding
    size = estimate_label_size("Seattle")
    assert size.width == 72
    assert size.height == LABEL_HEIGHT


def test_short_title_uses_min_width():
    assert estimate_label_size("Boise").width == MIN_LABEL_WIDTH


def test_names_make_label_taller():
    assert estimate_label_size("Boise", ["Ann"]).height == LABEL_HEIGHT_WITH_NAMES


def test_long_caption_sets_width():
    # "Alexandra Hamilton" is 18 chars * 6.5 + 16
    size = estimate_label_size("Boise", ["Alexandra Hamilton"])
    assert size.width == 133


def test_caption_joins_names_with_separator():
    # "Ann, Bob" is 8 chars
    assert estimate_label_size("X", ["Ann", "Bob"]).width == max(
        8 * 6.5 + 16, MIN_LABEL_WIDTH
    )


def test_list_and_tuple_names_agree():
    assert estimate_label_size("Tacoma", ["A", "B"]) == estimate_label_size(
        "Tacoma", ("A", "B")
    )


def test_estimated_width_includes_padding():
    assert estimated_width("", 8) == 16
    assert estimated_width("abc", 10) == 46
