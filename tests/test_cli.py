"""Tests for the command line interface."""

import xml.etree.ElementTree as ET

import pytest

from geolabel.cli import main
from geolabel.render.constants import CONNECTOR_DASH


def test_render_to_file(tmp_path):
    out = tmp_path / "map.svg"
    status = main(["-e", "Seattle=Alice", "-e", "Portland", "-o", str(out)])
    assert status == 0
    svg = out.read_text()
    assert "Seattle" in svg
    assert "Alice" in svg
    assert "Portland" in svg


def test_render_to_stdout(capsys):
    assert main(["-e", "Denver", "--theme", "dark"]) == 0
    assert "Denver" in capsys.readouterr().out


def test_unknown_city_reported(capsys):
    assert main(["-e", "Atlantis", "-e", "Boston"]) == 1
    captured = capsys.readouterr()
    assert "Unknown city: Atlantis" in captured.err
    assert "Boston" in captured.out


def test_pin_offset(tmp_path):
    out = tmp_path / "map.svg"
    status = main(
        ["-e", "Seattle", "--pin", "Seattle=-120,10", "-o", str(out)]
    )
    assert status == 0
    # The pinned offset is long enough to need a connector.
    root = ET.fromstring(out.read_text())
    dashed = [
        el
        for el in root.iter()
        if el.tag.endswith("path") and el.get("stroke-dasharray") == CONNECTOR_DASH
    ]
    assert len(dashed) == 1


def test_pin_requires_entry(capsys):
    assert main(["--pin", "Seattle=5,5"]) == 1
    assert "Cannot pin Seattle" in capsys.readouterr().err


def test_list_points(capsys):
    assert main(["--list-points"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Seattle" in lines
    assert lines == sorted(lines)


def test_bad_zoom_is_usage_error():
    with pytest.raises(SystemExit):
        main(["--zoom", "40"])


def test_bad_pin_format():
    with pytest.raises(SystemExit):
        main(["--pin", "Seattle"])
