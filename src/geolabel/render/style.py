"""Visual theme definition."""

from __future__ import annotations

__all__ = ["Theme"]

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Colors and fonts for the SVG surface."""

    name: str
    background_color: str
    point_fill: str
    point_stroke: str
    label_fill: str
    label_stroke: str
    title_color: str
    names_color: str
    connector_color: str
    font_family: str = "Helvetica, Arial, sans-serif"
    label_opacity: float = 0.95
