"""SVG drawing surface.

Keeps the latest command state per point and draws it on demand:
connectors first, then point markers, then label boxes on top.
"""

from __future__ import annotations

__all__ = ["SvgRenderer"]

from pathlib import Path

import drawsvg as draw

from geolabel.layout.sizing import estimate_label_size
from geolabel.render.base import LabelContent
from geolabel.render.constants import (
    CONNECTOR_DASH,
    CONNECTOR_WIDTH,
    LABEL_CORNER_RADIUS,
    LABEL_TEXT_INSET,
    NAMES_BASELINE,
    NAMES_FONT_SIZE,
    POINT_FILL_OPACITY,
    POINT_RADIUS,
    POINT_STROKE_WIDTH,
    TITLE_BASELINE,
    TITLE_FONT_SIZE,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from geolabel.render.style import Theme
from geolabel.themes import LIGHT_THEME


class SvgRenderer:
    """Renderer that accumulates commands and emits a drawsvg drawing."""

    def __init__(
        self,
        width: int = VIEWPORT_WIDTH,
        height: int = VIEWPORT_HEIGHT,
        theme: Theme = LIGHT_THEME,
    ) -> None:
        self.width = width
        self.height = height
        self.theme = theme
        self._labels: dict[
            str, tuple[tuple[float, float], tuple[float, float], LabelContent]
        ] = {}
        self._connectors: dict[str, tuple[tuple[float, float], tuple[float, float]]] = {}
        self._points: dict[str, tuple[float, float]] = {}

    # --- Renderer commands ---

    def place_label(
        self,
        point_id: str,
        anchor: tuple[float, float],
        offset: tuple[float, float],
        content: LabelContent,
    ) -> None:
        self._labels[point_id] = (anchor, offset, content)

    def remove_label(self, point_id: str) -> None:
        self._labels.pop(point_id, None)

    def place_connector(
        self,
        point_id: str,
        start: tuple[float, float],
        end: tuple[float, float],
    ) -> None:
        self._connectors[point_id] = (start, end)

    def remove_connector(self, point_id: str) -> None:
        self._connectors.pop(point_id, None)

    def place_point_marker(self, point_id: str, anchor: tuple[float, float]) -> None:
        self._points[point_id] = anchor

    def remove_point_marker(self, point_id: str) -> None:
        self._points.pop(point_id, None)

    # --- Inspection ---

    @property
    def label_ids(self) -> list[str]:
        return sorted(self._labels)

    @property
    def connector_ids(self) -> list[str]:
        return sorted(self._connectors)

    @property
    def point_ids(self) -> list[str]:
        return sorted(self._points)

    # --- Output ---

    def draw(self) -> draw.Drawing:
        theme = self.theme
        d = draw.Drawing(self.width, self.height)
        if theme.background_color != "none":
            d.append(
                draw.Rectangle(0, 0, self.width, self.height, fill=theme.background_color)
            )

        for pid in sorted(self._connectors):
            (sx, sy), (ex, ey) = self._connectors[pid]
            d.append(
                draw.Line(
                    sx,
                    sy,
                    ex,
                    ey,
                    stroke=theme.connector_color,
                    stroke_width=CONNECTOR_WIDTH,
                    stroke_dasharray=CONNECTOR_DASH,
                )
            )

        for pid in sorted(self._points):
            x, y = self._points[pid]
            d.append(
                draw.Circle(
                    x,
                    y,
                    POINT_RADIUS,
                    fill=theme.point_fill,
                    fill_opacity=POINT_FILL_OPACITY,
                    stroke=theme.point_stroke,
                    stroke_width=POINT_STROKE_WIDTH,
                )
            )

        for pid in sorted(self._labels):
            d.append(self._draw_label(*self._labels[pid]))

        return d

    def _draw_label(
        self,
        anchor: tuple[float, float],
        offset: tuple[float, float],
        content: LabelContent,
    ) -> draw.Group:
        theme = self.theme
        width, height = estimate_label_size(content.title, content.names)
        x = anchor[0] + offset[0]
        y = anchor[1] + offset[1]
        group = draw.Group(font_family=theme.font_family)
        group.append(
            draw.Rectangle(
                x,
                y,
                width,
                height,
                rx=LABEL_CORNER_RADIUS,
                ry=LABEL_CORNER_RADIUS,
                fill=theme.label_fill,
                fill_opacity=theme.label_opacity,
                stroke=theme.label_stroke,
                stroke_width=1,
            )
        )
        group.append(
            draw.Text(
                content.title,
                TITLE_FONT_SIZE,
                x + LABEL_TEXT_INSET,
                y + TITLE_BASELINE,
                fill=theme.title_color,
                font_weight="bold",
            )
        )
        if content.names:
            group.append(
                draw.Text(
                    content.caption,
                    NAMES_FONT_SIZE,
                    x + LABEL_TEXT_INSET,
                    y + NAMES_BASELINE,
                    fill=theme.names_color,
                )
            )
        return group

    def as_svg(self) -> str:
        return self.draw().as_svg()

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.as_svg())
