"""Built-in themes."""

from __future__ import annotations

__all__ = ["DARK_THEME", "LIGHT_THEME", "THEMES"]

from geolabel.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#f2efe9",
    point_fill="#3498db",
    point_stroke="#2c3e50",
    label_fill="#ffffff",
    label_stroke="#2c3e50",
    title_color="#2c3e50",
    names_color="#555555",
    connector_color="#2c3e50",
)

DARK_THEME = Theme(
    name="dark",
    background_color="#1e2227",
    point_fill="#5dade2",
    point_stroke="#ecf0f1",
    label_fill="#2c3e50",
    label_stroke="#ecf0f1",
    title_color="#ecf0f1",
    names_color="#bdc3c7",
    connector_color="#ecf0f1",
)

THEMES: dict[str, Theme] = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}
