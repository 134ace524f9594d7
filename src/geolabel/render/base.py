"""Command interface between the placement engine and a drawing surface."""

from __future__ import annotations

__all__ = ["LabelContent", "Renderer"]

from dataclasses import dataclass
from typing import Protocol

from geolabel.layout.constants import NAMES_SEPARATOR


@dataclass(frozen=True)
class LabelContent:
    """Text of one label: the point name and the names on its caption line."""

    title: str
    names: tuple[str, ...] = ()

    @property
    def caption(self) -> str:
        return NAMES_SEPARATOR.join(self.names)


class Renderer(Protocol):
    """Side-effecting drawing commands; nothing is ever read back."""

    def place_label(
        self,
        point_id: str,
        anchor: tuple[float, float],
        offset: tuple[float, float],
        content: LabelContent,
    ) -> None: ...

    def remove_label(self, point_id: str) -> None: ...

    def place_connector(
        self,
        point_id: str,
        start: tuple[float, float],
        end: tuple[float, float],
    ) -> None: ...

    def remove_connector(self, point_id: str) -> None: ...

    def place_point_marker(self, point_id: str, anchor: tuple[float, float]) -> None: ...

    def remove_point_marker(self, point_id: str) -> None: ...
