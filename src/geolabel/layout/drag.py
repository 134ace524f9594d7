"""Drag interaction: turns start/move/end pointer messages into label offsets.

Pointer positions are the viewport pixel position of the label box's
top-left corner, so the offset is simply ``pointer - anchor``.  The session
never touches the registry; the caller applies each update to the marker
and pins it on :meth:`DragSession.end`.
"""

from __future__ import annotations

__all__ = ["DragSession", "DragState", "DragUpdate"]

from dataclasses import dataclass
from enum import Enum


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    PINNED = "pinned"


@dataclass(frozen=True)
class DragUpdate:
    point_id: str
    offset: tuple[float, float]
    state: DragState


def _offset(
    pointer: tuple[float, float],
    anchor: tuple[float, float],
) -> tuple[float, float]:
    return (pointer[0] - anchor[0], pointer[1] - anchor[1])


class DragSession:
    """At most one label is dragged at a time.

    ``IDLE -> DRAGGING`` on start, ``DRAGGING -> DRAGGING`` on move and
    ``DRAGGING -> PINNED`` on end.  From ``PINNED`` a new drag may start.
    Moves and ends outside a drag are ignored and return None.
    """

    def __init__(self) -> None:
        self.state = DragState.IDLE
        self.point_id: str | None = None

    @property
    def active(self) -> bool:
        return self.state is DragState.DRAGGING

    def start(
        self,
        point_id: str,
        pointer: tuple[float, float],
        anchor: tuple[float, float],
    ) -> DragUpdate:
        self.state = DragState.DRAGGING
        self.point_id = point_id
        return DragUpdate(point_id, _offset(pointer, anchor), self.state)

    def move(
        self,
        pointer: tuple[float, float],
        anchor: tuple[float, float],
    ) -> DragUpdate | None:
        if not self.active:
            return None
        return DragUpdate(self.point_id, _offset(pointer, anchor), self.state)

    def end(
        self,
        pointer: tuple[float, float],
        anchor: tuple[float, float],
    ) -> DragUpdate | None:
        if not self.active:
            return None
        self.state = DragState.PINNED
        return DragUpdate(self.point_id, _offset(pointer, anchor), self.state)

    def cancel(self) -> None:
        """Abandon the current drag without pinning anything."""
        self.state = DragState.IDLE
        self.point_id = None
