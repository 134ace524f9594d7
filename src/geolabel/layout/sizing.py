"""Label size estimation from text content.

There is no font engine at layout time, so widths come from a fixed
per-character advance for each text role.  Results are memoized because
the resolver asks for every label's size on every pair comparison.
"""

from __future__ import annotations

__all__ = ["LabelSize", "estimate_label_size", "estimated_width"]

from collections.abc import Sequence
from functools import lru_cache
from typing import NamedTuple

from geolabel.layout.constants import (
    LABEL_H_PADDING,
    LABEL_HEIGHT,
    LABEL_HEIGHT_WITH_NAMES,
    MIN_LABEL_WIDTH,
    NAMES_CHAR_WIDTH,
    NAMES_SEPARATOR,
    TITLE_CHAR_WIDTH,
)


class LabelSize(NamedTuple):
    width: float
    height: float


def estimated_width(text: str, char_width: float) -> float:
    """Pixel width of *text* including the box's horizontal padding."""
    return len(text) * char_width + LABEL_H_PADDING


def estimate_label_size(title: str, names: Sequence[str] = ()) -> LabelSize:
    """Estimate the label box for a point title and its caption names."""
    return _estimate(title, tuple(names))


@lru_cache(maxsize=1024)
def _estimate(title: str, names: tuple[str, ...]) -> LabelSize:
    width = max(
        estimated_width(title, TITLE_CHAR_WIDTH),
        estimated_width(NAMES_SEPARATOR.join(names), NAMES_CHAR_WIDTH),
        MIN_LABEL_WIDTH,
    )
    height = LABEL_HEIGHT_WITH_NAMES if names else LABEL_HEIGHT
    return LabelSize(width, height)
