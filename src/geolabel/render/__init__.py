"""Drawing surfaces for placed labels."""

from geolabel.render.base import LabelContent, Renderer

__all__ = ["LabelContent", "Renderer"]
