from __future__ import annotations

from dataclasses import dataclass

from .errors import SvgLayerError


SVG_NAMESPACE = "http://www.w3.org/2000/svg"
CANVAS_WIDTH = 1280
WIDESCREEN_HEIGHT = 720
STANDARD_HEIGHT = 960
DEFAULT_FONT_FAMILY = "DejaVu Sans,sans-serif"


@dataclass(frozen=True)
class LayerOptions:
    widescreen: bool = True
    font_family: str = DEFAULT_FONT_FAMILY

    def __post_init__(self) -> None:
        if not self.font_family.strip():
            raise SvgLayerError("LayerOptions `font_family` must be non-empty")


@dataclass(frozen=True)
class Canvas:
    """Fixed output surface every coordinate is relative to."""

    width: int
    height: int

    @classmethod
    def for_options(cls, options: LayerOptions) -> "Canvas":
        height = WIDESCREEN_HEIGHT if options.widescreen else STANDARD_HEIGHT
        return cls(width=CANVAS_WIDTH, height=height)
