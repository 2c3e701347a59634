from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, Union


BoxOrigin = Literal[
    "top left",
    "top center",
    "top right",
    "center left",
    "center",
    "center right",
    "bottom left",
    "bottom center",
    "bottom right",
]
TextAnchor = Literal["start", "middle", "end", "left", "center", "right"]
PaddingLike = Union[float, Sequence[float], str]

DEFAULT_ORIGIN: BoxOrigin = "top left"

_SVG_TEXT_ANCHORS: dict[str, str] = {
    "left": "start",
    "center": "middle",
    "right": "end",
}


@dataclass(frozen=True)
class Padding:
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class BoxPlacement:
    box_x: float
    box_y: float
    text_x: float
    text_y: float


def parse_padding(value: PaddingLike) -> Padding:
    """Expand CSS-style padding shorthand into a `Padding`.

    Accepts a number, a sequence of numbers, or a whitespace-separated string.
    Values beyond the fourth are ignored.
    """

    if isinstance(value, (int, float)):
        return Padding(value, value, value, value)
    if isinstance(value, str):
        values = [float(part) for part in value.split()]
    else:
        values = list(value)
    if not values:
        return Padding()
    if len(values) == 1:
        (all_sides,) = values
        return Padding(all_sides, all_sides, all_sides, all_sides)
    if len(values) == 2:
        vertical, horizontal = values
        return Padding(vertical, horizontal, vertical, horizontal)
    if len(values) == 3:
        top, horizontal, bottom = values
        return Padding(top, horizontal, bottom, horizontal)
    top, right, bottom, left = values[:4]
    return Padding(top, right, bottom, left)


def resolve_box_origin(
    origin: str,
    x: float,
    y: float,
    width: float,
    height: float,
    padding: Padding,
) -> BoxPlacement:
    """Place a `width` x `height` box so its `origin` anchor lands on (x, y)."""

    anchor = " ".join(origin.split())
    box_x = x
    box_y = y
    if "right" in anchor:
        box_x = x - width
    if anchor.endswith("center"):
        box_x = x - width / 2
    if "bottom" in anchor:
        box_y = y - height
    if anchor.startswith("center"):
        box_y = y - height / 2
    return BoxPlacement(
        box_x=box_x,
        box_y=box_y,
        text_x=box_x + padding.left,
        text_y=box_y + padding.top,
    )


def text_align_offset(anchor: str, x: float, width: float) -> float:
    if anchor in ("end", "right"):
        return x + width
    if anchor in ("middle", "center"):
        return x + width / 2
    return x


def svg_text_anchor(anchor: str) -> str:
    return _SVG_TEXT_ANCHORS.get(anchor, anchor)
