from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import re

from .defs import Filter, Paint
from .errors import SvgLayerError
from .geometry import DEFAULT_ORIGIN, PaddingLike, TextAnchor


_DATA_IMAGE_URL = re.compile(r"^data:image/[^,]+,.+", re.DOTALL)


class FilterSlot(str, Enum):
    BOX = "box"
    TEXT = "text"

    @classmethod
    def coerce(cls, slot: "FilterSlot | str") -> "FilterSlot":
        try:
            return cls(slot)
        except ValueError:
            raise SvgLayerError(f"unknown filter slot: {slot!r}") from None


@dataclass
class Drawable:
    """Base for every paintable entry of a layer.

    Drawables are handles: the builder returns them so callers can attach a
    filter after creation.
    """

    filter: Filter | None = field(default=None, kw_only=True)

    def set_filter(self, filter: Filter, slot: FilterSlot | str | None = None) -> "Drawable":
        if not isinstance(filter, Filter):
            raise SvgLayerError("invalid filter")
        if slot is not None:
            raise SvgLayerError(f"{type(self).__name__} has no `{FilterSlot.coerce(slot).value}` filter slot")
        self.filter = filter
        return self


@dataclass
class BoxedText(Drawable):
    """Text drawn over a background box; box and text can carry separate filters."""

    filter_box: Filter | None = field(default=None, kw_only=True)
    filter_text: Filter | None = field(default=None, kw_only=True)

    def set_filter(self, filter: Filter, slot: FilterSlot | str | None = None) -> "BoxedText":
        if not isinstance(filter, Filter):
            raise SvgLayerError("invalid filter")
        if slot is None:
            self.filter = filter
        elif FilterSlot.coerce(slot) is FilterSlot.BOX:
            self.filter_box = filter
        else:
            self.filter_text = filter
        return self

    @property
    def box_filter(self) -> Filter | None:
        return self.filter_box or self.filter

    @property
    def text_filter(self) -> Filter | None:
        return self.filter_text or self.filter


def _check_line_height(line_height: float) -> None:
    if line_height is None or line_height <= 0:
        raise SvgLayerError("line_height must be > 0")


def _check_points(points: tuple[float, ...]) -> None:
    if len(points) % 2 != 0:
        raise SvgLayerError("number of points must be even")
    if len(points) < 6:
        raise SvgLayerError("polygon must have at least 3 coordinates")


@dataclass
class Text(Drawable):
    text: str
    font_size: float
    bold: bool
    color: Paint
    x: float
    y: float
    text_anchor: TextAnchor = "start"
    max_width: float | None = None


@dataclass
class MultilineText(Drawable):
    text: str
    font_size: float
    bold: bool
    color: Paint
    x: float
    y: float
    width: float
    line_height: float
    max_height: float | None = None
    text_anchor: TextAnchor = "start"

    def __post_init__(self) -> None:
        _check_line_height(self.line_height)


@dataclass
class Rect(Drawable):
    x: float
    y: float
    width: float
    height: float
    color: Paint
    radius: float = 0


@dataclass
class RectOutline(Drawable):
    x: float
    y: float
    width: float
    height: float
    color: Paint
    line_width: float = 1
    radius: float = 0


@dataclass
class Circle(Drawable):
    x: float
    y: float
    radius: float
    color: Paint


@dataclass
class CircleOutline(Drawable):
    x: float
    y: float
    radius: float
    color: Paint
    line_width: float = 1


@dataclass
class Line(Drawable):
    x1: float
    y1: float
    x2: float
    y2: float
    color: Paint
    line_width: float = 1


@dataclass
class Polygon(Drawable):
    color: Paint
    points: tuple[float, ...]

    def __post_init__(self) -> None:
        _check_points(self.points)

    @property
    def point_pairs(self) -> list[tuple[float, float]]:
        return list(zip(self.points[0::2], self.points[1::2]))


@dataclass
class PolygonOutline(Polygon):
    line_width: float = 1


@dataclass
class Image(Drawable):
    data_url: str
    x: float
    y: float
    width: float | None = None
    height: float | None = None
    opacity: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.data_url, str) or not _DATA_IMAGE_URL.match(self.data_url):
            raise SvgLayerError("invalid data url")


@dataclass
class TextBox(BoxedText):
    """Single line of text on a box sized to the measured text plus padding."""

    text: str
    font_size: float
    bold: bool
    font_color: Paint
    x: float
    y: float
    color: Paint
    origin: str = DEFAULT_ORIGIN
    padding: PaddingLike = 0
    max_width: float | None = None
    radius: float = 0


@dataclass
class TextBoxOutline(TextBox):
    line_width: float = 1


@dataclass
class MultilineTextBox(BoxedText):
    """Wrapped text inside a fixed-width box; height follows the line count."""

    text: str
    font_size: float
    bold: bool
    font_color: Paint
    x: float
    y: float
    width: float
    line_height: float
    color: Paint
    max_height: float | None = None
    padding: PaddingLike = 0
    radius: float = 0
    text_anchor: TextAnchor = "start"

    def __post_init__(self) -> None:
        _check_line_height(self.line_height)


@dataclass
class MultilineTextBoxOutline(MultilineTextBox):
    line_width: float = 1


DRAWABLE_TYPES: tuple[type[Drawable], ...] = (
    Text,
    MultilineText,
    Rect,
    RectOutline,
    Circle,
    CircleOutline,
    Line,
    Polygon,
    PolygonOutline,
    Image,
    TextBox,
    TextBoxOutline,
    MultilineTextBox,
    MultilineTextBoxOutline,
)
