from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from .colors import DEFAULT_COLOR
from .config import Canvas, LayerOptions
from .defs import (
    BlurFilter,
    ColorStop,
    Definition,
    DefinitionRegistry,
    DropShadowFilter,
    IdGenerator,
    LinearGradient,
    Paint,
    RadialGradient,
    SequentialIdGenerator,
)
from .drawables import (
    Circle,
    CircleOutline,
    Drawable,
    Image,
    Line,
    MultilineText,
    MultilineTextBox,
    MultilineTextBoxOutline,
    Polygon,
    PolygonOutline,
    Rect,
    RectOutline,
    Text,
    TextBox,
    TextBoxOutline,
)
from .geometry import DEFAULT_ORIGIN, BoxOrigin, PaddingLike, TextAnchor
from .serializer import render_svg
from .text import measure_text


LOGGER = logging.getLogger(__name__)

D = TypeVar("D", bound=Drawable)


class SvgLayer:
    """Builder for one overlay image.

    Definitions (gradients, filters) and drawables are appended in call order;
    drawables are painted in that order by `create_svg()`. Each builder method
    validates its input before anything is appended.
    """

    def __init__(self, options: LayerOptions | None = None, *, id_generator: IdGenerator | None = None) -> None:
        self.options = options or LayerOptions()
        self.canvas = Canvas.for_options(self.options)
        self._registry = DefinitionRegistry(id_generator=id_generator or SequentialIdGenerator())
        self._drawables: list[Drawable] = []

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    @property
    def definitions(self) -> tuple[Definition, ...]:
        return tuple(self._registry.entries)

    @property
    def drawables(self) -> tuple[Drawable, ...]:
        return tuple(self._drawables)

    def measure_text(self, text: str, font_size: float, bold: bool = False) -> float:
        return measure_text(text, font_size, bold)

    # definitions

    def create_linear_gradient(self, angle: float, *stops: str | ColorStop) -> LinearGradient:
        """Linear gradient rotated by `angle` degrees; stops like `"20% #ccc 0.8"`."""

        return self._registry.linear_gradient(angle, stops)

    def create_radial_gradient(self, *stops: str | ColorStop) -> RadialGradient:
        return self._registry.radial_gradient(stops)

    def create_blur_filter(self, std_deviation: float, input: str | None = None) -> BlurFilter:
        return self._registry.blur_filter(std_deviation, input)

    def create_drop_shadow_filter(
        self,
        dx: float,
        dy: float,
        std_deviation: float,
        color: str = DEFAULT_COLOR,
    ) -> DropShadowFilter:
        """Drop shadow; `color` may carry opacity, e.g. `"#555 50%"`."""

        return self._registry.drop_shadow_filter(dx, dy, std_deviation, color)

    # drawables

    def add_text(
        self,
        text: str,
        font_size: float,
        bold: bool,
        color: Paint,
        x: float,
        y: float,
        *,
        text_anchor: TextAnchor = "start",
        max_width: float | None = None,
    ) -> Text:
        return self._append(
            Text(
                text=text,
                font_size=font_size,
                bold=bold,
                color=color,
                x=x,
                y=y,
                text_anchor=text_anchor,
                max_width=max_width,
            )
        )

    def add_multiline_text(
        self,
        text: str,
        font_size: float,
        bold: bool,
        color: Paint,
        x: float,
        y: float,
        width: float,
        *,
        line_height: float,
        max_height: float | None = None,
        text_anchor: TextAnchor = "start",
    ) -> MultilineText:
        """Text wrapped at `width` and at explicit line breaks."""

        return self._append(
            MultilineText(
                text=text,
                font_size=font_size,
                bold=bold,
                color=color,
                x=x,
                y=y,
                width=width,
                line_height=line_height,
                max_height=max_height,
                text_anchor=text_anchor,
            )
        )

    def add_rect(self, x: float, y: float, width: float, height: float, color: Paint, *, radius: float = 0) -> Rect:
        return self._append(Rect(x=x, y=y, width=width, height=height, color=color, radius=radius))

    def add_rect_outline(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Paint,
        *,
        line_width: float = 1,
        radius: float = 0,
    ) -> RectOutline:
        return self._append(
            RectOutline(x=x, y=y, width=width, height=height, color=color, line_width=line_width, radius=radius)
        )

    def add_circle(self, x: float, y: float, radius: float, color: Paint) -> Circle:
        return self._append(Circle(x=x, y=y, radius=radius, color=color))

    def add_circle_outline(self, x: float, y: float, radius: float, color: Paint, *, line_width: float = 1) -> CircleOutline:
        return self._append(CircleOutline(x=x, y=y, radius=radius, color=color, line_width=line_width))

    def add_line(self, x1: float, y1: float, x2: float, y2: float, color: Paint, *, line_width: float = 1) -> Line:
        return self._append(Line(x1=x1, y1=y1, x2=x2, y2=y2, color=color, line_width=line_width))

    def add_polygon(self, color: Paint, *points: float) -> Polygon:
        """Filled polygon from a flat `x, y, x, y, ...` sequence of at least 3 points."""

        return self._append(Polygon(color=color, points=tuple(points)))

    def add_polygon_outline(self, color: Paint, *points: float, line_width: float = 1) -> PolygonOutline:
        return self._append(PolygonOutline(color=color, points=tuple(points), line_width=line_width))

    def add_image(
        self,
        data_url: str,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
        opacity: float | None = None,
    ) -> Image:
        """Embed a `data:image/...` URI; see `svg_layer.assets.image_to_data_uri`."""

        return self._append(Image(data_url=data_url, x=x, y=y, width=width, height=height, opacity=opacity))

    def add_text_box(
        self,
        text: str,
        font_size: float,
        bold: bool,
        font_color: Paint,
        x: float,
        y: float,
        color: Paint,
        *,
        origin: BoxOrigin = DEFAULT_ORIGIN,
        padding: PaddingLike = 0,
        max_width: float | None = None,
        radius: float = 0,
    ) -> TextBox:
        """Single-line text on a filled box anchored at (x, y) by `origin`."""

        return self._append(
            TextBox(
                text=text,
                font_size=font_size,
                bold=bold,
                font_color=font_color,
                x=x,
                y=y,
                color=color,
                origin=origin,
                padding=padding,
                max_width=max_width,
                radius=radius,
            )
        )

    def add_text_box_outline(
        self,
        text: str,
        font_size: float,
        bold: bool,
        font_color: Paint,
        x: float,
        y: float,
        color: Paint,
        *,
        origin: BoxOrigin = DEFAULT_ORIGIN,
        padding: PaddingLike = 0,
        max_width: float | None = None,
        radius: float = 0,
        line_width: float = 1,
    ) -> TextBoxOutline:
        return self._append(
            TextBoxOutline(
                text=text,
                font_size=font_size,
                bold=bold,
                font_color=font_color,
                x=x,
                y=y,
                color=color,
                origin=origin,
                padding=padding,
                max_width=max_width,
                radius=radius,
                line_width=line_width,
            )
        )

    def add_multiline_text_box(
        self,
        text: str,
        font_size: float,
        bold: bool,
        font_color: Paint,
        x: float,
        y: float,
        width: float,
        color: Paint,
        *,
        line_height: float,
        max_height: float | None = None,
        padding: PaddingLike = 0,
        radius: float = 0,
        text_anchor: TextAnchor = "start",
    ) -> MultilineTextBox:
        """Filled box of fixed `width` holding wrapped text.

        Without `max_height` the box grows with the line count; with it, lines
        that do not fit are dropped.
        """

        return self._append(
            MultilineTextBox(
                text=text,
                font_size=font_size,
                bold=bold,
                font_color=font_color,
                x=x,
                y=y,
                width=width,
                line_height=line_height,
                color=color,
                max_height=max_height,
                padding=padding,
                radius=radius,
                text_anchor=text_anchor,
            )
        )

    def add_multiline_text_box_outline(
        self,
        text: str,
        font_size: float,
        bold: bool,
        font_color: Paint,
        x: float,
        y: float,
        width: float,
        color: Paint,
        *,
        line_height: float,
        max_height: float | None = None,
        padding: PaddingLike = 0,
        radius: float = 0,
        line_width: float = 1,
        text_anchor: TextAnchor = "start",
    ) -> MultilineTextBoxOutline:
        return self._append(
            MultilineTextBoxOutline(
                text=text,
                font_size=font_size,
                bold=bold,
                font_color=font_color,
                x=x,
                y=y,
                width=width,
                line_height=line_height,
                color=color,
                max_height=max_height,
                padding=padding,
                radius=radius,
                line_width=line_width,
                text_anchor=text_anchor,
            )
        )

    # output

    def clear(self) -> None:
        """Drop all definitions and drawables and restart definition ids so the layer can be rebuilt."""

        LOGGER.debug(
            "clearing layer (%d definitions, %d drawables)",
            len(self._registry.entries),
            len(self._drawables),
        )
        self._registry.clear()
        self._drawables.clear()

    def create_svg(self) -> str:
        LOGGER.debug(
            "rendering %dx%d layer with %d definitions and %d drawables",
            self.width,
            self.height,
            len(self._registry.entries),
            len(self._drawables),
        )
        return render_svg(
            self.canvas,
            self._registry.entries,
            self._drawables,
            font_family=self.options.font_family,
        )

    def write_file(self, path: str | Path) -> Path:
        out = Path(path)
        out.write_text(self.create_svg(), encoding="utf-8")
        LOGGER.debug("wrote layer svg to %s", out)
        return out

    def _append(self, drawable: D) -> D:
        self._drawables.append(drawable)
        return drawable
