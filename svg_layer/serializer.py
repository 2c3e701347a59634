from __future__ import annotations

from typing import Callable, Iterable, Sequence
import xml.etree.ElementTree as ET

from .colors import DEFAULT_COLOR, parse_color
from .config import DEFAULT_FONT_FAMILY, SVG_NAMESPACE, Canvas
from .defs import BlurFilter, ColorStop, Definition, DropShadowFilter, Filter, Gradient, LinearGradient, Paint, RadialGradient
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
from .geometry import parse_padding, resolve_box_origin, svg_text_anchor, text_align_offset
from .text import max_lines_for_height, measure_text, wrap_lines


Attrs = dict[str, str]


def render_svg(
    canvas: Canvas,
    definitions: Sequence[Definition],
    drawables: Sequence[Drawable],
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> str:
    """Serialize definitions and drawables into one SVG document.

    Drawables are emitted in list order, so later entries paint on top.
    """

    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "width": _num(canvas.width),
            "height": _num(canvas.height),
            "font-family": font_family,
        },
    )
    if definitions:
        defs = ET.SubElement(root, "defs")
        for definition in definitions:
            _render_definition(defs, definition)
    for drawable in drawables:
        renderer = _DRAWABLE_RENDERERS.get(type(drawable))
        if renderer is None:
            raise TypeError(f"no SVG mapping for drawable type {type(drawable).__name__}")
        renderer(root, drawable)
    return ET.tostring(root, encoding="unicode", short_empty_elements=False)


def _num(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _paint(attrs: Attrs, operation: str, paint: Paint) -> Attrs:
    if isinstance(paint, Gradient):
        attrs[operation] = paint.url
        return attrs
    color, opacity = parse_color(paint)
    attrs[operation] = color
    if opacity is not None:
        attrs[f"{operation}-opacity"] = _num(opacity)
    return attrs


def _filter(attrs: Attrs, filter: Filter | None) -> Attrs:
    if isinstance(filter, Filter):
        attrs["filter"] = filter.url
    return attrs


def _radius(attrs: Attrs, radius: float) -> Attrs:
    if radius != 0:
        attrs["rx"] = _num(radius)
    return attrs


def _stroke(attrs: Attrs, paint: Paint, line_width: float) -> Attrs:
    _paint(attrs, "stroke", paint)
    attrs["stroke-width"] = _num(line_width)
    attrs["fill"] = "none"
    return attrs


def _render_stops(parent: ET.Element, stops: Iterable[ColorStop]) -> None:
    for stop in stops:
        attrs = {"offset": stop.offset, "stop-color": stop.color}
        if stop.opacity is not None:
            attrs["stop-opacity"] = stop.opacity
        ET.SubElement(parent, "stop", attrs)


def _render_definition(defs: ET.Element, definition: Definition) -> None:
    if isinstance(definition, LinearGradient):
        attrs = {"id": definition.id}
        if definition.angle > 0:
            attrs["gradientTransform"] = f"rotate({_num(definition.angle)})"
        _render_stops(ET.SubElement(defs, "linearGradient", attrs), definition.stops)
    elif isinstance(definition, RadialGradient):
        _render_stops(ET.SubElement(defs, "radialGradient", {"id": definition.id}), definition.stops)
    elif isinstance(definition, DropShadowFilter):
        attrs = {
            "dx": _num(definition.dx),
            "dy": _num(definition.dy),
            "stdDeviation": _num(definition.std_deviation),
        }
        if definition.opacity != 1:
            attrs["flood-opacity"] = _num(definition.opacity)
        if definition.color != DEFAULT_COLOR:
            attrs["flood-color"] = definition.color
        ET.SubElement(ET.SubElement(defs, "filter", {"id": definition.id}), "feDropShadow", attrs)
    elif isinstance(definition, BlurFilter):
        attrs = {"stdDeviation": _num(definition.std_deviation)}
        if definition.input is not None:
            attrs["in"] = definition.input
        ET.SubElement(ET.SubElement(defs, "filter", {"id": definition.id}), "feGaussianBlur", attrs)
    else:
        raise TypeError(f"no SVG mapping for definition type {type(definition).__name__}")


def _text_attrs(x: float, y: float, font_size: float, bold: bool, paint: Paint) -> Attrs:
    attrs = {"x": _num(x), "y": _num(y), "font-size": _num(font_size)}
    if bold:
        attrs["font-weight"] = "bold"
    return _paint(attrs, "fill", paint)


def _render_text_block(
    parent: ET.Element,
    lines: Sequence[str],
    *,
    x: float,
    y: float,
    font_size: float,
    bold: bool,
    paint: Paint,
    text_anchor: str,
    line_height: float,
    filter: Filter | None,
) -> None:
    attrs = _text_attrs(x, y, font_size, bold, paint)
    attrs["dominant-baseline"] = "hanging"
    anchor = svg_text_anchor(text_anchor)
    if anchor != "start":
        attrs["text-anchor"] = anchor
    text_el = ET.SubElement(parent, "text", _filter(attrs, filter))
    # Blank lines emit no tspan; their height folds into the next line's dy.
    previous = 0
    for index, line in enumerate(lines):
        if not line:
            continue
        tspan = ET.SubElement(text_el, "tspan", {"x": _num(x), "dy": _num((index - previous) * line_height)})
        tspan.text = line
        previous = index


def _render_text(root: ET.Element, entry: Text) -> None:
    attrs = _text_attrs(entry.x, entry.y, entry.font_size, entry.bold, entry.color)
    if entry.max_width is not None:
        attrs["textLength"] = _num(entry.max_width)
    attrs["dominant-baseline"] = "hanging"
    anchor = svg_text_anchor(entry.text_anchor)
    if anchor != "start":
        attrs["text-anchor"] = anchor
    ET.SubElement(root, "text", _filter(attrs, entry.filter)).text = entry.text


def _render_multiline_text(root: ET.Element, entry: MultilineText) -> None:
    lines = wrap_lines(
        entry.text,
        entry.width,
        entry.font_size,
        entry.bold,
        max_lines=max_lines_for_height(entry.max_height, entry.line_height),
    )
    _render_text_block(
        root,
        lines,
        x=text_align_offset(entry.text_anchor, entry.x, entry.width),
        y=entry.y,
        font_size=entry.font_size,
        bold=entry.bold,
        paint=entry.color,
        text_anchor=entry.text_anchor,
        line_height=entry.line_height,
        filter=entry.filter,
    )


def _render_rect(root: ET.Element, entry: Rect) -> None:
    attrs = _radius({"x": _num(entry.x), "y": _num(entry.y), "width": _num(entry.width), "height": _num(entry.height)}, entry.radius)
    ET.SubElement(root, "rect", _filter(_paint(attrs, "fill", entry.color), entry.filter))


def _render_rect_outline(root: ET.Element, entry: RectOutline) -> None:
    attrs = _radius({"x": _num(entry.x), "y": _num(entry.y), "width": _num(entry.width), "height": _num(entry.height)}, entry.radius)
    ET.SubElement(root, "rect", _filter(_stroke(attrs, entry.color, entry.line_width), entry.filter))


def _render_circle(root: ET.Element, entry: Circle) -> None:
    attrs = {"cx": _num(entry.x), "cy": _num(entry.y), "r": _num(entry.radius)}
    ET.SubElement(root, "circle", _filter(_paint(attrs, "fill", entry.color), entry.filter))


def _render_circle_outline(root: ET.Element, entry: CircleOutline) -> None:
    attrs = {"cx": _num(entry.x), "cy": _num(entry.y), "r": _num(entry.radius)}
    ET.SubElement(root, "circle", _filter(_stroke(attrs, entry.color, entry.line_width), entry.filter))


def _render_line(root: ET.Element, entry: Line) -> None:
    attrs = {"x1": _num(entry.x1), "y1": _num(entry.y1), "x2": _num(entry.x2), "y2": _num(entry.y2)}
    _paint(attrs, "stroke", entry.color)
    attrs["stroke-width"] = _num(entry.line_width)
    ET.SubElement(root, "line", _filter(attrs, entry.filter))


def _points(entry: Polygon) -> str:
    return " ".join(f"{_num(x)},{_num(y)}" for x, y in entry.point_pairs)


def _render_polygon(root: ET.Element, entry: Polygon) -> None:
    attrs = _paint({"points": _points(entry)}, "fill", entry.color)
    ET.SubElement(root, "polygon", _filter(attrs, entry.filter))


def _render_polygon_outline(root: ET.Element, entry: PolygonOutline) -> None:
    attrs = _stroke({"points": _points(entry)}, entry.color, entry.line_width)
    ET.SubElement(root, "polygon", _filter(attrs, entry.filter))


def _render_image(root: ET.Element, entry: Image) -> None:
    attrs = {"x": _num(entry.x), "y": _num(entry.y)}
    if entry.width is not None:
        attrs["width"] = _num(entry.width)
    if entry.height is not None:
        attrs["height"] = _num(entry.height)
    if entry.opacity is not None:
        attrs["opacity"] = _num(entry.opacity)
    attrs["href"] = entry.data_url
    ET.SubElement(root, "image", _filter(attrs, entry.filter))


def _render_text_box(root: ET.Element, entry: TextBox) -> None:
    padding = parse_padding(entry.padding)
    width = measure_text(entry.text, entry.font_size, entry.bold) + padding.horizontal
    if entry.max_width:
        width = min(width, entry.max_width)
    height = entry.font_size + padding.vertical
    place = resolve_box_origin(entry.origin, entry.x, entry.y, width, height, padding)

    box = _radius(
        {"x": _num(place.box_x), "y": _num(place.box_y), "width": _num(width), "height": _num(height)},
        entry.radius,
    )
    if isinstance(entry, TextBoxOutline):
        _stroke(box, entry.color, entry.line_width)
    else:
        _paint(box, "fill", entry.color)
    ET.SubElement(root, "rect", _filter(box, entry.box_filter))

    text = _text_attrs(place.text_x, place.text_y + 1, entry.font_size, entry.bold, entry.font_color)
    text["textLength"] = _num(width - padding.horizontal)
    text["dominant-baseline"] = "hanging"
    ET.SubElement(root, "text", _filter(text, entry.text_filter)).text = entry.text


def _render_multiline_text_box(root: ET.Element, entry: MultilineTextBox) -> None:
    padding = parse_padding(entry.padding)
    inner_width = entry.width - padding.horizontal
    max_lines = None
    if entry.max_height is not None:
        max_lines = max_lines_for_height(entry.max_height - padding.vertical, entry.line_height)
    lines = wrap_lines(entry.text, inner_width, entry.font_size, entry.bold, max_lines=max_lines)
    if entry.max_height is not None:
        height = entry.max_height
    else:
        height = len(lines) * entry.line_height + padding.vertical - (entry.line_height - entry.font_size)

    box = _radius(
        {"x": _num(entry.x), "y": _num(entry.y), "width": _num(entry.width), "height": _num(height)},
        entry.radius,
    )
    if isinstance(entry, MultilineTextBoxOutline):
        _stroke(box, entry.color, entry.line_width)
    else:
        _paint(box, "fill", entry.color)
    ET.SubElement(root, "rect", _filter(box, entry.box_filter))

    _render_text_block(
        root,
        lines,
        x=text_align_offset(entry.text_anchor, entry.x, inner_width) + padding.left,
        y=entry.y + padding.top + 1,
        font_size=entry.font_size,
        bold=entry.bold,
        paint=entry.font_color,
        text_anchor=entry.text_anchor,
        line_height=entry.line_height,
        filter=entry.text_filter,
    )


_DRAWABLE_RENDERERS: dict[type[Drawable], Callable[[ET.Element, Drawable], None]] = {
    Text: _render_text,
    MultilineText: _render_multiline_text,
    Rect: _render_rect,
    RectOutline: _render_rect_outline,
    Circle: _render_circle,
    CircleOutline: _render_circle_outline,
    Line: _render_line,
    Polygon: _render_polygon,
    PolygonOutline: _render_polygon_outline,
    Image: _render_image,
    TextBox: _render_text_box,
    TextBoxOutline: _render_text_box,
    MultilineTextBox: _render_multiline_text_box,
    MultilineTextBoxOutline: _render_multiline_text_box,
}
