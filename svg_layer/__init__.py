"""Vector overlay builder that serializes drawing primitives into one SVG document."""

from .config import Canvas, LayerOptions
from .defs import (
    BlurFilter,
    ColorStop,
    DropShadowFilter,
    Filter,
    Gradient,
    IdGenerator,
    LinearGradient,
    RadialGradient,
    RandomIdGenerator,
    SequentialIdGenerator,
)
from .drawables import (
    BoxedText,
    Circle,
    CircleOutline,
    Drawable,
    FilterSlot,
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
from .errors import SvgLayerError
from .geometry import Padding, parse_padding, resolve_box_origin, text_align_offset
from .layer import SvgLayer
from .serializer import render_svg
from .text import measure_text, wrap_lines

__all__ = [
    "BlurFilter",
    "BoxedText",
    "Canvas",
    "Circle",
    "CircleOutline",
    "ColorStop",
    "Drawable",
    "DropShadowFilter",
    "Filter",
    "FilterSlot",
    "Gradient",
    "IdGenerator",
    "Image",
    "LayerOptions",
    "Line",
    "LinearGradient",
    "MultilineText",
    "MultilineTextBox",
    "MultilineTextBoxOutline",
    "Padding",
    "Polygon",
    "PolygonOutline",
    "RadialGradient",
    "RandomIdGenerator",
    "Rect",
    "RectOutline",
    "SequentialIdGenerator",
    "SvgLayer",
    "SvgLayerError",
    "Text",
    "TextBox",
    "TextBoxOutline",
    "measure_text",
    "parse_padding",
    "render_svg",
    "resolve_box_origin",
    "text_align_offset",
    "wrap_lines",
]
