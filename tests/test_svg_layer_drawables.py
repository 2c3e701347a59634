from __future__ import annotations

import unittest

from svg_layer.defs import BlurFilter, ColorStop, DropShadowFilter, LinearGradient
from svg_layer.drawables import (
    FilterSlot,
    Image,
    MultilineText,
    MultilineTextBox,
    Polygon,
    PolygonOutline,
    Rect,
    TextBox,
)
from svg_layer.errors import SvgLayerError


def _box() -> TextBox:
    return TextBox(text="name", font_size=16, bold=False, font_color="#fff", x=0, y=0, color="#000 50%")


class PolygonTests(unittest.TestCase):
    def test_point_count_validation(self) -> None:
        with self.assertRaises(SvgLayerError):
            Polygon(color="red", points=(1, 2, 3, 4, 5))
        with self.assertRaises(SvgLayerError):
            Polygon(color="red", points=(1, 2, 3, 4))
        with self.assertRaises(SvgLayerError):
            PolygonOutline(color="red", points=(1, 2, 3))
        polygon = Polygon(color="red", points=(0, 0, 10, 0, 5, 10))
        self.assertEqual(polygon.point_pairs, [(0, 0), (10, 0), (5, 10)])


class ImageTests(unittest.TestCase):
    def test_requires_image_data_url(self) -> None:
        with self.assertRaises(SvgLayerError):
            Image(data_url="not-a-data-url", x=0, y=0)
        with self.assertRaises(SvgLayerError):
            Image(data_url="data:text/plain,hello", x=0, y=0)
        with self.assertRaises(SvgLayerError):
            Image(data_url="data:image/png,", x=0, y=0)
        image = Image(data_url="data:image/png,AAA", x=0, y=0)
        self.assertIsNone(image.width)


class LineHeightTests(unittest.TestCase):
    def test_multiline_variants_need_positive_line_height(self) -> None:
        with self.assertRaises(SvgLayerError):
            MultilineText(text="a", font_size=16, bold=False, color="#000", x=0, y=0, width=100, line_height=0)
        with self.assertRaises(SvgLayerError):
            MultilineTextBox(
                text="a",
                font_size=16,
                bold=False,
                font_color="#000",
                x=0,
                y=0,
                width=100,
                line_height=-4,
                color="#fff",
            )


class SetFilterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.blur = BlurFilter(id="f1", std_deviation=2)
        self.shadow = DropShadowFilter(id="f2", dx=1, dy=1, std_deviation=1)

    def test_rejects_non_filter(self) -> None:
        gradient = LinearGradient(id="g1", stops=(ColorStop("0%", "red"),))
        rect = Rect(x=0, y=0, width=1, height=1, color="red")
        with self.assertRaises(SvgLayerError):
            rect.set_filter(gradient)
        with self.assertRaises(SvgLayerError):
            rect.set_filter("blur")
        self.assertIsNone(rect.filter)

    def test_plain_drawable_has_no_slots(self) -> None:
        rect = Rect(x=0, y=0, width=1, height=1, color="red")
        with self.assertRaises(SvgLayerError):
            rect.set_filter(self.blur, FilterSlot.BOX)
        self.assertIs(rect.set_filter(self.blur), rect)
        self.assertIs(rect.filter, self.blur)

    def test_slots_fall_back_to_shared_filter(self) -> None:
        box = _box()
        box.set_filter(self.blur)
        self.assertIs(box.box_filter, self.blur)
        self.assertIs(box.text_filter, self.blur)
        box.set_filter(self.shadow, "box")
        self.assertIs(box.box_filter, self.shadow)
        self.assertIs(box.text_filter, self.blur)
        box.set_filter(self.shadow, FilterSlot.TEXT)
        self.assertIs(box.text_filter, self.shadow)

    def test_unknown_slot_is_rejected(self) -> None:
        box = _box()
        with self.assertRaises(SvgLayerError):
            box.set_filter(self.blur, "border")
        self.assertIsNone(box.filter)


if __name__ == "__main__":
    unittest.main()
