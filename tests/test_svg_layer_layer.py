from __future__ import annotations

from pathlib import Path
import tempfile
import unittest
import xml.etree.ElementTree as ET

from svg_layer import LayerOptions, RandomIdGenerator, SvgLayer, SvgLayerError
from svg_layer.drawables import MultilineTextBox, Polygon, TextBox


class LayerCanvasTests(unittest.TestCase):
    def test_widescreen_by_default(self) -> None:
        layer = SvgLayer()
        self.assertEqual((layer.width, layer.height), (1280, 720))

    def test_standard_canvas(self) -> None:
        layer = SvgLayer(LayerOptions(widescreen=False))
        self.assertEqual((layer.width, layer.height), (1280, 960))

    def test_blank_font_family_is_rejected(self) -> None:
        with self.assertRaises(SvgLayerError):
            LayerOptions(font_family="  ")


class LayerBuilderTests(unittest.TestCase):
    def test_builders_return_appended_handles(self) -> None:
        layer = SvgLayer()
        box = layer.add_text_box("Martin", 16, True, "#fff", 640, 360, "#000 50%", origin="bottom right", padding=10)
        polygon = layer.add_polygon("red", 0, 0, 10, 0, 5, 10)
        self.assertIsInstance(box, TextBox)
        self.assertIsInstance(polygon, Polygon)
        self.assertEqual(layer.drawables, (box, polygon))

    def test_polygon_validation_leaves_scene_untouched(self) -> None:
        layer = SvgLayer()
        with self.assertRaises(SvgLayerError):
            layer.add_polygon("red", 1, 2, 3, 4, 5)
        with self.assertRaises(SvgLayerError):
            layer.add_polygon("red", 1, 2, 3, 4)
        with self.assertRaises(SvgLayerError):
            layer.add_polygon_outline("red", 1, 2, 3, 4, line_width=2)
        self.assertEqual(layer.drawables, ())
        layer.add_polygon("red", 0, 0, 10, 0, 5, 10)
        self.assertEqual(len(layer.drawables), 1)

    def test_image_validation_leaves_scene_untouched(self) -> None:
        layer = SvgLayer()
        with self.assertRaises(SvgLayerError):
            layer.add_image("not-a-data-url", 0, 0)
        self.assertEqual(layer.drawables, ())
        layer.add_image("data:image/png,AAA", 0, 0)
        self.assertEqual(len(layer.drawables), 1)

    def test_empty_gradient_leaves_definitions_untouched(self) -> None:
        layer = SvgLayer()
        with self.assertRaises(SvgLayerError):
            layer.create_linear_gradient(45)
        with self.assertRaises(SvgLayerError):
            layer.create_radial_gradient()
        self.assertEqual(layer.definitions, ())

    def test_set_filter_rejects_gradient(self) -> None:
        layer = SvgLayer()
        gradient = layer.create_radial_gradient("0% red")
        rect = layer.add_rect(0, 0, 1, 1, "red")
        with self.assertRaises(SvgLayerError):
            rect.set_filter(gradient)

    def test_multiline_box_requires_line_height(self) -> None:
        layer = SvgLayer()
        with self.assertRaises(TypeError):
            layer.add_multiline_text_box("a", 16, False, "#fff", 0, 0, 100, "#000")  # type: ignore[call-arg]
        box = layer.add_multiline_text_box("a", 16, False, "#fff", 0, 0, 100, "#000", line_height=20)
        self.assertIsInstance(box, MultilineTextBox)

    def test_measure_text_delegates_to_metrics(self) -> None:
        layer = SvgLayer()
        self.assertAlmostEqual(layer.measure_text("x", 80), 50.0)
        self.assertEqual(layer.measure_text("", 16, True), 0)


class LayerLifecycleTests(unittest.TestCase):
    def test_clear_restores_fresh_output(self) -> None:
        fresh = SvgLayer().create_svg()
        layer = SvgLayer()
        gradient = layer.create_linear_gradient(90, "0% #777", "100% #555")
        shadow = layer.create_drop_shadow_filter(2, 2, 2)
        layer.add_multiline_text_box("Agenda", 16, True, "#fff", 0, 0, 200, gradient, line_height=20).set_filter(shadow)
        layer.add_circle(1, 1, 1, "red")
        self.assertNotEqual(layer.create_svg(), fresh)
        layer.clear()
        self.assertEqual(layer.definitions, ())
        self.assertEqual(layer.drawables, ())
        self.assertEqual(layer.create_svg(), fresh)
        self.assertEqual((layer.width, layer.height), (1280, 720))

    def test_rebuild_after_clear_matches_fresh_build(self) -> None:
        def build(layer: SvgLayer) -> str:
            gradient = layer.create_radial_gradient("0% #fff", "100% #000")
            blur = layer.create_blur_filter(4)
            layer.add_rect(0, 0, 100, 50, gradient).set_filter(blur)
            return layer.create_svg()

        fresh = build(SvgLayer())
        reused = SvgLayer()
        build(reused)
        reused.clear()
        self.assertEqual(build(reused), fresh)
        self.assertIn('id="def1"', fresh)

    def test_output_is_well_formed(self) -> None:
        layer = SvgLayer()
        layer.add_text("Tom & Jerry <live>", 16, False, "#000", 0, 0)
        layer.add_multiline_text_box("\"quoted\"\n& more", 16, False, "#000", 0, 0, 200, "#fff", line_height=20)
        svg = layer.create_svg()
        self.assertTrue(svg.startswith("<svg"))
        self.assertTrue(svg.endswith("</svg>"))
        ET.fromstring(svg)

    def test_injected_id_generator(self) -> None:
        layer = SvgLayer(id_generator=RandomIdGenerator(size=8))
        blur = layer.create_blur_filter(2)
        layer.add_circle(0, 0, 1, "red").set_filter(blur)
        self.assertEqual(len(blur.id), 8)
        self.assertIn(f'filter="url(#{blur.id})"', layer.create_svg())

    def test_write_file(self) -> None:
        layer = SvgLayer()
        layer.add_rect(0, 0, layer.width, layer.height, "#8c0e0d")
        with tempfile.TemporaryDirectory() as tmp:
            out = layer.write_file(Path(tmp) / "layer.svg")
            self.assertEqual(out.read_text(encoding="utf-8"), layer.create_svg())


if __name__ == "__main__":
    unittest.main()
