from __future__ import annotations

import base64
from pathlib import Path
import tempfile
import unittest

from PIL import Image

from svg_layer import SvgLayer
from svg_layer.assets import detect_mime_type, image_size, image_to_data_uri


class AssetsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _save(self, name: str, fmt: str) -> Path:
        path = self.root / name
        Image.new("RGB", (4, 3), (255, 0, 0)).save(path, format=fmt)
        return path

    def test_png_data_uri_round_trips_bytes(self) -> None:
        path = self._save("logo.png", "PNG")
        uri = image_to_data_uri(path)
        prefix = "data:image/png;base64,"
        self.assertTrue(uri.startswith(prefix))
        self.assertEqual(base64.b64decode(uri[len(prefix):]), path.read_bytes())

    def test_mime_comes_from_content_not_extension(self) -> None:
        path = self._save("photo.img", "JPEG")
        self.assertEqual(detect_mime_type(path), "image/jpeg")

    def test_explicit_mime_wins(self) -> None:
        path = self._save("logo.png", "PNG")
        self.assertTrue(image_to_data_uri(path, "image/x-custom").startswith("data:image/x-custom;base64,"))

    def test_vector_files_fall_back_to_extension(self) -> None:
        path = self.root / "icon.svg"
        path.write_text('<svg xmlns="http://www.w3.org/2000/svg"/>', encoding="utf-8")
        self.assertTrue(image_to_data_uri(path).startswith("data:image/svg+xml;base64,"))

    def test_missing_file_propagates(self) -> None:
        with self.assertRaises(FileNotFoundError):
            image_to_data_uri(self.root / "missing.png")

    def test_image_size_and_layer_embedding(self) -> None:
        path = self._save("logo.png", "PNG")
        self.assertEqual(image_size(path), (4, 3))
        layer = SvgLayer()
        layer.add_image(image_to_data_uri(path), 10, 10, *image_size(path))
        self.assertIn('width="4" height="3"', layer.create_svg())


if __name__ == "__main__":
    unittest.main()
