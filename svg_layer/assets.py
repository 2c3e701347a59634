from __future__ import annotations

import base64
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError


LOGGER = logging.getLogger(__name__)


def detect_mime_type(path: str | Path) -> str:
    """MIME type of a raster image as seen by Pillow.

    Files Pillow cannot identify (SVG and other vector formats) fall back to
    `image/<extension>`.
    """

    src = Path(path)
    try:
        with Image.open(src) as img:
            fmt = img.format
    except UnidentifiedImageError:
        fmt = None
    if fmt and fmt in Image.MIME:
        return Image.MIME[fmt]
    ext = src.suffix.lstrip(".").lower()
    if ext == "svg":
        return "image/svg+xml"
    return f"image/{ext or 'png'}"


def image_to_data_uri(path: str | Path, mime_type: str | None = None) -> str:
    """Read an image file and return it as a base64 `data:` URI for `add_image`."""

    src = Path(path)
    payload = base64.b64encode(src.read_bytes()).decode("ascii")
    mime = mime_type or detect_mime_type(src)
    LOGGER.debug("encoded %s as %s (%d base64 chars)", src, mime, len(payload))
    return f"data:{mime};base64,{payload}"


def image_size(path: str | Path) -> tuple[int, int]:
    with Image.open(Path(path)) as img:
        return img.size
