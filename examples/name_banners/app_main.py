from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

from svg_layer import LayerOptions, SvgLayer


@dataclass(frozen=True)
class BannerStyle:
    font_size: float = 16
    bold: bool = False
    font_color: str = "#000"
    background: str = "#d9d9d9 70%"
    padding: tuple[float, float] = (7, 10)
    radius: float = 3


def build_name_banners(
    layer: SvgLayer,
    podium: Sequence[Mapping[str, Any]],
    participants: Mapping[str, Mapping[str, Any]],
    style: BannerStyle | None = None,
) -> int:
    """Rebuild `layer` with one name banner at the bottom-left of each podium spot.

    Spots without a user, or whose user is not yet known, are skipped.
    """

    cfg = style or BannerStyle()
    layer.clear()
    added = 0
    for spot in podium:
        user_id = spot.get("user_id")
        if not user_id or user_id not in participants:
            continue
        layer.add_text_box(
            str(participants[user_id]["name"]),
            cfg.font_size,
            cfg.bold,
            cfg.font_color,
            spot["left"],
            spot["top"] + spot["height"],
            cfg.background,
            origin="bottom left",
            padding=list(cfg.padding),
            max_width=spot["width"],
            radius=cfg.radius,
        )
        added += 1
    return added


SAMPLE_PODIUM = (
    {"user_id": "u1", "left": 0, "top": 0, "width": 640, "height": 360},
    {"user_id": "u2", "left": 640, "top": 0, "width": 640, "height": 360},
    {"user_id": None, "left": 0, "top": 360, "width": 640, "height": 360},
    {"user_id": "u3", "left": 640, "top": 360, "width": 640, "height": 360},
)
SAMPLE_PARTICIPANTS = {
    "u1": {"name": "Martin"},
    "u2": {"name": "Elisa"},
    "u3": {"name": "Customer"},
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Render podium name banners to an SVG file.")
    parser.add_argument("out", type=Path)
    args = parser.parse_args()
    layer = SvgLayer(LayerOptions(widescreen=True))
    build_name_banners(layer, SAMPLE_PODIUM, SAMPLE_PARTICIPANTS)
    layer.write_file(args.out)


if __name__ == "__main__":
    main()
