from __future__ import annotations

import argparse
from pathlib import Path

from svg_layer import LayerOptions, SvgLayer


AGENDA_TEXT = "Agenda:\n \n- Test the overlay\n- Try gradients\n- One more thing…"


def build_background(options: LayerOptions | None = None) -> SvgLayer:
    """Quartered backdrop drawn below the video."""

    layer = SvgLayer(options)
    layer.add_rect(0, 0, layer.width, layer.height, "#8c0e0d")
    layer.add_rect_outline(0, 0, layer.width, layer.height, "#fff")
    layer.add_line(0, layer.height / 2, layer.width, layer.height / 2, "#fff")
    layer.add_line(layer.width / 2, 0, layer.width / 2, layer.height, "#fff")
    return layer


def build_overlay(options: LayerOptions | None = None) -> SvgLayer:
    layer = SvgLayer(options)
    font_size = 16
    for name, x, y in (
        ("Martin", layer.width / 2, layer.height / 2),
        ("Elisa", layer.width, layer.height / 2),
        ("Customer", layer.width / 2, layer.height),
    ):
        layer.add_text_box(name, font_size, True, "#fff", x, y, "#000 50%", origin="bottom right", padding=10, radius=4)

    gradient = layer.create_linear_gradient(90, "0% #777", "100% #555")
    shadow = layer.create_drop_shadow_filter(7, 2, 2, "#555 50%")
    layer.add_multiline_text_box(
        AGENDA_TEXT,
        font_size,
        True,
        "#fff",
        700,
        400,
        240,
        gradient,
        line_height=22,
        padding=20,
        radius=4,
        text_anchor="middle",
    ).set_filter(shadow, "box")
    return layer


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the agenda demo background and overlay.")
    parser.add_argument("out_dir", type=Path)
    parser.add_argument("--standard", action="store_true", help="4:3 canvas instead of 16:9.")
    args = parser.parse_args()
    options = LayerOptions(widescreen=not args.standard)
    args.out_dir.mkdir(parents=True, exist_ok=True)
    build_background(options).write_file(args.out_dir / "background.svg")
    build_overlay(options).write_file(args.out_dir / "overlay.svg")


if __name__ == "__main__":
    main()
