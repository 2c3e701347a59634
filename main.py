from __future__ import annotations

import argparse
import logging
from pathlib import Path

from svg_layer import LayerOptions, SvgLayer, measure_text, wrap_lines
from svg_layer.assets import image_size, image_to_data_uri


def _build_image_layer(image: Path, options: LayerOptions) -> SvgLayer:
    layer = SvgLayer(options)
    width, height = image_size(image)
    layer.add_image(
        image_to_data_uri(image),
        (layer.width - width) / 2,
        (layer.height - height) / 2,
        width,
        height,
    )
    return layer


def main() -> None:
    parser = argparse.ArgumentParser(prog="svg-layer")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("render-demo", help="Write the agenda demo overlay to an SVG file.")
    demo.add_argument("out", type=Path)
    demo.add_argument("--standard", action="store_true", help="Use the 1280x960 canvas.")

    image = sub.add_parser("render-image", help="Write an overlay that centers one image file.")
    image.add_argument("image", type=Path)
    image.add_argument("out", type=Path)
    image.add_argument("--standard", action="store_true", help="Use the 1280x960 canvas.")

    uri = sub.add_parser("image-uri", help="Print an image file as a base64 data URI.")
    uri.add_argument("image", type=Path)
    uri.add_argument("--mime", default=None, help="Override the detected MIME type.")

    measure = sub.add_parser("measure", help="Print the approximate pixel width of a text.")
    measure.add_argument("text")
    measure.add_argument("--font-size", type=float, required=True)
    measure.add_argument("--bold", action="store_true")

    wrap = sub.add_parser("wrap", help="Print a text wrapped to a pixel width.")
    wrap.add_argument("text")
    wrap.add_argument("--width", type=float, required=True)
    wrap.add_argument("--font-size", type=float, required=True)
    wrap.add_argument("--bold", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "render-demo":
        from examples.agenda_overlay.app_main import build_overlay

        out = build_overlay(LayerOptions(widescreen=not args.standard)).write_file(args.out)
        print(out)
    elif args.command == "render-image":
        layer = _build_image_layer(args.image, LayerOptions(widescreen=not args.standard))
        print(layer.write_file(args.out))
    elif args.command == "image-uri":
        print(image_to_data_uri(args.image, args.mime))
    elif args.command == "measure":
        print(f"{measure_text(args.text, args.font_size, args.bold):.2f}")
    elif args.command == "wrap":
        for line in wrap_lines(args.text.replace("\\n", "\n"), args.width, args.font_size, args.bold):
            print(line)


if __name__ == "__main__":
    main()
