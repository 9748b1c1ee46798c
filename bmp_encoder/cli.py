"""Command line interface for the BMP encoder."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from PIL import Image as PILImage
from PIL import UnidentifiedImageError
from PIL.Image import DecompressionBombError

from .encoder import save_bitmap
from .errors import BmpError
from .image import Image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmp-encode",
        description="Convert an image to an uncompressed 24-bit BMP file",
    )
    parser.add_argument("input", type=Path, help="Path to any image Pillow can read")
    parser.add_argument("output", type=Path, help="Destination .bmp path")
    parser.add_argument(
        "--bottom-up",
        action="store_true",
        help="Store rows bottom-up with a positive height (default: top-down)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log encoder details",
    )
    return parser


def load_image(path: Path, *, bottom_up: bool = False) -> Image:
    with PILImage.open(path) as picture:
        return Image.from_pil(picture, top_down=not bottom_up)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        image = load_image(args.input, bottom_up=args.bottom_up)
        args.output.parent.mkdir(parents=True, exist_ok=True)
        save_bitmap(args.output, image)
    except (
        OSError,
        UnidentifiedImageError,
        DecompressionBombError,
        BmpError,
        ValueError,
    ) as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")

    logger.info(
        "Wrote %s (%dx%d, %s)",
        args.output,
        image.width,
        image.rows,
        "top-down" if image.top_down else "bottom-up",
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
