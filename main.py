"""Command line entry point for the BMP encoder."""

from __future__ import annotations

from bmp_encoder.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
