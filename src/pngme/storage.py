"""File persistence helpers for pngme."""

from __future__ import annotations

from pathlib import Path

from .png import Png


def load_png(path: str | Path) -> Png:
    return Png.parse(Path(path).read_bytes())


def save_png(png: Png, path: str | Path) -> None:
    Path(path).write_bytes(png.as_bytes())


__all__ = ["load_png", "save_png"]
