"""Core primitives for uniform grid layouts and raster blitting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from PIL import Image

from atlas_composer.constants import COLOR_MODE_RGBA, COLOR_TRANSPARENT

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable


@dataclass(frozen=True)
class Size:
    """Width and height in pixels."""

    width: int = 0
    height: int = 0

    def union(self, other: Size) -> Size:
        """Return the component-wise maximum of both sizes."""
        return Size(max(self.width, other.width),
                    max(self.height, other.height))

    def as_tuple(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height


EMPTY_SIZE = Size(0, 0)


@dataclass(frozen=True)
class Rect:
    """Simple rectangle with convenience accessors."""

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def w(self) -> int:
        """Width."""
        return self.x1 - self.x0

    @property
    def h(self) -> int:
        """Height."""
        return self.y1 - self.y0

    @property
    def origin(self) -> tuple[int, int]:
        """Top left corner as (x, y)."""
        return self.x0, self.y0

    def size(self) -> tuple[int, int]:
        """Return (w, h)."""
        return self.w, self.h


def cell_size_for(
    sizes: Iterable[tuple[int, int]],
    start: Size = EMPTY_SIZE,
) -> Size:
    """
    Return the cumulative maximum width and height over ``sizes``.

    ``start`` seeds the maximum so a running cell size can be grown
    batch by batch without revisiting earlier images.
    """
    cell = start
    for width, height in sizes:
        cell = cell.union(Size(width, height))
    return cell


def grid_position(index: int, columns: int) -> tuple[int, int]:
    """Return (row, col) for the item at ``index`` in a row-major grid."""
    if columns <= 0:
        msg = f"columns must be positive, got {columns}"
        raise ValueError(msg)
    return index // columns, index % columns


def row_count(count: int, columns: int) -> int:
    """Return the number of rows needed to hold ``count`` items."""
    if columns <= 0:
        msg = f"columns must be positive, got {columns}"
        raise ValueError(msg)
    return math.ceil(count / columns)


def to_rgba(img: Image.Image) -> Image.Image:
    """Convert PIL image to RGBA, keeping any existing transparency."""
    if img.mode == COLOR_MODE_RGBA:
        return img
    return img.convert(COLOR_MODE_RGBA)


def new_canvas(size: tuple[int, int]) -> Image.Image:
    """Allocate a fully transparent RGBA canvas."""
    return Image.new(COLOR_MODE_RGBA, size, COLOR_TRANSPARENT)


def clear_canvas(canvas: Image.Image) -> None:
    """Reset every pixel of ``canvas`` to fully transparent."""
    if canvas.width == 0 or canvas.height == 0:
        return
    canvas.paste(COLOR_TRANSPARENT, (0, 0, *canvas.size))


def blit(canvas: Image.Image, img: Image.Image, xy: tuple[int, int]) -> None:
    """
    Copy ``img`` onto ``canvas`` at ``xy`` without blending.

    Pixels, alpha included, overwrite whatever the canvas held.
    """
    canvas.paste(to_rgba(img), xy)
