"""Uniform grid layout computation and tileset composition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from atlas_composer.config_defaults import DEFAULT_COLUMNS, DEFAULT_SPACING
from atlas_composer.image_grid.core import (
    Rect,
    Size,
    blit,
    cell_size_for,
    clear_canvas,
    grid_position,
    new_canvas,
    row_count,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image


@dataclass(frozen=True)
class GridParams:
    """Parameters for the grid layout."""

    spacing: int = DEFAULT_SPACING
    columns: int = DEFAULT_COLUMNS


@dataclass(frozen=True)
class Placement:
    """Where a single image lands on the composite canvas."""

    index: int
    row: int
    col: int
    rect: Rect


@dataclass(frozen=True)
class GridLayout:
    """Result of laying out an ordered image set on a uniform grid."""

    cell: Size
    params: GridParams
    rows: int
    placements: tuple[Placement, ...]

    @property
    def count(self) -> int:
        """Number of placed images."""
        return len(self.placements)

    @property
    def pitch(self) -> tuple[int, int]:
        """Horizontal and vertical distance between cell origins."""
        return (self.cell.width + self.params.spacing,
                self.cell.height + self.params.spacing)

    @property
    def canvas_size(self) -> tuple[int, int]:
        """Composite size; an empty layout collapses to (0, 0)."""
        if not self.placements:
            return 0, 0
        pitch_x, pitch_y = self.pitch
        return self.params.columns * pitch_x, self.rows * pitch_y


def compute_grid_layout(
    sizes: Sequence[tuple[int, int]],
    params: GridParams,
    *,
    cell: Size | None = None,
) -> GridLayout:
    """
    Place items row-major in insertion order on a uniform grid.

    The cell defaults to the largest width and height in ``sizes``.
    Items shorter than the cell are bottom-aligned within it.
    """
    effective_cell = cell if cell is not None else cell_size_for(sizes)
    rows = row_count(len(sizes), params.columns)
    pitch_x = effective_cell.width + params.spacing
    pitch_y = effective_cell.height + params.spacing

    placements: list[Placement] = []
    for index, (width, height) in enumerate(sizes):
        row, col = grid_position(index, params.columns)
        x = col * pitch_x
        y = row * pitch_y + (effective_cell.height - height)
        placements.append(
            Placement(index, row, col, Rect(x, y, x + width, y + height)),
        )

    return GridLayout(
        cell=effective_cell,
        params=params,
        rows=rows,
        placements=tuple(placements),
    )


def compose_onto(
    canvas: Image.Image,
    images: Sequence[Image.Image],
    layout: GridLayout,
) -> None:
    """Clear ``canvas`` and blit every image at its placement."""
    if len(images) != layout.count:
        msg = (f"Layout holds {layout.count} placements but "
               f"{len(images)} images were given")
        raise ValueError(msg)

    clear_canvas(canvas)
    for img, placement in zip(images, layout.placements, strict=True):
        blit(canvas, img, placement.rect.origin)


def make_tileset_grid(
    images: Sequence[Image.Image],
    params: GridParams,
    *,
    cell: Size | None = None,
) -> tuple[Image.Image, GridLayout]:
    """
    Build a transparent RGBA composite of ``images`` on a uniform grid.

    Returns the canvas together with the layout used to draw it, so
    callers can derive the tileset descriptor from the same numbers.
    """
    layout = compute_grid_layout(
        [im.size for im in images], params, cell=cell,
    )
    canvas = new_canvas(layout.canvas_size)
    compose_onto(canvas, images, layout)
    return canvas, layout
