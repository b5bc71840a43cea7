# tests/test_image_grid.py
"""
Tests for the image_grid package covering layout and composition.

The suite focuses on public entry points: cell sizing, grid placement,
canvas dimensions, and pixel-level checks of the composed texture.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from PIL import Image

from atlas_composer.constants import COLOR_TRANSPARENT
from atlas_composer.image_grid import (
    core as ig_core,
    layouts as ig_layouts,
)

if TYPE_CHECKING:
    from collections.abc import Callable

pytestmark = pytest.mark.visual

TILE = 32
SPACING = 2
COLUMNS = 3


# -----------
# Primitives
# -----------

def test_size_union_and_cumulative_cell() -> None:
    """Cell size is the running maximum of widths and heights."""
    assert ig_core.Size(3, 9).union(ig_core.Size(7, 2)) == ig_core.Size(7, 9)

    first = ig_core.cell_size_for([(10, 4), (6, 12)])
    assert first == ig_core.Size(10, 12)

    # A later batch of smaller images never shrinks the cell.
    second = ig_core.cell_size_for([(2, 2)], first)
    assert second == first

    grown = ig_core.cell_size_for([(20, 1)], first)
    assert grown == ig_core.Size(20, 12)

    assert ig_core.cell_size_for([]) == ig_core.EMPTY_SIZE


@pytest.mark.parametrize(
    ("index", "columns", "expected"),
    [
        (0, 3, (0, 0)),
        (2, 3, (0, 2)),
        (3, 3, (1, 0)),
        (7, 3, (2, 1)),
        (4, 1, (4, 0)),
    ],
)
def test_grid_position_row_major(
    index: int,
    columns: int,
    expected: tuple[int, int],
) -> None:
    """Row is index // columns and col is index % columns."""
    assert ig_core.grid_position(index, columns) == expected


def test_grid_position_and_row_count_reject_zero_columns() -> None:
    """Non-positive column counts raise instead of dividing by zero."""
    with pytest.raises(ValueError, match="columns must be positive"):
        ig_core.grid_position(0, 0)
    with pytest.raises(ValueError, match="columns must be positive"):
        ig_core.row_count(3, -1)


def test_row_count_rounds_up() -> None:
    """Partial rows still count as a full row."""
    assert ig_core.row_count(0, 4) == 0
    assert ig_core.row_count(4, 4) == 1
    assert ig_core.row_count(5, 4) == 2


def test_rect_accessors() -> None:
    """Rect reports width, height, size and origin."""
    r = ig_core.Rect(1, 2, 6, 9)
    assert (r.w, r.h) == (5, 7)
    assert r.size() == (5, 7)
    assert r.origin == (1, 2)


def test_to_rgba_conversions() -> None:
    """RGBA passes through; other modes are converted."""
    rgba = Image.new("RGBA", (2, 2))
    assert ig_core.to_rgba(rgba) is rgba

    for mode in ("RGB", "L", "LA", "P"):
        converted = ig_core.to_rgba(Image.new(mode, (2, 2)))
        assert converted.mode == "RGBA"


def test_blit_overwrites_without_blending(
    make_rgba: Callable[..., Image.Image],
) -> None:
    """A half transparent source replaces the destination pixel as is."""
    canvas = make_rgba(4, 4, (0, 0, 255, 255))
    ig_core.blit(canvas, make_rgba(2, 2, (255, 0, 0, 128)), (1, 1))
    assert canvas.getpixel((1, 1)) == (255, 0, 0, 128)
    assert canvas.getpixel((0, 0)) == (0, 0, 255, 255)


def test_clear_canvas_handles_empty_and_full(
    make_rgba: Callable[..., Image.Image],
) -> None:
    """Clearing resets pixels and tolerates a zero-area canvas."""
    canvas = make_rgba(3, 3)
    ig_core.clear_canvas(canvas)
    assert canvas.getpixel((2, 2)) == COLOR_TRANSPARENT

    empty = ig_core.new_canvas((0, 0))
    ig_core.clear_canvas(empty)
    assert empty.size == (0, 0)


# -------
# Layout
# -------

def test_uniform_tiles_canvas_size() -> None:
    """Six 32x32 tiles over three columns with spacing 2 give 102x68."""
    layout = ig_layouts.compute_grid_layout(
        [(TILE, TILE)] * 6,
        ig_layouts.GridParams(spacing=SPACING, columns=COLUMNS),
    )
    assert layout.cell == ig_core.Size(TILE, TILE)
    assert layout.rows == 2
    assert layout.canvas_size == (102, 68)
    assert layout.pitch == (TILE + SPACING, TILE + SPACING)


def test_placements_follow_insertion_order() -> None:
    """Placement index i lands at row i // C, col i % C."""
    sizes = [(10, 10)] * 7
    layout = ig_layouts.compute_grid_layout(
        sizes, ig_layouts.GridParams(spacing=1, columns=3),
    )
    for i, placement in enumerate(layout.placements):
        assert placement.index == i
        assert (placement.row, placement.col) == (i // 3, i % 3)
        assert placement.rect.x0 == placement.col * 11
    assert layout.canvas_size == (33, 33)


def test_shorter_images_are_bottom_aligned() -> None:
    """A 20px image in a 40px cell is drawn 20px below the cell top."""
    layout = ig_layouts.compute_grid_layout(
        [(16, 20), (16, 40)],
        ig_layouts.GridParams(spacing=0, columns=2),
    )
    short, tall = layout.placements
    assert layout.cell.height == 40
    assert short.rect.origin == (0, 20)
    assert short.rect.y1 == 40
    assert tall.rect.origin == (16, 0)


def test_second_row_offset_includes_spacing_and_alignment() -> None:
    """Row offset stacks pitch with the bottom-align offset."""
    layout = ig_layouts.compute_grid_layout(
        [(8, 8), (8, 4), (8, 2)],
        ig_layouts.GridParams(spacing=3, columns=2),
    )
    third = layout.placements[2]
    assert (third.row, third.col) == (1, 0)
    assert third.rect.origin == (0, 1 * (8 + 3) + (8 - 2))


def test_explicit_cell_overrides_measured_maximum() -> None:
    """A fixed cell size is used even when images are smaller."""
    layout = ig_layouts.compute_grid_layout(
        [(4, 4)],
        ig_layouts.GridParams(spacing=0, columns=2),
        cell=ig_core.Size(10, 6),
    )
    assert layout.cell == ig_core.Size(10, 6)
    assert layout.canvas_size == (20, 6)
    assert layout.placements[0].rect.origin == (0, 2)


def test_empty_layout_is_zero_by_zero() -> None:
    """No images: the canvas collapses to 0x0 and nothing raises."""
    layout = ig_layouts.compute_grid_layout(
        [], ig_layouts.GridParams(spacing=4, columns=5),
    )
    assert layout.count == 0
    assert layout.rows == 0
    assert layout.cell == ig_core.EMPTY_SIZE
    assert layout.canvas_size == (0, 0)


# ------------
# Composition
# ------------

def test_make_tileset_grid_pixels(
    make_rgba: Callable[..., Image.Image],
) -> None:
    """Images appear at their placements; gaps stay transparent."""
    red = make_rgba(4, 4, (255, 0, 0, 255))
    green = make_rgba(4, 2, (0, 255, 0, 255))
    canvas, layout = ig_layouts.make_tileset_grid(
        [red, green],
        ig_layouts.GridParams(spacing=1, columns=2),
    )
    assert canvas.mode == "RGBA"
    assert canvas.size == layout.canvas_size == (10, 5)

    assert canvas.getpixel((0, 0)) == (255, 0, 0, 255)
    # Spacing column between the two cells is untouched.
    assert canvas.getpixel((4, 0)) == COLOR_TRANSPARENT
    # Green is bottom-aligned in its 4px tall cell.
    assert canvas.getpixel((5, 1)) == COLOR_TRANSPARENT
    assert canvas.getpixel((5, 2)) == (0, 255, 0, 255)
    assert canvas.getpixel((8, 3)) == (0, 255, 0, 255)


def test_make_tileset_grid_keeps_transparency(
    make_rgba: Callable[..., Image.Image],
) -> None:
    """Per-pixel alpha of source images survives composition."""
    sprite = make_rgba(3, 3, (0, 0, 0, 0))
    sprite.putpixel((1, 1), (10, 20, 30, 200))
    canvas, _ = ig_layouts.make_tileset_grid(
        [sprite], ig_layouts.GridParams(spacing=0, columns=1),
    )
    assert canvas.getpixel((0, 0)) == COLOR_TRANSPARENT
    assert canvas.getpixel((1, 1)) == (10, 20, 30, 200)


def test_compose_onto_clears_previous_content(
    make_rgba: Callable[..., Image.Image],
) -> None:
    """Re-rendering wipes stale pixels from an earlier layout."""
    layout = ig_layouts.compute_grid_layout(
        [(2, 2)], ig_layouts.GridParams(spacing=0, columns=2),
    )
    canvas = make_rgba(*layout.canvas_size, (9, 9, 9, 255))
    ig_layouts.compose_onto(canvas, [make_rgba(2, 2)], layout)
    assert canvas.getpixel((0, 0)) == (255, 0, 0, 255)
    assert canvas.getpixel((3, 1)) == COLOR_TRANSPARENT


def test_compose_onto_rejects_mismatched_counts(
    make_rgba: Callable[..., Image.Image],
) -> None:
    """Images and placements must pair up one to one."""
    layout = ig_layouts.compute_grid_layout(
        [(2, 2), (2, 2)], ig_layouts.GridParams(spacing=0, columns=2),
    )
    with pytest.raises(ValueError, match="2 placements but 1 images"):
        ig_layouts.compose_onto(
            make_rgba(4, 2), [make_rgba(2, 2)], layout,
        )


def test_make_tileset_grid_empty() -> None:
    """Composing nothing yields a 0x0 canvas without raising."""
    canvas, layout = ig_layouts.make_tileset_grid(
        [], ig_layouts.GridParams(spacing=3, columns=4),
    )
    assert canvas.size == (0, 0)
    assert layout.count == 0
