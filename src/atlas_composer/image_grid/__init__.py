"""
Uniform grid layout split into core primitives, layouts, and naming.

The package exposes the most commonly used entry points directly so
callers rarely need to reach into the submodules.
"""

from __future__ import annotations

from . import core, layouts, naming
from .core import (
    EMPTY_SIZE,
    Rect,
    Size,
    blit,
    cell_size_for,
    grid_position,
    row_count,
    to_rgba,
)
from .layouts import (
    GridLayout,
    GridParams,
    Placement,
    compose_onto,
    compute_grid_layout,
    make_tileset_grid,
)
from .naming import (
    atlas_output_paths,
    texture_filename,
    tileset_filename,
    tileset_name,
)

__all__ = [
    "EMPTY_SIZE",
    "GridLayout",
    "GridParams",
    "Placement",
    "Rect",
    "Size",
    "atlas_output_paths",
    "blit",
    "cell_size_for",
    "compose_onto",
    "compute_grid_layout",
    "core",
    "grid_position",
    "layouts",
    "make_tileset_grid",
    "naming",
    "row_count",
    "texture_filename",
    "tileset_filename",
    "tileset_name",
    "to_rgba",
]
