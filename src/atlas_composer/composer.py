"""
Session state for composing a tileset from a growing set of images.

The composer owns the ordered working set, the running cell size and
the layout parameters. Every derived artifact (layout, composite,
descriptor) is rebuilt from scratch on request.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import atlas_composer.image_io as ac_image_io
from atlas_composer.config_defaults import DEFAULT_BASE_NAME
from atlas_composer.image_grid import (
    EMPTY_SIZE,
    GridParams,
    Size,
    cell_size_for,
    compose_onto,
    compute_grid_layout,
)
from atlas_composer.image_grid.core import new_canvas
from atlas_composer.logging_utils import logger
from atlas_composer.tileset import TilesetDescriptor, build_descriptor

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence

    from PIL import Image

    from atlas_composer.config import ComposerConfig
    from atlas_composer.image_grid import GridLayout
    from atlas_composer.image_io import DecodeResult
    from atlas_composer.type_defs import LoadedImage, StrPath


class AtlasComposer:
    """Ordered image set plus the parameters that lay it out."""

    def __init__(
        self,
        params: GridParams | None = None,
        base_name: str = DEFAULT_BASE_NAME,
    ) -> None:
        self.params = params or GridParams()
        self.base_name = base_name
        self._images: list[LoadedImage] = []
        self._cell = EMPTY_SIZE

    @classmethod
    def from_config(cls, config: ComposerConfig) -> AtlasComposer:
        """Build a composer whose layout and name come from ``config``."""
        composer = cls(
            GridParams(
                spacing=config.layout.spacing,
                columns=config.layout.columns,
            ),
            base_name=config.output.name,
        )
        composer.set_cell_size(
            width=config.layout.tile_width,
            height=config.layout.tile_height,
        )
        return composer

    @property
    def images(self) -> tuple[LoadedImage, ...]:
        """Working set in insertion order."""
        return tuple(self._images)

    @property
    def cell_size(self) -> Size:
        """Current cell size; grows as images are added."""
        return self._cell

    def __len__(self) -> int:
        return len(self._images)

    def add_images(
        self,
        paths: Sequence[StrPath],
        *,
        max_workers: int | None = None,
    ) -> DecodeResult:
        """Decode ``paths`` as one batch and append what decoded."""
        result = ac_image_io.decode_images(paths, max_workers=max_workers)
        self.add_loaded(result.images)
        return result

    def add_loaded(self, images: Iterable[LoadedImage]) -> None:
        """Append already decoded images and grow the cell size."""
        batch = list(images)
        self._images.extend(batch)
        self._cell = cell_size_for((item.size for item in batch), self._cell)
        logger.debug(
            "Working set holds %d images, cell %dx%d",
            len(self._images), self._cell.width, self._cell.height,
        )

    def clear(self) -> None:
        """Drop every image and reset the cell size to (0, 0)."""
        self._images.clear()
        self._cell = EMPTY_SIZE

    def set_layout(
        self,
        *,
        spacing: int | None = None,
        columns: int | None = None,
    ) -> GridParams:
        """Replace spacing and/or column count; returns the new params."""
        changes: dict[str, int] = {}
        if spacing is not None:
            changes["spacing"] = spacing
        if columns is not None:
            changes["columns"] = columns
        self.params = replace(self.params, **changes)
        return self.params

    def set_cell_size(
        self,
        *,
        width: int | None = None,
        height: int | None = None,
    ) -> Size:
        """Override one or both cell dimensions."""
        self._cell = Size(
            self._cell.width if width is None else width,
            self._cell.height if height is None else height,
        )
        return self._cell

    def layout(self) -> GridLayout:
        """Lay out the current working set."""
        return compute_grid_layout(
            [item.size for item in self._images],
            self.params,
            cell=self._cell,
        )

    def render(self, canvas: Image.Image | None = None) -> Image.Image:
        """
        Draw the working set into a fresh or supplied canvas.

        A supplied canvas must already match the layout's canvas size;
        it is cleared before drawing.
        """
        layout = self.layout()
        if canvas is None:
            canvas = new_canvas(layout.canvas_size)
        elif canvas.size != layout.canvas_size:
            msg = (f"Canvas is {canvas.size[0]}x{canvas.size[1]}, layout "
                   f"needs {layout.canvas_size[0]}x{layout.canvas_size[1]}")
            raise ValueError(msg)
        compose_onto(canvas, [item.image for item in self._images], layout)
        return canvas

    def descriptor(self) -> TilesetDescriptor:
        """Describe the composite ``render`` would currently produce."""
        return build_descriptor(self.layout(), self.base_name)
