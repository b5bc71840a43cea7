"""
Tileset descriptor model for the exported atlas.

The descriptor follows the Tiled editor's external tileset JSON format,
so the exported pair can be dropped straight into a Tiled project or
any engine that reads it. Field order matches the files Tiled writes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from atlas_composer.constants import (
    TILED_VERSION,
    TILESET_FORMAT_VERSION,
    TILESET_MARGIN,
    TILESET_TYPE,
)
from atlas_composer.image_grid.naming import texture_filename, tileset_name

if TYPE_CHECKING:  # pragma: no cover
    from atlas_composer.image_grid.layouts import GridLayout


class TilesetDescriptor(BaseModel):
    """Grid and tile metadata describing an exported texture."""

    model_config = ConfigDict(frozen=True)

    columns: int
    image: str
    imageheight: int
    imagewidth: int
    margin: int = TILESET_MARGIN
    name: str
    spacing: int
    tilecount: int = Field(ge=0)
    tiledversion: str = TILED_VERSION
    tileheight: int
    tilewidth: int
    type: Literal["tileset"] = TILESET_TYPE
    version: str = TILESET_FORMAT_VERSION


def build_descriptor(
    layout: GridLayout,
    base_name: str,
) -> TilesetDescriptor:
    """Describe the composite that ``layout`` produces under ``base_name``."""
    image_width, image_height = layout.canvas_size
    return TilesetDescriptor(
        columns=layout.params.columns,
        image=texture_filename(base_name),
        imageheight=image_height,
        imagewidth=image_width,
        name=tileset_name(base_name),
        spacing=layout.params.spacing,
        tilecount=layout.count,
        tileheight=layout.cell.height,
        tilewidth=layout.cell.width,
    )


def descriptor_to_json(descriptor: TilesetDescriptor) -> str:
    """Serialize compactly, keys in declaration order."""
    return descriptor.model_dump_json()
