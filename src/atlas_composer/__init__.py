"""Public package exports for the atlas composer."""

from __future__ import annotations

from .composer import AtlasComposer
from .image_grid import GridLayout, GridParams, Size, make_tileset_grid
from .runtime import ExportReport, Notification, export_atlas
from .tileset import TilesetDescriptor, build_descriptor, descriptor_to_json

__all__ = [
    "AtlasComposer",
    "ExportReport",
    "GridLayout",
    "GridParams",
    "Notification",
    "Size",
    "TilesetDescriptor",
    "build_descriptor",
    "descriptor_to_json",
    "export_atlas",
    "make_tileset_grid",
]
