"""Filename helpers for the exported texture and tileset files."""

from __future__ import annotations

from pathlib import Path

from atlas_composer.constants import (
    TEXTURE_SUFFIX,
    TILESET_NAME_SUFFIX,
    TILESET_SUFFIX,
)


def texture_filename(base_name: str) -> str:
    """Return the composite image filename, e.g. ``tileset_texture.png``."""
    return f"{base_name}{TEXTURE_SUFFIX}"


def tileset_filename(base_name: str) -> str:
    """Return the descriptor filename, e.g. ``tileset_tileset.json``."""
    return f"{base_name}{TILESET_SUFFIX}"


def tileset_name(base_name: str) -> str:
    """Return the ``name`` field written into the descriptor."""
    return f"{base_name}{TILESET_NAME_SUFFIX}"


def atlas_output_paths(
    base_name: str,
    directory: Path | str,
) -> tuple[Path, Path]:
    """Return the (texture, tileset) paths inside ``directory``."""
    out_dir = Path(directory)
    return (
        out_dir / texture_filename(base_name),
        out_dir / tileset_filename(base_name),
    )
