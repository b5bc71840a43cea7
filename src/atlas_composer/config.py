"""
Configuration schema and loader for the atlas composer.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from atlas_composer.config_defaults import (
    DEFAULT_BASE_NAME,
    DEFAULT_COLUMNS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PREVIEW,
    DEFAULT_SPACING,
)


class LayoutConfig(BaseModel):
    """Control grid spacing, columns and optional fixed cell size."""

    spacing: int = Field(DEFAULT_SPACING, ge=0)
    columns: int = Field(DEFAULT_COLUMNS, ge=1)
    tile_width: int | None = Field(None, ge=0)
    tile_height: int | None = Field(None, ge=0)


class OutputConfig(BaseModel):
    """Configure export base name, directory and preview."""

    name: str = Field(DEFAULT_BASE_NAME, min_length=1)
    directory: str = Field(DEFAULT_OUTPUT_DIR)
    preview: bool = DEFAULT_PREVIEW


class ComposerConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    # model_validate({}) lets Pydantic populate every Field default.
    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> ComposerConfig:
        """
        Load a composer configuration from a TOML file.

        Returns a validated ComposerConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return ComposerConfig.model_validate(doc.unwrap())


# CLI destination -> (section, field)
_CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "spacing": ("layout", "spacing"),
    "columns": ("layout", "columns"),
    "tile_width": ("layout", "tile_width"),
    "tile_height": ("layout", "tile_height"),
    "name": ("output", "name"),
    "output": ("output", "directory"),
    "preview": ("output", "preview"),
}


def build_config_from_cli(
    args: Mapping[str, Any],
    base_config: ComposerConfig | None = None,
) -> ComposerConfig:
    """
    Merge parsed CLI values over ``base_config`` and revalidate.

    Keys that are missing or ``None`` leave the base value untouched,
    so argparse options declared with ``argparse.SUPPRESS`` or a
    ``None`` default never clobber values from a config file.
    """
    base = base_config or ComposerConfig()
    data = base.model_dump()
    for key, (section, field_name) in _CLI_FIELD_MAP.items():
        value = args.get(key)
        if value is None:
            continue
        data[section][field_name] = value
    return ComposerConfig.model_validate(data)
