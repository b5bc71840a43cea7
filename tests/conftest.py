"""
Test configuration and shared fixtures for atlas_composer.

This module defines reusable pytest fixtures for image generation,
config construction, and on-disk sample files. These fixtures support
all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from atlas_composer.config import ComposerConfig
from atlas_composer.constants import COLOR_MODE_RGBA
from atlas_composer.logging_utils import logger
from atlas_composer.type_defs import LoadedImage


@pytest.fixture
def make_rgba() -> Callable[..., Image.Image]:
    """Factory for solid RGBA images of arbitrary size and color."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, int, int, int] = (255, 0, 0, 255),
    ) -> Image.Image:
        return Image.new(COLOR_MODE_RGBA, (width, height), color)

    return _make


@pytest.fixture
def make_loaded(
    make_rgba: Callable[..., Image.Image],
) -> Callable[..., LoadedImage]:
    """Factory for LoadedImage values backed by in-memory bitmaps."""

    def _make(
        width: int,
        height: int,
        name: str = "tile.png",
        color: tuple[int, int, int, int] = (255, 0, 0, 255),
    ) -> LoadedImage:
        return LoadedImage(Path(name), make_rgba(width, height, color))

    return _make


@pytest.fixture
def write_images(tmp_path: Path) -> Callable[..., list[Path]]:
    """Save solid images to disk and return their paths in order."""

    def _write(
        sizes: list[tuple[int, int]],
        *,
        prefix: str = "tile",
        subdir: str = "inputs",
    ) -> list[Path]:
        target = tmp_path / subdir
        target.mkdir(parents=True, exist_ok=True)
        paths: list[Path] = []
        for index, (width, height) in enumerate(sizes):
            path = target / f"{prefix}_{index:02d}.png"
            shade = (index * 40) % 256
            Image.new(
                COLOR_MODE_RGBA, (width, height), (shade, 0, 255, 255),
            ).save(path)
            paths.append(path)
        return paths

    return _write


@pytest.fixture
def make_composer_config() -> Callable[..., ComposerConfig]:
    """Build ComposerConfig instances with optional section overrides."""

    def _build(
        *,
        layout: dict[str, Any] | None = None,
        output: dict[str, Any] | None = None,
    ) -> ComposerConfig:
        data: dict[str, Any] = {}
        if layout:
            data["layout"] = dict(layout)
        if output:
            data["output"] = dict(output)
        return ComposerConfig.model_validate(data)

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for composer logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
