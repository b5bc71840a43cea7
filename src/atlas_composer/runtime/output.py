"""Helpers for managing output locations and writing artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from atlas_composer.constants import FALLBACK_OUTPUT_DIR
from atlas_composer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable


def setup_output_directory(
    output_path: str,
    path_factory: Callable[[str], Path] = Path,
) -> Path:
    """
    Create the output directory if needed and return its path.

    Falls back to ``atlas_composer_output`` when the desired directory
    cannot be created so an export is not lost.
    """
    resolved_path = path_factory(output_path)
    try:
        resolved_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create output directory: %s", exc)
        fallback_path = path_factory(FALLBACK_OUTPUT_DIR)
        fallback_path.mkdir(parents=True, exist_ok=True)
        logger.info("Using fallback directory: %s", fallback_path)
        return fallback_path
    return resolved_path


def write_bytes(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path``, replacing any existing file."""
    path.write_bytes(data)
