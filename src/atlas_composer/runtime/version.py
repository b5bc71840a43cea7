"""Helpers for accessing the installed package version."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from atlas_composer.logging_utils import logger

DISTRIBUTION_NAMES = ("atlas-composer", "atlas_composer")
UNKNOWN_VERSION = "0.0.0"


def _installed_version() -> str | None:
    """Return the version recorded in installed package metadata."""
    for name in DISTRIBUTION_NAMES:
        try:
            return importlib_metadata.version(name)
        except importlib_metadata.PackageNotFoundError:
            continue
    return None


def _pyproject_version(start: Path) -> str | None:
    """Return ``project.version`` from the nearest pyproject.toml above."""
    for parent in start.resolve().parents:
        candidate = parent / "pyproject.toml"
        if not candidate.is_file():
            continue
        try:
            with candidate.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Error reading %s: %s", candidate, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        return None
    return None


def resolve_project_version(start: Path | None = None) -> str:
    """
    Return the best-guess project version.

    Installed metadata wins; a source checkout falls back to its
    pyproject.toml, and anything else reports "0.0.0".
    """
    return (
        _installed_version()
        or _pyproject_version(start or Path(__file__))
        or UNKNOWN_VERSION
    )
