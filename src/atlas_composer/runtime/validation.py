"""Input validation helpers for runtime configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from atlas_composer.type_defs import StrPath


def validate_input_paths(paths: Sequence[StrPath]) -> None:
    """Ensure at least one path was given and every path is a file."""
    if not paths:
        msg = "No input images provided"
        raise ValueError(msg)
    for path in paths:
        if not Path(path).is_file():
            msg = f"Input image not found: {path}"
            raise FileNotFoundError(msg)


def validate_base_name(name: str) -> None:
    """Reject base names that are empty or would escape the directory."""
    if not name.strip():
        msg = "Base name must not be empty"
        raise ValueError(msg)
    separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
    if any(sep in name for sep in separators):
        msg = f"Base name must not contain a path separator: {name!r}"
        raise ValueError(msg)
